from core.abstract_factory import TypeAbstractFactory
from core.exceptions import (
    ConfigurationError,
    MockClientError,
    PayloadSerializationError,
    VerbConstructionError,
)
from core.logging import configure_logging, set_harness_logging_level

__all__ = [
    "TypeAbstractFactory",
    "ConfigurationError",
    "MockClientError",
    "PayloadSerializationError",
    "VerbConstructionError",
    "configure_logging",
    "set_harness_logging_level",
]
