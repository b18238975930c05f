from config.loader import ConfigLoader
from config.preprocessor import (
    ConfigPreprocessor,
    ConfigValue,
    EnvironmentPreprocessor,
)
from config.settings import HarnessSettings

__all__ = [
    "ConfigLoader",
    "ConfigPreprocessor",
    "ConfigValue",
    "EnvironmentPreprocessor",
    "HarnessSettings",
]
