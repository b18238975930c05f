from hosting.dependencies import get_configuration, get_environment
from hosting.harness import ApplicationHarness, HarnessContext
from hosting.transport import ApplicationTransport

__all__ = [
    "ApplicationHarness",
    "ApplicationTransport",
    "HarnessContext",
    "get_configuration",
    "get_environment",
]
