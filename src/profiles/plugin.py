"""
pytest plugin exposing the behavior-profile fixtures.

Enable it from a conftest module::

    pytest_plugins = ["profiles.plugin"]

The plugin imports pytest, which is not a runtime dependency of the package.
Install the ``plugin`` (or ``test``) extra to use it.

Fixture instances are class scoped: arranged once per test class and shared
by all of its tests.

``--mock-client-log-level LEVEL`` routes framework logs to stdout at the
given level and quiets the HTTP stack used by the application harness.
"""
import pytest

from core.logging import configure_logging, set_harness_logging_level
from profiles.fixtures import JsonClientFixture, SoapClientFixture


DEFAULT_TARGET = "https://test/index.html"
LOG_LEVEL_OPTION = "--mock-client-log-level"


def pytest_addoption(parser) -> None:
    group = parser.getgroup("mock-client")
    group.addoption(
        LOG_LEVEL_OPTION,
        action="store",
        default=None,
        dest="mock_client_log_level",
        help="Route mock client logs to stdout at this level (e.g. DEBUG).",
    )


def pytest_configure(config) -> None:
    level = config.getoption("mock_client_log_level", default=None)
    if level:
        configure_logging(level)
        set_harness_logging_level()


@pytest.fixture(scope="class")
def json_client_fixture() -> JsonClientFixture:
    return JsonClientFixture()


@pytest.fixture(scope="class")
def soap_client_fixture() -> SoapClientFixture:
    return SoapClientFixture()


@pytest.fixture
def target() -> str:
    return DEFAULT_TARGET


@pytest.fixture
def payload() -> dict:
    return {}
