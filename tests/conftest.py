import pytest

pytest_plugins = ["profiles.plugin"]


@pytest.fixture
def dummy_headers():
    return {
        "Content-Type": "application/json",
        "X-Test": "1",
    }
