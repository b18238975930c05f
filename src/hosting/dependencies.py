from typing import Any

from fastapi import Request

from config.settings import DEVELOPMENT


def get_configuration(request: Request) -> dict[str, Any]:
    """FastAPI dependency returning the configuration resolved by the harness."""
    return getattr(request.app.state, "configuration", {})


def get_environment(request: Request) -> str:
    """FastAPI dependency returning the hosting environment name."""
    return getattr(request.app.state, "environment", DEVELOPMENT)
