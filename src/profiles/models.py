from __future__ import annotations
from enum import Enum
from http import HTTPStatus

from transport.base import (
    CancellationToken,
    ResponseHandler,
    TransportRequest,
    TransportResponse,
)


class BehaviorProfile(str, Enum):
    SUCCESS = "success"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    PROXY_REQUIRED = "proxy_required"

    @property
    def status_code(self) -> int:
        return _PROFILE_STATUS[self].value

    @property
    def status(self) -> HTTPStatus:
        return _PROFILE_STATUS[self]


_PROFILE_STATUS: dict[BehaviorProfile, HTTPStatus] = {
    BehaviorProfile.SUCCESS: HTTPStatus.OK,
    BehaviorProfile.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    BehaviorProfile.FORBIDDEN: HTTPStatus.FORBIDDEN,
    BehaviorProfile.PROXY_REQUIRED: HTTPStatus.PROXY_AUTHENTICATION_REQUIRED,
}


def status_responder(
    status: int | HTTPStatus,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> ResponseHandler:
    """
    Build a handler that answers every request with the same status, body and
    headers. Each call gets its own header copy so tests cannot leak changes
    into later responses.
    """
    status_code = int(status)
    canned_headers = dict(headers or {})

    async def respond(request: TransportRequest, cancellation: CancellationToken) -> TransportResponse:
        return TransportResponse(
            status_code=status_code,
            headers=dict(canned_headers),
            body=body,
            request=request,
        )

    return respond


def profile_responder(profile: BehaviorProfile) -> ResponseHandler:
    return status_responder(profile.status)
