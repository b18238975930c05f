from __future__ import annotations
import logging
from enum import Enum

from transport.base import (
    CancellationToken,
    TransportEngine,
    TransportRequest,
    TransportResponse,
)


class VerbType(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class VerbState(str, Enum):
    CONSTRUCTED = "constructed"
    DISPATCHED = "dispatched"
    COMPLETED = "completed"
    FAILED = "failed"


class Verb:
    """
    One HTTP method bound to a transport. A verb is plain data, its method
    token, plus the single dispatch routine below: stamp the method on the
    envelope and forward it to the transport.

    Verbs do not intercept failures. Whatever the transport raises reaches the
    caller as-is and status codes are returned untouched. The state attribute
    only records how far a dispatch got.

    Verbs are built fresh for every send and hold a non-owning reference to a
    transport that outlives them.
    """

    def __init__(self, transport: TransportEngine, method: str) -> None:
        if not isinstance(transport, TransportEngine):
            raise TypeError(
                f"{self.__class__.__name__} requires a TransportEngine, got {type(transport).__name__}"
            )
        self.transport = transport
        self.method = (method.value if isinstance(method, Enum) else str(method)).upper()
        self.state = VerbState.CONSTRUCTED
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(method={self.method!r}, state={self.state.value!r})"

    async def invoke(
        self,
        request: TransportRequest,
        cancellation: CancellationToken | None = None,
    ) -> TransportResponse:
        request.method = self.method
        self.state = VerbState.DISPATCHED
        self._logger.debug(f"Dispatching {self.method} {request.url}")

        completed = False
        try:
            response = await self.transport.send(request, cancellation)
            completed = True
        finally:
            self.state = VerbState.COMPLETED if completed else VerbState.FAILED

        return response
