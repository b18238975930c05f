import asyncio
import inspect
import logging

from transport.base import (
    CancellationToken,
    ResponseHandler,
    TransportEngine,
    TransportRequest,
    TransportResponse,
)


class MockTransport(TransportEngine):
    """
    Transport that never touches the network. Every request is answered by the
    handler supplied at construction, which fully determines status code, body
    and headers.

    The handler receives the request envelope and a cancellation token and may
    return a TransportResponse directly or an awaitable of one. Honouring the
    token is the handler's responsibility. Exceptions raised by the handler
    reach the caller unchanged.
    """

    def __init__(self, handler: ResponseHandler) -> None:
        self._handler = handler
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    @property
    def handler(self) -> ResponseHandler:
        return self._handler

    async def send(
        self,
        request: TransportRequest,
        cancellation: CancellationToken | None = None,
    ) -> TransportResponse:
        if cancellation is None:
            cancellation = asyncio.Event()

        self._logger.debug(f"-> {request.method} {request.url}")

        result = self._handler(request, cancellation)
        if inspect.isawaitable(result):
            result = await result

        if result.request is None:
            result.request = request

        self._logger.debug(f"<- {result.status_code} {request.url}")
        return result
