import asyncio
import logging

from fastapi.testclient import TestClient

from transport.base import (
    CancellationToken,
    TransportEngine,
    TransportRequest,
    TransportResponse,
)


class ApplicationTransport(TransportEngine):
    """
    Transport that delivers request envelopes to an application hosted by
    ApplicationHarness. Lets JsonClient and SoapClient drive a real
    application in-process.

    The test client is blocking, so each send runs in a worker thread.
    """

    def __init__(self, client: TestClient) -> None:
        self._client = client
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    async def send(
        self,
        request: TransportRequest,
        cancellation: CancellationToken | None = None,
    ) -> TransportResponse:
        if request.method is None:
            raise ValueError("Request method must be set before dispatch")

        if cancellation is not None and cancellation.is_set():
            raise asyncio.CancelledError(f"Send to {request.url} cancelled before dispatch")

        self._logger.debug(f"-> {request.method} {request.url}")
        response = await asyncio.to_thread(
            self._client.request,
            request.method,
            request.url,
            content=request.body,
            headers=request.headers,
        )
        self._logger.debug(f"<- {response.status_code} {request.url}")

        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
            request=request,
        )
