from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import urlsplit

from transport.base import (
    CancellationToken,
    TransportEngine,
    TransportRequest,
    TransportResponse,
)
from verbs.base import VerbType
from verbs.factory import VerbFactory


class MessageSender(ABC):
    """
    A message sender turns (verb, target, payload) into a request envelope and
    dispatches it through a freshly built verb bound to this sender's transport.
    Concrete senders only decide how the payload is encoded and which headers
    accompany it; the dispatch path is shared.

    Senders keep no state between calls. Serialization faults, verb
    construction faults and transport faults surface as distinct exceptions,
    while HTTP-level failures come back as ordinary responses.
    """

    def __init__(
        self,
        transport: TransportEngine,
        logger: logging.Logger | None = None,
    ) -> None:
        self.transport = transport
        self._logger = logger or logging.getLogger(f"[{self.__class__.__name__}]")

    @abstractmethod
    def build_request(self, target: str, payload: Any) -> TransportRequest:
        """Serialize payload and prepare the envelope, leaving the method unset."""
        ...

    async def send_request(
        self,
        verb: str | VerbType,
        target: str,
        payload: Any,
        cancellation: CancellationToken | None = None,
    ) -> TransportResponse:
        _validate_target(target)

        request = self.build_request(target, payload)
        invoker = VerbFactory.create(verb, self.transport)

        self._logger.debug(f"Sending {invoker.method} {target} ({len(request.body)} bytes)")
        return await invoker.invoke(request, cancellation)

    async def get(self, target: str, payload: Any, cancellation: CancellationToken | None = None) -> TransportResponse:
        return await self.send_request(VerbType.GET, target, payload, cancellation)

    async def put(self, target: str, payload: Any, cancellation: CancellationToken | None = None) -> TransportResponse:
        return await self.send_request(VerbType.PUT, target, payload, cancellation)

    async def post(self, target: str, payload: Any, cancellation: CancellationToken | None = None) -> TransportResponse:
        return await self.send_request(VerbType.POST, target, payload, cancellation)

    async def delete(self, target: str, payload: Any, cancellation: CancellationToken | None = None) -> TransportResponse:
        return await self.send_request(VerbType.DELETE, target, payload, cancellation)


def _validate_target(target: str) -> None:
    if not isinstance(target, str):
        raise TypeError(f"target must be a str, got {type(target).__name__}")

    parts = urlsplit(target)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"target must be an absolute URI, got {target!r}")
