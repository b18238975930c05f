from __future__ import annotations
import asyncio
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from http import HTTPStatus
from types import TracebackType
from typing import Any, Awaitable, Callable, Mapping, TypeAlias

from typing_extensions import Self


CancellationToken: TypeAlias = asyncio.Event


@dataclass
class TransportRequest:
    """
    Request envelope handed from a message sender to a verb and then to the
    transport. The sender fills url, body and headers; the verb sets method
    immediately before dispatch.
    """
    url: str
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)
    method: str | None = None

    @property
    def content_type(self) -> str | None:
        return self.header("Content-Type")

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")


@dataclass
class TransportResponse:
    """
    Response produced by a transport. Non-2xx status codes are ordinary
    responses, never exceptions.
    """
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    request: TransportRequest | None = None

    @property
    def reason(self) -> str:
        try:
            return HTTPStatus(self.status_code).phrase
        except ValueError:
            return ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def json(self) -> Any:
        return json.loads(self.body)


ResponseHandler: TypeAlias = Callable[
    [TransportRequest, CancellationToken],
    TransportResponse | Awaitable[TransportResponse],
]


class TransportEngine(ABC):
    """
    A structural interface for anything that can carry a prepared request
    envelope and return a TransportResponse. Engines are shared by many verbs
    and outlive every individual send. The async context manager protocol is
    part of the contract so engines holding resources can release them.
    """

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        pass

    @abstractmethod
    async def send(
        self,
        request: TransportRequest,
        cancellation: CancellationToken | None = None,
    ) -> TransportResponse:
        ...
