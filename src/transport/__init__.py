from transport.base import (
    CancellationToken,
    ResponseHandler,
    TransportEngine,
    TransportRequest,
    TransportResponse,
)
from transport.mock import MockTransport

__all__ = [
    "CancellationToken",
    "ResponseHandler",
    "TransportEngine",
    "TransportRequest",
    "TransportResponse",
    "MockTransport",
]
