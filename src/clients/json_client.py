from typing import Any

from clients.base import MessageSender
from clients.serialization import to_json_bytes
from transport.base import TransportRequest


JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class JsonClient(MessageSender):
    """Sends payloads as a JSON body addressed to the target URI."""

    def build_request(self, target: str, payload: Any) -> TransportRequest:
        return TransportRequest(
            url=target,
            body=to_json_bytes(payload),
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )
