from typing import Any

from clients.base import MessageSender
from clients.serialization import to_xml_bytes
from transport.base import TransportRequest


XML_CONTENT_TYPE = "text/xml; charset=utf-8"
SOAP_ACTION_HEADER = "SOAPAction"


class SoapClient(MessageSender):
    """
    Sends payloads as an XML document. The target doubles as the request URI
    and as the SOAPAction header value.
    """

    def build_request(self, target: str, payload: Any) -> TransportRequest:
        # TODO: accept a SOAPAction distinct from the endpoint URI; real SOAP services usually differ
        return TransportRequest(
            url=target,
            body=to_xml_bytes(payload),
            headers={
                "Content-Type": XML_CONTENT_TYPE,
                SOAP_ACTION_HEADER: target,
            },
        )
