from clients.base import MessageSender
from clients.json_client import JSON_CONTENT_TYPE, JsonClient
from clients.serialization import to_json_bytes, to_xml_bytes
from clients.soap_client import SOAP_ACTION_HEADER, XML_CONTENT_TYPE, SoapClient

__all__ = [
    "MessageSender",
    "JsonClient",
    "SoapClient",
    "JSON_CONTENT_TYPE",
    "XML_CONTENT_TYPE",
    "SOAP_ACTION_HEADER",
    "to_json_bytes",
    "to_xml_bytes",
]
