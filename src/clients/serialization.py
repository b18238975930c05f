"""
Payload serializers used by the message senders.

JSON goes through pydantic-core, which understands dicts, lists, dataclasses,
pydantic models and scalars. XML is produced by walking the payload's public
fields the way a reflective object-to-XML mapper would: the root element is
named after the payload's type and each field becomes a child element.
"""
from __future__ import annotations
import dataclasses
import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_json

from core.exceptions import PayloadSerializationError


XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"

_INVALID_NAME_CHARS = re.compile(r"[^A-Za-z0-9_.\-]")
_SCALARS = (str, int, float, bool, Decimal, date, datetime, time)


def to_json_bytes(payload: Any) -> bytes:
    try:
        return to_json(payload, fallback=_json_fallback)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise PayloadSerializationError(type(payload), "json", str(exc)) from exc


def _json_fallback(value: Any) -> Any:
    """Plain objects are encoded as a mapping of their public attributes."""
    fields = _fields(value)
    if fields is None:
        raise TypeError(f"Unable to serialize unknown type: {type(value).__name__}")
    return dict(fields)


def to_xml_bytes(payload: Any) -> bytes:
    """
    Serialize payload into a UTF-8 XML document with an XML declaration.
    A None payload has no type to name the root element after and is rejected.
    """
    if payload is None:
        raise PayloadSerializationError(type(None), "xml", "payload is required")

    ET.register_namespace("xsi", XSI_NAMESPACE)
    ET.register_namespace("xsd", XSD_NAMESPACE)

    try:
        root = ET.Element(_root_name(payload))
        _populate(root, payload, seen=set())
        return ET.tostring(root, encoding="utf-8", xml_declaration=True)
    except PayloadSerializationError:
        raise
    except (TypeError, ValueError) as exc:
        raise PayloadSerializationError(type(payload), "xml", str(exc)) from exc


def _root_name(payload: Any) -> str:
    if isinstance(payload, Mapping):
        return "Payload"
    if isinstance(payload, (list, tuple, set, frozenset)):
        return "ArrayOfAnyType"
    if isinstance(payload, _SCALARS) and not isinstance(payload, Enum):
        return _scalar_type_name(payload)
    return _element_name(type(payload).__name__)


def _scalar_type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "int"
    if isinstance(value, (float, Decimal)):
        return "double"
    if isinstance(value, datetime):
        return "dateTime"
    if isinstance(value, date):
        return "date"
    if isinstance(value, time):
        return "time"
    return "string"


def _element_name(name: Any) -> str:
    text = _INVALID_NAME_CHARS.sub("_", str(name))
    if not text or not (text[0].isalpha() or text[0] == "_"):
        text = f"_{text}"
    return text


def _fields(value: Any) -> list[tuple[str, Any]] | None:
    """Public fields of a structured value, or None for leaf values."""
    if isinstance(value, BaseModel):
        return [(name, getattr(value, name)) for name in type(value).model_fields]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
    if isinstance(value, Mapping):
        return [(str(k), v) for k, v in value.items()]
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return [(k, v) for k, v in vars(value).items() if not k.startswith("_")]
    return None


def _format_scalar(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def _populate(element: ET.Element, value: Any, seen: set[int]) -> None:
    if value is None:
        element.set(f"{{{XSI_NAMESPACE}}}nil", "true")
        return

    if isinstance(value, bytes):
        raise PayloadSerializationError(type(value), "xml", "raw bytes have no XML mapping")

    if isinstance(value, (_SCALARS, Enum)):
        element.text = _format_scalar(value)
        return

    if id(value) in seen:
        raise PayloadSerializationError(type(value), "xml", "circular reference detected")
    seen = seen | {id(value)}

    if isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            child = ET.SubElement(element, _root_name(item) if item is not None else "anyType")
            _populate(child, item, seen)
        return

    fields = _fields(value)
    if fields is None:
        raise PayloadSerializationError(type(value), "xml", "type exposes no public fields")

    for name, field_value in fields:
        if isinstance(field_value, (list, tuple, set, frozenset)):
            # sequences are flattened into repeated elements named after the field
            for item in field_value:
                child = ET.SubElement(element, _element_name(name))
                _populate(child, item, seen)
            continue

        child = ET.SubElement(element, _element_name(name))
        _populate(child, field_value, seen)
