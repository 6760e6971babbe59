"""
Module: xml.py
Description: XML codec for MNS request and response bodies.

Serializes typed request payloads into the service's XML schema and
decodes response bodies into the response variant the caller expects.

An empty body decodes to None. A body that is not well-formed XML, or
whose root element matches neither the expected variant nor <Error>,
raises ResponseParseError so callers can tell "nothing returned" from
"something unreadable returned".

Dependencies: xml.etree.ElementTree, pydantic models
"""

from typing import Optional, Type
from xml.etree import ElementTree as ET

from pydantic import ValidationError

from ..exceptions import ResponseParseError
from ..models.request import MNSRequest
from ..models.response import ErrorResponse, MNSResponse, local_name

MNS_NAMESPACE = "http://mns.aliyuncs.com/doc/v1/"


def _format_value(value) -> str:
    if isinstance(value, bool):
        return "True" if value else "False"
    return str(value)


def serialize(payload: MNSRequest) -> bytes:
    """
    Serialize a request payload to UTF-8 XML.

    Fields left as None are omitted from the document.

    Args:
        payload: Typed request payload

    Returns:
        XML document bytes, including the XML declaration
    """
    if not isinstance(payload, MNSRequest) or not payload.root_tag:
        raise ValueError("payload must be an MNSRequest with a root_tag")

    root = ET.Element(payload.root_tag, {"xmlns": MNS_NAMESPACE})
    for name, value in payload.model_dump(by_alias=True, exclude_none=True).items():
        child = ET.SubElement(root, name)
        child.text = _format_value(value)

    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def deserialize(
    body: Optional[bytes],
    result_type: Optional[Type[MNSResponse]],
    status_code: Optional[int] = None
) -> Optional[MNSResponse]:
    """
    Decode a response body.

    Args:
        body: Raw response body (may be empty)
        result_type: Expected response variant, or None when the
            operation returns no result
        status_code: Response status, attached to parse errors

    Returns:
        Decoded result, an ErrorResponse for <Error> documents, or None
        when there is nothing to decode

    Raises:
        ResponseParseError: If a non-empty body cannot be decoded
    """
    if not body or not body.strip():
        return None

    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise ResponseParseError(
            f"response body is not well-formed XML: {e}",
            status_code=status_code
        ) from e

    tag = local_name(root.tag)
    if tag == ErrorResponse.root_tag:
        variant: Type[MNSResponse] = ErrorResponse
    elif result_type is None:
        # Operation expects no result; ignore whatever document came back.
        return None
    elif tag == result_type.root_tag:
        variant = result_type
    else:
        raise ResponseParseError(
            f"expected <{result_type.root_tag}> document, got <{tag}>",
            status_code=status_code
        )

    try:
        return variant.from_element(root)
    except ValidationError as e:
        raise ResponseParseError(
            f"<{tag}> document does not match {variant.__name__}: {e}",
            status_code=status_code
        ) from e
