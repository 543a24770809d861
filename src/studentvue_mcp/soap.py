"""SOAP envelope construction and response unwrapping for the PXP web service.

The portal takes its method parameters as an XML document carried inside the
``<paramStr>`` text node of the envelope. That inner document is escaped once
(``<`` becomes ``&lt;``) rather than wrapped in CDATA. Results come back the
same way: the ``*Result`` element holds an escaped XML document that needs one
level of unescaping.
"""

from __future__ import annotations

import html
import re
from typing import Mapping

from studentvue_mcp.exceptions import SoapParseError

NAMESPACE = "http://edupoint.com/webservices/"

STANDARD_REQUEST = "ProcessWebServiceRequest"
MULTI_WEB_REQUEST = "ProcessWebServiceRequestMultiWeb"

_ENVELOPE_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns:xsd="http://www.w3.org/2001/XMLSchema" xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">
  <soap:Body>
    <{request_type} xmlns="{namespace}">
      <userID>{user_id}</userID>
      <password>{password}</password>
      <skipLoginLog>true</skipLoginLog>
      <parent>false</parent>
      <webServiceHandleName>{service_handle}</webServiceHandleName>
      <methodName>{method_name}</methodName>
      <paramStr>{param_str}</paramStr>
    </{request_type}>
  </soap:Body>
</soap:Envelope>"""

# Standard wrapper is tried first; both tolerate a namespace prefix
_RESULT_PATTERNS = [
    re.compile(
        rf"<(?:[\w.-]+:)?{name}Result>(.*?)</(?:[\w.-]+:)?{name}Result>",
        re.IGNORECASE | re.DOTALL,
    )
    for name in (STANDARD_REQUEST, MULTI_WEB_REQUEST)
]

_RT_ERROR = re.compile(r"^\s*(?:<\?xml[^>]*\?>\s*)?<RT_ERROR\b")

_XML_ENTITIES = {"lt": "<", "gt": ">", "amp": "&", "quot": '"', "apos": "'"}
_ENTITY_REF = re.compile(r"&(lt|gt|amp|quot|apos|#[0-9]+|#x[0-9A-Fa-f]+);")


def escape_xml(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for use in an XML text node."""
    return html.escape(text, quote=False)


def escape_attr(text: str) -> str:
    """Escape text for use inside a double- or single-quoted attribute value."""
    return html.escape(text, quote=True)


def unescape_xml(text: str) -> str:
    """Decode one level of XML entities and character references.

    Only the five predefined entities and numeric references are decoded.
    Anything else, including references to characters XML does not allow,
    is left as written.
    """
    return _ENTITY_REF.sub(_decode_entity, text)


def _decode_entity(match: re.Match) -> str:
    name = match.group(1)
    if not name.startswith("#"):
        return _XML_ENTITIES[name]
    codepoint = int(name[2:], 16) if name[1] in "xX" else int(name[1:])
    if _is_xml_char(codepoint):
        return chr(codepoint)
    return match.group(0)


def _is_xml_char(codepoint: int) -> bool:
    return (
        codepoint in (0x9, 0xA, 0xD)
        or 0x20 <= codepoint <= 0xD7FF
        or 0xE000 <= codepoint <= 0xFFFD
        or 0x10000 <= codepoint <= 0x10FFFF
    )


def render_params(params: Mapping[str, str]) -> str:
    """Render a flat mapping as the inner ``<Parms>`` document (unescaped)."""
    if not params:
        return "<Parms/>"
    fields = "".join(
        f"<{name}>{escape_xml(value)}</{name}>" for name, value in params.items()
    )
    return f"<Parms>{fields}</Parms>"


def render_message_listing(message_id: str, message_type: str) -> str:
    """Render the attribute-style ``<Parms>`` document that marks a message read."""
    return (
        "<Parms>"
        f'<MessageListing ID="{escape_attr(message_id)}" '
        f'Type="{escape_attr(message_type)}" MarkAsRead="true" />'
        "</Parms>"
    )


def soap_action(multi_web: bool = False) -> str:
    """Return the SOAPAction header value for the request shape."""
    return NAMESPACE + (MULTI_WEB_REQUEST if multi_web else STANDARD_REQUEST)


def build_envelope(
    user_id: str,
    password: str,
    service_handle: str,
    method_name: str,
    param_block: str,
    multi_web: bool = False,
) -> str:
    """
    Build the SOAP 1.1 request envelope.

    Args:
        user_id: Portal username.
        password: Portal password.
        service_handle: Web service module, e.g. ``PXPWebServices``.
        method_name: Method within the module, e.g. ``Gradebook``.
        param_block: Inner ``<Parms>`` document, unescaped. It is escaped
            exactly once on insertion into ``<paramStr>``.
        multi_web: Use the ``ProcessWebServiceRequestMultiWeb`` wrapper.

    Returns: Envelope XML text.
    """
    return _ENVELOPE_TEMPLATE.format(
        request_type=MULTI_WEB_REQUEST if multi_web else STANDARD_REQUEST,
        namespace=NAMESPACE,
        user_id=escape_xml(user_id),
        password=escape_xml(password),
        service_handle=escape_xml(service_handle),
        method_name=escape_xml(method_name),
        param_str=escape_xml(param_block),
    )


def parse_response(body: str) -> str:
    """
    Extract and unescape the result payload from a SOAP response body.

    Raises:
        SoapParseError: Neither result wrapper is present.
    """
    for pattern in _RESULT_PATTERNS:
        match = pattern.search(body)
        if match:
            return unescape_xml(match.group(1))
    raise SoapParseError("Failed to parse SOAP response")


def is_error_payload(payload: str) -> bool:
    """True if an unwrapped payload is an ``RT_ERROR`` document from the portal."""
    return _RT_ERROR.match(payload) is not None
