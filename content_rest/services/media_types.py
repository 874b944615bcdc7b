# content_rest/services/media_types.py
"""
Media type negotiation for served content item data.

A content item's mime type is only a hint: it may be missing, empty or not a
media type at all. resolve_media_type() never fails; anything that does not
parse into a concrete media type becomes application/octet-stream.
"""
import re
from typing import List, Optional

DEFAULT_MEDIA_TYPE = "application/octet-stream"

# RFC 7230 token characters
_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
# qdtext and quoted-pair; no CR, LF or other control characters, nothing beyond latin-1
_QUOTED_STRING = re.compile(r'"(?:[\t \x21\x23-\x5B\x5D-\x7E\x80-\xFF]|\\[\t \x21-\x7E\x80-\xFF])*"')
WILDCARD = "*"


def _split_parameters(value: str) -> List[str]:
    """Split on ';' outside of quoted strings."""
    parts = []
    current = []
    in_quotes = False
    escaped = False
    for char in value:
        if escaped:
            escaped = False
        elif char == "\\" and in_quotes:
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == ";" and not in_quotes:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    if in_quotes:
        raise ValueError("Unterminated quoted string")
    parts.append("".join(current))
    return parts


def parse_media_type(value: Optional[str]) -> Optional[str]:
    """
    Parse a media type expression such as ``text/html; charset=utf-8``.

    Args:
        value: Raw media type string

    Returns:
        The normalized media type (lower-cased type and subtype, parameters kept
        in order), or None when the value is not a valid media type.
    """
    if value is None:
        return None

    try:
        segments = _split_parameters(value)
    except ValueError:
        return None

    full_type = segments[0].strip()
    if not full_type:
        return None
    if full_type == WILDCARD:
        full_type = "*/*"

    type_, sep, subtype = full_type.partition("/")
    if not sep or not _TOKEN.fullmatch(type_) or not _TOKEN.fullmatch(subtype):
        return None
    if type_ == WILDCARD and subtype != WILDCARD:
        return None

    parameters = []
    for segment in segments[1:]:
        segment = segment.strip()
        if not segment:
            continue
        name, sep, param_value = segment.partition("=")
        name = name.strip()
        param_value = param_value.strip()
        if not sep or not _TOKEN.fullmatch(name):
            return None
        if not (_TOKEN.fullmatch(param_value) or _QUOTED_STRING.fullmatch(param_value)):
            return None
        parameters.append(f"{name}={param_value}")

    media_type = f"{type_.lower()}/{subtype.lower()}"
    if parameters:
        media_type = "; ".join([media_type] + parameters)
    return media_type


def is_concrete(media_type: str) -> bool:
    """True unless the type or subtype is a wildcard."""
    type_, _, rest = media_type.partition("/")
    subtype = rest.split(";", 1)[0]
    return WILDCARD not in (type_, subtype.strip())


def resolve_media_type(mime_type: Optional[str]) -> str:
    """
    Pick the media type used to serve a content item's data.

    Args:
        mime_type: The content item's declared mime type, possibly None

    Returns:
        The parsed media type when it is valid and concrete, else
        DEFAULT_MEDIA_TYPE.
    """
    media_type = parse_media_type(mime_type)
    if media_type is None or not is_concrete(media_type):
        return DEFAULT_MEDIA_TYPE
    return media_type
