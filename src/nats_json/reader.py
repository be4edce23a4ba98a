"""Read side: locate single fields inside flat, JSON-like server messages.

Every lookup is a targeted regular expression, not a parse. The first match
wins, an absent field is ``None`` (never an exception), and nested objects
are outside what these helpers understand.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta

from .config import get_settings
from .model import COLON, GRAB_STRING, TEMPLATES, FieldKind
from .timestamps import Zone, parse_date_time

logger = logging.getLogger(__name__)

_ELEMENT_SPLIT_RE = re.compile(r"\s*,\s*")


# ---------------------------------------------------------------------------
# Pattern construction
# ---------------------------------------------------------------------------

def type_pattern(kind: FieldKind) -> str:
    """Return the value template for *kind* (Object uses the String one)."""
    return TEMPLATES.get(kind, GRAB_STRING)


def build_pattern(field_name: str, kind: FieldKind) -> re.Pattern[str]:
    """Compile a matcher for ``"field_name" : <value>``.

    The field name is matched case-insensitively; group 1 captures the raw
    value span.
    """
    return re.compile('"' + re.escape(field_name) + COLON + type_pattern(kind), re.IGNORECASE)


# ---------------------------------------------------------------------------
# Field extraction
# ---------------------------------------------------------------------------

def get_field(field_name: str, kind: FieldKind, text: str) -> str | None:
    """Return the raw text of the first *field_name* value, or ``None``."""
    m = build_pattern(field_name, kind).search(text)
    if m is None:
        return None
    return m.group(1)


def read_string(field_name: str, text: str) -> str | None:
    return get_field(field_name, FieldKind.String, text)


def read_int(field_name: str, text: str) -> int | None:
    raw = get_field(field_name, FieldKind.Number, text)
    return None if raw is None else int(raw)


def read_bool(field_name: str, text: str) -> bool | None:
    raw = get_field(field_name, FieldKind.Boolean, text)
    return None if raw is None else raw.lower() == "true"


def read_duration(field_name: str, text: str) -> timedelta | None:
    """Read a nanosecond count as a timedelta (sub-microsecond part dropped)."""
    raw = get_field(field_name, FieldKind.Number, text)
    if raw is None:
        return None
    return timedelta(microseconds=int(raw) // 1000)


def read_date_time(field_name: str, text: str, zone: Zone = None) -> datetime | None:
    """Read a timestamp field; a present but malformed value raises."""
    raw = get_field(field_name, FieldKind.String, text)
    if raw is None:
        return None
    return parse_date_time(raw, zone)


# ---------------------------------------------------------------------------
# Object extraction
# ---------------------------------------------------------------------------

def get_json_object(object_name: str, text: str, balanced: bool | None = None) -> str | None:
    """Return the ``{...}`` that follows the first occurrence of *object_name*.

    By default the object ends at the first ``}`` after its opening brace,
    so a nested object is cut short at its first inner ``}``. Callers must
    only use this on flat objects.

    With ``balanced=True`` the end is found by counting brace depth
    (braces inside quoted strings are ignored) and an unterminated object
    gives ``None``. ``balanced=None`` takes the mode from settings.
    """
    if balanced is None:
        balanced = get_settings().object_scan == "balanced"

    obj_start = text.find(object_name)
    if obj_start < 0:
        logger.debug("object %r not found", object_name)
        return None

    bracket_start = text.find("{", obj_start)
    if bracket_start < 0:
        return None

    if balanced:
        bracket_end = _matching_brace(text, bracket_start)
    else:
        bracket_end = text.find("}", bracket_start)

    if bracket_end < 0:
        return None
    return text[bracket_start:bracket_end + 1]


def _matching_brace(text: str, start: int) -> int:
    """Index of the ``}`` closing the ``{`` at *start*, or -1."""
    depth = 0
    in_string = False
    i = start
    while i < len(text):
        ch = text[i]
        if in_string:
            if ch == "\\":
                i += 1
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return -1


# ---------------------------------------------------------------------------
# String arrays
# ---------------------------------------------------------------------------

def find_string_array(field_name: str, text: str) -> list[str] | None:
    """Like parse_string_array, but ``None`` when the field is absent.

    A present but empty array (``[]``) gives an empty list.
    """
    raw = get_field(field_name, FieldKind.StringArray, text)
    if raw is None:
        return None
    if not raw:
        return []
    # elements cannot contain quotes, so just drop them
    return [element.replace('"', "") for element in _ELEMENT_SPLIT_RE.split(raw)]


def parse_string_array(field_name: str, text: str) -> list[str]:
    """Return the elements of a string array field in source order.

    An absent field and an empty array both give ``[]``.
    """
    values = find_string_array(field_name, text)
    return values if values is not None else []
