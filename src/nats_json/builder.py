"""Write side: append ``"name": value,`` fragments to a caller-owned buffer.

Values equal to their kind's uninteresting default are left out of the
output entirely (see ``model.EMIT_WHEN``). Nothing is escaped, and the
comma after the last field stays in the buffer until the caller removes
it, for example with ``end_json``.
"""

from __future__ import annotations

import io
from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import Any

from .errors import UnsupportedValueError
from .model import ACCEPTS, EMIT_WHEN, NULLABLE, ValueKind
from .timestamps import format_date_time


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def _encode_string(value: str) -> str:
    return f'"{value}"'


def _encode_bool(value: bool) -> str:
    return "true" if value else "false"


def _encode_int(value: int) -> str:
    return str(value)


def _encode_duration(value: timedelta) -> str:
    nanos = ((value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds) * 1000
    return str(nanos)


def _encode_string_array(value: Sequence[str]) -> str:
    return "[" + ",".join(f'"{s}"' for s in value) + "]"


def _encode_timestamp(value: datetime) -> str:
    return f'"{format_date_time(value)}Z"'


_ENCODERS = {
    ValueKind.String: _encode_string,
    ValueKind.Boolean: _encode_bool,
    ValueKind.Integer: _encode_int,
    ValueKind.Duration: _encode_duration,
    ValueKind.StringArray: _encode_string_array,
    ValueKind.Timestamp: _encode_timestamp,
}


def infer_kind(value: Any) -> ValueKind:
    """Pick the ValueKind for a Python value (``bool`` before ``int``)."""
    if isinstance(value, bool):
        return ValueKind.Boolean
    if isinstance(value, int):
        return ValueKind.Integer
    if isinstance(value, timedelta):
        return ValueKind.Duration
    if isinstance(value, datetime):
        return ValueKind.Timestamp
    if isinstance(value, str):
        return ValueKind.String
    if isinstance(value, (list, tuple)):
        return ValueKind.StringArray
    raise UnsupportedValueError(f"cannot encode {type(value).__name__} value")


def check_value(kind: ValueKind, value: Any) -> None:
    """Raise UnsupportedValueError unless *value* may be written as *kind*."""
    try:
        accepted = ACCEPTS[kind]
    except KeyError:
        raise UnsupportedValueError(f"unknown value kind: {kind!r}") from None
    if value is None:
        if kind in NULLABLE:
            return
    elif isinstance(value, accepted) and not (kind is ValueKind.Integer and isinstance(value, bool)):
        if kind is not ValueKind.StringArray or all(isinstance(s, str) for s in value):
            return
    raise UnsupportedValueError(f"cannot write {type(value).__name__} value as {kind.name}")


def should_emit(kind: ValueKind, value: Any) -> bool:
    """Apply the default-suppression policy for *kind*."""
    try:
        return EMIT_WHEN[kind](value)
    except KeyError:
        raise UnsupportedValueError(f"unknown value kind: {kind!r}") from None


def encode_value(kind: ValueKind, value: Any) -> str:
    try:
        encoder = _ENCODERS[kind]
    except KeyError:
        raise UnsupportedValueError(f"unknown value kind: {kind!r}") from None
    return encoder(value)


# ---------------------------------------------------------------------------
# Appending
# ---------------------------------------------------------------------------

def add_field(buf: io.StringIO, name: str, value: Any, kind: ValueKind | None = None) -> None:
    """Append ``"name": value,`` to *buf* unless *value* is a default.

    *kind* is inferred from the value's type when omitted; ``None`` values
    are never written. A value whose type does not fit *kind* raises
    UnsupportedValueError, as does ``None`` for kinds that always have a
    value (Boolean, Integer, Duration).
    """
    if kind is None:
        if value is None:
            return
        kind = infer_kind(value)
    check_value(kind, value)
    if not should_emit(kind, value):
        return
    buf.write(f'"{name}": {encode_value(kind, value)},')


def add_string(buf: io.StringIO, name: str, value: str | None) -> None:
    add_field(buf, name, value, ValueKind.String)


def add_bool(buf: io.StringIO, name: str, value: bool) -> None:
    add_field(buf, name, value, ValueKind.Boolean)


def add_int(buf: io.StringIO, name: str, value: int) -> None:
    add_field(buf, name, value, ValueKind.Integer)


def add_duration(buf: io.StringIO, name: str, value: timedelta) -> None:
    add_field(buf, name, value, ValueKind.Duration)


def add_string_array(buf: io.StringIO, name: str, value: Sequence[str] | None) -> None:
    add_field(buf, name, value, ValueKind.StringArray)


def add_date_time(buf: io.StringIO, name: str, value: datetime | None) -> None:
    add_field(buf, name, value, ValueKind.Timestamp)


# ---------------------------------------------------------------------------
# Object framing
# ---------------------------------------------------------------------------

def begin_json() -> io.StringIO:
    """Return a new buffer holding the opening brace."""
    buf = io.StringIO()
    buf.write("{")
    return buf


def end_json(buf: io.StringIO) -> str:
    """Drop one trailing comma, close the object and return its text."""
    text = buf.getvalue()
    if text.endswith(","):
        text = text[:-1]
    return text + "}"
