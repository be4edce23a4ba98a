"""Field kinds, match templates and the default-suppression policy."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from enum import Enum, auto
from types import MappingProxyType
from typing import Any


# ---------------------------------------------------------------------------
# FieldKind — read side
# ---------------------------------------------------------------------------

class FieldKind(Enum):
    Boolean = auto()
    String = auto()
    Number = auto()
    Object = auto()       # matched with the String template
    StringArray = auto()


GRAB_STRING = r'\s*"(.*?)"'
GRAB_NUMBER = r"\s*(\d+)"
GRAB_BOOLEAN = r"\s*(true|false)"
GRAB_STRING_ARRAY = r"\[\s*(.*?)\s*\]"
COLON = r'"\s*:\s*'

TEMPLATES: MappingProxyType[FieldKind, str] = MappingProxyType({
    FieldKind.Boolean: GRAB_BOOLEAN,
    FieldKind.Number: GRAB_NUMBER,
    FieldKind.String: GRAB_STRING,
    FieldKind.StringArray: GRAB_STRING_ARRAY,
})


# ---------------------------------------------------------------------------
# ValueKind — write side
# ---------------------------------------------------------------------------

class ValueKind(Enum):
    String = auto()
    Boolean = auto()
    Integer = auto()
    Duration = auto()
    StringArray = auto()
    Timestamp = auto()


def _present(value: Any) -> bool:
    return value is not None


def _always(value: Any) -> bool:
    return True


def _non_negative(value: int) -> bool:
    return value >= 0


def _non_zero(value: timedelta) -> bool:
    return value != timedelta(0)


def _non_empty(value: Any) -> bool:
    return value is not None and len(value) > 0


# ValueKind -> "should this value be written?"
EMIT_WHEN: MappingProxyType[ValueKind, Callable[[Any], bool]] = MappingProxyType({
    ValueKind.String: _present,
    ValueKind.Boolean: _always,
    ValueKind.Integer: _non_negative,
    ValueKind.Duration: _non_zero,
    ValueKind.StringArray: _non_empty,
    ValueKind.Timestamp: _present,
})


# ValueKind -> Python types a value of that kind may have
ACCEPTS: MappingProxyType[ValueKind, tuple[type, ...]] = MappingProxyType({
    ValueKind.String: (str,),
    ValueKind.Boolean: (bool,),
    ValueKind.Integer: (int,),
    ValueKind.Duration: (timedelta,),
    ValueKind.StringArray: (list, tuple),
    ValueKind.Timestamp: (datetime,),
})

# kinds whose policy treats None as "nothing to write"
NULLABLE = frozenset({ValueKind.String, ValueKind.StringArray, ValueKind.Timestamp})
