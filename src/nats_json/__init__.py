"""nats_json — field-level codec for the flat JSON used in NATS control messages."""

import logging

from .builder import (
    add_bool,
    add_date_time,
    add_duration,
    add_field,
    add_int,
    add_string,
    add_string_array,
    begin_json,
    encode_value,
    end_json,
    should_emit,
)
from .config import CodecSettings, get_settings
from .errors import (
    ConfigurationError,
    FieldCodecError,
    MalformedTimestampError,
    UnsupportedValueError,
)
from .model import FieldKind, ValueKind
from .reader import (
    build_pattern,
    find_string_array,
    get_field,
    get_json_object,
    parse_string_array,
    read_bool,
    read_date_time,
    read_duration,
    read_int,
    read_string,
)
from .timestamps import format_date_time, parse_date_time, resolve_zone

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FieldKind",
    "ValueKind",
    "build_pattern",
    "get_field",
    "get_json_object",
    "find_string_array",
    "parse_string_array",
    "read_string",
    "read_int",
    "read_bool",
    "read_duration",
    "read_date_time",
    "add_field",
    "add_string",
    "add_bool",
    "add_int",
    "add_duration",
    "add_string_array",
    "add_date_time",
    "begin_json",
    "end_json",
    "should_emit",
    "encode_value",
    "format_date_time",
    "parse_date_time",
    "resolve_zone",
    "CodecSettings",
    "get_settings",
    "FieldCodecError",
    "MalformedTimestampError",
    "UnsupportedValueError",
    "ConfigurationError",
]
