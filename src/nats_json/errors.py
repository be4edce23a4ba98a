"""Exceptions raised by nats_json."""

from __future__ import annotations


class FieldCodecError(Exception):
    """Base class for every error raised by this package."""


class MalformedTimestampError(FieldCodecError, ValueError):
    """Text handed to the timestamp parser is not a valid instant."""

    def __init__(self, text: str) -> None:
        super().__init__(f"malformed timestamp: {text!r}")
        self.text = text


class UnsupportedValueError(FieldCodecError, TypeError):
    """A value (or kind) the field builder does not know how to encode."""


class ConfigurationError(FieldCodecError):
    """An invalid setting, e.g. an unknown zone name."""
