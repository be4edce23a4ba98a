"""Tests for nats_json.model."""

from datetime import timedelta

import pytest

from nats_json.model import (
    ACCEPTS,
    EMIT_WHEN,
    GRAB_STRING,
    NULLABLE,
    TEMPLATES,
    FieldKind,
    ValueKind,
)


class TestTemplates:
    def test_object_has_no_template_of_its_own(self):
        assert FieldKind.Object not in TEMPLATES

    def test_every_other_kind_has_a_template(self):
        for kind in FieldKind:
            if kind is not FieldKind.Object:
                assert kind in TEMPLATES

    def test_string_template(self):
        assert TEMPLATES[FieldKind.String] == GRAB_STRING

    def test_read_only(self):
        with pytest.raises(TypeError):
            TEMPLATES[FieldKind.Object] = GRAB_STRING


class TestEmitPolicy:
    def test_covers_every_value_kind(self):
        assert set(EMIT_WHEN) == set(ValueKind)

    def test_integer(self):
        assert not EMIT_WHEN[ValueKind.Integer](-1)
        assert EMIT_WHEN[ValueKind.Integer](0)

    def test_duration(self):
        assert not EMIT_WHEN[ValueKind.Duration](timedelta(0))
        assert EMIT_WHEN[ValueKind.Duration](timedelta(microseconds=1))

    def test_boolean_always(self):
        assert EMIT_WHEN[ValueKind.Boolean](False)
        assert EMIT_WHEN[ValueKind.Boolean](True)

    def test_string(self):
        assert not EMIT_WHEN[ValueKind.String](None)
        assert EMIT_WHEN[ValueKind.String]("")

    def test_string_array(self):
        assert not EMIT_WHEN[ValueKind.StringArray](None)
        assert not EMIT_WHEN[ValueKind.StringArray]([])
        assert EMIT_WHEN[ValueKind.StringArray](["a"])

    def test_timestamp(self):
        assert not EMIT_WHEN[ValueKind.Timestamp](None)


class TestAccepts:
    def test_covers_every_value_kind(self):
        assert set(ACCEPTS) == set(ValueKind)

    def test_nullable_kinds_suppress_none(self):
        for kind in NULLABLE:
            assert not EMIT_WHEN[kind](None)
