"""Descriptor tests."""

import dataclasses

import pytest

from pymetafield._errors import ConfigurationError, InvalidDescriptorError
from pymetafield.descriptor import FieldDescriptor, ValueType


class TestFieldDescriptor:
    def test_defaults(self):
        descriptor = FieldDescriptor(key="header", path="content.header")
        assert descriptor.value_type is ValueType.TEXT
        assert descriptor.keep_if_blank is False

    def test_immutable(self):
        descriptor = FieldDescriptor(key="header", path="content.header")
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.key = "other"

    def test_unknown_type_accepted_at_construction(self):
        descriptor = FieldDescriptor(key="x", path="x", value_type="number")
        assert descriptor.value_type == "number"

    @pytest.mark.parametrize("key", ["", None, 5])
    def test_invalid_key(self, key):
        with pytest.raises(InvalidDescriptorError) as exc_info:
            FieldDescriptor(key=key, path="content.header")
        assert isinstance(exc_info.value, ConfigurationError)
        assert "content.header" in exc_info.value.internal()

    def test_value_type_values(self):
        assert ValueType("boolean") is ValueType.BOOLEAN
        assert ValueType("text") is ValueType.TEXT
