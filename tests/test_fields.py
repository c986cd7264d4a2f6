from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import pytest

from toolcast import FieldSpec, RecordType, record, record_type

from fakes import Classification, Clearance, Label, Search, UserInfo


class Level(Enum):
    LOW = 1


class TestRecordType:
    """Explicitly declared record types."""

    def test_field_lookups(self):
        rt = RecordType(
            name="Order",
            fields=(
                FieldSpec("item", "str"),
                FieldSpec("quantity", "uint16"),
                FieldSpec("note", "str", required=False),
            ),
        )
        assert rt.field_names == ("item", "quantity", "note")
        assert rt.required_names == ("item", "quantity")
        assert rt.get("quantity") == FieldSpec("quantity", "uint16")
        assert rt.get("missing") is None
        assert rt.model is None

    def test_fields_list_is_frozen_to_tuple(self):
        rt = RecordType(name="Order", fields=[FieldSpec("item", "str")])  # type: ignore[arg-type]
        assert isinstance(rt.fields, tuple)

    def test_duplicate_field_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate field 'name'"):
            RecordType(name="User", fields=(FieldSpec("name", "str"), FieldSpec("name", "str")))

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            RecordType(name="", fields=())


class TestRecordDecorator:
    """Record types derived from dataclasses."""

    def test_user_info(self):
        rt = record_type(UserInfo)
        assert rt.name == "UserInfo"
        assert rt.model is UserInfo
        assert rt.description == ""
        assert rt.fields == (
            FieldSpec("name", "str"),
            FieldSpec("age", "uint8"),
        )

    def test_metadata_and_annotations(self):
        rt = record_type(Search)
        assert rt.description == "Search request extracted from the user's question"
        assert rt.get("topic").description == "Topic of the search"
        assert rt.get("tags").type_tag == "list[str]"
        limit = rt.get("limit")
        assert limit.type_tag == "int | None"
        assert limit.required is False

    def test_cached_on_class(self):
        assert record_type(UserInfo) is UserInfo.__record_type__

    def test_docstring_becomes_description(self):
        @record
        @dataclass
        class Address:
            """The address of the person."""
            street: str
            city: str

        assert record_type(Address).description == "The address of the person."

    def test_name_override(self):
        @record(name="user_detail")
        @dataclass
        class UserDetail:
            name: str

        assert record_type(UserDetail).name == "user_detail"

    def test_explicit_required_metadata(self):
        @record
        @dataclass
        class Note:
            text: str | None = field(default=None, metadata={"required": True})

        spec = record_type(Note).get("text")
        assert spec.required is True
        assert spec.type_tag == "str | None"

    def test_undecorated_dataclass(self):
        @dataclass
        class Point:
            x: float
            y: float
            visible: bool

        rt = record_type(Point)
        assert [spec.type_tag for spec in rt.fields] == ["float", "float", "bool"]
        assert not hasattr(Point, "__record_type__")

    def test_unsupported_annotation_keeps_name(self):
        @dataclass
        class Holder:
            data: dict

        assert record_type(Holder).get("data").type_tag == "dict"

    def test_not_a_dataclass(self):
        class Plain:
            name: str

        with pytest.raises(TypeError, match="not a dataclass"):
            record_type(Plain)

    def test_enum_fields(self):
        rt = record_type(Classification)
        label = rt.get("label")
        assert label.type_tag == "str"
        assert label.enum is Label
        assert label.choices == ("spam", "not_spam")
        clearance = rt.get("clearance")
        assert clearance.type_tag == "str | None"
        assert clearance.enum is Clearance
        assert clearance.required is False

    def test_list_of_enum(self):
        @dataclass
        class Labels:
            labels: list[Label]

        spec = record_type(Labels).get("labels")
        assert spec.type_tag == "list[str]"
        assert spec.enum is Label

    def test_enum_values_must_be_strings(self):
        @dataclass
        class Alert:
            level: Level

        with pytest.raises(TypeError, match="must be strings"):
            record_type(Alert)

    def test_record_type_passthrough(self):
        rt = RecordType(name="X", fields=(FieldSpec("a", "str"),))
        assert record_type(rt) is rt
