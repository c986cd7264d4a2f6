"""Tests for type tags and schema compilation."""

from __future__ import annotations

import pytest

from toolcast import FieldSpec, InvalidTypeTag, PrimitiveType, RecordType, SchemaDocument, compile_schema
from toolcast.schema import TYPE_TAGS, json_type, parse_type_tag

from fakes import Classification, Search, UserInfo


class TestParseTypeTag:
    """Type tag parsing against the closed tag table."""

    @pytest.mark.parametrize("tag", sorted(TYPE_TAGS))
    def test_every_tag_maps_to_one_primitive(self, tag):
        shape = parse_type_tag(tag)
        assert shape.base is TYPE_TAGS[tag]
        assert shape.primitive in (PrimitiveType.STRING, PrimitiveType.NUMBER, PrimitiveType.BOOLEAN)
        assert not shape.is_list
        assert not shape.is_optional

    def test_textual_and_bounded_integers(self):
        assert parse_type_tag("str").primitive is PrimitiveType.STRING
        assert parse_type_tag("char").primitive is PrimitiveType.STRING
        assert parse_type_tag("uint8").primitive is PrimitiveType.NUMBER
        assert parse_type_tag("bool").primitive is PrimitiveType.BOOLEAN

    def test_list_and_optional_forms(self):
        assert parse_type_tag("list[uint8]").is_list
        assert parse_type_tag("list[uint8]").primitive is PrimitiveType.ARRAY
        for tag in ("str | None", "None | str", "optional[str]"):
            shape = parse_type_tag(tag)
            assert shape.is_optional
            assert shape.base.name == "str"
        shape = parse_type_tag("list[str] | None")
        assert shape.is_list and shape.is_optional

    @pytest.mark.parametrize(
        "tag",
        ["", "dict", "String", "Address", "str | int", "list[list[str]]", "list[dict]", "None | None"],
    )
    def test_unknown_tags_never_default(self, tag):
        with pytest.raises(InvalidTypeTag) as exc_info:
            parse_type_tag(tag, field="x")
        assert exc_info.value.tag == tag
        assert exc_info.value.field == "x"

    def test_integer_bounds(self):
        uint8 = TYPE_TAGS["uint8"]
        assert uint8.coerce(0) == 0
        assert uint8.coerce(255) == 255
        with pytest.raises(ValueError, match="outside uint8 range"):
            uint8.coerce(256)
        with pytest.raises(ValueError):
            uint8.coerce(-1)
        assert TYPE_TAGS["int8"].coerce(-128) == -128
        assert TYPE_TAGS["int"].coerce(10**30) == 10**30

    def test_integral_floats(self):
        assert TYPE_TAGS["uint8"].coerce(30.0) == 30
        assert isinstance(TYPE_TAGS["uint8"].coerce(30.0), int)
        with pytest.raises(ValueError, match="not an integer"):
            TYPE_TAGS["int"].coerce(30.5)
        assert TYPE_TAGS["float"].coerce(3) == 3.0

    def test_char_length(self):
        assert TYPE_TAGS["char"].coerce("x") == "x"
        with pytest.raises(ValueError):
            TYPE_TAGS["char"].coerce("xy")

    def test_json_type(self):
        assert json_type(None) is PrimitiveType.NULL
        assert json_type(True) is PrimitiveType.BOOLEAN
        assert json_type(1) is PrimitiveType.NUMBER
        assert json_type(1.5) is PrimitiveType.NUMBER
        assert json_type("a") is PrimitiveType.STRING
        assert json_type([1]) is PrimitiveType.ARRAY
        assert json_type({"a": 1}) is PrimitiveType.OBJECT


class TestCompileSchema:
    """Schema compilation."""

    def test_user_info_document(self):
        schema = compile_schema(UserInfo)
        assert schema.to_dict() == {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "This is a name property that belongs to the object",
                },
                "age": {
                    "type": "number",
                    "description": "This is a age property that belongs to the object",
                },
            },
            "required": ["name", "age"],
        }

    @pytest.mark.parametrize("record", [UserInfo, Search])
    def test_every_field_appears_once(self, record):
        schema = compile_schema(record)
        names = [spec.name for spec in record.__record_type__.fields]
        assert sorted(schema.properties) == sorted(names)
        assert set(schema.required) <= set(schema.properties)
        assert len(schema.required) == len(set(schema.required))

    def test_all_fields_required_by_default(self):
        rt = RecordType(name="Pair", fields=(FieldSpec("left", "str"), FieldSpec("right", "int64")))
        assert compile_schema(rt).required == ["left", "right"]

    def test_optional_fields_not_required(self):
        schema = compile_schema(Search)
        assert schema.required == ["topic", "query", "tags"]
        assert schema.properties["limit"].type is PrimitiveType.NUMBER

    def test_list_field_has_items(self):
        prop = compile_schema(Search).to_dict()["properties"]["tags"]
        assert prop["type"] == "array"
        assert prop["items"] == {"type": "string"}

    def test_declared_descriptions_win(self):
        props = compile_schema(Search).properties
        assert props["topic"].description == "Topic of the search"
        assert props["tags"].description == "This is a tags property that belongs to the object"

    def test_compilation_is_deterministic(self):
        first = compile_schema(UserInfo)
        second = compile_schema(UserInfo)
        assert first == second
        reordered = SchemaDocument(
            properties=dict(reversed(list(first.properties.items()))),
            required=first.required,
        )
        assert reordered == first

    def test_invalid_tag_aborts_compilation(self):
        rt = RecordType(
            name="Broken",
            fields=(FieldSpec("name", "str"), FieldSpec("address", "Address")),
        )
        with pytest.raises(InvalidTypeTag) as exc_info:
            compile_schema(rt)
        assert exc_info.value.field == "address"
        assert "Address" in str(exc_info.value)

    def test_enum_fields_list_their_values(self):
        doc = compile_schema(Classification).to_dict()
        assert doc["properties"]["label"] == {
            "type": "string",
            "description": "This is a label property that belongs to the object",
            "enum": ["spam", "not_spam"],
        }
        assert doc["properties"]["clearance"]["enum"] == ["public", "secret"]
        assert doc["required"] == ["text", "label"]
        assert "enum" not in doc["properties"]["text"]

    def test_choices_on_list_items(self):
        rt = RecordType(name="Tagged", fields=(FieldSpec("tags", "list[str]", choices=("a", "b")),))
        prop = compile_schema(rt).to_dict()["properties"]["tags"]
        assert prop["items"] == {"type": "string", "enum": ["a", "b"]}

    def test_choices_need_a_string_tag(self):
        rt = RecordType(name="Odd", fields=(FieldSpec("n", "int", choices=("1", "2")),))
        with pytest.raises(InvalidTypeTag) as exc_info:
            compile_schema(rt)
        assert exc_info.value.field == "n"
