"""Record metadata and schema compilation."""

from .types import TYPE_TAGS, PrimitiveType, TypeShape, TypeTag, json_type, parse_type_tag
from .fields import FieldSpec, RecordType, record, record_type
from .compiler import DESCRIPTION_TEMPLATE, PropertySchema, SchemaDocument, compile_schema

__all__ = [
    "TYPE_TAGS",
    "PrimitiveType",
    "TypeShape",
    "TypeTag",
    "json_type",
    "parse_type_tag",
    "FieldSpec",
    "RecordType",
    "record",
    "record_type",
    "DESCRIPTION_TEMPLATE",
    "PropertySchema",
    "SchemaDocument",
    "compile_schema",
]
