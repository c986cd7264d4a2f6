"""Compile record types into JSON schema parameter documents."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from toolcast.schema.fields import RecordType, record_type
from toolcast.schema.types import PrimitiveType

logger = logging.getLogger(__name__)

DESCRIPTION_TEMPLATE = "This is a {name} property that belongs to the object"


class PropertySchema(BaseModel):
    """Schema entry for a single property."""
    model_config = ConfigDict(frozen=True)

    type: PrimitiveType
    description: str | None = None
    items: PropertySchema | None = None
    enum: list[str] | None = None


class SchemaDocument(BaseModel):
    """Parameter schema for one record type.

    ``properties`` is a mapping: two documents with the same entries are
    equal regardless of insertion order.
    """
    model_config = ConfigDict(frozen=True)

    type: Literal["object"] = "object"
    properties: dict[str, PropertySchema]
    required: list[str]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def compile_schema(record: RecordType | type) -> SchemaDocument:
    """Compile a record type into its parameter schema.

    Args:
        record: A ``RecordType`` or a class decorated with ``@record``

    Returns:
        The schema document, with one property per field and every
        required field listed in ``required``

    Raises:
        InvalidTypeTag: If a field declares an unrecognized type tag. No
            partial schema is returned.
    """
    record = record_type(record)

    properties: dict[str, PropertySchema] = {}
    for spec in record.fields:
        shape = spec.shape()
        description = spec.description or DESCRIPTION_TEMPLATE.format(name=spec.name)
        choices = list(spec.choices) or None
        if shape.is_list:
            properties[spec.name] = PropertySchema(
                type=PrimitiveType.ARRAY,
                description=description,
                items=PropertySchema(type=shape.base.primitive, enum=choices),
            )
        else:
            properties[spec.name] = PropertySchema(type=shape.base.primitive, description=description, enum=choices)

    required = [spec.name for spec in record.fields if spec.required]
    logger.debug("Compiled schema for %s: %d properties, %d required", record.name, len(properties), len(required))
    return SchemaDocument(properties=properties, required=required)
