"""Decode agent argument payloads into record instances.

This is the mirror of ``compile_schema``: both walk the same ``RecordType``
and resolve tags through the same table, so the decoder accepts exactly
the shape the schema advertises.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from toolcast.errors import InvalidRecord, MissingField, TypeMismatch
from toolcast.schema.fields import FieldSpec, RecordType, record_type
from toolcast.schema.types import PrimitiveType, TypeShape, TypeTag, json_type
from toolcast.structured.parser import parse_payload

logger = logging.getLogger(__name__)


def decode_arguments(record: RecordType | type, payload: str | bytes | Mapping[str, Any]) -> Any:
    """Decode an argument payload into an instance of the record.

    Decoding is all-or-nothing: the first failing field aborts the call.

    Args:
        record: A ``RecordType`` or a class decorated with ``@record``
        payload: JSON text, or an already parsed mapping

    Returns:
        An instance of ``record.model``, or a dict when the record has no model

    Raises:
        InvalidTypeTag: If the record itself declares an unknown tag
        MalformedPayload: If the payload is not a JSON object
        MissingField: If a required field is absent
        TypeMismatch: If a field value has an incompatible type
        InvalidRecord: If the model rejects the decoded values
    """
    record = record_type(record)
    shapes = [(spec, spec.shape()) for spec in record.fields]
    document = parse_payload(payload)

    values: dict[str, Any] = {}
    for spec, shape in shapes:
        if spec.name not in document:
            if spec.required:
                raise MissingField(spec.name, payload)
            if not _has_default(record.model, spec.name):
                values[spec.name] = None
            continue

        value = document[spec.name]
        if value is None and (shape.is_optional or not spec.required):
            values[spec.name] = None
            continue
        values[spec.name] = _decode_value(spec, shape, value, payload)

    extra = document.keys() - set(record.field_names)
    if extra:
        logger.debug("Ignoring unknown fields %s for %s", sorted(extra), record.name)

    return _build(record, values, payload)


def _has_default(model: Any, name: str) -> bool:
    """Whether the model fills ``name`` itself when it is not passed."""
    if model is None:
        return False
    if dataclasses.is_dataclass(model):
        for item in dataclasses.fields(model):
            if item.name == name:
                return item.default is not dataclasses.MISSING or item.default_factory is not dataclasses.MISSING
        return False
    model_fields = getattr(model, "model_fields", None)
    if isinstance(model_fields, Mapping) and name in model_fields:
        return not model_fields[name].is_required()
    return False


def _decode_value(spec: FieldSpec, shape: TypeShape, value: Any, payload: Any) -> Any:
    if not shape.is_list:
        return _decode_scalar(spec.name, spec, shape.base, value, payload)

    actual = json_type(value)
    if actual is not PrimitiveType.ARRAY:
        raise TypeMismatch(spec.name, PrimitiveType.ARRAY, actual, raw_value=payload)
    return [
        _decode_scalar(f"{spec.name}[{index}]", spec, shape.base, item, payload)
        for index, item in enumerate(value)
    ]


def _decode_scalar(name: str, spec: FieldSpec, tag: TypeTag, value: Any, payload: Any) -> Any:
    actual = json_type(value)
    if actual is not tag.primitive:
        raise TypeMismatch(name, tag.primitive, actual, raw_value=payload)
    try:
        value = tag.coerce(value)
    except ValueError as e:
        raise TypeMismatch(name, tag.primitive, actual, detail=str(e), raw_value=payload) from e

    if spec.choices:
        if value not in spec.choices:
            detail = f"{value!r} is not one of {list(spec.choices)}"
            raise TypeMismatch(name, tag.primitive, actual, detail=detail, raw_value=payload)
        if spec.enum is not None:
            return spec.enum(value)
    return value


def _build(record: RecordType, values: dict[str, Any], payload: Any) -> Any:
    if record.model is None:
        return values
    try:
        return record.model(**values)
    except ValueError as e:
        # pydantic's ValidationError is a ValueError too
        raise InvalidRecord(record.name, str(e), payload) from e


def encode_arguments(record: RecordType | type, instance: Any) -> str:
    """Encode a record instance as the JSON payload the decoder accepts.

    Args:
        record: A ``RecordType`` or a class decorated with ``@record``
        instance: A dataclass, a pydantic model or a mapping

    Returns:
        A JSON object holding the record's declared fields
    """
    record = record_type(record)
    if isinstance(instance, Mapping):
        data = instance
    elif dataclasses.is_dataclass(instance) and not isinstance(instance, type):
        data = {item.name: getattr(instance, item.name) for item in dataclasses.fields(instance)}
    elif hasattr(instance, "model_dump"):
        data = instance.model_dump()
    else:
        data = vars(instance)

    return json.dumps({spec.name: _plain(data[spec.name]) for spec in record.fields if spec.name in data})


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
