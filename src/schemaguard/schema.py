from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Sequence
from typing import Any, Literal, Mapping, get_args

import numpy as np

from schemaguard.errors import SchemaInvalidError

FieldType = Literal[
    "string",
    "number",
    "integer",
    "boolean",
    "object",
    "array",
    "date",
    "time",
    "datetime",
    "year",
    "yearmonth",
    "duration",
    "geopoint",
    "geojson",
    "any",
]

FIELD_TYPES: tuple[str, ...] = get_args(FieldType)

_VALID_TYPES = frozenset(FIELD_TYPES)


def _is_list_like(value: object) -> bool:
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Sequence)


def _coerce_required(value: object) -> bool | None:
    if value is None:
        return None
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, np.integer)) and int(value) in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
    # Unrecognised constraint values are not validated here.
    return False


@dataclass(frozen=True, slots=True)
class FieldConstraints:
    required: bool | None = None

    @property
    def is_required(self) -> bool:
        return bool(self.required)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    position: int
    name: str | None = None
    type: str | None = None
    constraints: FieldConstraints | None = None

    @property
    def is_required(self) -> bool:
        return self.constraints is not None and self.constraints.is_required

    @property
    def has_valid_type(self) -> bool:
        return self.type is None or self.type in _VALID_TYPES


@dataclass(frozen=True, slots=True)
class TableSchemaSpec:
    """Typed view of a Table Schema mapping.

    Built once by `decode_schema`; absent keys are modelled as `None` so the
    validation steps never probe the raw mapping.
    """

    fields: tuple[FieldSpec, ...] = ()

    @property
    def names(self) -> tuple[str | None, ...]:
        return tuple(field.name for field in self.fields)

    @property
    def types(self) -> tuple[str | None, ...]:
        return tuple(field.type for field in self.fields)

    @property
    def required_flags(self) -> tuple[bool, ...]:
        return tuple(field.is_required for field in self.fields)

    def unnamed_positions(self) -> tuple[int, ...]:
        return tuple(field.position for field in self.fields if field.name is None)

    def invalid_types(self) -> tuple[str, ...]:
        seen: list[str] = []
        for field in self.fields:
            if field.has_valid_type or field.type in seen:
                continue
            seen.append(str(field.type))
        return tuple(seen)

    def required_names(self) -> tuple[str, ...]:
        return tuple(
            field.name
            for field in self.fields
            if field.is_required and field.name is not None
        )


def _decode_constraints(value: object) -> FieldConstraints | None:
    if not isinstance(value, Mapping):
        return None
    return FieldConstraints(required=_coerce_required(value.get("required")))


def _decode_field(position: int, raw: Mapping[str, Any]) -> FieldSpec:
    name = raw.get("name")
    field_type = raw.get("type")
    return FieldSpec(
        position=position,
        name=None if name is None else str(name),
        type=None if field_type is None else str(field_type),
        constraints=_decode_constraints(raw.get("constraints")),
    )


def decode_schema(schema: object) -> TableSchemaSpec:
    """Decode a loosely-typed Table Schema mapping into a `TableSchemaSpec`.

    Raises `SchemaInvalidError` when `schema` is not a mapping, lacks `fields`,
    or `fields` is not a list of mappings.
    """
    if not isinstance(schema, Mapping) or "fields" not in schema:
        raise SchemaInvalidError()
    raw_fields = schema["fields"]
    if not _is_list_like(raw_fields):
        raise SchemaInvalidError()
    if any(not isinstance(item, Mapping) for item in raw_fields):
        raise SchemaInvalidError()
    return TableSchemaSpec(
        fields=tuple(
            _decode_field(position, item)
            for position, item in enumerate(raw_fields, start=1)
        )
    )
