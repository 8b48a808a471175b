from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Hashable


class SchemaGuardError(Exception):
    """Base exception for schema, data, and config failures."""


class ConfigValidationError(SchemaGuardError):
    """Raised when check options or their config file are invalid."""


def _quoted(values: tuple[Any, ...]) -> str:
    return ", ".join(f"'{value}'" for value in values)


def _pick(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


class SchemaValidationError(SchemaGuardError):
    """Base of every validation failure raised by `check_schema`."""

    kind: ClassVar[str] = "schema_validation"
    summary: ClassVar[str] = "schema validation failed."

    def detail_lines(self) -> tuple[str, ...]:
        return ()

    def details(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "summary": self.summary,
            "details": self.details(),
        }

    def __str__(self) -> str:
        return " ".join((self.summary, *self.detail_lines()))

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        return type(self), tuple(getattr(self, item.name) for item in fields(self))


@dataclass(slots=True)
class SchemaInvalidError(SchemaValidationError):
    """Raised when `schema` is not a mapping with a list-like `fields`."""

    kind: ClassVar[str] = "schema_invalid"
    summary: ClassVar[str] = "schema must be a mapping with a 'fields' property."


@dataclass(slots=True)
class FieldsWithoutNameError(SchemaValidationError):
    """Raised when one or more fields lack a `name`.

    `positions` are 1-based and list every unnamed field, not just the first.
    """

    positions: tuple[int, ...]

    kind: ClassVar[str] = "fields_without_name"
    summary: ClassVar[str] = "All fields in schema must have a 'name' property."

    def detail_lines(self) -> tuple[str, ...]:
        count = len(self.positions)
        joined = ", ".join(str(pos) for pos in self.positions)
        verb = _pick(count, "doesn't", "don't")
        return (
            f"{_pick(count, 'Field', 'Fields')} {joined} "
            f"{verb} have a name.",
        )

    def details(self) -> dict[str, Any]:
        return {"positions": [int(pos) for pos in self.positions]}


@dataclass(slots=True)
class FieldsTypeInvalidError(SchemaValidationError):
    """Raised when fields declare types outside the Table Schema vocabulary."""

    invalid_types: tuple[str, ...]

    kind: ClassVar[str] = "fields_type_invalid"
    summary: ClassVar[str] = "All fields in schema must have a valid 'type' property."

    def detail_lines(self) -> tuple[str, ...]:
        count = len(self.invalid_types)
        return (
            f"{_pick(count, 'Type', 'Types')} {_quoted(self.invalid_types)} "
            f"{_pick(count, 'is', 'are')} invalid.",
        )

    def details(self) -> dict[str, Any]:
        return {"invalid_types": list(self.invalid_types)}


@dataclass(slots=True)
class FieldsColnamesMismatchError(SchemaValidationError):
    """Raised when a dataset column is not covered by a required field name."""

    field_names: tuple[str, ...]
    column_names: tuple[Hashable, ...]

    kind: ClassVar[str] = "fields_colnames_mismatch"
    summary: ClassVar[str] = "Field names in schema must match column names in data."

    def detail_lines(self) -> tuple[str, ...]:
        n_fields = len(self.field_names)
        n_columns = len(self.column_names)
        return (
            f"{_pick(n_fields, 'Field name', 'Field names')}: {_quoted(self.field_names)}.",
            f"{_pick(n_columns, 'Column name', 'Column names')}: {_quoted(self.column_names)}.",
        )

    def details(self) -> dict[str, Any]:
        return {
            "field_names": list(self.field_names),
            "column_names": [str(column) for column in self.column_names],
        }


@dataclass(slots=True)
class DataInvalidError(SchemaValidationError):
    """Raised by the dataset collaborator when `data` is not a data frame."""

    received_type: str

    kind: ClassVar[str] = "data_invalid"
    summary: ClassVar[str] = "data must be a data frame."

    def detail_lines(self) -> tuple[str, ...]:
        return (f"Received object of type '{self.received_type}'.",)

    def details(self) -> dict[str, Any]:
        return {"received_type": self.received_type}
