from __future__ import annotations

import logging
from typing import Hashable, TypeVar

from schemaguard.config.models import DEFAULT_CHECK_OPTIONS, CheckOptions
from schemaguard.errors import (
    FieldsColnamesMismatchError,
    FieldsTypeInvalidError,
    FieldsWithoutNameError,
    SchemaValidationError,
)
from schemaguard.io.dataframe import check_data, column_names
from schemaguard.schema import TableSchemaSpec, decode_schema

LOGGER = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT")


def _check_names(spec: TableSchemaSpec) -> tuple[str, ...]:
    unnamed = spec.unnamed_positions()
    if unnamed:
        raise FieldsWithoutNameError(positions=unnamed)
    return tuple(name for name in spec.names if name is not None)


def _check_types(spec: TableSchemaSpec) -> None:
    invalid = spec.invalid_types()
    if invalid:
        raise FieldsTypeInvalidError(invalid_types=invalid)


def _check_columns(
    names: tuple[str, ...],
    required: tuple[str, ...],
    columns: tuple[Hashable, ...],
    *,
    bidirectional: bool,
) -> None:
    column_keys = [str(column) for column in columns]
    required_set = set(required)
    uncovered = [column for column in column_keys if column not in required_set]
    missing: list[str] = []
    if bidirectional:
        present = set(column_keys)
        missing = [name for name in required if name not in present]
    if uncovered or missing:
        LOGGER.debug(
            "column mismatch: uncovered=%s missing_required=%s", uncovered, missing
        )
        raise FieldsColnamesMismatchError(field_names=names, column_names=columns)


def check_schema(
    schema: SchemaT,
    data: object | None = None,
    *,
    options: CheckOptions | None = None,
) -> SchemaT:
    """Check that `schema` describes a Table Schema and optionally match it to `data`.

    Checks run in order and stop at the first failure:

    1. `schema` is a mapping whose `fields` is a list of mappings.
    2. Every field has a `name` (all unnamed 1-based positions are reported).
    3. Every declared `type` belongs to the Table Schema vocabulary.
    4. `constraints.required` flags are read; absence means not required.
    5. When `data` is given, it must be a DataFrame and each of its column
       names must be the name of a required field.

    Returns the same `schema` object, untouched, when every check passes.
    """
    opts = options or DEFAULT_CHECK_OPTIONS
    spec = decode_schema(schema)
    LOGGER.debug("decoded schema with %d fields", len(spec.fields))

    names = _check_names(spec)
    _check_types(spec)
    required = spec.required_names()

    if data is not None:
        frame = check_data(data)
        columns = column_names(frame)
        _check_columns(
            names,
            required,
            columns,
            bidirectional=opts.bidirectional_columns,
        )
        LOGGER.debug("all %d data columns covered by required fields", len(columns))

    return schema


def is_valid_schema(
    schema: object,
    data: object | None = None,
    *,
    options: CheckOptions | None = None,
) -> bool:
    try:
        check_schema(schema, data, options=options)
    except SchemaValidationError:
        return False
    return True


def field_names(schema: object) -> tuple[str | None, ...]:
    return decode_schema(schema).names


def required_field_names(schema: object) -> tuple[str, ...]:
    return decode_schema(schema).required_names()
