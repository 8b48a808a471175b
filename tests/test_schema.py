from __future__ import annotations

from collections import UserList

import numpy as np
import pytest

from schemaguard.errors import SchemaInvalidError
from schemaguard.schema import (
    FIELD_TYPES,
    FieldConstraints,
    FieldSpec,
    TableSchemaSpec,
    decode_schema,
)


def test_field_types_vocabulary_is_closed() -> None:
    assert FIELD_TYPES == (
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
    )


def test_decode_schema_models_absent_keys_as_none() -> None:
    spec = decode_schema({"fields": [{"name": "a"}, {"type": "string", "constraints": {}}]})
    assert spec.fields == (
        FieldSpec(position=1, name="a", type=None, constraints=None),
        FieldSpec(
            position=2,
            name=None,
            type="string",
            constraints=FieldConstraints(required=None),
        ),
    )


def test_decode_schema_preserves_field_order() -> None:
    spec = decode_schema({"fields": [{"name": name} for name in ("z", "a", "m")]})
    assert spec.names == ("z", "a", "m")
    assert [field.position for field in spec.fields] == [1, 2, 3]


def test_decode_schema_ignores_extra_schema_keys() -> None:
    spec = decode_schema({"fields": [{"name": "a"}], "primaryKey": "a", "missingValues": [""]})
    assert spec.names == ("a",)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (True, True),
        (False, False),
        (np.bool_(True), True),
        (1, True),
        (0, False),
        ("true", True),
        (" TRUE ", True),
        ("False", False),
        ("yes", False),
        (7, False),
        (None, None),
    ],
)
def test_decode_schema_boolean_like_required(raw: object, expected: bool | None) -> None:
    spec = decode_schema({"fields": [{"name": "a", "constraints": {"required": raw}}]})
    constraints = spec.fields[0].constraints
    assert constraints is not None
    assert constraints.required is expected
    assert spec.required_flags == (bool(expected),)


def test_decode_schema_non_mapping_constraints_are_absent() -> None:
    spec = decode_schema({"fields": [{"name": "a", "constraints": ["required"]}]})
    assert spec.fields[0].constraints is None
    assert spec.required_flags == (False,)


def test_decode_schema_stringifies_non_string_name_and_type() -> None:
    spec = decode_schema({"fields": [{"name": 3, "type": 5}]})
    assert spec.names == ("3",)
    assert spec.invalid_types() == ("5",)


@pytest.mark.parametrize(
    "schema",
    [[], {"fields": "abc"}, {"fields": b"abc"}, {"fields": [1]}, {"field": []}],
)
def test_decode_schema_rejects_bad_shape(schema: object) -> None:
    with pytest.raises(SchemaInvalidError):
        decode_schema(schema)


def test_table_schema_spec_accessors() -> None:
    spec = TableSchemaSpec(
        fields=(
            FieldSpec(position=1, name="a", type="bogus", constraints=FieldConstraints(True)),
            FieldSpec(position=2, name=None, type="bogus"),
            FieldSpec(position=3, name="c", type="integer", constraints=FieldConstraints(False)),
            FieldSpec(position=4, name="d"),
        )
    )
    assert spec.unnamed_positions() == (2,)
    assert spec.invalid_types() == ("bogus",)
    assert spec.required_flags == (True, False, False, False)
    assert spec.required_names() == ("a",)
    assert spec.fields[3].has_valid_type
    assert not spec.fields[0].has_valid_type


def test_decode_schema_accepts_any_sequence_of_field_mappings() -> None:
    spec = decode_schema({"fields": UserList([{"name": "a"}, {"name": "b", "type": "year"}])})
    assert spec.names == ("a", "b")


@pytest.mark.parametrize("fields", [bytearray(b"ab"), {"name": "a"}, range(2)])
def test_decode_schema_rejects_non_list_like_fields(fields: object) -> None:
    with pytest.raises(SchemaInvalidError):
        decode_schema({"fields": fields})
