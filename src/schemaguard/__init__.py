from __future__ import annotations

from importlib import import_module

from schemaguard.__about__ import __version__

__all__ = [
    "check_schema",
    "is_valid_schema",
    "field_names",
    "required_field_names",
    "check_data",
    "decode_schema",
    "FIELD_TYPES",
    "TableSchemaSpec",
    "FieldSpec",
    "FieldConstraints",
    "CheckOptions",
    "load_check_options",
    "configure_logging",
    "SchemaGuardError",
    "SchemaValidationError",
    "SchemaInvalidError",
    "FieldsWithoutNameError",
    "FieldsTypeInvalidError",
    "FieldsColnamesMismatchError",
    "DataInvalidError",
    "ConfigValidationError",
    "__version__",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "check_schema": ("schemaguard.check", "check_schema"),
    "is_valid_schema": ("schemaguard.check", "is_valid_schema"),
    "field_names": ("schemaguard.check", "field_names"),
    "required_field_names": ("schemaguard.check", "required_field_names"),
    "check_data": ("schemaguard.io", "check_data"),
    "decode_schema": ("schemaguard.schema", "decode_schema"),
    "FIELD_TYPES": ("schemaguard.schema", "FIELD_TYPES"),
    "TableSchemaSpec": ("schemaguard.schema", "TableSchemaSpec"),
    "FieldSpec": ("schemaguard.schema", "FieldSpec"),
    "FieldConstraints": ("schemaguard.schema", "FieldConstraints"),
    "CheckOptions": ("schemaguard.config", "CheckOptions"),
    "load_check_options": ("schemaguard.config", "load_check_options"),
    "configure_logging": ("schemaguard.logging_config", "configure_logging"),
    "SchemaGuardError": ("schemaguard.errors", "SchemaGuardError"),
    "SchemaValidationError": ("schemaguard.errors", "SchemaValidationError"),
    "SchemaInvalidError": ("schemaguard.errors", "SchemaInvalidError"),
    "FieldsWithoutNameError": ("schemaguard.errors", "FieldsWithoutNameError"),
    "FieldsTypeInvalidError": ("schemaguard.errors", "FieldsTypeInvalidError"),
    "FieldsColnamesMismatchError": ("schemaguard.errors", "FieldsColnamesMismatchError"),
    "DataInvalidError": ("schemaguard.errors", "DataInvalidError"),
    "ConfigValidationError": ("schemaguard.errors", "ConfigValidationError"),
}

_SUBMODULES = {
    "check",
    "config",
    "errors",
    "io",
    "schema",
}


def __getattr__(name: str) -> object:
    if name in _SUBMODULES:
        module = import_module(f"schemaguard.{name}")
        globals()[name] = module
        return module

    target = _LAZY_IMPORTS.get(name)
    if target is None:
        raise AttributeError(f"module 'schemaguard' has no attribute '{name}'")
    module_name, attr_name = target
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(__all__))
