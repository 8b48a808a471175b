from __future__ import annotations

from pathlib import Path
from typing import Any

from schemaguard.config.models import CheckOptions
from schemaguard.errors import ConfigValidationError

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

_SECTION = "schemaguard"


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigValidationError(f"cannot read config file '{path}': {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigValidationError(f"invalid TOML in '{path}': {exc}") from exc


def load_check_options(path: str | Path) -> CheckOptions:
    config_path = Path(path).expanduser().resolve()
    raw = _read_toml(config_path)
    section = raw.get(_SECTION, raw)
    if not isinstance(section, dict):
        raise ConfigValidationError(f"'{_SECTION}' must be a table in '{config_path}'")
    try:
        return CheckOptions.model_validate(section)
    except Exception as exc:  # pydantic ValidationError
        raise ConfigValidationError(
            f"invalid check options '{config_path}': {exc}"
        ) from exc
