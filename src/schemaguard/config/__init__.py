from __future__ import annotations

from schemaguard.config.loaders import load_check_options
from schemaguard.config.models import DEFAULT_CHECK_OPTIONS, CheckOptions

__all__ = [
    "CheckOptions",
    "DEFAULT_CHECK_OPTIONS",
    "load_check_options",
]
