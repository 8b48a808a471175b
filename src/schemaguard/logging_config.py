from __future__ import annotations

import logging

from pydantic import ValidationError

from schemaguard.config.models import CheckOptions
from schemaguard.errors import ConfigValidationError

PACKAGE_LOGGER = "schemaguard"


def configure_logging(options: CheckOptions | str) -> logging.Logger:
    """Apply the configured level to the `schemaguard` logger and return it."""
    if isinstance(options, str):
        try:
            options = CheckOptions(log_level=options.strip().upper())
        except ValidationError as exc:
            raise ConfigValidationError(f"invalid log level '{options}': {exc}") from exc
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(options.log_level)
    return logger
