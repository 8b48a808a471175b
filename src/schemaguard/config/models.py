from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

LOG_LEVEL_NAME = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)


class CheckOptions(StrictModel):
    """Options accepted by `check_schema`.

    `bidirectional_columns` additionally fails when a required field has no
    matching dataset column. It is off by default, which keeps the check to
    dataset columns being covered by required field names.
    """

    bidirectional_columns: bool = False
    log_level: LOG_LEVEL_NAME = "WARNING"


DEFAULT_CHECK_OPTIONS = CheckOptions()
