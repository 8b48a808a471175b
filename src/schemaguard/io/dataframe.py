from __future__ import annotations

import logging
from typing import Hashable, Union

import pandas as pd
import polars as pl

from schemaguard.errors import DataInvalidError

LOGGER = logging.getLogger(__name__)

DataFrameLike = Union[pd.DataFrame, pl.DataFrame]


def check_data(data: object) -> DataFrameLike:
    """Return `data` unchanged when it is a pandas or polars DataFrame."""
    if isinstance(data, (pd.DataFrame, pl.DataFrame)):
        return data
    raise DataInvalidError(received_type=type(data).__name__)


def column_names(data: DataFrameLike) -> tuple[Hashable, ...]:
    names = tuple(data.columns)
    if not names:
        LOGGER.warning("data has no columns; nothing to cross-check")
    return names
