from __future__ import annotations

from schemaguard.io.dataframe import DataFrameLike, check_data, column_names

__all__ = ["DataFrameLike", "check_data", "column_names"]
