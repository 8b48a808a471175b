from __future__ import annotations

import os
from typing import Any

import pandas as pd
import polars as pl
import pytest
from hypothesis import HealthCheck, settings


settings.register_profile(
    "ci_smoke",
    max_examples=30,
    derandomize=True,
    deadline=None,
    suppress_health_check=(HealthCheck.too_slow,),
)
settings.register_profile(
    "nightly_deep",
    max_examples=300,
    derandomize=True,
    deadline=None,
    suppress_health_check=(HealthCheck.too_slow,),
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci_smoke"))


@pytest.fixture()
def valid_schema() -> dict[str, Any]:
    return {
        "fields": [
            {"name": "id", "type": "integer", "constraints": {"required": True}},
            {"name": "species", "type": "string", "constraints": {"required": True}},
            {"name": "observed_at", "type": "datetime"},
            {"name": "notes"},
        ]
    }


@pytest.fixture()
def observations_pd() -> pd.DataFrame:
    return pd.DataFrame({"id": [1, 2], "species": ["Anas platyrhynchos", "Ardea cinerea"]})


@pytest.fixture()
def observations_pl() -> pl.DataFrame:
    return pl.DataFrame({"id": [1, 2], "species": ["Anas platyrhynchos", "Ardea cinerea"]})


@pytest.fixture(params=["pandas", "polars"])
def frame_factory(request: pytest.FixtureRequest):
    def _build(columns: list[str]) -> pd.DataFrame | pl.DataFrame:
        payload = {column: [1] for column in columns}
        if request.param == "pandas":
            return pd.DataFrame(payload)
        return pl.DataFrame(payload)

    return _build
