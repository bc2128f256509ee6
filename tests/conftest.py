"""Shared fixtures for the DieHard ML tests."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from diehardml.training.dataset import training_frame


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DIEHARD_PIPELINE_FILE",
        "DIEHARD_MODEL_FILE",
        "DIEHARD_ITERATIONS",
        "DIEHARD_SEED",
        "DIEHARD_NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def frame() -> pd.DataFrame:
    return training_frame()


@pytest.fixture
def pipeline_path(tmp_path: Path) -> Path:
    return tmp_path / "diehard-pipeline.zip"


@pytest.fixture
def model_path(tmp_path: Path) -> Path:
    return tmp_path / "diehard-model.zip"
