# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import asdict
from typing import Iterable

import numpy as np
import pandas as pd
from sklearn.compose import ColumnTransformer

from .schemas import MoviePreference

FEATURE_COLUMNS = [
    "star_wars",
    "armageddon",
    "sleepless_in_seattle",
]

LABEL_COLUMN = "likes_die_hard"
FEATURES_NAME = "features"


def to_frame(records: Iterable[MoviePreference]) -> pd.DataFrame:
    rows = [asdict(record) for record in records]
    frame = pd.DataFrame(rows, columns=[*FEATURE_COLUMNS, LABEL_COLUMN])
    for column in FEATURE_COLUMNS:
        frame[column] = frame[column].astype(np.float32)
    return frame


def labels(frame: pd.DataFrame) -> pd.Series:
    if LABEL_COLUMN not in frame.columns or frame[LABEL_COLUMN].isna().any():
        raise ValueError(f"Every training row needs a boolean '{LABEL_COLUMN}' value")
    return frame[LABEL_COLUMN].astype(bool)


def build_feature_pipeline() -> ColumnTransformer:
    # Concatenates the rating columns, in order, into one float vector.
    return ColumnTransformer(
        transformers=[(FEATURES_NAME, "passthrough", list(FEATURE_COLUMNS))],
        remainder="drop",
        sparse_threshold=0.0,
    )
