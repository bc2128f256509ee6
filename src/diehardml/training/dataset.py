# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import pandas as pd

from ..features import to_frame
from ..schemas import MoviePreference

DEFAULT_COPIES = 50

TEST_QUERIES = (
    MoviePreference(star_wars=7.0, armageddon=9.0, sleepless_in_seattle=0.0),
    MoviePreference(star_wars=0.0, armageddon=0.0, sleepless_in_seattle=10.0),
)


def fan_exemplar() -> MoviePreference:
    return MoviePreference(star_wars=8.0, armageddon=10.0, sleepless_in_seattle=1.0, likes_die_hard=True)


def hater_exemplar() -> MoviePreference:
    return MoviePreference(star_wars=1.0, armageddon=1.0, sleepless_in_seattle=9.0, likes_die_hard=False)


def build_training_samples(copies: int = DEFAULT_COPIES) -> list[MoviePreference]:
    if copies < 1:
        raise ValueError(f"copies must be positive, got {copies}")
    return [fan_exemplar()] * copies + [hater_exemplar()] * copies


def training_frame(copies: int = DEFAULT_COPIES) -> pd.DataFrame:
    return to_frame(build_training_samples(copies))
