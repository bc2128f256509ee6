# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MoviePreference:
    star_wars: float
    armageddon: float
    sleepless_in_seattle: float
    likes_die_hard: bool | None = None


@dataclass(frozen=True, slots=True)
class LikePrediction:
    prediction: bool
    score: float = 0.0
