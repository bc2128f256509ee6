# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""DieHard ML package."""

from .inference.predictor import MLPredictor
from .schemas import LikePrediction, MoviePreference

__all__ = ["MoviePreference", "LikePrediction", "MLPredictor"]
