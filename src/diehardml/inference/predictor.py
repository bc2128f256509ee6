# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

from sklearn.pipeline import Pipeline

from ..artifacts import linear_classifier, load_model
from ..features import to_frame
from ..schemas import LikePrediction, MoviePreference

DEFAULT_MODEL_FILE = "./diehard-model.zip"


class MLPredictor:
    def __init__(self, model: Pipeline, *, metadata: dict[str, Any] | None = None) -> None:
        linear_classifier(model)
        self.model = model
        self.metadata: dict[str, Any] = metadata or {}

    @classmethod
    def from_artifact(cls, model_path: Path) -> "MLPredictor":
        model, metadata = load_model(model_path)
        return cls(model, metadata=metadata)

    @property
    def model_version(self) -> str:
        return str(self.metadata.get("model_version") or "unknown")

    def predict(self, record: MoviePreference) -> LikePrediction:
        # The label never reaches the model.
        frame = to_frame([replace(record, likes_die_hard=None)])
        prediction = bool(self.model.predict(frame)[0])
        score = float(self.model.decision_function(frame)[0])
        return LikePrediction(prediction=prediction, score=score)
