# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pandas as pd
from sklearn.linear_model import SGDClassifier
from sklearn.metrics import accuracy_score, confusion_matrix, f1_score, precision_score, recall_score, roc_auc_score
from sklearn.pipeline import Pipeline

from ..artifacts import (
    ModelArtifactError,
    artifacts_state,
    linear_classifier,
    load_model,
    load_pipeline,
    save_model,
    save_pipeline,
)
from ..features import FEATURE_COLUMNS, FEATURES_NAME, LABEL_COLUMN, build_feature_pipeline, labels

DEFAULT_ITERATIONS = 10
DEFAULT_SEED = 42
CLASSIFIER_STEP = "classifier"


@dataclass
class TrainingOutcome:
    model: Pipeline
    mode: str
    metadata: dict[str, Any]
    metrics: dict[str, float] = field(default_factory=dict)


def _timestamp_key() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _build_model(*, iterations: int, seed: int) -> SGDClassifier:
    # Perceptron loss with a constant unit step and averaged weights; tol=None
    # runs exactly ``iterations`` passes.
    return SGDClassifier(
        loss="perceptron",
        penalty=None,
        learning_rate="constant",
        eta0=1.0,
        average=True,
        max_iter=iterations,
        tol=None,
        shuffle=True,
        random_state=seed,
    )


def _safe_auc(y_true: pd.Series, scores: list[float]) -> float:
    try:
        value = float(roc_auc_score(y_true, scores))
    except ValueError:
        return 0.0
    if value != value:  # NaN
        return 0.0
    return value


def _metrics(y_true: pd.Series, y_pred: list[bool], scores: list[float]) -> dict[str, float]:
    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=[False, True]).ravel()
    return {
        "accuracy": float(accuracy_score(y_true, y_pred)),
        "precision": float(precision_score(y_true, y_pred, zero_division=0)),
        "recall": float(recall_score(y_true, y_pred, zero_division=0)),
        "f1": float(f1_score(y_true, y_pred, zero_division=0)),
        "auc": _safe_auc(y_true, scores),
        "tn": float(tn),
        "fp": float(fp),
        "fn": float(fn),
        "tp": float(tp),
    }


def evaluate_model(model: Pipeline, frame: pd.DataFrame) -> dict[str, float]:
    y_true = labels(frame)
    y_pred = [bool(value) for value in model.predict(frame)]
    scores = [float(value) for value in model.decision_function(frame)]
    return _metrics(y_true, y_pred, scores)


def evaluate_saved_model(*, model_path: Path, frame: pd.DataFrame) -> dict[str, float]:
    model, _metadata = load_model(model_path)
    return evaluate_model(model, frame)


def _metadata(
    frame: pd.DataFrame,
    classifier: SGDClassifier,
    *,
    iterations: int,
    seed: int,
    training_runs: int,
    created_at: str | None = None,
) -> dict[str, Any]:
    y = labels(frame)
    now = datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")
    return {
        "model_version": _timestamp_key(),
        "created_at_utc": created_at or now,
        "updated_at_utc": now,
        "training_runs": int(training_runs),
        "rows_total": int(len(frame)),
        "labels_positive": int(y.sum()),
        "labels_negative": int((~y).sum()),
        "iterations": int(iterations),
        "seed": int(seed),
        "features": list(FEATURE_COLUMNS),
        "label": LABEL_COLUMN,
        "weights": [float(value) for value in classifier.coef_[0]],
        "bias": float(classifier.intercept_[0]),
    }


def train_new_model(
    frame: pd.DataFrame,
    *,
    pipeline_path: Path,
    model_path: Path,
    iterations: int = DEFAULT_ITERATIONS,
    seed: int = DEFAULT_SEED,
) -> TrainingOutcome:
    y = labels(frame)
    feature_pipeline = build_feature_pipeline()
    data_pipeline = feature_pipeline.fit(frame)
    save_pipeline(data_pipeline, pipeline_path)

    features = data_pipeline.transform(frame)
    classifier = _build_model(iterations=iterations, seed=seed)
    classifier.fit(features, y)
    model = Pipeline(steps=[(FEATURES_NAME, data_pipeline), (CLASSIFIER_STEP, classifier)])

    metadata = _metadata(frame, classifier, iterations=iterations, seed=seed, training_runs=1)
    save_model(model, metadata, model_path)
    return TrainingOutcome(model=model, mode="fresh", metadata=metadata, metrics=evaluate_model(model, frame))


def retrain_model(
    frame: pd.DataFrame,
    *,
    pipeline_path: Path,
    model_path: Path,
    iterations: int = DEFAULT_ITERATIONS,
    seed: int = DEFAULT_SEED,
) -> TrainingOutcome:
    trained_model, previous = load_model(model_path)
    data_pipeline = load_pipeline(pipeline_path)
    saved = linear_classifier(trained_model)

    y = labels(frame)
    features = data_pipeline.transform(frame)
    if features.shape[1] != saved.coef_.shape[1]:
        raise ModelArtifactError(
            f"Saved pipeline yields {features.shape[1]} features but the saved model expects {saved.coef_.shape[1]}"
        )

    # Warm start: the new fit begins from the previous weights and bias.
    classifier = _build_model(iterations=iterations, seed=seed)
    classifier.fit(features, y, coef_init=saved.coef_.copy(), intercept_init=saved.intercept_.copy())
    model = Pipeline(steps=[(FEATURES_NAME, data_pipeline), (CLASSIFIER_STEP, classifier)])

    training_runs = int(previous.get("training_runs", 1) or 1) + 1
    created_at = previous.get("created_at_utc")
    metadata = _metadata(
        frame,
        classifier,
        iterations=iterations,
        seed=seed,
        training_runs=training_runs,
        created_at=str(created_at) if created_at else None,
    )
    save_model(model, metadata, model_path)
    return TrainingOutcome(model=model, mode="retrain", metadata=metadata, metrics=evaluate_model(model, frame))


def train_or_retrain(
    frame: pd.DataFrame,
    *,
    pipeline_path: Path,
    model_path: Path,
    iterations: int = DEFAULT_ITERATIONS,
    seed: int = DEFAULT_SEED,
) -> TrainingOutcome:
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    state = artifacts_state(pipeline_path, model_path)
    if state == "fresh":
        return train_new_model(frame, pipeline_path=pipeline_path, model_path=model_path, iterations=iterations, seed=seed)
    return retrain_model(frame, pipeline_path=pipeline_path, model_path=model_path, iterations=iterations, seed=seed)
