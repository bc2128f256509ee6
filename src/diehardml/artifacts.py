# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Persistence of the feature pipeline and the trained model.

Both artifacts are joblib payloads tagged with a format name, a kind and a
version, so a file written by something else is rejected on load instead of
failing later inside scikit-learn.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import joblib
from sklearn.compose import ColumnTransformer
from sklearn.linear_model import SGDClassifier
from sklearn.pipeline import Pipeline

ARTIFACT_FORMAT = "diehardml"
ARTIFACT_VERSION = 1
PIPELINE_KIND = "pipeline"
MODEL_KIND = "model"
METADATA_FILENAME = "diehard-metadata.json"


class ArtifactError(RuntimeError):
    pass


class IncompleteArtifactsError(ArtifactError):
    def __init__(self, present: Path, missing: Path) -> None:
        super().__init__(f"Found {present} but not {missing}: refusing to train on half a saved model")
        self.present = present
        self.missing = missing


class ModelArtifactError(ArtifactError):
    pass


def artifacts_state(pipeline_path: Path, model_path: Path) -> str:
    """Return ``"fresh"`` when neither file exists, ``"existing"`` when both do."""
    has_pipeline = pipeline_path.exists()
    has_model = model_path.exists()
    if has_pipeline and has_model:
        return "existing"
    if not has_pipeline and not has_model:
        return "fresh"
    if has_pipeline:
        raise IncompleteArtifactsError(present=pipeline_path, missing=model_path)
    raise IncompleteArtifactsError(present=model_path, missing=pipeline_path)


def metadata_path_for(model_path: Path) -> Path:
    return model_path.with_name(METADATA_FILENAME)


def save_pipeline(pipeline: ColumnTransformer, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "format": ARTIFACT_FORMAT,
        "kind": PIPELINE_KIND,
        "version": ARTIFACT_VERSION,
        "pipeline": pipeline,
    }
    joblib.dump(payload, path)


def save_model(model: Pipeline, metadata: dict[str, Any], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "format": ARTIFACT_FORMAT,
        "kind": MODEL_KIND,
        "version": ARTIFACT_VERSION,
        "model": model,
        "metadata": dict(metadata),
    }
    joblib.dump(payload, path)
    metadata_path_for(path).write_text(json.dumps(metadata, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")


def _load_payload(path: Path, *, kind: str) -> dict[str, Any]:
    payload = joblib.load(path)
    if not isinstance(payload, dict) or payload.get("format") != ARTIFACT_FORMAT:
        raise ModelArtifactError(f"{path} is not a {ARTIFACT_FORMAT} artifact")
    if payload.get("kind") != kind:
        raise ModelArtifactError(f"{path} holds a {payload.get('kind')!r} artifact, expected {kind!r}")
    version = payload.get("version")
    if version != ARTIFACT_VERSION:
        raise ModelArtifactError(f"{path} has artifact version {version!r}, expected {ARTIFACT_VERSION}")
    return payload


def load_pipeline(path: Path) -> ColumnTransformer:
    payload = _load_payload(path, kind=PIPELINE_KIND)
    pipeline = payload.get("pipeline")
    if not isinstance(pipeline, ColumnTransformer):
        raise ModelArtifactError(f"{path} does not contain a fitted feature pipeline")
    return pipeline


def linear_classifier(model: Any) -> SGDClassifier:
    """Return the perceptron at the end of ``model`` or raise ``ModelArtifactError``."""
    if not isinstance(model, Pipeline) or not model.steps:
        raise ModelArtifactError("Saved model is not a scikit-learn pipeline")
    classifier = model.steps[-1][1]
    if not isinstance(classifier, SGDClassifier) or classifier.loss != "perceptron":
        raise ModelArtifactError(f"Last pipeline step is {type(classifier).__name__}, expected a perceptron")
    coef = getattr(classifier, "coef_", None)
    intercept = getattr(classifier, "intercept_", None)
    if coef is None or intercept is None:
        raise ModelArtifactError("Perceptron in the saved model was never fitted")
    if coef.ndim != 2 or coef.shape[0] != 1 or intercept.shape != (1,):
        raise ModelArtifactError(f"Expected a single linear binary classifier, got weights of shape {coef.shape}")
    return classifier


def load_model(path: Path) -> tuple[Pipeline, dict[str, Any]]:
    payload = _load_payload(path, kind=MODEL_KIND)
    model = payload.get("model")
    linear_classifier(model)
    metadata = payload.get("metadata")
    return model, dict(metadata) if isinstance(metadata, dict) else {}
