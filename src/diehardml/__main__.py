# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import argparse
from pathlib import Path

from .artifacts import ArtifactError
from .console import MLConsole
from .env import get_bool_env, get_env, get_int_env
from .inference.predictor import DEFAULT_MODEL_FILE, MLPredictor
from .training.dataset import TEST_QUERIES, training_frame
from .training.trainer import DEFAULT_ITERATIONS, DEFAULT_SEED, train_or_retrain

DEFAULT_PIPELINE_FILE = "./diehard-pipeline.zip"


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="diehardml",
        description="Train (or keep training) an averaged perceptron that predicts Die Hard fans.",
    )
    parser.add_argument(
        "--pipeline",
        default=get_env("DIEHARD_PIPELINE_FILE", DEFAULT_PIPELINE_FILE),
        help="Feature pipeline artifact path",
    )
    parser.add_argument(
        "--model",
        default=get_env("DIEHARD_MODEL_FILE", DEFAULT_MODEL_FILE),
        help="Model artifact path",
    )
    parser.add_argument(
        "--iterations",
        type=_positive_int,
        default=max(get_int_env("DIEHARD_ITERATIONS", DEFAULT_ITERATIONS), 1),
        help="Perceptron passes over the data",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=get_int_env("DIEHARD_SEED", DEFAULT_SEED),
        help="Shuffle seed",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        default=get_bool_env("DIEHARD_NO_COLOR", False),
        help="Plain status output without colours or tables",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    console = MLConsole(enabled=not args.quiet)
    if not args.quiet:
        console.banner()

    pipeline_path = Path(args.pipeline)
    model_path = Path(args.model)
    frame = training_frame()

    try:
        outcome = train_or_retrain(
            frame,
            pipeline_path=pipeline_path,
            model_path=model_path,
            iterations=args.iterations,
            seed=args.seed,
        )
    except ArtifactError as exc:
        console.error(str(exc))
        return 1

    if outcome.mode == "fresh":
        console.info(f"Trained a new model on {len(frame)} rows")
    else:
        console.info(f"Retrained saved model (run {outcome.metadata['training_runs']}) on {len(frame)} rows")
    console.success(f"model: {model_path} pipeline: {pipeline_path}")
    if not args.quiet:
        console.metrics_table(outcome.metrics, title="Training set metrics")

    predictor = MLPredictor(outcome.model, metadata=outcome.metadata)
    for query in TEST_QUERIES:
        result = predictor.predict(query)
        print(f"For data {query}\n\tprediction {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
