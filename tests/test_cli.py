"""Tests for the command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from sklearn.compose import ColumnTransformer

from diehardml.__main__ import main, parse_args
from diehardml.artifacts import save_pipeline
from diehardml.features import FEATURES_NAME
from diehardml.training.dataset import training_frame


def _run(pipeline_path: Path, model_path: Path) -> list[str]:
    return ["--pipeline", str(pipeline_path), "--model", str(model_path), "--quiet"]


class TestMain:
    """End-to-end runs of diehardml."""

    def test_prints_two_predictions(
        self, pipeline_path: Path, model_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(_run(pipeline_path, model_path)) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert lines[0] == "For data MoviePreference(star_wars=7.0, armageddon=9.0, sleepless_in_seattle=0.0, likes_die_hard=None)"
        assert lines[1].startswith("\tprediction LikePrediction(prediction=True")
        assert lines[2] == "For data MoviePreference(star_wars=0.0, armageddon=0.0, sleepless_in_seattle=10.0, likes_die_hard=None)"
        assert lines[3].startswith("\tprediction LikePrediction(prediction=False")

    def test_second_run_retrains(
        self, pipeline_path: Path, model_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(_run(pipeline_path, model_path)) == 0
        first = capsys.readouterr()
        assert main(_run(pipeline_path, model_path)) == 0
        second = capsys.readouterr()
        assert "Retrained saved model (run 2)" in second.err
        assert [line.split(",")[0] for line in second.out.splitlines()] == [
            line.split(",")[0] for line in first.out.splitlines()
        ]

    def test_half_pair_exits_with_error(
        self, pipeline_path: Path, model_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pipeline_path.write_bytes(b"stale")
        assert main(_run(pipeline_path, model_path)) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "refusing to train" in captured.err
        assert not model_path.exists()

    def test_env_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIEHARD_MODEL_FILE", str(tmp_path / "m.zip"))
        monkeypatch.setenv("DIEHARD_ITERATIONS", "25")
        monkeypatch.setenv("DIEHARD_NO_COLOR", "yes")
        args = parse_args([])
        assert args.model == str(tmp_path / "m.zip")
        assert args.pipeline == "./diehard-pipeline.zip"
        assert args.iterations == 25
        assert args.seed == 42
        assert args.quiet is True

    def test_flags_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIEHARD_ITERATIONS", "25")
        assert parse_args(["--iterations", "3"]).iterations == 3

    @pytest.mark.parametrize("raw", ["0", "-3", "ten"])
    def test_bad_iterations_is_a_usage_error(self, raw: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            parse_args(["--iterations", raw])
        assert excinfo.value.code == 2
        assert "--iterations" in capsys.readouterr().err


class TestMainArtifactErrors:
    """Saved artifacts that cannot be retrained end the run with code 1."""

    def test_mismatched_pipeline_exits_with_error(
        self, pipeline_path: Path, model_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(_run(pipeline_path, model_path)) == 0
        capsys.readouterr()
        narrow = ColumnTransformer(
            transformers=[(FEATURES_NAME, "passthrough", ["star_wars", "armageddon"])],
            remainder="drop",
            sparse_threshold=0.0,
        ).fit(training_frame())
        save_pipeline(narrow, pipeline_path)

        assert main(_run(pipeline_path, model_path)) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "2 features" in captured.err
