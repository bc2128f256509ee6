"""Tests for the status console."""

from __future__ import annotations

import pytest

from diehardml.console import MLConsole


class TestPlainConsole:
    """With rich disabled, status lines still go to stderr."""

    def test_levels_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = MLConsole(enabled=False)
        console.info("loaded")
        console.error("broken [file]")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.splitlines() == ["[INFO] loaded", "[ERROR] broken [file]"]

    def test_metrics_split_rates_and_counts(self, capsys: pytest.CaptureFixture[str]) -> None:
        MLConsole(enabled=False).metrics_table({"accuracy": 1.0, "tp": 50.0, "tn": 50.0, "fp": 0.0, "fn": 0.0}, title="m")
        lines = capsys.readouterr().err.splitlines()
        assert lines == ["m", "- accuracy: 1.0000", "- confusion: tp=50 tn=50 fp=0 fn=0"]


class TestRichConsole:
    def test_markup_in_messages_is_escaped(self, capsys: pytest.CaptureFixture[str]) -> None:
        MLConsole(enabled=True).error("missing [bold]model[/bold]")
        err = capsys.readouterr().err
        assert "[bold]model[/bold]" in err
        assert "ERROR" in err
