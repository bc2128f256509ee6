# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import sys
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.table import Table

TITLE = "DieHard ML"
SUBTITLE = "averaged perceptron for Die Hard fans"

# level -> (tag, rich style)
LEVELS = {
    "info": ("INFO", "bold cyan"),
    "warn": ("WARN", "bold yellow"),
    "error": ("ERROR", "bold red"),
    "success": ("OK", "bold green"),
}

COUNT_METRICS = ("tp", "tn", "fp", "fn")


@dataclass
class MLConsole:
    """Status output on stderr; stdout only carries prediction lines."""

    enabled: bool = True

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True, stderr=True) if self.enabled else None

    def _emit(self, level: str, text: str) -> None:
        tag, style = LEVELS[level]
        if self._console:
            self._console.print(f"[{style}]{tag}[/{style}] {escape(text)}")
        else:
            print(f"[{tag}] {text}", file=sys.stderr)

    def banner(self) -> None:
        if self._console:
            self._console.rule(f"[bold cyan]{TITLE}[/bold cyan] [dim]{SUBTITLE}[/dim]")
        else:
            print(f"== {TITLE}: {SUBTITLE} ==", file=sys.stderr)

    def info(self, text: str) -> None:
        self._emit("info", text)

    def warn(self, text: str) -> None:
        self._emit("warn", text)

    def error(self, text: str) -> None:
        self._emit("error", text)

    def success(self, text: str) -> None:
        self._emit("success", text)

    def metrics_table(self, metrics: dict[str, float], *, title: str) -> None:
        rates = {key: value for key, value in metrics.items() if key not in COUNT_METRICS}
        counts = {key: int(metrics[key]) for key in COUNT_METRICS if key in metrics}
        if not self._console:
            print(title, file=sys.stderr)
            for key in sorted(rates):
                print(f"- {key}: {float(rates[key]):.4f}", file=sys.stderr)
            if counts:
                print("- confusion: " + " ".join(f"{key}={value}" for key, value in counts.items()), file=sys.stderr)
            return

        table = Table(title=title, show_lines=False, header_style="bold")
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        for key in sorted(rates):
            table.add_row(key, f"{float(rates[key]):.4f}")
        if counts:
            table.add_section()
            for key, value in counts.items():
                table.add_row(key, str(value))
        self._console.print(table)
