"""Shared demo definition infrastructure."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, TextIO

import typer

from range_demo.config import DemoConfig
from range_demo.formatting import format_2d, format_view


@dataclass
class DemoContext:
    echo: Callable[[str], None] = typer.echo
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    config: DemoConfig = field(default_factory=DemoConfig)

    def print(self, rng: Any) -> None:
        self.echo(format_view(rng))
        self.echo("")

    def print_2d(self, rows: Iterable[Any]) -> None:
        self.echo(format_2d(rows))
        self.echo("")


DemoRunner = Callable[[DemoContext], None]


@dataclass(frozen=True)
class Demo:
    slug: str
    title: str
    runner: DemoRunner

    def render_header(self) -> str:
        return f"------------- {self.title} -------------"

    def run(self, context: DemoContext) -> None:
        context.print(self.render_header())
        self.runner(context)
