"""Single-pass integer streams read from a text stream."""

from __future__ import annotations

from typing import Iterator, TextIO

from lazy_transpose import distance

from .base import Demo, DemoContext


def read_ints(stream: TextIO) -> Iterator[int]:
    """Yield whitespace-separated integers until a token fails to parse.

    The rest of the line holding the bad token is discarded.
    """
    for line in stream:
        for token in line.split():
            try:
                value = int(token)
            except ValueError:
                return
            yield value


def _run(ctx: DemoContext) -> None:
    ctx.print("Enter integers until you get bored. Then enter something else to exit the loop.")
    # a stream can only be walked once, so counting it consumes it
    ctx.echo(f"stream length:{distance(read_ints(ctx.stdin))}")
    ctx.print("Do it again.")
    for value in read_ints(ctx.stdin):
        ctx.echo(f"In loop:{value}")


demo = Demo(slug="stream", title="Integer stream", runner=_run)
