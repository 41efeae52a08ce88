"""Command-line interface for the lazy view demos."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import numpy as np
import typer

from lazy_transpose import ShapeError, ints, transpose4d
from lazy_transpose.reference import dense_transpose4d, to_array
from range_demo import log
from range_demo.config import DemoConfig, normalize_level
from range_demo.demos import DEMOS, Demo, DemoContext
from range_demo.demos.tensor import nest

app = typer.Typer(help="Print examples of lazy, copy-free sequence views.")

logger = logging.getLogger(__name__)


def _load_config(**overrides) -> DemoConfig:
    try:
        return DemoConfig.from_env().with_overrides(**overrides)
    except ValueError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _pick_demo(slug: str) -> Demo:
    try:
        return DEMOS[slug]
    except KeyError as exc:
        known = ", ".join(DEMOS)
        typer.echo(f"Unknown demo '{slug}'. Known slugs: {known}")
        raise typer.Exit(code=1) from exc


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also append logs to this file."),
) -> None:
    config = _load_config()
    level = logging.DEBUG if verbose else normalize_level(config.log_level)
    log.configure(level=level, log_file=log_file)


@app.command()
def list() -> None:
    """List all available demos."""
    for demo in DEMOS.values():
        typer.echo(f"- {demo.slug}: {demo.title}")


@app.command()
def run(
    slug: Optional[str] = typer.Argument(None, help="Demo slug; every demo if omitted."),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Colour the tensor labels."),
) -> None:
    """Run one demo, or all of them in order."""
    demos = [_pick_demo(slug)] if slug is not None else [*DEMOS.values()]
    context = DemoContext(stdin=sys.stdin, config=_load_config(colorful=color))
    for demo in demos:
        logger.info("running demo %s", demo.slug)
        try:
            demo.run(context)
        except ShapeError as exc:
            typer.echo(f"❌ {demo.slug}: {exc}", err=True)
            raise typer.Exit(code=1) from exc


@app.command("transpose4d")
def transpose4d_command(
    batch: Optional[int] = typer.Option(None, "--batch", "-b", min=1),
    height: Optional[int] = typer.Option(None, "--height", "-h", min=1),
    width: Optional[int] = typer.Option(None, "--width", "-w", min=1),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", min=1),
    color: Optional[bool] = typer.Option(None, "--color/--no-color"),
) -> None:
    """Print a synthetic [b,h,w,d] tensor and its [d,h,w,b] reorder."""
    config = _load_config(
        batch=batch, height=height, width=width, depth=depth, colorful=color
    )
    DEMOS["tensor"].run(DemoContext(config=config))


@app.command()
def check(
    batch: Optional[int] = typer.Option(None, "--batch", "-b", min=1),
    height: Optional[int] = typer.Option(None, "--height", "-h", min=1),
    width: Optional[int] = typer.Option(None, "--width", "-w", min=1),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", min=1),
) -> None:
    """Compare the lazy 4D reorder against a dense JAX transpose."""
    config = _load_config(batch=batch, height=height, width=width, depth=depth)
    size = config.batch * config.height * config.width * config.depth
    tensor = nest(ints(0, size), config.height, config.width, config.depth)
    lazy = to_array(transpose4d(tensor))
    dense = np.asarray(dense_transpose4d(tensor))
    logger.debug("compared %d elements in shape %s", size, config.shape)
    if lazy.shape != dense.shape or not np.array_equal(lazy, dense):
        typer.echo(f"❌ Mismatch for shape {config.shape}.")
        raise typer.Exit(code=1)
    typer.echo(f"✅ {size} elements match for shape {config.shape}.")


def main(argv: Optional[list[str]] = None) -> None:
    app(argv or sys.argv[1:])


if __name__ == "__main__":  # pragma: no cover
    main()
