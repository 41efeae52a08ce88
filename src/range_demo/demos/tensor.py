"""4D "transpose" of a synthetic batch of images."""

from __future__ import annotations

from typing import Sequence

from lazy_transpose import chunk, transpose4d
from lazy_transpose.views import View

from ..formatting import colorful_ints
from .base import Demo, DemoContext


def nest(flat: Sequence, height: int, width: int, depth: int) -> View:
    """View ``flat`` as ``[b,h,w,d]``; ``b`` follows from its length."""
    return flat | chunk(depth) | chunk(width) | chunk(height)


def _run(ctx: DemoContext) -> None:
    cfg = ctx.config
    labels = colorful_ints(cfg.batch * cfg.height * cfg.width * cfg.depth, cfg.colorful)
    tensor = nest(labels, cfg.height, cfg.width, cfg.depth)
    ctx.print(
        f"A batch of {cfg.batch} images of {cfg.height}x{cfg.width} pixels "
        f"with {cfg.depth} channels."
    )
    for image in tensor:
        ctx.print_2d(image)
    ctx.print("And its 'transpose'")
    for depth_slice in transpose4d(tensor):
        ctx.print_2d(depth_slice)


demo = Demo(slug="tensor", title="4d 'transpose'", runner=_run)
