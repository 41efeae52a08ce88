"""Slicing, striding, chunking and reductions on integer views."""

from __future__ import annotations

from lazy_transpose import chunk, distance, drop, inner_product, ints, join, stride, transform

from ..formatting import format_view
from .base import Demo, DemoContext


def _run(ctx: DemoContext) -> None:
    x = ints(1, 5 + 1)
    ctx.print(x)  # [1,2,3,4,5]
    ctx.print(x | drop(2))  # [3,4,5]
    ctx.print(x | stride(2))  # [1,3,5]
    ctx.print(x | transform(lambda xi: 2 * xi))  # [2,4,6,8,10]
    ctx.print_2d(x | chunk(2))  # [1,2] [3,4] [5]
    ctx.print(x | chunk(2) | join)  # [1,2,3,4,5]

    y = [1, 2, 3, 4]
    ctx.print(inner_product(x, y, -0.5))  # 29.5
    ctx.echo(str(distance(y)))  # 4

    # views are immutable, so this one can be shared freely
    z = ints(0, 5) | chunk(2)
    ctx.echo(format_view(z))


demo = Demo(slug="basics", title="Initial examples", runner=_run)
