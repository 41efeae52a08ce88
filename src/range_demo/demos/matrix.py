"""Matrix transpose and matrix product built from views."""

from __future__ import annotations

from lazy_transpose import chunk, drop, inner_product, ints, join, matmul, stride, transform

from .base import Demo, DemoContext


def _run_transpose(ctx: DemoContext) -> None:
    x = ints(1, 5 + 1)
    w = ints(1, 2 * 5 + 1) | chunk(5)
    ctx.print(w | transform(lambda r: inner_product(r, x, 0)))  # [55,130]

    w = ints(1, 3 * 2 + 1) | chunk(2)
    columns = ints(0, 2) | transform(
        # join the rows, shift column i to the front, then take every 2nd item
        lambda i: w | join | drop(i) | stride(2)
    )
    ctx.print_2d(columns)  # [1,3,5] [2,4,6]


def _run_product(ctx: DemoContext) -> None:
    x = ints(1, 2 * 3 + 1) | chunk(3)
    w = ints(1, 3 * 2 + 1) | chunk(2)
    ctx.print_2d(matmul(x, w))  # [22,28] [49,64]


transpose_demo = Demo(slug="matrix", title="Matrix transpose", runner=_run_transpose)
product_demo = Demo(slug="product", title="Matrix Product", runner=_run_product)
