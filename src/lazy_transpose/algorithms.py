"""Reductions and products over lazy views."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, Iterable, Sequence

from .errors import ShapeError
from .shape import validate_shape
from .transpose import transpose
from .views import Transform, View


def distance(rng: Iterable[Any]) -> int:
    """Number of elements in ``rng``; unsized iterables are consumed to count."""
    if isinstance(rng, Sized):
        return len(rng)
    return sum(1 for _ in rng)


def inner_product(a: Iterable[Any], b: Iterable[Any], init: Any = 0) -> Any:
    """``init`` plus the pairwise products of ``a`` and ``b`` up to the shorter."""
    total = init
    for x, y in zip(a, b):
        total = total + x * y
    return total


def matmul(x: Sequence[Sequence[Any]], w: Sequence[Sequence[Any]]) -> View:
    """Lazy matrix product: each cell is a row of ``x`` dotted with a column of ``w``."""
    _, inner = validate_shape(x, 2)
    rows, _ = validate_shape(w, 2)
    if inner != rows:
        raise ShapeError(f"cannot multiply [*,{inner}] by [{rows},*]")
    columns = transpose(w)
    return Transform(
        x, lambda row: Transform(columns, lambda col: inner_product(row, col, 0))
    )
