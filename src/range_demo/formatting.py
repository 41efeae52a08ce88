"""Text rendering for views."""

from __future__ import annotations

from typing import Any, Iterable

from lazy_transpose.views import Ints, Transform, View


def get_color(i: int, colorful: bool = False) -> str:
    """Label for ``i``; with ``colorful`` it cycles through red, green and blue."""
    if not colorful:
        return str(i)
    code = 31 + (3 if i % 3 == 2 else i % 3)
    return f"\033[1;{code}m{i}\033[0m"


def colorful_ints(n: int, colorful: bool = False) -> View:
    """Labels ``0 .. n-1``, each padded to three columns."""
    return Transform(
        Ints(0, n), lambda i: get_color(i, colorful) + " " * max(0, 3 - len(str(i)))
    )


def format_view(rng: Any) -> str:
    # [1,2,3], nested as [[1,2],[3]]
    if isinstance(rng, str):
        return rng
    if isinstance(rng, (View, list, tuple, range)):
        return "[" + ",".join(format_view(item) for item in rng) + "]"
    return str(rng)


def format_2d(rows: Iterable[Any]) -> str:
    return "\n".join(format_view(row) for row in rows)
