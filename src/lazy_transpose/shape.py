"""Shape probing and validation for nested sequences."""

from __future__ import annotations

import logging
from typing import Any, Tuple

from .errors import EmptyInputError, RaggedShapeError, ShapeError

logger = logging.getLogger(__name__)

Shape = Tuple[int, ...]


def _extent(level: Any, path: Tuple[int, ...], rank: int) -> int:
    try:
        return len(level)
    except TypeError as exc:
        raise ShapeError(
            f"expected a rank-{rank} nested sequence, found {type(level).__name__} "
            f"at depth {len(path)}; sources must be random-access sequences"
        ) from exc


def probe_shape(rng: Any, rank: int) -> Shape:
    """Return the extents of ``rng`` measured along element ``[0]`` only.

    Only ``rank - 1`` rows are visited and no leaf value is read. Axes past
    the first empty one are reported as ``0``.
    """
    if rank < 1:
        raise ValueError(f"rank must be at least 1, got {rank}")
    extents = []
    level = rng
    for axis in range(rank):
        extent = _extent(level, (0,) * axis, rank)
        extents.append(extent)
        if extent == 0:
            extents.extend([0] * (rank - axis - 1))
            break
        if axis + 1 < rank:
            level = level[0]
    return tuple(extents)


def check_uniform(rng: Any, shape: Shape, path: Tuple[int, ...] = ()) -> None:
    """Raise :class:`RaggedShapeError` unless every nested length matches ``shape``.

    Lengths are compared with ``len()``; leaf values are never read.
    """
    actual = _extent(rng, path, len(path) + len(shape))
    if actual != shape[0]:
        raise RaggedShapeError(path, shape[0], actual)
    if len(shape) > 1:
        for index, item in enumerate(rng):
            check_uniform(item, shape[1:], path + (index,))


def validate_shape(rng: Any, rank: int, strict: bool = False) -> Shape:
    """Probe the shape of ``rng`` and reject inputs with no defined layout.

    Empty input raises :class:`EmptyInputError` and any other zero extent
    raises :class:`ShapeError`. Both checks look at element ``[0]`` of each
    level only, so the cost is O(rank). Uniform nested lengths are then the
    caller's obligation: ragged input is read best-effort using the extents
    of element ``[0]``. Pass ``strict=True`` to walk the whole nesting and
    raise :class:`RaggedShapeError` instead; that visits every row.
    """
    shape = probe_shape(rng, rank)
    if shape[0] == 0:
        raise EmptyInputError()
    if 0 in shape:
        raise ShapeError(f"zero-length dimension in shape {shape}")
    if strict:
        check_uniform(rng, shape)
    logger.debug("validated rank-%d shape %s (strict=%s)", rank, shape, strict)
    return shape
