"""Dimension-reordering views over nested sequences.

Both combinators borrow their input: they build a chain of views over the
flattened source and read no element until the result is iterated.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .shape import validate_shape
from .views import Chunk, Drop, Ints, Join, Stride, Transform, View, ViewClosure

logger = logging.getLogger(__name__)


def _transpose(rows: Sequence[Sequence[Any]], strict: bool = False) -> View:
    """Return the columns of ``rows`` as a lazy view.

    Column ``i`` is ``flat[i], flat[i + W], ..., flat[i + (H - 1) * W]``
    where ``flat`` joins the ``H`` rows of width ``W`` in row-major order.

    Only ``rows[0]`` is visited while the view is built. All rows must have
    the width of ``rows[0]``; ``strict=True`` checks that up front at O(H)
    cost.
    """
    height, width = validate_shape(rows, 2, strict=strict)
    logger.debug("transpose [%d,%d] -> [%d,%d]", height, width, width, height)
    flat = Join(rows)
    return Transform(Ints(0, width), lambda i: Stride(Drop(flat, i), width))


def _transpose4d(tensor: Sequence[Any], strict: bool = False) -> View:
    """Reorder a ``[b,h,w,d]`` nesting into ``[d,h,w,b]``.

    Each depth slice reuses the 2D transpose: the channel values are strided
    out of the flat tensor, regrouped per image and transposed so that each
    ``(h, w)`` cell holds one value per batch item.

    Construction probes element ``[0]`` at each level only, so every image,
    row and pixel must match those extents unless ``strict=True`` is given.
    """
    batch, height, width, depth = validate_shape(tensor, 4, strict=strict)
    logger.debug(
        "transpose4d [%d,%d,%d,%d] -> [%d,%d,%d,%d]",
        batch, height, width, depth, depth, height, width, batch,
    )
    flat = Join(Join(Join(tensor)))  # [b*h*w*d]

    def depth_slice(d: int) -> View:
        plane = Stride(Drop(flat, d), depth)  # [b*h*w]
        cells = _transpose(Chunk(plane, height * width), strict=False)  # [h*w,b]
        return Chunk(cells, width)  # [h,w,b]

    return Transform(Ints(0, depth), depth_slice)  # [d,h,w,b]


transpose = ViewClosure(_transpose)
transpose4d = ViewClosure(_transpose4d)
