"""Errors raised when a nested sequence cannot be reinterpreted."""

from __future__ import annotations

from typing import Tuple


class ShapeError(ValueError):
    """A nested sequence does not have the shape a view expects."""


class EmptyInputError(ShapeError):
    def __init__(self, message: str = "empty input has no defined transpose") -> None:
        super().__init__(message)


class RaggedShapeError(ShapeError):
    """Nested lengths differ from the extents probed from element ``[0]``."""

    def __init__(self, path: Tuple[int, ...], expected: int, actual: int) -> None:
        self.path = path
        self.expected = expected
        self.actual = actual
        where = "".join(f"[{i}]" for i in path) or "<root>"
        super().__init__(
            f"ragged input at {where}: expected length {expected}, got {actual}"
        )
