"""Lazy, copy-free views for reshaping and transposing nested sequences."""

from importlib.metadata import PackageNotFoundError, version

from .algorithms import distance, inner_product, matmul
from .errors import EmptyInputError, RaggedShapeError, ShapeError
from .shape import probe_shape, validate_shape
from .transpose import transpose, transpose4d
from .views import (
    Chunk,
    Drop,
    Ints,
    Join,
    Stride,
    Take,
    Transform,
    View,
    ViewClosure,
    chunk,
    drop,
    ints,
    join,
    materialize,
    stride,
    take,
    transform,
)

try:  # pragma: no cover - best effort during editable installs
    __version__ = version("lazy-transpose")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "Chunk",
    "Drop",
    "EmptyInputError",
    "Ints",
    "Join",
    "RaggedShapeError",
    "ShapeError",
    "Stride",
    "Take",
    "Transform",
    "View",
    "ViewClosure",
    "chunk",
    "distance",
    "drop",
    "inner_product",
    "ints",
    "join",
    "materialize",
    "matmul",
    "probe_shape",
    "stride",
    "take",
    "transform",
    "transpose",
    "transpose4d",
    "validate_shape",
]
