"""Dense reference implementations implemented with JAX primitives.

These materialize their input and are only meant for cross-checking the
lazy views.
"""

from __future__ import annotations

from typing import Any, Optional

import jax.numpy as jnp
import numpy as np

from .errors import ShapeError
from .views import materialize


def to_array(rng: Any, dtype: Optional[Any] = None) -> np.ndarray:
    """Materialize a (possibly nested) view into a numpy array."""
    return np.asarray(materialize(rng), dtype=dtype)


def dense_transpose(X: Any) -> jnp.ndarray:
    """Return the transpose of a rank-2 array using JAX ops only."""
    X = jnp.asarray(to_array(X))
    if X.ndim != 2:
        raise ShapeError("dense_transpose expects a rank-2 array")
    return jnp.swapaxes(X, -2, -1)


def dense_transpose4d(T: Any) -> jnp.ndarray:
    """Reorder a ``[b,h,w,d]`` array into ``[d,h,w,b]``."""
    T = jnp.asarray(to_array(T))
    if T.ndim != 4:
        raise ShapeError("dense_transpose4d expects a rank-4 array")
    return jnp.transpose(T, (3, 1, 2, 0))


def dense_matmul(X: Any, W: Any) -> jnp.ndarray:
    return jnp.matmul(jnp.asarray(to_array(X)), jnp.asarray(to_array(W)))
