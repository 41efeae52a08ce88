"""Demo registry."""

from __future__ import annotations

from typing import Dict

from .base import Demo, DemoContext
from .basics import demo as basics_demo
from .matrix import product_demo, transpose_demo
from .stream import demo as stream_demo
from .tensor import demo as tensor_demo

# insertion order is the order `range-demo run` prints them in
DEMOS: Dict[str, Demo] = {
    demo.slug: demo
    for demo in (basics_demo, transpose_demo, product_demo, stream_demo, tensor_demo)
}

__all__ = ["Demo", "DemoContext", "DEMOS"]
