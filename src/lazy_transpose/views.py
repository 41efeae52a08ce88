"""Lazy sequence views that borrow their source instead of copying it.

Every view is a :class:`collections.abc.Sequence`: it knows its length and
computes an element only when it is indexed or iterated. Views compose, so
``Stride(Drop(Join(rows), i), width)`` reads column ``i`` of ``rows`` without
building any intermediate list.

Each view class has a pipeable lower-case counterpart::

    >>> materialize(ints(1, 6) | drop(2))
    [3, 4, 5]
    >>> materialize(ints(1, 6) | chunk(2))
    [[1, 2], [3, 4], [5]]
"""

from __future__ import annotations

import bisect
import functools
import operator
from collections.abc import Sequence
from typing import Any, Callable, Iterator, List, Optional


class View(Sequence):
    """Base class for random-access lazy views.

    Subclasses implement ``__len__`` and ``_get``; ``_get`` only ever sees a
    non-negative index that is already known to be in range.
    """

    def _get(self, index: int) -> Any:
        raise NotImplementedError

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step < 0:
                raise ValueError("views do not support negative slice steps")
            return Stride(Take(Drop(self, start), max(stop - start, 0)), step)
        index = operator.index(index)
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"{type(self).__name__} index out of range")
        return self._get(index)

    def __iter__(self) -> Iterator[Any]:
        for index in range(len(self)):
            yield self._get(index)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} len={len(self)}>"


class ViewClosure:
    """Pipeable adaptor: ``rng | closure`` is the same as ``closure(rng)``.

    Two closures piped together give a closure applying both in order.
    """

    def __init__(self, fn: Callable[..., Any]) -> None:
        self._fn = fn
        functools.update_wrapper(self, fn)

    def __call__(self, rng, *args, **kwargs):
        return self._fn(rng, *args, **kwargs)

    def __ror__(self, rng):
        return self._fn(rng)

    def __or__(self, other: "ViewClosure") -> "ViewClosure":
        if not isinstance(other, ViewClosure):
            return NotImplemented
        return ViewClosure(lambda rng: other(self(rng)))


class Ints(View):
    """The half-open integer range ``[start, stop)``."""

    def __init__(self, start: int, stop: int) -> None:
        self.start = start
        self.stop = stop

    def __len__(self) -> int:
        return max(self.stop - self.start, 0)

    def _get(self, index: int) -> int:
        return self.start + index


class Drop(View):
    """``source`` without its first ``n`` elements."""

    def __init__(self, source: Sequence, n: int) -> None:
        if n < 0:
            raise ValueError(f"cannot drop a negative count ({n})")
        self.source = source
        self.n = n

    def __len__(self) -> int:
        return max(len(self.source) - self.n, 0)

    def _get(self, index: int) -> Any:
        return self.source[index + self.n]


class Take(View):
    """The first ``n`` elements of ``source`` (fewer if it is shorter)."""

    def __init__(self, source: Sequence, n: int) -> None:
        if n < 0:
            raise ValueError(f"cannot take a negative count ({n})")
        self.source = source
        self.n = n

    def __len__(self) -> int:
        return min(len(self.source), self.n)

    def _get(self, index: int) -> Any:
        return self.source[index]


class Stride(View):
    """Every ``step``-th element of ``source``, starting with the first."""

    def __init__(self, source: Sequence, step: int) -> None:
        if step <= 0:
            raise ValueError(f"stride step must be positive, got {step}")
        self.source = source
        self.step = step

    def __len__(self) -> int:
        return -(-len(self.source) // self.step)

    def _get(self, index: int) -> Any:
        return self.source[index * self.step]


class Chunk(View):
    """Consecutive groups of ``size`` elements; the last may be shorter."""

    def __init__(self, source: Sequence, size: int) -> None:
        if size <= 0:
            raise ValueError(f"chunk size must be positive, got {size}")
        self.source = source
        self.size = size

    def __len__(self) -> int:
        return -(-len(self.source) // self.size)

    def _get(self, index: int) -> View:
        return Take(Drop(self.source, index * self.size), self.size)


class Join(View):
    """``source`` flattened by one level, in row-major order.

    Random access goes through prefix offsets built from the lengths of the
    sub-sequences, so no element value is read to locate an index. The
    offsets are computed once; the source must not be resized afterwards.
    """

    def __init__(self, source: Sequence[Sequence]) -> None:
        self.source = source
        self._offsets_cache: Optional[List[int]] = None

    @property
    def _offsets(self) -> List[int]:
        if self._offsets_cache is None:
            offsets = [0]
            for row in self.source:
                offsets.append(offsets[-1] + len(row))
            self._offsets_cache = offsets
        return self._offsets_cache

    def __len__(self) -> int:
        return self._offsets[-1]

    def _get(self, index: int) -> Any:
        offsets = self._offsets
        row = bisect.bisect_right(offsets, index) - 1
        return self.source[row][index - offsets[row]]

    def __iter__(self) -> Iterator[Any]:
        for row in self.source:
            yield from row


class Transform(View):
    """``fn`` applied to each element of ``source`` when it is accessed."""

    def __init__(self, source: Sequence, fn: Callable[[Any], Any]) -> None:
        self.source = source
        self.fn = fn

    def __len__(self) -> int:
        return len(self.source)

    def _get(self, index: int) -> Any:
        return self.fn(self.source[index])


def ints(start: int, stop: int) -> Ints:
    return Ints(start, stop)


def drop(n: int) -> ViewClosure:
    return ViewClosure(lambda rng: Drop(rng, n))


def take(n: int) -> ViewClosure:
    return ViewClosure(lambda rng: Take(rng, n))


def stride(step: int) -> ViewClosure:
    return ViewClosure(lambda rng: Stride(rng, step))


def chunk(size: int) -> ViewClosure:
    return ViewClosure(lambda rng: Chunk(rng, size))


def transform(fn: Callable[[Any], Any]) -> ViewClosure:
    return ViewClosure(lambda rng: Transform(rng, fn))


join = ViewClosure(lambda rng: Join(rng))


def materialize(rng: Any) -> Any:
    """Turn nested views (and lists, tuples, ranges) into nested lists."""
    if isinstance(rng, (View, list, tuple, range)):
        return [materialize(item) for item in rng]
    return rng
