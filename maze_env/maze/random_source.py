"""Uniform random sources consumed by the maze generator and layout."""

from __future__ import annotations

import random
from typing import Protocol, Union, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    def next_int(self, bound: int) -> int:
        """Return a uniform integer in [0, bound)."""
        ...


def _check_bound(bound: int) -> int:
    b = int(bound)
    if b <= 0:
        raise ValueError(f"bound must be > 0, got {bound}")
    return b


class GeneratorRandomSource:
    """Adapter over `numpy.random.Generator`."""

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()

    def next_int(self, bound: int) -> int:
        return int(self._rng.integers(0, _check_bound(bound)))


class PyRandomSource:
    """Adapter over the stdlib `random.Random`."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def next_int(self, bound: int) -> int:
        return self._rng.randrange(_check_bound(bound))


SourceLike = Union[RandomSource, np.random.Generator, random.Random, int, None]


def as_random_source(src: SourceLike = None) -> RandomSource:
    """Coerce a seed, numpy Generator or `random.Random` into a RandomSource.

    An int is treated as a seed for `numpy.random.default_rng`.
    """
    if src is None:
        return GeneratorRandomSource()
    if isinstance(src, (bool, np.bool_)):
        raise TypeError("a bool is not a random source or seed")
    if isinstance(src, (int, np.integer)):
        return GeneratorRandomSource(np.random.default_rng(int(src)))
    if isinstance(src, np.random.Generator):
        return GeneratorRandomSource(src)
    if isinstance(src, random.Random):
        return PyRandomSource(src)
    if isinstance(src, RandomSource):
        return src
    raise TypeError(f"cannot use {type(src).__name__} as a random source")


def draw(source: RandomSource, bound: int) -> int:
    """Draw from `source` and check the value honours [0, bound)."""
    b = _check_bound(bound)
    value = int(source.next_int(b))
    if not 0 <= value < b:
        raise ValueError(f"random source returned {value}, expected [0, {b})")
    return value
