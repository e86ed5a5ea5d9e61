"""
Deterministic question ordering.

A Mulberry32 generator feeds a Fisher-Yates shuffle, so a given seed always
produces the same order on every platform and across restarts.
"""
import logging
import math
import time
from typing import Callable, List, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_MULBERRY_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a 32-bit integer product."""
    return (a * b) & _MASK32


def mulberry32(seed: int) -> Callable[[], float]:
    """
    Returns a generator of floats in [0, 1) for the given seed.

    The seed is reduced modulo 2**32, so wall-clock millisecond seeds and
    negative values are accepted.
    """
    state = seed & _MASK32

    def rand() -> float:
        nonlocal state
        state = (state + _MULBERRY_INCREMENT) & _MASK32
        r = _imul(state ^ (state >> 15), 1 | state)
        r ^= (r + _imul(r ^ (r >> 7), 61 | r)) & _MASK32
        return ((r ^ (r >> 14)) & _MASK32) / _TWO_POW_32

    return rand


def shuffle(items: Sequence[T], seed: int) -> List[T]:
    """
    Returns a seeded permutation of ``items``. The input is left untouched.
    """
    rand = mulberry32(seed)
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = math.floor(rand() * (i + 1))
        out[i], out[j] = out[j], out[i]
    logger.debug(f"Shuffled {len(out)} items with seed {seed}")
    return out


def new_seed() -> int:
    """Wall-clock seed in milliseconds."""
    return int(time.time() * 1000)
