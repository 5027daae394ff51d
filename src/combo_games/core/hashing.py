"""
Position hashing utilities - small, stable, non-negative integers.
"""

from typing import Iterable

import numpy as np

HASH_PRIME = 31
TURN_BIT = 1 << 30

_MASK = 0xFFFFFFFF
_SIGN = 0x80000000


def fold_hash(cells: Iterable[int], turn: bool, *extra: int) -> int:
    """
    Fold a position into a non-negative 32-bit hash.

    Each cell is a small integer (e.g. 0 = empty, 1 = symbol 0, 2 = symbol 1).
    Extra integers (board dimensions, MAX_SUM, ...) are folded in after the
    cells. The accumulator wraps like a signed 32-bit int; the turn flag is
    XORed in as a high bit and the absolute value is returned.
    """
    if isinstance(cells, np.ndarray):
        cells = cells.ravel().tolist()

    acc = 0
    for cell in cells:
        acc = (acc * HASH_PRIME + int(cell)) & _MASK
    for value in extra:
        acc = (acc * HASH_PRIME + int(value)) & _MASK

    # Reinterpret as signed 32-bit
    if acc & _SIGN:
        acc -= 1 << 32

    if turn:
        acc ^= TURN_BIT

    return abs(acc)
