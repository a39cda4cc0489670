"""Neighborhood index encoding for the thinning passes.

Bit assignment around the center cell ``**``::

    0x01 | 0x02 | 0x04
    -----+------+-----
    0x80 |  **  | 0x08
    -----+------+-----
    0x40 | 0x20 | 0x10

The center is carried at ``0x100`` while a window slides along a row so it
can drop into the left column (``0x80``) on the next step. It never reaches
the lookup table.
"""
from typing import Iterator, Sequence, Tuple

import numpy as np

P1 = 0x01
P2 = 0x02
P3 = 0x04
P6 = 0x08
P9 = 0x10
P8 = 0x20
P7 = 0x40
P4 = 0x80
CENTER = 0x100

# p2->p1, p3->p2, center->p4 move right by one bit; p9->p8, p8->p7 move left.
_SHIFT_DOWN = P2 | P3 | CENTER
_SHIFT_UP = P9 | P8


def start_row(top: Sequence[bool], mid: Sequence[bool], bottom: Sequence[bool]) -> int:
    """Window centered on column 0; the left column is left out on purpose."""
    index = 0
    if top[0]:
        index |= P2
    if top[1]:
        index |= P3
    if mid[0]:
        index |= CENTER
    if mid[1]:
        index |= P6
    if bottom[0]:
        index |= P8
    if bottom[1]:
        index |= P9
    return index


def slide(index: int, top: Sequence[bool], mid: Sequence[bool], bottom: Sequence[bool], nx: int) -> int:
    """Move the window one column right; ``nx`` is the new right-hand column."""
    index = ((index & _SHIFT_DOWN) >> 1) | ((index & _SHIFT_UP) << 1)
    if top[nx]:
        index |= P3
    if mid[nx]:
        index |= P6
    if bottom[nx]:
        index |= P9
    return index


def row_indices(
    top: Sequence[bool], mid: Sequence[bool], bottom: Sequence[bool]
) -> Iterator[Tuple[int, int]]:
    """Yield ``(x, index)`` for every interior column of a padded row triple."""
    width = len(mid)
    if width < 3:
        return
    index = start_row(top, mid, bottom)
    for cx in range(1, width - 1):
        index = slide(index, top, mid, bottom, cx + 1)
        yield cx, index
        if mid[cx]:
            index |= CENTER


def neighborhood_index(mask: np.ndarray, y: int, x: int) -> int:
    """Index of cell ``(y, x)`` read directly from its eight neighbors."""
    index = 0
    for bit, dy, dx in (
        (P1, -1, -1), (P2, -1, 0), (P3, -1, 1), (P6, 0, 1),
        (P9, 1, 1), (P8, 1, 0), (P7, 1, -1), (P4, 0, -1),
    ):
        if mask[y + dy, x + dx]:
            index |= bit
    return index


def neighborhood_indices(mask: np.ndarray) -> np.ndarray:
    """Indices of every interior cell of a padded boolean mask at once."""
    m = mask.astype(np.uint8)
    index = m[:-2, :-2] * P1
    index = index | (m[:-2, 1:-1] * P2)
    index |= m[:-2, 2:] * P3
    index |= m[1:-1, 2:] * P6
    index |= m[2:, 2:] * P9
    index |= m[2:, 1:-1] * P8
    index |= m[2:, :-2] * P7
    index |= m[1:-1, :-2] * P4
    return index
