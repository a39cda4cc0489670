import numpy as np

from .encoder import neighborhood_indices, row_indices
from .errors import BufferAliasError, DimensionMismatchError
from .grid import foreground_mask, interior
from .tables import flag_table, pass_mask, removal_flags


def _removal_mask_scan(fg: np.ndarray, stage: int, mask: int) -> np.ndarray:
    rows = fg.tolist()
    removed = np.zeros(fg.shape, dtype=bool)
    for cy in range(1, len(rows) - 1):
        top, mid, bottom = rows[cy - 1], rows[cy], rows[cy + 1]
        for cx, index in row_indices(top, mid, bottom):
            if mid[cx] and removal_flags(stage, index) & mask:
                removed[cy, cx] = True
    return removed


def _removal_mask_vectorized(fg: np.ndarray, stage: int, mask: int) -> np.ndarray:
    removed = np.zeros(fg.shape, dtype=bool)
    flags = flag_table(stage)[neighborhood_indices(fg)]
    interior(removed)[...] = interior(fg) & ((flags & mask) != 0)
    return removed


ENGINES = {
    "scan": _removal_mask_scan,
    "vectorized": _removal_mask_vectorized,
}


def thin_pass(src: np.ndarray, dst: np.ndarray, stage: int, pass_number: int, background, engine: str = "vectorized") -> int:
    """Run one sweep over the interior of padded ``src`` into ``dst``.

    ``dst`` is cleared to ``background`` first. Foreground cells the table
    marks for this pass parity are left out of ``dst``; every other foreground
    cell keeps its value. Returns the number of removed cells.
    """
    if engine not in ENGINES:
        raise ValueError(f"Unknown engine '{engine}'. Choose from {sorted(ENGINES)}.")
    if src.shape != dst.shape or src.dtype != dst.dtype:
        raise DimensionMismatchError(
            f"Pass buffers differ: {src.shape}/{src.dtype} vs {dst.shape}/{dst.dtype}."
        )
    if np.may_share_memory(src, dst):
        raise BufferAliasError("Pass source and destination must be distinct buffers.")

    fg = foreground_mask(src, background)
    removed = ENGINES[engine](fg, stage, pass_mask(pass_number))

    dst[...] = background
    keep = np.zeros_like(fg)
    interior(keep)[...] = interior(fg) & ~interior(removed)
    dst[keep] = src[keep]
    return int(removed.sum())
