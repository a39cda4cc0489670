"""Zhang-Suen thinning of foreground regions down to one-pixel-wide skeletons.

T. Y. Zhang and C. Y. Suen, "A Fast Parallel Algorithm for Thinning Digital
Patterns", CACM 27(3):236-239, 1984. The removal tables follow ImageJ's
``BinaryProcessor``.
"""
import logging
from typing import Optional, Tuple

import numpy as np

from .errors import DimensionMismatchError, UnsupportedElementTypeError
from .grid import as_grid, background_value, interior, pad_grid
from .passes import ENGINES, thin_pass
from .tables import EDGE_STAGE, STUCK_STAGE

log = logging.getLogger(__name__)


def _run_stage(source: np.ndarray, target: np.ndarray, stage: int, pass_number: int, background, engine: str) -> int:
    # do-while: at least one pass pair per stage; each pair ends back in ``source``
    while True:
        removed = thin_pass(source, target, stage, pass_number, background, engine)
        pass_number += 1
        removed += thin_pass(target, source, stage, pass_number, background, engine)
        pass_number += 1
        log.debug("stage %d, passes %d-%d: removed %d", stage, pass_number - 2, pass_number - 1, removed)
        if removed == 0:
            return pass_number


def zs_thinning(src: np.ndarray, dst: Optional[np.ndarray] = None, background=0, engine: str = "vectorized") -> Tuple[int, np.ndarray]:
    """Thin every non-background region of ``src``.

    Args:
        src: (rows, cols) or (rows, cols, channels) grid; never modified.
        dst: optional output array with the same shape and dtype as ``src``.
            A new array is allocated when omitted. ``dst`` may be ``src``.
        background: value treated as empty; a scalar or one value per channel.
        engine: ``"vectorized"`` or ``"scan"``; both give the same result.

    Returns:
        ``(passes, dst)`` where ``passes`` is the number of sweeps executed,
        always even and at least 4.
    """
    if engine not in ENGINES:
        raise ValueError(f"Unknown engine '{engine}'. Choose from {sorted(ENGINES)}.")
    grid = as_grid(src)
    bg = background_value(grid, background)
    if dst is not None:
        if not isinstance(dst, np.ndarray) or dst.shape != grid.shape:
            raise DimensionMismatchError(
                f"Destination shape {getattr(dst, 'shape', None)} does not match source {grid.shape}."
            )
        if dst.dtype != grid.dtype:
            raise UnsupportedElementTypeError(f"Destination dtype {dst.dtype} does not match source {grid.dtype}.")

    work0 = pad_grid(grid, bg)
    work1 = work0.copy()

    passes = 0
    for stage in (EDGE_STAGE, STUCK_STAGE):
        passes = _run_stage(work0, work1, stage, passes, bg, engine)

    result = interior(work0)
    if dst is None:
        dst = result.copy()
    else:
        dst[...] = result
    log.debug("thinning finished after %d passes", passes)
    return passes, dst


def zs_thinning_inplace(grid: np.ndarray, background=0, engine: str = "vectorized") -> int:
    """Overwrite ``grid`` with its skeleton and return the pass count."""
    passes, skeleton = zs_thinning(grid, None, background, engine)
    grid[...] = skeleton
    return passes
