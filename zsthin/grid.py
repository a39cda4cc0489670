"""Grid validation, background handling, padding and cropping."""
import numpy as np

from .errors import DimensionMismatchError, InvalidBackgroundError, UnsupportedElementTypeError

SUPPORTED_DTYPES = tuple(
    np.dtype(t)
    for t in (
        np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32,
        np.int64, np.uint64, np.float32, np.float64,
    )
)


def as_grid(image) -> np.ndarray:
    """Check that ``image`` is a 2-D or 3-D array of a supported element type."""
    if not isinstance(image, np.ndarray):
        raise UnsupportedElementTypeError(f"Expected a numpy array, got {type(image).__name__}.")
    if image.dtype not in SUPPORTED_DTYPES:
        raise UnsupportedElementTypeError(f"Unsupported element type '{image.dtype}'.")
    if image.ndim not in (2, 3):
        raise DimensionMismatchError(
            f"Expected (rows, cols) or (rows, cols, channels), got shape {image.shape}."
        )
    return image


def background_value(grid: np.ndarray, background=0) -> np.ndarray:
    """Coerce ``background`` to the grid's dtype and element shape.

    A scalar applies to every component of a multi-channel grid.
    """
    value = np.asarray(background)
    if value.ndim > 1:
        raise DimensionMismatchError(f"Background must be a scalar or a vector, got shape {value.shape}.")
    if value.ndim == 1:
        if grid.ndim != 3 or value.shape[0] != grid.shape[2]:
            raise DimensionMismatchError(
                f"Background {tuple(value.tolist())} does not match grid shape {grid.shape}."
            )
    if value.dtype.kind not in "biuf":
        raise InvalidBackgroundError(f"Background {background!r} is not numeric.")
    with np.errstate(over="ignore", invalid="ignore"):
        coerced = value.astype(grid.dtype)
    if grid.dtype.kind == "f":
        # nearest float of the element type; only overflow and NaN are rejected
        valid = bool(np.isfinite(coerced).all())
    else:
        valid = np.array_equal(coerced, value)
    if not valid:
        raise InvalidBackgroundError(f"Background {background!r} is not representable as {grid.dtype}.")
    if grid.ndim == 3 and coerced.ndim == 0:
        coerced = np.full(grid.shape[2], coerced, dtype=grid.dtype)
    return coerced


def foreground_mask(grid: np.ndarray, background: np.ndarray) -> np.ndarray:
    """Boolean (rows, cols) mask of cells that differ from the background."""
    differs = grid != background
    if grid.ndim == 3:
        return differs.any(axis=2)
    return differs


def pad_grid(grid: np.ndarray, background: np.ndarray) -> np.ndarray:
    """Copy ``grid`` into a fresh buffer with a one-cell background ring."""
    rows, cols = grid.shape[:2]
    padded = np.empty((rows + 2, cols + 2) + grid.shape[2:], dtype=grid.dtype)
    padded[...] = background
    padded[1:-1, 1:-1] = grid
    return padded


def interior(padded: np.ndarray) -> np.ndarray:
    """View of a padded buffer without its border ring."""
    return padded[1:-1, 1:-1]


def count_foreground(grid: np.ndarray, background=0) -> int:
    grid = as_grid(grid)
    return int(np.count_nonzero(foreground_mask(grid, background_value(grid, background))))
