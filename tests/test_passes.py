import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from zsthin.errors import BufferAliasError, DimensionMismatchError
from zsthin.passes import thin_pass


def padded_block():
    grid = np.zeros((7, 7), dtype=np.uint8)
    grid[1:6, 1:6] = 255
    return grid


FIRST_PASS = np.array(
    [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 1, 1, 1, 1, 1, 0],
        [0, 1, 1, 1, 1, 0, 0],
        [0, 1, 1, 1, 1, 0, 0],
        [0, 1, 1, 1, 1, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
    ],
    dtype=np.uint8,
) * 255

SECOND_PASS = np.array(
    [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 1, 1, 1, 1, 0],
        [0, 0, 1, 1, 1, 1, 0],
        [0, 0, 1, 1, 1, 1, 0],
        [0, 1, 1, 1, 1, 1, 0],
        [0, 0, 0, 0, 0, 0, 0],
    ],
    dtype=np.uint8,
) * 255


@pytest.mark.parametrize("engine", ["vectorized", "scan"])
def test_first_pass_peels_bottom_and_right(engine):
    src = padded_block()
    dst = np.full_like(src, 7)
    assert thin_pass(src, dst, 0, 0, 0, engine) == 8
    np.testing.assert_array_equal(dst, FIRST_PASS)


@pytest.mark.parametrize("engine", ["vectorized", "scan"])
def test_second_pass_peels_top_and_left(engine):
    src = padded_block()
    dst = np.zeros_like(src)
    assert thin_pass(src, dst, 0, 1, 0, engine) == 8
    np.testing.assert_array_equal(dst, SECOND_PASS)


def test_pass_leaves_source_untouched():
    src = padded_block()
    before = src.copy()
    thin_pass(src, np.zeros_like(src), 0, 0, 0)
    np.testing.assert_array_equal(src, before)


def test_stage_one_keeps_solid_block():
    src = padded_block()
    dst = np.zeros_like(src)
    assert thin_pass(src, dst, 1, 0, 0) == 0
    np.testing.assert_array_equal(dst, src)


def test_values_are_copied_not_rewritten():
    src = np.zeros((5, 5), dtype=np.int16)
    src[2, 1:4] = [-3, 9, 11]
    dst = np.zeros_like(src)
    assert thin_pass(src, dst, 0, 0, 0) == 0
    np.testing.assert_array_equal(dst, src)


def test_multichannel_background_is_per_pixel():
    src = np.zeros((5, 5, 3), dtype=np.uint8)
    src[2, 2] = (0, 0, 1)
    dst = np.zeros_like(src)
    assert thin_pass(src, dst, 0, 0, np.zeros(3, dtype=np.uint8)) == 0
    np.testing.assert_array_equal(dst[2, 2], (0, 0, 1))


def test_engines_agree_on_random_grids():
    rng = np.random.default_rng(3)
    for pass_number in range(4):
        src = (rng.random((12, 15)) < 0.6).astype(np.uint8) * 200
        src[0, :] = src[-1, :] = 0
        src[:, 0] = src[:, -1] = 0
        a, b = np.zeros_like(src), np.zeros_like(src)
        stage = pass_number // 2
        assert thin_pass(src, a, stage, pass_number, 0, "vectorized") == thin_pass(src, b, stage, pass_number, 0, "scan")
        np.testing.assert_array_equal(a, b)


def test_aliased_buffers_are_rejected():
    src = padded_block()
    with pytest.raises(BufferAliasError):
        thin_pass(src, src, 0, 0, 0)
    with pytest.raises(BufferAliasError):
        thin_pass(src, src[:, :], 0, 0, 0)


def test_mismatched_buffers_are_rejected():
    src = padded_block()
    with pytest.raises(DimensionMismatchError):
        thin_pass(src, np.zeros((7, 8), dtype=np.uint8), 0, 0, 0)
    with pytest.raises(DimensionMismatchError):
        thin_pass(src, np.zeros((7, 7), dtype=np.int16), 0, 0, 0)


def test_unknown_engine():
    src = padded_block()
    with pytest.raises(ValueError):
        thin_pass(src, np.zeros_like(src), 0, 0, 0, "nonsense")
