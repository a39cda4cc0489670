import numpy as np

# Zhang-Suen removal tables, one entry per 3x3 neighborhood (center excluded).
# 1 = delete on the first pass of a pair, 2 = delete on the second pass,
# 3 = delete on either. The first pass peels right/bottom edges, the second
# left/top edges. Bit layout of the index lives in encoder.py; the two must
# change together.
REMOVE_FLAGS = (
    (
        0,0,0,0,0,0,1,3,0,0,3,1,1,0,1,3,0,0,0,0,0,0,0,0,0,0,2,0,3,0,3,3,
        0,0,0,0,0,0,0,0,3,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,2,0,0,0,3,0,2,2,
        0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,
        2,0,0,0,0,0,0,0,2,0,0,0,2,0,0,0,3,0,0,0,0,0,0,0,3,0,0,0,3,0,2,0,
        0,0,3,1,0,0,1,3,0,0,0,0,0,0,0,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,
        3,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,2,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,
        2,3,1,3,0,0,1,3,0,0,0,0,0,0,0,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,
        2,3,0,1,0,0,0,1,0,0,0,0,0,0,0,0,3,3,0,1,0,0,0,0,2,2,0,0,2,0,0,0,
    ),
    (
        0,0,0,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,2,0,2,2,0,0,0,0,
        0,0,0,0,0,0,0,0,0,0,0,0,0,0,2,0,2,0,0,0,0,0,0,0,0,0,2,0,0,0,0,0,
        0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,
        0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,
        0,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,2,0,0,0,0,0,
        0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,2,0,0,0,0,0,0,0,
        0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,
        0,0,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,
    ),
)

EDGE_STAGE = 0
STUCK_STAGE = 1

REMOVE_ON_FIRST = 1
REMOVE_ON_SECOND = 2

_FLAG_ARRAYS = np.array(REMOVE_FLAGS, dtype=np.uint8)
_FLAG_ARRAYS.setflags(write=False)


def _table_row(stage: int) -> int:
    return STUCK_STAGE if stage else EDGE_STAGE


def removal_flags(stage: int, index: int) -> int:
    """Flag set for ``index`` in the table of ``stage``; the center bit is ignored."""
    return REMOVE_FLAGS[_table_row(stage)][index & 0xFF]


def pass_mask(pass_number: int) -> int:
    return REMOVE_ON_SECOND if pass_number & 1 else REMOVE_ON_FIRST


def flag_table(stage: int) -> np.ndarray:
    """Read-only ``uint8[256]`` view of a stage table, for fancy indexing."""
    return _FLAG_ARRAYS[_table_row(stage)]
