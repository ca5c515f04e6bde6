import itertools

import pytest

from magmavoxel.voxel_utils import CHUNK_SIZE, to_chunk_pos, to_local_pos


def test_one_chunk_width_is_sixteen_voxels():
    assert to_chunk_pos((16, 15, 32)) == (1, 0, 2)
    assert to_local_pos((16, 15, 32)) == (0, 15, 0)


@pytest.mark.parametrize("pos", list(itertools.product([0, 5, 15, 16, 31, 32, 100], repeat=3))[::17])
def test_non_negative_round_trip(pos):
    chunk = to_chunk_pos(pos)
    local = to_local_pos(pos)
    rebuilt = tuple(c * CHUNK_SIZE + l for c, l in zip(chunk, local))
    assert rebuilt == tuple(pos)


@pytest.mark.parametrize("pos", [(-1, -16, -17), (-33, 7, -100), (40, -5, 0)])
def test_local_pos_always_inside_chunk(pos):
    assert all(0 <= c < CHUNK_SIZE for c in to_local_pos(pos))


def test_chunk_pos_truncates_toward_zero():
    assert to_chunk_pos((-1, -15, -16)) == (0, 0, -1)


def test_chunk_pos_is_symmetric_for_negatives():
    for value in (1, 15, 16, 17, 33, 250):
        assert to_chunk_pos((-value, value, 0))[0] == -to_chunk_pos((value, value, 0))[1]


def test_local_pos_wraps_negatives():
    assert to_local_pos((-1, -16, -17)) == (15, 0, 15)


def test_accepts_float_like_components():
    assert to_chunk_pos((17.0, 0.0, 33.0)) == to_chunk_pos((17, 0, 33))