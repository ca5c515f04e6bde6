"""Conversions between world voxel coordinates and chunk coordinates."""

from __future__ import annotations

CHUNK_SIZE = 16


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def to_chunk_pos(voxel_pos) -> tuple[int, int, int]:
    """Chunk index of a voxel, dividing each axis by the chunk size toward zero."""
    x, y, z = (int(c) for c in voxel_pos)
    return (
        _truncating_div(x, CHUNK_SIZE),
        _truncating_div(y, CHUNK_SIZE),
        _truncating_div(z, CHUNK_SIZE),
    )


def to_local_pos(voxel_pos) -> tuple[int, int, int]:
    """Position of a voxel inside its chunk, each axis in ``[0, CHUNK_SIZE)``."""
    x, y, z = (int(c) for c in voxel_pos)
    return (x % CHUNK_SIZE, y % CHUNK_SIZE, z % CHUNK_SIZE)