"""
Grid geometry for row-major Minesweeper boards.

Tiles are addressed by a flat index where ``index = row * width + col``.
Everything here is pure arithmetic; no board state is involved.
"""
from typing import FrozenSet, List, Tuple


# ============================================================================
# Index Conversion
# ============================================================================

def row_of(index: int, width: int) -> int:
    """Row containing a flat tile index."""
    return index // width


def column_of(index: int, width: int) -> int:
    """Column containing a flat tile index."""
    return index % width


def to_index(row: int, col: int, width: int) -> int:
    """Convert a (row, col) position to a flat index."""
    return row * width + col


def to_position(index: int, width: int) -> Tuple[int, int]:
    """Convert a flat index to a (row, col) position."""
    return row_of(index, width), column_of(index, width)


def is_valid_index(index: int, width: int, height: int) -> bool:
    """Check if index addresses a tile on a width x height board."""
    return 0 <= index < width * height


# ============================================================================
# Adjacency
# ============================================================================

def row_siblings(index: int, width: int, height: int) -> List[int]:
    """
    Get the tile and its left/right neighbors within the same row.

    Candidates that fall off the board, or wrap onto the previous or
    next row, are dropped.

    Args:
        index: Flat index of the anchor tile.
        width: Number of columns.
        height: Number of rows.

    Returns:
        Indices from ``index - 1`` to ``index + 1`` sharing the anchor's row.
    """
    required_row = row_of(index, width)
    return [
        sibling
        for sibling in (index - 1, index, index + 1)
        if is_valid_index(sibling, width, height)
        and row_of(sibling, width) == required_row
    ]


def adjacent_indexes(index: int, width: int, height: int) -> FrozenSet[int]:
    """
    Get the neighbor set of a tile.

    The rows above, at and below the tile are anchored at
    ``index - width``, ``index`` and ``index + width``. Each valid anchor
    contributes its row siblings; the tile itself is then removed.
    Corner, edge and interior tiles get 3, 5 and 8 neighbors.

    Args:
        index: Flat index of the center tile.
        width: Number of columns.
        height: Number of rows.

    Returns:
        Frozen set of neighbor indices.
    """
    neighbors = set()
    for anchor in (index - width, index, index + width):
        if is_valid_index(anchor, width, height):
            neighbors.update(row_siblings(anchor, width, height))
    neighbors.discard(index)
    return frozenset(neighbors)
