"""
Reveal engine: flood fill from a blank tile.

Computes every tile that must become exposed when a blank tile
(safe, zero adjacent mines) is revealed.
"""
from collections import deque
from typing import Deque, FrozenSet, Set

from .board import Board


def exposure_closure(board: Board, origin: int) -> FrozenSet[int]:
    """
    Compute the exposure closure of a blank tile.

    Walks outward from ``origin`` through connected blank tiles using
    an explicit worklist. Numbered neighbors are included as the
    boundary of the region but are not expanded. Mines, flagged tiles
    and tiles that are already exposed are never included.

    Args:
        board: Board to explore.
        origin: Index of the blank tile being revealed.

    Returns:
        Indices to expose, including the origin.
    """
    tiles = board.tiles
    worklist: Deque[int] = deque([origin])
    visited: Set[int] = set()
    result: Set[int] = set()

    while worklist:
        current = worklist.popleft()
        if current in visited:
            continue
        visited.add(current)
        result.add(current)

        for neighbor_index in tiles[current].adjacent:
            if neighbor_index in visited:
                continue
            neighbor = tiles[neighbor_index]
            if neighbor.is_mine or neighbor.is_exposed or neighbor.is_flagged:
                continue
            if neighbor.adjacent_mines > 0:
                result.add(neighbor_index)
            else:
                worklist.append(neighbor_index)

    return frozenset(result)
