"""
Game state machine for Minesweeper.

A game is an immutable ``GameState``. Every operation takes a state
and returns the next one; the previous state is never modified.
Moves that are not allowed (revealing a flagged tile, acting after
the game ended) return the same state object unchanged.
"""
import random
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig, generate_board
from .errors import InvalidConfig
from .reveal import exposure_closure
from .tile import TileView


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    ACTIVE = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game State
# ============================================================================

@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a Minesweeper game.

    Attributes:
        config: Level the board was generated from.
        board: Current board.
        status: Whether the game is active, won or lost.
    """

    config: BoardConfig
    board: Board
    status: GameStatus = GameStatus.ACTIVE

    def __post_init__(self) -> None:
        """Reject a config that disagrees with the board it describes."""
        if self.config != self.board.config:
            raise InvalidConfig(
                f"Game config {self.config} does not match board config "
                f"{self.board.config}"
            )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_active(self) -> bool:
        """Check if game is still in progress."""
        return self.status == GameStatus.ACTIVE

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.status == GameStatus.LOST

    @property
    def flag_count(self) -> int:
        """Number of flags currently placed."""
        return sum(1 for tile in self.board if tile.is_flagged)

    @property
    def mines_remaining(self) -> int:
        """Mine counter: mines minus flags. Negative when over-flagged."""
        return self.config.num_mines - self.flag_count

    def tiles(self) -> Tuple[TileView, ...]:
        """Public projection of every tile, hiding unexposed content."""
        return tuple(tile.public_view() for tile in self.board)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = exposed with adjacent count
                9 = exposed mine
        """
        values = [tile.to_observation() for tile in self.board]
        return np.array(values, dtype=np.int8).reshape(
            self.config.height, self.config.width
        )

    def valid_actions(self) -> List[int]:
        """
        Get indices of tiles that can be revealed.

        Returns:
            Indices of tiles that are neither exposed nor flagged, or an
            empty list once the game is over.
        """
        if not self.is_active:
            return []
        return [i for i, tile in enumerate(self.board) if tile.is_hidden]


# ============================================================================
# Status
# ============================================================================

def compute_status(board: Board) -> GameStatus:
    """
    Derive game status from the exposed tiles.

    Returns:
        LOST if any mine is exposed, WON if every safe tile is exposed,
        ACTIVE otherwise.
    """
    all_safe_exposed = True
    for tile in board:
        if tile.is_mine:
            if tile.is_exposed:
                return GameStatus.LOST
        elif not tile.is_exposed:
            all_safe_exposed = False
    return GameStatus.WON if all_safe_exposed else GameStatus.ACTIVE


# ============================================================================
# Game Actions
# ============================================================================

def new_game(
    config: BoardConfig, rng: Optional[random.Random] = None
) -> GameState:
    """
    Start a new game.

    Args:
        config: Level to play.
        rng: Random source for mine placement.

    Returns:
        Active game on a freshly generated board.
    """
    return GameState(config=config, board=generate_board(config, rng))


def reveal(state: GameState, index: int) -> GameState:
    """
    Reveal the tile at ``index``.

    A mine loses the game. A blank tile exposes its whole exposure
    closure; a numbered tile exposes only itself. Status is recomputed
    after every exposure.

    Args:
        state: Current game.
        index: Flat index of the tile to reveal.

    Returns:
        Next state, or ``state`` itself if the reveal is not allowed.

    Raises:
        InvalidTileIndex: If index is off the board.
    """
    tile = state.board.tile(index)
    if not state.is_active or tile.is_flagged or tile.is_exposed:
        return state

    if tile.is_blank:
        to_expose = {index} | exposure_closure(state.board, index)
    else:
        to_expose = {index}

    board = state.board.with_tiles(
        {i: state.board.tiles[i].exposed() for i in to_expose}
    )
    return replace(state, board=board, status=compute_status(board))


def toggle_flag(state: GameState, index: int) -> GameState:
    """
    Toggle the flag on the tile at ``index``.

    Args:
        state: Current game.
        index: Flat index of the tile to flag or unflag.

    Returns:
        Next state, or ``state`` itself if the tile is exposed or the
        game is over.

    Raises:
        InvalidTileIndex: If index is off the board.
    """
    tile = state.board.tile(index)
    if not state.is_active or tile.is_exposed:
        return state
    board = state.board.with_tiles({index: tile.flag_toggled()})
    return replace(state, board=board)


def reset(
    state: GameState,
    config: Optional[BoardConfig] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Discard the current game and start over.

    Args:
        state: Game being discarded.
        config: New level, or None to replay the current one.
        rng: Random source for mine placement.

    Returns:
        Active game on a freshly generated board.
    """
    return new_game(config or state.config, rng)
