"""
Minesweeper board engine.

Provides mine placement, adjacency, flood-fill reveal and an immutable
game state machine, plus text and Gymnasium adapters.
"""
from .errors import MinesweeperError, InvalidConfig, InvalidTileIndex
from .tile import Tile, TileKind, TileView
from .board import (
    Board,
    BoardConfig,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    CLASSIC,
    LEVELS,
    build_board,
    generate_board,
)
from .reveal import exposure_closure
from .game import (
    GameState,
    GameStatus,
    compute_status,
    new_game,
    reveal,
    reset,
    toggle_flag,
)
from .display import render_text
from .environment import MinesweeperEnv

__all__ = [
    "MinesweeperError",
    "InvalidConfig",
    "InvalidTileIndex",
    "Tile",
    "TileKind",
    "TileView",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "CLASSIC",
    "LEVELS",
    "build_board",
    "generate_board",
    "exposure_closure",
    "GameState",
    "GameStatus",
    "compute_status",
    "new_game",
    "reveal",
    "reset",
    "toggle_flag",
    "render_text",
    "MinesweeperEnv",
]
