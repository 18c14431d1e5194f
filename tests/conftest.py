"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src and the project root (for main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from minesweeper import Board, BoardConfig, GameState, Tile, TileKind, build_board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible boards."""
    return random.Random(1234)


@pytest.fixture
def square_config() -> BoardConfig:
    """4x4 board with 2 mines."""
    return BoardConfig(4, 4, 2)


@pytest.fixture
def square_board(square_config: BoardConfig) -> Board:
    """
    4x4 board with mines at 0 and 5.

        * 2 1 0
        2 * 1 0
        1 1 1 0
        0 0 0 0
    """
    return build_board(square_config, [0, 5])


@pytest.fixture
def square_game(square_config: BoardConfig, square_board: Board) -> GameState:
    """Active game on the 4x4 board with mines at 0 and 5."""
    return GameState(config=square_config, board=square_board)


@pytest.fixture
def wide_board() -> Board:
    """
    5x3 board with a single mine in the top-right corner.

        0 0 0 1 *
        0 0 0 1 1
        0 0 0 0 0
    """
    return build_board(BoardConfig(5, 3, 1), [4])


@pytest.fixture
def corridor_board() -> Board:
    """
    5x5 board split by a wall of mines down the middle column.

        0 2 * 2 0
        0 3 * 3 0
        0 3 * 3 0
        0 3 * 3 0
        0 2 * 2 0
    """
    return build_board(BoardConfig(5, 5, 5), [2, 7, 12, 17, 22])


@pytest.fixture
def empty_board() -> Board:
    """5x5 board with no mines for cascade testing."""
    return build_board(BoardConfig(5, 5, 0), [])


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden safe tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a hidden mine."""
    return Tile(kind=TileKind.MINE, adjacent_mines=None)


@pytest.fixture
def numbered_tile() -> Tile:
    """Create a hidden safe tile with 3 adjacent mines."""
    return Tile(adjacent_mines=3)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def expert_config() -> BoardConfig:
    """Expert difficulty configuration."""
    return BoardConfig(30, 16, 99)
