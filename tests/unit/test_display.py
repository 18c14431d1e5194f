"""
Unit tests for text rendering.
"""
from minesweeper import GameState, render_text, reveal, toggle_flag


class TestRenderText:
    """Test ASCII board rendering."""

    def test_new_game_all_hidden(self, square_game: GameState) -> None:
        """Every tile renders as hidden before any move."""
        assert render_text(square_game) == "\n".join([". . . . "] * 4)

    def test_exposed_and_flagged(self, square_game: GameState) -> None:
        """Counts, blanks and flags are drawn; hidden mines are not."""
        state = toggle_flag(reveal(square_game, 15), 0)
        assert render_text(state).split("\n") == [
            "F . 1   ",
            ". . 1   ",
            "1 1 1   ",
            "        ",
        ]

    def test_loss_shows_mines(self, square_game: GameState) -> None:
        """Once lost, remaining mines are drawn."""
        state = reveal(toggle_flag(square_game, 3), 5)
        lines = render_text(state).split("\n")
        assert lines[0] == "* . . F "
        assert lines[1] == ". * . . "

    def test_win_shows_mines(self, square_game: GameState) -> None:
        """Once won, the mines that were never exposed are drawn."""
        state = square_game
        for index in (15, 1, 4):
            state = reveal(state, index)
        assert state.is_won
        lines = render_text(state).split("\n")
        assert lines[0] == "* 2 1   "
        assert lines[1] == "2 * 1   "

    def test_reveal_all_override(self, square_game: GameState) -> None:
        """Mines can be forced visible or hidden."""
        assert render_text(square_game, reveal_all=True).startswith("* ")
        lost = reveal(square_game, 5)
        assert render_text(lost, reveal_all=False).split("\n")[0] == ". . . . "

    def test_non_square_layout(self, wide_board) -> None:
        """One line per row, one character per column."""
        state = GameState(config=wide_board.config, board=wide_board)
        lines = render_text(state).split("\n")
        assert len(lines) == 3
        assert all(len(line) == 10 for line in lines)
