import pytest

from config import BLACK, EMPTY, WHITE
from game import Board, apply_move, get_opponent, legal_moves

CELLS = {'-': EMPTY, 'b': BLACK, 'w': WHITE}


def make_board(*rows):
    """Build a Board from up to 8 strings of '-', 'b', 'w'; short rows and missing rows are empty."""
    rows = [row.ljust(8, '-') for row in rows] + ["--------"] * (8 - len(rows))
    return Board([[CELLS[ch] for ch in row] for row in rows])


class ScriptedInput:
    """Stands in for input(): replays lines, then raises EOFError."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def board_from_rows():
    return make_board


@pytest.fixture
def scripted():
    return ScriptedInput


@pytest.fixture
def pass_board():
    # Black has no move anywhere; White can only play (0, 2).
    return make_board("wb------")


def play_first_moves(plies):
    """Play the first legal move for each side in turn, passing when stuck."""
    board = Board.initial()
    color = BLACK
    for _ in range(plies):
        moves = legal_moves(board, color)
        if moves:
            apply_move(board, *moves[0], color)
        color = get_opponent(color)
    return board


@pytest.fixture
def opening_line():
    return play_first_moves
