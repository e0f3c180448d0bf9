import enum
import logging

from config import BOARD_SIZE, EMPTY, BLACK, WHITE, CHAR_MAP, DIRECTIONS

logger = logging.getLogger(__name__)


class OutOfRangeError(ValueError):
    """Raised when internal code addresses a cell outside the 8x8 grid."""


class MoveCheck(enum.Enum):
    """Outcome of validating a proposed placement."""

    OK = "ok"
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"
    NO_CAPTURE = "no_capture"

    def __bool__(self):
        return self is MoveCheck.OK


def is_on_board(row, col):
    #Check if position is within board bounds.
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def get_opponent(color):
    #Return opponent's color.
    return WHITE if color == BLACK else BLACK


class Board:
    """The 8x8 grid of cell states, stored as a list of row lists.

    Row 0 is printed at the top and column 0 on the left. Cells hold
    EMPTY, BLACK or WHITE and the grid is never resized.
    """

    def __init__(self, rows=None):
        if rows is None:
            self.grid = [[EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
            return
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
        for row in rows:
            for cell in row:
                if cell not in CHAR_MAP:
                    raise ValueError(f"unknown cell state: {cell!r}")
        self.grid = [list(row) for row in rows]

    @classmethod
    def initial(cls):
        """Return the starting position: two discs of each color in the center."""
        board = cls()
        board.grid[3][3] = WHITE
        board.grid[3][4] = BLACK
        board.grid[4][3] = BLACK
        board.grid[4][4] = WHITE
        return board

    def cell_at(self, row, col):
        if not is_on_board(row, col):
            raise OutOfRangeError(f"cell ({row}, {col}) is off the board")
        return self.grid[row][col]

    def set_cell(self, row, col, state):
        if not is_on_board(row, col):
            raise OutOfRangeError(f"cell ({row}, {col}) is off the board")
        self.grid[row][col] = state

    def count_of(self, color):
        return sum(row.count(color) for row in self.grid)

    def copy(self):
        clone = Board.__new__(Board)
        clone.grid = [row[:] for row in self.grid]
        return clone

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __repr__(self):
        return f"Board(black={self.count_of(BLACK)}, white={self.count_of(WHITE)})"

    def __str__(self):
        lines = ["   " + "  ".join(str(c) for c in range(BOARD_SIZE))]
        for i in range(BOARD_SIZE):
            lines.append(str(i) + "  " + "  ".join(CHAR_MAP[cell] for cell in self.grid[i]))
        return "\n".join(lines)


def count_of(board, color):
    """Number of discs `color` has on `board`."""
    return board.count_of(color)


def _flanked_run(board, row, col, dr, dc, color):
    """Opponent discs between (row, col) and the next `color` disc along (dr, dc).

    Empty when the run is empty, hits an empty cell or walks off the board.
    """
    opponent = get_opponent(color)
    grid = board.grid
    run = []
    r, c = row + dr, col + dc

    while is_on_board(r, c) and grid[r][c] == opponent:
        run.append((r, c))
        r += dr
        c += dc

    if run and is_on_board(r, c) and grid[r][c] == color:
        return run
    return []


def is_capture_move(board, row, col, color):
    #Check if placing a disc at (row, col) is valid.
    #Must flip at least one opponent disc.
    if not is_on_board(row, col) or board.grid[row][col] != EMPTY:
        return False

    for dr, dc in DIRECTIONS:
        if _flanked_run(board, row, col, dr, dc, color):
            return True

    return False


def captured_discs(board, row, col, color):
    #Return the opponent discs a move at (row, col) would flip, direction by direction.
    flipped = []
    for dr, dc in DIRECTIONS:
        flipped.extend(_flanked_run(board, row, col, dr, dc, color))
    return flipped


def legal_moves(board, color):
    #Return legal moves for given board state and color, in row-major order.
    moves = []
    for i in range(BOARD_SIZE):
        for j in range(BOARD_SIZE):
            if is_capture_move(board, i, j, color):
                moves.append((i, j))
    return moves


def apply_move(board, row, col, color):
    """Place a `color` disc at (row, col) and flip every flanked run.

    The move is not re-validated: callers pass a move taken from
    `legal_moves` or accepted by `check_move`. Returns the flipped cells.
    """
    flipped = captured_discs(board, row, col, color)
    board.grid[row][col] = color
    for r, c in flipped:
        board.grid[r][c] = color
    return flipped


def is_terminal(board):
    #Check if game is over (no legal moves for either player).
    return not legal_moves(board, BLACK) and not legal_moves(board, WHITE)


def check_move(board, row, col, color):
    """Validate a proposed move without touching the board."""
    if not is_on_board(row, col):
        return MoveCheck.OUT_OF_RANGE
    if board.grid[row][col] != EMPTY:
        return MoveCheck.OCCUPIED
    if not is_capture_move(board, row, col, color):
        return MoveCheck.NO_CAPTURE
    return MoveCheck.OK


def winner(board):
    #Returns BLACK, WHITE, or EMPTY (tie).
    black = board.count_of(BLACK)
    white = board.count_of(WHITE)
    if black > white:
        return BLACK
    elif white > black:
        return WHITE
    else:
        return EMPTY


class OthelloGame:
    def __init__(self, board=None):
        #Initialize the game board and history.
        self.board = board if board is not None else Board.initial()
        self.history = []  # For undo functionality

    def __str__(self):
        return str(self.board)

    def legal_moves(self, color):
        return legal_moves(self.board, color)

    def make_move(self, move, color):
        """Validate and play `move` for `color`; a None move records a pass.

        Returns the MoveCheck result. The board is only changed on OK.
        """
        if move is None:
            # Pass - no legal moves available
            self.history.append({
                'move': None,
                'color': color,
                'flipped': []
            })
            return MoveCheck.OK

        row, col = move
        result = check_move(self.board, row, col, color)
        if result is not MoveCheck.OK:
            logger.debug("rejected %s for %s: %s", move, CHAR_MAP[color], result.value)
            return result

        flipped = apply_move(self.board, row, col, color)

        # Save state for undo
        self.history.append({
            'move': move,
            'color': color,
            'flipped': flipped
        })
        return MoveCheck.OK

    def undo_last_move(self):
        #Undo the last move. Returns True if successful.
        if not self.history:
            return False

        last = self.history.pop()
        move = last['move']

        if move is None:
            # Was a pass, nothing to undo on board
            return True

        row, col = move
        opponent = get_opponent(last['color'])

        # Remove the placed disc
        self.board.grid[row][col] = EMPTY

        # Flip back opponent discs
        for r, c in last['flipped']:
            self.board.grid[r][c] = opponent

        return True

    def count_discs(self):
        #Count discs for each color. Returns (black_count, white_count).
        return self.board.count_of(BLACK), self.board.count_of(WHITE)

    def is_game_over(self):
        return is_terminal(self.board)

    def get_winner(self):
        #Should only be called when game is over.
        return winner(self.board)
