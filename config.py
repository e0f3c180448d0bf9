from dataclasses import dataclass
from typing import Optional

# Board configuration
BOARD_SIZE = 8

# Player colors (using integers for internal representation)
EMPTY = 0
BLACK = 1   # Black moves first
WHITE = -1  # White is opponent

# Character representation for display
CHAR_MAP = {
    EMPTY: '-',
    BLACK: 'b',
    WHITE: 'w'
}

COLOR_NAMES = {
    BLACK: 'Black',
    WHITE: 'White'
}

# AI Configuration
MINIMAX_DEPTH = 5  # plies searched by the engine
SEARCH_INFINITY = 9999999

# Evaluation: legal moves + discs + a flat bonus per owned corner
CORNER_BONUS = 10
CORNERS = [(0, 0), (7, 0), (0, 7), (7, 7)]

# Directions for move validation (8 directions)
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1)
]


@dataclass(frozen=True)
class GameConfig:
    """Run-time choices for one game session.

    depth:        plies searched by the engine on each of its turns
    play_ai:      False for a two-player game at one keyboard
    human_player: side played by the human against the engine; None asks
    ai_vs_ai:     let the engine play both sides
    debug:        log root child values and pruning for every engine move
    """

    depth: int = MINIMAX_DEPTH
    play_ai: bool = True
    human_player: Optional[int] = None
    ai_vs_ai: bool = False
    debug: bool = False

    def __post_init__(self):
        if self.depth < 1:
            raise ValueError(f"search depth must be at least 1, got {self.depth}")
        if self.human_player not in (None, BLACK, WHITE):
            raise ValueError(f"unknown player color: {self.human_player!r}")
