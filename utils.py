import re
import time
from typing import Iterable, Optional, Tuple

from config import BLACK, WHITE

MOVE_PATTERN = re.compile(r"^\s*(-?\d+)\s+(-?\d+)\s*$")
SIDE_CHOICES = {'b': BLACK, 'w': WHITE}


def now_seconds() -> float:
    return time.time()


def format_seconds(s: float) -> str:
    if s < 0:
        s = 0
    mins = int(s) // 60
    secs = int(s) % 60
    return f"{mins:02d}:{secs:02d}"


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """Parse '<row> <col>' into a tuple; None when the text is not two integers.

    Range is not checked here: '9 2' parses and is rejected by the rules.
    """
    match = MOVE_PATTERN.match(text)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def parse_side(text: str) -> Optional[int]:
    return SIDE_CHOICES.get(text.strip().lower())


def format_moves(moves: Iterable[Tuple[int, int]]) -> str:
    return "  ".join(f"({r},{c})" for r, c in moves)
