import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from config import BLACK, WHITE, CORNERS, CORNER_BONUS, COLOR_NAMES, GameConfig
from game import Board, apply_move, get_opponent, legal_moves
from utils import format_moves, now_seconds

logger = logging.getLogger(__name__)

Move = Tuple[int, int]


def player_score(board, color):
    """Mobility + disc count + CORNER_BONUS per owned corner for one side."""
    score = len(legal_moves(board, color))
    score += board.count_of(color)
    score += CORNER_BONUS * sum(1 for i, j in CORNERS if board.grid[i][j] == color)
    return score


def evaluate(board):
    """
    Static value of `board`: Black's score minus White's score.

    Black is always the maximizing side, so a positive value favours Black
    no matter whose turn it is.
    """
    return player_score(board, BLACK) - player_score(board, WHITE)


@dataclass
class SearchNode:
    """
    One position in an explored game tree.

    Attributes:
        board:    Snapshot owned by this node.
        player:   Side to move at this node.
        moves:    Legal moves for `player`, row-major.
        children: One node per entry of `moves`, same order. Empty for
                  leaves, including positions where `player` must pass.
        value:    Backed-up minimax value, None until search visits the node.
    """

    board: Board
    player: int
    moves: List[Move] = field(default_factory=list)
    children: List["SearchNode"] = field(default_factory=list)
    value: Optional[int] = None

    def is_leaf(self) -> bool:
        return not self.children


@dataclass
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0
    pruned: int = 0


def build_tree(board: Board, depth: int, player: int) -> SearchNode:
    """
    Expand every position reachable from `board` within `depth` plies.

    The caller's board is copied, never modified. Each ply flips the side to
    move; a node whose player has no legal move gets no children.
    """
    return _build_node(board.copy(), depth, player)


def _build_node(board, depth, player):
    node = SearchNode(board=board, player=player, moves=legal_moves(board, player))

    if depth > 0 and node.moves:
        other = get_opponent(player)
        for row, col in node.moves:
            child_board = board.copy()
            apply_move(child_board, row, col, player)
            node.children.append(_build_node(child_board, depth - 1, other))

    return node


def count_nodes(node: SearchNode) -> int:
    return 1 + sum(count_nodes(child) for child in node.children)


def minimax(node, depth, alpha, beta, maximizing, stats=None):
    """
    Alpha-beta minimax over a tree from `build_tree`.

    Black maximizes, White minimizes. Every visited node gets its backed-up
    value stored in `node.value`; children after a cut are left unvisited.
    """
    if stats is not None:
        stats.nodes += 1

    # A childless node is terminal, a forced pass, or the tree's frontier.
    if depth == 0 or node.is_leaf():
        node.value = evaluate(node.board)
        return node.value

    if maximizing:
        max_eval = -math.inf
        for i, child in enumerate(node.children):
            eval_val = minimax(child, depth - 1, alpha, beta, False, stats)
            max_eval = max(max_eval, eval_val)
            alpha = max(alpha, eval_val)
            if beta <= alpha:
                _record_cut(stats, len(node.children) - (i + 1))
                break
        node.value = max_eval
        return max_eval
    else:
        min_eval = math.inf
        for i, child in enumerate(node.children):
            eval_val = minimax(child, depth - 1, alpha, beta, True, stats)
            min_eval = min(min_eval, eval_val)
            beta = min(beta, eval_val)
            if beta <= alpha:
                _record_cut(stats, len(node.children) - (i + 1))
                break
        node.value = min_eval
        return min_eval


def _record_cut(stats, skipped):
    if stats is None:
        return
    stats.cutoffs += 1
    stats.pruned += skipped


def minimax_plain(node, depth, maximizing):
    """Minimax without pruning. Visits the whole tree; same values as `minimax`."""
    if depth == 0 or node.is_leaf():
        node.value = evaluate(node.board)
        return node.value

    if maximizing:
        node.value = max(minimax_plain(child, depth - 1, False) for child in node.children)
    else:
        node.value = min(minimax_plain(child, depth - 1, True) for child in node.children)
    return node.value


def select_move(root: SearchNode, best_value, board: Board) -> Optional[Move]:
    """
    Map the root value back to a move.

    Picks the first child (row-major) whose value equals `best_value`. If that
    child's board is identical to `board` the search degenerated, and the
    first legal move is played instead.
    """
    if not root.moves:
        return None

    for move, child in zip(root.moves, root.children):
        if child.value == best_value:
            if child.board == board:
                return root.moves[0]
            return move

    return root.moves[0]


class OthelloAI:
    """
    Fixed-depth minimax player.

    A fresh tree is built for every decision and dropped once the move is
    chosen; nothing is carried between turns.
    """

    def __init__(self, config=None):
        self.config = config if config is not None else GameConfig()
        self.nodes_evaluated = 0
        self.last_root = None
        self.last_value = None
        self.elapsed = 0.0

    def choose_move(self, board, color):
        """Return the engine's move for `color` on `board`, or None to pass."""
        start_time = now_seconds()
        depth = self.config.depth

        root = build_tree(board, depth, color)
        if not root.moves:
            self.last_root = root
            return None

        stats = SearchStats()
        best_value = minimax(root, depth, -math.inf, math.inf, color == BLACK, stats)
        move = select_move(root, best_value, board)

        self.nodes_evaluated = stats.nodes
        self.last_root = root
        self.last_value = best_value
        self.elapsed = now_seconds() - start_time

        if self.config.debug:
            logger.debug("AI considered %d initial moves: %s",
                         len(root.moves), format_moves(root.moves))
            logger.debug("tree holds %d nodes", count_nodes(root))
            for move, child in zip(root.moves, root.children):
                logger.debug("  %s -> %s", move, child.value)
            logger.debug("pruned %d children across %d cutoffs", stats.pruned, stats.cutoffs)

        logger.debug("AI %s -> %s (value=%s, t=%.2fs, n=%d)",
                     COLOR_NAMES[color], move, best_value, self.elapsed, stats.nodes)
        return move
