import logging

from ai import OthelloAI
from config import BLACK, CHAR_MAP, COLOR_NAMES, EMPTY, GameConfig
from game import MoveCheck, OthelloGame, get_opponent
from utils import format_moves, format_seconds, parse_move, parse_side

logger = logging.getLogger(__name__)

INTRO = (
    "Othello: two players ('b' and 'w') compete for space on an 8x8 grid.\n"
    "Flanking your opponent's discs in a straight line flips them to your color.\n"
    "A move must flip at least one disc; with no such move you pass.\n"
    "Black always plays first.\n\n"
    "Enter moves as '<row> <column>' with numbers 0-7, e.g. '2 3'.\n"
)

INPUT_HELP = (
    "Invalid input: moves are entered as '<row> <column>' with numbers 0-7.\n"
    "e.g. to place a disc at row 1, column 2 enter '1 2'.\n"
)

REJECTIONS = {
    MoveCheck.OUT_OF_RANGE: "That square is off the board! Rows and columns run 0-7.",
    MoveCheck.OCCUPIED: "That square is taken! Try again.",
    MoveCheck.NO_CAPTURE: "Illegal move! It flips nothing. Try again.",
}


class GameAborted(Exception):
    """The input stream closed before the game finished."""


class ConsoleGame:
    """
    Text front end that drives alternating turns.

    Reads moves through `input_fn` and writes everything through
    `output_fn`, so a whole game can be scripted.
    """

    def __init__(self, config=None, input_fn=input, output_fn=print, ai=None):
        self.config = config if config is not None else GameConfig()
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.ai = ai if ai is not None else OthelloAI(self.config)

        self.game = OthelloGame()
        self.current_player = BLACK
        self.human_color = None
        self.ai_color = None
        self.total_moves = 0
        self.passes = 0
        self.engine_seconds = 0.0

    def say(self, text=""):
        self.output_fn(text)

    def ask(self, prompt):
        try:
            return self.input_fn(prompt)
        except EOFError:
            raise GameAborted("input closed during the game") from None

    def _color_to_str(self, color):
        return COLOR_NAMES.get(color, "Unknown")

    def choose_sides(self):
        if not self.config.play_ai or self.config.ai_vs_ai:
            return

        human = self.config.human_player
        while human is None:
            human = parse_side(self.ask("Enter 'b' to play as black or 'w' to play as white: "))
            if human is None:
                self.say("Invalid input: enter 'b' to be black or 'w' to be white.")

        self.human_color = human
        self.ai_color = get_opponent(human)
        self.say(f"You have chosen to play as {self._color_to_str(human).lower()}!\n")

    def is_engine_turn(self):
        if self.config.ai_vs_ai:
            return True
        return self.config.play_ai and self.current_player == self.ai_color

    def run(self):
        """Play until neither side can move. Returns the winner (EMPTY on a tie)."""
        self.say(INTRO)
        self.choose_sides()

        while not self.game.is_game_over():
            self.play_turn()

        return self.announce_winner()

    def play_turn(self):
        """Play one turn for the side to move. Returns False if it had to pass."""
        player = self.current_player
        opponent = get_opponent(player)
        moves = self.game.legal_moves(player)

        if not moves:
            self.say(f"{self._color_to_str(player)} is out of moves, PASS to {self._color_to_str(opponent)}.")
            logger.info("%s passes", self._color_to_str(player))
            self.game.make_move(None, player)
            self.passes += 1
            self.current_player = opponent
            return False

        self.show_scores()
        self.say(str(self.game.board))
        self.say()

        if self.is_engine_turn():
            self.engine_move(player)
        else:
            self.human_move(player, moves)

        self.total_moves += 1
        self.current_player = opponent
        return True

    def engine_move(self, player):
        move = self.ai.choose_move(self.game.board, player)
        self.engine_seconds += self.ai.elapsed
        result = self.game.make_move(move, player)
        if result is not MoveCheck.OK:
            # choose_move only returns moves from legal_moves
            raise RuntimeError(f"engine produced an illegal move {move}: {result.value}")
        self.say(f"AI ({self._color_to_str(player)}) plays {move[0]} {move[1]}")
        return move

    def human_move(self, player, moves):
        self.say(f"{self._color_to_str(player)} legal moves:")
        self.say(format_moves(moves))

        while True:
            text = self.ask(f"Your move ({CHAR_MAP[player]}): ")
            move = parse_move(text)
            if move is None:
                self.say(INPUT_HELP)
                continue

            result = self.game.make_move(move, player)
            if result is MoveCheck.OK:
                return move
            self.say(REJECTIONS[result])

    def show_scores(self):
        black, white = self.game.count_discs()
        self.say(f"Black total: {black}")
        self.say(f"White total: {white}")

    def announce_winner(self):
        self.say(str(self.game.board))
        self.show_scores()

        winner = self.game.get_winner()
        if winner == EMPTY:
            self.say("TIE GAME")
        else:
            self.say(f"{self._color_to_str(winner)} wins!")

        if self.config.play_ai:
            self.say(f"Engine thinking time: {format_seconds(self.engine_seconds)}")
        logger.info("game over after %d moves and %d passes", self.total_moves, self.passes)
        return winner
