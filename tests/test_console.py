import pytest

from config import BLACK, EMPTY, WHITE, GameConfig
from console import INPUT_HELP, REJECTIONS, ConsoleGame, GameAborted
from game import MoveCheck, OthelloGame, is_terminal


def make_console(config, lines, scripted):
    output = []
    console = ConsoleGame(config, input_fn=scripted(lines), output_fn=output.append)
    return console, output


class TestTurns:
    def test_black_pass_is_skipped(self, pass_board, scripted):
        console, output = make_console(GameConfig(play_ai=False), [], scripted)
        console.game = OthelloGame(pass_board)

        assert console.play_turn() is False

        assert console.current_player == WHITE
        assert console.total_moves == 0
        assert console.passes == 1
        assert console.game.board == pass_board
        assert not is_terminal(console.game.board)
        assert "Black is out of moves, PASS to White." in output

    def test_pass_then_game_ends(self, pass_board, scripted):
        console, output = make_console(GameConfig(play_ai=False), ["0 2"], scripted)
        console.game = OthelloGame(pass_board)

        assert console.run() == WHITE
        assert console.total_moves == 1
        assert console.passes == 1
        assert "White wins!" in output
        assert "Black total: 0" in output
        assert "White total: 3" in output

    def test_human_move_reprompts_until_legal(self, scripted):
        lines = ["garbage", "0 0", "3 3", "9 9", "2 3"]
        console, output = make_console(GameConfig(play_ai=False), lines, scripted)

        assert console.play_turn() is True

        assert console.game.board.cell_at(2, 3) == BLACK
        assert console.game.count_discs() == (4, 1)
        assert console.total_moves == 1
        assert console.current_player == WHITE
        assert INPUT_HELP in output
        assert REJECTIONS[MoveCheck.NO_CAPTURE] in output
        assert REJECTIONS[MoveCheck.OCCUPIED] in output
        assert REJECTIONS[MoveCheck.OUT_OF_RANGE] in output
        assert "(2,3)  (3,2)  (4,5)  (5,4)" in output
        assert console.input_fn.prompts == ["Your move (b): "] * 5

    def test_scores_and_board_shown_each_turn(self, scripted):
        console, output = make_console(GameConfig(play_ai=False), ["2 3"], scripted)
        console.play_turn()
        assert output[:2] == ["Black total: 2", "White total: 2"]
        assert output[2].startswith("   0  1  2")

    def test_engine_plays_black_first(self, scripted):
        console, output = make_console(GameConfig(depth=1, human_player=WHITE), [], scripted)
        console.choose_sides()

        console.play_turn()

        assert console.game.board.cell_at(2, 3) == BLACK
        assert "AI (Black) plays 2 3" in output
        assert console.current_player == WHITE


class TestSides:
    def test_asks_until_valid(self, scripted):
        console, output = make_console(GameConfig(depth=1), ["x", "w"], scripted)
        console.choose_sides()
        assert console.human_color == WHITE
        assert console.ai_color == BLACK
        assert "Invalid input: enter 'b' to be black or 'w' to be white." in output
        assert "You have chosen to play as white!\n" in output

    def test_preset_side_is_not_asked(self, scripted):
        console, _ = make_console(GameConfig(depth=1, human_player=BLACK), [], scripted)
        console.choose_sides()
        assert console.human_color == BLACK
        assert console.input_fn.prompts == []

    def test_two_player_has_no_engine_side(self, scripted):
        console, _ = make_console(GameConfig(play_ai=False), [], scripted)
        console.choose_sides()
        assert console.ai_color is None
        assert not console.is_engine_turn()


class TestFullGames:
    def test_ai_vs_ai_plays_to_the_end(self, scripted):
        console, output = make_console(GameConfig(depth=1, ai_vs_ai=True), [], scripted)

        result = console.run()

        assert console.game.is_game_over()
        assert result in (BLACK, WHITE, EMPTY)
        black, white = console.game.count_discs()
        assert console.total_moves == black + white - 4
        assert output[-2] in ("Black wins!", "White wins!", "TIE GAME")
        assert output[-1].startswith("Engine thinking time: ")

    def test_human_against_engine_until_input_runs_out(self, scripted):
        console, _ = make_console(GameConfig(depth=1, human_player=BLACK), ["2 3"], scripted)
        with pytest.raises(GameAborted):
            console.run()
        # one human move, one engine reply, then the script ran dry
        assert console.total_moves == 2
        assert console.game.count_discs()[0] + console.game.count_discs()[1] == 6

    def test_eof_aborts(self, scripted):
        console, _ = make_console(GameConfig(play_ai=False), [], scripted)
        with pytest.raises(GameAborted):
            console.run()
