import argparse
import logging
import sys

from config import MINIMAX_DEPTH, GameConfig
from console import ConsoleGame, GameAborted
from utils import parse_side

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Othello in the terminal.")
    parser.add_argument("--depth", type=int, default=MINIMAX_DEPTH,
                        help="plies searched by the engine (default: %(default)s)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--two-player", action="store_true",
                      help="two humans at one keyboard, no engine")
    mode.add_argument("--ai-vs-ai", action="store_true",
                      help="let the engine play both sides")
    parser.add_argument("--color", choices=["b", "w"],
                        help="side to play against the engine (asked if omitted)")
    parser.add_argument("--debug", action="store_true",
                        help="log the engine's root evaluations")
    return parser.parse_args(argv)


def build_config(args):
    return GameConfig(
        depth=args.depth,
        play_ai=not args.two_player,
        human_player=parse_side(args.color) if args.color else None,
        ai_vs_ai=args.ai_vs_ai,
        debug=args.debug,
    )


def main(argv=None, input_fn=input, output_fn=print):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        ConsoleGame(config, input_fn=input_fn, output_fn=output_fn).run()
    except (GameAborted, KeyboardInterrupt) as e:
        logger.warning("game aborted: %s", str(e) or "interrupted")
        print("\nGame aborted.", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
