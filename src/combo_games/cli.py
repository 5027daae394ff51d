"""
Command-line interface: play a game against the minimax driver.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO

from combo_games.games import Connect3State, CrossoutState, KaylesState
from combo_games.games.game_base import GameStateBase
from combo_games.core.types import Score
from combo_games.search import TranspositionTable, choose_successor
from combo_games.utils.config import DEFAULT_SEARCH_DEPTH, GAMES, Config
from combo_games.utils.factory import create_from_config

logger = logging.getLogger(__name__)

MOVE_HELP = {
    "kayles": "group offset count (e.g. '0 1 1' knocks the 2nd pin of group 0)",
    "crossout": "one or two tile values (e.g. '2 3')",
    "connect3": "column number",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Kayles, Crossout or Connect-3 against a minimax opponent"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="kayles",
        help="Game to play (default: kayles)",
    )
    parser.add_argument(
        "--pins",
        type=int,
        nargs="+",
        default=None,
        help="Kayles: starting pin groups (default: 3 4 5)",
    )
    parser.add_argument(
        "--high-value",
        type=int,
        default=None,
        help="Crossout: number of tiles (default: 9)",
    )
    parser.add_argument(
        "--max-sum",
        type=int,
        default=None,
        help="Crossout: largest sum crossed per move (default: 9)",
    )
    parser.add_argument(
        "--columns",
        type=int,
        default=None,
        help="Connect-3: board columns (default: 4)",
    )
    parser.add_argument(
        "--elements",
        type=int,
        default=None,
        help="Connect-3: cells per column (default: 4)",
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=DEFAULT_SEARCH_DEPTH,
        help=f"Search depth in plies (default: {DEFAULT_SEARCH_DEPTH})",
    )
    parser.add_argument(
        "--human-first",
        action="store_true",
        help="Let the human make the first move",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="The computer plays both sides",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log search details",
    )
    return parser.parse_args(argv)


def game_params(args: argparse.Namespace) -> dict:
    """Pick the parameters of the chosen game out of the parsed arguments."""
    if args.game == "kayles":
        return {"pins": args.pins}
    if args.game == "crossout":
        return {"high_value": args.high_value, "max_sum": args.max_sum}
    return {"columns": args.columns, "elements": args.elements}


def parse_move(state: GameStateBase, text: str) -> GameStateBase:
    """
    Turn a typed move into the resulting state.

    Raises ValueError for malformed or illegal input.
    """
    try:
        numbers = [int(tok) for tok in text.split()]
    except ValueError as e:
        raise ValueError(f"Expected whole numbers, got '{text.strip()}'") from e

    if isinstance(state, KaylesState):
        if len(numbers) != 3:
            raise ValueError(f"Expected: {MOVE_HELP['kayles']}")
        return state.apply(tuple(numbers))

    if isinstance(state, CrossoutState):
        return state.apply(tuple(numbers))

    if isinstance(state, Connect3State):
        if len(numbers) != 1:
            raise ValueError(f"Expected: {MOVE_HELP['connect3']}")
        return state.apply(numbers[0])

    raise TypeError(f"Unsupported state type: {type(state).__name__}")


def describe_move(before: GameStateBase, after: GameStateBase) -> str:
    move = type(before).diff(before, after)
    if isinstance(before, KaylesState):
        group, offset, taken = move
        return f"knocks {taken} pin(s) from group {group} at offset {offset}"
    if isinstance(before, CrossoutState):
        return "crosses out " + " and ".join(str(t) for t in move)
    return f"drops in column {move}"


def play(
    config: Config,
    self_play: bool = False,
    read_line: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> Score:
    """
    Run one game to completion and return the computer's score.
    """
    if out is None:
        out = sys.stdout

    state = create_from_config(config)
    table = TranspositionTable()
    game_id = state.game_id()
    logger.info("Starting %s: %s", game_id, state)

    while not state.game_over():
        print(state, file=out)

        if state.computers_turn() or self_play:
            nxt, value = choose_successor(state, config.depth, table)
            print(f"Computer {describe_move(state, nxt)}", file=out)
            logger.info("Computer expects %s", Score(value).name)
            state = nxt
            continue

        text = read_line(f"Your move ({MOVE_HELP[game_id]}): ")
        try:
            state = parse_move(state, text)
        except ValueError as e:
            print(f"Illegal move: {e}", file=out)

    print(state, file=out)
    score = state.score_game()
    print({
        Score.VICTORY: "The computer wins.",
        Score.LOSS: "You win!",
        Score.TIE: "It's a draw.",
    }[score], file=out)
    logger.info("Finished %s with %s", game_id, score.name)
    return score


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        game_name=args.game,
        depth=args.depth,
        computer_first=not args.human_first,
        params=game_params(args),
    )

    try:
        play(config, self_play=args.self_play)
    except (KeyboardInterrupt, EOFError):
        print("\nGame abandoned.")


if __name__ == "__main__":
    main()
