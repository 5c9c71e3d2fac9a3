from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from omaha.engine import RunConfig, TieCounting, run_equity
from omaha.helpers import DegenerateRun, EvaluationError, InvalidInput, format_report, report_dict
from omaha.helpers.evaluator import HOLE_CARDS

BOARD_SEPARATOR = "--"


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="omaha-cmpn",
        description="Compare 2-9 Omaha hi/lo hands at any street. "
                    "Cards after '--' are the known board.",
        usage="%(prog)s [-m ITER] [-d CARD]... p1-cards .. p9-cards [-- common-cards]",
    )
    ap.add_argument("cards", nargs="*", help="hole cards, four per player (e.g. Kh Tc Ac 10h)")
    ap.add_argument("-m", "--iterations", type=int, default=None,
                    help="Monte Carlo with this many boards (default: enumerate every board)")
    ap.add_argument("-d", "--dead", action="append", default=[], metavar="CARD",
                    help="dead card, repeat for more")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--workers", type=int, default=1)
    ap.add_argument("--tie-counting", choices=[t.value for t in TieCounting], default=TieCounting.SHARE.value)
    ap.add_argument("--high-only", action="store_true", help="Omaha high, no low half")
    ap.add_argument("--json", action="store_true")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def split_board(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    argv = list(argv)
    if BOARD_SEPARATOR not in argv:
        return argv, []
    i = argv.index(BOARD_SEPARATOR)
    return argv[:i], argv[i + 1:]


def group_hands(cards: Sequence[str]) -> List[List[str]]:
    return [list(cards[i:i + HOLE_CARDS]) for i in range(0, len(cards), HOLE_CARDS)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_arg_parser()
    head, board = split_board(sys.argv[1:] if argv is None else argv)
    args = ap.parse_intermixed_args(head)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RunConfig.from_cards(
            group_hands(args.cards),
            board=board,
            dead=args.dead,
            iterations=args.iterations,
            seed=args.seed,
            workers=args.workers,
            tie_counting=args.tie_counting,
            high_only=args.high_only,
        )
    except InvalidInput as e:
        ap.error(str(e))

    try:
        result = run_equity(config)
    except (EvaluationError, DegenerateRun) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        data = report_dict(
            result, config.hands, config.board, config.dead,
            mode="montecarlo" if config.monte_carlo else "exhaustive",
            seed=config.seed,
        )
        print(json.dumps(data, indent=2))
    else:
        print(format_report(result, config.hands, config.board, config.dead))
    return 0


if __name__ == "__main__":
    sys.exit(main())
