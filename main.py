#!/usr/bin/env python3
"""Japanese Riichi Mahjong - Terminal Hand Evaluator

Usage:
    python main.py 123m456p789s1122z --tsumo --dora 1z
    python main.py "2224z[^333z][^777z][^999m]" --round east --seat south
"""

import argparse
import logging
import sys
from typing import List

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from mahjong_hand.core.errors import MahjongError
from mahjong_hand.core.notation import parse_hand, parse_tiles
from mahjong_hand.core.situation import SituationalState, Wind
from mahjong_hand.core.tile import Tile
from mahjong_hand.engine.evaluate import evaluate_hand
from mahjong_hand.ui.i18n import set_language, t
from mahjong_hand.ui.report import render_evaluation

console = Console()
logger = logging.getLogger("mahjong_hand")

WIND_CHOICES = [w.name.lower() for w in Wind]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate a Riichi Mahjong hand: yaku, fu, points and waits")
    parser.add_argument("hand", help="hand code, e.g. 123m456p[<789s]11z2z")
    parser.add_argument("--round", choices=WIND_CHOICES, default="east",
                        help="round wind (default: east)")
    parser.add_argument("--seat", choices=WIND_CHOICES, default="east",
                        help="seat wind; east is the dealer (default: east)")
    parser.add_argument("--riichi", action="store_true", help="riichi declared")
    parser.add_argument("--tsumo", action="store_true",
                        help="won by self-draw (default: ron)")
    parser.add_argument("--dora", default="",
                        help="dora indicators as a tile code, e.g. 1m5z")
    parser.add_argument("--ura-dora", default="",
                        help="hidden dora indicators, counted with --riichi")
    parser.add_argument("--honba", type=int, default=0, help="honba sticks")
    parser.add_argument("--lang", choices=["ja", "en"], default="ja",
                        help="report language (default: ja)")
    parser.add_argument("--all", action="store_true", dest="show_all",
                        help="show every winning reading, not just the best")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def read_indicators(code: str) -> List[Tile]:
    """Parse dora indicators; unreadable input means no dora."""
    if not code:
        return []
    try:
        return parse_tiles(code)
    except MahjongError:
        logger.warning(t("msg.bad_dora", code=code))
        return []


def build_situation(args: argparse.Namespace) -> SituationalState:
    return SituationalState(
        round_wind=Wind.from_name(args.round),
        seat_wind=Wind.from_name(args.seat),
        is_riichi=args.riichi,
        is_tsumo=args.tsumo,
        dora_indicators=read_indicators(args.dora),
        ura_dora_indicators=read_indicators(args.ura_dora),
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    set_language(args.lang)

    try:
        hand = parse_hand(args.hand)
    except MahjongError as e:
        console.print(f"[red]{t('msg.error', message=escape(str(e)))}[/red]")
        return 2

    situation = build_situation(args)
    evaluation = evaluate_hand(hand, situation)
    render_evaluation(console, hand, situation, evaluation,
                      honba=args.honba, show_all=args.show_all)
    return 0


if __name__ == "__main__":
    sys.exit(main())
