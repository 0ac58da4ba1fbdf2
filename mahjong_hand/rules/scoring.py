"""Score calculation - convert fan + fu to basic points and payments."""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from mahjong_hand.core.hand import Hand
from mahjong_hand.core.situation import SituationalState
from mahjong_hand.rules.decompose import Decomposition
from mahjong_hand.rules.fu import calculate_fu
from mahjong_hand.rules.yaku import (
    HandContext, YakuResult, count_dora, detect_yaku, detect_yakuman,
)

logger = logging.getLogger(__name__)

YAKUMAN_LIMIT_NAMES = [
    "役満", "二倍役満", "三倍役満", "四倍役満", "五倍役満", "六倍役満", "七倍役満",
]


@dataclass(frozen=True)
class WinningHand:
    """Result of scoring one reading of a winning hand.

    A yakuman hand carries `yakuman` and `multiplier` and leaves the
    regular fields at zero. A regular hand carries `yaku`, the dora
    counts, `fu` and `fan` (yaku fan plus every dora).
    """
    decomposition: Decomposition
    basic_points: int
    limit_name: str
    yakuman: Tuple[YakuResult, ...] = ()
    multiplier: int = 0
    yaku: Tuple[YakuResult, ...] = ()
    dora: int = 0
    red_dora: int = 0
    bonus_dora: int = 0
    ura_dora: int = 0
    fu: int = 0
    fan: int = 0

    @property
    def is_yakuman(self) -> bool:
        return bool(self.yakuman)

    @property
    def yaku_fan(self) -> int:
        return sum(fan for _, fan in self.yaku)

    @property
    def dora_fan(self) -> int:
        return self.dora + self.red_dora + self.bonus_dora + self.ura_dora

    @property
    def has_yaku(self) -> bool:
        return self.is_yakuman or self.yaku_fan > 0


def calculate_basic_points(fu: int, yaku_fan: int, dora_fan: int) -> int:
    """Basic points (基本点) from fu and fan; 0 without a yaku."""
    if yaku_fan == 0:
        return 0
    fan = yaku_fan + dora_fan
    if fan >= 13:
        return 8000  # 数え役満
    if fan >= 11:
        return 6000  # 三倍満
    if fan >= 8:
        return 4000  # 倍満
    if fan >= 6:
        return 3000  # 跳満
    return min(fu * 2 ** (2 + fan), 2000)


def limit_name(fu: int, yaku_fan: int, dora_fan: int) -> str:
    if yaku_fan == 0:
        return ""
    fan = yaku_fan + dora_fan
    if fan >= 13:
        return "数え役満"
    if fan >= 11:
        return "三倍満"
    if fan >= 8:
        return "倍満"
    if fan >= 6:
        return "跳満"
    if fu * 2 ** (2 + fan) >= 2000:
        return "満貫"
    return ""


def yakuman_limit_name(multiplier: int) -> str:
    return YAKUMAN_LIMIT_NAMES[min(multiplier, len(YAKUMAN_LIMIT_NAMES)) - 1]


def evaluate_winning_hand(d: Decomposition, hand: Hand,
                          situation: SituationalState) -> WinningHand:
    """Score one winning decomposition.

    Any yakuman short-circuits the regular yaku, fu and dora. A hand with
    no yaku still reports its fu and fan with zero basic points.
    """
    ctx = HandContext.build(d, hand, situation)

    yakuman = detect_yakuman(ctx)
    if yakuman:
        multiplier = sum(m for _, m in yakuman)
        return WinningHand(
            decomposition=d,
            basic_points=8000 * multiplier,
            limit_name=yakuman_limit_name(multiplier),
            yakuman=tuple(yakuman),
            multiplier=multiplier,
        )

    yaku = detect_yaku(ctx)
    dora = count_dora(hand, situation)
    fu = calculate_fu(ctx)
    yaku_fan = sum(fan for _, fan in yaku)
    return WinningHand(
        decomposition=d,
        basic_points=calculate_basic_points(fu, yaku_fan, dora.total),
        limit_name=limit_name(fu, yaku_fan, dora.total),
        yaku=tuple(yaku),
        dora=dora.dora,
        red_dora=dora.red,
        bonus_dora=dora.bonus,
        ura_dora=dora.ura,
        fu=fu,
        fan=yaku_fan + dora.total,
    )


def select_best_hand(results: Iterable[WinningHand]) -> Optional[WinningHand]:
    """Highest basic points, then highest fan; the first reading wins a tie."""
    best = None
    for result in results:
        if best is None or (result.basic_points, result.fan) > (best.basic_points, best.fan):
            best = result
    if best is not None:
        logger.debug("best reading: %d basic points, %d fan", best.basic_points, best.fan)
    return best


def score_hand(hand: Hand, decompositions: Iterable[Decomposition],
               situation: SituationalState) -> List[WinningHand]:
    """Score every winning decomposition of `hand`."""
    return [evaluate_winning_hand(d, hand, situation) for d in decompositions]


@dataclass(frozen=True)
class Payment:
    """Points the winner collects.

    Attributes:
        ron: Paid by the discarder on a ron win
        tsumo_dealer: Paid by the dealer on a non-dealer tsumo
        tsumo_non_dealer: Paid by each non-dealer on a tsumo
        total: Everything the winner collects
    """
    ron: int = 0
    tsumo_dealer: int = 0
    tsumo_non_dealer: int = 0
    total: int = 0


def _round_up_100(points: int) -> int:
    return ((points + 99) // 100) * 100


def calculate_payment(basic_points: int, is_dealer: bool, is_tsumo: bool,
                      honba: int = 0) -> Payment:
    """Turn basic points into the payments of a four-player table."""
    if basic_points <= 0:
        return Payment()

    if is_tsumo:
        if is_dealer:
            each = _round_up_100(basic_points * 2) + 100 * honba
            return Payment(tsumo_non_dealer=each, total=each * 3)
        dealer_pay = _round_up_100(basic_points * 2) + 100 * honba
        non_dealer_pay = _round_up_100(basic_points) + 100 * honba
        return Payment(
            tsumo_dealer=dealer_pay,
            tsumo_non_dealer=non_dealer_pay,
            total=dealer_pay + non_dealer_pay * 2,
        )

    factor = 6 if is_dealer else 4
    ron = _round_up_100(basic_points * factor) + 300 * honba
    return Payment(ron=ron, total=ron)
