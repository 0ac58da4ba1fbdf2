"""Hand evaluation entry point - win result and waits in one call."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from mahjong_hand.core.hand import Hand
from mahjong_hand.core.situation import SituationalState
from mahjong_hand.rules.agari import Completion, search
from mahjong_hand.rules.scoring import WinningHand, score_hand, select_best_hand
from mahjong_hand.rules.waits import Wait, collect_waits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationOptions:
    """What to compute for a hand."""
    hu: bool = True
    tingpai: bool = True


@dataclass(frozen=True)
class Evaluation:
    """Result of evaluating a hand.

    Attributes:
        tile_count: 13 or 14
        hu: Best winning reading, None when not a win or not requested
        tingpai: Waits, None when not requested
        readings: Every winning reading, in decomposition order
    """
    tile_count: int
    hu: Optional[WinningHand] = None
    tingpai: Optional[List[Wait]] = None
    readings: List[WinningHand] = field(default_factory=list)

    @property
    def is_hu(self) -> bool:
        return self.hu is not None

    @property
    def is_tingpai(self) -> bool:
        return bool(self.tingpai)


def evaluate_hand(hand: Hand, situation: Optional[SituationalState] = None,
                  options: Optional[EvaluationOptions] = None) -> Evaluation:
    """Evaluate a hand for a win and for the tiles it waits on.

    A 13-tile hand is never a win. A 14-tile hand can be both a win and
    ready (by throwing one tile).
    """
    situation = situation or SituationalState()
    options = options or EvaluationOptions()

    hu_decompositions = []
    tingpai_decompositions = []
    for completion, d in search(hand):
        if completion == Completion.HU:
            hu_decompositions.append(d)
        elif completion == Completion.TINGPAI:
            tingpai_decompositions.append(d)
    logger.debug("%d winning and %d ready decompositions",
                 len(hu_decompositions), len(tingpai_decompositions))

    readings: List[WinningHand] = []
    best = None
    if options.hu and hand.tile_count == 14 and hu_decompositions:
        readings = score_hand(hand, hu_decompositions, situation)
        best = select_best_hand(readings)

    waits = None
    if options.tingpai:
        waits = collect_waits(hand, tingpai_decompositions)

    return Evaluation(
        tile_count=hand.tile_count,
        hu=best,
        tingpai=waits,
        readings=readings,
    )
