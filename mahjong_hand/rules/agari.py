"""Win (和了) and ready (聴牌) detection - standard form, seven pairs, thirteen orphans.

Classifies the decompositions produced by `decompose` against a hand's
meld calls.
"""

from enum import Enum
from typing import Iterator, List, NamedTuple, Tuple

from mahjong_hand.core.hand import Hand
from mahjong_hand.rules.decompose import Decomposition, decompose


class Completion(Enum):
    NONE = "none"
    TINGPAI = "tingpai"   # 聴牌, one tile away
    HU = "hu"             # 和了, complete


class GroupCount(NamedTuple):
    triads: int   # closed chows/pongs + every non-bonus call
    pairs: int
    protos: int   # dazi + qiandazi


def count_groups(hand: Hand, d: Decomposition) -> GroupCount:
    called = sum(1 for m in hand.melds if not m.is_bonus)
    return GroupCount(d.triad_count + called, len(d.pairs), d.proto_count)


def is_regular_hu(count: GroupCount) -> bool:
    """4 mentsu + 1 jantai."""
    return count.triads == 4 and count.pairs == 1 and count.protos == 0


def is_regular_tingpai(count: GroupCount) -> bool:
    triads, pairs, protos = count
    # Tanki: four groups and a lone tile
    if triads == 4 and pairs == 0 and protos == 0:
        return True
    # Pair + proto-run, or two pairs (shanpon)
    return triads == 3 and pairs + protos == 2 and pairs >= 1


def is_seven_pairs_hu(count: GroupCount, d: Decomposition) -> bool:
    """Seven pairs (七対子): seven different pairs, a quad is not two pairs."""
    return (count.triads == 0 and count.protos == 0 and count.pairs == 7
            and len(set(d.pairs)) == 7)


def is_seven_pairs_tingpai(count: GroupCount, d: Decomposition) -> bool:
    if count.triads != 0 or count.protos != 0 or count.pairs != 6:
        return False
    if len(set(d.pairs)) != 6:
        return False
    if not (1 <= len(d.singles) <= 2) or len(set(d.singles)) != len(d.singles):
        return False
    return any(s not in d.pairs for s in d.singles)


def classify(hand: Hand, d: Decomposition) -> Completion:
    """Classify one decomposition as complete, ready or neither."""
    count = count_groups(hand, d)
    if is_regular_hu(count) or is_seven_pairs_hu(count, d):
        return Completion.HU
    if is_regular_tingpai(count) or is_seven_pairs_tingpai(count, d):
        return Completion.TINGPAI
    return Completion.NONE


def classify_thirteen_orphans(hand: Hand) -> List[Completion]:
    """Thirteen orphans (国士無双), read straight off the closed tiles.

    A complete 14-tile hand is also ready (throw the duplicate), so it
    yields both completions.
    """
    tiles = [t.plain for t in hand.closed_tiles]
    yaochu = [t for t in tiles if t.is_yaochu]
    if len(yaochu) < 13:
        return []
    kinds = len(set(yaochu))
    if kinds == 13:
        if len(tiles) == 14 and len(yaochu) == 14:
            return [Completion.HU, Completion.TINGPAI]
        return [Completion.TINGPAI]
    if kinds == 12:
        return [Completion.TINGPAI]
    return []


def search(hand: Hand) -> Iterator[Tuple[Completion, Decomposition]]:
    """Yield every (completion, decomposition) that is complete or ready."""
    tiles = [t.plain for t in hand.closed_tiles]
    orphans = classify_thirteen_orphans(hand)
    if orphans:
        all_singles = Decomposition(singles=tuple(tiles))
        for completion in orphans:
            yield completion, all_singles
    for d in decompose(tiles):
        completion = classify(hand, d)
        if completion != Completion.NONE:
            yield completion, d


def hu_decompositions(hand: Hand) -> List[Decomposition]:
    """All decompositions that make a complete hand."""
    return [d for completion, d in search(hand) if completion == Completion.HU]


def is_agari(hand: Hand) -> bool:
    return any(completion == Completion.HU for completion, _ in search(hand))
