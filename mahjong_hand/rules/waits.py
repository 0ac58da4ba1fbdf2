"""Waiting tiles (待ち牌) of ready decompositions.

A wait is a (discard, needed) pair. `discard` is the tile a 14-tile hand
throws to reach the ready shape (None for a 13-tile hand); `needed` is
the tile that then completes it.
"""

import logging
from collections import Counter
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from mahjong_hand.core.hand import Hand
from mahjong_hand.core.tile import Tile, YAOCHU_TILES
from mahjong_hand.rules.decompose import Decomposition

logger = logging.getLogger(__name__)

Wait = Tuple[Optional[Tile], Tile]


def waiting_tiles(d: Decomposition, hand: Hand) -> Iterator[Wait]:
    """Yield the waits of one ready decomposition.

    A wait on a tile whose four copies are all in the hand already
    (concealed, called or picked) can never be drawn and is dropped.
    """
    visible = hand.visible_counts()

    def exhausted(tile: Tile) -> bool:
        return visible[tile] >= 4

    if d.is_all_singles and len(d.singles) >= 13:
        yield from _thirteen_orphans_waits(d.singles, exhausted)
    elif len(d.pairs) >= 6:
        yield from _seven_pairs_waits(d, exhausted)
    else:
        yield from _regular_waits(d, exhausted)


def _regular_waits(d: Decomposition, exhausted: Callable) -> Iterator[Wait]:
    spare = d.singles[0] if len(d.singles) == 1 else None
    if len(d.pairs) == 2:
        # 双碰待ち; two identical pairs are a quad, not a wait
        if d.pairs[0] == d.pairs[1]:
            return
        candidates = [(spare, t) for t in d.pairs]
    elif len(d.qiandazi) == 1:
        # 嵌張待ち
        candidates = [(spare, d.qiandazi[0].shifted(1))]
    elif len(d.dazi) == 1:
        low = d.dazi[0]
        if low.number == 1:
            # 辺張待ち 12
            candidates = [(spare, low.shifted(2))]
        elif low.number == 8:
            # 辺張待ち 89
            candidates = [(spare, low.shifted(-1))]
        else:
            # 両面待ち
            candidates = [(spare, low.shifted(-1)), (spare, low.shifted(2))]
    elif len(d.singles) == 2:
        # 単騎待ち, throw one and wait on the other
        a, b = d.singles
        if a == b:
            return
        candidates = [(a, b), (b, a)]
    elif len(d.singles) == 1:
        candidates = [(None, d.singles[0])]
    else:
        return

    for discard, needed in candidates:
        if needed != discard and not exhausted(needed):
            yield discard, needed


def _seven_pairs_waits(d: Decomposition, exhausted: Callable) -> Iterator[Wait]:
    if len(d.singles) == 1:
        candidates = [(None, d.singles[0])]
    elif len(d.singles) == 2:
        a, b = d.singles
        if a == b:
            return
        candidates = [(a, b), (b, a)]
    else:
        return
    for discard, needed in candidates:
        # The seventh pair must differ from the other six
        if needed not in d.pairs and needed != discard and not exhausted(needed):
            yield discard, needed


def _thirteen_orphans_waits(tiles: Iterable[Tile], exhausted: Callable) -> Iterator[Wait]:
    tiles = list(tiles)
    discards: List[Optional[Tile]] = [None] if len(tiles) == 13 else sorted(set(tiles))
    for discard in discards:
        rest = Counter(tiles)
        if discard is not None:
            rest[discard] -= 1
            rest += Counter()  # drop zero counts
        if not all(t.is_yaochu for t in rest):
            continue
        if len(rest) == 13:
            # 十三面待ち
            needed = YAOCHU_TILES
        elif len(rest) == 12:
            needed = [t for t in YAOCHU_TILES if t not in rest]
        else:
            continue
        for t in needed:
            if t != discard and not exhausted(t):
                yield discard, t


def _wait_sort_key(wait: Wait) -> tuple:
    discard, needed = wait
    return (needed.sort_key, discard.sort_key if discard is not None else ())


def collect_waits(hand: Hand, decompositions: Iterable[Decomposition]) -> List[Wait]:
    """Unique waits over all ready decompositions, by needed tile then discard."""
    waits = set()
    for d in decompositions:
        waits.update(waiting_tiles(d, hand))
    result = sorted(waits, key=_wait_sort_key)
    logger.debug("found %d waits", len(result))
    return result
