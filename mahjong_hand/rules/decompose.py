"""Meld decomposition - every way to group a tile multiset.

A decomposition partitions the closed tiles into chows (顺子), pongs
(刻子), pairs (对子), dazi (搭子, two-sided proto-run like 45), qiandazi
(嵌搭子, gapped proto-run like 46) and single tiles. Every group is kept
as its lowest tile.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List

from mahjong_hand.core.tile import Tile, sort_tiles


@dataclass(frozen=True)
class Decomposition:
    """One grouping of the closed tiles.

    Buckets are stored sorted, so two decompositions are equal exactly
    when their per-bucket tile multisets are equal.
    """
    chows: tuple = ()
    pongs: tuple = ()
    pairs: tuple = ()
    dazi: tuple = ()
    qiandazi: tuple = ()
    singles: tuple = ()

    def __post_init__(self):
        for name in ('chows', 'pongs', 'pairs', 'dazi', 'qiandazi', 'singles'):
            object.__setattr__(self, name, tuple(sort_tiles(getattr(self, name))))

    @property
    def triad_count(self) -> int:
        return len(self.chows) + len(self.pongs)

    @property
    def proto_count(self) -> int:
        """Dazi and qiandazi together."""
        return len(self.dazi) + len(self.qiandazi)

    @property
    def is_all_singles(self) -> bool:
        return not (self.chows or self.pongs or self.pairs or self.dazi or self.qiandazi)

    def tiles(self) -> List[Tile]:
        """Expand every group back into its tiles."""
        tiles = []
        for t in self.chows:
            tiles.extend((t, t.shifted(1), t.shifted(2)))
        for t in self.pongs:
            tiles.extend((t, t, t))
        for t in self.pairs:
            tiles.extend((t, t))
        for t in self.dazi:
            tiles.extend((t, t.shifted(1)))
        for t in self.qiandazi:
            tiles.extend((t, t.shifted(2)))
        tiles.extend(self.singles)
        return sort_tiles(tiles)


def _remove_one(group: tuple, tile: Tile) -> tuple:
    idx = group.index(tile)
    return group[:idx] + group[idx + 1:]


def _add_tile(tile: Tile, d: Decomposition) -> Iterator[Decomposition]:
    """Every way to place one more tile into an existing decomposition."""
    # Single tile
    yield replace(d, singles=d.singles + (tile,))

    if tile.is_bonus:
        return

    # Pair from a single, pong from a pair
    if tile in d.singles:
        yield replace(d, pairs=d.pairs + (tile,), singles=_remove_one(d.singles, tile))
    if tile in d.pairs:
        yield replace(d, pongs=d.pongs + (tile,), pairs=_remove_one(d.pairs, tile))

    if not tile.is_number_tile:
        return

    m2, m1, p1, p2 = tile.shifted(-2), tile.shifted(-1), tile.shifted(1), tile.shifted(2)
    if m2 is not None:
        # m2 _ tile
        if m2 in d.singles:
            yield replace(d, qiandazi=d.qiandazi + (m2,), singles=_remove_one(d.singles, m2))
        # m2 m1 + tile
        if m2 in d.dazi:
            yield replace(d, chows=d.chows + (m2,), dazi=_remove_one(d.dazi, m2))
    if m1 is not None:
        # m1 tile
        if m1 in d.singles:
            yield replace(d, dazi=d.dazi + (m1,), singles=_remove_one(d.singles, m1))
        # m1 _ p1 + tile
        if m1 in d.qiandazi:
            yield replace(d, chows=d.chows + (m1,), qiandazi=_remove_one(d.qiandazi, m1))
    if p1 is not None:
        # tile p1
        if p1 in d.singles:
            yield replace(d, dazi=d.dazi + (tile,), singles=_remove_one(d.singles, p1))
        # tile + p1 p2
        if p1 in d.dazi:
            yield replace(d, chows=d.chows + (tile,), dazi=_remove_one(d.dazi, p1))
    if p2 is not None:
        # tile _ p2
        if p2 in d.singles:
            yield replace(d, qiandazi=d.qiandazi + (tile,), singles=_remove_one(d.singles, p2))


def _generate(tiles: List[Tile]) -> Iterator[Decomposition]:
    if not tiles:
        yield Decomposition()
        return
    if len(tiles) == 1:
        yield Decomposition(singles=(tiles[0],))
        return
    tile, rest = tiles[0], tiles[1:]
    for d in _unique(_generate(rest)):
        yield from _add_tile(tile, d)


def _unique(decompositions: Iterable[Decomposition]) -> Iterator[Decomposition]:
    seen = set()
    for d in decompositions:
        if d not in seen:
            seen.add(d)
            yield d


def decompose(tiles: Iterable[Tile]) -> Iterator[Decomposition]:
    """Lazily yield every distinct decomposition of `tiles`.

    Red fives are grouped as plain fives. Bonus tiles only ever stay
    single, honors never join runs. Finite and deterministic; call again
    to restart.
    """
    return _unique(_generate([t.plain for t in tiles]))
