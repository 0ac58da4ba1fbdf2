"""Hand value - concealed tiles, meld calls and the picked tile."""

from collections import Counter
from typing import Iterable, List, Optional

from .errors import HandError
from .meld import Meld
from .tile import Tile


class Hand:
    """An immutable hand to be evaluated.

    Attributes:
        concealed: Tiles held in hand, excluding the picked tile
        melds: Declared meld calls (bonus calls included)
        picked: The just-drawn or just-claimed tile; required exactly
            when the hand holds 14 tiles
    """
    __slots__ = ('_concealed', '_melds', '_picked')

    def __init__(self, concealed: Iterable[Tile], melds: Iterable[Meld] = (),
                 picked: Optional[Tile] = None):
        self._concealed = tuple(concealed)
        self._melds = tuple(melds)
        self._picked = picked
        count = self.tile_count
        if count not in (13, 14):
            raise HandError(f"a hand holds 13 or 14 tiles, got {count}")
        if count == 14 and picked is None:
            raise HandError("a 14-tile hand needs a picked tile")
        if count == 13 and picked is not None:
            raise HandError("a 13-tile hand cannot have a picked tile")

    @property
    def concealed(self) -> tuple:
        return self._concealed

    @property
    def melds(self) -> tuple:
        return self._melds

    @property
    def picked(self) -> Optional[Tile]:
        return self._picked

    @property
    def tile_count(self) -> int:
        """Concealed + 3 per non-bonus call + picked (a kong counts as 3)."""
        called = sum(3 for m in self._melds if not m.is_bonus)
        return len(self._concealed) + called + (1 if self._picked else 0)

    @property
    def closed_tiles(self) -> List[Tile]:
        """Concealed tiles plus the picked tile, as given."""
        tiles = list(self._concealed)
        if self._picked is not None:
            tiles.append(self._picked)
        return tiles

    @property
    def all_tiles(self) -> List[Tile]:
        """Every tile of the hand except bonus calls, as given."""
        tiles = list(self._concealed)
        for meld in self._melds:
            if not meld.is_bonus:
                tiles.extend(meld.tiles)
        if self._picked is not None:
            tiles.append(self._picked)
        return tiles

    @property
    def tiles_with_bonus(self) -> List[Tile]:
        """Every tile of the hand including bonus calls."""
        tiles = list(self._concealed)
        for meld in self._melds:
            tiles.extend(meld.tiles)
        if self._picked is not None:
            tiles.append(self._picked)
        return tiles

    @property
    def is_menzen(self) -> bool:
        """Whether hand is fully closed (門前). A closed kong keeps it closed."""
        return all(not m.is_open for m in self._melds)

    @property
    def bonus_melds(self) -> List[Meld]:
        return [m for m in self._melds if m.is_bonus]

    def visible_counts(self) -> Counter:
        """Copies of each plain tile already in hand, calls and picked."""
        return Counter(t.plain for t in self.all_tiles)

    def discard(self, tile: Tile) -> 'Hand':
        """Return the 13-tile hand left after throwing `tile` from a 14-tile hand."""
        closed = self.closed_tiles
        if tile in closed:
            idx = closed.index(tile)
        else:
            plain = [t.plain for t in closed]
            if tile.plain not in plain:
                raise HandError(f"{tile.code} is not in hand")
            idx = plain.index(tile.plain)
        del closed[idx]
        return Hand(closed, self._melds)

    def pick(self, tile: Tile) -> 'Hand':
        """Return the 14-tile hand completed by picking `tile`."""
        return Hand(self._concealed, self._melds, tile)

    def __repr__(self):
        from .notation import hand_to_code
        return f"Hand({hand_to_code(self)})"
