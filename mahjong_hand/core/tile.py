"""Tile definition with suit/rank identity and red five support."""

from enum import IntEnum
from typing import Iterable, List, Optional

from .errors import TileCodeError


class TileSuit(IntEnum):
    MAN = 0     # 萬子
    PIN = 1     # 筒子
    SOU = 2     # 索子
    WIND = 3    # 風牌
    DRAGON = 4  # 三元牌
    BONUS = 5   # 花牌


# Highest rank per suit
RANK_LIMITS = {
    TileSuit.MAN: 9,
    TileSuit.PIN: 9,
    TileSuit.SOU: 9,
    TileSuit.WIND: 4,
    TileSuit.DRAGON: 3,
    TileSuit.BONUS: 8,
}

NUMBER_SUITS = (TileSuit.MAN, TileSuit.PIN, TileSuit.SOU)

SUIT_CHARS = {
    TileSuit.MAN: 'm',
    TileSuit.PIN: 'p',
    TileSuit.SOU: 's',
    TileSuit.WIND: 'z',
    TileSuit.DRAGON: 'z',
    TileSuit.BONUS: 'h',
}

# Kanji for honor tiles, 1z..7z
HONOR_KANJI = "東南西北白發中"


class Tile:
    """Immutable tile identified by suit, rank and red flag."""
    __slots__ = ('_suit', '_number', '_is_red')

    def __init__(self, suit: TileSuit, number: int, is_red: bool = False):
        suit = TileSuit(suit)
        if not (1 <= number <= RANK_LIMITS[suit]):
            raise TileCodeError(f"rank {number} out of range for {suit.name}")
        if is_red and (suit not in NUMBER_SUITS or number != 5):
            raise TileCodeError("only a suited five can be red")
        self._suit = suit
        self._number = number
        self._is_red = is_red

    @classmethod
    def from_code(cls, code: str) -> 'Tile':
        """Build a tile from a code like '1m', '0p' (red five), '5z' or '3h'."""
        if len(code) != 2 or not code[0].isdigit():
            raise TileCodeError(f"invalid tile code {code!r}")
        n, ch = int(code[0]), code[1]
        if ch in ('m', 'p', 's'):
            suit = NUMBER_SUITS['mps'.index(ch)]
            if n == 0:
                return cls(suit, 5, is_red=True)
            return cls(suit, n)
        if ch == 'z':
            if 1 <= n <= 4:
                return cls(TileSuit.WIND, n)
            if 5 <= n <= 7:
                return cls(TileSuit.DRAGON, n - 4)
        elif ch == 'h' and 1 <= n <= 8:
            return cls(TileSuit.BONUS, n)
        raise TileCodeError(f"invalid tile code {code!r}")

    @property
    def suit(self) -> TileSuit:
        return self._suit

    @property
    def number(self) -> int:
        return self._number

    @property
    def is_red(self) -> bool:
        return self._is_red

    @property
    def is_number_tile(self) -> bool:
        return self._suit in NUMBER_SUITS

    @property
    def is_wind(self) -> bool:
        return self._suit == TileSuit.WIND

    @property
    def is_dragon(self) -> bool:
        return self._suit == TileSuit.DRAGON

    @property
    def is_honor(self) -> bool:
        return self._suit in (TileSuit.WIND, TileSuit.DRAGON)

    @property
    def is_bonus(self) -> bool:
        return self._suit == TileSuit.BONUS

    @property
    def is_terminal(self) -> bool:
        return self.is_number_tile and self._number in (1, 9)

    @property
    def is_yaochu(self) -> bool:
        return self.is_honor or self.is_terminal

    @property
    def plain(self) -> 'Tile':
        """The same tile with the red flag dropped."""
        if self._is_red:
            return Tile(self._suit, self._number)
        return self

    @property
    def code(self) -> str:
        if self._is_red:
            return f"0{SUIT_CHARS[self._suit]}"
        if self._suit == TileSuit.DRAGON:
            return f"{self._number + 4}z"
        return f"{self._number}{SUIT_CHARS[self._suit]}"

    @property
    def sort_key(self) -> tuple:
        # Red five sorts right before the plain five
        return (self._suit, self._number, 0 if self._is_red else 1)

    def shifted(self, offset: int) -> Optional['Tile']:
        """Number tile `offset` ranks away in the same suit, or None."""
        if not self.is_number_tile:
            return None
        n = self._number + offset
        if not (1 <= n <= 9):
            return None
        return Tile(self._suit, n)

    def __repr__(self):
        return f"Tile({self.code})"

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self.sort_key == other.sort_key
        return NotImplemented

    def __hash__(self):
        return hash(self.sort_key)

    def __lt__(self, other):
        if isinstance(other, Tile):
            return self.sort_key < other.sort_key
        return NotImplemented


# All 34 playable kinds in tile order
ALL_KINDS: List[Tile] = (
    [Tile(suit, n) for suit in NUMBER_SUITS for n in range(1, 10)]
    + [Tile(TileSuit.WIND, n) for n in range(1, 5)]
    + [Tile(TileSuit.DRAGON, n) for n in range(1, 4)]
)

# Thirteen orphan kinds (terminals + honors)
YAOCHU_TILES: List[Tile] = [t for t in ALL_KINDS if t.is_yaochu]

# 2s,3s,4s,6s,8s,發
GREEN_TILES = frozenset(
    [Tile(TileSuit.SOU, n) for n in (2, 3, 4, 6, 8)] + [Tile(TileSuit.DRAGON, 2)]
)

TERMINAL_TILES = frozenset(t for t in ALL_KINDS if t.is_terminal)


def wind_tile(number: int) -> Tile:
    """Wind tile for 1=東, 2=南, 3=西, 4=北."""
    return Tile(TileSuit.WIND, number)


def dora_from_indicator(indicator: Tile) -> Tile:
    """Get the dora tile indicated by a dora indicator.

    Number tiles wrap 9 -> 1, winds 北 -> 東, dragons 中 -> 白.
    A bonus tile has no successor and indicates itself.
    """
    suit, n = indicator.suit, indicator.number
    if suit in NUMBER_SUITS:
        return Tile(suit, n % 9 + 1)
    if suit == TileSuit.WIND:
        return Tile(suit, n % 4 + 1)
    if suit == TileSuit.DRAGON:
        return Tile(suit, n % 3 + 1)
    return indicator


def sort_tiles(tiles: Iterable[Tile]) -> List[Tile]:
    """Sort tiles into the canonical order (理牌)."""
    return sorted(tiles, key=lambda t: t.sort_key)
