"""Meld call (副露) data structures for chow/pong/kong/bonus."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import MeldCallError
from .tile import Tile, TileSuit, sort_tiles


class MeldType(Enum):
    CHOW = "chow"     # 吃
    PONG = "pong"     # 碰
    KONG = "kong"     # 槓
    BONUS = "bonus"   # 花牌 / 抜きドラ


class RelativePlayer(Enum):
    SELF = "self"           # 自家
    TOP = "top"             # 上家
    OPPONENT = "opponent"   # 對面
    BOTTOM = "bottom"       # 下家


@dataclass(frozen=True)
class Meld:
    """A frozen meld call.

    Attributes:
        meld_type: Type of meld
        tiles: All tiles in the meld (red fives kept as given)
        discarder: Who discarded the claimed tile (SELF for a closed kong or bonus)
        discarded: The claimed tile (None when discarder is SELF)
        is_added_kong: Kong upgraded from a pong (小明槓)
    """
    meld_type: MeldType
    tiles: tuple  # tuple of Tile
    discarder: RelativePlayer = RelativePlayer.SELF
    discarded: Optional[Tile] = None
    is_added_kong: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'tiles', tuple(self.tiles))
        if self.is_added_kong and self.meld_type != MeldType.KONG:
            raise MeldCallError("only a kong can be an added kong")
        if self.discarder == RelativePlayer.SELF and self.discarded is not None:
            raise MeldCallError("a self-declared meld has no discarded tile")
        if self.discarder != RelativePlayer.SELF and self.discarded is None:
            raise MeldCallError("a claimed meld needs its discarded tile")
        if self.discarded is not None and self.discarded not in self.tiles:
            raise MeldCallError(f"{self.discarded.code} is not part of the meld")
        self._validate_shape()

    def _validate_shape(self):
        face = sort_tiles(t.plain for t in self.tiles)
        n = len(face)
        if self.meld_type == MeldType.BONUS:
            if n != 1:
                raise MeldCallError("a bonus call holds exactly one tile")
            # Flowers and seasons, or 北 extracted as nuki dora
            if not (face[0].is_bonus or face[0] == Tile(TileSuit.WIND, 4)):
                raise MeldCallError(f"{face[0].code} cannot be a bonus tile")
            if self.discarder != RelativePlayer.SELF:
                raise MeldCallError("a bonus tile is always self-declared")
        elif self.meld_type == MeldType.CHOW:
            if n != 3:
                raise MeldCallError("a chow holds exactly three tiles")
            if not face[0].is_number_tile:
                raise MeldCallError("a chow must be a number-tile run")
            if face[1] != face[0].shifted(1) or face[2] != face[0].shifted(2):
                raise MeldCallError("chow tiles must be consecutive in one suit")
            if self.discarder != RelativePlayer.TOP:
                raise MeldCallError("a chow can only be claimed from the left")
        elif self.meld_type == MeldType.PONG:
            if n != 3 or len(set(face)) != 1:
                raise MeldCallError("a pong holds three identical tiles")
            if self.discarder == RelativePlayer.SELF:
                raise MeldCallError("a pong is always claimed from a discard")
        elif self.meld_type == MeldType.KONG:
            if n != 4 or len(set(face)) != 1:
                raise MeldCallError("a kong holds four identical tiles")

    @property
    def is_open(self) -> bool:
        """Whether this call opens the hand (a closed kong or bonus does not)."""
        if self.meld_type == MeldType.BONUS:
            return False
        return self.discarder != RelativePlayer.SELF

    @property
    def is_kan(self) -> bool:
        return self.meld_type == MeldType.KONG

    @property
    def is_concealed_kong(self) -> bool:
        return self.is_kan and self.discarder == RelativePlayer.SELF

    @property
    def is_bonus(self) -> bool:
        return self.meld_type == MeldType.BONUS

    @property
    def smallest(self) -> Tile:
        """Lowest plain tile; the canonical tile of the group."""
        return sort_tiles(t.plain for t in self.tiles)[0]

    @property
    def red_count(self) -> int:
        return sum(1 for t in self.tiles if t.is_red)
