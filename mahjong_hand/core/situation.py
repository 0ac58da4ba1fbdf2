"""Situational state - winds, riichi, win method and dora indicators."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from .tile import Tile, dora_from_indicator, wind_tile


class Wind(IntEnum):
    EAST = 0    # 東
    SOUTH = 1   # 南
    WEST = 2    # 西
    NORTH = 3   # 北

    @property
    def tile(self) -> Tile:
        return wind_tile(self.value + 1)

    @classmethod
    def from_name(cls, name: str) -> 'Wind':
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"unknown wind {name!r}") from None


@dataclass(frozen=True)
class SituationalState:
    """Everything about the win that is not the tiles themselves.

    Attributes:
        round_wind: Prevailing wind (場風)
        seat_wind: Winner's seat wind (自風); east is the dealer
        is_riichi: Riichi declared
        is_tsumo: Won by self-draw (otherwise by discard)
        dora_indicators: Dora indicator tiles
        ura_dora_indicators: Hidden dora indicators, counted only with riichi
    """
    round_wind: Wind = Wind.EAST
    seat_wind: Wind = Wind.EAST
    is_riichi: bool = False
    is_tsumo: bool = False
    dora_indicators: Tuple[Tile, ...] = ()
    ura_dora_indicators: Tuple[Tile, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'dora_indicators', tuple(self.dora_indicators))
        object.__setattr__(self, 'ura_dora_indicators', tuple(self.ura_dora_indicators))

    @property
    def is_dealer(self) -> bool:
        return self.seat_wind == Wind.EAST

    @property
    def dora(self) -> Tuple[Tile, ...]:
        return tuple(dora_from_indicator(t.plain) for t in self.dora_indicators)

    @property
    def ura_dora(self) -> Tuple[Tile, ...]:
        if not self.is_riichi:
            return ()
        return tuple(dora_from_indicator(t.plain) for t in self.ura_dora_indicators)
