"""Yaku (役) and yakuman (役満) detection for Riichi Mahjong.

Each check function takes a HandContext and returns (name, value) or
None. For yaku the value is the fan, which depends on whether the hand
is closed; a yaku worth 0 fan when open is unavailable once the hand is
open. For yakuman the value is the multiplier (2 for double yakuman).
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List, NamedTuple, Optional, Tuple

from mahjong_hand.core.hand import Hand
from mahjong_hand.core.meld import MeldType
from mahjong_hand.core.situation import SituationalState
from mahjong_hand.core.tile import (
    GREEN_TILES, TERMINAL_TILES, Tile, TileSuit, sort_tiles,
)
from mahjong_hand.rules.decompose import Decomposition

WHITE = Tile(TileSuit.DRAGON, 1)
GREEN = Tile(TileSuit.DRAGON, 2)
RED = Tile(TileSuit.DRAGON, 3)

YakuResult = Tuple[str, int]  # (name, fan) or (name, multiplier)


@dataclass
class HandContext:
    """One decomposition of a winning hand plus everything around it.

    Groups are kept as their lowest tile, red fives read as plain fives.
    """
    decomposition: Decomposition = field(default_factory=Decomposition)
    closed_chows: List[Tile] = field(default_factory=list)
    open_chows: List[Tile] = field(default_factory=list)
    closed_pongs: List[Tile] = field(default_factory=list)
    open_pongs: List[Tile] = field(default_factory=list)
    closed_kongs: List[Tile] = field(default_factory=list)
    open_kongs: List[Tile] = field(default_factory=list)
    eyes: Optional[Tile] = None
    # Every non-bonus tile including calls and picked
    tiles: List[Tile] = field(default_factory=list)
    # Concealed tiles without the picked tile
    concealed: List[Tile] = field(default_factory=list)
    picked: Optional[Tile] = None
    is_tsumo: bool = False
    is_riichi: bool = False
    round_wind: Optional[Tile] = None
    seat_wind: Optional[Tile] = None

    @classmethod
    def build(cls, d: Decomposition, hand: Hand,
              situation: SituationalState) -> 'HandContext':
        melds = [m for m in hand.melds if not m.is_bonus]
        return cls(
            decomposition=d,
            closed_chows=list(d.chows),
            open_chows=[m.smallest for m in melds if m.meld_type == MeldType.CHOW],
            closed_pongs=list(d.pongs),
            open_pongs=[m.smallest for m in melds if m.meld_type == MeldType.PONG],
            closed_kongs=[m.smallest for m in melds if m.is_concealed_kong],
            open_kongs=[m.smallest for m in melds if m.is_kan and not m.is_concealed_kong],
            eyes=d.pairs[0] if len(d.pairs) == 1 else None,
            tiles=[t.plain for t in hand.all_tiles],
            concealed=[t.plain for t in hand.concealed],
            picked=hand.picked.plain if hand.picked is not None else None,
            is_tsumo=situation.is_tsumo,
            is_riichi=situation.is_riichi,
            round_wind=situation.round_wind.tile,
            seat_wind=situation.seat_wind.tile,
        )

    @property
    def chows(self) -> List[Tile]:
        return sort_tiles(self.open_chows + self.closed_chows)

    @property
    def kongs(self) -> List[Tile]:
        return self.closed_kongs + self.open_kongs

    @property
    def pongs(self) -> List[Tile]:
        """Every triplet and quad, open or closed."""
        return sort_tiles(self.closed_pongs + self.closed_kongs
                          + self.open_pongs + self.open_kongs)

    @property
    def is_menzen(self) -> bool:
        return not (self.open_chows or self.open_pongs or self.open_kongs)

    @property
    def is_chiitoi(self) -> bool:
        return len(self.decomposition.pairs) == 7

    @property
    def fanpai(self) -> FrozenSet[Tile]:
        """Value tiles: dragons, round wind and seat wind."""
        return frozenset([WHITE, GREEN, RED, self.round_wind, self.seat_wind])

    @property
    def some_honor(self) -> bool:
        return any(t.is_honor for t in self.tiles)

    @property
    def every_yaochu(self) -> bool:
        return all(t.is_yaochu for t in self.tiles)

    @property
    def suit_cardinality(self) -> int:
        """Number of distinct number suits; honors and bonus tiles never count."""
        return len({t.suit for t in self.tiles if t.is_number_tile})

    @property
    def concealed_triplets(self) -> int:
        """Closed pongs and kongs; a pong completed by ron is not concealed."""
        pongs = [t for t in self.closed_pongs if self.is_tsumo or t != self.picked]
        return len(pongs) + len(self.closed_kongs)

    @property
    def is_pinfu_form(self) -> bool:
        """All runs, a non-value pair, and a two-sided wait on the picked tile."""
        if len(self.chows) != 4 or self.eyes is None or self.eyes in self.fanpai:
            return False
        return any(is_ryanmen(chow, self.picked) for chow in self.closed_chows)


def is_ryanmen(chow: Tile, picked: Optional[Tile]) -> bool:
    """Whether `picked` completed `chow` from a two-sided wait."""
    if picked is None or chow.suit != picked.suit:
        return False
    n, p = chow.number, picked.number
    return (n <= 6 and n == p) or (n >= 2 and n + 2 == p)


def _fan(ctx: HandContext, name: str, closed_fan: int, open_fan: int) -> Optional[YakuResult]:
    fan = closed_fan if ctx.is_menzen else open_fan
    if fan > 0:
        return (name, fan)
    return None


# === Yakuman ===

def check_suuankou(ctx: HandContext) -> Optional[YakuResult]:
    """Four concealed triplets (四暗刻), double on a pair wait."""
    if ctx.concealed_triplets != 4:
        return None
    if ctx.picked == ctx.eyes:
        return ("四暗刻単騎待ち", 2)
    return ("四暗刻", 1)


def check_suukantsu(ctx: HandContext) -> Optional[YakuResult]:
    """Four kongs (四槓子)."""
    if len(ctx.kongs) == 4:
        return ("四槓子", 1)
    return None


def check_daisangen(ctx: HandContext) -> Optional[YakuResult]:
    """Big three dragons (大三元)."""
    if sum(1 for t in ctx.pongs if t.is_dragon) == 3:
        return ("大三元", 1)
    return None


def check_daisuushii(ctx: HandContext) -> Optional[YakuResult]:
    """Big four winds (大四喜), double yakuman."""
    if sum(1 for t in ctx.pongs if t.is_wind) == 4:
        return ("大四喜", 2)
    return None


def check_shousuushii(ctx: HandContext) -> Optional[YakuResult]:
    """Little four winds (小四喜)."""
    if ctx.eyes is None or not ctx.eyes.is_wind:
        return None
    if sum(1 for t in ctx.pongs if t.is_wind) == 3:
        return ("小四喜", 1)
    return None


def check_kokushi(ctx: HandContext) -> Optional[YakuResult]:
    """Thirteen orphans (国士無双), double on the 13-sided wait.

    The 13-sided wait is read from the concealed tiles alone, which must
    already hold all thirteen kinds before the picked tile.
    """
    if not ctx.is_menzen or not ctx.every_yaochu:
        return None
    if len({t for t in ctx.tiles if t.is_yaochu}) != 13:
        return None
    if len({t for t in ctx.concealed if t.is_yaochu}) == 13:
        return ("国士無双十三面待ち", 2)
    return ("国士無双", 1)


def check_ryuuiisou(ctx: HandContext) -> Optional[YakuResult]:
    """All green (緑一色). Only 2s,3s,4s,6s,8s + 發."""
    if all(t in GREEN_TILES for t in ctx.tiles):
        return ("緑一色", 1)
    return None


def check_chinroutou(ctx: HandContext) -> Optional[YakuResult]:
    """All terminals (清老頭)."""
    if all(t in TERMINAL_TILES for t in ctx.tiles):
        return ("清老頭", 1)
    return None


def check_tsuuiisou(ctx: HandContext) -> Optional[YakuResult]:
    """All honors (字一色)."""
    if ctx.some_honor and ctx.suit_cardinality == 0:
        return ("字一色", 1)
    return None


def check_chuuren(ctx: HandContext) -> Optional[YakuResult]:
    """Nine gates (九蓮宝燈). Closed, one suit, 1112345678999 + any tile.

    The pure form (純正) needs the concealed tiles to be exactly
    1112345678999 before the picked tile.
    """
    if not ctx.is_menzen or ctx.some_honor or ctx.suit_cardinality != 1:
        return None
    if len(set(ctx.tiles)) != 9:
        return None
    numbers = Counter(t.number for t in ctx.tiles)
    if numbers[1] < 3 or numbers[9] < 3:
        return None
    gates = [3, 1, 1, 1, 1, 1, 1, 1, 3]
    concealed = Counter(t.number for t in ctx.concealed)
    pure = (len(ctx.concealed) == 13
            and len({t.suit for t in ctx.concealed}) == 1
            and [concealed[n] for n in range(1, 10)] == gates)
    if pure:
        return ("純正九蓮宝燈", 2)
    return ("九蓮宝燈", 1)


YAKUMAN_CHECKERS: List[Callable[[HandContext], Optional[YakuResult]]] = [
    check_suuankou, check_suukantsu, check_daisangen,
    check_daisuushii, check_shousuushii, check_kokushi,
    check_ryuuiisou, check_chinroutou, check_tsuuiisou, check_chuuren,
]


# === Closed-only yaku ===

def check_riichi(ctx: HandContext) -> Optional[YakuResult]:
    if ctx.is_riichi:
        return _fan(ctx, "立直", 1, 0)
    return None


def check_tsumo(ctx: HandContext) -> Optional[YakuResult]:
    if ctx.is_tsumo:
        return _fan(ctx, "門前清自摸和", 1, 0)
    return None


def check_pinfu(ctx: HandContext) -> Optional[YakuResult]:
    """Pinfu (平和) - all runs, non-value pair, two-sided wait, closed."""
    if ctx.is_pinfu_form:
        return _fan(ctx, "平和", 1, 0)
    return None


def check_chiitoi(ctx: HandContext) -> Optional[YakuResult]:
    """Seven pairs (七対子)."""
    if ctx.is_chiitoi:
        return _fan(ctx, "七対子", 2, 0)
    return None


def _peikou_count(ctx: HandContext) -> int:
    chows = ctx.chows
    if len(chows) == 4 and chows[0] == chows[1] and chows[2] == chows[3]:
        return 2
    if len(set(chows)) < len(chows):
        return 1
    return 0


def check_iipeikou(ctx: HandContext) -> Optional[YakuResult]:
    """One set of identical sequences (一盃口). Closed only."""
    if _peikou_count(ctx) == 1:
        return _fan(ctx, "一盃口", 1, 0)
    return None


def check_ryanpeikou(ctx: HandContext) -> Optional[YakuResult]:
    """Two sets of identical sequences (二盃口). Closed only."""
    if _peikou_count(ctx) == 2:
        return _fan(ctx, "二盃口", 3, 0)
    return None


# === Value tiles ===

def check_yakuhai_haku(ctx: HandContext) -> Optional[YakuResult]:
    if WHITE in ctx.pongs:
        return _fan(ctx, "役牌白", 1, 1)
    return None


def check_yakuhai_hatsu(ctx: HandContext) -> Optional[YakuResult]:
    if GREEN in ctx.pongs:
        return _fan(ctx, "役牌發", 1, 1)
    return None


def check_yakuhai_chun(ctx: HandContext) -> Optional[YakuResult]:
    if RED in ctx.pongs:
        return _fan(ctx, "役牌中", 1, 1)
    return None


def check_yakuhai_round_wind(ctx: HandContext) -> Optional[YakuResult]:
    if ctx.round_wind in ctx.pongs:
        return _fan(ctx, "場風牌", 1, 1)
    return None


def check_yakuhai_seat_wind(ctx: HandContext) -> Optional[YakuResult]:
    if ctx.seat_wind in ctx.pongs:
        return _fan(ctx, "自風牌", 1, 1)
    return None


# === Tile composition ===

def check_tanyao(ctx: HandContext) -> Optional[YakuResult]:
    """All simples (断么九) - no terminals or honors, calls included."""
    if not any(t.is_yaochu for t in ctx.tiles):
        return _fan(ctx, "断么九", 1, 1)
    return None


def check_honroutou(ctx: HandContext) -> Optional[YakuResult]:
    """All terminals and honors (混老頭)."""
    if ctx.every_yaochu:
        return _fan(ctx, "混老頭", 2, 2)
    return None


def check_honitsu(ctx: HandContext) -> Optional[YakuResult]:
    """Half flush (混一色). One suit + honors."""
    if ctx.some_honor and ctx.suit_cardinality == 1:
        return _fan(ctx, "混一色", 3, 2)
    return None


def check_chinitsu(ctx: HandContext) -> Optional[YakuResult]:
    """Full flush (清一色). One suit only, no honors."""
    if not ctx.some_honor and ctx.suit_cardinality == 1:
        return _fan(ctx, "清一色", 6, 5)
    return None


# === Group patterns ===

def check_sanshoku_doujun(ctx: HandContext) -> Optional[YakuResult]:
    """Three-colored straight (三色同順). Judged on run starting ranks."""
    starts = {(t.suit, t.number) for t in ctx.chows}
    for n in range(1, 8):
        if all((suit, n) in starts for suit in (TileSuit.MAN, TileSuit.PIN, TileSuit.SOU)):
            return _fan(ctx, "三色同順", 2, 1)
    return None


def check_ittsu(ctx: HandContext) -> Optional[YakuResult]:
    """Straight (一気通貫). 123+456+789 of one suit."""
    starts = {(t.suit, t.number) for t in ctx.chows}
    for suit in (TileSuit.MAN, TileSuit.PIN, TileSuit.SOU):
        if all((suit, n) in starts for n in (1, 4, 7)):
            return _fan(ctx, "一気通貫", 2, 1)
    return None


def check_sanshoku_doukou(ctx: HandContext) -> Optional[YakuResult]:
    """Three-colored triplets (三色同刻)."""
    pongs = {(t.suit, t.number) for t in ctx.pongs}
    for n in range(1, 10):
        if all((suit, n) in pongs for suit in (TileSuit.MAN, TileSuit.PIN, TileSuit.SOU)):
            return _fan(ctx, "三色同刻", 2, 2)
    return None


def check_toitoi(ctx: HandContext) -> Optional[YakuResult]:
    """All triplets (対々和)."""
    if len(ctx.pongs) == 4:
        return _fan(ctx, "対々和", 2, 2)
    return None


def _is_chanta_form(ctx: HandContext) -> bool:
    if ctx.eyes is None or not ctx.eyes.is_yaochu:
        return False
    return (all(t.number in (1, 7) for t in ctx.chows)
            and all(t.is_yaochu for t in ctx.pongs))


def check_chanta(ctx: HandContext) -> Optional[YakuResult]:
    """Mixed outside hand (混全帯么九). Every group holds a terminal or honor."""
    if _is_chanta_form(ctx) and ctx.some_honor and not ctx.every_yaochu:
        return _fan(ctx, "混全帯么九", 2, 1)
    return None


def check_junchan(ctx: HandContext) -> Optional[YakuResult]:
    """Pure outside hand (純全帯么九). Every group holds a terminal, no honors."""
    if _is_chanta_form(ctx) and not ctx.some_honor and not ctx.every_yaochu:
        return _fan(ctx, "純全帯么九", 3, 2)
    return None


def check_sanankou(ctx: HandContext) -> Optional[YakuResult]:
    """Three concealed triplets (三暗刻)."""
    if ctx.concealed_triplets == 3:
        return _fan(ctx, "三暗刻", 2, 2)
    return None


def check_shousangen(ctx: HandContext) -> Optional[YakuResult]:
    """Little three dragons (小三元). 2 dragon triplets + dragon pair."""
    if ctx.eyes is None or not ctx.eyes.is_dragon:
        return None
    if sum(1 for t in ctx.pongs if t.is_dragon) == 2:
        return _fan(ctx, "小三元", 2, 2)
    return None


def check_sankantsu(ctx: HandContext) -> Optional[YakuResult]:
    """Three kongs (三槓子)."""
    if len(ctx.kongs) == 3:
        return _fan(ctx, "三槓子", 2, 2)
    return None


YAKU_CHECKERS: List[Callable[[HandContext], Optional[YakuResult]]] = [
    check_riichi, check_tsumo, check_pinfu, check_chiitoi,
    check_yakuhai_haku, check_yakuhai_hatsu, check_yakuhai_chun,
    check_yakuhai_round_wind, check_yakuhai_seat_wind,
    check_tanyao, check_honroutou, check_honitsu, check_chinitsu,
    check_sanshoku_doujun, check_ittsu, check_sanshoku_doukou,
    check_toitoi, check_iipeikou, check_ryanpeikou,
    check_chanta, check_junchan, check_sanankou,
    check_shousangen, check_sankantsu,
]


def detect_yakuman(ctx: HandContext) -> List[YakuResult]:
    """All matching yakuman; several can stack."""
    results = []
    for checker in YAKUMAN_CHECKERS:
        result = checker(ctx)
        if result:
            results.append(result)
    return results


def detect_yaku(ctx: HandContext) -> List[YakuResult]:
    """All matching regular yaku with their fan for this hand's openness."""
    results = []
    for checker in YAKU_CHECKERS:
        result = checker(ctx)
        if result:
            results.append(result)
    return results


class DoraCount(NamedTuple):
    dora: int
    red: int
    bonus: int   # 抜きドラ, one per bonus call
    ura: int

    @property
    def total(self) -> int:
        return self.dora + self.red + self.bonus + self.ura


def count_dora(hand: Hand, situation: SituationalState) -> DoraCount:
    """Count every dora instance; each is worth 1 fan.

    Dora and hidden dora match against every tile including bonus calls.
    Hidden dora only count with riichi.
    """
    tiles = [t.plain for t in hand.tiles_with_bonus]
    dora = sum(tiles.count(d) for d in situation.dora)
    ura = sum(tiles.count(d) for d in situation.ura_dora)
    red = sum(1 for t in hand.all_tiles if t.is_red)
    bonus = len(hand.bonus_melds)
    return DoraCount(dora, red, bonus, ura)
