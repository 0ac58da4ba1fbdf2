"""Fu (符) calculation for scoring."""

from enum import Enum
from typing import Iterator, NamedTuple

from mahjong_hand.core.tile import Tile
from mahjong_hand.rules.yaku import HandContext, is_ryanmen


class Machi(Enum):
    RYANMEN = "ryanmen"   # 両面
    PENCHAN = "penchan"   # 辺張
    KANCHAN = "kanchan"   # 嵌張
    SHANPON = "shanpon"   # 双碰
    TANKI = "tanki"       # 単騎


class MachiReading(NamedTuple):
    machi: Machi
    group: Tile
    fu: int


def find_all_machi(ctx: HandContext) -> Iterator[MachiReading]:
    """Every way the picked tile can have completed a closed group."""
    picked = ctx.picked
    if picked is None:
        return
    for chow in ctx.closed_chows:
        if chow.suit != picked.suit:
            continue
        n, p = chow.number, picked.number
        if is_ryanmen(chow, picked):
            yield MachiReading(Machi.RYANMEN, chow, 0)
        elif (n == 7 and p == 7) or (n == 1 and p == 3):
            yield MachiReading(Machi.PENCHAN, chow, 2)
        elif n + 1 == p:
            yield MachiReading(Machi.KANCHAN, chow, 2)
    for pong in ctx.closed_pongs:
        if pong == picked:
            yield MachiReading(Machi.SHANPON, pong, 0)
    if ctx.eyes == picked:
        yield MachiReading(Machi.TANKI, ctx.eyes, 2)


def _group_fu(tile: Tile, base: int) -> int:
    """Simples score `base`, terminals and honors double."""
    return base * 2 if tile.is_yaochu else base


def calculate_fu(ctx: HandContext) -> int:
    """Calculate fu (符) for one reading of a winning hand.

    Seven pairs is always 25. The pinfu shape is flat: 30 on a closed
    ron, 20 on a closed tsumo, 30 when open. Everything else is rounded
    up to the nearest 10.
    """
    if ctx.is_chiitoi:
        return 25
    if ctx.is_pinfu_form:
        if ctx.is_menzen:
            return 20 if ctx.is_tsumo else 30
        if not ctx.is_tsumo:
            return 30

    fu = 20  # 副底
    if ctx.is_menzen and not ctx.is_tsumo:
        fu += 10  # 門前加符
    if ctx.is_tsumo:
        fu += 2

    for t in ctx.closed_pongs:
        fu += _group_fu(t, 4)
    for t in ctx.open_pongs:
        fu += _group_fu(t, 2)
    for t in ctx.closed_kongs:
        fu += _group_fu(t, 16)
    for t in ctx.open_kongs:
        fu += _group_fu(t, 8)

    # Pair
    if ctx.eyes is not None:
        if ctx.eyes == ctx.round_wind == ctx.seat_wind:
            fu += 4  # 連風牌
        elif ctx.eyes in ctx.fanpai:
            fu += 2

    fu += max((m.fu for m in find_all_machi(ctx)), default=0)
    return _round_up_10(fu)


def _round_up_10(fu: int) -> int:
    """Round up to nearest 10."""
    return ((fu + 9) // 10) * 10
