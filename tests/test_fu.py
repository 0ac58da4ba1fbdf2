"""Tests for fu.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mahjong_hand.core.tile import Tile
from mahjong_hand.rules.decompose import Decomposition
from mahjong_hand.rules.fu import Machi, _round_up_10, calculate_fu, find_all_machi
from mahjong_hand.rules.yaku import HandContext


def tiles(*codes):
    return [Tile.from_code(c) for c in codes]


def make_ctx(**kwargs) -> HandContext:
    kwargs.setdefault("round_wind", Tile.from_code("1z"))
    kwargs.setdefault("seat_wind", Tile.from_code("1z"))
    return HandContext(**kwargs)


class TestFlatFu:
    def test_chiitoi(self):
        d = Decomposition(pairs=tuple(tiles("1m", "3m", "5p", "7p", "2s", "9s", "1z")))
        ctx = make_ctx(decomposition=d, picked=Tile.from_code("1z"))
        assert calculate_fu(ctx) == 25

    def test_pinfu_tsumo(self):
        ctx = make_ctx(closed_chows=tiles("2m", "5p", "3s", "6s"),
                       eyes=Tile.from_code("2p"), picked=Tile.from_code("8s"),
                       is_tsumo=True)
        assert calculate_fu(ctx) == 20

    def test_pinfu_ron(self):
        ctx = make_ctx(closed_chows=tiles("2m", "5p", "3s", "6s"),
                       eyes=Tile.from_code("2p"), picked=Tile.from_code("8s"))
        assert calculate_fu(ctx) == 30

    def test_open_pinfu_shape_ron(self):
        ctx = make_ctx(open_chows=tiles("1m"), closed_chows=tiles("4p", "2s", "7s"),
                       eyes=Tile.from_code("5m"), picked=Tile.from_code("9s"))
        assert calculate_fu(ctx) == 30

    def test_open_pinfu_shape_tsumo(self):
        # 20 + 2 tsumo, rounded up
        ctx = make_ctx(open_chows=tiles("1m"), closed_chows=tiles("4p", "2s", "7s"),
                       eyes=Tile.from_code("5m"), picked=Tile.from_code("9s"),
                       is_tsumo=True)
        assert calculate_fu(ctx) == 30


class TestFuTable:
    def test_kanchan(self):
        # 20 + 10 menzen ron + 2 dragon pair + 2 kanchan = 34
        ctx = make_ctx(closed_chows=tiles("3m", "1p", "4s", "7s"),
                       eyes=Tile.from_code("5z"), picked=Tile.from_code("2p"))
        assert calculate_fu(ctx) == 40

    def test_double_wind_pair(self):
        # 20 + 2 tsumo + 4 closed simple pong + 2 open simple pong = 28
        base = dict(closed_chows=tiles("2m", "5p"), closed_pongs=tiles("3s"),
                    open_pongs=tiles("6s"), eyes=Tile.from_code("1z"),
                    picked=Tile.from_code("4m"), is_tsumo=True)
        assert calculate_fu(make_ctx(**base)) == 40
        single = make_ctx(seat_wind=Tile.from_code("2z"), **base)
        assert calculate_fu(single) == 30

    def test_ron_pong_stays_concealed(self):
        # 20 + 10 + 8 (9m completed by ron) + 4 (5p) = 42
        ctx = make_ctx(closed_chows=tiles("2s", "3m"), closed_pongs=tiles("9m", "5p"),
                       eyes=Tile.from_code("7p"), picked=Tile.from_code("9m"))
        assert calculate_fu(ctx) == 50

    def test_kongs(self):
        # 20 + 10 + 32 closed terminal kong = 62
        ctx = make_ctx(closed_chows=tiles("2m", "5p", "3s"), closed_kongs=tiles("9p"),
                       eyes=Tile.from_code("5m"), picked=Tile.from_code("4m"))
        assert calculate_fu(ctx) == 70
        # 20 + 8 open simple kong + 16 open honor kong = 44
        ctx = make_ctx(closed_chows=tiles("2m", "5p"), open_kongs=tiles("5s", "7z"),
                       eyes=Tile.from_code("5m"), picked=Tile.from_code("4m"))
        assert calculate_fu(ctx) == 50

    def test_tanki_beats_ryanmen(self):
        ctx = make_ctx(closed_chows=tiles("2m", "5p", "4s"),
                       eyes=Tile.from_code("6s"), picked=Tile.from_code("6s"))
        readings = {m.machi for m in find_all_machi(ctx)}
        assert readings == {Machi.RYANMEN, Machi.TANKI}
        # 20 + 10 + 2
        assert calculate_fu(ctx) == 40


class TestMachi:
    def test_penchan(self):
        ctx = make_ctx(closed_chows=tiles("1m"), picked=Tile.from_code("3m"))
        assert [m.machi for m in find_all_machi(ctx)] == [Machi.PENCHAN]
        ctx = make_ctx(closed_chows=tiles("7m"), picked=Tile.from_code("7m"))
        assert [m.machi for m in find_all_machi(ctx)] == [Machi.PENCHAN]

    def test_ryanmen_edges(self):
        ctx = make_ctx(closed_chows=tiles("1m"), picked=Tile.from_code("1m"))
        assert [m.machi for m in find_all_machi(ctx)] == [Machi.RYANMEN]

    def test_shanpon(self):
        ctx = make_ctx(closed_pongs=tiles("5z"), picked=Tile.from_code("5z"))
        assert [(m.machi, m.fu) for m in find_all_machi(ctx)] == [(Machi.SHANPON, 0)]


class TestRoundUp:
    def test_round_up(self):
        assert _round_up_10(20) == 20
        assert _round_up_10(22) == 30
        assert _round_up_10(38) == 40
        assert _round_up_10(102) == 110
