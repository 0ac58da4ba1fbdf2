"""Tests for scoring.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mahjong_hand.core.notation import parse_hand, parse_tiles
from mahjong_hand.core.situation import SituationalState, Wind
from mahjong_hand.rules.agari import hu_decompositions
from mahjong_hand.rules.decompose import Decomposition
from mahjong_hand.rules.scoring import (
    Payment, WinningHand, _round_up_100, calculate_basic_points, calculate_payment,
    evaluate_winning_hand, limit_name, score_hand, select_best_hand,
    yakuman_limit_name,
)


class TestBasePoints:
    def test_no_yaku(self):
        assert calculate_basic_points(30, 0, 3) == 0
        assert limit_name(30, 0, 3) == ""

    def test_sub_mangan(self):
        # 1 han 30 fu = 30 * 2^3 = 240
        assert calculate_basic_points(30, 1, 0) == 240
        # 4 han 30 fu = 30 * 2^6 = 1920
        assert calculate_basic_points(30, 4, 0) == 1920
        assert limit_name(30, 4, 0) == ""

    def test_dora_adds_fan(self):
        assert calculate_basic_points(30, 1, 3) == 1920

    def test_mangan_cutoff(self):
        # 3 han 70 fu = 70 * 2^5 = 2240 -> capped at 2000
        assert calculate_basic_points(70, 3, 0) == 2000
        assert limit_name(70, 3, 0) == "満貫"
        assert limit_name(40, 4, 0) == "満貫"

    def test_limits(self):
        assert calculate_basic_points(30, 6, 0) == 3000
        assert limit_name(30, 7, 0) == "跳満"
        assert calculate_basic_points(30, 8, 0) == 4000
        assert limit_name(30, 10, 0) == "倍満"
        assert calculate_basic_points(30, 11, 0) == 6000
        assert limit_name(30, 12, 0) == "三倍満"
        assert calculate_basic_points(30, 10, 3) == 8000
        assert limit_name(30, 10, 3) == "数え役満"

    def test_yakuman_labels(self):
        assert yakuman_limit_name(1) == "役満"
        assert yakuman_limit_name(2) == "二倍役満"
        assert yakuman_limit_name(7) == "七倍役満"
        assert yakuman_limit_name(9) == "七倍役満"


class TestEvaluate:
    def test_regular_result(self):
        hand = parse_hand("234m22067p34567s8s")
        situation = SituationalState(dora_indicators=tuple(parse_tiles("1p")))
        result = evaluate_winning_hand(hu_decompositions(hand)[0], hand, situation)
        assert not result.is_yakuman
        assert result.yaku_fan == 2
        assert (result.dora, result.red_dora) == (2, 1)
        assert result.fan == 5
        assert result.fu == 30
        assert result.basic_points == 2000
        assert result.limit_name == "満貫"

    def test_no_yaku_is_data(self):
        hand = parse_hand("[<123m]456p234s78s55m9s")
        situation = SituationalState(dora_indicators=tuple(parse_tiles("4m")))
        result = evaluate_winning_hand(hu_decompositions(hand)[0], hand, situation)
        assert not result.has_yaku
        assert result.dora == 2
        assert result.fan == 2
        assert result.fu == 30
        assert result.basic_points == 0
        assert result.limit_name == ""

    def test_yakuman_skips_fu(self):
        hand = parse_hand("1112345678999m5m")
        result = evaluate_winning_hand(hu_decompositions(hand)[0], hand, SituationalState())
        assert result.is_yakuman
        assert result.fu == 0
        assert result.basic_points == 16000
        assert result.limit_name == "二倍役満"

    def test_open_triplets_hand(self):
        hand = parse_hand("2224z[^333z][^777z][^999m]4z")
        situation = SituationalState(round_wind=Wind.SOUTH, seat_wind=Wind.WEST)
        result, = score_hand(hand, hu_decompositions(hand), situation)
        assert result.fan == 9
        assert result.fu == 50
        assert result.basic_points == 4000
        assert result.limit_name == "倍満"


def reading(points, fan):
    return WinningHand(decomposition=Decomposition(), basic_points=points,
                       limit_name="", fan=fan)


class TestBestHand:
    def test_points_first(self):
        low, high = reading(1000, 5), reading(2000, 3)
        assert select_best_hand([low, high]) is high

    def test_fan_breaks_ties(self):
        a, b = reading(2000, 4), reading(2000, 5)
        assert select_best_hand([a, b]) is b

    def test_first_wins_full_tie(self):
        a, b = reading(2000, 5), reading(2000, 5)
        assert select_best_hand([a, b]) is a

    def test_empty(self):
        assert select_best_hand([]) is None

    def test_ryanpeikou_over_seven_pairs(self):
        hand = parse_hand("223344m556677p88s")
        readings = score_hand(hand, hu_decompositions(hand), SituationalState())
        assert len(readings) == 2
        best = select_best_hand(readings)
        assert best.basic_points == 2000
        assert best.fu == 40


class TestPayment:
    def test_non_dealer_ron(self):
        assert calculate_payment(1920, is_dealer=False, is_tsumo=False) == Payment(ron=7700, total=7700)

    def test_dealer_ron(self):
        assert calculate_payment(1920, is_dealer=True, is_tsumo=False).ron == 11600

    def test_non_dealer_tsumo(self):
        payment = calculate_payment(2000, is_dealer=False, is_tsumo=True)
        assert payment.tsumo_dealer == 4000
        assert payment.tsumo_non_dealer == 2000
        assert payment.total == 8000

    def test_dealer_tsumo(self):
        payment = calculate_payment(2000, is_dealer=True, is_tsumo=True)
        assert payment.tsumo_non_dealer == 4000
        assert payment.total == 12000

    def test_honba(self):
        assert calculate_payment(2000, is_dealer=False, is_tsumo=False, honba=2).ron == 8600
        payment = calculate_payment(2000, is_dealer=False, is_tsumo=True, honba=1)
        assert payment.total == 8300

    def test_zero(self):
        assert calculate_payment(0, is_dealer=True, is_tsumo=True) == Payment()


class TestRoundUp:
    def test_exact(self):
        assert _round_up_100(1000) == 1000

    def test_round_up(self):
        assert _round_up_100(1001) == 1100
        assert _round_up_100(960) == 1000
