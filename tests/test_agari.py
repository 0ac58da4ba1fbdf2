"""Tests for agari.py - win and ready detection"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mahjong_hand.core.notation import parse_hand
from mahjong_hand.rules.agari import (
    Completion, GroupCount, classify, classify_thirteen_orphans, count_groups,
    hu_decompositions, is_agari, is_regular_tingpai, search,
)
from mahjong_hand.rules.decompose import decompose


def completions(code):
    return {completion for completion, _ in search(parse_hand(code))}


class TestRegular:
    def test_simple_win(self):
        assert is_agari(parse_hand("123m456p789s11122z"))

    def test_not_a_win(self):
        assert not is_agari(parse_hand("123m456p789s11223z"))

    def test_open_hand_counts_calls(self):
        hand = parse_hand("2224z[^333z][^777z][^999m]4z")
        assert is_agari(hand)
        d = hu_decompositions(hand)[0]
        assert count_groups(hand, d) == GroupCount(4, 1, 0)

    def test_closed_kong_counts(self):
        assert is_agari(parse_hand("[1111m]456p789s22z333z"))

    def test_miscounted_shape_is_not_a_win(self):
        # Three runs, a triplet and a lone 5m: ready, not complete
        hand = parse_hand("123m123m123m222s5m")
        assert hand.tile_count == 13
        assert not is_agari(hand)
        assert Completion.TINGPAI in completions("123m123m123m222s5m")

    def test_tingpai_rules(self):
        assert is_regular_tingpai(GroupCount(4, 0, 0))
        assert is_regular_tingpai(GroupCount(3, 1, 1))
        assert is_regular_tingpai(GroupCount(3, 2, 0))
        assert not is_regular_tingpai(GroupCount(3, 0, 2))
        assert not is_regular_tingpai(GroupCount(2, 1, 1))

    def test_classify_each_reading(self):
        hand = parse_hand("123m456p789s11122z")
        kinds = {classify(hand, d) for d in decompose(hand.closed_tiles)}
        assert Completion.HU in kinds
        assert Completion.NONE in kinds


class TestSevenPairs:
    def test_win(self):
        assert is_agari(parse_hand("1133m5577p2299s11z"))

    def test_quad_is_not_two_pairs(self):
        assert not is_agari(parse_hand("1111m3344p5566s77z"))

    def test_one_pair_short(self):
        assert completions("1133m5577p2299s1z") == {Completion.TINGPAI}

    def test_quad_one_pair_short_not_ready(self):
        assert completions("1111m3344p5566s7z") == set()


class TestThirteenOrphans:
    def test_win(self):
        hand = parse_hand("19m19p19s1234567z1m")
        assert classify_thirteen_orphans(hand) == [Completion.HU, Completion.TINGPAI]
        assert is_agari(hand)

    def test_thirteen_way_ready(self):
        assert classify_thirteen_orphans(parse_hand("19m19p19s1234567z")) == [Completion.TINGPAI]

    def test_twelve_kinds_ready(self):
        assert classify_thirteen_orphans(parse_hand("119m19p19s123456z")) == [Completion.TINGPAI]

    def test_too_few_orphans(self):
        assert classify_thirteen_orphans(parse_hand("12m19p19s1234567z")) == []

    def test_fourteen_with_simple_not_win(self):
        hand = parse_hand("19m19p19s1234567z5m")
        assert classify_thirteen_orphans(hand) == [Completion.TINGPAI]
        assert not is_agari(hand)
