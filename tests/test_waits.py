"""Tests for waits.py - waiting tiles"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahjong_hand.core.notation import parse_hand
from mahjong_hand.core.tile import YAOCHU_TILES, Tile
from mahjong_hand.rules.agari import Completion, is_agari, search
from mahjong_hand.rules.waits import collect_waits


def waits_of(code):
    hand = parse_hand(code)
    ready = [d for completion, d in search(hand) if completion == Completion.TINGPAI]
    return collect_waits(hand, ready)


def needed(code):
    return [n.code for _, n in waits_of(code)]


def tile(code):
    return Tile.from_code(code)


class TestRegularWaits:
    def test_ryanmen(self):
        assert needed("234m567p345s22p67s") == ["2s", "5s", "8s"]

    def test_penchan_low(self):
        assert needed("12m456p789s234s55z") == ["3m"]

    def test_penchan_high(self):
        assert needed("89m456p789s234s55z") == ["7m"]

    def test_kanchan(self):
        assert needed("13m456p789s234s55z") == ["2m"]

    def test_shanpon(self):
        assert needed("11m456p789s234s55z") == ["1m", "5z"]

    def test_tanki_on_miscounted_shape(self):
        assert waits_of("123m123m123m222s5m") == [(None, tile("4m")), (None, tile("5m"))]

    def test_fourth_copy_held(self):
        # Waiting on 1m with all four already in hand is no wait
        assert waits_of("1111m456p789s234s") == []


class TestDiscardWaits:
    def test_discard_then_wait(self):
        assert waits_of("234m567p345s22p67s9m") == [
            (tile("9m"), tile("2s")),
            (tile("9m"), tile("5s")),
            (tile("9m"), tile("8s")),
        ]

    def test_seven_pairs_two_singles(self):
        assert waits_of("1133m5577p2299s17z") == [
            (tile("7z"), tile("1z")),
            (tile("1z"), tile("7z")),
        ]

    def test_sorted_by_needed_then_discard(self):
        waits = waits_of("123m456p789s11122z")
        keys = [(n.sort_key, d.sort_key) for d, n in waits]
        assert keys == sorted(keys)
        assert len(set(waits)) == len(waits)


class TestIrregularWaits:
    def test_seven_pairs(self):
        assert waits_of("1133m5577p2299s1z") == [(None, tile("1z"))]

    def test_thirteen_way(self):
        assert needed("19m19p19s1234567z") == [t.code for t in YAOCHU_TILES]

    def test_twelve_kinds(self):
        assert waits_of("119m19p19s123456z") == [(None, tile("7z"))]


@pytest.mark.parametrize("code", [
    "234m567p345s22p67s",
    "123m123m123m222s5m",
    "1112345678999m",
    "19m19p19s1234567z",
    "1133m5577p2299s17z",
    "234m567p345s22p67s9m",
    "123m456p789s11122z",
    "[<234m]0p55p678s3344z",
])
def test_every_wait_completes_the_hand(code):
    hand = parse_hand(code)
    waits = waits_of(code)
    assert waits
    for discard, need in waits:
        ready = hand.discard(discard) if discard is not None else hand
        assert is_agari(ready.pick(need)), (discard, need)
