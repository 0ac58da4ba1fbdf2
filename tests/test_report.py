"""Tests for report rendering, i18n and the CLI"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import io

import pytest
from rich.console import Console

import main
from mahjong_hand.core.notation import parse_hand, parse_tiles
from mahjong_hand.core.situation import SituationalState
from mahjong_hand.engine.evaluate import evaluate_hand
from mahjong_hand.ui.i18n import set_language, t, translate_limit, translate_yaku
from mahjong_hand.ui.report import render_evaluation
from mahjong_hand.ui.tile_display import tile_to_display_str


@pytest.fixture(autouse=True)
def japanese():
    set_language("ja")
    yield
    set_language("ja")


def render(code, situation=None, **kwargs):
    situation = situation or SituationalState()
    hand = parse_hand(code)
    console = Console(file=io.StringIO(), width=120)
    render_evaluation(console, hand, situation, evaluate_hand(hand, situation), **kwargs)
    return console.file.getvalue()


class TestI18n:
    def test_translate(self):
        assert translate_yaku("平和") == "平和"
        set_language("en")
        assert translate_yaku("平和") == "Pinfu"
        assert translate_limit("満貫") == "Mangan"
        assert t("report.fu_missing_key") == "report.fu_missing_key"

    def test_unknown_names_pass_through(self):
        assert translate_yaku("未知") == "未知"
        assert translate_limit("") == ""

    def test_unknown_language(self):
        with pytest.raises(ValueError):
            set_language("xx")
        assert t("report.fan_value", fan=2) == "2翻"

    def test_honor_display(self):
        east = parse_tiles("1z")[0]
        assert tile_to_display_str(east) == "東"
        set_language("en")
        assert tile_to_display_str(east) == "E"
        assert tile_to_display_str(parse_tiles("0m")[0]) == "0m"


class TestReport:
    def test_winning_hand(self):
        out = render("234m22567p34567s8s")
        assert "平和" in out
        assert "断么九" in out
        assert "30符 2翻 基本点480" in out
        assert "ロン 2900点" in out

    def test_english(self):
        set_language("en")
        out = render("234m22567p34567s8s")
        assert "Pinfu" in out
        assert "Ron 2900" in out

    def test_yakuman(self):
        out = render("1112345678999m5m")
        assert "純正九蓮宝燈" in out
        assert "二倍役満" in out

    def test_no_yaku(self):
        out = render("[<123m]456p234s78s55m9s")
        assert "役なし" in out

    def test_waits(self):
        out = render("234m567p345s22p67s")
        assert "待ち" in out
        assert "[8s]" in out

    def test_not_ready(self):
        out = render("159m159p159s1234z")
        assert "ノーテン" in out

    def test_all_readings(self):
        out = render("223344m556677p88s", show_all=True)
        assert "読み 1" in out
        assert "読み 2" in out
        assert "七対子" in out


class TestMain:
    def test_evaluates(self, capsys):
        assert main.main(["234m22567p34567s8s", "--tsumo", "--seat", "south"]) == 0
        out = capsys.readouterr().out
        assert "門前清自摸和" in out

    def test_bad_hand(self, capsys):
        assert main.main(["123m"]) == 2
        assert "エラー" in capsys.readouterr().out

    def test_bad_dora_degrades(self):
        assert main.main(["234m22567p34567s8s", "--dora", "xyz"]) == 0

    def test_situation_flags(self):
        args = main.build_parser().parse_args(
            ["123m", "--round", "south", "--riichi", "--dora", "1m", "--ura-dora", "9p"])
        situation = main.build_situation(args)
        assert situation.round_wind.name == "SOUTH"
        assert situation.is_riichi
        assert [d.code for d in situation.dora] == ["2m"]
        assert [d.code for d in situation.ura_dora] == ["1p"]
