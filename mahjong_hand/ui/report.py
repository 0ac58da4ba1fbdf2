"""Evaluation report rendering using Rich."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mahjong_hand.core.hand import Hand
from mahjong_hand.core.situation import SituationalState
from mahjong_hand.engine.evaluate import Evaluation
from mahjong_hand.rules.scoring import WinningHand, calculate_payment
from mahjong_hand.ui.i18n import t, translate_limit, translate_yaku
from mahjong_hand.ui.tile_display import (
    hand_to_rich_text, tile_to_rich_text, tiles_to_rich_text,
)


def _situation_text(situation: SituationalState) -> Text:
    text = Text(t("report.situation",
                  round=t(f"wind.{situation.round_wind.name.lower()}"),
                  seat=t(f"wind.{situation.seat_wind.name.lower()}")))
    text.append("  ")
    text.append(t("report.tsumo") if situation.is_tsumo else t("report.ron"), style="bold")
    if situation.is_riichi:
        text.append("  ")
        text.append(t("report.riichi"), style="bold red")
    if situation.dora_indicators:
        text.append(f"  {t('report.dora')}: ")
        text.append_text(tiles_to_rich_text(situation.dora_indicators))
    if situation.ura_dora:
        text.append(f"  {t('report.ura_dora')}: ")
        text.append_text(tiles_to_rich_text(situation.ura_dora_indicators))
    return text


def render_hand(console: Console, hand: Hand, situation: SituationalState):
    """Render the hand and its situation in a panel."""
    body = hand_to_rich_text(hand)
    body.append("\n")
    body.append_text(_situation_text(situation))
    console.print(Panel(
        body,
        title=f"[bold]{t('report.hand')}[/bold] ({t('report.tile_count', count=hand.tile_count)})",
        border_style="cyan",
    ))


def _yaku_table(result: WinningHand, title: str) -> Table:
    table = Table(title=title, show_header=True, border_style="cyan")
    table.add_column(t("report.name"), style="bold")
    table.add_column(t("report.fan"), justify="right")

    if result.is_yakuman:
        for name, multiplier in result.yakuman:
            table.add_row(translate_yaku(name), t("report.multiplier", multiplier=multiplier),
                          style="bold red")
        return table

    for name, fan in result.yaku:
        table.add_row(translate_yaku(name), t("report.fan_value", fan=fan))
    for key, count in (("report.dora", result.dora),
                       ("report.red_dora", result.red_dora),
                       ("report.bonus_dora", result.bonus_dora),
                       ("report.ura_dora", result.ura_dora)):
        if count:
            table.add_row(t(key), t("report.fan_value", fan=count), style="yellow")
    return table


def _summary_line(result: WinningHand) -> str:
    if result.is_yakuman:
        summary = t("report.yakuman_summary", points=result.basic_points)
    else:
        summary = t("report.summary", fu=result.fu, fan=result.fan, points=result.basic_points)
    label = translate_limit(result.limit_name)
    if label:
        summary = f"{label}  {summary}"
    return summary


def _payment_line(result: WinningHand, situation: SituationalState, honba: int) -> str:
    payment = calculate_payment(result.basic_points, situation.is_dealer,
                                situation.is_tsumo, honba)
    if not situation.is_tsumo:
        return t("report.payment_ron", points=payment.ron)
    if situation.is_dealer:
        return t("report.payment_dealer_tsumo", each=payment.tsumo_non_dealer)
    return t("report.payment_tsumo", non_dealer=payment.tsumo_non_dealer,
             dealer=payment.tsumo_dealer)


def render_winning_hand(console: Console, result: WinningHand,
                        situation: SituationalState, honba: int = 0,
                        title: Optional[str] = None):
    """Render yaku, dora, the fu/fan/points line and the payment line."""
    title = title or (t("report.yakuman") if result.is_yakuman else t("report.yaku"))
    console.print(_yaku_table(result, title))

    if not result.has_yaku:
        console.print(f"  [bold red]{t('report.no_yaku')}[/bold red]  "
                      f"{t('report.summary', fu=result.fu, fan=result.fan, points=0)}")
        return
    style = "bold red" if result.is_yakuman else "bold green"
    console.print(f"  [{style}]{_summary_line(result)}[/{style}]")
    console.print(f"  {_payment_line(result, situation, honba)}")


def render_waits(console: Console, evaluation: Evaluation):
    """Render the (discard, needed) table, or a not-ready line."""
    if not evaluation.tingpai:
        console.print(f"  [dim]{t('report.noten')}[/dim]")
        return
    table = Table(title=t("report.waits"), show_header=True, border_style="cyan")
    if evaluation.tile_count == 14:
        table.add_column(t("report.discard"), justify="center")
    table.add_column(t("report.needed"), justify="center")
    for discard, needed in evaluation.tingpai:
        if evaluation.tile_count == 14:
            table.add_row(tile_to_rich_text(discard) if discard is not None else Text("-"),
                          tile_to_rich_text(needed))
        else:
            table.add_row(tile_to_rich_text(needed))
    console.print(table)


def render_evaluation(console: Console, hand: Hand, situation: SituationalState,
                      evaluation: Evaluation, honba: int = 0,
                      show_all: bool = False):
    """Render a full evaluation report."""
    console.print()
    render_hand(console, hand, situation)

    if evaluation.tile_count == 14:
        if evaluation.hu is None:
            console.print(f"  [bold yellow]{t('report.not_hu')}[/bold yellow]")
        elif show_all:
            for i, reading in enumerate(evaluation.readings, 1):
                render_winning_hand(console, reading, situation, honba,
                                    title=t("report.reading", index=i))
        else:
            render_winning_hand(console, evaluation.hu, situation, honba)

    if evaluation.tingpai is not None:
        render_waits(console, evaluation)
    console.print()
