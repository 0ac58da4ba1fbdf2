"""Tile display formatting with colors for terminal output."""

from typing import Iterable

from rich.text import Text

from mahjong_hand.core.hand import Hand
from mahjong_hand.core.meld import Meld
from mahjong_hand.core.tile import Tile, TileSuit
from mahjong_hand.ui.i18n import t

# Color schemes
SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
    TileSuit.WIND: "yellow",
    TileSuit.DRAGON: "yellow",
    TileSuit.BONUS: "magenta",
}

_HONOR_KEYS = {
    TileSuit.WIND: ["tile.east", "tile.south", "tile.west", "tile.north"],
    TileSuit.DRAGON: ["tile.haku", "tile.hatsu", "tile.chun"],
}


def tile_to_display_str(tile: Tile) -> str:
    """Localized string representation of a tile (for UI display).

    Number and bonus tiles keep their code; honors are translated.
    """
    if tile.is_honor:
        return t(_HONOR_KEYS[tile.suit][tile.number - 1])
    return tile.code


def tile_to_rich_text(tile: Tile, highlight: bool = False) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    if tile.is_red:
        style = "bold red on white"
    else:
        style = f"bold {SUIT_COLORS[tile.suit]}"
        if highlight:
            style += " on white"
    return Text(f"[{tile_to_display_str(tile)}]", style=style)


def tiles_to_rich_text(tiles: Iterable[Tile], separator: str = " ") -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile))
    return result


def meld_to_rich_text(meld: Meld) -> Text:
    """Meld call in braces; the claimed tile is dimmed."""
    result = Text("{", style="dim")
    claimed = meld.tiles.index(meld.discarded) if meld.discarded is not None else -1
    for i, tile in enumerate(meld.tiles):
        if i > 0:
            result.append(" ")
        text = tile_to_rich_text(tile)
        if i == claimed:
            text.stylize("dim")
        result.append_text(text)
    result.append("}", style="dim")
    return result


def hand_to_rich_text(hand: Hand) -> Text:
    """Concealed tiles, calls, then the picked tile highlighted."""
    result = tiles_to_rich_text(hand.concealed)
    for meld in hand.melds:
        result.append("  ")
        result.append_text(meld_to_rich_text(meld))
    if hand.picked is not None:
        result.append("  ")
        result.append_text(tile_to_rich_text(hand.picked, highlight=True))
    return result
