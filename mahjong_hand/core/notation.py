"""Tile code notation - parse and print tiles, meld calls and hands.

Short code groups digits before their suit letter: '123m0p55z'.
'0' is a red five, 'z' covers winds (1-4) and dragons (5-7), 'h' bonus
tiles (1-8). Kanji honors 東南西北白發中 and '5r' (red five) are accepted.

Meld calls are written in brackets inside a hand code. A marker before
a digit shows who discarded it: '<' top (left), '^' opposite, '>' bottom
(right); '+' after the marker marks an added kong. No marker means the
call is self-declared (closed kong, bonus).

    123m456p[<123s]789s11z      -> 14 tiles, the last 1z is the picked tile
"""

import re
from typing import Iterable, List

from .errors import HandError, MeldCallError, TileCodeError
from .hand import Hand
from .meld import Meld, MeldType, RelativePlayer
from .tile import HONOR_KANJI, SUIT_CHARS, Tile, sort_tiles

_SHORT_CODE_RE = re.compile(r"(?:[0-9]+[mps]|[1-7]+z|[1-8]+h)*")
_GROUP_RE = re.compile(r"([0-9]+)([mpszh])")
_MELD_RE = re.compile(r"(?:(?:[<^>]\+?)?[0-9][mpszh]?)*(?:(?:[<^>]\+?)?[0-9])[mpszh]")
_HAND_PART_RE = re.compile(r"[^\[\]]+|\[[^\[\]]+\]")

_MARKERS = {
    '<': RelativePlayer.TOP,
    '^': RelativePlayer.OPPONENT,
    '>': RelativePlayer.BOTTOM,
}


def _preprocess(s: str) -> str:
    s = re.sub(f"[{HONOR_KANJI}]", lambda m: f"{HONOR_KANJI.index(m.group(0)) + 1}z", s)
    return s.replace("5r", "0")


def parse_tiles(s: str) -> List[Tile]:
    """Parse a short code like '123m456p789s11z' into tiles, in written order."""
    s = _preprocess(s)
    if not _SHORT_CODE_RE.fullmatch(s):
        raise TileCodeError(f"invalid short code {s!r}")
    tiles = []
    for numerals, suit in _GROUP_RE.findall(s):
        tiles.extend(Tile.from_code(n + suit) for n in numerals)
    return tiles


def parse_meld_call(s: str) -> Meld:
    """Parse the inside of a bracketed call such as '<123m' or '55^+55z'."""
    s = _preprocess(s)
    if not _MELD_RE.fullmatch(s):
        raise MeldCallError(f"invalid meld call {s!r}")
    tiles: List[Tile] = []
    digits: List[str] = []
    marker = None
    marked_pos = None
    is_added_kong = False
    for ch in s:
        if ch in _MARKERS:
            if marker is not None:
                raise MeldCallError(f"more than one discarded tile in {s!r}")
            marker = ch
            marked_pos = len(tiles) + len(digits)
        elif ch == '+':
            is_added_kong = True
        elif ch.isdigit():
            digits.append(ch)
        else:
            tiles.extend(Tile.from_code(d + ch) for d in digits)
            digits = []

    face = [t.plain for t in tiles]
    if len(tiles) == 1:
        meld_type = MeldType.BONUS
    elif len(tiles) == 4:
        meld_type = MeldType.KONG
    elif face[0] == face[1]:
        meld_type = MeldType.PONG
    else:
        meld_type = MeldType.CHOW

    if marker is None:
        return Meld(meld_type, tuple(tiles), RelativePlayer.SELF, None, is_added_kong)
    return Meld(meld_type, tuple(tiles), _MARKERS[marker], tiles[marked_pos], is_added_kong)


def parse_hand(s: str) -> Hand:
    """Parse a hand code with optional bracketed calls.

    When the hand reaches 14 tiles the last concealed tile is the picked tile.
    """
    s = _preprocess(s)
    concealed: List[Tile] = []
    melds: List[Meld] = []
    pos = 0
    while pos < len(s):
        m = _HAND_PART_RE.match(s, pos)
        if not m:
            raise HandError(f"unbalanced brackets in {s!r}")
        part = m.group(0)
        if part.startswith("["):
            melds.append(parse_meld_call(part[1:-1]))
        else:
            concealed.extend(parse_tiles(part))
        pos = m.end()

    called = sum(3 for meld in melds if not meld.is_bonus)
    if concealed and len(concealed) + called == 14:
        picked = concealed.pop()
        return Hand(concealed, melds, picked)
    return Hand(concealed, melds)


def to_short_code(tiles: Iterable[Tile]) -> str:
    """Print tiles as a sorted short code, e.g. '123m55z'."""
    groups = {ch: "" for ch in "mpszh"}
    for tile in sort_tiles(tiles):
        groups[SUIT_CHARS[tile.suit]] += tile.code[0]
    return "".join(f"{digits}{ch}" for ch, digits in groups.items() if digits)


def meld_to_code(meld: Meld) -> str:
    markers = {v: k for k, v in _MARKERS.items()}
    tiles = list(meld.tiles)
    di = tiles.index(meld.discarded) if meld.discarded is not None else -1
    out = []
    for i, tile in enumerate(tiles):
        if i == di:
            out.append(markers[meld.discarder] + ("+" if meld.is_added_kong else ""))
        out.append(tile.code[0])
    return f"[{''.join(out)}{SUIT_CHARS[meld.smallest.suit]}]"


def hand_to_code(hand: Hand) -> str:
    picked = hand.picked.code if hand.picked is not None else ""
    return to_short_code(hand.concealed) + "".join(meld_to_code(m) for m in hand.melds) + picked
