"""Report strings in Japanese (default) or English.

Usage:
    from mahjong_hand.ui.i18n import t, set_language, translate_yaku

    set_language("en")
    t("report.fan_value", fan=2)    # -> "2 han"
    translate_yaku("立直")           # -> "Riichi"
"""

import importlib

LANGUAGES = ("ja", "en")


class I18n:
    """Process-wide catalog for the active report language."""

    _catalog: dict = {}

    @classmethod
    def set_language(cls, lang: str):
        if lang not in LANGUAGES:
            raise ValueError(f"unsupported language {lang!r}")
        module = importlib.import_module(f"mahjong_hand.ui.locales.{lang}")
        cls._catalog = module.TRANSLATIONS

    @classmethod
    def lookup(cls, key: str):
        """Catalog entry for `key`, or None when the language lacks it."""
        if not cls._catalog:
            cls.set_language(LANGUAGES[0])
        return cls._catalog.get(key)


def t(key: str, **kwargs) -> str:
    """Translate `key`; a missing key renders as itself."""
    text = I18n.lookup(key)
    if text is None:
        return key
    return text.format(**kwargs) if kwargs else text


def set_language(lang: str):
    I18n.set_language(lang)


def translate_yaku(yaku_name: str) -> str:
    """Translate a yaku or yakuman name; unknown names come back unchanged."""
    return I18n.lookup(f"yaku.{yaku_name}") or yaku_name


def translate_limit(name: str) -> str:
    # 満貫, 役満 ... ; an empty label stays empty
    if not name:
        return ""
    return I18n.lookup(f"limit.{name}") or name
