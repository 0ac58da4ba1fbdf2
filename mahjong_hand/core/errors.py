"""Errors raised at the input boundary (tiles, meld calls, hands)."""


class MahjongError(ValueError):
    """Base class for malformed-input errors."""


class TileCodeError(MahjongError):
    """A tile code or short code could not be read."""


class MeldCallError(MahjongError):
    """A meld call has the wrong shape or an impossible discarder."""


class HandError(MahjongError):
    """A hand has the wrong tile count or an inconsistent picked tile."""
