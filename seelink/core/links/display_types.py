from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class DisplayType(Enum):
    """
    Textual format used when copying a hosted file's link.

    The member name is the stable identifier stored as the user's
    preference; the value is the label shown in pickers.
    Declaration order is the picker order.
    """
    DIRECT_LINK = "Direct Link"
    SHARE_PAGE = "Share Page"
    BBCODE = "BBCode"
    BBCODE_WITH_LINK = "BBCode w/ Link"
    BBCODE_DIRECT_LINK = "BBCode w/ Direct Link"
    HTML = "HTML"
    HTML_WITH_LINK = "HTML w/ Link"
    HTML_DIRECT_LINK = "HTML w/ Direct Link"
    MARKDOWN = "Markdown"

    @property
    def identifier(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_markup(self) -> bool:
        """True for the BBCode/HTML/Markdown variants (not a bare URL)."""
        return self not in (DisplayType.DIRECT_LINK, DisplayType.SHARE_PAGE)


DEFAULT_DISPLAY_TYPE = DisplayType.DIRECT_LINK

_ALL_TYPES: Tuple[DisplayType, ...] = tuple(DisplayType)
_BY_IDENTIFIER = {t.identifier: t for t in _ALL_TYPES}


def all_types() -> Tuple[DisplayType, ...]:
    """All display types in picker order. Same tuple on every call."""
    return _ALL_TYPES


def from_string(identifier: Optional[str]) -> DisplayType:
    """
    Resolve a stored identifier to a DisplayType.

    Exact, case-sensitive match on the identifier. Anything else, including
    None and values written by older versions, resolves to DIRECT_LINK.
    """
    if not identifier:
        return DEFAULT_DISPLAY_TYPE
    return _BY_IDENTIFIER.get(identifier, DEFAULT_DISPLAY_TYPE)


def label(display_type: DisplayType) -> str:
    return display_type.label
