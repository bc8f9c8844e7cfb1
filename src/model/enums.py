"""Card appearance/layout enumerations and their panel option keys."""

from __future__ import annotations

import logging
from enum import Enum

from model.ui_field import InvalidOptionError

log = logging.getLogger(__name__)


class CardAppearance(Enum):
    """Visual theme of a card."""

    Transparent = "transparent"
    Outline = "outline"
    Dropping = "dropping"
    Neumorphism = "neumorphism"


class CardInsetLayout(Enum):
    """How a card arranges its inset content."""

    Auto = 0
    Column = 1
    Row = 2


class CardField(Enum):
    """Config fields that can be broadcast to every card."""

    APPEARANCE = "appearance"
    ALIGN = "align"


# Option order as offered in the panel
CARD_THEMES: tuple[CardAppearance, ...] = (
    CardAppearance.Transparent,
    CardAppearance.Outline,
    CardAppearance.Dropping,
    CardAppearance.Neumorphism,
)

CARD_ALIGN_TYPES: tuple[CardInsetLayout, ...] = (
    CardInsetLayout.Auto,
    CardInsetLayout.Column,
    CardInsetLayout.Row,
)

CARD_ALIGN_NAME: dict[CardInsetLayout, str] = {
    CardInsetLayout.Auto: "Auto",
    CardInsetLayout.Column: "Column",
    CardInsetLayout.Row: "Row",
}

FIELD_ENUMS: dict[CardField, type[Enum]] = {
    CardField.APPEARANCE: CardAppearance,
    CardField.ALIGN: CardInsetLayout,
}


def _build_key_tables() -> dict[CardField, dict[str, Enum]]:
    tables = {
        CardField.APPEARANCE: {thm.value: thm for thm in CARD_THEMES},
        CardField.ALIGN: {CARD_ALIGN_NAME[alg]: alg for alg in CARD_ALIGN_TYPES},
    }
    # Every member must be reachable from exactly one key
    for field, table in tables.items():
        members = set(FIELD_ENUMS[field])
        if set(table.values()) != members or len(table) != len(members):
            raise RuntimeError(f"Option keys for {field.value} do not cover {FIELD_ENUMS[field].__name__}")
    return tables


_OPTION_KEYS = _build_key_tables()


def as_card_field(field: CardField | str) -> CardField:
    """Resolve a field name ("appearance"/"align") to its CardField.

    Raises InvalidOptionError for anything else.
    """
    if isinstance(field, CardField):
        return field
    try:
        return CardField(field)
    except ValueError:
        raise InvalidOptionError(f"{field!r} is not a broadcastable card field") from None


def option_key(member: Enum) -> str:
    """The panel option key for an enum member (inverse of option_key_to_enum)."""
    if isinstance(member, CardInsetLayout):
        return CARD_ALIGN_NAME[member]
    if isinstance(member, CardAppearance):
        return member.value
    raise TypeError(f"No option key for {member!r}")


def option_keys(field: CardField | str) -> list[str]:
    """Option keys for a field, in panel order."""
    return list(_OPTION_KEYS[as_card_field(field)])


def option_key_to_enum(field: CardField | str, key: str | None) -> Enum | None:
    """Map a panel option key back to its enum member.

    Total over all inputs: unknown or missing keys return None.
    """
    member = _OPTION_KEYS[as_card_field(field)].get(key or "")
    if member is None:
        log.debug(f"Unknown {as_card_field(field).value} option key: {key!r}")
    return member
