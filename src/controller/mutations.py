"""Card setters and the broadcast mutator.

Every write goes through the document's transaction so observers see one
update per user action. Values are validated before the transaction opens;
an invalid value leaves the document untouched.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from model.card import CardConfig, CardContent
from model.enums import CardAppearance, CardField, CardInsetLayout, as_card_field

if TYPE_CHECKING:
    from model import DashboardCard, DashboardDocument

log = logging.getLogger(__name__)


def set_title(document: DashboardDocument, card: DashboardCard, value: str | None) -> None:
    """Set a card's title; empty input clears it."""
    with document.transaction():
        card.content.title = value
    log.debug(f"{card.card_id} title -> {card.content.title!r}")


def set_description(document: DashboardDocument, card: DashboardCard, value: str | None) -> None:
    """Set a card's description text; empty input clears it."""
    with document.transaction():
        card.content.text = value
    log.debug(f"{card.card_id} text -> {card.content.text!r}")


def set_appearance(document: DashboardDocument, card: DashboardCard, value: CardAppearance) -> None:
    value = CardConfig.appearance.validate(value)
    with document.transaction():
        card.config.appearance = value
    log.debug(f"{card.card_id} appearance -> {value.value}")


def set_align(document: DashboardDocument, card: DashboardCard, value: CardInsetLayout) -> None:
    value = CardConfig.align.validate(value)
    with document.transaction():
        card.config.align = value
    log.debug(f"{card.card_id} align -> {value.name}")


CARD_SETTERS = {
    CardField.APPEARANCE: set_appearance,
    CardField.ALIGN: set_align,
}

CONTENT_SETTERS = {
    CardContent.title.name: set_title,
    CardContent.text.name: set_description,
}


def set_config(
    document: DashboardDocument, card: DashboardCard, field: CardField | str, value: Enum
) -> None:
    """Set one config field of one card."""
    CARD_SETTERS[as_card_field(field)](document, card, value)


def broadcast(document: DashboardDocument, field: CardField | str, value: Enum) -> None:
    """Write value to config.<field> of every card currently in the document.

    Point-in-time: cards added afterwards keep their own defaults.
    """
    card_field = as_card_field(field)
    descriptor = CardConfig.get_choice_fields()[card_field.value]
    value = descriptor.validate(value)

    cards = list(document.cards)
    with document.transaction():
        for card in cards:
            setattr(card.config, card_field.value, value)
    log.info(f"Broadcast {card_field.value}={value.name} to {len(cards)} cards")
