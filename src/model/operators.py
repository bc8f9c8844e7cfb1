"""Structural operators for a DashboardDocument (add/remove/reorder)."""

from __future__ import annotations

import logging

from model.card import CardContent, DashboardCard
from model.document import DashboardDocument, DashboardFilter

log = logging.getLogger(__name__)


class DashboardDocumentOperators:
    """Structural changes to a document's card and filter sequences.

    Cards are created with a copy of the document defaults, so every card
    always has a defined appearance and align.
    """

    def __init__(self, document: DashboardDocument) -> None:
        self.document = document

    def add_card(self, title: str | None = None, text: str | None = None) -> DashboardCard:
        """Append a new card configured from the document defaults."""
        card = DashboardCard(
            content=CardContent(title=title, text=text),
            config=self.document.defaults.copy(),
        )
        with self.document.transaction():
            self.document.cards.append(card)
        log.debug(f"Added {card.card_id} ({len(self.document.cards)} cards)")
        return card

    def remove_card(self, card: DashboardCard) -> bool:
        """Remove a card; returns False if it is not in the document."""
        for i, c in enumerate(self.document.cards):
            if c is card:
                with self.document.transaction():
                    del self.document.cards[i]
                log.debug(f"Removed {card.card_id}")
                return True
        return False

    def move_card(self, card: DashboardCard, index: int) -> None:
        """Move a card to a new position in the sequence."""
        if card not in self.document:
            raise ValueError(f"{card.card_id} is not in this document")
        index = max(0, min(index, len(self.document.cards) - 1))
        with self.document.transaction():
            self.document.cards.remove(card)
            self.document.cards.insert(index, card)

    def add_filter(self, field_name: str, description: str = "") -> DashboardFilter:
        flt = DashboardFilter(field_name=field_name, description=description)
        with self.document.transaction():
            self.document.filters.append(flt)
        return flt

    def remove_filter(self, flt: DashboardFilter) -> bool:
        """Remove a filter; returns False if it is not in the document."""
        if flt not in self.document.filters:
            return False
        with self.document.transaction():
            self.document.filters.remove(flt)
        return True
