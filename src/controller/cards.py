"""Card list event handlers: selection, adding cards, filters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from textual.css.query import NoMatches
from textual.widgets import ListView

from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from model import DashboardCard, DashboardDocument, DashboardDocumentOperators
    from ui.widgets import FilterItem

log = logging.getLogger(__name__)


class CardListEventsMixin:
    """Mixin for card-list and document structure handlers."""

    document: DashboardDocument
    operators: DashboardDocumentOperators
    selected_card: DashboardCard | None
    query_one: Callable
    _set_status: Callable
    _select: Callable[[DashboardCard | None], None]

    def on_card_selected(self, event: ListView.Selected) -> None:
        """Select the card behind a list row."""
        card = getattr(event.item, "card", None)
        if card is not None:
            self._select(card)

    def action_deselect(self) -> None:
        """Return to the global editor."""
        self._select(None)
        self._set_status("Editing all cards")

    def action_add_card(self) -> None:
        """Append a card built from the document defaults and select it."""
        card = self.operators.add_card()
        self._rebuild_card_list()
        self._select(card)
        self._set_status(f"Added {card.card_id}")

    def _rebuild_card_list(self) -> None:
        """Rebuild the card list rows from the document order."""
        from ui.widgets import CardListItem

        try:
            card_list = self.query_one(css(ids.CARD_LIST), ListView)
        except NoMatches:
            log.debug("card-list not found")
            return
        card_list.clear()
        for card in self.document.cards:
            card_list.append(CardListItem(card))

    def _remove_filter(self, item: FilterItem) -> None:
        """Remove a filter from the document."""
        if self.operators.remove_filter(item.flt):
            item.remove()
            self._set_status(f"Removed filter: {item.flt.field_name}")
