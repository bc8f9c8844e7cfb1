"""Side panel event handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from textual.widgets import Input, Tabs, TextArea

from controller.selection import SelectionContext
from controller.subview import SubView
from model import CardContent, CardField
from model.ui_field import InvalidOptionError

if TYPE_CHECKING:
    from controller.subview import SubViewState
    from model import DashboardCard, DashboardDocument

log = logging.getLogger(__name__)


class PanelEventsMixin:
    """Mixin for panel option, content and sub-view handlers."""

    document: DashboardDocument
    selected_card: DashboardCard | None
    subviews: SubViewState
    _set_status: Callable

    def _selection_context(self) -> SelectionContext:
        return SelectionContext(self.document, self.selected_card)

    def _on_choose(self, field: CardField, key: str) -> None:
        """Ordinary option change: selected card, or every card in global mode."""
        context = self._selection_context()
        if context.choose(field, key) and context.selection is None:
            self._set_status(f"{field.value.capitalize()} '{key}' applied to all cards")

    def _on_apply_all(self, field: CardField, key: str) -> None:
        """Explicit "Apply to all" press."""
        if self._selection_context().apply_to_all(field, key):
            self._set_status(f"{field.value.capitalize()} '{key}' applied to all cards")

    def on_title_changed(self, event: Input.Changed) -> None:
        self._edit_content(CardContent.title.name, event.value)

    def on_description_changed(self, event: TextArea.Changed) -> None:
        self._edit_content(CardContent.text.name, event.text_area.text)

    def _edit_content(self, field: str, value: Any) -> None:
        context = self._selection_context()
        if context.selection is None:
            return
        # Skip echoes of the value the control was composed with
        if getattr(context.selection.content, field) == (value or None):
            return
        context.edit_content(field, value)

    def on_subview_tab_activated(self, event: Tabs.TabActivated) -> None:
        """Switch the secondary editor; re-activating the current tab is a no-op."""
        tab_id = event.tab.id or ""
        if not tab_id.startswith("subview-"):
            return
        try:
            self.subviews.select(SubView(tab_id.removeprefix("subview-")))
        except (ValueError, InvalidOptionError) as e:
            log.debug(f"Ignoring tab {tab_id}: {e}")
