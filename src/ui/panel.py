"""DashboardPanel: the side panel for one card or for the whole document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Input

from controller.selection import PanelMode, SelectionContext
from controller.subview import SubView
from model import CardConfig, CardContent, CardField
from ui.sections import compose_global_panel, compose_single_panel, compose_subview
from ui.widgets import FilterItem, OptionCallback, OptionGroup
from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from controller.subview import SubViewState
    from model import DashboardCard, DashboardDocument

log = logging.getLogger(__name__)


class DashboardPanel(VerticalScroll):
    """Side panel. Recomposes when the selection changes mode or card."""

    def __init__(
        self,
        document: DashboardDocument,
        selection: DashboardCard | None,
        subviews: SubViewState,
        sample_size: int,
        on_choose: OptionCallback,
        on_apply_all: OptionCallback,
        on_filter_remove: Callable[[FilterItem], None],
    ) -> None:
        super().__init__(id=ids.PANEL)
        self.document = document
        self.card = selection
        self.subviews = subviews
        self.sample_size = sample_size
        self._on_choose = on_choose
        self._on_apply_all = on_apply_all
        self._on_filter_remove = on_filter_remove
        self._unsubscribe: Callable[[], None] | None = None
        self.subview_mounts = 0
        self._recompose_pending = False

    @property
    def context(self) -> SelectionContext:
        return SelectionContext(self.document, self.card)

    def compose(self) -> ComposeResult:
        context = self.context
        self._recompose_pending = False
        if context.mode is PanelMode.SINGLE:
            self.subview_mounts += 1
            yield from compose_single_panel(
                context, self.subviews, self.sample_size, self._on_choose, self._on_apply_all
            )
        else:
            yield from compose_global_panel(
                context, self._on_choose, self._on_apply_all, self._on_filter_remove
            )

    def on_mount(self) -> None:
        self._unsubscribe = self.subviews.subscribe(self._on_subview_transition)

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def set_selection(self, card: DashboardCard | None) -> None:
        """Show a different card (or the global editor)."""
        if card is self.card:
            return
        previous, self.card = self.card, card
        log.info(f"Panel selection {getattr(previous, 'card_id', None)} -> {getattr(card, 'card_id', None)}")
        # compose() mounts the current sub-view for the new card
        self._recompose_pending = True
        self.subviews.card_changed(previous, card)
        self.refresh(recompose=True)

    def _on_subview_transition(self, previous: SubView, current: SubView) -> None:
        """Unmount the old secondary editor and mount the new one."""
        if self.card is None or self._recompose_pending:
            return
        try:
            container = self.query_one(css(ids.SUBVIEW_PANEL))
        except NoMatches:
            log.debug("subview-panel not found")
            return
        container.remove_children()
        widget = compose_subview(current, self.card, self.sample_size)
        if widget is not None:
            container.mount(widget)
            self.subview_mounts += 1

    def sync_from_document(self) -> None:
        """Reflect model values changed elsewhere (e.g. by a broadcast)."""
        if self.card is None:
            return
        context = self.context
        try:
            self.query_one(css(CardConfig.appearance.widget_id), OptionGroup).set_selected(
                context.selected_key(CardField.APPEARANCE)
            )
            self.query_one(css(CardConfig.align.widget_id), OptionGroup).set_selected(
                context.selected_key(CardField.ALIGN)
            )
            title = self.query_one(css(CardContent.title.widget_id), Input)
            if (title.value or None) != self.card.content.title:
                title.value = self.card.content.title or ""
        except NoMatches:
            log.debug("panel controls not mounted yet")
