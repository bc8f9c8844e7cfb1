"""Global panel composition (no card selected)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Label, Static

from controller.selection import PanelMode
from model import CardConfig, CardField, option_keys
from ui.widgets import FilterItem, OptionCallback, OptionGroup
import ui.ids as ids

if TYPE_CHECKING:
    from controller.selection import SelectionContext


def compose_global_panel(
    context: SelectionContext,
    on_choose: OptionCallback,
    on_apply_all: OptionCallback,
    on_filter_remove: Callable[[FilterItem], None],
) -> ComposeResult:
    """Compose the panel shown when no card is selected.

    Every option here applies to all cards; title and description are
    per-card and not offered.
    """
    with Vertical(id=ids.GLOBAL_SECTION):
        yield Label("Global", classes="section-label")
        yield OptionGroup(
            CardField.APPEARANCE,
            CardConfig.appearance.label,
            option_keys(CardField.APPEARANCE),
            PanelMode.GLOBAL,
            on_choose,
            on_apply_all,
            group_id=ids.GLOBAL_THEME,
        )
        yield OptionGroup(
            CardField.ALIGN,
            CardConfig.align.label,
            option_keys(CardField.ALIGN),
            PanelMode.GLOBAL,
            on_choose,
            on_apply_all,
            group_id=ids.GLOBAL_LAYOUT,
        )
    with Vertical(id=ids.FILTERS_SECTION):
        yield Label("Filters", classes="section-label")
        with VerticalScroll(id=ids.FILTER_LIST):
            if context.document.filters:
                for flt in context.document.filters:
                    yield FilterItem(flt, on_filter_remove)
            else:
                yield Static("No filters", classes="hint")
