"""Single-card panel composition (Common + Chart sections)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.widget import Widget
from textual.widgets import Input, Label, Tab, Tabs, TextArea

from controller.selection import PanelMode
from controller.subview import SUPPORTED_SUBVIEWS, SubView
from model import CardConfig, CardContent, CardField, option_keys
from ui.widgets import EditPanel, OptionGroup, OptionCallback, SourcePanel
import ui.ids as ids

if TYPE_CHECKING:
    from controller.selection import SelectionContext
    from controller.subview import SubViewState
    from model import DashboardCard
    from model.ui_field import TextField


def compose_subview(view: SubView, card: DashboardCard, sample_size: int) -> Widget | None:
    """Build the widget for a sub-view; the reserved view renders nothing."""
    if view is SubView.COLLECTION:
        return SourcePanel(card, sample_size)
    if view is SubView.EDITOR:
        return EditPanel(card, sample_size)
    return None


def compose_text_input(text_field: TextField, value: str | None) -> Input | TextArea:
    """Multiline text fields get a TextArea, the rest a single-line Input."""
    if text_field.multiline:
        return TextArea(value or "", id=text_field.widget_id, soft_wrap=True)
    return Input(value=value or "", id=text_field.widget_id)


def compose_single_panel(
    context: SelectionContext,
    subviews: SubViewState,
    sample_size: int,
    on_choose: OptionCallback,
    on_apply_all: OptionCallback,
) -> ComposeResult:
    """Compose the panel for a selected card.

    Args:
        context: Selection context with the selected card
        subviews: Sub-view state deciding which secondary editor is mounted
        sample_size: Rows handed to the secondary editors
        on_choose: Callback for an ordinary option change
        on_apply_all: Callback for an "Apply to all" press

    Yields:
        Textual widgets for single-card mode
    """
    card = context.selection
    with Vertical(id=ids.COMMON_SECTION):
        yield Label("Common", classes="section-label")
        for name, text_field in CardContent.get_text_fields().items():
            yield Label(text_field.label)
            yield compose_text_input(text_field, getattr(card.content, name))
        yield OptionGroup(
            CardField.APPEARANCE,
            CardConfig.appearance.label,
            option_keys(CardField.APPEARANCE),
            PanelMode.SINGLE,
            on_choose,
            on_apply_all,
            selected_key=context.selected_key(CardField.APPEARANCE),
            group_id=CardConfig.appearance.widget_id,
        )
        yield OptionGroup(
            CardField.ALIGN,
            CardConfig.align.label,
            option_keys(CardField.ALIGN),
            PanelMode.SINGLE,
            on_choose,
            on_apply_all,
            selected_key=context.selected_key(CardField.ALIGN),
            group_id=CardConfig.align.widget_id,
        )
    with Vertical(id=ids.CHART_SECTION):
        yield Label("Chart", classes="section-label")
        yield Tabs(
            *(Tab(view.value, id=ids.subview_tab_id(view.value)) for view in SUPPORTED_SUBVIEWS),
            active=ids.subview_tab_id(subviews.current.value),
            id=ids.SUBVIEW_TABS,
        )
        with Container(id=ids.SUBVIEW_PANEL):
            widget = compose_subview(subviews.current, card, sample_size)
            if widget is not None:
                yield widget
