"""Custom Textual widgets for dashpanel."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Label, ListItem, RadioButton, RadioSet, Static

from controller.selection import PanelMode
from model.enums import CARD_ALIGN_NAME, CardField

import ui.ids as ids

if TYPE_CHECKING:
    from model import DashboardCard, DashboardFilter

OptionCallback = Callable[[CardField, str], None]


class OptionGroup(Container):
    """A labelled group of options for one card config field.

    Single mode: a radio set (ordinary change edits the selected card) with
    an "Apply to all" button beside each option.
    Global mode: one button per option; pressing it applies to every card.
    """

    def __init__(
        self,
        field: CardField,
        label: str,
        keys: list[str],
        mode: PanelMode,
        on_choose: OptionCallback,
        on_apply_all: OptionCallback,
        selected_key: str | None = None,
        group_id: str = "",
    ) -> None:
        super().__init__(id=group_id or None, classes="option-group")
        self.field = field
        self._label = label
        self._keys = keys
        self._mode = mode
        self._on_choose = on_choose
        self._on_apply_all = on_apply_all
        self._selected_key = selected_key
        self._group_id = group_id

    def compose(self) -> ComposeResult:
        yield Label(self._label, classes="option-group-label")
        if self._mode is PanelMode.SINGLE:
            with Horizontal(classes="option-rows"):
                with RadioSet(classes="option-radio"):
                    for key in self._keys:
                        yield RadioButton(
                            key,
                            value=(key == self._selected_key),
                            name=key,
                            id=ids.radio_id(self._group_id, key),
                        )
                with Vertical(classes="apply-all-column"):
                    for key in self._keys:
                        yield Button(
                            "Apply to all",
                            name=key,
                            id=ids.apply_all_id(self._group_id, key),
                            classes="apply-all-btn",
                        )
        else:
            with Vertical(classes="option-rows"):
                for key in self._keys:
                    yield Button(
                        key,
                        name=key,
                        id=ids.radio_id(self._group_id, key),
                        classes="broadcast-btn",
                    )

    @property
    def selected_key(self) -> str | None:
        return self._selected_key

    def set_selected(self, key: str | None) -> None:
        """Reflect a model value without re-posting a change for an unchanged key."""
        if self._mode is not PanelMode.SINGLE or key == self._selected_key or key is None:
            return
        self._selected_key = key
        self.query_one(f"#{ids.radio_id(self._group_id, key)}", RadioButton).value = True

    @on(RadioSet.Changed)
    def on_radio_changed(self, event: RadioSet.Changed) -> None:
        event.stop()
        key = event.pressed.name
        # set_selected() already recorded the key: this is its echo, not a user choice
        if key == self._selected_key:
            return
        self._selected_key = key
        self._on_choose(self.field, key)

    @on(Button.Pressed, ".apply-all-btn")
    def on_apply_all_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_apply_all(self.field, event.button.name)

    @on(Button.Pressed, ".broadcast-btn")
    def on_broadcast_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_choose(self.field, event.button.name)


class SourcePanel(Static):
    """Collection view bound to one card."""

    def __init__(self, card: DashboardCard, sample_size: int) -> None:
        super().__init__(
            f"Collection for {card.display_name} ({sample_size} sample rows)",
            id=ids.SOURCE_PANEL,
        )
        self.card = card
        self.sample_size = sample_size


class EditPanel(Static):
    """Free-form editor bound to one card."""

    def __init__(self, card: DashboardCard, sample_size: int) -> None:
        super().__init__(
            f"Editor for {card.display_name} ({sample_size} sample rows)",
            id=ids.EDIT_PANEL,
        )
        self.card = card
        self.sample_size = sample_size


def describe_card(card: DashboardCard) -> str:
    """One-line card summary for the card list."""
    return (
        f"{card.display_name}  "
        f"[dim]{card.config.appearance.value} / {CARD_ALIGN_NAME[card.config.align]}[/dim]"
    )


class CardListItem(ListItem):
    """A row in the card list."""

    def __init__(self, card: DashboardCard) -> None:
        super().__init__(Label(describe_card(card), classes="card-label"))
        self.card = card

    def refresh_label(self) -> None:
        self.query_one(".card-label", Label).update(describe_card(self.card))


class FilterItem(Container):
    """A document filter with a remove button."""

    def __init__(self, flt: DashboardFilter, on_remove: Callable) -> None:
        super().__init__(classes="filter-item")
        self.flt = flt
        self._on_remove = on_remove

    def compose(self) -> ComposeResult:
        yield Label(str(self.flt), classes="filter-item-label")
        yield Button("x", classes="filter-remove-btn", variant="error")

    @on(Button.Pressed, ".filter-remove-btn")
    def on_remove_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_remove(self)
