"""Selection context: routes panel gestures to one card or to every card.

Two modes, driven entirely by the selection handed in by the app:

    Single(card)  - ordinary changes edit the selected card; the
                    "Apply to all" gesture broadcasts the same option.
    Global        - no card to write to; every option gesture broadcasts.

Both gestures resolve the option key through option_key_to_enum, so the
single-card write and the broadcast can never disagree about the value.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from controller.mutations import CONTENT_SETTERS, broadcast, set_config
from model.enums import CardField, as_card_field, option_key, option_key_to_enum

if TYPE_CHECKING:
    from model import CardConfig, DashboardCard, DashboardDocument

log = logging.getLogger(__name__)


class PanelMode(Enum):
    """Which editor the panel shows."""

    SINGLE = "single"
    GLOBAL = "global"


class PanelModeError(RuntimeError):
    """Raised when an edit is not available in the current panel mode."""


def is_global_mode(selection: DashboardCard | None) -> bool:
    return selection is None


def current_config_source(selection: DashboardCard | None, document: DashboardDocument) -> CardConfig:
    """Config the panel reflects: the selected card's, or the document defaults."""
    if selection is None:
        return document.defaults
    return selection.config


class SelectionContext:
    """Binds a document and the current selection for one panel render."""

    def __init__(self, document: DashboardDocument, selection: DashboardCard | None) -> None:
        self.document = document
        self.selection = selection

    @property
    def mode(self) -> PanelMode:
        return PanelMode.GLOBAL if is_global_mode(self.selection) else PanelMode.SINGLE

    @property
    def config_source(self) -> CardConfig:
        return current_config_source(self.selection, self.document)

    def selected_key(self, field: CardField | str) -> str | None:
        """Option key to show as selected, or None in global mode."""
        if self.selection is None:
            return None
        return option_key(getattr(self.selection.config, as_card_field(field).value))

    def _resolve(self, field: CardField | str, key: str | None) -> Enum | None:
        return option_key_to_enum(field, key)

    def choose(self, field: CardField | str, key: str | None) -> bool:
        """Ordinary option change. Returns True if anything was written."""
        value = self._resolve(field, key)
        if value is None:
            return False
        if self.selection is None:
            broadcast(self.document, field, value)
        else:
            set_config(self.document, self.selection, field, value)
        return True

    def apply_to_all(self, field: CardField | str, key: str | None) -> bool:
        """Explicit "Apply to all" gesture. Returns True if a broadcast ran."""
        value = self._resolve(field, key)
        if value is None:
            return False
        broadcast(self.document, field, value)
        return True

    def edit_content(self, field: str, value: str | None) -> None:
        """Edit title/text of the selected card. Not available in global mode."""
        if self.selection is None:
            raise PanelModeError("Card content is not editable without a selected card")
        try:
            setter = CONTENT_SETTERS[field]
        except KeyError:
            raise PanelModeError(f"Unknown content field: {field!r}") from None
        setter(self.document, self.selection, value)
