"""Dashboard card model: content, config and the card itself."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from model.enums import CardAppearance, CardInsetLayout
from model.ui_field import ChoiceField, ConfigBase, TextField

_card_ids = itertools.count(1)


def next_card_id() -> str:
    """Generate a process-unique card id."""
    return f"card-{next(_card_ids)}"


class CardContent(ConfigBase):
    """Per-card text shown in the card header."""

    title = TextField("card-title", "Title")
    text = TextField("card-description", "Description", multiline=True)


class CardConfig(ConfigBase):
    """Per-card appearance settings."""

    appearance = ChoiceField(
        enum=CardAppearance,
        default=CardAppearance.Transparent,
        widget_id="card-theme",
        label="Theme",
    )
    align = ChoiceField(
        enum=CardInsetLayout,
        default=CardInsetLayout.Auto,
        widget_id="card-layout",
        label="Layout",
    )

    def copy(self) -> CardConfig:
        return CardConfig(**self.snapshot())


@dataclass(eq=False)
class DashboardCard:
    """A single visual unit within a dashboard document.

    Identity is stable across edits: cards compare by identity, not by value.
    """

    content: CardContent = field(default_factory=CardContent)
    config: CardConfig = field(default_factory=CardConfig)
    card_id: str = field(default_factory=next_card_id)

    @property
    def display_name(self) -> str:
        """Label for card lists: the title, or the id when untitled."""
        return self.content.title or self.card_id
