"""UI module containing widgets, styles, and panel compositions."""

from ui.widgets import (
    CardListItem,
    EditPanel,
    FilterItem,
    OptionGroup,
    SourcePanel,
    describe_card,
)
from ui.panel import DashboardPanel
from ui import ids

__all__ = [
    # Widgets
    "CardListItem",
    "EditPanel",
    "FilterItem",
    "OptionGroup",
    "SourcePanel",
    "describe_card",
    # Panel
    "DashboardPanel",
]
