"""Controller layer: mediates between UI widgets and the card model.

This package contains:
- mutations: card setters and the broadcast mutator
- selection: single/global mode routing of panel gestures
- subview: the collection/editor sub-view state machine
- Event handler mixins for the app
"""

from controller.mutations import (
    broadcast,
    set_align,
    set_appearance,
    set_config,
    set_description,
    set_title,
)
from controller.selection import (
    PanelMode,
    PanelModeError,
    SelectionContext,
    current_config_source,
    is_global_mode,
)
from controller.subview import SUPPORTED_SUBVIEWS, SubView, SubViewState
from controller.cards import CardListEventsMixin
from controller.panel_events import PanelEventsMixin

__all__ = [
    # Mutations
    "broadcast",
    "set_align",
    "set_appearance",
    "set_config",
    "set_description",
    "set_title",
    # Selection
    "PanelMode",
    "PanelModeError",
    "SelectionContext",
    "current_config_source",
    "is_global_mode",
    # Sub-views
    "SUPPORTED_SUBVIEWS",
    "SubView",
    "SubViewState",
    # Event mixins
    "CardListEventsMixin",
    "PanelEventsMixin",
]
