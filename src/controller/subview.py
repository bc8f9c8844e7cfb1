"""Sub-view state: which secondary editor is mounted in single-card mode."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable

from model.ui_field import InvalidOptionError

if TYPE_CHECKING:
    from model import DashboardCard

log = logging.getLogger(__name__)


class SubView(Enum):
    """Secondary editors available under a selected card."""

    COLLECTION = "collection"
    EDITOR = "editor"
    LOA = "loa"  # reserved, renders nothing


# Tabs offered to the user, in order
SUPPORTED_SUBVIEWS: tuple[SubView, ...] = (SubView.COLLECTION, SubView.EDITOR)

TransitionListener = Callable[[SubView, SubView], None]


class SubViewState:
    """Two-tab state machine with a guarded self-transition.

    Selecting the already-active view is a no-op: listeners are not called,
    so the mounted sub-view is not torn down and rebuilt.
    """

    def __init__(
        self,
        initial: SubView = SubView.COLLECTION,
        reset_on_card_change: bool = False,
    ) -> None:
        if initial not in SUPPORTED_SUBVIEWS:
            raise InvalidOptionError(f"{initial.value} is not a selectable sub-view")
        self._current = initial
        self.reset_on_card_change = reset_on_card_change
        self.transitions = 0
        self._listeners: list[TransitionListener] = []

    @property
    def current(self) -> SubView:
        return self._current

    def subscribe(self, listener: TransitionListener) -> Callable[[], None]:
        """Register a (previous, current) listener; returns an unsubscribe function."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener) if listener in self._listeners else None

    def select(self, view: SubView | str) -> bool:
        """Switch to view. Returns False if it was already active."""
        if isinstance(view, str):
            try:
                view = SubView(view)
            except ValueError:
                raise InvalidOptionError(f"Unknown sub-view: {view!r}") from None
        if view not in SUPPORTED_SUBVIEWS:
            raise InvalidOptionError(f"{view.value} is not a selectable sub-view")
        if view is self._current:
            return False
        previous, self._current = self._current, view
        self.transitions += 1
        log.debug(f"Sub-view {previous.value} -> {view.value}")
        for listener in list(self._listeners):
            listener(previous, view)
        return True

    def card_changed(self, previous: DashboardCard | None, current: DashboardCard | None) -> bool:
        """React to a selection change. Resets to collection only when configured to.

        Returns True if the sub-view changed.
        """
        if not self.reset_on_card_change or previous is current:
            return False
        return self.select(SubView.COLLECTION)
