"""DashboardDocument: the ordered card sequence plus shared defaults.

Field writes made during a panel interaction are batched with
with_transaction()/transaction(). Observers registered with subscribe()
are notified once when the outermost batch commits, so a broadcast across
many cards produces a single update rather than one per card.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator

from model.card import CardConfig, DashboardCard

log = logging.getLogger(__name__)

Observer = Callable[["DashboardDocument"], None]


@dataclass
class DashboardFilter:
    """A document-wide filter shown in the global panel."""

    field_name: str
    description: str = ""

    def __str__(self) -> str:
        if self.description:
            return f"{self.field_name}: {self.description}"
        return self.field_name


@dataclass(eq=False)
class DashboardDocument:
    """An ordered collection of cards; order drives layout."""

    title: str = "Untitled dashboard"
    cards: list[DashboardCard] = field(default_factory=list)
    filters: list[DashboardFilter] = field(default_factory=list)
    # Config new cards are created with
    defaults: CardConfig = field(default_factory=CardConfig)

    _observers: list[Observer] = field(default_factory=list, init=False, repr=False)
    _depth: int = field(default=0, init=False, repr=False)
    _commits: int = field(default=0, init=False, repr=False)

    def __contains__(self, card: object) -> bool:
        return any(c is card for c in self.cards)

    def get_card(self, card_id: str) -> DashboardCard | None:
        """Get a card by id."""
        for card in self.cards:
            if card.card_id == card_id:
                return card
        return None

    # =========================================================================
    # Transactions
    # =========================================================================

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

    @property
    def commits(self) -> int:
        """Number of committed outermost transactions."""
        return self._commits

    @contextmanager
    def transaction(self) -> Iterator[DashboardDocument]:
        """Batch field writes; observers see one update when the outermost batch ends.

        If the batch raises, observers are not notified and the error propagates.
        """
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1
        # Only reached when the body completed without raising
        if self._depth == 0:
            self._commits += 1
            self._notify()

    def with_transaction(self, fn: Callable[[], None]) -> None:
        """Run fn inside a single transaction."""
        with self.transaction():
            fn()

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer; returns a function that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)
