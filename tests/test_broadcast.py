"""Tests for the broadcast mutator."""

import pytest

from controller import broadcast
from model import (
    CARD_ALIGN_TYPES,
    CardAppearance,
    CardField,
    CardInsetLayout,
    InvalidOptionError,
)


class TestBroadcast:
    """Test writing one config value to every card."""

    @pytest.mark.parametrize("value", CARD_ALIGN_TYPES)
    def test_align_reaches_every_card(self, document, value):
        broadcast(document, "align", value)
        assert all(c.config.align is value for c in document.cards)

    def test_appearance_leaves_align_alone(self, document):
        aligns = [c.config.align for c in document.cards]
        broadcast(document, CardField.APPEARANCE, CardAppearance.Neumorphism)
        assert all(c.config.appearance is CardAppearance.Neumorphism for c in document.cards)
        assert [c.config.align for c in document.cards] == aligns

    def test_content_untouched(self, document):
        titles = [c.content.title for c in document.cards]
        broadcast(document, "appearance", CardAppearance.Outline)
        assert [c.content.title for c in document.cards] == titles

    def test_idempotent(self, document):
        broadcast(document, "align", CardInsetLayout.Row)
        once = [c.config.snapshot() for c in document.cards]
        broadcast(document, "align", CardInsetLayout.Row)
        assert [c.config.snapshot() for c in document.cards] == once

    def test_single_notification(self, document, notifications):
        broadcast(document, "appearance", CardAppearance.Dropping)
        assert len(notifications) == 1
        assert notifications[0] is document

    def test_empty_document(self, empty_document):
        broadcast(empty_document, "align", CardInsetLayout.Column)
        assert empty_document.cards == []

    def test_point_in_time(self, document, operators):
        """Cards added after a broadcast keep their own defaults."""
        broadcast(document, "appearance", CardAppearance.Outline)
        new_card = operators.add_card(title="Later")
        assert new_card.config.appearance is document.defaults.appearance
        assert new_card.config.appearance is not CardAppearance.Outline

    def test_defaults_not_changed(self, document):
        broadcast(document, "align", CardInsetLayout.Row)
        assert document.defaults.align is CardInsetLayout.Auto


class TestBroadcastValidation:
    """Invalid input is rejected before any card changes."""

    def test_invalid_value_changes_nothing(self, document, notifications):
        before = [c.config.snapshot() for c in document.cards]
        with pytest.raises(InvalidOptionError):
            broadcast(document, "align", CardAppearance.Outline)
        assert [c.config.snapshot() for c in document.cards] == before
        assert notifications == []

    def test_raw_key_is_not_a_value(self, document):
        with pytest.raises(InvalidOptionError):
            broadcast(document, "align", "Row")

    def test_unknown_field(self, document):
        with pytest.raises(InvalidOptionError):
            broadcast(document, "title", CardAppearance.Outline)
