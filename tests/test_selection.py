"""Tests for the selection context (single vs. global panel mode)."""

import pytest

from controller import (
    PanelMode,
    PanelModeError,
    SelectionContext,
    current_config_source,
    is_global_mode,
)
from model import CardAppearance, CardField, CardInsetLayout


class TestModes:
    """Test mode detection and config source."""

    def test_global_when_nothing_selected(self, document):
        assert is_global_mode(None)
        assert SelectionContext(document, None).mode is PanelMode.GLOBAL

    def test_single_when_card_selected(self, document):
        card = document.cards[0]
        assert not is_global_mode(card)
        assert SelectionContext(document, card).mode is PanelMode.SINGLE

    def test_config_source(self, document):
        card = document.cards[0]
        assert current_config_source(card, document) is card.config
        assert current_config_source(None, document) is document.defaults

    def test_selected_key(self, document):
        context = SelectionContext(document, document.cards[1])
        assert context.selected_key(CardField.APPEARANCE) == "dropping"
        assert context.selected_key("align") == "Row"
        assert SelectionContext(document, None).selected_key("align") is None


class TestSingleMode:
    """Ordinary changes edit one card; apply_to_all broadcasts."""

    def test_choose_writes_selected_card_only(self, document):
        target, *others = document.cards
        before = [c.config.snapshot() for c in others]
        context = SelectionContext(document, target)

        assert context.choose(CardField.ALIGN, "Row") is True

        assert target.config.align is CardInsetLayout.Row
        assert [c.config.snapshot() for c in others] == before

    def test_apply_to_all_uses_same_key(self, document):
        context = SelectionContext(document, document.cards[0])
        context.apply_to_all("appearance", "neumorphism")
        assert all(c.config.appearance is CardAppearance.Neumorphism for c in document.cards)

    def test_choose_and_apply_agree(self, document):
        """Both gestures resolve the same key to the same member."""
        card = document.cards[2]
        context = SelectionContext(document, card)
        context.choose("appearance", "outline")
        chosen = card.config.appearance
        context.apply_to_all("appearance", "outline")
        assert all(c.config.appearance is chosen for c in document.cards)

    def test_unknown_key_writes_nothing(self, document, notifications):
        context = SelectionContext(document, document.cards[0])
        assert context.choose("appearance", "glossy") is False
        assert context.apply_to_all("align", "Diagonal") is False
        assert notifications == []

    def test_edit_content(self, document):
        card = document.cards[0]
        context = SelectionContext(document, card)
        context.edit_content("title", "Gross revenue")
        context.edit_content("text", "")
        assert card.content.title == "Gross revenue"
        assert card.content.text is None

    def test_edit_unknown_content_field(self, document):
        context = SelectionContext(document, document.cards[0])
        with pytest.raises(PanelModeError):
            context.edit_content("subtitle", "x")


class TestGlobalMode:
    """Every option gesture broadcasts; content is not editable."""

    def test_choose_broadcasts(self, document, notifications):
        context = SelectionContext(document, None)
        assert context.choose(CardField.APPEARANCE, "transparent") is True
        assert all(c.config.appearance is CardAppearance.Transparent for c in document.cards)
        assert len(notifications) == 1

    def test_choose_does_not_write_defaults(self, document):
        """No hidden "selected card" write: the defaults are not a destination."""
        context = SelectionContext(document, None)
        context.choose("align", "Row")
        assert document.defaults.align is CardInsetLayout.Auto

    def test_content_not_editable(self, document):
        titles = [c.content.title for c in document.cards]
        with pytest.raises(PanelModeError):
            SelectionContext(document, None).edit_content("title", "Everything")
        assert [c.content.title for c in document.cards] == titles
