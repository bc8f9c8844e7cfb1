"""Tests for the document transaction primitive and structural operators."""

import pytest

from model import (
    CardAppearance,
    CardInsetLayout,
    DashboardCard,
    DashboardDocument,
    DashboardDocumentOperators,
)


class TestTransactions:
    """Test batching and observer notification."""

    def test_with_transaction_notifies_once(self, document, notifications):
        def edit():
            for card in document.cards:
                card.config.align = CardInsetLayout.Column
                card.content.title = "x"

        document.with_transaction(edit)
        assert len(notifications) == 1
        assert document.commits >= 1

    def test_nested_transactions_fold(self, document, notifications):
        with document.transaction():
            with document.transaction():
                document.cards[0].content.title = "inner"
            assert notifications == []
            assert document.in_transaction
        assert len(notifications) == 1
        assert not document.in_transaction

    def test_failed_batch_does_not_notify(self, document, notifications):
        with pytest.raises(RuntimeError):
            with document.transaction():
                raise RuntimeError("boom")
        assert notifications == []
        assert not document.in_transaction

    def test_unsubscribe(self, document):
        received = []
        unsubscribe = document.subscribe(received.append)
        unsubscribe()
        document.with_transaction(lambda: None)
        assert received == []

    def test_unsubscribe_twice_is_harmless(self, document):
        unsubscribe = document.subscribe(lambda doc: None)
        unsubscribe()
        unsubscribe()


class TestOperators:
    """Test the structural operators."""

    def test_add_card_uses_defaults(self):
        doc = DashboardDocument()
        doc.defaults.appearance = CardAppearance.Neumorphism
        card = DashboardDocumentOperators(doc).add_card(title="")
        assert card.config.appearance is CardAppearance.Neumorphism
        assert card.config.align is CardInsetLayout.Auto
        assert card.content.title is None
        # Defaults are copied, not shared
        doc.defaults.appearance = CardAppearance.Outline
        assert card.config.appearance is CardAppearance.Neumorphism

    def test_card_ids_are_unique(self, operators):
        a = operators.add_card()
        b = operators.add_card()
        assert a.card_id != b.card_id

    def test_display_name(self, document):
        assert document.cards[0].display_name == "Revenue"
        assert document.cards[2].display_name == document.cards[2].card_id

    def test_remove_card(self, document, operators):
        card = document.cards[1]
        assert operators.remove_card(card) is True
        assert card not in document
        assert operators.remove_card(card) is False

    def test_membership_is_by_identity(self, document):
        assert DashboardCard() not in document
        assert document.cards[0] in document

    def test_get_card(self, document):
        card = document.cards[2]
        assert document.get_card(card.card_id) is card
        assert document.get_card("missing") is None

    def test_move_card(self, document, operators):
        last = document.cards[-1]
        operators.move_card(last, 0)
        assert document.cards[0] is last

    def test_move_card_clamps_index(self, document, operators):
        first = document.cards[0]
        operators.move_card(first, 99)
        assert document.cards[-1] is first

    def test_move_foreign_card(self, operators):
        with pytest.raises(ValueError):
            operators.move_card(DashboardCard(), 0)

    def test_filters(self, document, operators):
        flt = operators.add_filter("region", "EMEA")
        assert str(flt) == "region: EMEA"
        assert operators.remove_filter(flt) is True
        assert document.filters == []
        assert operators.remove_filter(flt) is False
