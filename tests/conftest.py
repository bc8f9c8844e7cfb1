"""Shared fixtures for dashpanel tests."""

import pytest

from model import (
    CardAppearance,
    CardInsetLayout,
    DashboardDocument,
    DashboardDocumentOperators,
)


@pytest.fixture
def document():
    """Document with three cards in mixed themes and layouts."""
    doc = DashboardDocument(title="Sales")
    ops = DashboardDocumentOperators(doc)
    first = ops.add_card(title="Revenue")
    second = ops.add_card(title="Orders", text="Daily orders")
    third = ops.add_card()
    first.config.appearance = CardAppearance.Outline
    second.config.appearance = CardAppearance.Dropping
    second.config.align = CardInsetLayout.Row
    third.config.align = CardInsetLayout.Column
    return doc


@pytest.fixture
def empty_document():
    """Document with no cards."""
    return DashboardDocument()


@pytest.fixture
def operators(document):
    return DashboardDocumentOperators(document)


@pytest.fixture
def notifications(document):
    """List that receives one entry per committed transaction on `document`."""
    received = []
    document.subscribe(received.append)
    return received


@pytest.fixture
def settings_file(tmp_path):
    """Write a settings file and return its path."""
    def _write(content: str):
        path = tmp_path / "settings.json"
        path.write_text(content)
        return path
    return _write
