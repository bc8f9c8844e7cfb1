"""Model classes for dashpanel."""

from model.ui_field import ChoiceField, ConfigBase, InvalidOptionError, TextField
from model.enums import (
    CARD_ALIGN_NAME,
    CARD_ALIGN_TYPES,
    CARD_THEMES,
    CardAppearance,
    CardField,
    CardInsetLayout,
    option_key,
    option_key_to_enum,
    option_keys,
)
from model.card import CardConfig, CardContent, DashboardCard
from model.document import DashboardDocument, DashboardFilter
from model.operators import DashboardDocumentOperators

__all__ = [
    # Fields
    "ChoiceField",
    "ConfigBase",
    "InvalidOptionError",
    "TextField",
    # Enumerations
    "CARD_ALIGN_NAME",
    "CARD_ALIGN_TYPES",
    "CARD_THEMES",
    "CardAppearance",
    "CardField",
    "CardInsetLayout",
    "option_key",
    "option_key_to_enum",
    "option_keys",
    # Cards and documents
    "CardConfig",
    "CardContent",
    "DashboardCard",
    "DashboardDocument",
    "DashboardDocumentOperators",
    "DashboardFilter",
]
