"""ChoiceField and TextField descriptors for card config classes.

This module implements Python's descriptor protocol to create fields that:
1. Store card values (like regular instance attributes)
2. Carry UI metadata (widget IDs, labels)
3. Enforce the value contract of the field at assignment time

The Descriptor Pattern
----------------------
When a descriptor is assigned to a class attribute, Python intercepts
attribute access on instances and delegates to __get__/__set__. Accessed on
the class, the descriptor returns itself so its metadata stays reachable:

    class CardConfig(ConfigBase):
        appearance = ChoiceField(
            enum=CardAppearance,
            default=CardAppearance.Transparent,
            widget_id="card-theme",
            label="Theme",
        )

    config = CardConfig()
    config.appearance = CardAppearance.Outline   # Set value
    config.appearance                            # CardAppearance.Outline
    CardConfig.appearance.label                  # "Theme"
    config.appearance = "outline"                # InvalidOptionError

ChoiceField vs TextField
------------------------
- ChoiceField: a value drawn from a fixed Enum. Always defined; assigning a
  non-member is a programming error and raises InvalidOptionError.
- TextField: optional text. Empty input normalizes to None, so a stored
  value is either a non-empty string or None, never "".

Integration Points
------------------
1. controller.mutations: the only writer during panel interactions; wraps
   each assignment in the document transaction.
2. ui.sections: uses widget_id/label to build the panel controls.
3. model.enums.option_key_to_enum: maps widget option keys back to members
   before they ever reach a ChoiceField.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class InvalidOptionError(ValueError):
    """Raised when a value outside a field's allowed set is assigned."""


class ChoiceField:
    """Descriptor for an enumerated config value.

    When accessed on the class, returns the ChoiceField itself (with metadata).
    When accessed on an instance, returns the actual value.
    """

    def __init__(
        self,
        enum: type[Enum],
        default: Enum,
        widget_id: str,
        label: str,
    ):
        """Create a ChoiceField descriptor.

        Args:
            enum: The Enum whose members are the allowed values
            default: Value used until the field is first assigned
            widget_id: The Textual widget ID of this field's option group
            label: Short label shown above the option group
        """
        if not isinstance(default, enum):
            raise InvalidOptionError(f"Default {default!r} is not a {enum.__name__}")
        self.enum = enum
        self.default = default
        self.widget_id = widget_id
        self.label = label
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        """Called when the descriptor is assigned to a class attribute."""
        self.name = name
        # Register field with owner class
        if "_choice_fields" not in owner.__dict__:
            owner._choice_fields = {}
        owner._choice_fields[name] = self

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.__dict__.get(self.name, self.default)

    def __set__(self, obj: Any, value: Any) -> None:
        obj.__dict__[self.name] = self.validate(value)

    def validate(self, value: Any) -> Enum:
        """Return value if it is a member of this field's enum, else raise."""
        if not isinstance(value, self.enum):
            raise InvalidOptionError(
                f"{value!r} is not a valid {self.name} (expected {self.enum.__name__})"
            )
        return value


class TextField:
    """Descriptor for optional card text (never stored as an empty string)."""

    def __init__(self, widget_id: str, label: str, *, multiline: bool = False):
        self.widget_id = widget_id
        self.label = label
        self.multiline = multiline
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if "_text_fields" not in owner.__dict__:
            owner._text_fields = {}
        owner._text_fields[name] = self

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.__dict__.get(self.name)

    def __set__(self, obj: Any, value: str | None) -> None:
        obj.__dict__[self.name] = normalize_text(value)


def normalize_text(value: str | None) -> str | None:
    """Coerce empty text to None; keep any other string verbatim."""
    return value or None


class ConfigBase:
    """Base class for ChoiceField/TextField-based config classes."""

    _choice_fields: dict[str, ChoiceField]
    _text_fields: dict[str, TextField]

    def __init__(self, **kwargs: Any) -> None:
        """Initialize config with optional field values."""
        all_fields = self.get_all_fields()
        for name, value in kwargs.items():
            if name not in all_fields:
                raise TypeError(f"{type(self).__name__} has no field '{name}'")
            setattr(self, name, value)

    @classmethod
    def get_choice_fields(cls) -> dict[str, ChoiceField]:
        """Get all ChoiceField descriptors for this class."""
        return getattr(cls, "_choice_fields", {})

    @classmethod
    def get_text_fields(cls) -> dict[str, TextField]:
        """Get all TextField descriptors for this class."""
        return getattr(cls, "_text_fields", {})

    @classmethod
    def get_all_fields(cls) -> dict[str, ChoiceField | TextField]:
        return {**cls.get_choice_fields(), **cls.get_text_fields()}

    def snapshot(self) -> dict[str, Any]:
        """Current value of every field, keyed by field name."""
        return {name: getattr(self, name) for name in self.get_all_fields()}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={v!r}" for k, v in self.snapshot().items())
        return f"{type(self).__name__}({values})"
