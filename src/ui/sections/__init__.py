"""Panel section compositions for the two panel modes."""

from ui.sections.global_mode import compose_global_panel
from ui.sections.single_mode import compose_single_panel, compose_subview

__all__ = [
    "compose_global_panel",
    "compose_single_panel",
    "compose_subview",
]
