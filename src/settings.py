"""User settings for dashpanel."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)


def _config_dir() -> Path:
    """Config directory using the XDG Base Directory spec."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    return Path(xdg_config) / "dashpanel"


DEFAULT_SETTINGS_PATH = _config_dir() / "settings.json"


class SettingsValidationError(Exception):
    """Raised when a settings file cannot be used."""


@dataclass(frozen=True)
class PanelSettings:
    """Behavior switches for the side panel."""

    # Return to the collection sub-view whenever the selected card changes
    reset_subview_on_card_change: bool = False
    # Rows handed to the collection/editor sub-views
    sample_size: int = 500
    # Cards in the generated demo document
    demo_cards: int = 4

    def with_overrides(self, **overrides: Any) -> PanelSettings:
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def validate_settings(data: Any, source: str = "settings") -> tuple[PanelSettings, list[str]]:
    """Build PanelSettings from decoded JSON.

    Raises SettingsValidationError for wrong types or out-of-range values.
    Returns the settings and a list of non-critical warnings.
    """
    if not isinstance(data, dict):
        raise SettingsValidationError(f"{source}: expected a JSON object")

    warnings = []
    known = {f.name: f for f in fields(PanelSettings)}
    kwargs = {}
    for key, value in data.items():
        if key not in known:
            warnings.append(f"{source}: unknown setting '{key}' ignored")
            continue
        expected = type(getattr(PanelSettings(), key))
        # bool is a subclass of int; reject it for int settings
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise SettingsValidationError(
                f"{source}: '{key}' must be {expected.__name__}, got {type(value).__name__}"
            )
        kwargs[key] = value

    if kwargs.get("sample_size", 1) < 1:
        raise SettingsValidationError(f"{source}: 'sample_size' must be at least 1")
    if kwargs.get("demo_cards", 0) < 0:
        raise SettingsValidationError(f"{source}: 'demo_cards' cannot be negative")

    return PanelSettings(**kwargs), warnings


def load_settings(path: Path | None = None) -> tuple[PanelSettings, list[str]]:
    """Load settings from path (default: the XDG config file).

    A missing default file yields default settings; a missing explicit path
    is an error.
    """
    explicit = path is not None
    path = path or DEFAULT_SETTINGS_PATH
    if not path.exists():
        if explicit:
            raise SettingsValidationError(f"Settings file not found: {path}")
        log.debug(f"No settings file at {path}, using defaults")
        return PanelSettings(), []

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise SettingsValidationError(f"{path}: invalid JSON ({e})") from e
    except OSError as e:
        raise SettingsValidationError(f"{path}: {e}") from e

    settings, warnings = validate_settings(data, source=str(path))
    log.info(f"Loaded settings from {path}")
    return settings, warnings
