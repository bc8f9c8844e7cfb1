"""Tests for CLI argument parsing and settings resolution."""

import sys
from unittest.mock import patch

import pytest

import settings as settings_module
from cli import build_demo_document, parse_args, resolve_settings
from model import CARD_THEMES, CardInsetLayout


@pytest.fixture
def no_default_settings(tmp_path, monkeypatch):
    """Point the default settings path at a file that does not exist."""
    monkeypatch.setattr(settings_module, "DEFAULT_SETTINGS_PATH", tmp_path / "absent.json")


class TestParseArgs:
    """Test parse_args() function."""

    def test_no_arguments(self):
        with patch.object(sys, "argv", ["dashpanel"]):
            args = parse_args()
        assert args.settings_path is None
        assert args.cards is None
        assert args.reset_subview is None
        assert args.sample_size is None

    def test_cards(self):
        args = parse_args(["--cards", "7"])
        assert args.cards == 7

    def test_negative_cards_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--cards", "-2"])

    def test_zero_sample_size_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--sample-size", "0"])

    def test_reset_subview_flags(self):
        assert parse_args(["--reset-subview"]).reset_subview is True
        assert parse_args(["--keep-subview"]).reset_subview is False

    def test_reset_flags_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["--reset-subview", "--keep-subview"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            parse_args(["--version"])
        assert exc.value.code == 0
        assert "dashpanel" in capsys.readouterr().out


class TestResolveSettings:
    """Settings file values with command-line overrides."""

    def test_defaults(self, no_default_settings):
        settings = resolve_settings(parse_args([]))
        assert settings.reset_subview_on_card_change is False
        assert settings.demo_cards == 4

    def test_flags_override_file(self, settings_file):
        path = settings_file('{"reset_subview_on_card_change": true, "demo_cards": 2}')
        settings = resolve_settings(parse_args(["--settings", str(path), "--keep-subview"]))
        assert settings.reset_subview_on_card_change is False
        assert settings.demo_cards == 2

    def test_invalid_file_exits(self, settings_file, capsys):
        path = settings_file('{"sample_size": "many"}')
        with pytest.raises(SystemExit) as exc:
            resolve_settings(parse_args(["--settings", str(path)]))
        assert exc.value.code == 1
        assert "Invalid settings" in capsys.readouterr().err

    def test_unknown_key_warns(self, settings_file, capsys):
        path = settings_file('{"colour": "red"}')
        resolve_settings(parse_args(["--settings", str(path)]))
        assert "Warning" in capsys.readouterr().err


class TestDemoDocument:
    def test_card_count(self):
        assert len(build_demo_document(5).cards) == 5

    def test_cycles_themes_and_layouts(self):
        doc = build_demo_document(len(CARD_THEMES))
        assert [c.config.appearance for c in doc.cards] == list(CARD_THEMES)
        assert doc.cards[1].config.align is CardInsetLayout.Column

    def test_has_filters(self):
        assert len(build_demo_document(0).filters) == 2
