"""Command-line interface for dashpanel."""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from model import (
    CARD_ALIGN_TYPES,
    CARD_THEMES,
    DashboardDocument,
    DashboardDocumentOperators,
)
from settings import PanelSettings, SettingsValidationError, load_settings

DASHPANEL_VERSION = "0.1.0"

DEMO_TITLES = ["Revenue", "Orders", "Top regions", "Returns", "Conversion", "Inventory"]


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    settings_path: Path | None
    cards: int | None
    reset_subview: bool | None
    sample_size: int | None


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dashpanel",
        description="Edit dashboard cards one at a time or all at once.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {DASHPANEL_VERSION}")
    parser.add_argument(
        "--settings",
        type=Path,
        metavar="PATH",
        help="Settings file (default: ~/.config/dashpanel/settings.json)",
    )
    parser.add_argument(
        "--cards",
        type=_positive_int,
        metavar="N",
        help="Number of cards in the demo document",
    )
    parser.add_argument(
        "--sample-size",
        type=_positive_int,
        metavar="N",
        help="Rows handed to the collection and editor views",
    )
    reset = parser.add_mutually_exclusive_group()
    reset.add_argument(
        "--reset-subview",
        dest="reset_subview",
        action="store_const",
        const=True,
        help="Return to the collection view whenever another card is selected",
    )
    reset.add_argument(
        "--keep-subview",
        dest="reset_subview",
        action="store_const",
        const=False,
        help="Keep the chosen view across card selections (default)",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments."""
    args = create_parser().parse_args(sys.argv[1:] if argv is None else argv)
    if args.sample_size == 0:
        create_parser().error("--sample-size must be at least 1")
    return ParsedArgs(
        settings_path=args.settings,
        cards=args.cards,
        reset_subview=args.reset_subview,
        sample_size=args.sample_size,
    )


def resolve_settings(args: ParsedArgs) -> PanelSettings:
    """Load the settings file and apply command-line overrides.

    Exits with status 1 if the settings file is unusable.
    """
    try:
        settings, warnings = load_settings(args.settings_path)
    except SettingsValidationError as e:
        print_error_box("Invalid settings", str(e))
        sys.exit(1)
    for warning in warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    return settings.with_overrides(
        reset_subview_on_card_change=args.reset_subview,
        sample_size=args.sample_size,
        demo_cards=args.cards,
    )


def build_demo_document(card_count: int) -> DashboardDocument:
    """A document with card_count cards cycling through themes and layouts."""
    document = DashboardDocument(title="Demo dashboard")
    operators = DashboardDocumentOperators(document)
    for i in range(card_count):
        card = operators.add_card(title=DEMO_TITLES[i % len(DEMO_TITLES)])
        card.config.appearance = CARD_THEMES[i % len(CARD_THEMES)]
        card.config.align = CARD_ALIGN_TYPES[i % len(CARD_ALIGN_TYPES)]
    operators.add_filter("region", "EMEA, APAC")
    operators.add_filter("date", "last 30 days")
    return document


def main() -> None:
    """Main entry point."""
    args = parse_args()
    settings = resolve_settings(args)
    document = build_demo_document(settings.demo_cards)

    # Imported late: importing app configures file logging
    from app import DashboardEditorApp

    DashboardEditorApp(document, settings=settings).run()


if __name__ == "__main__":
    main()
