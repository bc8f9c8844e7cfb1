"""Main TUI application for dashpanel."""

import logging
import os
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Button, Input, Label, ListView, Static, Tabs, TextArea

from controller import CardListEventsMixin, PanelEventsMixin, SubViewState
from model import DashboardCard, DashboardDocument, DashboardDocumentOperators
from settings import PanelSettings
from ui import CardListItem, DashboardPanel
from ui.ids import css
import ui.ids as ids

# Set up logging to XDG state directory
def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "dashpanel"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "dashpanel.log"

logging.basicConfig(
    filename=str(_get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
log = logging.getLogger(__name__)

APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class DashboardEditorApp(
    CardListEventsMixin,
    PanelEventsMixin,
    App,
):
    """TUI for editing dashboard cards and document-wide card settings."""

    TITLE = "Dashboard Panel"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("escape", "deselect", "All cards", show=True),
        Binding("ctrl+n", "add_card", "Add card", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        document: DashboardDocument,
        settings: PanelSettings | None = None,
        selection: DashboardCard | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or PanelSettings()
        self.document = document
        self.operators = DashboardDocumentOperators(document)
        # Selection lifetime belongs to the app; the panel only reads it
        self.selected_card = selection
        self.subviews = SubViewState(
            reset_on_card_change=self.settings.reset_subview_on_card_change,
        )
        self.document_updates = 0
        document.subscribe(self._on_document_changed)

    def compose(self) -> ComposeResult:
        log.info(f"compose() called with {len(self.document.cards)} cards")

        yield Horizontal(
            Label(self.document.title, id=ids.HEADER_TITLE),
            Button("Add card", id=ids.ADD_CARD_BTN, variant="success"),
            Button("All cards", id=ids.DESELECT_BTN, variant="default"),
            id=ids.HEADER_CONTAINER,
        )
        with Horizontal(id=ids.MAIN_CONTENT):
            yield ListView(*(CardListItem(card) for card in self.document.cards), id=ids.CARD_LIST)
            yield DashboardPanel(
                self.document,
                self.selected_card,
                self.subviews,
                self.settings.sample_size,
                on_choose=self._on_choose,
                on_apply_all=self._on_apply_all,
                on_filter_remove=self._remove_filter,
            )
        yield Static("", id=ids.STATUS_BAR)

    # =========================================================================
    # Status and Selection
    # =========================================================================

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            pass

    def _panel(self) -> DashboardPanel | None:
        try:
            return self.query_one(DashboardPanel)
        except NoMatches:
            return None

    def _select(self, card: DashboardCard | None) -> None:
        """Change the selection and hand it to the panel."""
        if card is not None and card not in self.document:
            log.debug(f"Ignoring selection of {card.card_id}: not in document")
            return
        self.selected_card = card
        panel = self._panel()
        if panel is not None:
            panel.set_selection(card)

    def _on_document_changed(self, document: DashboardDocument) -> None:
        """Observer: one call per committed transaction."""
        self.document_updates += 1
        if self.selected_card is not None and self.selected_card not in document:
            self._select(None)
        for item in self.query(CardListItem):
            item.refresh_label()
        panel = self._panel()
        if panel is not None:
            panel.sync_from_document()

    # =========================================================================
    # Mixin Handler Forwarding
    # =========================================================================
    # Textual's @on decorator only registers handlers defined on the class itself,
    # not on mixins. These forwarding handlers ensure events are routed to mixins.

    # Card list handlers (from CardListEventsMixin)
    @on(ListView.Selected, css(ids.CARD_LIST))
    def _on_card_list_selected(self, event: ListView.Selected) -> None:
        """Forward to mixin handler."""
        self.on_card_selected(event)

    @on(Button.Pressed, css(ids.ADD_CARD_BTN))
    def _on_add_card_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.action_add_card()

    @on(Button.Pressed, css(ids.DESELECT_BTN))
    def _on_deselect_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.action_deselect()

    # Panel handlers (from PanelEventsMixin)
    @on(Input.Changed, css(ids.CARD_TITLE))
    def _on_title_input(self, event: Input.Changed) -> None:
        """Forward to mixin handler."""
        self.on_title_changed(event)

    @on(TextArea.Changed, css(ids.CARD_DESCRIPTION))
    def _on_description_input(self, event: TextArea.Changed) -> None:
        """Forward to mixin handler."""
        self.on_description_changed(event)

    @on(Tabs.TabActivated, css(ids.SUBVIEW_TABS))
    def _on_subview_tab(self, event: Tabs.TabActivated) -> None:
        """Forward to mixin handler."""
        self.on_subview_tab_activated(event)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        """Called when the app is mounted."""
        # Focus the card list for keyboard navigation
        self.query_one(css(ids.CARD_LIST), ListView).focus()
