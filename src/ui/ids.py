"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"


# Container IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
MAIN_CONTENT = "main-content"
CARD_LIST = "card-list"
PANEL = "dashboard-panel"
STATUS_BAR = "status-bar"

# Header buttons
ADD_CARD_BTN = "add-card-btn"
DESELECT_BTN = "deselect-btn"

# Single-card mode: Common section
COMMON_SECTION = "common-section"
CARD_TITLE = "card-title"  # matches CardContent.title.widget_id
CARD_DESCRIPTION = "card-description"  # matches CardContent.text.widget_id
CARD_THEME = "card-theme"  # matches CardConfig.appearance.widget_id
CARD_LAYOUT = "card-layout"  # matches CardConfig.align.widget_id

# Single-card mode: Chart section
CHART_SECTION = "chart-section"
SUBVIEW_TABS = "subview-tabs"
SUBVIEW_PANEL = "subview-panel"
SOURCE_PANEL = "source-panel"
EDIT_PANEL = "edit-panel"

# Global mode
GLOBAL_SECTION = "global-section"
GLOBAL_THEME = "global-theme"
GLOBAL_LAYOUT = "global-layout"
FILTERS_SECTION = "filters-section"
FILTER_LIST = "filter-list"


def radio_id(group_id: str, key: str) -> str:
    """ID of the radio button for an option key inside an option group."""
    return f"{group_id}-{key.lower()}"


def apply_all_id(group_id: str, key: str) -> str:
    """ID of the "Apply to all" button for an option key."""
    return f"{group_id}-{key.lower()}-all"


def subview_tab_id(view: str) -> str:
    return f"subview-{view}"
