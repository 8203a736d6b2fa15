"""Modal for picking an entry from command history."""

from __future__ import annotations

from typing import List

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, ListItem, ListView, Static


class HistoryPickerModal(ModalScreen):
    """Lists history entries in recency order; dismisses with the chosen one."""

    DEFAULT_CSS = """
    HistoryPickerModal {
        align: center middle;
    }

    HistoryPickerModal > Vertical {
        width: 80;
        height: auto;
        max-height: 30;
        background: $panel;
        border: thick $primary;
        padding: 1 2;
    }

    HistoryPickerModal Label {
        width: 100%;
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }

    HistoryPickerModal Static {
        width: 100%;
        color: $text-muted;
        margin-bottom: 1;
    }

    HistoryPickerModal ListView {
        width: 100%;
        height: 15;
        border: round $primary;
        margin-bottom: 1;
    }

    HistoryPickerModal Button {
        width: 100%;
    }
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, entries: List[str], *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Shown as given; re-sorting would lose recency order.
        self.entries = list(entries)

    def compose(self) -> ComposeResult:
        """Compose the modal layout."""
        with Vertical():
            yield Label("Command History")
            yield Static(f"{len(self.entries)} entries, most recent first")
            yield ListView(id="history-list")
            yield Button("Cancel", variant="default", id="cancel-button")

    def on_mount(self) -> None:
        """Populate the list when mounted."""
        list_view = self.query_one("#history-list", ListView)
        if not self.entries:
            list_view.append(ListItem(Label("[dim]No history yet[/dim]")))
            return
        for entry in self.entries:
            list_view.append(ListItem(Label(entry, markup=False)))
        list_view.focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Dismiss with the selected entry."""
        index = event.list_view.index
        if self.entries and index is not None and index < len(self.entries):
            self.dismiss(self.entries[index])

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cancel-button":
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
