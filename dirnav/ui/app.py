from __future__ import annotations

import logging
from typing import override

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Static

from dirnav.config.schema import AppConfig
from dirnav.models.enums import Mode, RowStyle
from dirnav.services.fs import DEFAULT_FS, FileSystem
from dirnav.services.navigation import AppState, KeyPress, handle_key, navigation_options
from dirnav.services.window import visible_rows

logger = logging.getLogger(__name__)

CONTROLS_TEXT = "\n".join(
    [
        " <q> QUIT ",
        " <f> NEW FOLDER ",
        " <t> TOUCH FILE ",
        " <← → ↑ ↓> NAVIGATE ",
        " <d> DELETE ",
    ]
)

_ROW_STYLES: dict[RowStyle, str] = {
    RowStyle.NORMAL_FILE: "#b5bd68",
    RowStyle.NORMAL_DIRECTORY: "#8abeb7",
    RowStyle.SELECTED_FILE: "bold #b5bd68 on #373b41",
    RowStyle.SELECTED_DIRECTORY: "bold #8abeb7 on #373b41",
}

_POPUP_TITLES: dict[Mode, str] = {
    Mode.CREATING_FOLDER: "Enter Folder Name",
    Mode.CREATING_FILE: "Enter Filename",
    Mode.CONFIRM_DELETE: "",
}


class FileBrowserApp(App[None]):
    ENABLE_COMMAND_PALETTE = False
    CSS = """
    Screen {
        background: #1d1f21;
    }
    #app-grid {
        height: 100%;
        layers: base overlay;
        align: center middle;
    }
    #title-row, #listing, #controls {
        layer: base;
    }
    #title-row {
        height: 3;
        border: solid #81a2be;
        padding: 0 1;
        color: #c5c8c6;
    }
    #listing {
        height: 1fr;
        border: solid #373b41;
        padding: 0 1;
    }
    #controls {
        height: 1fr;
        border: solid #8abeb7;
        border-title-color: #8abeb7;
        padding: 0 1;
        color: #8abeb7;
        display: none;
    }
    #input-popup {
        layer: overlay;
        height: 3;
        margin: 0 3;
        border: solid #81a2be;
        background: #282a2e;
        color: #c5c8c6;
        display: none;
    }
    """

    def __init__(self, state: AppState, config: AppConfig, fs: FileSystem = DEFAULT_FS) -> None:
        super().__init__()
        self.state = state
        self.config = config
        self._fs = fs
        self._options = navigation_options(config.delete_binding, config.notice_timeout)

    @override
    def compose(self) -> ComposeResult:
        yield Container(
            Static(id="title-row"),
            Static(id="listing"),
            Static(CONTROLS_TEXT, id="controls"),
            Static(id="input-popup"),
            id="app-grid",
        )

    def on_mount(self) -> None:
        self.query_one("#controls", Static).border_title = "Controls"
        self.set_interval(self.config.poll_interval, self._refresh_all)
        self._refresh_all()
        # list height is only known once the first layout has run
        self.call_after_refresh(self._refresh_all)

    def on_resize(self) -> None:
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._render_title()
        self._render_main()
        self._render_popup()

    def _render_title(self) -> None:
        snapshot = self.state.snapshot
        title = Text(snapshot.display_name, style="bold #81a2be")
        if snapshot.skipped:
            title.append(f"  ({snapshot.skipped} unreadable)", style="#de935f")
        self.query_one("#title-row", Static).update(title)

    def _render_main(self) -> None:
        listing = self.query_one("#listing", Static)
        controls = self.query_one("#controls", Static)
        showing_controls = self.state.mode is Mode.CONTROLS
        listing.display = not showing_controls
        controls.display = showing_controls
        if showing_controls:
            return

        height = max(1, listing.content_size.height)
        snapshot = self.state.snapshot.with_viewport_rows(height)
        text = Text(no_wrap=True, overflow="ellipsis")
        for index, row in enumerate(visible_rows(snapshot, height, self._fs)):
            if index:
                text.append("\n")
            text.append(row.label, style=_ROW_STYLES[row.style])
        listing.update(text)

    def _render_popup(self) -> None:
        popup = self.query_one("#input-popup", Static)
        mode = self.state.mode
        if mode not in _POPUP_TITLES:
            popup.display = False
            return
        popup.display = True
        popup.border_title = _POPUP_TITLES[mode] or None
        if mode is Mode.CONFIRM_DELETE:
            popup.update("Are you sure? Y/N")
        else:
            popup.update(Text(self.state.pending_input))

    @override
    def on_key(self, event: events.Key) -> None:  # type: ignore[override]
        key = KeyPress(key=event.key, character=event.character)
        notice = handle_key(self.state, key, self._fs, self._options)
        if notice is not None:
            logger.debug("Showing notice: %s", notice.message)
            self.notify(notice.message, severity=notice.severity, timeout=notice.timeout)  # type: ignore[arg-type]
        if self.state.exit_requested:
            self.exit()
            return
        self._refresh_all()
