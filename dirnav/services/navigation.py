from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from result import Err

from dirnav.models.enums import Mode
from dirnav.models.listing import DirectorySnapshot, MutationError
from dirnav.services.fs import DEFAULT_FS, FileSystem
from dirnav.services.listing import SnapshotResult, enter_selected, exit_directory, reload
from dirnav.services.mutations import MutationResult, create_folder, delete_entry, touch_file

logger = logging.getLogger(__name__)

DELETE_KEYS: dict[str, frozenset[str]] = {
    "d": frozenset({"d"}),
    "ctrl+delete": frozenset({"ctrl+delete"}),
    "both": frozenset({"d", "ctrl+delete"}),
}

_FAILURE_MESSAGES: dict[Mode, str] = {
    Mode.CREATING_FOLDER: "ERROR: Unable to create Folder",
    Mode.CREATING_FILE: "ERROR: Unable to create File",
    Mode.CONFIRM_DELETE: "ERROR: Unable to delete File/Folder",
}


@dataclass(slots=True, frozen=True)
class KeyPress:
    key: str
    character: str | None = None

    @property
    def is_printable(self) -> bool:
        return self.character is not None and len(self.character) == 1 and self.character.isprintable()


@dataclass(slots=True, frozen=True)
class Notice:
    message: str
    timeout: float = 1.0
    severity: str = "error"


@dataclass(slots=True, frozen=True)
class NavigationOptions:
    delete_keys: frozenset[str] = DELETE_KEYS["both"]
    notice_timeout: float = 1.0


@dataclass(slots=True)
class AppState:
    """Everything the event loop owns between two key presses."""

    snapshot: DirectorySnapshot
    mode: Mode = Mode.NAVIGATION
    pending_input: str = ""
    exit_requested: bool = False


@dataclass(slots=True)
class _Context:
    fs: FileSystem
    options: NavigationOptions
    notice: Notice | None = None


def _replace_snapshot(state: AppState, result: SnapshotResult) -> None:
    if isinstance(result, Err):
        error = result.unwrap_err()
        logger.debug("Navigation to %s abandoned: %s", error.path, error.message)
        return
    state.snapshot = result.unwrap()


def _reload(state: AppState, ctx: _Context) -> None:
    result = reload(state.snapshot, ctx.fs)
    if isinstance(result, Err):
        logger.warning("Reload of %s failed: %s", state.snapshot.path, result.unwrap_err().message)
        return
    state.snapshot = result.unwrap()


def _finish_mutation(state: AppState, ctx: _Context, result: MutationResult) -> None:
    if isinstance(result, Err):
        error: MutationError = result.unwrap_err()
        logger.warning("%s (%s): %s", error.code.value, error.path, error.message)
        ctx.notice = Notice(_FAILURE_MESSAGES[state.mode], timeout=ctx.options.notice_timeout)
    _reload(state, ctx)
    state.mode = Mode.NAVIGATION


def _handle_navigation(state: AppState, key: KeyPress, ctx: _Context) -> None:
    snapshot = state.snapshot
    if key.key == "up":
        snapshot.move_selection_up()
    elif key.key == "down":
        snapshot.move_selection_down()
    elif key.key == "right":
        _replace_snapshot(state, enter_selected(snapshot, ctx.fs))
    elif key.key == "left":
        _replace_snapshot(state, exit_directory(snapshot, ctx.fs))
    elif key.key == "space":
        state.mode = Mode.CONTROLS
    elif key.key == "f":
        state.pending_input = ""
        state.mode = Mode.CREATING_FOLDER
    elif key.key == "t":
        state.pending_input = ""
        state.mode = Mode.CREATING_FILE
    elif key.key in ctx.options.delete_keys:
        state.mode = Mode.CONFIRM_DELETE
    elif key.key == "q":
        logger.info("Exit requested")
        state.exit_requested = True


def _handle_controls(state: AppState, key: KeyPress, ctx: _Context) -> None:
    state.mode = Mode.NAVIGATION


def _handle_confirm_delete(state: AppState, key: KeyPress, ctx: _Context) -> None:
    if key.key != "y":
        state.mode = Mode.NAVIGATION
        return
    _finish_mutation(state, ctx, delete_entry(state.snapshot, ctx.fs))


def _handle_input(state: AppState, key: KeyPress, ctx: _Context) -> None:
    if key.key == "escape":
        state.pending_input = ""
        state.mode = Mode.NAVIGATION
        return
    if key.key == "enter":
        name = state.pending_input
        state.pending_input = ""
        if not name:
            state.mode = Mode.NAVIGATION
            return
        if state.mode is Mode.CREATING_FOLDER:
            result = create_folder(state.snapshot, name, ctx.fs)
        else:
            result = touch_file(state.snapshot, name, ctx.fs)
        _finish_mutation(state, ctx, result)
        return
    if key.key == "backspace":
        state.pending_input = state.pending_input[:-1]
        return
    if key.is_printable:
        assert key.character is not None
        state.pending_input += key.character


_HANDLERS: dict[Mode, Callable[[AppState, KeyPress, _Context], None]] = {
    Mode.NAVIGATION: _handle_navigation,
    Mode.CONTROLS: _handle_controls,
    Mode.CONFIRM_DELETE: _handle_confirm_delete,
    Mode.CREATING_FOLDER: _handle_input,
    Mode.CREATING_FILE: _handle_input,
}


def handle_key(
    state: AppState,
    key: KeyPress,
    fs: FileSystem = DEFAULT_FS,
    options: NavigationOptions | None = None,
) -> Notice | None:
    """Apply one key press to *state* in place.

    Returns a notice to show when a filesystem mutation failed. Mutations are
    always followed by a reload so the listing matches the disk.
    """
    ctx = _Context(fs=fs, options=options or NavigationOptions())
    previous = state.mode
    _HANDLERS[state.mode](state, key, ctx)
    if state.mode is not previous:
        logger.debug("Mode %s -> %s on %r", previous.value, state.mode.value, key.key)
    return ctx.notice


def navigation_options(binding: str, notice_timeout: float = 1.0) -> NavigationOptions:
    return NavigationOptions(
        delete_keys=DELETE_KEYS.get(binding, DELETE_KEYS["both"]),
        notice_timeout=notice_timeout,
    )

