from __future__ import annotations

from dataclasses import dataclass, field

from dirnav.models.enums import MutationErrorCode, PathErrorCode, RowStyle

PARENT_ENTRY = ".."
NO_NAME = "N/A"


@dataclass(slots=True)
class DirectorySnapshot:
    """One directory read plus the cursor and scroll window over it.

    ``entries[0]`` is always the synthetic parent row. The entry list is
    never patched after a mutation; a fresh snapshot is loaded instead.
    """

    path: str
    display_name: str
    entries: list[str] = field(default_factory=lambda: [PARENT_ENTRY])
    selected: int = 0
    scroll_offset: int = 0
    viewport_rows: int = 0
    skipped: int = 0

    def selected_entry(self) -> str:
        return self.entries[self.selected]

    @property
    def parent_selected(self) -> bool:
        return self.selected == 0

    def move_selection_up(self) -> None:
        if self.selected == 0:
            return
        self.selected -= 1
        if self.selected < self.scroll_offset:
            self.scroll_offset = self.selected

    def move_selection_down(self) -> None:
        if self.selected >= len(self.entries) - 1:
            return
        self.selected += 1
        rows = max(1, self.viewport_rows)
        if self.selected >= self.scroll_offset + rows:
            self.scroll_offset = self.selected - rows + 1

    def with_viewport_rows(self, rows: int) -> DirectorySnapshot:
        self.viewport_rows = max(0, rows)
        return self


@dataclass(slots=True, frozen=True)
class ListingRow:
    path: str
    label: str
    style: RowStyle

    @property
    def is_selected(self) -> bool:
        return self.style in (RowStyle.SELECTED_FILE, RowStyle.SELECTED_DIRECTORY)

    @property
    def is_dir(self) -> bool:
        return self.style in (RowStyle.NORMAL_DIRECTORY, RowStyle.SELECTED_DIRECTORY)


@dataclass(slots=True, frozen=True)
class PathError:
    code: PathErrorCode
    path: str
    message: str


@dataclass(slots=True, frozen=True)
class MutationError:
    code: MutationErrorCode
    path: str
    message: str
