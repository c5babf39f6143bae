from __future__ import annotations

from dirnav.models.enums import RowStyle
from dirnav.models.listing import PARENT_ENTRY, DirectorySnapshot, ListingRow
from dirnav.services.fs import DEFAULT_FS, FileSystem

_STYLES: dict[tuple[bool, bool], RowStyle] = {
    (False, False): RowStyle.NORMAL_FILE,
    (False, True): RowStyle.NORMAL_DIRECTORY,
    (True, False): RowStyle.SELECTED_FILE,
    (True, True): RowStyle.SELECTED_DIRECTORY,
}


def row_style(selected: bool, is_dir: bool) -> RowStyle:
    return _STYLES[(selected, is_dir)]


def visible_rows(snapshot: DirectorySnapshot, viewport_rows: int, fs: FileSystem = DEFAULT_FS) -> list[ListingRow]:
    """Rows in ``[scroll_offset, scroll_offset + viewport_rows)``.

    Entries that vanished since the snapshot was loaded are left out. The
    snapshot is not modified.
    """
    rows: list[ListingRow] = []
    start = snapshot.scroll_offset
    end = min(len(snapshot.entries), start + max(0, viewport_rows))
    for index in range(start, end):
        entry = snapshot.entries[index]
        selected = index == snapshot.selected
        if index == 0:
            parent = fs.parent(snapshot.path)
            rows.append(ListingRow(path=parent, label=PARENT_ENTRY, style=row_style(selected, True)))
            continue
        try:
            is_dir = fs.stat(entry).is_dir
        except OSError:
            continue
        rows.append(ListingRow(path=entry, label=fs.name(entry) or entry, style=row_style(selected, is_dir)))
    return rows
