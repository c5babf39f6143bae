from __future__ import annotations

import logging

from result import Err, Ok, Result

from dirnav.models.enums import PathErrorCode
from dirnav.models.listing import NO_NAME, PARENT_ENTRY, DirectorySnapshot, PathError
from dirnav.services.fs import DEFAULT_FS, FileSystem

logger = logging.getLogger(__name__)

SnapshotResult = Result[DirectorySnapshot, PathError]


def resolve_directory(path: str, fs: FileSystem = DEFAULT_FS) -> str | PathError:
    """Canonicalize *path* and check it names a directory.

    Returns the canonical path, or a ``PathError`` on failure.
    """
    expanded = fs.expanduser(path)
    try:
        canonical = fs.canonicalize(expanded)
    except OSError as exc:
        return PathError(
            code=PathErrorCode.NOT_FOUND,
            path=expanded,
            message=f"Path does not exist: {exc}",
        )

    try:
        st = fs.stat(canonical)
    except OSError as exc:
        return PathError(
            code=PathErrorCode.UNREADABLE,
            path=canonical,
            message=f"Cannot stat path: {exc}",
        )
    if not st.is_dir:
        return PathError(
            code=PathErrorCode.NOT_DIRECTORY,
            path=canonical,
            message="Path is not a directory",
        )
    return canonical


def load_snapshot(path: str, fs: FileSystem = DEFAULT_FS) -> SnapshotResult:
    """Read one level of *path* into a fresh snapshot.

    Children whose stat fails are dropped and counted in ``skipped``; only a
    failure to read the directory itself is an error.
    """
    resolved = resolve_directory(path, fs)
    if isinstance(resolved, PathError):
        return Err(resolved)

    try:
        listing = list(fs.scandir(resolved))
    except OSError as exc:
        return Err(
            PathError(
                code=PathErrorCode.UNREADABLE,
                path=resolved,
                message=f"Cannot read directory: {exc}",
            )
        )

    entries = [PARENT_ENTRY]
    skipped = 0
    for entry in listing:
        if entry.stat is None:
            skipped += 1
            logger.debug("Skipping unreadable entry %s", entry.path)
            continue
        entries.append(entry.path)

    snapshot = DirectorySnapshot(
        path=resolved,
        display_name=fs.name(resolved) or NO_NAME,
        entries=entries,
        skipped=skipped,
    )
    logger.info("Loaded %s (%d entries, %d skipped)", resolved, len(entries) - 1, skipped)
    return Ok(snapshot)


def reload(snapshot: DirectorySnapshot, fs: FileSystem = DEFAULT_FS) -> SnapshotResult:
    return load_snapshot(snapshot.path, fs)


def exit_directory(snapshot: DirectorySnapshot, fs: FileSystem = DEFAULT_FS) -> SnapshotResult:
    parent = fs.parent(snapshot.path)
    if parent == snapshot.path:
        return Err(
            PathError(
                code=PathErrorCode.NO_PARENT,
                path=snapshot.path,
                message="Already at filesystem root",
            )
        )
    return load_snapshot(parent, fs)


def enter_selected(snapshot: DirectorySnapshot, fs: FileSystem = DEFAULT_FS) -> SnapshotResult:
    """Open the selected entry; the parent row behaves like ``exit_directory``."""
    if snapshot.parent_selected:
        return exit_directory(snapshot, fs)

    target = snapshot.selected_entry()
    if not is_selected_directory(snapshot, fs):
        return Err(
            PathError(
                code=PathErrorCode.NOT_DIRECTORY,
                path=target,
                message="Selected entry is not a directory",
            )
        )
    return load_snapshot(target, fs)


def is_selected_directory(snapshot: DirectorySnapshot, fs: FileSystem = DEFAULT_FS) -> bool:
    if snapshot.parent_selected:
        return True
    try:
        return fs.stat(snapshot.selected_entry()).is_dir
    except OSError:
        return False
