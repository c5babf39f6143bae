from __future__ import annotations

import logging
import os

from result import Err, Ok, Result

from dirnav.models.enums import MutationErrorCode
from dirnav.models.listing import PARENT_ENTRY, DirectorySnapshot, MutationError
from dirnav.services.fs import DEFAULT_FS, FileSystem

logger = logging.getLogger(__name__)

MutationResult = Result[str, MutationError]

_SEPARATORS = frozenset({"/", os.sep})


def _invalid_name(name: str) -> bool:
    return name in {".", PARENT_ENTRY} or any(sep in name for sep in _SEPARATORS)


def _child_path(snapshot: DirectorySnapshot, name: str, fs: FileSystem) -> str | MutationError:
    if _invalid_name(name):
        return MutationError(
            code=MutationErrorCode.INVALID_NAME,
            path=snapshot.path,
            message=f"Invalid name: {name!r}",
        )
    return fs.join(snapshot.path, name)


def create_folder(snapshot: DirectorySnapshot, name: str, fs: FileSystem = DEFAULT_FS) -> MutationResult:
    target = _child_path(snapshot, name, fs)
    if isinstance(target, MutationError):
        return Err(target)
    try:
        fs.mkdir(target)
    except OSError as exc:
        logger.warning("Failed to create folder %s: %s", target, exc)
        return Err(
            MutationError(
                code=MutationErrorCode.CREATE_FAILED,
                path=target,
                message=f"Cannot create folder: {exc}",
            )
        )
    logger.info("Created folder %s", target)
    return Ok(target)


def touch_file(snapshot: DirectorySnapshot, name: str, fs: FileSystem = DEFAULT_FS) -> MutationResult:
    """Create an empty file; an existing entry of that name is left untouched."""
    target = _child_path(snapshot, name, fs)
    if isinstance(target, MutationError):
        return Err(target)
    if fs.exists(target):
        logger.debug("File %s already exists", target)
        return Ok(target)
    try:
        fs.write_bytes(target, b"")
    except OSError as exc:
        logger.warning("Failed to create file %s: %s", target, exc)
        return Err(
            MutationError(
                code=MutationErrorCode.CREATE_FAILED,
                path=target,
                message=f"Cannot create file: {exc}",
            )
        )
    logger.info("Created file %s", target)
    return Ok(target)


def delete_entry(snapshot: DirectorySnapshot, fs: FileSystem = DEFAULT_FS) -> MutationResult:
    """Remove the selected entry. Directories must be empty; symlinks are unlinked."""
    if snapshot.parent_selected:
        return Err(
            MutationError(
                code=MutationErrorCode.PROTECTED_ENTRY,
                path=snapshot.path,
                message="The parent entry cannot be deleted",
            )
        )

    target = snapshot.selected_entry()
    try:
        st = fs.stat(target)
        if st.is_dir and not st.is_symlink:
            fs.remove_dir(target)
        else:
            fs.remove_file(target)
    except OSError as exc:
        logger.warning("Failed to delete %s: %s", target, exc)
        return Err(
            MutationError(
                code=MutationErrorCode.DELETE_FAILED,
                path=target,
                message=f"Cannot delete: {exc}",
            )
        )
    logger.info("Deleted %s", target)
    return Ok(target)
