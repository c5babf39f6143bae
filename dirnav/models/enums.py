from __future__ import annotations

from enum import Enum


class Mode(str, Enum):
    NAVIGATION = "navigation"
    CONTROLS = "controls"
    CREATING_FOLDER = "creating_folder"
    CREATING_FILE = "creating_file"
    CONFIRM_DELETE = "confirm_delete"


class RowStyle(str, Enum):
    NORMAL_FILE = "normal_file"
    NORMAL_DIRECTORY = "normal_directory"
    SELECTED_FILE = "selected_file"
    SELECTED_DIRECTORY = "selected_directory"


class PathErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    NOT_DIRECTORY = "not_directory"
    UNREADABLE = "unreadable"
    NO_PARENT = "no_parent"


class MutationErrorCode(str, Enum):
    CREATE_FAILED = "create_failed"
    DELETE_FAILED = "delete_failed"
    INVALID_NAME = "invalid_name"
    PROTECTED_ENTRY = "protected_entry"
