from __future__ import annotations

import errno
from dataclasses import dataclass
from pathlib import PurePosixPath

from dirnav.services.fs import DirEntry, StatResult


@dataclass
class _MockEntry:
    is_dir: bool
    content: str = ""
    readable: bool = True
    link_to: str | None = None


class MemoryFileSystem:
    def __init__(self) -> None:
        self._entries: dict[str, _MockEntry] = {"/": _MockEntry(is_dir=True)}
        self._read_only: set[str] = set()
        self.mutations: list[tuple[str, str]] = []

    def add_dir(self, path: str) -> MemoryFileSystem:
        key = self._normalize(path)
        self._add_parents(key)
        self._entries[key] = _MockEntry(is_dir=True)
        return self

    def add_file(self, path: str, content: str = "") -> MemoryFileSystem:
        key = self._normalize(path)
        self._add_parents(key)
        self._entries[key] = _MockEntry(is_dir=False, content=content)
        return self

    def add_unreadable(self, path: str, is_dir: bool = False) -> MemoryFileSystem:
        key = self._normalize(path)
        self._add_parents(key)
        self._entries[key] = _MockEntry(is_dir=is_dir, readable=False)
        return self

    def add_symlink(self, path: str, target: str) -> MemoryFileSystem:
        key = self._normalize(path)
        self._add_parents(key)
        self._entries[key] = _MockEntry(is_dir=False, link_to=self._normalize(target))
        return self

    def make_read_only(self, path: str) -> MemoryFileSystem:
        self._read_only.add(self._normalize(path))
        return self

    def forget(self, path: str) -> None:
        """Drop an entry behind the browser's back."""
        self._entries.pop(self._normalize(path), None)

    def expanduser(self, path: str) -> str:
        return path.replace("~", "/mock/home")

    def exists(self, path: str) -> bool:
        return self._normalize(path) in self._entries

    def canonicalize(self, path: str) -> str:
        key = self._normalize(path)
        if key not in self._entries:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)
        return key

    def parent(self, path: str) -> str:
        return str(PurePosixPath(self._normalize(path)).parent)

    def join(self, path: str, name: str) -> str:
        return str(PurePosixPath(self._normalize(path)) / name)

    def name(self, path: str) -> str:
        return PurePosixPath(self._normalize(path)).name

    def stat(self, path: str) -> StatResult:
        entry = self._get(path)
        if not entry.readable:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        return self._stat_entry(entry)

    def scandir(self, path: str) -> list[DirEntry]:
        key = self._normalize(path)
        entry = self._get(key)
        if not entry.readable:
            raise PermissionError(errno.EACCES, "Permission denied", key)
        if not entry.is_dir:
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", key)
        result: list[DirEntry] = []
        for child_path in self._children(key):
            child = self._entries[child_path]
            st = self._stat_entry(child) if child.readable else None
            result.append(DirEntry(path=child_path, name=self.name(child_path), stat=st))
        return result

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return self._get(path).content

    def mkdir(self, path: str) -> None:
        key = self._check_writable(path)
        if key in self._entries:
            raise FileExistsError(errno.EEXIST, "File exists", key)
        self.mutations.append(("mkdir", key))
        self._entries[key] = _MockEntry(is_dir=True)

    def write_bytes(self, path: str, data: bytes) -> None:
        key = self._check_writable(path)
        self.mutations.append(("write", key))
        self._entries[key] = _MockEntry(is_dir=False, content=data.decode())

    def remove_file(self, path: str) -> None:
        key = self._check_writable(path)
        entry = self._get(key)
        if entry.is_dir:
            raise IsADirectoryError(errno.EISDIR, "Is a directory", key)
        self.mutations.append(("remove_file", key))
        del self._entries[key]

    def remove_dir(self, path: str) -> None:
        key = self._check_writable(path)
        entry = self._get(key)
        if not entry.is_dir:
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", key)
        if self._children(key):
            raise OSError(errno.ENOTEMPTY, "Directory not empty", key)
        self.mutations.append(("remove_dir", key))
        del self._entries[key]

    def _get(self, path: str) -> _MockEntry:
        key = self._normalize(path)
        entry = self._entries.get(key)
        if entry is None:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)
        return entry

    def _stat_entry(self, entry: _MockEntry) -> StatResult:
        if entry.link_to is None:
            return StatResult(is_dir=entry.is_dir)
        target = self._entries.get(entry.link_to)
        return StatResult(is_dir=target is not None and target.is_dir, is_symlink=True)

    def _check_writable(self, path: str) -> str:
        key = self._normalize(path)
        parent = self.parent(key)
        parent_entry = self._get(parent)
        if not parent_entry.is_dir:
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", parent)
        if parent in self._read_only:
            raise PermissionError(errno.EACCES, "Permission denied", key)
        return key

    def _children(self, key: str) -> list[str]:
        return [p for p in self._entries if p != key and str(PurePosixPath(p).parent) == key]

    def _add_parents(self, key: str) -> None:
        for parent in reversed(PurePosixPath(key).parents):
            pk = str(parent)
            if pk not in self._entries:
                self._entries[pk] = _MockEntry(is_dir=True)

    @staticmethod
    def _normalize(path: str) -> str:
        return path.rstrip("/") or "/"
