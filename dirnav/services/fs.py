from __future__ import annotations

import os
import stat as statmod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol


@dataclass(slots=True, frozen=True)
class StatResult:
    is_dir: bool
    is_symlink: bool = False


@dataclass(slots=True, frozen=True)
class DirEntry:
    path: str
    name: str
    stat: StatResult | None = None


class FileSystem(Protocol):
    def expanduser(self, path: str) -> str: ...

    def exists(self, path: str) -> bool: ...

    def canonicalize(self, path: str) -> str: ...

    def parent(self, path: str) -> str: ...

    def join(self, path: str, name: str) -> str: ...

    def name(self, path: str) -> str: ...

    def stat(self, path: str) -> StatResult: ...

    def scandir(self, path: str) -> Iterable[DirEntry]: ...

    def mkdir(self, path: str) -> None: ...

    def write_bytes(self, path: str, data: bytes) -> None: ...

    def remove_file(self, path: str) -> None: ...

    def remove_dir(self, path: str) -> None: ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str: ...


class OsFileSystem:
    def expanduser(self, path: str) -> str:
        return str(Path(path).expanduser())

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def canonicalize(self, path: str) -> str:
        return str(Path(path).resolve(strict=True))

    def parent(self, path: str) -> str:
        return str(Path(path).parent)

    def join(self, path: str, name: str) -> str:
        return str(Path(path) / name)

    def name(self, path: str) -> str:
        return Path(path).name

    def stat(self, path: str) -> StatResult:
        link_st = os.lstat(path)
        if not statmod.S_ISLNK(link_st.st_mode):
            return StatResult(is_dir=statmod.S_ISDIR(link_st.st_mode))
        try:
            target_st = os.stat(path)
        except FileNotFoundError:
            # dangling symlink: report the link itself
            return StatResult(is_dir=False, is_symlink=True)
        return StatResult(is_dir=statmod.S_ISDIR(target_st.st_mode), is_symlink=True)

    def scandir(self, path: str) -> Iterable[DirEntry]:
        with os.scandir(path) as entries:
            for e in entries:
                try:
                    sr = self.stat(e.path)
                except OSError:
                    sr = None
                yield DirEntry(path=e.path, name=e.name, stat=sr)

    def mkdir(self, path: str) -> None:
        os.mkdir(path)

    def write_bytes(self, path: str, data: bytes) -> None:
        Path(path).write_bytes(data)

    def remove_file(self, path: str) -> None:
        os.remove(path)

    def remove_dir(self, path: str) -> None:
        os.rmdir(path)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)


DEFAULT_FS: FileSystem = OsFileSystem()
