"""디렉터리 읽기 도우미./Directory reading helpers."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Iterable

from .models import Entry, EntryKind


class DirectoryReader(ABC):
    """
    Contract for taking a snapshot of everything under a root folder.
    """

    @abstractmethod
    def exists(self, root_path: str) -> bool:
        """대상 폴더 존재 여부./Return True if the root folder exists."""

    @abstractmethod
    def scan(self, root_path: str) -> list[Entry]:
        """
        Return every file and folder under root_path, recursively.
        A failed scan raises; it never returns a partial list.
        """


class LocalDirectoryReader(DirectoryReader):
    """로컬 디스크를 순회합니다./Walk the local disk with os.scandir."""

    def exists(self, root_path: str) -> bool:
        return os.path.isdir(root_path)

    def scan(self, root_path: str) -> list[Entry]:
        folders: list[Entry] = []
        files: list[Entry] = []
        stack: list[str] = [root_path]
        while stack:
            current = stack.pop()
            with os.scandir(current) as iterator:
                children = sorted(iterator, key=lambda item: item.name)
            subfolders: list[str] = []
            for child in children:
                if child.is_dir(follow_symlinks=False):
                    folders.append(Entry(EntryKind.FOLDER, child.path))
                    subfolders.append(child.path)
                elif child.is_symlink() and child.is_dir():
                    # listed, never descended into
                    folders.append(Entry(EntryKind.FOLDER, child.path))
                else:
                    files.append(Entry(EntryKind.FILE, child.path))
            stack.extend(reversed(subfolders))
        return folders + files


class StaticDirectoryReader(DirectoryReader):
    """메모리 스냅샷 리더./Serve a fixed snapshot held in memory."""

    def __init__(self, root_path: str, entries: Iterable[Entry]) -> None:
        self.root_path = root_path
        self.entries = list(entries)
        self.scan_calls = 0

    def exists(self, root_path: str) -> bool:
        return root_path == self.root_path

    def scan(self, root_path: str) -> list[Entry]:
        if root_path != self.root_path:
            raise FileNotFoundError(f"missing root: {root_path}")
        self.scan_calls += 1
        return list(self.entries)
