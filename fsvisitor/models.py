"""탐색 데이터 모델 정의./Define traversal data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class EntryKind(str, Enum):
    """엔트리 종류./Kind of a discovered entry."""

    FILE = "file"
    FOLDER = "folder"

    @property
    def label(self) -> str:
        """출력용 이름을 반환합니다./Return display label."""

        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class Entry:
    """발견된 파일 또는 폴더./A discovered file or folder."""

    kind: EntryKind
    path: str

    @classmethod
    def file(cls, path: str) -> "Entry":
        return cls(EntryKind.FILE, path)

    @classmethod
    def folder(cls, path: str) -> "Entry":
        return cls(EntryKind.FOLDER, path)

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_folder(self) -> bool:
        return self.kind is EntryKind.FOLDER

    def __str__(self) -> str:
        return f"{self.kind.label}: {self.path}"


EntryPredicate = Callable[[Entry], bool]


@dataclass(slots=True)
class SearchStartedArgs:
    """검색 시작 알림./Payload for the search-started notification."""

    root_path: str
    cancel_requested: bool = False


@dataclass(slots=True)
class EntryFoundArgs:
    """엔트리 발견 알림./Payload for the four entry-found notifications.

    Observers may set ``cancel_requested`` or ``exclude_requested``; the
    visitor reads both flags back once every observer has returned.
    """

    entry: Entry
    cancel_requested: bool = False
    exclude_requested: bool = False

    @property
    def path(self) -> str:
        return self.entry.path

    @property
    def kind(self) -> EntryKind:
        return self.entry.kind


@dataclass(slots=True)
class SearchFinishedArgs:
    """검색 종료 알림./Payload for the search-finished notification."""

    root_path: str
    emitted: int
