"""검색 조건 생성기./Build acceptance predicates for search."""

from __future__ import annotations

import fnmatch
from enum import Enum

from .models import Entry, EntryKind, EntryPredicate

MATCH_ALL = "*"


class FilterMode(str, Enum):
    """CLI 필터 모드./Filter modes offered by the CLI."""

    GLOB_PATTERN = "glob-pattern"
    FOLDERS_ONLY = "folders-only"
    FILES_ONLY = "files-only"

    @classmethod
    def parse(cls, text: str) -> "FilterMode":
        """문자열에서 모드를 생성합니다./Build a mode from user text.

        Accepts the dashed values as well as ``GlobPattern`` style names.
        """

        key = text.strip().replace("-", "").replace("_", "").lower()
        for mode in cls:
            if mode.value.replace("-", "") == key:
                return mode
        raise ValueError(f"unknown filter mode: {text!r}")


def matches_glob(path: str, pattern: str) -> bool:
    """경로 전체가 패턴과 일치하는지 확인./Return True if the whole path matches.

    Only ``*`` and ``?`` are wildcards; brackets match themselves.
    """

    return fnmatch.fnmatchcase(path, pattern.replace("[", "[[]"))


def glob_filter(pattern: str = MATCH_ALL) -> EntryPredicate:
    def _accept(entry: Entry) -> bool:
        return matches_glob(entry.path, pattern)

    return _accept


def folders_only(pattern: str = MATCH_ALL) -> EntryPredicate:
    def _accept(entry: Entry) -> bool:
        return entry.kind is EntryKind.FOLDER and matches_glob(entry.path, pattern)

    return _accept


def files_only(pattern: str = MATCH_ALL) -> EntryPredicate:
    def _accept(entry: Entry) -> bool:
        return entry.kind is EntryKind.FILE and matches_glob(entry.path, pattern)

    return _accept


def resolve_filter(mode: FilterMode | str, pattern: str = MATCH_ALL) -> EntryPredicate:
    """모드와 패턴으로 조건을 만듭니다./Resolve the predicate for a filter mode."""

    if not isinstance(mode, FilterMode):
        mode = FilterMode.parse(mode)
    if mode is FilterMode.FOLDERS_ONLY:
        return folders_only(pattern)
    if mode is FilterMode.FILES_ONLY:
        return files_only(pattern)
    return glob_filter(pattern)
