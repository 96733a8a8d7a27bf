"""관찰 가능한 파일 시스템 탐색기 API./Observable file system visitor API."""

from __future__ import annotations

from .config import CliSettings, VisitorConfig
from .events import EventHook
from .exceptions import (
    MissingFilterError,
    SearchCancelledError,
    TargetNotFoundError,
    VisitorError,
)
from .filters import FilterMode, files_only, folders_only, glob_filter, matches_glob, resolve_filter
from .models import (
    Entry,
    EntryFoundArgs,
    EntryKind,
    EntryPredicate,
    SearchFinishedArgs,
    SearchStartedArgs,
)
from .reader import DirectoryReader, LocalDirectoryReader, StaticDirectoryReader
from .visitor import FileSystemVisitor

__all__ = [
    "CliSettings",
    "DirectoryReader",
    "Entry",
    "EntryFoundArgs",
    "EntryKind",
    "EntryPredicate",
    "EventHook",
    "FileSystemVisitor",
    "FilterMode",
    "LocalDirectoryReader",
    "MissingFilterError",
    "SearchCancelledError",
    "SearchFinishedArgs",
    "SearchStartedArgs",
    "StaticDirectoryReader",
    "TargetNotFoundError",
    "VisitorConfig",
    "VisitorError",
    "files_only",
    "folders_only",
    "glob_filter",
    "matches_glob",
    "resolve_filter",
]
