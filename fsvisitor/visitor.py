"""파일 시스템 탐색 엔진./File system traversal engine.

``search`` runs in two phases. Phase 1 is eager: every scanned entry is
announced to the ``*_found`` observers, which may cancel the search or exclude
the entry. Phase 2 is lazy: each surviving candidate is checked against the
predicate only when the caller pulls the next result, and accepted ones are
announced to the ``filtered_*_found`` observers before being yielded.
"""

from __future__ import annotations

import logging
from typing import Iterator

from .config import VisitorConfig
from .events import EventHook
from .exceptions import MissingFilterError, SearchCancelledError, TargetNotFoundError
from .logging import EVENT_LOGGER
from .models import (
    Entry,
    EntryFoundArgs,
    EntryKind,
    EntryPredicate,
    SearchFinishedArgs,
    SearchStartedArgs,
)
from .reader import DirectoryReader, LocalDirectoryReader

__all__ = ["FileSystemVisitor"]

logger = logging.getLogger(__name__)
event_logger = logging.getLogger(EVENT_LOGGER)


class FileSystemVisitor:
    """대상 폴더의 엔트리를 알림과 함께 탐색합니다./Enumerate a folder with observer notifications."""

    def __init__(self, config: VisitorConfig, reader: DirectoryReader | None = None) -> None:
        self.config = config
        self.reader = reader if reader is not None else LocalDirectoryReader()
        self.search_started: EventHook[SearchStartedArgs] = EventHook("SearchStarted")
        self.search_finished: EventHook[SearchFinishedArgs] = EventHook("SearchFinished")
        self.file_found: EventHook[EntryFoundArgs] = EventHook("FileFound")
        self.folder_found: EventHook[EntryFoundArgs] = EventHook("FolderFound")
        self.filtered_file_found: EventHook[EntryFoundArgs] = EventHook("FilteredFileFound")
        self.filtered_folder_found: EventHook[EntryFoundArgs] = EventHook("FilteredFolderFound")

    @property
    def root_path(self) -> str:
        return self.config.root_path

    def list_all(self) -> list[Entry]:
        """필터 없이 모든 엔트리를 반환./Return the raw scan, unfiltered and unannounced."""

        self._verify_target_exists()
        return self._read_entries()

    def search(self) -> Iterator[Entry]:
        """알림과 조건을 거친 엔트리를 지연 생성./Search lazily through both notification phases.

        Cancellation during start or phase 1 raises from this call; during
        phase 2 it raises from the iterator at the cancelled entry.
        """

        predicate = self.config.predicate
        if predicate is None:
            raise MissingFilterError()
        self._verify_target_exists()
        self._fire_search_started()
        entries = self._read_entries()
        candidates: list[Entry] = []
        for entry in entries:
            if not self._fire_found(entry).exclude_requested:
                candidates.append(entry)
        logger.debug(
            "Phase 1 kept %d of %d entries under %s",
            len(candidates),
            len(entries),
            self.root_path,
        )
        return self._filter_candidates(candidates, predicate)

    def _filter_candidates(
        self, candidates: list[Entry], predicate: EntryPredicate
    ) -> Iterator[Entry]:
        emitted = 0
        for entry in candidates:
            if not predicate(entry):
                continue
            if self._fire_filtered_found(entry).exclude_requested:
                continue
            emitted += 1
            yield entry
        self._fire_search_finished(emitted)

    def _verify_target_exists(self) -> None:
        if not self.reader.exists(self.root_path):
            raise TargetNotFoundError(self.root_path)

    def _read_entries(self) -> list[Entry]:
        entries = list(self.reader.scan(self.root_path))
        logger.debug("Scanned %d entries under %s", len(entries), self.root_path)
        return entries

    def _fire_search_started(self) -> None:
        self._log_event(f"SearchStarted, Target Folder: {self.root_path}")
        args = self.search_started(SearchStartedArgs(root_path=self.root_path))
        if args.cancel_requested:
            raise SearchCancelledError(self.search_started.name)

    def _fire_search_finished(self, emitted: int) -> None:
        self._log_event("SearchFinished")
        self.search_finished(SearchFinishedArgs(root_path=self.root_path, emitted=emitted))

    def _fire_found(self, entry: Entry) -> EntryFoundArgs:
        hook = self.file_found if entry.kind is EntryKind.FILE else self.folder_found
        return self._fire_entry_event(hook, entry)

    def _fire_filtered_found(self, entry: Entry) -> EntryFoundArgs:
        hook = (
            self.filtered_file_found
            if entry.kind is EntryKind.FILE
            else self.filtered_folder_found
        )
        return self._fire_entry_event(hook, entry)

    def _fire_entry_event(self, hook: EventHook[EntryFoundArgs], entry: Entry) -> EntryFoundArgs:
        self._log_event(f"{hook.name}: {entry.path}")
        args = hook(EntryFoundArgs(entry=entry))
        if args.cancel_requested:
            raise SearchCancelledError(hook.name)
        return args

    def _log_event(self, description: str) -> None:
        if self.config.verbose_logging:
            event_logger.info("[EVENT] %s", description)
