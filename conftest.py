'''KR: 테스트 공용 픽스처. EN: Shared pytest fixtures.'''

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest

from fsvisitor import (
    Entry,
    EntryFoundArgs,
    FileSystemVisitor,
    SearchFinishedArgs,
    SearchStartedArgs,
    StaticDirectoryReader,
)
from fsvisitor.logging import EVENT_LOGGER

ROOT = '/r'


@pytest.fixture
def r_entries() -> list[Entry]:
    '''/r 트리 스냅샷(KR). Snapshot of the /r tree in scan order (EN).'''

    return [
        Entry.file('/r/a.txt'),
        Entry.file('/r/b.txt'),
        Entry.folder('/r/sub'),
    ]


@pytest.fixture
def r_reader(r_entries: list[Entry]) -> StaticDirectoryReader:
    '''/r 메모리 리더(KR). In-memory reader for /r (EN).'''

    return StaticDirectoryReader(ROOT, r_entries)


class EventRecorder:
    '''모든 알림을 순서대로 기록한다(KR). Record every notification in order (EN).'''

    def __init__(self) -> None:
        self.events: list[tuple[str, str | None]] = []

    def attach(self, visitor: FileSystemVisitor) -> 'EventRecorder':
        visitor.search_started.subscribe(self._started)
        visitor.search_finished.subscribe(self._finished)
        for hook in (
            visitor.file_found,
            visitor.folder_found,
            visitor.filtered_file_found,
            visitor.filtered_folder_found,
        ):
            hook.subscribe(self._entry_handler(hook.name))
        return self

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def _started(self, args: SearchStartedArgs) -> None:
        self.events.append(('SearchStarted', None))

    def _finished(self, args: SearchFinishedArgs) -> None:
        self.events.append(('SearchFinished', None))

    def _entry_handler(self, name: str) -> Callable[[EntryFoundArgs], None]:
        def _handle(args: EntryFoundArgs) -> None:
            self.events.append((name, args.path))

        return _handle


@pytest.fixture
def recorder() -> EventRecorder:
    '''알림 기록기(KR). Notification recorder (EN).'''

    return EventRecorder()


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


@pytest.fixture
def event_log() -> Iterator[list[str]]:
    '''[EVENT] 로그 메시지를 수집한다(KR). Collect messages sent to the event logger (EN).'''

    event_logger = logging.getLogger(EVENT_LOGGER)
    handler = _ListHandler()
    previous_level = event_logger.level
    event_logger.addHandler(handler)
    event_logger.setLevel(logging.INFO)
    try:
        yield handler.messages
    finally:
        event_logger.removeHandler(handler)
        event_logger.setLevel(previous_level)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    '''디스크 샘플 트리(KR). On-disk sample tree (EN).'''

    from tests.fixtures.virtual_fs import create_virtual_tree

    root = tmp_path / 'docs'
    create_virtual_tree(
        root,
        {
            'file1.txt': 'one',
            'file2.txt': 'two',
            'notes.md': 'notes',
            'subfolder/file1.txt': 'sub one',
            'subfolder/file2.txt': 'sub two',
            'subfolder/deep/report.log': 'log',
        },
        folders=('empty',),
    )
    return root


@pytest.fixture
def reset_logging() -> Iterator[None]:
    '''fsvisitor 로거를 원상태로 돌린다(KR). Undo logging configuration after a test (EN).'''

    yield
    for name in ('fsvisitor', EVENT_LOGGER):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
