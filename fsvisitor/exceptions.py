"""탐색기 전용 예외를 정의합니다./Define visitor specific exceptions."""

from __future__ import annotations


class VisitorError(RuntimeError):
    """탐색 중 발생한 오류 기본 클래스./Base class for visitor errors."""


class TargetNotFoundError(VisitorError):
    """대상 폴더가 존재하지 않음./Raised when the target folder is missing."""

    def __init__(self, root_path: str) -> None:
        super().__init__(f"Target folder does not exist: {root_path}")
        self.root_path = root_path


class MissingFilterError(VisitorError):
    """검색 필터가 설정되지 않음./Raised when search runs without a predicate."""

    def __init__(self) -> None:
        super().__init__("Filter must be configured for search operation")


class SearchCancelledError(VisitorError):
    """관찰자가 검색을 취소함./Search stopped by an observer."""

    def __init__(self, stage: str) -> None:
        super().__init__("Search operation has been canceled")
        self.stage = stage
