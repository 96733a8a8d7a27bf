"""탐색기 설정 모델(KR). Visitor configuration models (EN)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .filters import MATCH_ALL, FilterMode
from .models import EntryPredicate

DEFAULT_LOG = Path(".cache/fsvisitor.log")


class VisitorBaseModel(BaseModel):
    """Pydantic v2 기반 공통 모델."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


class VisitorConfig(VisitorBaseModel):
    """탐색 엔진 설정 · Traversal engine settings, fixed at construction."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    root_path: str
    predicate: Optional[EntryPredicate] = None
    verbose_logging: bool = False

    @field_validator("root_path", mode="before")
    @classmethod
    def _coerce_root(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    def with_predicate(self, predicate: EntryPredicate) -> "VisitorConfig":
        """조건을 교체한 사본 · Return a copy using another predicate."""

        return self.model_copy(update={"predicate": predicate})


class CliSettings(VisitorBaseModel):
    """CLI 기본값 · Defaults for the command line, optionally from YAML."""

    target_path: Optional[Path] = None
    filter_mode: FilterMode = FilterMode.GLOB_PATTERN
    glob_pattern: str = MATCH_ALL
    log_events: bool = False
    log_file: Path = Field(default_factory=lambda: DEFAULT_LOG)

    @field_validator("filter_mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, FilterMode):
            return FilterMode.parse(value)
        return value

    @classmethod
    def from_file(cls, config_file: Path) -> "CliSettings":
        """설정 파일에서 로드 · Load settings from config file."""

        data = (
            yaml.safe_load(config_file.read_text(encoding="utf-8"))
            if config_file.exists()
            else {}
        )
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("configuration file must contain a mapping")
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """사전을 반환 · Return dictionary representation."""

        return dict(self.model_dump(mode="json"))


__all__ = ["CliSettings", "VisitorBaseModel", "VisitorConfig", "DEFAULT_LOG"]
