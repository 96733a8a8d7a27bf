"""로깅 설정 유틸리티(KR). Logging configuration utilities (EN)."""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

EVENT_LOGGER = "fsvisitor.events"


class JsonFormatter(logging.Formatter):
    """JSON 포맷터 구현 · Implement JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """레코드를 JSON 문자열로 직렬화 · Serialize record into JSON string."""

        payload: Dict[str, Any] = {
            "timestamp": datetime.now(tz=timezone.utc).isoformat(timespec="seconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(log_file: Path, level: str = "INFO", echo_events: bool = False) -> None:
    """JSON 파일 로거를 설정한다 · Configure JSON file logger.

    With ``echo_events`` the ``[EVENT]`` lines are also written to stdout.
    """

    log_file.parent.mkdir(parents=True, exist_ok=True)
    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "fsvisitor.logging.JsonFormatter",
            },
            "plain": {
                "format": "%(message)s",
            },
        },
        "handlers": {
            "file": {
                "class": "logging.FileHandler",
                "formatter": "json",
                "filename": str(log_file),
                "encoding": "utf-8",
            }
        },
        "loggers": {
            "fsvisitor": {
                "level": level.upper(),
                "handlers": ["file"],
                "propagate": False,
            }
        },
    }
    if echo_events:
        config["handlers"]["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "plain",
            "stream": "ext://sys.stdout",
        }
        config["loggers"][EVENT_LOGGER] = {
            "level": "INFO",
            "handlers": ["console"],
        }
    logging.config.dictConfig(config)


__all__ = ["configure_logging", "JsonFormatter", "EVENT_LOGGER"]
