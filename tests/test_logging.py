"""로깅 헬퍼 테스트(KR). Logging helper tests (EN)."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest

from fsvisitor.logging import EVENT_LOGGER, configure_logging


pytestmark = pytest.mark.usefixtures("reset_logging")


def test_configure_logging_should_install_json_handler(tmp_path: Path) -> None:
    """로깅 설정이 JSON 핸들러를 추가한다 · Logging config installs JSON handler."""

    log_path = tmp_path / "logs" / "app.log"
    configure_logging(log_path, level="INFO")
    logging.getLogger("fsvisitor.visitor").info("hello")

    lines = log_path.read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])
    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["name"] == "fsvisitor.visitor"
    assert "timestamp" in payload


def test_configure_logging_respects_level(tmp_path: Path) -> None:
    """레벨 미만 로그는 기록하지 않는다 · Records below the level are dropped."""

    log_path = tmp_path / "app.log"
    configure_logging(log_path, level="warning")
    logging.getLogger("fsvisitor").info("quiet")

    assert "quiet" not in log_path.read_text(encoding="utf-8")


def test_echo_events_writes_plain_lines(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """이벤트 에코는 평문으로 출력 · Echoed events are printed as plain text."""

    stream = io.StringIO()
    monkeypatch.setattr("sys.stdout", stream)
    configure_logging(tmp_path / "app.log", level="WARNING", echo_events=True)

    logging.getLogger(EVENT_LOGGER).info("[EVENT] SearchFinished")

    assert stream.getvalue() == "[EVENT] SearchFinished\n"
