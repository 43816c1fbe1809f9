"""
Tests for structured logging setup.
"""

import json
import logging

import pytest

from hoopreplay.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_log_line_carries_trace_id_and_extra(capsys):
    setup_logging(level="INFO", log_format="json")

    get_logger("hoopreplay.test", trace_id="lakers_vs_wolves").warning(
        "Unresolved player in action", extra={"line_no": 22, "action": "未知球员 上篮 命中"}
    )

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["message"] == "Unresolved player in action"
    assert record["level"] == "WARNING"
    assert record["trace_id"] == "lakers_vs_wolves"
    assert record["line_no"] == 22
    assert record["action"] == "未知球员 上篮 命中"


def test_level_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("HOOPREPLAY_LOG_LEVEL", "ERROR")
    setup_logging(log_format="text")

    get_logger("hoopreplay.test").warning("hidden")
    get_logger("hoopreplay.test").error("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
    assert "trace_id=N/A" in err
