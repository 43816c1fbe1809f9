"""
Tests for the hoopreplay command-line interface.
"""

import json
import logging

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

QUIET = ["--log-level", "ERROR"]


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def invoke(*args):
    return runner.invoke(app, [*QUIET, *args])


def test_parse_json(sample_paths):
    transcript, roster = sample_paths

    result = invoke("parse", str(transcript), "--roster", str(roster), "--json")

    assert result.exit_code == 0
    out = json.loads(result.stdout)
    assert out["game_id"] == "lakers_vs_wolves"
    assert out["count"] == 32
    assert out["events"][0]["type"] == "QUARTER_START"


def test_parse_filter_by_event_type(sample_paths):
    transcript, roster = sample_paths

    result = invoke("parse", str(transcript), "-r", str(roster), "-t", "substitution", "--json")

    assert result.exit_code == 0
    out = json.loads(result.stdout)
    assert out["count"] == 3
    assert {e["type"] for e in out["events"]} == {"SUBSTITUTION"}


def test_parse_unknown_event_type(sample_paths):
    transcript, roster = sample_paths

    result = invoke("parse", str(transcript), "-r", str(roster), "-t", "DUNK", "--json")

    assert result.exit_code == 2
    assert "Unknown event type" in json.loads(result.stdout)["error"]


def test_parse_table(sample_paths):
    transcript, roster = sample_paths

    result = invoke("parse", str(transcript), "-r", str(roster))

    assert result.exit_code == 0
    assert "Total events" in result.stdout


def test_replay_json_full_game(sample_paths):
    transcript, roster = sample_paths

    result = invoke("replay", str(transcript), "-r", str(roster), "--json")

    assert result.exit_code == 0
    out = json.loads(result.stdout)
    assert out["status"] == "finished"
    assert out["events_replayed"] == out["events_total"] == 32
    assert out["score"]["derived"] == {"home": 11, "away": 11}
    assert out["score"]["consistent"] is True
    assert len(out["state_hash"]) == 64
    assert out["home"]["totals"]["points"] == 11


def test_replay_until_index(sample_paths):
    transcript, roster = sample_paths

    result = invoke("replay", str(transcript), "-r", str(roster), "--until", "2", "--json", "-e")

    assert result.exit_code == 0
    out = json.loads(result.stdout)
    assert out["status"] == "in progress"
    assert out["events_replayed"] == 3
    assert len(out["events"]) == 3


def test_replay_hash_is_stable(sample_paths):
    transcript, roster = sample_paths
    args = ("replay", str(transcript), "-r", str(roster), "--json")

    first = json.loads(invoke(*args).stdout)["state_hash"]
    second = json.loads(invoke(*args).stdout)["state_hash"]

    assert first == second


def test_replay_table(sample_paths):
    transcript, roster = sample_paths

    result = invoke("replay", str(transcript), "-r", str(roster), "--show-events")

    assert result.exit_code == 0
    assert "State hash" in result.stdout


def test_missing_roster_file(sample_paths, tmp_path):
    transcript, _ = sample_paths

    result = invoke("replay", str(transcript), "-r", str(tmp_path / "nope.json"), "--json")

    assert result.exit_code == 2
    assert json.loads(result.stdout)["error"] == "Roster file not found"


def test_invalid_roster_file(sample_paths, tmp_path):
    transcript, _ = sample_paths
    bad = tmp_path / "roster.json"
    bad.write_text(json.dumps({"home": {"name": "h", "players": []}, "away": {}}), encoding="utf-8")

    result = invoke("parse", str(transcript), "-r", str(bad), "--json")

    assert result.exit_code == 2
    assert "empty roster" in json.loads(result.stdout)["error"]


def test_missing_transcript(sample_paths, tmp_path):
    _, roster = sample_paths

    result = invoke("parse", str(tmp_path / "nope.tsv"), "-r", str(roster), "--json")

    assert result.exit_code == 2
    assert json.loads(result.stdout)["error"] == "Transcript file not found"


def test_version():
    result = invoke("version")

    assert result.exit_code == 0
    assert "0.1.0" in result.stdout
