import json
from pathlib import Path

import pytest

from trace_annotator import cli
from trace_annotator.config import AppConfig, ExamplesConfig, Settings


RECORD = {
    "problem": "q",
    "final_response": 'A <cite id="s1">b</cite> <cite id="c1-0">c</cite>',
    "full_traces": {
        "generated_text": (
            'think <call_tool name="search" query="rubrics">rubrics</call_tool>'
            "<tool_output><snippet id=s1>\nTitle: T\nURL: U\nSnippet: S\n</snippet></tool_output>"
        ),
        "tool_calls": [{"tool_name": "search", "call_id": "c1", "documents": [{"title": "D", "url": "u"}]}],
    },
}


@pytest.fixture
def settings(tmp_path: Path, monkeypatch):
    (tmp_path / "demo.json").write_text(json.dumps(RECORD), encoding="utf-8")
    cfg = Settings(app=AppConfig(logs_dir=str(tmp_path / "logs")), examples=ExamplesConfig(directory=str(tmp_path)))
    monkeypatch.setattr(cli, "load_config", lambda: cfg)
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    return cfg


def test_list_command(settings, capsys):
    cli.main(["list"])
    assert json.loads(capsys.readouterr().out) == {"examples": ["demo"]}


def test_annotate_command(settings, capsys):
    cli.main(["annotate", "demo"])
    data = json.loads(capsys.readouterr().out)
    assert data["sources"][0]["title"] == "T"
    assert [d["id"] for d in data["documents"]] == ["c1-0"]


def test_sources_command(settings, capsys):
    cli.main(["sources", "demo"])
    data = json.loads(capsys.readouterr().out)
    assert data == {"sources": [{"number": 1, "id": "s1", "title": "T", "url": "U"}]}


def test_segments_command(settings, capsys):
    cli.main(["segments", "demo"])
    segments = json.loads(capsys.readouterr().out)["segments"]
    assert [s["kind"] for s in segments] == ["text", "tool_call", "tool_output"]
    assert segments[1]["tool_name"] == "search"
    assert segments[1]["params"] == {"query": "rubrics"}
    assert "tool_name" not in segments[0]


def test_load_failure_exits_nonzero(settings, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["annotate", "missing"])
    assert excinfo.value.code == 1
    assert "error" in json.loads(capsys.readouterr().err)


def test_no_command_prints_help(capsys):
    cli.main([])
    assert "usage" in capsys.readouterr().out.lower()
