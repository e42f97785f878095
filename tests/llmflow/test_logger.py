from __future__ import annotations

import json

import pytest

from llmflow import Node
from llmflow.logger import configure_logging, get_logger


def _json_lines(text: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


def test_json_output_carries_run_id(capsys: pytest.CaptureFixture[str]) -> None:
    run_id = configure_logging("DEBUG", "json")
    get_logger("test").info("something.happened", answer=42)

    [line] = _json_lines(capsys.readouterr().err)
    assert line["event"] == "something.happened"
    assert line["answer"] == 42
    assert line["logger"] == "test"
    assert line["run_id"] == run_id
    assert line["level"] == "info"


def test_level_filtering(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("WARNING", "json")
    log = get_logger("test")
    log.info("hidden")
    log.warning("shown")

    events = [line["event"] for line in _json_lines(capsys.readouterr().err)]
    assert events == ["shown"]


def test_new_run_id_each_time() -> None:
    assert configure_logging() != configure_logging()


@pytest.mark.parametrize(("level", "fmt"), [("LOUD", "console"), ("INFO", "xml")])
def test_invalid_arguments(level: str, fmt: str) -> None:
    with pytest.raises(ValueError):
        configure_logging(level, fmt)


def test_execute_announces_node(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("INFO", "json")
    Node.create("announce").execute()

    lines = _json_lines(capsys.readouterr().err)
    assert [line["event"] for line in lines] == ["node.execute", "node.succeeded"]
    assert all(line["node"] == "announce" for line in lines)
