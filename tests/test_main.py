"""Tests for the batch entry point and logging setup."""

import json
import sys

import pytest
from loguru import logger

from workflow_index import __main__ as entry
from workflow_index.config.logger import setup_logging
from workflow_index.config.settings import IndexerSettings


@pytest.fixture
def configured_paths(monkeypatch, workflows_dir, output_file):
    """Point the global settings at the test directories."""
    monkeypatch.setattr(
        entry.settings,
        "indexer",
        IndexerSettings(
            WORKFLOW_INDEX_WORKFLOWS_DIR=str(workflows_dir),
            WORKFLOW_INDEX_OUTPUT_FILE=str(output_file),
        ),
    )
    # Keep the test's own loguru sinks in place
    monkeypatch.setattr(entry, "setup_logging", lambda: None)
    return workflows_dir, output_file


@pytest.fixture
def restore_default_logger():
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message))


@pytest.mark.integration
def test_main_builds_index(configured_paths, write_workflow):
    _, output_file = configured_paths
    write_workflow("042_send_email_webhook.json", {"name": "Send Email"})
    write_workflow("043_broken_webhook.json", "not json")

    assert entry.main() == 0

    written = json.loads(output_file.read_text(encoding="utf-8"))
    assert written["totalWorkflows"] == 1
    assert written["workflows"][0]["id"] == "042"


@pytest.mark.integration
def test_main_fails_when_workflows_dir_missing(configured_paths, log_messages):
    workflows_dir, output_file = configured_paths
    workflows_dir.rmdir()

    assert entry.main() == 1
    assert not output_file.exists()
    assert any("Index generation failed" in m for m in log_messages)


@pytest.mark.unit
def test_setup_logging_splits_stdout_and_stderr(capsys, restore_default_logger):
    setup_logging(level="info", log_format="text")

    logger.info("progress message")
    logger.error("parse failure")

    captured = capsys.readouterr()
    assert "progress message" in captured.out
    assert "parse failure" not in captured.out
    assert "parse failure" in captured.err
    assert "progress message" not in captured.err


@pytest.mark.unit
def test_setup_logging_json_format(capsys, restore_default_logger):
    setup_logging(level="info", log_format="json")

    logger.info("structured")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["record"]["message"] == "structured"
