"""Pytest configuration and fixtures.

Provides temporary workflow directories and a loguru capture sink.
"""

import json
from pathlib import Path
from typing import Any

import pytest
from loguru import logger


@pytest.fixture
def workflows_dir(tmp_path: Path) -> Path:
    """Empty workflows directory inside the test's tmp_path."""
    path = tmp_path / "workflows"
    path.mkdir()
    return path


@pytest.fixture
def output_file(tmp_path: Path) -> Path:
    """Index path in a not-yet-existing output directory."""
    return tmp_path / "n8nboy_workflows" / "workflow-index.json"


@pytest.fixture
def write_workflow(workflows_dir: Path):
    """Write a workflow document into workflows_dir.

    Dicts and lists are dumped as JSON; strings are written verbatim so
    tests can create malformed files.
    """

    def _write(filename: str, document: Any) -> Path:
        path = workflows_dir / filename
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def log_messages():
    """Collect formatted loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), format="{level} {message}")
    yield messages
    logger.remove(handler_id)
