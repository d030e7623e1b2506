"""Filesystem scanner for workflow documents.

Lists the workflow JSON files sitting directly inside the workflows
directory. Filenames follow the export convention:
    {id}_{keyword}_..._{triggerType}.json
"""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger


@dataclass(frozen=True)
class WorkflowFileInfo:
    """Information about a discovered workflow file."""

    path: str
    filename: str
    size_bytes: int
    mtime: float  # Unix timestamp of last modification


def scan_workflow_files(workflows_dir: str) -> list[WorkflowFileInfo]:
    """Scan a directory (non-recursively) for workflow JSON files.

    Args:
        workflows_dir: Directory holding the workflow documents

    Returns:
        WorkflowFileInfo for every regular file whose name ends in
        ".json", ordered by filename.

    Raises:
        FileNotFoundError: If workflows_dir does not exist
        NotADirectoryError: If workflows_dir is not a directory
    """
    base = Path(workflows_dir)

    if not base.exists():
        raise FileNotFoundError(f"Workflows directory does not exist: {workflows_dir}")

    if not base.is_dir():
        raise NotADirectoryError(f"Workflows path is not a directory: {workflows_dir}")

    files: list[WorkflowFileInfo] = []

    for entry in sorted(base.iterdir(), key=lambda p: p.name):
        if not entry.name.endswith(".json"):
            continue

        if not entry.is_file():
            logger.debug(f"Skipping non-file entry {entry}")
            continue

        try:
            stat = entry.stat()
        except OSError as e:
            # File might have been deleted between iterdir and stat
            logger.warning(f"Could not stat file {entry}: {e}")
            continue

        files.append(
            WorkflowFileInfo(
                path=str(entry),
                filename=entry.name,
                size_bytes=stat.st_size,
                mtime=stat.st_mtime,
            )
        )

    logger.debug(f"Found {len(files)} workflow files in {workflows_dir}")
    return files
