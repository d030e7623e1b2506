"""Workflow index builder.

One synchronous pass that:
1. Ensures the output directory exists
2. Lists workflow JSON files in the workflows directory
3. Extracts metadata from each file (bad files are logged and skipped)
4. Sorts records by id and wraps them in an IndexDocument
5. Writes the document atomically to the output path
6. Logs run statistics
"""

import os
import stat
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from loguru import logger

from workflow_index.common.datetime_utils import utcnow
from workflow_index.features.workflow_indexer.file_scanner import (
    WorkflowFileInfo,
    scan_workflow_files,
)
from workflow_index.features.workflow_indexer.metadata_extractor import extract_workflow_metadata
from workflow_index.features.workflow_indexer.schemas import (
    INDEX_VERSION,
    IndexDocument,
    WorkflowRecord,
)
from workflow_index.features.workflow_indexer.statistics import (
    IndexStatistics,
    compute_statistics,
    log_statistics,
)


@dataclass
class IndexBuildResult:
    """Outcome of a single index build."""

    document: IndexDocument
    output_file: str
    failed_files: list[str]
    statistics: IndexStatistics


def read_workflow_file(file_info: WorkflowFileInfo) -> WorkflowRecord | None:
    """Read one workflow file and extract its metadata.

    Read failures are treated like parse failures: logged, and None is
    returned so the caller can skip the file. Invalid UTF-8 bytes are
    replaced with U+FFFD rather than failing the read.
    """
    try:
        content = Path(file_info.path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error(f"Error reading {file_info.filename}: {e}")
        return None

    # filenames may contain braces, so extras go through bind()
    logger.bind(size_bytes=file_info.size_bytes, mtime=file_info.mtime).debug(
        f"Read {file_info.filename}"
    )
    return extract_workflow_metadata(file_info.filename, content)


def collect_workflow_records(workflows_dir: str) -> tuple[list[WorkflowRecord], list[str]]:
    """Extract records from every workflow file in a directory.

    Args:
        workflows_dir: Directory holding the workflow documents

    Returns:
        (records sorted by id, filenames that could not be indexed)

    Raises:
        OSError: If the directory is missing or cannot be listed
    """
    files = scan_workflow_files(workflows_dir)
    logger.info(f"Found {len(files)} workflow files")

    records: list[WorkflowRecord] = []
    failed_files: list[str] = []

    for file_info in files:
        record = read_workflow_file(file_info)
        if record is None:
            failed_files.append(file_info.filename)
            continue
        records.append(record)

    logger.info(f"Successfully processed {len(records)} workflows")

    records.sort(key=lambda record: record.id)
    return records, failed_files


def _output_mode(output_path: Path) -> int:
    """Permission bits for the index: keep the existing file's, else honor the umask."""
    try:
        return stat.S_IMODE(output_path.stat().st_mode)
    except FileNotFoundError:
        pass

    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_index(document: IndexDocument, output_file: str) -> None:
    """Write the index document, replacing any existing file.

    The JSON is written to a temporary file next to the target and moved
    into place, so the previous index survives a failed write.
    """
    output_path = Path(output_file)
    payload = document.to_json(indent=2)

    fd, tmp_path = tempfile.mkstemp(
        prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        # mkstemp creates 0600 files
        os.chmod(tmp_path, _output_mode(output_path))
        os.replace(tmp_path, output_path)
    except BaseException:
        Path(tmp_path).unlink(missing_ok=True)
        raise


def build_index(
    workflows_dir: str,
    output_file: str,
    now: datetime | None = None,
) -> IndexBuildResult:
    """Build the workflow index and write it to disk.

    Args:
        workflows_dir: Directory holding the workflow documents
        output_file: Path of the index document to write
        now: Timestamp for lastUpdated (defaults to the current UTC time)

    Returns:
        IndexBuildResult with the written document and run statistics

    Raises:
        OSError: If the workflows directory cannot be listed, the output
            directory cannot be created, or the index cannot be written
    """
    logger.info("Starting workflow index generation...")

    Path(output_file).parent.mkdir(parents=True, exist_ok=True)

    records, failed_files = collect_workflow_records(workflows_dir)

    document = IndexDocument(
        version=INDEX_VERSION,
        total_workflows=len(records),
        last_updated=now or utcnow(),
        workflows=records,
    )

    write_index(document, output_file)
    logger.info(f"Index written to {output_file}")

    statistics = compute_statistics(document, failed_files)
    log_statistics(statistics)

    return IndexBuildResult(
        document=document,
        output_file=output_file,
        failed_files=failed_files,
        statistics=statistics,
    )
