"""Run statistics for a generated index."""

from collections import Counter
from dataclasses import dataclass, field

from loguru import logger

from workflow_index.features.workflow_indexer.schemas import IndexDocument


@dataclass(frozen=True)
class IndexStatistics:
    """Summary of one index build."""

    trigger_type_counts: dict[str, int]
    size_bytes: int  # UTF-8 length of the compact JSON serialization
    failed_files: list[str] = field(default_factory=list)

    @property
    def size_kib(self) -> float:
        return self.size_bytes / 1024


def compute_statistics(
    document: IndexDocument, failed_files: list[str] | None = None
) -> IndexStatistics:
    """Count records per trigger type and measure the serialized index.

    Args:
        document: The index that was written
        failed_files: Filenames skipped during extraction

    Returns:
        IndexStatistics for the run
    """
    counts = Counter(record.trigger_type for record in document.workflows)
    compact = document.to_json(indent=None)

    return IndexStatistics(
        trigger_type_counts=dict(counts),
        size_bytes=len(compact.encode("utf-8")),
        failed_files=list(failed_files or []),
    )


def log_statistics(stats: IndexStatistics) -> None:
    """Log the run summary."""
    logger.info("Workflow Statistics:")
    logger.info("Trigger Types:")
    for trigger_type, count in stats.trigger_type_counts.items():
        logger.info(f"  {trigger_type}: {count}")
    logger.info(f"Total size: {stats.size_kib:.2f} KB")

    if stats.failed_files:
        logger.warning(
            f"Skipped {len(stats.failed_files)} unparseable workflow files",
            extra={"failed_files": stats.failed_files},
        )
