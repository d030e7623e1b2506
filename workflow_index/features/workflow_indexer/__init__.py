"""Workflow indexer feature.

Scans a directory of workflow JSON documents, extracts per-file metadata,
and writes a single index document sorted by workflow id.
"""

from workflow_index.features.workflow_indexer.index_builder import IndexBuildResult, build_index
from workflow_index.features.workflow_indexer.metadata_extractor import (
    extract_workflow_metadata,
    humanize_node_type,
)
from workflow_index.features.workflow_indexer.schemas import IndexDocument, WorkflowRecord

__all__ = [
    "IndexBuildResult",
    "IndexDocument",
    "WorkflowRecord",
    "build_index",
    "extract_workflow_metadata",
    "humanize_node_type",
]
