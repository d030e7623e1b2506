"""Workflow metadata extraction.

Turns a workflow filename plus its JSON content into a WorkflowRecord.
Identifiers and trigger types come from the filename; node type labels
and the node count come from the document's "nodes" list.

Example:
    042_send_email_webhook.json
      id           -> "042"
      keywords     -> "send", "email"
      trigger_type -> "webhook"
"""

import json
import re
from typing import Any

from loguru import logger

from workflow_index.features.workflow_indexer.schemas import WorkflowRecord

UNTITLED_WORKFLOW = "Untitled Workflow"
NO_DESCRIPTION = "No description available"
MIN_TAG_LENGTH = 3

_UPPERCASE = re.compile(r"([A-Z])")


def humanize_node_type(node_type: str) -> str:
    """Convert a node type identifier into a readable label.

    "n8n-nodes-base.httpRequest" -> "http request"
    "@n8n/n8n-nodes-langchain.lmChatOpenAi" -> "lm chat open ai"
    """
    short_name = node_type.rsplit(".", 1)[-1]
    return _UPPERCASE.sub(r" \1", short_name).strip().lower()


def _collect_node_types(nodes: list[Any]) -> list[str]:
    # dict keeps first-seen order
    labels: dict[str, None] = {}
    for node in nodes:
        if not isinstance(node, dict):
            continue
        node_type = node.get("type")
        if isinstance(node_type, str) and node_type:
            labels[humanize_node_type(node_type)] = None
    return list(labels)


def extract_workflow_metadata(filename: str, content: str) -> WorkflowRecord | None:
    """Extract index metadata from a single workflow document.

    Args:
        filename: Workflow filename, e.g. "042_send_email_webhook.json"
        content: Raw JSON text of the workflow

    Returns:
        WorkflowRecord, or None if the content is not a JSON object.
        Failures are logged; callers skip the file.
    """
    try:
        workflow = json.loads(content)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing {filename}: {e}")
        return None

    if not isinstance(workflow, dict):
        logger.error(
            f"Error parsing {filename}: expected a JSON object, got {type(workflow).__name__}"
        )
        return None

    parts = filename.split("_")
    trigger_type = parts[-1].replace(".json", "", 1).lower()

    nodes = workflow.get("nodes")
    if not isinstance(nodes, list):
        nodes = []
    node_types = _collect_node_types(nodes)

    keywords = [part.lower() for part in parts[1:-1]]
    keywords.append(trigger_type)
    keywords.extend(node_types)

    name = workflow.get("name") or UNTITLED_WORKFLOW
    description = workflow.get("description") or workflow.get("name") or NO_DESCRIPTION

    return WorkflowRecord(
        id=parts[0],
        name=str(name),
        description=str(description),
        filename=filename,
        trigger_type=trigger_type,
        node_types=node_types,
        tags=[keyword for keyword in keywords if len(keyword) >= MIN_TAG_LENGTH],
        node_count=len(nodes),
    )
