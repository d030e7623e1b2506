"""
Build the workflow index as a one-shot batch job.

Usage:
    python -m workflow_index
    workflow-index

Paths come from WORKFLOW_INDEX_WORKFLOWS_DIR and WORKFLOW_INDEX_OUTPUT_FILE
(environment or .env).

Exit codes:
    0 - Index written (individual unparseable files are skipped)
    1 - Workflows directory unreadable or index could not be written
"""

import sys

from loguru import logger

from workflow_index.config.logger import setup_logging
from workflow_index.config.settings import settings
from workflow_index.features.workflow_indexer import build_index


def main() -> int:
    setup_logging()

    workflows_dir = settings.indexer.workflows_dir_resolved
    output_file = settings.indexer.output_file_resolved

    logger.info("=" * 60)
    logger.info("Workflow Index Builder")
    logger.info(f"Workflows: {workflows_dir}")
    logger.info(f"Output:    {output_file}")
    logger.info("=" * 60)

    try:
        build_index(workflows_dir, output_file)
    except OSError as e:
        logger.error(f"Index generation failed: {e}")
        return 1
    except Exception:
        logger.exception("Unexpected error during index generation")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
