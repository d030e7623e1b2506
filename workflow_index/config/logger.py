"""
Logging configuration using loguru.

Progress and the run summary go to stdout; errors (per-file parse
failures and fatal run errors) go to stderr. Output is pretty-printed
text by default, or JSON when WORKFLOW_INDEX_LOG_FORMAT=json.
"""

import sys

from loguru import logger

from workflow_index.config.settings import settings

ERROR_LEVEL_NO = logger.level("ERROR").no


def _text_formatter(record: dict) -> str:
    """Format log record for text output, conditionally showing extras.

    Only includes the {extra} section if it contains data, preventing
    empty braces from appearing in logs.
    """
    base_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    # Only append extra if it has content
    if record["extra"]:
        base_format += " | {extra}"

    return base_format + "\n{exception}"


def _below_error(record: dict) -> bool:
    return record["level"].no < ERROR_LEVEL_NO


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure loguru logger.

    Args:
        level: Minimum level to emit; defaults to settings.log_level
        log_format: "text" or "json"; defaults to settings.log_format
    """
    # Remove default logger
    logger.remove()

    level = (level or settings.log_level).upper()
    log_format = (log_format or settings.log_format).lower()

    # stderr only ever sees ERROR and above
    stderr_level = level if logger.level(level).no > ERROR_LEVEL_NO else "ERROR"

    if log_format == "text":
        logger.add(
            sys.stdout,
            format=_text_formatter,
            level=level,
            filter=_below_error,
            colorize=True,
        )
        logger.add(
            sys.stderr,
            format=_text_formatter,
            level=stderr_level,
            colorize=True,
        )
    else:
        logger.add(
            sys.stdout,
            format="{message}",
            level=level,
            filter=_below_error,
            serialize=True,  # JSON output
        )
        logger.add(
            sys.stderr,
            format="{message}",
            level=stderr_level,
            serialize=True,
        )

    logger.debug(f"Logging configured (level={level}, format={log_format})")
