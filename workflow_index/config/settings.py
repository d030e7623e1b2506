"""
Workflow index settings using Pydantic Settings v2.

Environment variables are loaded from .env file and can be overridden
by actual environment variables.
"""

from pathlib import Path
from typing import Annotated

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("trace", "debug", "info", "success", "warning", "error", "critical")
LOG_FORMATS = ("text", "json")


def find_env_file() -> str:
    """
    Find .env file in current directory or parent directory.

    Returns:
        Path to .env file (current dir, parent dir, or default ".env")
    """
    current = Path.cwd() / ".env"
    parent = Path.cwd().parent / ".env"

    if current.exists():
        return str(current)
    elif parent.exists():
        return str(parent)
    else:
        # Fallback to default (will use environment variables only)
        return ".env"


class IndexerSettings(BaseSettings):
    """Workflow indexer paths.

    The indexer reads every *.json file directly inside workflows_dir and
    writes one aggregated index document to output_file.
    """

    workflows_dir: Annotated[
        str,
        Field(
            default="workflows",
            description="Directory containing workflow JSON documents",
            validation_alias="WORKFLOW_INDEX_WORKFLOWS_DIR",
        ),
    ]
    output_file: Annotated[
        str,
        Field(
            default="n8nboy_workflows/workflow-index.json",
            description="Path of the generated index document",
            validation_alias="WORKFLOW_INDEX_OUTPUT_FILE",
        ),
    ]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def workflows_dir_resolved(self) -> str:
        """Absolute path of the workflows directory."""
        return str(Path(self.workflows_dir).resolve())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def output_file_resolved(self) -> str:
        """Absolute path of the index document."""
        return str(Path(self.output_file).resolve())

    model_config = SettingsConfigDict(
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )


class AppSettings(BaseSettings):
    """Main application settings"""

    # Logging
    log_level: Annotated[
        str,
        Field(
            default="info",
            description="Log level: debug, info, warning, error",
            validation_alias="WORKFLOW_INDEX_LOG_LEVEL",
        ),
    ]
    log_format: Annotated[
        str,
        Field(
            default="text",
            description="Log format: text, json",
            validation_alias="WORKFLOW_INDEX_LOG_FORMAT",
        ),
    ]

    # Nested settings
    indexer: Annotated[
        IndexerSettings,
        Field(default_factory=IndexerSettings, description="Workflow indexer settings"),
    ]

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level.

        Accepts "warn" as an alias for "warning".
        """
        if not isinstance(v, str):
            raise TypeError(f"Expected str, got {type(v)}")

        level = v.strip().lower()
        if level == "warn":
            level = "warning"
        if level not in LOG_LEVELS:
            raise ValueError(
                f"WORKFLOW_INDEX_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}. Got: {v}"
            )
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Normalize and validate the log format."""
        if not isinstance(v, str):
            raise TypeError(f"Expected str, got {type(v)}")

        log_format = v.strip().lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(
                f"WORKFLOW_INDEX_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}. Got: {v}"
            )
        return log_format

    model_config = SettingsConfigDict(
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance (singleton, loaded once at import)
settings = AppSettings()
