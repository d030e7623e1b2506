"""Index document schemas.

Field names are snake_case in Python and camelCase on the wire
(triggerType, nodeTypes, nodeCount, totalWorkflows, lastUpdated).
Field order here is the key order of the written JSON.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from workflow_index.common.datetime_utils import format_iso8601_utc, validate_aware_datetime

INDEX_VERSION = "1.0"


class WorkflowRecord(BaseModel):
    """Metadata extracted from one workflow document.

    Attributes:
        id: First underscore-delimited filename segment
        name: Workflow name, or "Untitled Workflow"
        description: Workflow description, falling back to the name
        filename: Source filename
        trigger_type: Last filename segment without ".json", lower-cased
        node_types: Human-readable node type labels, de-duplicated
        tags: Keywords longer than two characters (may repeat)
        node_count: Number of entries in the document's nodes list
    """

    id: str = Field(examples=["042"])
    name: str = Field(examples=["Send Email"])
    description: str = Field(examples=["Send Email"])
    filename: str = Field(examples=["042_send_email_webhook.json"])
    trigger_type: str = Field(examples=["webhook"])
    node_types: list[str] = Field(default_factory=list, examples=[["webhook", "http request"]])
    tags: list[str] = Field(default_factory=list, examples=[["send", "email", "webhook"]])
    node_count: int = Field(default=0, ge=0)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IndexDocument(BaseModel):
    """Aggregated index of all workflow records, sorted by id."""

    version: str = Field(default=INDEX_VERSION)
    total_workflows: int = Field(ge=0)
    last_updated: datetime = Field(
        examples=["2025-01-15T10:30:00.123Z"],
        description="Time the index was generated (UTC)",
    )
    workflows: list[WorkflowRecord] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Validator: Reject naive datetimes
    @field_validator("last_updated", mode="before")
    @classmethod
    def validate_timezone_aware(cls, v: datetime) -> datetime:
        """Ensure datetime is timezone-aware."""
        if isinstance(v, datetime):
            return validate_aware_datetime(v)
        return v

    # Serializer: Always output ISO 8601 with 'Z' suffix
    @field_serializer("last_updated")
    def serialize_datetime(self, dt: datetime) -> str:
        """Serialize datetime as ISO 8601 with 'Z' suffix."""
        return format_iso8601_utc(dt)

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize with wire (camelCase) field names.

        Args:
            indent: Spaces per level, or None for compact output
        """
        return self.model_dump_json(by_alias=True, indent=indent)
