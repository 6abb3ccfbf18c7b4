"""
Shared pydantic configuration for vault records.

Records are stored and exported with camelCase wire names (``createdAt``,
``isPinned``, ``spaceId``) so snapshots stay compatible with existing vault
backups, while Python code uses snake_case field names.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel


def dedupe(values: list[str]) -> list[str]:
    """Drop duplicates while keeping first-seen order."""
    return list(dict.fromkeys(values))


def coerce_timestamp(value: Any) -> Any:
    """Accept epoch milliseconds (as written by older backups) for datetimes."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000)
    return value


class VaultRecord(BaseModel):
    """Base for persisted entities: id plus monotonic created/updated timestamps."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> Any:
        return coerce_timestamp(value)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _to_local_time(cls, value: datetime) -> datetime:
        # Stored and compared as naive local time
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value

    @model_validator(mode="after")
    def _check_timestamps(self):
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict using wire (camelCase) names, omitting unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
