"""JSON rendering of records and the human-readable run summary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .models import LogLevel, LogRecord, RunSummary
from .timestamps import format_timestamp


class RecordDocument(BaseModel):
    """Wire shape of one emitted record."""

    model_config = ConfigDict(frozen=True)

    level: LogLevel
    timestamp: str = Field(description="ISO-8601 local time with offset.")
    message: str
    details: dict[str, str] = Field(default_factory=dict, description="Extracted attributes.")

    @classmethod
    def from_record(cls, record: LogRecord) -> RecordDocument:
        return cls(
            level=record.level,
            timestamp=format_timestamp(record.timestamp),
            message=record.message,
            details=dict(record.attributes),
        )


def record_to_json(record: LogRecord) -> str:
    """Render a record as a single line of JSON."""
    return RecordDocument.from_record(record).model_dump_json()


def format_summary(summary: RunSummary) -> str:
    lines = [
        "--- Summary ---",
        f"Total lines:   {summary.total}",
        f"Valid lines:   {summary.valid}",
        f"Invalid lines: {summary.invalid} ({summary.invalid_percent:.2f}%)",
        f"Year used:     {summary.year}",
    ]
    return "\n".join(lines)
