"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional


class InvalidRecordStructureError(ValueError):
    """
    Exception raised when a resume or job record has an invalid root structure.

    Only the root shape is validated (it must be a mapping). Missing or empty
    fields are never an error: they load as empty strings and lists.

    Attributes:
        message: Error description
        record_type: Kind of record being loaded ("resume" or "job")
        source_path: File the record was loaded from, if any
    """

    def __init__(
        self,
        message: str,
        record_type: Optional[str] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.record_type = record_type
        self.source_path = source_path

        parts = [message]
        if record_type:
            parts.append(f"Record type: {record_type}")
        if source_path:
            parts.append(f"Source: {source_path}")

        super().__init__("\n".join(parts))
