"""
JSON Schema contracts for exported calendar records.
"""

from src.core.contracts.validators import (
    CalendarMetadataValidator,
    ContractValidator,
    DateBreakdownValidator,
    SchemaLoader,
    validate_calendar_metadata,
    validate_date_breakdown,
)

__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "CalendarMetadataValidator",
    "DateBreakdownValidator",
    "validate_calendar_metadata",
    "validate_date_breakdown",
]
