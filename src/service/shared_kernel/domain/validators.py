"""Filter validation shared by the report and marketing query surfaces."""

from datetime import date
from typing import Any

from src.platform.exception.exceptions import InvalidFilterError


class FilterValidators:
    """Reject bad filter input before any query is issued."""

    @staticmethod
    def validate_event_code(value: Any) -> str:
        """Box office event ids are opaque strings; only blank ones are rejected."""
        if not isinstance(value, str) or not value.strip():
            raise InvalidFilterError('event_id is required')
        return value.strip()

    @staticmethod
    def validate_positive_int(value: Any, field_name: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidFilterError(f'{field_name} must be an integer')
        if value < 1:
            raise InvalidFilterError(f'{field_name} must be >= 1')
        return value

    @staticmethod
    def validate_calendar_date(year: Any, month: Any, day: Any) -> date:
        for field_name, value in (('year', year), ('month', month), ('day', day)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidFilterError(f'{field_name} must be an integer')
        if not 1 <= month <= 12:
            raise InvalidFilterError(f'month must be between 1 and 12, got {month}')
        try:
            return date(year, month, day)
        except ValueError as e:
            raise InvalidFilterError(f'Invalid date {year}-{month}-{day}: {e}') from e

    @staticmethod
    def validate_flag(value: Any, field_name: str) -> bool:
        if not isinstance(value, bool):
            raise InvalidFilterError(f'{field_name} must be a boolean')
        return value
