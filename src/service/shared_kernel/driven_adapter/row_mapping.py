"""
Column readers shared by the entity mappers.

Every reader raises MappingError naming the column when the value is missing
or cannot be converted. Nothing here falls back to a default silently.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Type, TypeVar

from src.platform.exception.exceptions import MappingError


_T = TypeVar('_T')
_E = TypeVar('_E', bound=Enum)

CENT = Decimal('0.01')
_TRUE_STRINGS = {'1', 't', 'true', 'y', 'yes'}
_FALSE_STRINGS = {'0', 'f', 'false', 'n', 'no'}


def require(row: Mapping[str, Any], column: str) -> Any:
    if column not in row:
        raise MappingError(f'Missing column {column!r}', column=column)
    value = row[column]
    if value is None:
        raise MappingError(f'Column {column!r} is NULL', column=column)
    return value


def read_str(row: Mapping[str, Any], column: str) -> str:
    return str(require(row, column)).strip()


def read_optional_str(row: Mapping[str, Any], column: str) -> Optional[str]:
    """Missing, NULL and blank all read as None."""
    value = row.get(column)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def read_int(row: Mapping[str, Any], column: str, *, minimum: Optional[int] = None) -> int:
    value = require(row, column)
    if isinstance(value, bool):
        raise MappingError(f'Column {column!r} is a boolean, expected integer', column=column)
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise MappingError(f'Column {column!r} is not an integer: {value!r}', column=column) from e
    if isinstance(value, float) and value != number:
        raise MappingError(f'Column {column!r} is not an integer: {value!r}', column=column)
    if minimum is not None and number < minimum:
        raise MappingError(f'Column {column!r} must be >= {minimum}, got {number}', column=column)
    return number


def read_optional_int(
    row: Mapping[str, Any], column: str, *, minimum: Optional[int] = None
) -> Optional[int]:
    if row.get(column) is None:
        return None
    return read_int(row, column, minimum=minimum)


def read_bool(row: Mapping[str, Any], column: str) -> bool:
    value = require(row, column)
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise MappingError(f'Column {column!r} is not a boolean: {value!r}', column=column)


def read_money(row: Mapping[str, Any], column: str) -> Decimal:
    """Non-negative amount quantized to cents. Floats go through str() first."""
    value = require(row, column)
    if isinstance(value, bool):
        raise MappingError(f'Column {column!r} is a boolean, expected amount', column=column)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as e:
        raise MappingError(f'Column {column!r} is not a number: {value!r}', column=column) from e
    if not amount.is_finite():
        raise MappingError(f'Column {column!r} is not finite: {value!r}', column=column)
    if amount < 0:
        raise MappingError(f'Column {column!r} cannot be negative: {amount}', column=column)
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_EVEN)
    except InvalidOperation as e:
        raise MappingError(
            f'Column {column!r} is too large to hold as money: {amount}', column=column
        ) from e


def read_enum(row: Mapping[str, Any], column: str, enum_cls: Type[_E]) -> _E:
    raw = read_str(row, column)
    try:
        return enum_cls(raw.upper())
    except ValueError as e:
        raise MappingError(
            f'Column {column!r} has unknown {enum_cls.__name__} value {raw!r}', column=column
        ) from e


def read_datetime(row: Mapping[str, Any], column: str) -> datetime:
    value = require(row, column)
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        return datetime.fromisoformat(str(value).strip())
    except ValueError as e:
        raise MappingError(f'Column {column!r} is not a timestamp: {value!r}', column=column) from e


def read_date(row: Mapping[str, Any], column: str) -> date:
    value = require(row, column)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError as e:
        raise MappingError(f'Column {column!r} is not a date: {value!r}', column=column) from e


def map_rows(rows: List[Mapping[str, Any]], mapper: Callable[[Mapping[str, Any]], _T]) -> List[_T]:
    """Map every row or fail on the first bad one; a report is never built from a subset."""
    mapped: List[_T] = []
    for index, row in enumerate(rows):
        try:
            mapped.append(mapper(row))
        except MappingError as e:
            raise MappingError(e.message, column=e.column, row_index=index) from e
    return mapped
