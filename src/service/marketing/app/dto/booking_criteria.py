"""
Typed marketing filters.

Constructors validate their input and raise InvalidFilterError, so a bad
filter never reaches the row source. Turning a criteria object into SQL is
the query builder's job (driven_adapter/query/criteria_query_builder.py).
"""

from datetime import date
from enum import StrEnum
from typing import Optional, Self

import attrs

from src.service.shared_kernel.domain.validators import FilterValidators


DEFAULT_BULK_MIN_QUANTITY = 12


class BookingFilterKind(StrEnum):
    ALL = 'all'
    EVENT = 'event'
    DATE = 'date'
    MIN_QUANTITY = 'min_quantity'


@attrs.frozen
class BookingCriteria:
    kind: BookingFilterKind
    event_id: Optional[int] = None
    booking_date: Optional[date] = None
    min_quantity: Optional[int] = None

    @classmethod
    def all(cls) -> Self:
        return cls(kind=BookingFilterKind.ALL)

    @classmethod
    def by_event(cls, event_id: int) -> Self:
        return cls(
            kind=BookingFilterKind.EVENT,
            event_id=FilterValidators.validate_positive_int(event_id, 'event_id'),
        )

    @classmethod
    def by_date(cls, year: int, month: int, day: int) -> Self:
        return cls(
            kind=BookingFilterKind.DATE,
            booking_date=FilterValidators.validate_calendar_date(year, month, day),
        )

    @classmethod
    def by_min_quantity(cls, threshold: int = DEFAULT_BULK_MIN_QUANTITY) -> Self:
        return cls(
            kind=BookingFilterKind.MIN_QUANTITY,
            min_quantity=FilterValidators.validate_positive_int(threshold, 'min_quantity'),
        )


@attrs.frozen
class CustomerCriteria:
    friend_member: bool

    @classmethod
    def by_membership(cls, flag: bool = True) -> Self:
        return cls(friend_member=FilterValidators.validate_flag(flag, 'friend_member'))
