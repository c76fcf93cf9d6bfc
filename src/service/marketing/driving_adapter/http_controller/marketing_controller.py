from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from src.platform.exception.exceptions import InvalidFilterError
from src.platform.logging.loguru_io import Logger
from src.service.marketing.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.marketing.app.query.list_friend_members_use_case import (
    ListFriendMembersUseCase,
)
from src.service.marketing.domain.entity.booking_entity import Booking
from src.service.marketing.driving_adapter.http_controller.schema.marketing_schema import (
    BookingResponse,
    CustomerResponse,
)


router = APIRouter()


@router.get('/booking', response_model=List[BookingResponse])
@Logger.io
async def list_bookings(
    event_id: Optional[int] = None,
    booking_date: Optional[date] = Query(default=None, alias='date'),
    year: Optional[int] = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    """All bookings, or those for one event, or those made on one date."""
    date_parts = (year, month, day)
    has_date_parts = any(part is not None for part in date_parts)
    if has_date_parts and None in date_parts:
        raise InvalidFilterError('year, month and day must be given together')
    if booking_date is not None and has_date_parts:
        raise InvalidFilterError('Use either date or year/month/day, not both')
    if event_id is not None and (booking_date is not None or has_date_parts):
        raise InvalidFilterError('Filter by event or by date, not both')

    bookings: List[Booking]
    if event_id is not None:
        bookings = await use_case.get_all_bookings_by_event(event_id)
    elif booking_date is not None:
        bookings = await use_case.get_all_bookings_by_date(
            booking_date.year, booking_date.month, booking_date.day
        )
    elif has_date_parts:
        bookings = await use_case.get_all_bookings_by_date(
            year, month, day  # type: ignore[arg-type]
        )
    else:
        bookings = await use_case.get_all_bookings()
    return [BookingResponse.model_validate(booking) for booking in bookings]


@router.get('/booking/bulk', response_model=List[BookingResponse])
@Logger.io
async def list_bulk_bookings(
    min_quantity: Optional[int] = None,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.get_all_bookings_by_quantity(min_quantity)
    return [BookingResponse.model_validate(booking) for booking in bookings]


@router.get('/customer/friend', response_model=List[CustomerResponse])
@Logger.io
async def list_friend_members(
    use_case: ListFriendMembersUseCase = Depends(ListFriendMembersUseCase.depends),
) -> List[CustomerResponse]:
    customers = await use_case.get_specific_customer_data()
    return [CustomerResponse.model_validate(customer) for customer in customers]
