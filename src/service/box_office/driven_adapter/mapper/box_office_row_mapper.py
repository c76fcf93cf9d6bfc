"""Row -> entity mappers for box office tables."""

from typing import Any, Mapping

from src.platform.exception.exceptions import MappingError
from src.service.box_office.domain.aggregate.ticket_sales import TicketSalesSummary
from src.service.box_office.domain.entity.check_in_entity import CheckIn, EventMetadata
from src.service.box_office.domain.entity.refund_entity import Refund
from src.service.box_office.domain.entity.seat_entity import Seat
from src.service.box_office.domain.enum.restricted_view_type import RestrictedViewType
from src.service.box_office.domain.enum.seat_status import SeatStatus
from src.service.shared_kernel.driven_adapter.row_mapping import (
    read_bool,
    read_datetime,
    read_enum,
    read_int,
    read_money,
    read_optional_int,
    read_optional_str,
    read_str,
)


def seat_from_row(row: Mapping[str, Any]) -> Seat:
    return Seat(
        seat_id=read_str(row, 'seat_id'),
        status=read_enum(row, 'seat_status', SeatStatus),
        restricted_view=read_enum(row, 'restricted_view', RestrictedViewType),
        wheelchair_accessible=read_bool(row, 'wheelchair_accessible'),
    )


def ticket_sales_summary_from_row(row: Mapping[str, Any]) -> TicketSalesSummary:
    try:
        return TicketSalesSummary(
            event_id=read_str(row, 'event_id'),
            total_tickets_sold=read_int(row, 'total_tickets_sold', minimum=0),
            total_seats_available=read_int(row, 'total_seats_available', minimum=0),
            accessible_seats_sold=read_int(row, 'accessible_seats_sold', minimum=0),
            total_accessible_seats=read_int(row, 'total_accessible_seats', minimum=0),
            total_revenue=read_money(row, 'total_revenue'),
        )
    except ValueError as e:
        raise MappingError(f'Inconsistent ticket_sales row: {e}') from e


def event_metadata_from_row(row: Mapping[str, Any]) -> EventMetadata:
    return EventMetadata(
        event_id=read_str(row, 'event_id'),
        event_name=read_str(row, 'event_name'),
        venue_name=read_str(row, 'venue_name'),
        starts_at=read_datetime(row, 'starts_at'),
        capacity=read_optional_int(row, 'capacity', minimum=0),
    )


def check_in_from_row(row: Mapping[str, Any]) -> CheckIn:
    return CheckIn(
        ticket_id=read_str(row, 'ticket_id'),
        checked_in_at=read_datetime(row, 'check_in_time'),
    )


def refund_from_row(row: Mapping[str, Any]) -> Refund:
    return Refund(
        ticket_id=read_str(row, 'ticket_id'),
        refund_date=read_datetime(row, 'refund_date'),
        amount=read_money(row, 'refund_amount'),
        reason=read_optional_str(row, 'refund_reason') or '',
    )
