from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Self

from pydantic import BaseModel

from src.service.box_office.domain.aggregate.guest_check_in import GuestCheckIn
from src.service.box_office.domain.aggregate.refund_info import RefundInfo
from src.service.box_office.domain.aggregate.seat_configuration import SeatConfiguration
from src.service.box_office.domain.aggregate.ticket_sales import TicketSales
from src.service.box_office.domain.entity.seat_entity import Seat


class SeatResponse(BaseModel):
    seat_id: str
    status: str
    restricted_view: str
    wheelchair_accessible: bool

    @classmethod
    def from_entity(cls, seat: Seat) -> Self:
        return cls(
            seat_id=seat.seat_id,
            status=seat.status.value,
            restricted_view=seat.restricted_view.value,
            wheelchair_accessible=seat.wheelchair_accessible,
        )


class SeatConfigurationResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'event_id': 'E1',
                'rows': 1,
                'columns': 2,
                'grid': [
                    [
                        {
                            'seat_id': 'A1',
                            'status': 'SOLD',
                            'restricted_view': 'NONE',
                            'wheelchair_accessible': True,
                        },
                        None,
                    ]
                ],
                'total_accessible_seats': 1,
                'total_blocked_seats': 0,
                'duplicate_seat_ids': [],
            }
        },
    }

    event_id: str
    rows: int
    columns: int
    grid: List[List[Optional[SeatResponse]]]  # None = no seat in that cell
    total_accessible_seats: int
    total_blocked_seats: int
    duplicate_seat_ids: List[str]

    @classmethod
    def from_entity(cls, configuration: SeatConfiguration) -> Self:
        return cls(
            event_id=configuration.event_id,
            rows=configuration.rows,
            columns=configuration.columns,
            grid=[
                [SeatResponse.from_entity(seat) if seat else None for seat in row]
                for row in configuration.grid
            ],
            total_accessible_seats=configuration.total_accessible_seats,
            total_blocked_seats=configuration.total_blocked_seats,
            duplicate_seat_ids=list(configuration.duplicate_seat_ids),
        )


class TicketSalesResponse(BaseModel):
    event_id: str
    total_tickets_sold: int
    total_seats_available: int
    sold_seat_ids: List[str]
    available_seat_ids: List[str]
    accessible_seats_sold: int
    total_accessible_seats: int
    total_revenue: Decimal

    @classmethod
    def from_entity(cls, sales: TicketSales) -> Self:
        return cls(
            event_id=sales.event_id,
            total_tickets_sold=sales.total_tickets_sold,
            total_seats_available=sales.total_seats_available,
            sold_seat_ids=sorted(sales.sold_seat_ids),
            available_seat_ids=sorted(sales.available_seat_ids),
            accessible_seats_sold=sales.accessible_seats_sold,
            total_accessible_seats=sales.total_accessible_seats,
            total_revenue=sales.total_revenue,
        )


class CheckInResponse(BaseModel):
    ticket_id: str
    checked_in_at: datetime


class GuestCheckInResponse(BaseModel):
    event_id: str
    check_in_count: int
    check_ins: List[CheckInResponse]
    expected_capacity: Optional[int]  # None = capacity not on record
    checked_in_count: int
    event_name: str
    venue_name: str
    event_starts_at: datetime

    @classmethod
    def from_entity(cls, guest_check_in: GuestCheckIn) -> Self:
        return cls(
            event_id=guest_check_in.event_id,
            check_in_count=guest_check_in.check_in_count,
            check_ins=[
                CheckInResponse(ticket_id=c.ticket_id, checked_in_at=c.checked_in_at)
                for c in guest_check_in.check_ins
            ],
            expected_capacity=guest_check_in.expected_capacity,
            checked_in_count=guest_check_in.checked_in_count,
            event_name=guest_check_in.event_name,
            venue_name=guest_check_in.venue_name,
            event_starts_at=guest_check_in.event_starts_at,
        )


class RefundResponse(BaseModel):
    ticket_id: str
    refund_date: datetime
    amount: Decimal
    reason: str


class RefundInfoResponse(BaseModel):
    event_id: str
    refund_count: int
    total_refunded: Decimal
    refunds: List[RefundResponse]

    @classmethod
    def from_entity(cls, refund_info: RefundInfo) -> Self:
        return cls(
            event_id=refund_info.event_id,
            refund_count=refund_info.refund_count,
            total_refunded=refund_info.total_refunded,
            refunds=[
                RefundResponse(
                    ticket_id=r.ticket_id,
                    refund_date=r.refund_date,
                    amount=r.amount,
                    reason=r.reason,
                )
                for r in refund_info.refunds
            ],
        )
