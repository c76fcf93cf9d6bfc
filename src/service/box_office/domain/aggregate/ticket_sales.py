from decimal import Decimal
from typing import FrozenSet, Iterable, Self

import attrs

from src.platform.exception.exceptions import MappingError
from src.service.box_office.domain.entity.seat_entity import Seat
from src.service.box_office.domain.enum.seat_status import SeatStatus


@attrs.frozen
class TicketSalesSummary:
    """Pre-aggregated sales row, one per event."""

    event_id: str
    total_tickets_sold: int
    total_seats_available: int
    accessible_seats_sold: int
    total_accessible_seats: int
    total_revenue: Decimal

    def __attrs_post_init__(self) -> None:
        if self.total_tickets_sold > self.total_seats_available:
            raise ValueError('total_tickets_sold exceeds total_seats_available')
        if self.accessible_seats_sold > self.total_accessible_seats:
            raise ValueError('accessible_seats_sold exceeds total_accessible_seats')


@attrs.frozen
class TicketSales:
    event_id: str
    total_tickets_sold: int
    total_seats_available: int
    sold_seat_ids: FrozenSet[str]
    available_seat_ids: FrozenSet[str]
    accessible_seats_sold: int
    total_accessible_seats: int
    total_revenue: Decimal

    @classmethod
    def build(cls, *, summary: TicketSalesSummary, seats: Iterable[Seat]) -> Self:
        sold: set[str] = set()
        available: set[str] = set()
        for seat in seats:
            if seat.status is SeatStatus.SOLD:
                sold.add(seat.seat_id)
            elif seat.status is SeatStatus.AVAILABLE:
                available.add(seat.seat_id)
        if len(sold) != summary.total_tickets_sold:
            # Summary and seat rows come from separate reads; refuse a torn view
            raise MappingError(
                f'Sales summary for {summary.event_id} reports {summary.total_tickets_sold} '
                f'tickets sold but {len(sold)} seats are SOLD'
            )

        return cls(
            event_id=summary.event_id,
            total_tickets_sold=summary.total_tickets_sold,
            total_seats_available=summary.total_seats_available,
            sold_seat_ids=frozenset(sold),
            available_seat_ids=frozenset(available),
            accessible_seats_sold=summary.accessible_seats_sold,
            total_accessible_seats=summary.total_accessible_seats,
            total_revenue=summary.total_revenue,
        )
