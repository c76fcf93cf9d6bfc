"""
Box Office Query Repository Implementation

Raw parameterized SQL against the row source; rows go through the box office
mappers and a single bad row fails the whole call.
"""

from typing import List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.box_office.app.interface.i_box_office_query_repo import IBoxOfficeQueryRepo
from src.service.box_office.domain.aggregate.ticket_sales import TicketSalesSummary
from src.service.box_office.domain.entity.check_in_entity import CheckIn, EventMetadata
from src.service.box_office.domain.entity.refund_entity import Refund
from src.service.box_office.domain.entity.seat_entity import Seat
from src.service.box_office.driven_adapter.mapper.box_office_row_mapper import (
    check_in_from_row,
    event_metadata_from_row,
    refund_from_row,
    seat_from_row,
    ticket_sales_summary_from_row,
)
from src.service.shared_kernel.app.interface.i_row_source import IRowSource
from src.service.shared_kernel.domain.value_object.query_request import QueryRequest
from src.service.shared_kernel.driven_adapter.row_mapping import map_rows


SELECT_SEATS = """
    SELECT seat_id, seat_status, restricted_view, wheelchair_accessible
    FROM seat
    WHERE event_id = $1
    ORDER BY id
"""

SELECT_TICKET_SALES = """
    SELECT event_id, total_tickets_sold, total_seats_available,
           accessible_seats_sold, total_accessible_seats, total_revenue
    FROM ticket_sales
    WHERE event_id = $1
"""

SELECT_EVENT_METADATA = """
    SELECT event_id, event_name, venue_name, starts_at, capacity
    FROM event
    WHERE event_id = $1
"""

SELECT_CHECK_INS = """
    SELECT ticket_id, check_in_time
    FROM guest_check_in
    WHERE event_id = $1
    ORDER BY check_in_time, ticket_id
"""

SELECT_REFUNDS = """
    SELECT ticket_id, refund_date, refund_amount, refund_reason
    FROM refund
    WHERE event_id = $1
    ORDER BY refund_date, ticket_id
"""


class BoxOfficeQueryRepoImpl(IBoxOfficeQueryRepo):
    def __init__(self, row_source: IRowSource, query_timeout: Optional[float] = None) -> None:
        self.row_source = row_source
        self.query_timeout = query_timeout

    @Logger.io
    async def list_seats(self, *, event_id: str) -> List[Seat]:
        rows = await self.row_source.fetch_all(
            QueryRequest(name='select_seats', sql=SELECT_SEATS, params=(event_id,)),
            timeout=self.query_timeout,
        )
        return map_rows(rows, seat_from_row)

    @Logger.io
    async def get_ticket_sales_summary(self, *, event_id: str) -> Optional[TicketSalesSummary]:
        row = await self.row_source.fetch_one(
            QueryRequest(name='select_ticket_sales', sql=SELECT_TICKET_SALES, params=(event_id,)),
            timeout=self.query_timeout,
        )
        if row is None:
            return None
        return ticket_sales_summary_from_row(row)

    @Logger.io
    async def get_event_metadata(self, *, event_id: str) -> Optional[EventMetadata]:
        row = await self.row_source.fetch_one(
            QueryRequest(
                name='select_event_metadata', sql=SELECT_EVENT_METADATA, params=(event_id,)
            ),
            timeout=self.query_timeout,
        )
        if row is None:
            return None
        return event_metadata_from_row(row)

    @Logger.io
    async def list_check_ins(self, *, event_id: str) -> List[CheckIn]:
        rows = await self.row_source.fetch_all(
            QueryRequest(name='select_check_ins', sql=SELECT_CHECK_INS, params=(event_id,)),
            timeout=self.query_timeout,
        )
        return map_rows(rows, check_in_from_row)

    @Logger.io
    async def list_refunds(self, *, event_id: str) -> List[Refund]:
        rows = await self.row_source.fetch_all(
            QueryRequest(name='select_refunds', sql=SELECT_REFUNDS, params=(event_id,)),
            timeout=self.query_timeout,
        )
        return map_rows(rows, refund_from_row)
