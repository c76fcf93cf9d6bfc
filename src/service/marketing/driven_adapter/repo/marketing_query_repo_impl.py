from typing import List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.marketing.app.dto.booking_criteria import BookingCriteria, CustomerCriteria
from src.service.marketing.app.interface.i_marketing_query_repo import IMarketingQueryRepo
from src.service.marketing.domain.entity.booking_entity import Booking
from src.service.marketing.domain.entity.customer_entity import Customer
from src.service.marketing.driven_adapter.mapper.marketing_row_mapper import (
    booking_from_row,
    customer_from_row,
)
from src.service.marketing.driven_adapter.query.criteria_query_builder import (
    build_booking_query,
    build_customer_query,
)
from src.service.shared_kernel.app.interface.i_row_source import IRowSource
from src.service.shared_kernel.driven_adapter.row_mapping import map_rows


class MarketingQueryRepoImpl(IMarketingQueryRepo):
    def __init__(self, row_source: IRowSource, query_timeout: Optional[float] = None) -> None:
        self.row_source = row_source
        self.query_timeout = query_timeout

    @Logger.io(truncate_content=True)
    async def list_bookings(self, *, criteria: BookingCriteria) -> List[Booking]:
        rows = await self.row_source.fetch_all(
            build_booking_query(criteria), timeout=self.query_timeout
        )
        bookings = map_rows(rows, booking_from_row)
        Logger.base.info(f'[MARKETING] {criteria.kind} filter matched {len(bookings)} bookings')
        return bookings

    @Logger.io(truncate_content=True)
    async def list_customers(self, *, criteria: CustomerCriteria) -> List[Customer]:
        rows = await self.row_source.fetch_all(
            build_customer_query(criteria), timeout=self.query_timeout
        )
        return map_rows(rows, customer_from_row)
