from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketing.app.dto.booking_criteria import (
    DEFAULT_BULK_MIN_QUANTITY,
    BookingCriteria,
)
from src.service.marketing.app.interface.i_marketing_query_repo import IMarketingQueryRepo
from src.service.marketing.domain.entity.booking_entity import Booking


class ListBookingsUseCase:
    def __init__(
        self,
        marketing_query_repo: IMarketingQueryRepo,
        bulk_min_quantity: int = DEFAULT_BULK_MIN_QUANTITY,
    ) -> None:
        self.marketing_query_repo = marketing_query_repo
        self.bulk_min_quantity = bulk_min_quantity

    @classmethod
    @inject
    def depends(
        cls,
        marketing_query_repo: IMarketingQueryRepo = Depends(
            Provide[Container.marketing_query_repo]
        ),
        bulk_min_quantity: int = Depends(Provide[Container.bulk_booking_min_quantity]),
    ) -> Self:
        return cls(marketing_query_repo=marketing_query_repo, bulk_min_quantity=bulk_min_quantity)

    @Logger.io
    async def get_all_bookings(self) -> List[Booking]:
        return await self.marketing_query_repo.list_bookings(criteria=BookingCriteria.all())

    @Logger.io
    async def get_all_bookings_by_event(self, event_id: int) -> List[Booking]:
        criteria = BookingCriteria.by_event(event_id)
        return await self.marketing_query_repo.list_bookings(criteria=criteria)

    @Logger.io
    async def get_all_bookings_by_date(self, year: int, month: int, day: int) -> List[Booking]:
        criteria = BookingCriteria.by_date(year, month, day)
        return await self.marketing_query_repo.list_bookings(criteria=criteria)

    @Logger.io
    async def get_all_bookings_by_quantity(
        self, min_quantity: Optional[int] = None
    ) -> List[Booking]:
        """Group bookings; the threshold defaults to the configured bulk size (12)."""
        threshold = self.bulk_min_quantity if min_quantity is None else min_quantity
        criteria = BookingCriteria.by_min_quantity(threshold)
        return await self.marketing_query_repo.list_bookings(criteria=criteria)
