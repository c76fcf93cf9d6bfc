from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.box_office.app.interface.i_box_office_query_repo import IBoxOfficeQueryRepo
from src.service.box_office.domain.aggregate.ticket_sales import TicketSales
from src.service.shared_kernel.domain.validators import FilterValidators


class GetTicketSalesUseCase:
    def __init__(self, box_office_query_repo: IBoxOfficeQueryRepo) -> None:
        self.box_office_query_repo = box_office_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        box_office_query_repo: IBoxOfficeQueryRepo = Depends(
            Provide[Container.box_office_query_repo]
        ),
    ) -> Self:
        return cls(box_office_query_repo=box_office_query_repo)

    @Logger.io
    async def get_ticket_sales(self, event_id: str) -> TicketSales:
        """Sales totals come pre-aggregated; seat id sets are derived from the seat rows."""
        event_id = FilterValidators.validate_event_code(event_id)
        summary = await self.box_office_query_repo.get_ticket_sales_summary(event_id=event_id)
        if summary is None:
            raise NotFoundError(f'No ticket sales found for event {event_id}')

        seats = await self.box_office_query_repo.list_seats(event_id=event_id)
        return TicketSales.build(summary=summary, seats=seats)
