from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.box_office.app.interface.i_box_office_query_repo import IBoxOfficeQueryRepo
from src.service.box_office.domain.aggregate.seat_configuration import (
    GridShape,
    SeatConfiguration,
)
from src.service.box_office.domain.enum.grid_overflow_policy import GridOverflowPolicy
from src.service.shared_kernel.domain.validators import FilterValidators


class GetSeatingConfigurationUseCase:
    def __init__(
        self,
        box_office_query_repo: IBoxOfficeQueryRepo,
        grid_shape: GridShape,
        overflow_policy: GridOverflowPolicy = GridOverflowPolicy.REJECT,
    ) -> None:
        self.box_office_query_repo = box_office_query_repo
        self.grid_shape = grid_shape
        self.overflow_policy = overflow_policy

    @classmethod
    @inject
    def depends(
        cls,
        box_office_query_repo: IBoxOfficeQueryRepo = Depends(
            Provide[Container.box_office_query_repo]
        ),
        grid_shape: GridShape = Depends(Provide[Container.seat_grid_shape]),
        overflow_policy: GridOverflowPolicy = Depends(Provide[Container.grid_overflow_policy]),
    ) -> Self:
        return cls(
            box_office_query_repo=box_office_query_repo,
            grid_shape=grid_shape,
            overflow_policy=overflow_policy,
        )

    @Logger.io
    async def get_seating_configuration(self, event_id: str) -> SeatConfiguration:
        event_id = FilterValidators.validate_event_code(event_id)
        seats = await self.box_office_query_repo.list_seats(event_id=event_id)
        if not seats:
            raise NotFoundError(f'No seating found for event {event_id}')

        configuration = SeatConfiguration.build(
            event_id=event_id,
            seats=seats,
            shape=self.grid_shape,
            overflow_policy=self.overflow_policy,
        )
        Logger.base.info(
            f'[SEATING] Event {event_id}: {len(configuration.seats)} seats in '
            f'{configuration.rows}x{configuration.columns} grid, '
            f'{configuration.total_accessible_seats} accessible, '
            f'{configuration.total_blocked_seats} blocked view'
        )
        return configuration
