from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.box_office.app.interface.i_box_office_query_repo import IBoxOfficeQueryRepo
from src.service.box_office.domain.aggregate.guest_check_in import GuestCheckIn
from src.service.shared_kernel.domain.validators import FilterValidators


class GetGuestCheckInUseCase:
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
    async def get_guest_check_in(self, event_id: str) -> GuestCheckIn:
        event_id = FilterValidators.validate_event_code(event_id)
        metadata = await self.box_office_query_repo.get_event_metadata(event_id=event_id)
        if metadata is None:
            raise NotFoundError(f'Event {event_id} not found')

        check_ins = await self.box_office_query_repo.list_check_ins(event_id=event_id)
        guest_check_in = GuestCheckIn.build(metadata=metadata, check_ins=check_ins)

        if guest_check_in.expected_capacity is None:
            Logger.base.warning(f'[CHECK_IN] Event {event_id} has no capacity on record')
        return guest_check_in
