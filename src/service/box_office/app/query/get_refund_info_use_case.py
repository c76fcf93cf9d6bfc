from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.box_office.app.interface.i_box_office_query_repo import IBoxOfficeQueryRepo
from src.service.box_office.domain.aggregate.refund_info import RefundInfo
from src.service.shared_kernel.domain.validators import FilterValidators


class GetRefundInfoUseCase:
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
    async def get_refund_info(self, event_id: str) -> RefundInfo:
        """Zero refunds is a valid, empty result."""
        event_id = FilterValidators.validate_event_code(event_id)
        refunds = await self.box_office_query_repo.list_refunds(event_id=event_id)
        return RefundInfo.build(event_id=event_id, refunds=refunds)
