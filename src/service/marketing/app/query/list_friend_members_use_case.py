from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketing.app.dto.booking_criteria import CustomerCriteria
from src.service.marketing.app.interface.i_marketing_query_repo import IMarketingQueryRepo
from src.service.marketing.domain.entity.customer_entity import Customer


class ListFriendMembersUseCase:
    def __init__(self, marketing_query_repo: IMarketingQueryRepo) -> None:
        self.marketing_query_repo = marketing_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        marketing_query_repo: IMarketingQueryRepo = Depends(
            Provide[Container.marketing_query_repo]
        ),
    ) -> Self:
        return cls(marketing_query_repo=marketing_query_repo)

    @Logger.io
    async def get_specific_customer_data(self) -> List[Customer]:
        """Customers holding Friend of Lancaster membership."""
        customers = await self.marketing_query_repo.list_customers(
            criteria=CustomerCriteria.by_membership(True)
        )
        Logger.base.info(f'[MARKETING] {len(customers)} friend members')
        return customers
