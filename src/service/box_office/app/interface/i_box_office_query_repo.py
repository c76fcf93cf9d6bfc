from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.box_office.domain.aggregate.ticket_sales import TicketSalesSummary
from src.service.box_office.domain.entity.check_in_entity import CheckIn, EventMetadata
from src.service.box_office.domain.entity.refund_entity import Refund
from src.service.box_office.domain.entity.seat_entity import Seat


class IBoxOfficeQueryRepo(ABC):
    """Repository interface for box office read operations"""

    @abstractmethod
    async def list_seats(self, *, event_id: str) -> List[Seat]:
        """Seats for an event in source (insertion) order."""
        pass

    @abstractmethod
    async def get_ticket_sales_summary(self, *, event_id: str) -> Optional[TicketSalesSummary]:
        pass

    @abstractmethod
    async def get_event_metadata(self, *, event_id: str) -> Optional[EventMetadata]:
        pass

    @abstractmethod
    async def list_check_ins(self, *, event_id: str) -> List[CheckIn]:
        """Check-ins ordered by check-in time ascending."""
        pass

    @abstractmethod
    async def list_refunds(self, *, event_id: str) -> List[Refund]:
        """Refunds ordered by refund date ascending."""
        pass
