from abc import ABC, abstractmethod
from typing import List

from src.service.marketing.app.dto.booking_criteria import BookingCriteria, CustomerCriteria
from src.service.marketing.domain.entity.booking_entity import Booking
from src.service.marketing.domain.entity.customer_entity import Customer


class IMarketingQueryRepo(ABC):
    """Repository interface for marketing read operations"""

    @abstractmethod
    async def list_bookings(self, *, criteria: BookingCriteria) -> List[Booking]:
        """Bookings matching criteria, ordered by booking_id. Empty list when none match."""
        pass

    @abstractmethod
    async def list_customers(self, *, criteria: CustomerCriteria) -> List[Customer]:
        pass
