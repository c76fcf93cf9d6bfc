"""Box Office Domain Enums"""

from src.service.box_office.domain.enum.grid_overflow_policy import GridOverflowPolicy
from src.service.box_office.domain.enum.restricted_view_type import RestrictedViewType
from src.service.box_office.domain.enum.seat_status import SeatStatus

__all__ = ['GridOverflowPolicy', 'RestrictedViewType', 'SeatStatus']
