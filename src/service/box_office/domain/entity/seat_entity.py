import attrs

from src.service.box_office.domain.enum.restricted_view_type import RestrictedViewType
from src.service.box_office.domain.enum.seat_status import SeatStatus


@attrs.frozen
class Seat:
    seat_id: str
    status: SeatStatus
    restricted_view: RestrictedViewType
    wheelchair_accessible: bool

    @property
    def is_view_blocked(self) -> bool:
        return self.restricted_view is RestrictedViewType.BLOCKED
