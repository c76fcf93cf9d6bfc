from datetime import datetime
from typing import Iterable, Optional, Self, Tuple

import attrs

from src.service.box_office.domain.entity.check_in_entity import CheckIn, EventMetadata


@attrs.frozen
class GuestCheckIn:
    event_id: str
    check_in_count: int
    check_ins: Tuple[CheckIn, ...]
    expected_capacity: Optional[int]
    checked_in_count: int  # Distinct tickets; repeated scans of one ticket count once
    event_name: str
    venue_name: str
    event_starts_at: datetime

    def __attrs_post_init__(self) -> None:
        if self.check_in_count != len(self.check_ins):
            raise ValueError('check_in_count must equal the number of check-ins')

    @classmethod
    def build(cls, *, metadata: EventMetadata, check_ins: Iterable[CheckIn]) -> Self:
        ordered = tuple(check_ins)
        return cls(
            event_id=metadata.event_id,
            check_in_count=len(ordered),
            check_ins=ordered,
            expected_capacity=metadata.capacity,
            checked_in_count=len({check_in.ticket_id for check_in in ordered}),
            event_name=metadata.event_name,
            venue_name=metadata.venue_name,
            event_starts_at=metadata.starts_at,
        )
