from datetime import datetime
from typing import Optional

import attrs


@attrs.frozen
class CheckIn:
    ticket_id: str
    checked_in_at: datetime


@attrs.frozen
class EventMetadata:
    """Event row backing the check-in report. capacity is None when the venue never set one."""

    event_id: str
    event_name: str
    venue_name: str
    starts_at: datetime
    capacity: Optional[int] = None
