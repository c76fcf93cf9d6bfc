from datetime import date
from decimal import Decimal
from typing import Optional

import attrs


def _validate_quantity(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise ValueError('Booking quantity must be at least 1')


@attrs.frozen
class Booking:
    booking_id: int
    customer_id: int
    event_id: int
    price: Decimal
    quantity: int = attrs.field(validator=_validate_quantity)
    booking_date: date
    discount_type: Optional[str] = None
