from datetime import datetime
from decimal import Decimal

import attrs


def _validate_non_negative(instance: object, attribute: attrs.Attribute, value: Decimal) -> None:
    if value < 0:
        raise ValueError(f'Refund {attribute.name} cannot be negative')


@attrs.frozen
class Refund:
    ticket_id: str
    refund_date: datetime
    amount: Decimal = attrs.field(validator=_validate_non_negative)
    reason: str = ''
