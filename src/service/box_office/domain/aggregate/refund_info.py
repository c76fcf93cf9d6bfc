from decimal import Decimal
from typing import Iterable, Self, Tuple

import attrs

from src.service.box_office.domain.entity.refund_entity import Refund


ZERO_AMOUNT = Decimal('0.00')


@attrs.frozen
class RefundInfo:
    event_id: str
    refund_count: int
    total_refunded: Decimal
    refunds: Tuple[Refund, ...]

    @classmethod
    def build(cls, *, event_id: str, refunds: Iterable[Refund]) -> Self:
        ordered = tuple(refunds)
        total = sum((refund.amount for refund in ordered), ZERO_AMOUNT)
        return cls(
            event_id=event_id,
            refund_count=len(ordered),
            total_refunded=total,
            refunds=ordered,
        )
