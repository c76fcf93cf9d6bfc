from typing import Any, Mapping

from src.service.marketing.domain.entity.booking_entity import Booking
from src.service.marketing.domain.entity.customer_entity import Customer
from src.service.shared_kernel.driven_adapter.row_mapping import (
    read_bool,
    read_date,
    read_int,
    read_money,
    read_optional_str,
    read_str,
)


def booking_from_row(row: Mapping[str, Any]) -> Booking:
    return Booking(
        booking_id=read_int(row, 'booking_id'),
        customer_id=read_int(row, 'customer_id'),
        event_id=read_int(row, 'event_id'),
        price=read_money(row, 'price'),
        quantity=read_int(row, 'quantity', minimum=1),
        booking_date=read_date(row, 'booking_date'),
        discount_type=read_optional_str(row, 'discount_type'),
    )


def customer_from_row(row: Mapping[str, Any]) -> Customer:
    return Customer(
        customer_id=read_int(row, 'customer_id'),
        name=read_str(row, 'customer_name'),
        email=read_str(row, 'email'),
        phone=read_str(row, 'phone_number'),
        friend_member=read_bool(row, 'friend_member'),
    )
