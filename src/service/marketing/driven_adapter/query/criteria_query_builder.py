"""
Criteria -> QueryRequest.

Only constant SQL fragments are concatenated; filter values are always bound
through $n placeholders.
"""

from src.platform.exception.exceptions import QueryError
from src.service.marketing.app.dto.booking_criteria import (
    BookingCriteria,
    BookingFilterKind,
    CustomerCriteria,
)
from src.service.shared_kernel.domain.value_object.query_request import QueryRequest


SELECT_BOOKINGS = """
    SELECT booking_id, customer_id, event_id, price, quantity, booking_date, discount_type
    FROM booking
"""

SELECT_CUSTOMERS = """
    SELECT customer_id, customer_name, email, phone_number, friend_member
    FROM customer
"""

_BOOKING_ORDER = ' ORDER BY booking_id'
_CUSTOMER_ORDER = ' ORDER BY customer_id'

_BOOKING_WHERE = {
    BookingFilterKind.EVENT: ' WHERE event_id = $1',
    BookingFilterKind.DATE: ' WHERE booking_date = $1',
    BookingFilterKind.MIN_QUANTITY: ' WHERE quantity >= $1',
}


def build_booking_query(criteria: BookingCriteria) -> QueryRequest:
    match criteria.kind:
        case BookingFilterKind.ALL:
            return QueryRequest(name='select_all_bookings', sql=SELECT_BOOKINGS + _BOOKING_ORDER)
        case BookingFilterKind.EVENT:
            param = criteria.event_id
        case BookingFilterKind.DATE:
            param = criteria.booking_date
        case BookingFilterKind.MIN_QUANTITY:
            param = criteria.min_quantity
        case _:
            raise QueryError(f'Unsupported booking filter {criteria.kind!r}')

    return QueryRequest(
        name=f'select_bookings_by_{criteria.kind}',
        sql=SELECT_BOOKINGS + _BOOKING_WHERE[criteria.kind] + _BOOKING_ORDER,
        params=(param,),
    )


def build_customer_query(criteria: CustomerCriteria) -> QueryRequest:
    return QueryRequest(
        name='select_customers_by_membership',
        sql=SELECT_CUSTOMERS + ' WHERE friend_member = $1' + _CUSTOMER_ORDER,
        params=(criteria.friend_member,),
    )
