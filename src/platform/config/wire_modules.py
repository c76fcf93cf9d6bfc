"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.box_office.app.query import (
    get_guest_check_in_use_case,
    get_refund_info_use_case,
    get_seating_configuration_use_case,
    get_ticket_sales_use_case,
)
from src.service.box_office.driving_adapter.http_controller import box_office_controller
from src.service.marketing.app.query import (
    list_bookings_use_case,
    list_friend_members_use_case,
)
from src.service.marketing.driving_adapter.http_controller import marketing_controller


WIRE_MODULES: list[ModuleType] = [
    get_seating_configuration_use_case,
    get_ticket_sales_use_case,
    get_guest_check_in_use_case,
    get_refund_info_use_case,
    list_bookings_use_case,
    list_friend_members_use_case,
    box_office_controller,
    marketing_controller,
]
