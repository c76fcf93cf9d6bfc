from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.box_office.app.query.get_guest_check_in_use_case import GetGuestCheckInUseCase
from src.service.box_office.app.query.get_refund_info_use_case import GetRefundInfoUseCase
from src.service.box_office.app.query.get_seating_configuration_use_case import (
    GetSeatingConfigurationUseCase,
)
from src.service.box_office.app.query.get_ticket_sales_use_case import GetTicketSalesUseCase
from src.service.box_office.driving_adapter.http_controller.schema.box_office_schema import (
    GuestCheckInResponse,
    RefundInfoResponse,
    SeatConfigurationResponse,
    TicketSalesResponse,
)


router = APIRouter()


@router.get('/{event_id}/seating', response_model=SeatConfigurationResponse)
@Logger.io
async def get_seating_configuration(
    event_id: str,
    use_case: GetSeatingConfigurationUseCase = Depends(GetSeatingConfigurationUseCase.depends),
) -> SeatConfigurationResponse:
    configuration = await use_case.get_seating_configuration(event_id)
    return SeatConfigurationResponse.from_entity(configuration)


@router.get('/{event_id}/sales', response_model=TicketSalesResponse)
@Logger.io
async def get_ticket_sales(
    event_id: str,
    use_case: GetTicketSalesUseCase = Depends(GetTicketSalesUseCase.depends),
) -> TicketSalesResponse:
    sales = await use_case.get_ticket_sales(event_id)
    return TicketSalesResponse.from_entity(sales)


@router.get('/{event_id}/check_in', response_model=GuestCheckInResponse)
@Logger.io
async def get_guest_check_in(
    event_id: str,
    use_case: GetGuestCheckInUseCase = Depends(GetGuestCheckInUseCase.depends),
) -> GuestCheckInResponse:
    guest_check_in = await use_case.get_guest_check_in(event_id)
    return GuestCheckInResponse.from_entity(guest_check_in)


@router.get('/{event_id}/refund', response_model=RefundInfoResponse)
@Logger.io
async def get_refund_info(
    event_id: str,
    use_case: GetRefundInfoUseCase = Depends(GetRefundInfoUseCase.depends),
) -> RefundInfoResponse:
    refund_info = await use_case.get_refund_info(event_id)
    return RefundInfoResponse.from_entity(refund_info)
