"""Reservation endpoints: booking, status changes and extensions.

Writes go through BookingService, which serializes each listing's
"check then write" sequence.
"""

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from rental_api.dependencies import get_booking_service
from rental_api.models.reservations import (
    DateRangeRequest,
    ExtensionValidationResponse,
    ReservationCreateRequest,
    StatusUpdateRequest,
)
from rental_calendar.models.reservation import ReservationPeriod
from rental_calendar.services.booking import BookingService
from rental_calendar.services.extensions import earliest_extension_date

router = APIRouter(tags=["reservations"])


@router.get(
    "/listings/{listing_id}/reservations",
    summary="List reservations",
    response_model=list[ReservationPeriod],
)
async def list_reservations(
    listing_id: str,
    service: BookingService = Depends(get_booking_service),
) -> list[ReservationPeriod]:
    """List every reservation of a listing, ordered by start day."""
    return service.list_reservations(listing_id)


@router.post(
    "/listings/{listing_id}/reservations",
    summary="Book dates",
    description="""
Reserve a range of days. The reservation starts as pending.

Returns 400 with error_code ERR_001 when any day is taken or in the past.
""",
    status_code=HTTP_201_CREATED,
    response_model=ReservationPeriod,
)
async def create_reservation(
    listing_id: str,
    request: ReservationCreateRequest,
    service: BookingService = Depends(get_booking_service),
) -> ReservationPeriod:
    """Book a date range on a listing."""
    return service.book(listing_id, request.to_range(), renter_name=request.renter_name)


@router.patch(
    "/listings/{listing_id}/reservations/{reservation_id}",
    summary="Change reservation status",
    description="""
Allowed transitions: pending → accepted, pending/accepted → completed.
""",
    response_model=ReservationPeriod,
)
async def update_reservation_status(
    listing_id: str,
    reservation_id: str,
    request: StatusUpdateRequest,
    service: BookingService = Depends(get_booking_service),
) -> ReservationPeriod:
    """Move a reservation to a new status."""
    return service.transition_status(listing_id, reservation_id, request.status)


@router.post(
    "/listings/{listing_id}/reservations/{reservation_id}/extensions/validate",
    summary="Validate an extension",
    description="""
Check a proposed extension of an accepted reservation without booking it.

Rules, first failure wins: 24-hour lead time, starts after the original
ends, start not after end, no overlap with other bookings.
""",
    response_model=ExtensionValidationResponse,
)
async def validate_extension_request(
    listing_id: str,
    reservation_id: str,
    request: DateRangeRequest,
    service: BookingService = Depends(get_booking_service),
) -> ExtensionValidationResponse:
    """Validate a proposed extension."""
    validation = service.check_extension(listing_id, reservation_id, request.to_range())
    original = service.get_reservation(listing_id, reservation_id)

    return ExtensionValidationResponse(
        valid=validation.valid,
        reason=validation.reason,
        earliest_start_date=earliest_extension_date(original.end_date, service.clock),
    )


@router.post(
    "/listings/{listing_id}/reservations/{reservation_id}/extensions",
    summary="Request an extension",
    description="""
Validate and store an extension as a new pending reservation.

Returns 400 with error_code ERR_005 and the failing rule in details.reason
when the extension is rejected.
""",
    status_code=HTTP_201_CREATED,
    response_model=ReservationPeriod,
)
async def create_extension(
    listing_id: str,
    reservation_id: str,
    request: DateRangeRequest,
    service: BookingService = Depends(get_booking_service),
) -> ReservationPeriod:
    """Request an extension of an accepted reservation."""
    return service.request_extension(listing_id, reservation_id, request.to_range())
