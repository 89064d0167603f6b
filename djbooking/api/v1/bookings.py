from __future__ import annotations

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request
from fastapi.responses import JSONResponse

from djbooking.api import responses
from djbooking.api.v1.schemas import CreateBookingRequest, StatusUpdateRequest
from djbooking.application.dto.results import Invalid, NotFound
from djbooking.application.use_cases.booking_service import BookingService
from djbooking.application.utils.validation_rules import validate_status
from djbooking.domain.entities.field_error import FieldError
from djbooking.wiring.dependencies import get_booking_service

router = APIRouter(prefix="/api/booking", tags=["booking"])
logger = logging.getLogger(__name__)

CREATED_MESSAGE = "We will contact you within 24 hours to discuss your event details."


@router.post("")
def create_booking(
    req: CreateBookingRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    service: BookingService = Depends(get_booking_service),
) -> JSONResponse:
    result = service.create_booking(
        req.to_payload(),
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
        defer=background_tasks.add_task,
    )
    if isinstance(result, Invalid):
        return responses.validation_error(result.errors)

    booking = result.booking
    return responses.success(
        {
            "id": booking.id,
            "eventType": booking.event_type,
            "eventDate": booking.event_date.isoformat(),
            "status": booking.status.value,
            "message": CREATED_MESSAGE,
        },
        "Booking request submitted successfully",
        201,
    )


@router.get("")
def list_bookings(
    page: int = Query(1),
    limit: int = Query(10),
    status: str | None = Query(None),
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder"),
    service: BookingService = Depends(get_booking_service),
) -> JSONResponse:
    if status:
        message = validate_status(status)
        if message:
            return responses.validation_error([FieldError("status", message)])

    result = service.list_bookings(
        status=status,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return responses.success(
        {
            "bookings": [b.to_json() for b in result.items],
            "pagination": result.pagination.to_json(),
        },
        "Bookings retrieved successfully",
    )


@router.get("/stats")
def booking_stats(service: BookingService = Depends(get_booking_service)) -> JSONResponse:
    stats = service.get_stats()
    return responses.success(stats.to_json(), "Booking statistics retrieved successfully")


@router.get("/{booking_id}")
def get_booking(booking_id: str, service: BookingService = Depends(get_booking_service)) -> JSONResponse:
    result = service.get_booking(booking_id)
    if isinstance(result, NotFound):
        return responses.not_found(result.resource)
    return responses.success(result.booking.to_json(), "Booking retrieved successfully")


@router.put("/{booking_id}/status")
def update_booking_status(
    booking_id: str,
    req: StatusUpdateRequest,
    service: BookingService = Depends(get_booking_service),
) -> JSONResponse:
    result = service.update_status(
        booking_id,
        status=req.status,
        admin_notes=req.admin_notes,
        quoted_price=req.quoted_price,
    )
    if isinstance(result, Invalid):
        return responses.validation_error(result.errors)
    if isinstance(result, NotFound):
        return responses.not_found(result.resource)
    return responses.success(result.booking.to_json(), "Booking status updated successfully")


@router.put("/{booking_id}/responded")
def mark_booking_responded(booking_id: str, service: BookingService = Depends(get_booking_service)) -> JSONResponse:
    result = service.mark_responded(booking_id)
    if isinstance(result, NotFound):
        return responses.not_found(result.resource)
    return responses.success(result.booking.to_json(), "Booking marked as responded")


@router.delete("/{booking_id}")
def delete_booking(booking_id: str, service: BookingService = Depends(get_booking_service)) -> JSONResponse:
    result = service.delete_booking(booking_id)
    if isinstance(result, NotFound):
        return responses.not_found(result.resource)
    logger.info("Booking removed by admin", extra={"booking_id": result.booking_id})
    return responses.success(message="Booking deleted successfully")
