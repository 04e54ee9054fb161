from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from studio_booker.api.v1.schemas import (
    BookingCreateSchema,
    BookingSchema,
    ErrorSchema,
    SlotSchema,
    StatusUpdateSchema,
)
from studio_booker.application.exceptions import NotFound, ValidationError
from studio_booker.application.use_cases.booking import BookingUseCase
from studio_booker.application.use_cases.review_booking import ReviewBookingUseCase, parse_decision
from studio_booker.application.utils.dates import format_date
from studio_booker.application.utils.slot_grid import build_grid
from studio_booker.wiring.dependencies import get_booking_use_case, get_review_booking_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _json_body(request: Request) -> object:
    body = await request.body()
    return json.loads(body.decode("utf-8")) if body else {}


@router.post("/bookings", response_model=BookingSchema, responses={400: {"model": ErrorSchema}})
async def create_booking(
    request: Request,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    try:
        payload = await _json_body(request)
        req = BookingCreateSchema.model_validate(payload)
        booking = uc.create(req.to_entity())
    except (ValueError, PydanticValidationError, ValidationError) as e:
        logger.info("Booking rejected", extra={"reason": str(e)})
        return _error(400, "Invalid booking data")
    return BookingSchema.from_entity(booking)


@router.get("/bookings", response_model=list[BookingSchema])
def list_bookings(uc: BookingUseCase = Depends(get_booking_use_case)):
    return [BookingSchema.from_entity(b) for b in uc.list_all()]


@router.get("/bookings/{date}", response_model=list[BookingSchema])
def list_bookings_by_date(date: str, uc: BookingUseCase = Depends(get_booking_use_case)):
    return [BookingSchema.from_entity(b) for b in uc.list_by_date(date)]


@router.get(
    "/bookings/{date}/slots",
    response_model=list[SlotSchema],
    responses={400: {"model": ErrorSchema}},
)
def list_slots(date: str, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        day = format_date(date)
    except ValidationError as e:
        return _error(400, str(e))
    return [SlotSchema.from_entity(slot) for slot in build_grid(day, uc.list_by_date(day))]


@router.patch(
    "/bookings/{booking_id}/status",
    response_model=BookingSchema,
    responses={400: {"model": ErrorSchema}, 404: {"model": ErrorSchema}},
)
async def update_booking_status(
    booking_id: str,
    request: Request,
    uc: ReviewBookingUseCase = Depends(get_review_booking_use_case),
):
    try:
        payload = await _json_body(request)
        req = StatusUpdateSchema.model_validate(payload)
    except (ValueError, PydanticValidationError):
        return _error(400, "Invalid status")

    try:
        status = parse_decision(req.status or "")
    except ValidationError:
        return _error(400, "Invalid status")

    try:
        result = uc.set_status(int(booking_id), status)
    except (NotFound, ValueError):
        return _error(404, "Booking not found")
    return BookingSchema.from_entity(result.booking)
