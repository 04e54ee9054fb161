from fastapi import APIRouter, Depends, HTTPException

from studio_booker.api.v1.schemas import (
    AdminSessionRequestSchema,
    AdminSessionResponseSchema,
    BookingSchema,
)
from studio_booker.application.exceptions import ValidationError
from studio_booker.application.use_cases.admin_overview import AdminOverviewUseCase
from studio_booker.core.config import settings
from studio_booker.infrastructure.admin.password_gate import verify_admin_password
from studio_booker.wiring.dependencies import get_admin_overview_use_case

router = APIRouter(prefix="/admin")


@router.post("/session", response_model=AdminSessionResponseSchema)
def open_session(req: AdminSessionRequestSchema):
    if not verify_admin_password(req.password, settings.ADMIN_PASSWORD):
        raise HTTPException(status_code=401, detail="Incorrect password")
    return AdminSessionResponseSchema(authenticated=True)


@router.get("/bookings/pending", response_model=list[BookingSchema])
def pending_bookings(uc: AdminOverviewUseCase = Depends(get_admin_overview_use_case)):
    return [BookingSchema.from_entity(b) for b in uc.pending()]


@router.get("/bookings", response_model=list[BookingSchema])
def bookings_for_date(
    date: str | None = None,
    uc: AdminOverviewUseCase = Depends(get_admin_overview_use_case),
):
    try:
        bookings = uc.for_date(date)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [BookingSchema.from_entity(b) for b in bookings]
