"""API Schemas - Request and Response DTOs"""
from pydantic import BaseModel, Field
from datetime import date
from decimal import Decimal
from uuid import UUID

from domain.enums import RoomType, ReservationStatus


# ============================================================================
# ROOM SCHEMAS
# ============================================================================

class RoomResponse(BaseModel):
    """Room response DTO"""
    room_id: int
    room_type: RoomType
    price_per_night: Decimal


# ============================================================================
# RESERVATION SCHEMAS
# ============================================================================

class BookReservationRequest(BaseModel):
    """Book reservation request DTO"""
    guest_name: str = Field(min_length=1)
    room_id: int
    check_in: date
    check_out: date


class ReservationResponse(BaseModel):
    """Reservation response DTO"""
    reservation_id: UUID
    guest_name: str
    room_id: int
    check_in: date
    check_out: date
    nights: int
    paid: bool
    status: ReservationStatus
    total_amount: Decimal


class OperationResult(BaseModel):
    """Outcome of pay/cancel"""
    reservation_id: UUID
    success: bool
    message: str
