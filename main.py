import logging
from fastapi import FastAPI, HTTPException, Depends
from uuid import UUID
from datetime import date
from typing import List, Optional

from api.schemas import (
    RoomResponse, BookReservationRequest, ReservationResponse, OperationResult
)
from api.dependencies import get_engine
from application.engine import HotelEngine
from domain.enums import RoomType, ReservationStatus
from domain.exceptions import (
    InvalidRoom, RoomUnavailable, InvalidDateRange, InvalidGuestName, StorageUnavailable
)
from infrastructure.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Room availability, booking, cancellation and simulated payment backed by CSV files",
    version="1.0.0"
)


@app.on_event("startup")
def load_storage():
    # Fail fast: a broken data directory or record aborts startup
    get_engine().init()


# ============================================================================
# HEALTH & ENUM REFERENCE ENDPOINTS
# ============================================================================

@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

@app.get("/api/enums/room-type", tags=["Enum Reference"])
async def get_room_types():
    """Get all RoomType enum values"""
    return {
        "values": [f"{item.name}" for item in RoomType],
        "description": "Room type values: STANDARD, DELUXE, SUITE"
    }

@app.get("/api/enums/reservation-status", tags=["Enum Reference"])
async def get_reservation_statuses():
    """Get all ReservationStatus enum values"""
    return {
        "values": [f"{item.name}" for item in ReservationStatus],
        "description": "Reservation status values: BOOKED, PAID"
    }

# ============================================================================
# ROOM ENDPOINTS
# ============================================================================

@app.get("/api/rooms", response_model=List[RoomResponse], tags=["Rooms"])
async def get_all_rooms(engine: HotelEngine = Depends(get_engine)):
    """Get the room catalog ordered by room id"""
    rooms = sorted(engine.all_rooms(), key=lambda r: r.room_id)
    return [_room_to_response(r) for r in rooms]

@app.get("/api/rooms/available", response_model=List[RoomResponse], tags=["Rooms"])
async def search_availability(
    check_in: date,
    check_out: date,
    room_type: Optional[RoomType] = None,
    engine: HotelEngine = Depends(get_engine)
):
    """Search rooms free for [check_in, check_out), optionally of one type"""
    if check_out <= check_in:
        raise HTTPException(status_code=400, detail="Check-out must be after check-in")
    rooms = engine.find_available(room_type, check_in, check_out)
    return [_room_to_response(r) for r in rooms]

# ============================================================================
# RESERVATION ENDPOINTS
# ============================================================================

@app.post("/api/reservations", response_model=ReservationResponse, status_code=201, tags=["Reservations"])
async def book_reservation(
    request: BookReservationRequest,
    engine: HotelEngine = Depends(get_engine)
):
    """Book a room"""
    try:
        reservation = engine.book(
            guest_name=request.guest_name,
            room_id=request.room_id,
            check_in=request.check_in,
            check_out=request.check_out
        )
        return _reservation_to_response(reservation)
    except InvalidRoom as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RoomUnavailable as e:
        raise HTTPException(status_code=409, detail=str(e))
    except (InvalidDateRange, InvalidGuestName) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))

@app.get("/api/reservations", response_model=List[ReservationResponse], tags=["Reservations"])
async def get_all_reservations(engine: HotelEngine = Depends(get_engine)):
    """Get all reservations"""
    return [_reservation_to_response(r) for r in engine.list_all()]

@app.get("/api/reservations/{reservation_id}", response_model=ReservationResponse, tags=["Reservations"])
async def get_reservation(
    reservation_id: UUID,
    engine: HotelEngine = Depends(get_engine)
):
    """Get reservation by ID"""
    reservation = engine.get(reservation_id)
    if not reservation:
        raise HTTPException(status_code=404, detail="Reservation not found")
    return _reservation_to_response(reservation)

@app.post("/api/reservations/{reservation_id}/pay", response_model=OperationResult, tags=["Reservations"])
async def pay_reservation(
    reservation_id: UUID,
    engine: HotelEngine = Depends(get_engine)
):
    """Simulate payment for a reservation"""
    try:
        if not engine.pay(reservation_id):
            raise HTTPException(status_code=404, detail="Reservation not found")
    except StorageUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))
    return OperationResult(
        reservation_id=reservation_id,
        success=True,
        message="Payment successful. Reservation is now PAID."
    )

@app.post("/api/reservations/{reservation_id}/cancel", response_model=OperationResult, tags=["Reservations"])
async def cancel_reservation(
    reservation_id: UUID,
    engine: HotelEngine = Depends(get_engine)
):
    """Cancel reservation"""
    try:
        if not engine.cancel(reservation_id):
            raise HTTPException(status_code=404, detail="Reservation not found")
    except StorageUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))
    return OperationResult(
        reservation_id=reservation_id,
        success=True,
        message="Reservation canceled."
    )

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _room_to_response(room) -> RoomResponse:
    """Convert Room entity to RoomResponse"""
    return RoomResponse(
        room_id=room.room_id,
        room_type=room.room_type,
        price_per_night=room.price_per_night
    )

def _reservation_to_response(reservation) -> ReservationResponse:
    """Convert Reservation entity to ReservationResponse"""
    return ReservationResponse(
        reservation_id=reservation.reservation_id,
        guest_name=reservation.guest_name,
        room_id=reservation.room_id,
        check_in=reservation.check_in,
        check_out=reservation.check_out,
        nights=reservation.get_nights(),
        paid=reservation.paid,
        status=reservation.status,
        total_amount=reservation.total_amount
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
