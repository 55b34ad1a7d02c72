"""Domain Entities - Aggregates"""
from pydantic import BaseModel, Field, validator
from uuid import UUID, uuid4
from datetime import date
from decimal import Decimal

from domain.enums import RoomType, ReservationStatus
from domain.value_objects import DateRange


class Room(BaseModel):
    """Bookable unit of the room catalog"""

    room_id: int = Field(gt=0)
    room_type: RoomType
    price_per_night: Decimal = Field(ge=0)

    class Config:
        frozen = True
        from_attributes = True

    def price_for(self, date_range: DateRange) -> Decimal:
        """Flat nightly price times number of nights"""
        return self.price_per_night * date_range.nights()


class Reservation(BaseModel):
    """Reservation Aggregate Root Entity"""

    # Identity
    reservation_id: UUID = Field(default_factory=uuid4, frozen=True)

    guest_name: str = Field(frozen=True)

    # Weak reference to the catalog, never an object link
    room_id: int = Field(gt=0, frozen=True)

    date_range: DateRange = Field(frozen=True)
    total_amount: Decimal = Field(ge=0, frozen=True)

    # Only field that changes after creation
    paid: bool = False

    class Config:
        from_attributes = True

    @validator('guest_name')
    def strip_field_delimiters(cls, v):
        # Stored one record per line, comma separated
        for ch in (",", "\r", "\n"):
            v = v.replace(ch, " ")
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("Guest name must be valid UTF-8 text")
        return v

    # ==================== FACTORY METHOD ====================
    @staticmethod
    def create(
        guest_name: str,
        room: Room,
        date_range: DateRange,
        reservation_id: UUID
    ) -> "Reservation":
        """Create new unpaid reservation priced from the room's nightly rate"""
        return Reservation(
            reservation_id=reservation_id,
            guest_name=guest_name,
            room_id=room.room_id,
            date_range=date_range,
            total_amount=room.price_for(date_range),
            paid=False
        )

    # ==================== STATE TRANSITION METHODS ====================
    def pay(self) -> bool:
        """Mark as paid. Returns False when it was already paid."""
        if self.paid:
            return False
        self.paid = True
        return True

    # ==================== QUERY METHODS ====================
    @property
    def check_in(self) -> date:
        return self.date_range.check_in

    @property
    def check_out(self) -> date:
        return self.date_range.check_out

    @property
    def status(self) -> ReservationStatus:
        return ReservationStatus.PAID if self.paid else ReservationStatus.BOOKED

    def get_nights(self) -> int:
        """Get number of nights"""
        return self.date_range.nights()

    def overlaps(self, check_in: date, check_out: date) -> bool:
        return self.date_range.overlaps(check_in, check_out)
