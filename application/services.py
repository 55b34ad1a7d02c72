"""Application Services - Business use cases"""
import logging
from uuid import UUID, uuid4
from datetime import date
from typing import Callable, List, Optional

from pydantic import ValidationError

from domain.repositories import RoomRepository, ReservationRepository
from domain.entities import Room, Reservation
from domain.enums import RoomType
from domain.exceptions import InvalidRoom, RoomUnavailable, InvalidDateRange, InvalidGuestName
from domain.value_objects import DateRange
from infrastructure.storage import CsvStorage

logger = logging.getLogger(__name__)


class AvailabilityService:
    """Service for availability queries over the live reservations"""

    def __init__(self, room_repo: RoomRepository, reservation_repo: ReservationRepository):
        self.room_repo = room_repo
        self.reservation_repo = reservation_repo

    def all_rooms(self) -> List[Room]:
        """Get the whole room catalog"""
        return self.room_repo.find_all()

    def is_available(self, room_id: int, check_in: date, check_out: date) -> bool:
        """Check that no live reservation on the room overlaps [check_in, check_out)"""
        for reservation in self.reservation_repo.find_by_room_id(room_id):
            if reservation.overlaps(check_in, check_out):
                return False
        return True

    def find_available(
        self,
        room_type: Optional[RoomType],
        check_in: date,
        check_out: date
    ) -> List[Room]:
        """Get free rooms, optionally of one type, sorted by room id"""
        available = [
            room for room in self.room_repo.find_all()
            if (room_type is None or room.room_type == room_type)
            and self.is_available(room.room_id, check_in, check_out)
        ]
        return sorted(available, key=lambda r: r.room_id)


class ReservationService:
    """Service for Reservation business use cases.

    Every successful mutation is followed by a full rewrite of the
    reservation record set when a storage is attached.
    """

    def __init__(self,
                 repository: ReservationRepository,
                 room_repo: RoomRepository,
                 availability: AvailabilityService,
                 storage: Optional[CsvStorage] = None,
                 id_factory: Callable[[], UUID] = uuid4):
        self.repository = repository
        self.room_repo = room_repo
        self.availability = availability
        self.storage = storage
        self.id_factory = id_factory

    def _persist(self) -> None:
        if self.storage is not None:
            self.storage.save_reservations(self.repository.find_all())

    def book(
        self,
        guest_name: str,
        room_id: int,
        check_in: date,
        check_out: date
    ) -> Reservation:
        """Create new reservation with full validation"""
        room = self.room_repo.find_by_id(room_id)
        if room is None:
            logger.warning("Booking rejected: room %s does not exist", room_id)
            raise InvalidRoom(room_id)

        if not self.availability.is_available(room_id, check_in, check_out):
            logger.warning("Booking rejected: room %s taken for %s -> %s", room_id, check_in, check_out)
            raise RoomUnavailable(room_id, check_in, check_out)

        if check_out <= check_in:
            logger.warning("Booking rejected: bad date range %s -> %s", check_in, check_out)
            raise InvalidDateRange(check_in, check_out)

        try:
            reservation = Reservation.create(
                guest_name=guest_name,
                room=room,
                date_range=DateRange(check_in=check_in, check_out=check_out),
                reservation_id=self.id_factory()
            )
        except ValidationError:
            logger.warning("Booking rejected: guest name %r cannot be stored", guest_name)
            raise InvalidGuestName(guest_name)

        self.repository.save(reservation)
        self._persist()

        logger.info(
            "Booked reservation %s: room %s, %s -> %s, total %s",
            reservation.reservation_id, room_id, check_in, check_out, reservation.total_amount
        )
        return reservation

    def cancel(self, reservation_id: UUID) -> bool:
        """Cancel reservation. Returns False if it does not exist."""
        if not self.repository.delete(reservation_id):
            return False
        self._persist()
        logger.info("Canceled reservation %s", reservation_id)
        return True

    def pay(self, reservation_id: UUID) -> bool:
        """Simulate payment. Returns False if the reservation does not exist."""
        reservation = self.repository.find_by_id(reservation_id)
        if reservation is None:
            return False

        if reservation.pay():
            self._persist()
            logger.info("Reservation %s paid (%s)", reservation_id, reservation.total_amount)
        return True

    def get(self, reservation_id: UUID) -> Optional[Reservation]:
        """Get reservation by ID"""
        return self.repository.find_by_id(reservation_id)

    def list_all(self) -> List[Reservation]:
        """Get all reservations, first booked first"""
        return self.repository.find_all()
