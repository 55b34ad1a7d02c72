"""Reservation engine facade: one instance owns its catalog, store and storage"""
import logging
from pathlib import Path
from uuid import UUID, uuid4
from datetime import date
from typing import Callable, List, Optional, Union

from application.services import AvailabilityService, ReservationService
from domain.entities import Room, Reservation
from domain.enums import RoomType
from infrastructure.repositories.in_memory_repositories import (
    InMemoryRoomRepository, InMemoryReservationRepository
)
from infrastructure.storage import CsvStorage

logger = logging.getLogger(__name__)


class HotelEngine:
    """Entry point used by the HTTP layer.

    Call init() before anything else: it seeds missing files and loads
    both record sets, raising StorageUnavailable or MalformedRecord on
    failure. Nothing is kept from a failed load.
    """

    def __init__(self,
                 data_dir: Union[str, Path],
                 rooms_file: str = "rooms.csv",
                 reservations_file: str = "reservations.csv",
                 id_factory: Callable[[], UUID] = uuid4):
        self.storage = CsvStorage(data_dir, rooms_file, reservations_file)
        self.room_repo = InMemoryRoomRepository()
        self.reservation_repo = InMemoryReservationRepository()
        self.availability = AvailabilityService(self.room_repo, self.reservation_repo)
        self.reservations = ReservationService(
            self.reservation_repo,
            self.room_repo,
            self.availability,
            storage=self.storage,
            id_factory=id_factory
        )

    def init(self) -> None:
        self.storage.init()
        rooms = self.storage.load_rooms()
        reservations = self.storage.load_reservations(
            room_ids={room.room_id for room in rooms}
        )

        self.room_repo.clear()
        for room in rooms:
            self.room_repo.save(room)
        self.reservation_repo.clear()
        for reservation in reservations:
            self.reservation_repo.save(reservation)

        logger.info("Engine ready: %d rooms, %d reservations", len(rooms), len(reservations))

    # ==================== READ PATH ====================
    def all_rooms(self) -> List[Room]:
        return self.availability.all_rooms()

    def is_available(self, room_id: int, check_in: date, check_out: date) -> bool:
        return self.availability.is_available(room_id, check_in, check_out)

    def find_available(self, room_type: Optional[RoomType], check_in: date, check_out: date) -> List[Room]:
        return self.availability.find_available(room_type, check_in, check_out)

    def get(self, reservation_id: UUID) -> Optional[Reservation]:
        return self.reservations.get(reservation_id)

    def list_all(self) -> List[Reservation]:
        return self.reservations.list_all()

    # ==================== WRITE PATH ====================
    def book(self, guest_name: str, room_id: int, check_in: date, check_out: date) -> Reservation:
        return self.reservations.book(guest_name, room_id, check_in, check_out)

    def cancel(self, reservation_id: UUID) -> bool:
        return self.reservations.cancel(reservation_id)

    def pay(self, reservation_id: UUID) -> bool:
        return self.reservations.pay(reservation_id)
