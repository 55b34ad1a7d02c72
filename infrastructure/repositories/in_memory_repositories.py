"""In-Memory Repository Implementations"""
from typing import Optional, List, Dict
from uuid import UUID

from domain.repositories import RoomRepository, ReservationRepository
from domain.entities import Room, Reservation


class InMemoryRoomRepository(RoomRepository):
    """In-memory implementation of RoomRepository"""

    def __init__(self):
        self._storage: Dict[int, Room] = {}

    def save(self, room: Room) -> Room:
        """Save room to memory"""
        self._storage[room.room_id] = room
        return room

    def find_by_id(self, room_id: int) -> Optional[Room]:
        """Find room by ID"""
        return self._storage.get(room_id)

    def find_all(self) -> List[Room]:
        """Find all rooms"""
        return list(self._storage.values())

    def clear(self) -> None:
        self._storage.clear()


class InMemoryReservationRepository(ReservationRepository):
    """In-memory implementation of ReservationRepository.

    Backed by a dict, so iteration follows insertion order.
    """

    def __init__(self):
        self._storage: Dict[UUID, Reservation] = {}

    def save(self, reservation: Reservation) -> Reservation:
        """Save reservation to memory"""
        self._storage[reservation.reservation_id] = reservation
        return reservation

    def find_by_id(self, reservation_id: UUID) -> Optional[Reservation]:
        """Find reservation by ID"""
        return self._storage.get(reservation_id)

    def find_by_room_id(self, room_id: int) -> List[Reservation]:
        """Find live reservations on a room"""
        return [r for r in self._storage.values() if r.room_id == room_id]

    def find_all(self) -> List[Reservation]:
        """Find all reservations"""
        return list(self._storage.values())

    def delete(self, reservation_id: UUID) -> bool:
        """Delete reservation"""
        if reservation_id in self._storage:
            del self._storage[reservation_id]
            return True
        return False

    def clear(self) -> None:
        self._storage.clear()
