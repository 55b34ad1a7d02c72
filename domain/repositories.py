"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional, List
from uuid import UUID

from domain.entities import Room, Reservation


class RoomRepository(ABC):
    """Repository interface for the Room catalog"""

    @abstractmethod
    def save(self, room: Room) -> Room:
        """Save room"""
        pass

    @abstractmethod
    def find_by_id(self, room_id: int) -> Optional[Room]:
        """Find room by ID"""
        pass

    @abstractmethod
    def find_all(self) -> List[Room]:
        """Find all rooms"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every room"""
        pass


class ReservationRepository(ABC):
    """Repository interface for Reservation Aggregate"""

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        """Save reservation"""
        pass

    @abstractmethod
    def find_by_id(self, reservation_id: UUID) -> Optional[Reservation]:
        """Find reservation by ID"""
        pass

    @abstractmethod
    def find_by_room_id(self, room_id: int) -> List[Reservation]:
        """Find live reservations on a room"""
        pass

    @abstractmethod
    def find_all(self) -> List[Reservation]:
        """Find all reservations in insertion order"""
        pass

    @abstractmethod
    def delete(self, reservation_id: UUID) -> bool:
        """Delete reservation"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every reservation"""
        pass
