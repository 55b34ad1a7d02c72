"""Domain Enums"""
from enum import Enum


class RoomType(str, Enum):
    STANDARD = "STANDARD"
    DELUXE = "DELUXE"
    SUITE = "SUITE"


class ReservationStatus(str, Enum):
    BOOKED = "BOOKED"
    PAID = "PAID"
