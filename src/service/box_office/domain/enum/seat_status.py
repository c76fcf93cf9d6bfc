from enum import StrEnum


class SeatStatus(StrEnum):
    AVAILABLE = 'AVAILABLE'
    SOLD = 'SOLD'
    RESERVED = 'RESERVED'
    BLOCKED = 'BLOCKED'
