"""
Seat Configuration Aggregate

Places an event's seats into a fixed-width positional grid and derives the
accessibility and blocked-view counters.

[Invariants]
- Counters equal sums over the placed (deduplicated) seat set
- Cell (r, c) holds the placed seat at index r * columns + c
- Cells with no seat hold None
- A seat id appearing more than once is placed once; later copies are
  listed in duplicate_seat_ids
"""

import math
from typing import Iterable, List, Optional, Self, Tuple

import attrs

from src.platform.exception.exceptions import SeatGridOverflowError
from src.platform.logging.loguru_io import Logger
from src.service.box_office.domain.entity.seat_entity import Seat
from src.service.box_office.domain.enum.grid_overflow_policy import GridOverflowPolicy


SeatGrid = Tuple[Tuple[Optional[Seat], ...], ...]


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise ValueError(f'Grid {attribute.name} must be >= 1')


@attrs.frozen
class GridShape:
    rows: int = attrs.field(validator=_validate_positive)
    columns: int = attrs.field(validator=_validate_positive)

    @property
    def capacity(self) -> int:
        return self.rows * self.columns


@attrs.frozen
class SeatConfiguration:
    event_id: str
    rows: int
    columns: int
    grid: SeatGrid
    total_accessible_seats: int
    total_blocked_seats: int
    duplicate_seat_ids: Tuple[str, ...] = ()

    @property
    def seats(self) -> Tuple[Seat, ...]:
        """Placed seats in row-major order."""
        return tuple(seat for row in self.grid for seat in row if seat is not None)

    def seat_at(self, row: int, column: int) -> Optional[Seat]:
        return self.grid[row][column]

    @classmethod
    @Logger.io(truncate_content=True)
    def build(
        cls,
        *,
        event_id: str,
        seats: Iterable[Seat],
        shape: GridShape,
        overflow_policy: GridOverflowPolicy = GridOverflowPolicy.REJECT,
    ) -> Self:
        placed: List[Seat] = []
        seen: set[str] = set()
        duplicates: List[str] = []
        accessible = 0
        blocked = 0

        for seat in seats:
            if seat.seat_id in seen:
                duplicates.append(seat.seat_id)
                continue
            seen.add(seat.seat_id)
            placed.append(seat)
            if seat.wheelchair_accessible:
                accessible += 1
            if seat.is_view_blocked:
                blocked += 1

        if duplicates:
            Logger.base.warning(
                f'[SEATING] Event {event_id}: skipped {len(duplicates)} duplicate seat rows '
                f'{duplicates}'
            )

        rows = cls._resolve_row_count(
            event_id=event_id, seat_count=len(placed), shape=shape, policy=overflow_policy
        )
        columns = shape.columns
        cells: List[List[Optional[Seat]]] = [[None] * columns for _ in range(rows)]
        for index, seat in enumerate(placed):
            cells[index // columns][index % columns] = seat

        return cls(
            event_id=event_id,
            rows=rows,
            columns=columns,
            grid=tuple(tuple(row) for row in cells),
            total_accessible_seats=accessible,
            total_blocked_seats=blocked,
            duplicate_seat_ids=tuple(duplicates),
        )

    @staticmethod
    def _resolve_row_count(
        *, event_id: str, seat_count: int, shape: GridShape, policy: GridOverflowPolicy
    ) -> int:
        if seat_count <= shape.capacity:
            return shape.rows
        if policy is GridOverflowPolicy.EXPAND:
            return math.ceil(seat_count / shape.columns)
        raise SeatGridOverflowError(
            f'Event {event_id} has {seat_count} seats but the '
            f'{shape.rows}x{shape.columns} grid holds {shape.capacity}'
        )
