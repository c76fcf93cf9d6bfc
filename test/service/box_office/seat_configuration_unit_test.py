"""
Unit tests for SeatConfiguration.build

Covers positional placement, counters, duplicate seat rows and both grid
overflow policies.
"""

import pytest

from src.platform.exception.exceptions import SeatGridOverflowError
from src.service.box_office.domain.aggregate.seat_configuration import (
    GridShape,
    SeatConfiguration,
)
from src.service.box_office.domain.entity.seat_entity import Seat
from src.service.box_office.domain.enum.grid_overflow_policy import GridOverflowPolicy
from src.service.box_office.domain.enum.restricted_view_type import RestrictedViewType
from src.service.box_office.domain.enum.seat_status import SeatStatus


def make_seat(
    seat_id: str,
    *,
    status: SeatStatus = SeatStatus.AVAILABLE,
    view: RestrictedViewType = RestrictedViewType.NONE,
    accessible: bool = False,
) -> Seat:
    return Seat(
        seat_id=seat_id, status=status, restricted_view=view, wheelchair_accessible=accessible
    )


@pytest.fixture
def shape() -> GridShape:
    return GridShape(rows=5, columns=5)


class TestPlacement:
    def test_seats_fill_row_major(self, shape: GridShape):
        seats = [make_seat(f'S{n}') for n in range(7)]

        configuration = SeatConfiguration.build(event_id='E1', seats=seats, shape=shape)

        assert (configuration.rows, configuration.columns) == (5, 5)
        assert configuration.seat_at(0, 0).seat_id == 'S0'
        assert configuration.seat_at(0, 4).seat_id == 'S4'
        assert configuration.seat_at(1, 0).seat_id == 'S5'
        assert configuration.seat_at(1, 1).seat_id == 'S6'

    def test_unfilled_cells_are_empty(self, shape: GridShape):
        configuration = SeatConfiguration.build(
            event_id='E1', seats=[make_seat('A1')], shape=shape
        )

        assert configuration.seat_at(0, 1) is None
        assert configuration.seat_at(4, 4) is None
        assert len(configuration.seats) == 1

    def test_full_grid_fits_exactly(self, shape: GridShape):
        seats = [make_seat(f'S{n}') for n in range(25)]

        configuration = SeatConfiguration.build(event_id='E1', seats=seats, shape=shape)

        assert configuration.seat_at(4, 4).seat_id == 'S24'


class TestCounters:
    def test_accessible_and_blocked_counts(self, shape: GridShape):
        """
        GIVEN: seats with mixed accessibility and restricted view
        WHEN: building the configuration
        THEN: only BLOCKED views count as blocked, MINOR and PARTIAL do not
        """
        seats = [
            make_seat('A1', accessible=True),
            make_seat('A2', view=RestrictedViewType.BLOCKED),
            make_seat('A3', view=RestrictedViewType.MINOR, accessible=True),
            make_seat('A4', view=RestrictedViewType.PARTIAL),
            make_seat('A5', view=RestrictedViewType.BLOCKED, accessible=True),
        ]

        configuration = SeatConfiguration.build(event_id='E1', seats=seats, shape=shape)

        assert configuration.total_accessible_seats == 3
        assert configuration.total_blocked_seats == 2

    def test_counters_match_placed_seats(self, shape: GridShape):
        seats = [make_seat(f'S{n}', accessible=n % 2 == 0) for n in range(10)]

        configuration = SeatConfiguration.build(event_id='E1', seats=seats, shape=shape)

        placed = configuration.seats
        assert configuration.total_accessible_seats == sum(
            1 for s in placed if s.wheelchair_accessible
        )
        assert configuration.total_blocked_seats == sum(1 for s in placed if s.is_view_blocked)


class TestDuplicateSeats:
    def test_first_occurrence_wins(self, shape: GridShape):
        seats = [
            make_seat('A1', accessible=True),
            make_seat('A2'),
            make_seat('A1', status=SeatStatus.SOLD, accessible=False),
        ]

        configuration = SeatConfiguration.build(event_id='E1', seats=seats, shape=shape)

        assert [s.seat_id for s in configuration.seats] == ['A1', 'A2']
        assert configuration.seat_at(0, 0).status is SeatStatus.AVAILABLE
        assert configuration.total_accessible_seats == 1
        assert configuration.duplicate_seat_ids == ('A1',)


class TestOverflow:
    def test_reject_raises(self, shape: GridShape):
        seats = [make_seat(f'S{n}') for n in range(26)]

        with pytest.raises(SeatGridOverflowError) as exc_info:
            SeatConfiguration.build(event_id='E1', seats=seats, shape=shape)

        assert exc_info.value.status_code == 422
        assert '26 seats' in exc_info.value.message

    def test_expand_adds_rows(self, shape: GridShape):
        seats = [make_seat(f'S{n}') for n in range(26)]

        configuration = SeatConfiguration.build(
            event_id='E1',
            seats=seats,
            shape=shape,
            overflow_policy=GridOverflowPolicy.EXPAND,
        )

        assert (configuration.rows, configuration.columns) == (6, 5)
        assert configuration.seat_at(5, 0).seat_id == 'S25'
        assert configuration.seat_at(5, 1) is None

    def test_duplicates_do_not_count_toward_capacity(self, shape: GridShape):
        seats = [make_seat(f'S{n}') for n in range(25)] + [make_seat('S0')]

        configuration = SeatConfiguration.build(event_id='E1', seats=seats, shape=shape)

        assert configuration.rows == 5
        assert configuration.duplicate_seat_ids == ('S0',)


class TestGridShape:
    @pytest.mark.parametrize('rows, columns', [(0, 5), (5, 0)])
    def test_shape_must_be_positive(self, rows: int, columns: int):
        with pytest.raises(ValueError):
            GridShape(rows=rows, columns=columns)
