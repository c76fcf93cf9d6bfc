"""
Unit tests for BoxOfficeQueryRepoImpl against the in-memory row source.
"""

from decimal import Decimal

import pytest

from src.platform.exception.exceptions import MappingError, QueryTimeoutError
from src.service.box_office.driven_adapter.repo.box_office_query_repo_impl import (
    BoxOfficeQueryRepoImpl,
)


@pytest.fixture
def repo(populated_row_source) -> BoxOfficeQueryRepoImpl:
    return BoxOfficeQueryRepoImpl(row_source=populated_row_source, query_timeout=1.5)


class TestBoxOfficeQueryRepo:
    @pytest.mark.asyncio
    async def test_event_id_is_bound_not_interpolated(self, repo, populated_row_source):
        await repo.list_seats(event_id="E1'; DROP TABLE seat; --")

        request = populated_row_source.requests[-1]
        assert request.name == 'select_seats'
        assert request.params == ("E1'; DROP TABLE seat; --",)
        assert 'DROP TABLE' not in request.sql

    @pytest.mark.asyncio
    async def test_list_seats_keeps_source_order(self, repo):
        seats = await repo.list_seats(event_id='E1')

        assert [seat.seat_id for seat in seats] == ['A1', 'A2', 'A3', 'A4', 'A5']

    @pytest.mark.asyncio
    async def test_unknown_event_has_no_rows(self, repo):
        assert await repo.list_seats(event_id='E404') == []
        assert await repo.get_ticket_sales_summary(event_id='E404') is None
        assert await repo.get_event_metadata(event_id='E404') is None

    @pytest.mark.asyncio
    async def test_summary_and_refunds(self, repo):
        summary = await repo.get_ticket_sales_summary(event_id='E1')
        refunds = await repo.list_refunds(event_id='E1')

        assert summary.total_revenue == Decimal('90.50')
        assert [refund.amount for refund in refunds] == [Decimal('45.25'), Decimal('10.00')]

    @pytest.mark.asyncio
    async def test_one_bad_row_fails_the_whole_call(self, repo, populated_row_source):
        populated_row_source.add(
            'select_seats',
            {
                'event_id': 'E1',
                'seat_id': 'A6',
                'seat_status': 'SOLD',
                'restricted_view': None,
                'wheelchair_accessible': False,
            },
        )

        with pytest.raises(MappingError) as exc_info:
            await repo.list_seats(event_id='E1')

        assert exc_info.value.row_index == 5
        assert exc_info.value.column == 'restricted_view'

    @pytest.mark.asyncio
    async def test_row_source_errors_propagate(self, repo, populated_row_source):
        populated_row_source.errors['select_refunds'] = QueryTimeoutError('slow')

        with pytest.raises(QueryTimeoutError):
            await repo.list_refunds(event_id='E1')
