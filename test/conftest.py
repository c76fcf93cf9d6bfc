"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (set before any application import)
- An in-memory row source standing in for PostgreSQL
- A FastAPI TestClient whose container resolves the in-memory row source

No test here needs a running database.
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are built at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')
    os.environ.setdefault('SEAT_GRID_ROWS', '5')
    os.environ.setdefault('SEAT_GRID_COLUMNS', '5')
    os.environ.setdefault('SEAT_GRID_OVERFLOW_POLICY', 'reject')
    os.environ.setdefault('BULK_BOOKING_MIN_QUANTITY', '12')


_early_setup_test_environment()

from collections.abc import AsyncIterator, Generator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402
import threading  # noqa: E402
from typing import Any, Callable, Dict, List, Optional  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.app_factory import create_app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from src.service.shared_kernel.app.interface.i_row_source import IRowSource, Row  # noqa: E402
from src.service.shared_kernel.domain.value_object.query_request import (  # noqa: E402
    QueryRequest,
)


class InMemoryRowSource(IRowSource):
    """
    Row source answering from canned rows keyed by request name.

    Requests whose SQL carries one of the filters in `FILTERS` only see the rows
    that pass it against $1; any other request gets every row under its name.
    `errors` maps a request name to the exception it should raise.
    """

    FILTERS: Dict[str, Callable[[Row, Any], bool]] = {
        'event_id = $1': lambda row, value: row['event_id'] == value,
        'booking_date = $1': lambda row, value: row['booking_date'] == value,
        'quantity >= $1': lambda row, value: row['quantity'] >= value,
        'friend_member = $1': lambda row, value: row['friend_member'] == value,
    }

    def __init__(self) -> None:
        self.rows: Dict[str, List[Row]] = {}
        self.errors: Dict[str, Exception] = {}
        self.requests: List[QueryRequest] = []
        self._lock = threading.Lock()

    def add(self, name: str, *rows: Row) -> None:
        self.rows.setdefault(name, []).extend(rows)

    def _matching(self, request: QueryRequest) -> List[Row]:
        with self._lock:
            self.requests.append(request)
        if request.name in self.errors:
            raise self.errors[request.name]
        rows = self.rows.get(request.name, [])
        for fragment, keep in self.FILTERS.items():
            if fragment in request.sql:
                rows = [row for row in rows if keep(row, request.params[0])]
        return [dict(row) for row in rows]

    async def fetch_all(
        self, request: QueryRequest, *, timeout: Optional[float] = None
    ) -> List[Row]:
        return self._matching(request)

    async def fetch_one(
        self, request: QueryRequest, *, timeout: Optional[float] = None
    ) -> Optional[Row]:
        rows = self._matching(request)
        return rows[0] if rows else None


@pytest.fixture
def row_source() -> InMemoryRowSource:
    return InMemoryRowSource()


@pytest.fixture
def seat_rows() -> List[Dict[str, Any]]:
    """Five seats for event E1: two sold, two available, one reserved."""
    return [
        {
            'event_id': 'E1',
            'seat_id': 'A1',
            'seat_status': 'SOLD',
            'restricted_view': 'NONE',
            'wheelchair_accessible': True,
        },
        {
            'event_id': 'E1',
            'seat_id': 'A2',
            'seat_status': 'AVAILABLE',
            'restricted_view': 'BLOCKED',
            'wheelchair_accessible': False,
        },
        {
            'event_id': 'E1',
            'seat_id': 'A3',
            'seat_status': 'SOLD',
            'restricted_view': 'MINOR',
            'wheelchair_accessible': False,
        },
        {
            'event_id': 'E1',
            'seat_id': 'A4',
            'seat_status': 'RESERVED',
            'restricted_view': 'NONE',
            'wheelchair_accessible': True,
        },
        {
            'event_id': 'E1',
            'seat_id': 'A5',
            'seat_status': 'AVAILABLE',
            'restricted_view': 'PARTIAL',
            'wheelchair_accessible': False,
        },
    ]


@pytest.fixture
def populated_row_source(
    row_source: InMemoryRowSource, seat_rows: List[Dict[str, Any]]
) -> InMemoryRowSource:
    row_source.add('select_seats', *seat_rows)
    row_source.add(
        'select_ticket_sales',
        {
            'event_id': 'E1',
            'total_tickets_sold': 2,
            'total_seats_available': 5,
            'accessible_seats_sold': 1,
            'total_accessible_seats': 2,
            'total_revenue': '90.50',
        },
    )
    row_source.add(
        'select_event_metadata',
        {
            'event_id': 'E1',
            'event_name': 'Spring Concert',
            'venue_name': 'Great Hall',
            'starts_at': '2025-03-01T19:30:00',
            'capacity': 5,
        },
    )
    row_source.add(
        'select_check_ins',
        {'event_id': 'E1', 'ticket_id': 'T1', 'check_in_time': '2025-03-01T19:00:00'},
        {'event_id': 'E1', 'ticket_id': 'T2', 'check_in_time': '2025-03-01T19:05:00'},
    )
    row_source.add(
        'select_refunds',
        {
            'event_id': 'E1',
            'ticket_id': 'T9',
            'refund_date': '2025-02-20T10:00:00',
            'refund_amount': '45.25',
            'refund_reason': 'Illness',
        },
        {
            'event_id': 'E1',
            'ticket_id': 'T8',
            'refund_date': '2025-02-21T10:00:00',
            'refund_amount': '10.00',
            'refund_reason': None,
        },
    )
    return row_source


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """Wire DI only; the row source is overridden per test."""
    container.wire(modules=WIRE_MODULES)
    yield
    container.unwire()


@pytest.fixture
def client(populated_row_source: InMemoryRowSource) -> Generator[TestClient, None, None]:
    app = create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')
    container.reset_singletons()
    with container.row_source.override(populated_row_source):
        with TestClient(app) as test_client:
            yield test_client
    container.reset_singletons()
