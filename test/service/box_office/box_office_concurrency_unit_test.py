"""
Reports requested from several threads at once, each thread on its own event loop.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from src.service.box_office.app.query.get_refund_info_use_case import GetRefundInfoUseCase
from src.service.box_office.app.query.get_ticket_sales_use_case import GetTicketSalesUseCase
from src.service.box_office.driven_adapter.repo.box_office_query_repo_impl import (
    BoxOfficeQueryRepoImpl,
)


class TestConcurrentReports:
    def test_parallel_sales_and_refund_reports_agree(self, populated_row_source):
        """
        GIVEN: one repository shared by eight threads
        WHEN: each thread runs the sales and refund reports for E1 on its own loop
        THEN: every thread sees the same totals
        """
        repo = BoxOfficeQueryRepoImpl(row_source=populated_row_source)
        sales_use_case = GetTicketSalesUseCase(repo)
        refund_use_case = GetRefundInfoUseCase(repo)

        async def both_reports():
            sales = await sales_use_case.get_ticket_sales('E1')
            refunds = await refund_use_case.get_refund_info('E1')
            return sales, refunds

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: asyncio.run(both_reports()), range(8)))

        first_sales, first_refunds = results[0]
        assert first_sales.total_revenue == Decimal('90.50')
        assert first_refunds.total_refunded == Decimal('55.25')
        for sales, refunds in results:
            assert sales == first_sales
            assert refunds == first_refunds
        assert len(populated_row_source.requests) == 8 * 3
