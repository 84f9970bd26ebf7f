"""Application service: Build Seller Dashboard use case (query).

Sequences the date window resolver, the three data-store reads and the two
ledger reductions.  Data-store failures propagate untouched: the caller gets
either a complete dashboard or an exception, never a partial result.
"""

from __future__ import annotations

import logging
from datetime import datetime

from sellerdash.application.dto import DashboardDTO
from sellerdash.domain.repository.book_repository import BookRepository
from sellerdash.domain.repository.order_repository import OrderRepository
from sellerdash.domain.service.date_window_resolver import DateWindowResolver
from sellerdash.domain.service.seller_ledger_aggregator import (
    SellerLedgerAggregator,
)

logger = logging.getLogger(__name__)


class BuildDashboardHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        book_repo: BookRepository,
        resolver: DateWindowResolver | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._book_repo = book_repo
        self._resolver = resolver or DateWindowResolver()

    def handle(
        self,
        seller_id: str,
        raw_start: str | None = None,
        raw_end: str | None = None,
        now: datetime | None = None,
    ) -> DashboardDTO:
        """Build the dashboard for *seller_id*.

        Steps:
        1. Resolve the window (never fails; falls back to the last 30 days).
        2. Count the seller's catalog and fetch the summary and detail sets.
        3. Reduce each set independently with the same aggregator so both
           report identical seller earnings.
        """
        window = self._resolver.resolve(raw_start, raw_end, now)
        logger.debug("Building dashboard for seller %s over %s", seller_id, window)

        available_books = self._book_repo.count_by_seller(seller_id)
        summary_orders = self._order_repo.find_summary_orders(seller_id, window)
        detail_orders = self._order_repo.find_detail_orders(seller_id, window)
        logger.debug(
            "Seller %s: %d summary orders, %d detail orders, %d books",
            seller_id,
            len(summary_orders),
            len(detail_orders),
            available_books,
        )

        aggregator = SellerLedgerAggregator(seller_id)
        summary = aggregator.summarize(summary_orders, available_books)
        orders = aggregator.project(detail_orders)

        anomalies = aggregator.anomalies
        if anomalies.total:
            logger.info(
                "Seller %s dashboard absorbed %d record anomalies "
                "(missing shares=%d, missing books=%d, missing buyers=%d, "
                "duplicate orders=%d)",
                seller_id,
                anomalies.total,
                anomalies.missing_shares,
                anomalies.missing_books,
                anomalies.missing_buyers,
                anomalies.duplicate_orders,
            )

        return DashboardDTO(
            seller_id=str(seller_id),
            window=window,
            summary=summary,
            orders=orders,
            anomalies=anomalies,
        )
