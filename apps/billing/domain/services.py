"""
Domain services - Core business logic.
Aggregates document amounts into revenue series and dashboard metrics.
"""

import logging
import time
from datetime import date

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from apps.billing.application.dto import (
    FinancialMetricsSnapshot,
    RevenueBucket,
    RevenueStats,
    ZERO,
)
from apps.billing.domain.errors import DataAccessError
from apps.billing.domain.periods import month_bounds, month_key, month_label, month_window
from apps.billing.infrastructure.persistence.models import (
    DocumentStatus,
    INVOICE_TYPES,
    RECEIPT_TYPES,
)
from apps.billing.infrastructure.persistence.repositories import DocumentRepository
from apps.currency.domain.services import CurrencyConversionService


logger = logging.getLogger(__name__)


class FinancialMetricsAggregator:
    """
    Domain service that turns raw document amounts into dashboard numbers.

    Flow for every request:
    1. Validate the display currency against the rate table
    2. Run read-only, user-scoped queries against the document store
    3. Normalise each amount to the display currency (unless native mode)
    4. Bucket and sum

    Any store failure or an exceeded time budget aborts the whole request
    with DataAccessError; partial results are never returned.
    """

    def __init__(
        self,
        conversion_service: CurrencyConversionService,
        repository=DocumentRepository,
        timeout: float | None = None,
        today: date | None = None
    ):
        self.conversion_service = conversion_service
        self.repository = repository
        self.timeout = settings.REVENUE_QUERY_TIMEOUT if timeout is None else timeout
        self._today = today

    def today(self) -> date:
        return self._today or timezone.localdate()

    def _deadline(self) -> float | None:
        if not self.timeout:
            return None
        return time.monotonic() + self.timeout

    def _query(self, deadline: float | None, query, *args, **kwargs):
        """Run one repository query, mapping store failures to DataAccessError."""
        try:
            result = query(*args, **kwargs)
        except DatabaseError as e:
            logger.error("Document query %s failed: %s", getattr(query, "__name__", query), e)
            raise DataAccessError("Document store query failed") from e

        if deadline is not None and time.monotonic() > deadline:
            logger.error("Document queries exceeded the %ss time budget", self.timeout)
            raise DataAccessError(f"Document store did not answer within {self.timeout}s")

        return result

    def fetch_revenue_series(
        self,
        user_id,
        window_months: int,
        display_currency: str,
        use_native_currency: bool = False
    ) -> list[RevenueBucket]:
        """
        Build monthly revenue buckets for the trailing window.

        Args:
            user_id: Owner of the documents
            window_months: Number of months, current month included
            display_currency: Currency every amount is converted to
            use_native_currency: Keep original currencies instead of converting

        Returns:
            Buckets ordered oldest month first. In converted mode there are
            exactly ``window_months`` buckets. In native mode every currency
            (the display currency plus each one found in the window) gets its
            own complete series, flattened in (period, currency) order.

        Raises:
            UnsupportedCurrencyError: display currency not in the rate table
            DataAccessError: the document store failed or timed out
            ValueError: window_months < 1
        """
        display_currency = self.conversion_service.get_rule(display_currency).code
        months = month_window(self.today(), window_months)
        date_from, date_to = month_bounds(months[0], months[-1])

        deadline = self._deadline()
        rows = self._query(deadline, self.repository.monthly_totals, user_id, date_from, date_to)

        if use_native_currency:
            currencies = sorted({display_currency} | {row["currency"] for row in rows})
        else:
            currencies = [display_currency]

        buckets = {
            (month, currency): RevenueBucket(period=month, label=month_label(month), currency=currency)
            for month in months
            for currency in currencies
        }

        for row in rows:
            tracking_currency = row["currency"] if use_native_currency else display_currency
            bucket = buckets.get((month_key(row["month"]), tracking_currency))
            if bucket is None:
                continue

            amount = row["total"] or ZERO
            if not use_native_currency:
                amount = self.conversion_service.convert(amount, row["currency"], display_currency)

            bucket.total += amount
            bucket.document_count += row["count"]

            if row["type"] in INVOICE_TYPES:
                bucket.total_invoices += amount
                if row["status"] == DocumentStatus.PAID:
                    bucket.paid_invoices += amount
            elif row["type"] in RECEIPT_TYPES:
                bucket.receipts += amount

        logger.debug(
            "Revenue series for user %s: %s months, currencies=%s, %s grouped rows",
            user_id, window_months, currencies, len(rows)
        )

        return [buckets[(month, currency)] for month in months for currency in currencies]

    def fetch_financial_metrics(self, user_id, display_currency: str) -> FinancialMetricsSnapshot:
        """
        Current-month totals and status counts in the display currency.

        The sum query and each count query are independent; no consistency
        is guaranteed between them under concurrent document changes.
        """
        display_currency = self.conversion_service.get_rule(display_currency).code
        current_month = self.today().replace(day=1)
        date_from, date_to = month_bounds(current_month, current_month)

        deadline = self._deadline()
        snapshot = FinancialMetricsSnapshot(currency=display_currency, period=current_month)

        rows = self._query(deadline, self.repository.totals, user_id, date_from, date_to)
        for row in rows:
            amount = self.conversion_service.convert(row["total"] or ZERO, row["currency"], display_currency)

            if row["type"] in INVOICE_TYPES:
                snapshot.total_invoices += amount
                if row["status"] == DocumentStatus.PAID:
                    snapshot.paid_invoices += amount
                else:
                    snapshot.pending_invoices += amount
            elif row["type"] in RECEIPT_TYPES:
                snapshot.total_receipts += amount

        count = self.repository.count
        snapshot.total_documents = self._query(deadline, count, user_id, None, date_from, date_to)
        snapshot.draft_count = self._query(deadline, count, user_id, DocumentStatus.DRAFT, date_from, date_to)
        snapshot.paid_count = self._query(deadline, count, user_id, DocumentStatus.PAID, date_from, date_to)
        snapshot.overdue_count = self._query(deadline, count, user_id, DocumentStatus.OVERDUE, date_from, date_to)

        return snapshot

    @staticmethod
    def calculate_revenue_stats(series: list[RevenueBucket], currency: str | None = None) -> RevenueStats | None:
        """
        Compare the last two months of a series.

        Returns:
            RevenueStats, or None when fewer than two buckets are available
        """
        if currency is not None:
            series = [bucket for bucket in series if bucket.currency == currency]

        if len(series) < 2:
            return None

        current_month, previous_month = series[-1], series[-2]

        percent_change = ZERO
        if previous_month.income > 0:
            percent_change = (current_month.income - previous_month.income) / previous_month.income * 100

        collection_rate = ZERO
        if current_month.total_invoices > 0:
            collection_rate = current_month.paid_invoices / current_month.total_invoices * 100

        return RevenueStats(
            current_month=current_month,
            previous_month=previous_month,
            percent_change=percent_change,
            collection_rate=collection_rate,
            currency=current_month.currency,
        )
