"""
Data Transfer Objects for the application layer.
DTOs decouple aggregation results from the API contract.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


ZERO = Decimal("0")


@dataclass
class RevenueBucket:
    """Totals for one calendar month, in a single currency."""
    period: date
    label: str
    currency: str
    total: Decimal = ZERO
    document_count: int = 0
    total_invoices: Decimal = ZERO
    paid_invoices: Decimal = ZERO
    receipts: Decimal = ZERO

    @property
    def income(self) -> Decimal:
        """Recognised income: receipts or paid invoices, whichever is larger."""
        return max(self.receipts, self.paid_invoices)


@dataclass
class FinancialMetricsSnapshot:
    """Current-month dashboard figures in the display currency."""
    currency: str
    period: date
    total_invoices: Decimal = ZERO
    paid_invoices: Decimal = ZERO
    pending_invoices: Decimal = ZERO
    total_receipts: Decimal = ZERO
    total_documents: int = 0
    draft_count: int = 0
    paid_count: int = 0
    overdue_count: int = 0

    @property
    def total_revenue(self) -> Decimal:
        """Recognised income for the month, same rule as RevenueBucket.income."""
        return max(self.total_receipts, self.paid_invoices)

    @property
    def collection_rate(self) -> Decimal:
        """Percentage of invoiced amount that was paid."""
        if self.total_invoices <= 0:
            return ZERO
        return self.paid_invoices / self.total_invoices * 100


@dataclass
class RevenueStats:
    """Month-over-month comparison of the last two buckets."""
    current_month: RevenueBucket
    previous_month: RevenueBucket
    percent_change: Decimal
    collection_rate: Decimal
    currency: Optional[str] = None
