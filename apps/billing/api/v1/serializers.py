"""
Serializers for the revenue API.
Field names follow the dashboard's camelCase JSON contract.
"""

from rest_framework import serializers


def _money(source):
    return serializers.DecimalField(
        source=source,
        max_digits=40,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )


class FormattedMoneyMixin:
    """Adds display strings produced by the conversion service in context."""

    def _format(self, amount, currency):
        return self.context["conversion_service"].format(amount, currency)


class RevenueBucketSerializer(FormattedMoneyMixin, serializers.Serializer):
    period = serializers.DateField(format="%Y-%m", read_only=True)
    month = serializers.CharField(source="label", read_only=True)
    currency = serializers.CharField(read_only=True)
    total = _money(None)
    documentCount = serializers.IntegerField(source="document_count", read_only=True)
    totalInvoices = _money("total_invoices")
    paidInvoices = _money("paid_invoices")
    receipts = _money(None)
    income = _money(None)
    formattedTotal = serializers.SerializerMethodField()

    def get_formattedTotal(self, obj) -> str | None:
        if not self.context["conversion_service"].is_supported(obj.currency):
            return None
        return self._format(obj.total, obj.currency)


class FinancialMetricsSerializer(FormattedMoneyMixin, serializers.Serializer):
    currency = serializers.CharField(read_only=True)
    period = serializers.DateField(format="%Y-%m", read_only=True)
    totalRevenue = _money("total_revenue")
    totalInvoices = _money("total_invoices")
    paidInvoices = _money("paid_invoices")
    pendingInvoices = _money("pending_invoices")
    totalReceipts = _money("total_receipts")
    collectionRate = _money("collection_rate")
    totalDocuments = serializers.IntegerField(source="total_documents", read_only=True)
    draftCount = serializers.IntegerField(source="draft_count", read_only=True)
    paidCount = serializers.IntegerField(source="paid_count", read_only=True)
    overdueCount = serializers.IntegerField(source="overdue_count", read_only=True)
    formattedTotalRevenue = serializers.SerializerMethodField()

    def get_formattedTotalRevenue(self, obj) -> str:
        return self._format(obj.total_revenue, obj.currency)


class RevenueStatsSerializer(serializers.Serializer):
    currency = serializers.CharField(read_only=True)
    currentMonth = serializers.CharField(source="current_month.label", read_only=True)
    previousMonth = serializers.CharField(source="previous_month.label", read_only=True)
    percentChange = _money("percent_change")
    collectionRate = _money("collection_rate")
