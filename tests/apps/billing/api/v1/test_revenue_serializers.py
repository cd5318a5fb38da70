from decimal import Decimal
from datetime import date

from apps.billing.api.v1.serializers import FinancialMetricsSerializer, RevenueBucketSerializer
from apps.billing.application.dto import FinancialMetricsSnapshot, RevenueBucket


class TestRevenueSerializers:
    """Serializers must represent the largest totals the document store can produce."""

    def test_bucket_with_large_converted_total(self, conversion_service):
        # Largest storable document amount, converted from USD to UGX
        total = Decimal("9999999999999999.99") * 3750
        bucket = RevenueBucket(
            period=date(2025, 3, 1),
            label="Mar 2025",
            currency="UGX",
            total=total,
            document_count=1,
        )

        data = RevenueBucketSerializer(bucket, context={"conversion_service": conversion_service}).data

        assert data["total"] == Decimal("37499999999999999962.50")
        assert data["period"] == "2025-03"
        assert data["formattedTotal"].endswith("37,499,999,999,999,999,962")

    def test_metrics_field_names(self, conversion_service):
        snapshot = FinancialMetricsSnapshot(
            currency="USD",
            period=date(2025, 3, 1),
            total_invoices=Decimal("200"),
            paid_invoices=Decimal("150"),
            total_receipts=Decimal("20"),
        )

        data = FinancialMetricsSerializer(snapshot, context={"conversion_service": conversion_service}).data

        assert data["totalRevenue"] == Decimal("150")
        assert data["collectionRate"] == Decimal("75")
        assert data["formattedTotalRevenue"] == "$150.00"
