import pytest
from decimal import Decimal
from datetime import date, datetime

from django.utils import timezone

from apps.billing.domain.periods import month_bounds
from apps.billing.infrastructure.persistence.models import DocumentStatus, DocumentType
from apps.billing.infrastructure.persistence.repositories import DocumentRepository


def aware(*args):
    return timezone.make_aware(datetime(*args))


@pytest.mark.django_db
class TestDocumentRepository:
    """Tests for DocumentRepository."""

    @pytest.fixture
    def window(self):
        return month_bounds(date(2025, 1, 1), date(2025, 2, 1))

    def test_monthly_totals_groups_by_month_currency_type_status(self, user, make_document, window):
        make_document(created_at=aware(2025, 1, 5), total_amount=Decimal("100"))
        make_document(created_at=aware(2025, 1, 20), total_amount=Decimal("50"))
        make_document(created_at=aware(2025, 2, 3), total_amount=Decimal("10"), currency="KES")

        rows = DocumentRepository.monthly_totals(user.pk, *window)

        assert len(rows) == 2
        january, february = rows
        assert january["month"].date() == date(2025, 1, 1)
        assert january["currency"] == "USD"
        assert january["total"] == Decimal("150")
        assert january["count"] == 2
        assert february["currency"] == "KES"
        assert february["count"] == 1

    def test_monthly_totals_excludes_other_users_deleted_and_out_of_range(
        self, user, other_user, make_document, window
    ):
        make_document(created_at=aware(2025, 1, 5))
        make_document(owner=other_user, created_at=aware(2025, 1, 5))
        make_document(created_at=aware(2025, 1, 6), is_deleted=True)
        make_document(created_at=aware(2024, 12, 31, 23, 59))
        make_document(created_at=aware(2025, 3, 1))

        rows = DocumentRepository.monthly_totals(user.pk, *window)

        assert len(rows) == 1
        assert rows[0]["count"] == 1

    def test_totals(self, user, make_document, window):
        make_document(created_at=aware(2025, 1, 5), status=DocumentStatus.PAID)
        make_document(created_at=aware(2025, 2, 5), status=DocumentStatus.PAID)
        make_document(created_at=aware(2025, 2, 6), type=DocumentType.RECEIPT, currency="UGX",
                      total_amount=Decimal("37500"))

        rows = DocumentRepository.totals(user.pk, *window)

        by_key = {(r["currency"], r["type"], r["status"]): r for r in rows}
        assert by_key[("USD", "invoice", "paid")]["total"] == Decimal("200")
        assert by_key[("USD", "invoice", "paid")]["count"] == 2
        assert by_key[("UGX", "receipt", "final")]["total"] == Decimal("37500")

    def test_count(self, user, make_document):
        make_document(status=DocumentStatus.DRAFT)
        make_document(status=DocumentStatus.DRAFT)
        make_document(status=DocumentStatus.OVERDUE)
        make_document(status=DocumentStatus.DRAFT, is_deleted=True)

        assert DocumentRepository.count(user.pk) == 3
        assert DocumentRepository.count(user.pk, status=DocumentStatus.DRAFT) == 2
        assert DocumentRepository.count(user.pk, status=DocumentStatus.PAID) == 0

    def test_count_with_date_range(self, user, make_document, window):
        make_document(created_at=aware(2025, 1, 5))
        make_document(created_at=aware(2025, 5, 5))

        assert DocumentRepository.count(user.pk, None, *window) == 1
