"""
Repository pattern implementation.
Read-only, user-scoped access to business documents.
"""

from datetime import datetime
from typing import List, Optional

from django.db.models import Count, Sum, QuerySet
from django.db.models.functions import TruncMonth
from django.utils import timezone

from apps.billing.infrastructure.persistence.models import Document


class DocumentRepository:
    """Repository for Document aggregate. Never writes."""

    @staticmethod
    def _scoped(
        user_id,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None
    ) -> QuerySet:
        """Live documents of one user, optionally within [date_from, date_to)."""
        queryset = Document.objects.filter(user_id=user_id, is_deleted=False)
        if date_from is not None:
            queryset = queryset.filter(created_at__gte=date_from)
        if date_to is not None:
            queryset = queryset.filter(created_at__lt=date_to)
        return queryset

    @staticmethod
    def monthly_totals(user_id, date_from: datetime, date_to: datetime) -> List[dict]:
        """
        Sum amounts per calendar month of creation, currency, type and status.

        Returns:
            Rows of {month, currency, type, status, total, count}
        """
        return list(
            DocumentRepository._scoped(user_id, date_from, date_to)
            .annotate(month=TruncMonth('created_at', tzinfo=timezone.get_current_timezone()))
            .values('month', 'currency', 'type', 'status')
            .annotate(total=Sum('total_amount'), count=Count('id'))
            .order_by('month', 'currency', 'type', 'status')
        )

    @staticmethod
    def totals(user_id, date_from: datetime, date_to: datetime) -> List[dict]:
        """
        Sum amounts per currency, type and status.

        Returns:
            Rows of {currency, type, status, total, count}
        """
        return list(
            DocumentRepository._scoped(user_id, date_from, date_to)
            .values('currency', 'type', 'status')
            .annotate(total=Sum('total_amount'), count=Count('id'))
            .order_by('currency', 'type', 'status')
        )

    @staticmethod
    def count(
        user_id,
        status: Optional[str] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None
    ) -> int:
        """Count live documents, optionally filtered by status and creation range."""
        queryset = DocumentRepository._scoped(user_id, date_from, date_to)
        if status is not None:
            queryset = queryset.filter(status=status)
        return queryset.count()
