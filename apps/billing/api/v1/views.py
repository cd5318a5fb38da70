"""
ViewSets for the billing API v1.
"""

import logging

from django.conf import settings
from rest_framework import viewsets, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.billing.api.v1.serializers import (
    FinancialMetricsSerializer,
    RevenueBucketSerializer,
    RevenueStatsSerializer,
)
from apps.billing.domain.errors import DataAccessError
from apps.billing.domain.services import FinancialMetricsAggregator
from apps.currency.apps import get_conversion_service
from apps.currency.domain.errors import CurrencyError


logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "1", "yes"}


def _error(message, status_code):
    return Response({"success": False, "error": message}, status=status_code)


@extend_schema(tags=['Revenue'])
class RevenueViewSet(viewsets.ViewSet):

    # Authentication is checked in the handler so the 401 body matches the dashboard contract
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[
            OpenApiParameter("months", OpenApiTypes.INT, description="Trailing months including the current one (default 6)"),
            OpenApiParameter("currency", OpenApiTypes.STR, description="Display currency code (default UGX)"),
            OpenApiParameter("native_currency", OpenApiTypes.BOOL, description="Keep each document's own currency instead of converting"),
        ],
        description="Monthly revenue series and current-month metrics for the signed-in user"
    )
    def list(self, request):
        """
        Revenue dashboard data.

        Query params:
        - months: number of months (default 6)
        - currency: display currency (default UGX)
        - native_currency: true to segment by original currency

        Returns:
        {success, revenueData, metrics, stats}
        """
        if not request.user or not request.user.is_authenticated:
            return _error("Unauthorized", status.HTTP_401_UNAUTHORIZED)

        months_str = request.query_params.get('months') or str(settings.REVENUE_DEFAULT_MONTHS)
        currency = (request.query_params.get('currency') or settings.REVENUE_DEFAULT_CURRENCY).upper()
        native_currency = request.query_params.get('native_currency', '').lower() in TRUE_VALUES

        # Validation
        try:
            months = int(months_str)
        except ValueError:
            return _error("Invalid months. Must be an integer", status.HTTP_400_BAD_REQUEST)

        if not 1 <= months <= settings.REVENUE_MAX_MONTHS:
            return _error(
                f"months must be between 1 and {settings.REVENUE_MAX_MONTHS}",
                status.HTTP_400_BAD_REQUEST
            )

        conversion_service = get_conversion_service()
        if not conversion_service.is_supported(currency):
            return _error(f"Unsupported currency: {currency}", status.HTTP_400_BAD_REQUEST)

        aggregator = FinancialMetricsAggregator(conversion_service)

        try:
            revenue_data = aggregator.fetch_revenue_series(
                request.user.pk,
                months,
                currency,
                native_currency
            )
            metrics = aggregator.fetch_financial_metrics(request.user.pk, currency)
        except (DataAccessError, CurrencyError):
            logger.exception("Revenue aggregation failed for user %s", request.user.pk)
            return _error("Failed to load revenue data", status.HTTP_500_INTERNAL_SERVER_ERROR)

        stats = aggregator.calculate_revenue_stats(revenue_data, currency)
        context = {"conversion_service": conversion_service}

        return Response({
            "success": True,
            "revenueData": RevenueBucketSerializer(revenue_data, many=True, context=context).data,
            "metrics": FinancialMetricsSerializer(metrics, context=context).data,
            "stats": RevenueStatsSerializer(stats).data if stats else None,
        })
