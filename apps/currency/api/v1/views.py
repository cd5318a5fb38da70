"""
ViewSets for the currency API v1.
Read-only access to the configured rate table and a conversion helper.
"""

from decimal import Decimal, DecimalException, InvalidOperation

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.currency.api.v1.serializers import CurrencySerializer
from apps.currency.apps import get_conversion_service


@extend_schema(tags=['Currencies'])
class CurrencyViewSet(viewsets.ViewSet):

    permission_classes = [AllowAny]

    @extend_schema(
        responses=CurrencySerializer(many=True),
        description="List supported currencies, base currency first"
    )
    def list(self, request):
        service = get_conversion_service()
        rules = [service.get_rule(code) for code in service.supported_codes()]
        serializer = CurrencySerializer(rules, many=True, context={"base": service.base})
        return Response(serializer.data)

    @extend_schema(
        parameters=[
            OpenApiParameter("source_currency", OpenApiTypes.STR, required=True, description="Source currency code (e.g. USD)"),
            OpenApiParameter("exchanged_currency", OpenApiTypes.STR, required=True, description="Target currency code (e.g. UGX)"),
            OpenApiParameter("amount", OpenApiTypes.DECIMAL, required=True, description="Amount to convert"),
        ],
        description="Convert amount from one currency to another through the base currency"
    )
    @action(detail=False, methods=['get'], url_path='convert')
    def convert(self, request):
        """
        Convert an amount from one currency to another.
        """
        source_currency_code = request.query_params.get('source_currency')
        exchanged_currency_code = request.query_params.get('exchanged_currency')
        amount_str = request.query_params.get('amount')

        # Validation
        if not all([source_currency_code, exchanged_currency_code, amount_str]):
            return Response(
                {"error": "source_currency, exchanged_currency, and amount are required"},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            amount = Decimal(amount_str)
        except InvalidOperation:
            return Response(
                {"error": "Invalid amount. Must be a number"},
                status=status.HTTP_400_BAD_REQUEST
            )

        if not amount.is_finite():
            return Response(
                {"error": "Invalid amount. Must be a finite number"},
                status=status.HTTP_400_BAD_REQUEST
            )

        service = get_conversion_service()
        source_currency_code = source_currency_code.upper()
        exchanged_currency_code = exchanged_currency_code.upper()

        for code in (source_currency_code, exchanged_currency_code):
            if not service.is_supported(code):
                return Response(
                    {"error": f"Unsupported currency: {code}"},
                    status=status.HTTP_400_BAD_REQUEST
                )

        try:
            converted_amount = service.convert(amount, source_currency_code, exchanged_currency_code)
            digits = service.get_rule(exchanged_currency_code).fraction_digits
            rounded_amount = converted_amount.quantize(Decimal(1).scaleb(-digits))
        except DecimalException:
            return Response(
                {"error": "Invalid amount. Too large to convert"},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response({
            "source_currency": source_currency_code,
            "exchanged_currency": exchanged_currency_code,
            "amount": str(amount),
            "converted_amount": str(rounded_amount),
            "formatted": service.format(converted_amount, exchanged_currency_code),
        })
