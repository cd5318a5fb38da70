import itertools
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.billing.infrastructure.persistence.models import Document, DocumentStatus, DocumentType
from apps.currency.domain.models import ExchangeRateTable
from apps.currency.domain.services import CurrencyConversionService


RATE_TABLE = {
    "USD": {"rate_to_base": "1", "fraction_digits": 2, "locale": "en_US", "display_name": "US Dollars"},
    "UGX": {"rate_to_base": "3750", "fraction_digits": 0, "locale": "en_UG", "display_name": "Uganda Shillings"},
    "KES": {"rate_to_base": "130", "fraction_digits": 0, "locale": "en_KE", "display_name": "Kenya Shillings"},
}


@pytest.fixture
def api_client():
    """DRF API client."""
    return APIClient()


@pytest.fixture
def rate_table():
    """USD-based table with UGX and KES."""
    return ExchangeRateTable.from_mapping(RATE_TABLE, base="USD")


@pytest.fixture
def conversion_service(rate_table):
    return CurrencyConversionService(rate_table)


@pytest.fixture
def user(db, django_user_model):
    """Create and return a document owner."""
    return django_user_model.objects.create_user(
        username="owner",
        email="owner@example.com",
        password="TestPass123!",
    )


@pytest.fixture
def other_user(db, django_user_model):
    """Create and return another user."""
    return django_user_model.objects.create_user(
        username="other",
        email="other@example.com",
        password="TestPass123!",
    )


@pytest.fixture
def make_document(db, user):
    """Factory for documents owned by ``user`` unless another owner is given."""
    numbers = itertools.count(1)

    def _make(owner=None, **kwargs):
        fields = {
            "type": DocumentType.INVOICE,
            "status": DocumentStatus.FINAL,
            "currency": "USD",
            "total_amount": Decimal("100.00"),
            "document_number": f"DOC-{next(numbers):04d}",
            "customer_name": "Acme Ltd",
        }
        fields.update(kwargs)
        return Document.objects.create(user=owner or user, **fields)

    return _make
