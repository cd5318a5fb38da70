"""
Django ORM models for persistence.
Infrastructure layer: technical storage detail.
"""

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class BaseModel(models.Model):

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class DocumentType(models.TextChoices):

    INVOICE = "invoice", "Invoice"
    TAX_INVOICE = "tax_invoice", "Tax Invoice"
    PROFORMA_INVOICE = "proforma_invoice", "Proforma Invoice"
    RECEIPT = "receipt", "Receipt"
    SALES_RECEIPT = "sales_receipt", "Sales Receipt"
    CASH_RECEIPT = "cash_receipt", "Cash Receipt"
    QUOTE = "quote", "Quote"
    ESTIMATE = "estimate", "Estimate"
    CREDIT_MEMO = "credit_memo", "Credit Memo"
    CREDIT_NOTE = "credit_note", "Credit Note"
    PURCHASE_ORDER = "purchase_order", "Purchase Order"
    DELIVERY_NOTE = "delivery_note", "Delivery Note"


INVOICE_TYPES = frozenset({
    DocumentType.INVOICE,
    DocumentType.TAX_INVOICE,
    DocumentType.PROFORMA_INVOICE,
})

RECEIPT_TYPES = frozenset({
    DocumentType.RECEIPT,
    DocumentType.SALES_RECEIPT,
    DocumentType.CASH_RECEIPT,
})


class DocumentStatus(models.TextChoices):

    DRAFT = "draft", "Draft"
    FINAL = "final", "Final"
    PAID = "paid", "Paid"
    CANCELED = "canceled", "Canceled"
    OVERDUE = "overdue", "Overdue"


class DocumentCurrency(models.TextChoices):

    KES = "KES", "Kenya Shillings"
    UGX = "UGX", "Uganda Shillings"
    USD = "USD", "US Dollars"


class Document(BaseModel):

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name="documents",
        on_delete=models.CASCADE,
    )
    type = models.CharField(max_length=32, choices=DocumentType.choices)
    status = models.CharField(
        max_length=16,
        choices=DocumentStatus.choices,
        default=DocumentStatus.DRAFT,
        db_index=True,
    )
    document_number = models.CharField(max_length=50)
    customer_name = models.CharField(max_length=255, blank=True)
    issue_date = models.DateField(default=timezone.localdate)
    due_date = models.DateField(null=True, blank=True)
    total_amount = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    tax_amount = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    currency = models.CharField(
        max_length=3,
        choices=DocumentCurrency.choices,
        default=DocumentCurrency.UGX,
    )
    notes = models.TextField(blank=True, default="")
    terms = models.TextField(blank=True, default="")
    is_deleted = models.BooleanField(default=False)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "created_at"], name="document_user_created_idx"),
        ]

    def __str__(self):
        return f"{self.get_type_display()} {self.document_number} | {self.total_amount} {self.currency}"
