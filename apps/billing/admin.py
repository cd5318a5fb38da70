"""
Django Admin configuration for Billing app.
Documents are read by the revenue dashboard; the admin is the only place they are edited here.
"""

from django.contrib import admin
from django.utils.html import format_html

from apps.billing.infrastructure.persistence.models import Document, DocumentStatus
from apps.currency.apps import get_conversion_service


STATUS_COLORS = {
    DocumentStatus.DRAFT: 'gray',
    DocumentStatus.FINAL: 'blue',
    DocumentStatus.PAID: 'green',
    DocumentStatus.CANCELED: 'black',
    DocumentStatus.OVERDUE: 'red',
}


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    """Admin interface for Document model."""

    list_display = (
        'document_number',
        'type',
        'customer_name',
        'get_amount',
        'get_status',
        'created_at',
    )
    list_filter = ('type', 'status', 'currency', 'is_deleted', 'created_at')
    search_fields = ('document_number', 'customer_name', 'user__username')
    readonly_fields = ('id', 'created_at', 'updated_at')
    date_hierarchy = 'created_at'
    ordering = ('-created_at',)
    actions = ['mark_paid', 'mark_overdue']

    fieldsets = (
        ('Document', {
            'fields': ('user', 'type', 'status', 'document_number', 'customer_name')
        }),
        ('Amounts', {
            'fields': ('total_amount', 'tax_amount', 'currency')
        }),
        ('Dates', {
            'fields': ('issue_date', 'due_date')
        }),
        ('Details', {
            'fields': ('notes', 'terms', 'is_deleted'),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_amount(self, obj):
        """Display amount in the document's own currency format."""
        service = get_conversion_service()
        if not service.is_supported(obj.currency):
            return f"{obj.total_amount} {obj.currency}"
        return service.format(obj.total_amount, obj.currency)
    get_amount.short_description = 'Amount'
    get_amount.admin_order_field = 'total_amount'

    def get_status(self, obj):
        """Display status with colored indicator."""
        return format_html(
            '<span style="color: {};">● {}</span>',
            STATUS_COLORS.get(obj.status, 'gray'),
            obj.get_status_display(),
        )
    get_status.short_description = 'Status'
    get_status.admin_order_field = 'status'

    @admin.action(description='Mark selected documents as paid')
    def mark_paid(self, request, queryset):
        updated = queryset.update(status=DocumentStatus.PAID)
        self.message_user(request, f'{updated} document(s) marked as paid.')

    @admin.action(description='Mark selected documents as overdue')
    def mark_overdue(self, request, queryset):
        updated = queryset.update(status=DocumentStatus.OVERDUE)
        self.message_user(request, f'{updated} document(s) marked as overdue.')
