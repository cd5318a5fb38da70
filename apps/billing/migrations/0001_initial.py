import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Document',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('type', models.CharField(choices=[('invoice', 'Invoice'), ('tax_invoice', 'Tax Invoice'), ('proforma_invoice', 'Proforma Invoice'), ('receipt', 'Receipt'), ('sales_receipt', 'Sales Receipt'), ('cash_receipt', 'Cash Receipt'), ('quote', 'Quote'), ('estimate', 'Estimate'), ('credit_memo', 'Credit Memo'), ('credit_note', 'Credit Note'), ('purchase_order', 'Purchase Order'), ('delivery_note', 'Delivery Note')], max_length=32)),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('final', 'Final'), ('paid', 'Paid'), ('canceled', 'Canceled'), ('overdue', 'Overdue')], db_index=True, default='draft', max_length=16)),
                ('document_number', models.CharField(max_length=50)),
                ('customer_name', models.CharField(blank=True, max_length=255)),
                ('issue_date', models.DateField(default=django.utils.timezone.localdate)),
                ('due_date', models.DateField(blank=True, null=True)),
                ('total_amount', models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ('tax_amount', models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ('currency', models.CharField(choices=[('KES', 'Kenya Shillings'), ('UGX', 'Uganda Shillings'), ('USD', 'US Dollars')], default='UGX', max_length=3)),
                ('notes', models.TextField(blank=True, default='')),
                ('terms', models.TextField(blank=True, default='')),
                ('is_deleted', models.BooleanField(default=False)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='documents', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['user', 'created_at'], name='document_user_created_idx')],
            },
        ),
    ]
