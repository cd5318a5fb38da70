from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.billing.domain.errors import DataAccessError
from apps.billing.domain.services import FinancialMetricsAggregator
from apps.currency.apps import get_conversion_service
from apps.currency.domain.errors import CurrencyError


class Command(BaseCommand):
    help = 'Print the monthly revenue series and current-month metrics for a user'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user',
            dest='username',
            type=str,
            required=True,
            help='Username of the document owner'
        )
        parser.add_argument(
            '--months',
            type=int,
            default=settings.REVENUE_DEFAULT_MONTHS,
            help='Number of trailing months, current month included'
        )
        parser.add_argument(
            '--currency',
            type=str,
            default=settings.REVENUE_DEFAULT_CURRENCY,
            help='Display currency code'
        )
        parser.add_argument(
            '--native',
            action='store_true',
            help='Keep each document in its own currency instead of converting'
        )

    def handle(self, **options):
        username = options['username']
        months = options['months']
        currency = options['currency'].upper()
        native = options['native']

        if months < 1:
            raise CommandError('--months must be at least 1')

        service = get_conversion_service()
        if not service.is_supported(currency):
            raise CommandError(
                f"Unsupported currency {currency}. Use one of: {', '.join(service.supported_codes())}"
            )

        User = get_user_model()
        try:
            user = User.objects.get(**{User.USERNAME_FIELD: username})
        except User.DoesNotExist:
            raise CommandError(f'User {username} not found')

        aggregator = FinancialMetricsAggregator(service)
        try:
            series = aggregator.fetch_revenue_series(user.pk, months, currency, native)
            metrics = aggregator.fetch_financial_metrics(user.pk, currency)
        except (DataAccessError, CurrencyError) as e:
            raise CommandError(f'Failed to load revenue data: {e}')

        self.stdout.write(
            self.style.SUCCESS(
                f'Revenue for {username} over {months} month(s) in {service.display_name(currency)}'
            )
        )

        for bucket in series:
            if service.is_supported(bucket.currency):
                total = service.format(bucket.total, bucket.currency)
            else:
                total = f'{bucket.total} {bucket.currency}'
            self.stdout.write(f'{bucket.label}  {bucket.currency}  {total}  ({bucket.document_count} documents)')

        self.stdout.write(
            f'This month: {service.format(metrics.total_revenue, currency)} '
            f'| draft={metrics.draft_count} paid={metrics.paid_count} '
            f'overdue={metrics.overdue_count} total={metrics.total_documents}'
        )

        stats = aggregator.calculate_revenue_stats(series, currency)
        if stats is not None:
            self.stdout.write(
                f'Income change vs {stats.previous_month.label}: {stats.percent_change:.1f}% '
                f'| collection rate {stats.collection_rate:.1f}%'
            )
