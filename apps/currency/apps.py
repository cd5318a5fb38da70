from django.apps import AppConfig, apps as django_apps
from django.conf import settings


class CurrencyConfig(AppConfig):
    name = 'apps.currency'
    label = 'currency'
    verbose_name = 'Currency'

    conversion_service = None

    def ready(self):
        from apps.currency.domain.services import CurrencyConversionService
        from apps.currency.infrastructure.sources.registry import load_rate_table

        table = load_rate_table(settings.CURRENCY_TABLE_SOURCES)
        self.conversion_service = CurrencyConversionService(table)


def get_conversion_service():
    """Service built at startup from the configured currency table."""
    return django_apps.get_app_config('currency').conversion_service
