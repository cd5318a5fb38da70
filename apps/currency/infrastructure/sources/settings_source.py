from django.conf import settings

from apps.currency.domain.interfaces import BaseRateTableSource


class SettingsRateTableSource(BaseRateTableSource):
    """
    Static table declared in Django settings (CURRENCY_TABLE / CURRENCY_BASE).
    Always available, so it is the usual last entry of the fallback chain.
    """

    def get_rate_table_data(self) -> dict | None:
        currencies = getattr(settings, "CURRENCY_TABLE", None)
        if not currencies:
            return None

        return {
            "base": getattr(settings, "CURRENCY_BASE", "USD"),
            "currencies": currencies,
        }
