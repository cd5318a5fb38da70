"""
Source Registry - Maps source names to rate table source classes.
The names are what CURRENCY_TABLE_SOURCES lists, in fallback order.
"""

import logging

from django.core.exceptions import ImproperlyConfigured

from apps.currency.domain.errors import InvalidRateTableError
from apps.currency.domain.interfaces import BaseRateTableSource
from apps.currency.domain.models import ExchangeRateTable
from apps.currency.infrastructure.sources.file_source import FileRateTableSource
from apps.currency.infrastructure.sources.http_source import HttpRateTableSource
from apps.currency.infrastructure.sources.settings_source import SettingsRateTableSource


logger = logging.getLogger(__name__)


SOURCE_REGISTRY: dict[str, type[BaseRateTableSource]] = {
    "settings": SettingsRateTableSource,
    "file": FileRateTableSource,
    "http": HttpRateTableSource,
}


def get_source_instance(source_name: str) -> BaseRateTableSource | None:
    """
    Get an instance of a source by its name.

    Returns:
        Instance of the source, or None if the name is not registered
    """
    source_class = SOURCE_REGISTRY.get(source_name.strip().lower())

    if source_class is None:
        logger.warning("Currency table source '%s' not found in registry", source_name)
        return None

    return source_class()


def load_rate_table(source_names) -> ExchangeRateTable:
    """
    Build the exchange rate table from the first source that yields a valid one.

    Fallback strategy:
    1. Try each configured source in order
    2. Skip sources that return nothing or an invalid table
    3. Fail with ImproperlyConfigured if no source succeeds
    """
    for source_name in source_names:
        source = get_source_instance(source_name)
        if source is None:
            continue

        data = source.get_rate_table_data()
        if data is None:
            logger.info("Currency table source '%s' returned no data, trying next", source_name)
            continue

        try:
            table = ExchangeRateTable.from_mapping(
                data["currencies"],
                base=data.get("base", "USD"),
            )
        except InvalidRateTableError as e:
            logger.error("Currency table from '%s' is invalid: %s", source_name, e)
            continue

        logger.info(
            "Loaded currency table from '%s': %s",
            source_name,
            ", ".join(table.codes()),
        )
        return table

    raise ImproperlyConfigured(
        f"No valid currency table could be loaded from sources: {list(source_names)}"
    )
