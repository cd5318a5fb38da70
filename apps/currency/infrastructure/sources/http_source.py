import logging

import requests
from django.conf import settings

from apps.currency.domain.interfaces import BaseRateTableSource


logger = logging.getLogger(__name__)


class HttpRateTableSource(BaseRateTableSource):
    """
    JSON document served over HTTP, so rates can be updated without a rebuild.
    Uses the same payload format as the file source.
    """

    def __init__(self, url=None, timeout=None):
        self.url = url or settings.CURRENCY_TABLE_URL
        self.timeout = timeout or settings.CURRENCY_TABLE_TIMEOUT

    def get_rate_table_data(self) -> dict | None:
        """
        Fetch the currency table.

        Returns:
            Parsed payload, or None if the request or the payload is invalid
        """
        if not self.url:
            logger.info("CURRENCY_TABLE_URL is not configured, skipping http source")
            return None

        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()

        except requests.exceptions.Timeout:
            logger.warning("Timeout fetching currency table from %s", self.url)
            return None
        except requests.exceptions.RequestException as e:
            logger.warning("HTTP error fetching currency table: %s", e)
            return None
        except ValueError as e:
            logger.warning("Invalid JSON in currency table response: %s", e)
            return None

        if not isinstance(data, dict) or "currencies" not in data:
            logger.warning("Currency table response from %s has no 'currencies' key", self.url)
            return None

        return data
