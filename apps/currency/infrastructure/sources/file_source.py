import json
import logging
from pathlib import Path

from django.conf import settings

from apps.currency.domain.interfaces import BaseRateTableSource


logger = logging.getLogger(__name__)


class FileRateTableSource(BaseRateTableSource):
    """
    JSON document on disk.

    Expected format:
        {"base": "USD", "currencies": {"UGX": {"rate_to_base": 3750, ...}}}
    """

    def __init__(self, path=None):
        self.path = path or settings.CURRENCY_TABLE_FILE

    def get_rate_table_data(self) -> dict | None:
        if not self.path:
            logger.info("CURRENCY_TABLE_FILE is not configured, skipping file source")
            return None

        try:
            with Path(self.path).open(encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            logger.warning("Currency table file not found: %s", self.path)
            return None
        except (OSError, ValueError) as e:
            logger.warning("Could not read currency table file %s: %s", self.path, e)
            return None

        if not isinstance(data, dict) or "currencies" not in data:
            logger.warning("Currency table file %s has no 'currencies' key", self.path)
            return None

        return data
