import json
import pytest
from unittest.mock import Mock

import requests

from apps.currency.infrastructure.sources.file_source import FileRateTableSource
from apps.currency.infrastructure.sources.http_source import HttpRateTableSource
from apps.currency.infrastructure.sources.settings_source import SettingsRateTableSource


PAYLOAD = {
    "base": "USD",
    "currencies": {
        "USD": {"rate_to_base": 1, "fraction_digits": 2, "locale": "en_US", "display_name": "US Dollars"},
        "UGX": {"rate_to_base": 3700, "fraction_digits": 0, "locale": "en_UG", "display_name": "Uganda Shillings"},
    },
}


@pytest.fixture
def mock_requests_get(mocker):
    return mocker.patch("requests.get")


class TestSettingsRateTableSource:

    def test_reads_settings(self, settings):
        settings.CURRENCY_BASE = "USD"
        settings.CURRENCY_TABLE = PAYLOAD["currencies"]

        data = SettingsRateTableSource().get_rate_table_data()

        assert data == {"base": "USD", "currencies": PAYLOAD["currencies"]}

    def test_empty_settings(self, settings):
        settings.CURRENCY_TABLE = {}

        assert SettingsRateTableSource().get_rate_table_data() is None


class TestFileRateTableSource:

    def test_reads_json_file(self, tmp_path):
        path = tmp_path / "currencies.json"
        path.write_text(json.dumps(PAYLOAD), encoding="utf-8")

        data = FileRateTableSource(path=path).get_rate_table_data()

        assert data == PAYLOAD

    def test_missing_file(self, tmp_path):
        data = FileRateTableSource(path=tmp_path / "missing.json").get_rate_table_data()

        assert data is None

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "currencies.json"
        path.write_text("{not json", encoding="utf-8")

        assert FileRateTableSource(path=path).get_rate_table_data() is None

    def test_missing_currencies_key(self, tmp_path):
        path = tmp_path / "currencies.json"
        path.write_text(json.dumps({"base": "USD"}), encoding="utf-8")

        assert FileRateTableSource(path=path).get_rate_table_data() is None

    def test_not_configured(self, settings):
        settings.CURRENCY_TABLE_FILE = ""

        assert FileRateTableSource().get_rate_table_data() is None


class TestHttpRateTableSource:

    def test_fetches_payload(self, mock_requests_get):
        mock_response = Mock()
        mock_response.json.return_value = PAYLOAD
        mock_response.raise_for_status.return_value = None
        mock_requests_get.return_value = mock_response

        source = HttpRateTableSource(url="https://rates.example.com/table.json", timeout=5)
        data = source.get_rate_table_data()

        assert data == PAYLOAD
        mock_requests_get.assert_called_once_with("https://rates.example.com/table.json", timeout=5)

    def test_timeout(self, mock_requests_get):
        mock_requests_get.side_effect = requests.exceptions.Timeout()

        source = HttpRateTableSource(url="https://rates.example.com/table.json", timeout=5)

        assert source.get_rate_table_data() is None

    def test_http_error(self, mock_requests_get):
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("503")
        mock_requests_get.return_value = mock_response

        source = HttpRateTableSource(url="https://rates.example.com/table.json", timeout=5)

        assert source.get_rate_table_data() is None

    def test_invalid_json(self, mock_requests_get):
        mock_response = Mock()
        mock_response.raise_for_status.return_value = None
        mock_response.json.side_effect = ValueError("Expecting value")
        mock_requests_get.return_value = mock_response

        source = HttpRateTableSource(url="https://rates.example.com/table.json", timeout=5)

        assert source.get_rate_table_data() is None

    def test_not_configured(self, settings, mock_requests_get):
        settings.CURRENCY_TABLE_URL = ""

        assert HttpRateTableSource().get_rate_table_data() is None
        mock_requests_get.assert_not_called()
