"""
Domain services - Core business logic.
Converts and formats amounts using a fixed exchange rate table.
"""

import re
from decimal import Decimal

from babel import Locale
from babel.numbers import format_currency

from apps.currency.domain.errors import UnsupportedCurrencyError
from apps.currency.domain.models import CurrencyRule, ExchangeRateTable


FRACTION_PATTERN = re.compile(r"0\.0+|0(?=[^#0,.]*$)")


def _to_decimal(amount) -> Decimal:
    if isinstance(amount, Decimal):
        value = amount
    else:
        value = Decimal(str(amount))
    if not value.is_finite():
        raise ValueError(f"Amount must be a finite number, got {amount}")
    return value


def _pattern_with_digits(pattern: str, digits: int) -> str:
    """Rewrite the fractional part of a CLDR currency pattern to ``digits`` zeros."""
    fraction = "0." + "0" * digits if digits else "0"
    return FRACTION_PATTERN.sub(fraction, pattern)


class CurrencyConversionService:
    """
    Domain service over an immutable ExchangeRateTable.

    Every conversion is routed through the base currency:
    1. Express the amount in base units (divide by the source rate)
    2. Re-express it in the target currency (multiply by the target rate)

    The service holds no mutable state, so a single instance can be shared
    between requests.
    """

    def __init__(self, table: ExchangeRateTable):
        self.table = table

    @property
    def base(self) -> str:
        return self.table.base

    def is_supported(self, code: str | None) -> bool:
        return bool(code) and code.upper() in self.table

    def supported_codes(self) -> list[str]:
        return self.table.codes()

    def get_rule(self, code: str) -> CurrencyRule:
        """Return the configured rule, raising UnsupportedCurrencyError for unknown codes."""
        rule = self.table.get(code.upper()) if code else None
        if rule is None:
            raise UnsupportedCurrencyError(code)
        return rule

    def convert(self, amount, source_currency: str, exchanged_currency: str) -> Decimal:
        """
        Convert an amount from one currency to another.

        Args:
            amount: Amount in the source currency (may be negative)
            source_currency: Currency the amount is denominated in
            exchanged_currency: Currency to express the amount in

        Returns:
            Converted amount. The caller tracks which currency it is in.

        Raises:
            UnsupportedCurrencyError: if either code is not in the table
            ValueError: if the amount is not a finite number

        Example:
            >>> service.convert(Decimal("10"), "USD", "UGX")
            Decimal('37500')
        """
        source_rule = self.get_rule(source_currency)
        target_rule = self.get_rule(exchanged_currency)
        value = _to_decimal(amount)

        if source_rule.code == target_rule.code:
            return value

        amount_in_base = value / source_rule.rate_to_base
        return amount_in_base * target_rule.rate_to_base

    def format(self, amount, currency: str) -> str:
        """
        Format an amount for display using the currency's own locale.

        The number of fractional digits comes from the table, not from CLDR,
        so e.g. shillings can be shown without cents.

        Example:
            >>> service.format(Decimal("1000"), "USD")
            '$1,000.00'
        """
        rule = self.get_rule(currency)
        value = _to_decimal(amount)

        locale = Locale.parse(rule.locale.replace("-", "_"))
        pattern = _pattern_with_digits(locale.currency_formats["standard"].pattern, rule.fraction_digits)

        return format_currency(
            value,
            rule.code,
            format=pattern,
            locale=locale,
            currency_digits=False,
        )

    def display_name(self, currency: str) -> str:
        """Full currency name; unknown codes are echoed back unchanged."""
        rule = self.table.get(currency.upper()) if currency else None
        if rule is None:
            return currency
        return rule.display_name
