"""
Pure domain entities (POPOs).
No dependency on Django or the ORM.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Mapping

from babel import Locale, UnknownLocaleError

from apps.currency.domain.errors import InvalidRateTableError


CODE_PATTERN = re.compile(r"^[A-Z]{3}$")


@dataclass(frozen=True)
class CurrencyRule:

    code: str
    rate_to_base: Decimal
    fraction_digits: int = 2
    locale: str = "en_US"
    display_name: str = ""

    def __post_init__(self):
        if not CODE_PATTERN.match(self.code):
            raise InvalidRateTableError(f"Currency code must be 3 upper-case letters, got '{self.code}'")
        if not self.rate_to_base.is_finite() or self.rate_to_base <= 0:
            raise InvalidRateTableError(f"rate_to_base for {self.code} must be positive, got {self.rate_to_base}")
        if self.fraction_digits < 0:
            raise InvalidRateTableError(f"fraction_digits for {self.code} must be >= 0, got {self.fraction_digits}")
        try:
            Locale.parse(str(self.locale).replace("-", "_"))
        except (UnknownLocaleError, TypeError, ValueError) as e:
            raise InvalidRateTableError(f"Unknown locale for {self.code}: {self.locale}") from e

    @classmethod
    def from_mapping(cls, code: str, data: Mapping) -> "CurrencyRule":
        """Build a rule from one entry of the configuration mapping."""
        try:
            rate = Decimal(str(data["rate_to_base"]))
            fraction_digits = int(data.get("fraction_digits", 2))
        except KeyError as e:
            raise InvalidRateTableError(f"Missing {e} for currency {code}") from e
        except (InvalidOperation, TypeError, ValueError) as e:
            raise InvalidRateTableError(f"Invalid configuration for currency {code}: {e}") from e

        return cls(
            code=code.upper(),
            rate_to_base=rate,
            fraction_digits=fraction_digits,
            locale=data.get("locale", "en_US"),
            display_name=data.get("display_name") or code.upper(),
        )


@dataclass(frozen=True)
class ExchangeRateTable:
    """
    Closed set of supported currencies with their rate against the base.

    Rates are expressed as units per one base unit; the base itself is
    always present with a rate of exactly 1.
    """

    base: str
    rules: Mapping[str, CurrencyRule] = field(default_factory=dict)

    def __post_init__(self):
        base_rule = self.rules.get(self.base)
        if base_rule is None:
            raise InvalidRateTableError(f"Base currency {self.base} is missing from the table")
        if base_rule.rate_to_base != 1:
            raise InvalidRateTableError(
                f"Base currency {self.base} must have rate 1, got {base_rule.rate_to_base}"
            )
        for code, rule in self.rules.items():
            if code != rule.code:
                raise InvalidRateTableError(f"Rule for {rule.code} registered under {code}")
        # Freeze the mapping itself, not just the attribute
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    @classmethod
    def from_mapping(cls, currencies: Mapping[str, Mapping], base: str = "USD") -> "ExchangeRateTable":
        """
        Build a table from ``{code: {rate_to_base, fraction_digits, locale, display_name}}``.

        Example:
            >>> table = ExchangeRateTable.from_mapping({
            ...     "USD": {"rate_to_base": "1"},
            ...     "UGX": {"rate_to_base": "3750", "fraction_digits": 0},
            ... })
            >>> table.rate("UGX")
            Decimal('3750')
        """
        if not isinstance(currencies, Mapping) or not currencies:
            raise InvalidRateTableError("Exchange rate table is empty")

        rules = {}
        for code, data in currencies.items():
            if not isinstance(data, Mapping):
                raise InvalidRateTableError(f"Configuration for currency {code} must be a mapping")
            rule = CurrencyRule.from_mapping(code, data)
            rules[rule.code] = rule

        return cls(base=base.upper(), rules=rules)

    def __contains__(self, code: str) -> bool:
        return code in self.rules

    def get(self, code: str) -> CurrencyRule | None:
        return self.rules.get(code)

    def rate(self, code: str) -> Decimal:
        return self.rules[code].rate_to_base

    def codes(self) -> list[str]:
        """Supported codes, base first then alphabetical."""
        others = sorted(code for code in self.rules if code != self.base)
        return [self.base] + others
