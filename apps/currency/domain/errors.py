"""Domain exceptions for the currency app."""


class CurrencyError(Exception):
    """Base exception for all currency errors."""
    pass


class UnsupportedCurrencyError(CurrencyError):
    """Currency code is not present in the exchange rate table."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"Unsupported currency: {code}")


class InvalidRateTableError(CurrencyError):
    """Exchange rate table violates one of its invariants."""
    pass
