"""Domain exceptions for the billing app."""


class BillingError(Exception):
    """Base exception for all billing errors."""
    pass


class DataAccessError(BillingError):
    """Document store is unreachable, timed out or rejected a query."""
    pass
