"""
Domain Model Exceptions

Only genuine programming or data errors raise. Age gates and family rules
report rejection through return values instead (see Person and Family).
"""


class DomainModelError(Exception):
    """Base class for all domain model errors."""
    pass


class UnsupportedCurrencyError(DomainModelError, ValueError):
    """Currency code is not one of the supported codes."""

    def __init__(self, currency: object):
        self.currency = currency
        super().__init__(
            f"Unsupported currency: {currency!r}. "
            f"Supported: USD, EUR, GBP, CAN"
        )


class DuplicatePersonIdError(DomainModelError, ValueError):
    """A different person is already registered under this ID."""

    def __init__(self, person_id: object):
        self.person_id = person_id
        super().__init__(f"Person ID already registered to someone else: {person_id}")
