"""
Domain Model - Source Package

An in-memory model of money, jobs, people and households.

DESIGN PRINCIPLES:
1. Values are immutable; entities mutate only through gated setters
2. Fail early on bad data (unknown currency, negative pay)
3. Age-gated actions fail softly and are logged, never raised
4. Relations between peers are stored by ID, not ownership
"""

from domain_model.errors import (
    DomainModelError,
    DuplicatePersonIdError,
    UnsupportedCurrencyError,
)
from domain_model.models import (
    Currency,
    Family,
    Hourly,
    Job,
    Money,
    Person,
    Salaried,
)
from domain_model.storage import PersonRegistry

__version__ = "1.0.0"

__all__ = [
    "Currency",
    "DomainModelError",
    "DuplicatePersonIdError",
    "Family",
    "Hourly",
    "Job",
    "Money",
    "Person",
    "PersonRegistry",
    "Salaried",
    "UnsupportedCurrencyError",
]
