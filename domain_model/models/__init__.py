"""
Data Models Package

Money, Job, Person and Family.
"""

from domain_model.models.money import (
    FROM_USD_RATES,
    TO_USD_RATES,
    Currency,
    Money,
)
from domain_model.models.job import (
    Hourly,
    Job,
    JobType,
    Salaried,
)
from domain_model.models.person import (
    MIN_JOB_AGE,
    MIN_SPOUSE_AGE,
    Person,
)
from domain_model.models.family import (
    MIN_PARENT_AGE,
    Family,
)

__all__ = [
    # Money
    "Currency",
    "FROM_USD_RATES",
    "Money",
    "TO_USD_RATES",
    # Job
    "Hourly",
    "Job",
    "JobType",
    "Salaried",
    # Person
    "MIN_JOB_AGE",
    "MIN_SPOUSE_AGE",
    "Person",
    # Family
    "Family",
    "MIN_PARENT_AGE",
]
