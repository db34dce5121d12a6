"""
Domain Models Package

Money is a pydantic value type; Job and Person are pydantic entities;
Family is a plain aggregate over Person references.
"""

from household.models.money import (
    USD_RATES,
    Currency,
    Money,
    parse_currency,
    round_half_up,
)
from household.models.job import (
    Hourly,
    Job,
    JobType,
    Salary,
)
from household.models.person import Person
from household.models.family import Family

__all__ = [
    # Money
    "USD_RATES",
    "Currency",
    "Money",
    "parse_currency",
    "round_half_up",
    # Job
    "Hourly",
    "Job",
    "JobType",
    "Salary",
    # Person
    "Person",
    # Family
    "Family",
]
