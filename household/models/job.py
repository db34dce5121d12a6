"""
Job Model

A job has a title and a compensation type: an hourly rate or a yearly salary.

DESIGN DECISION: Job is a mutable entity. Raises replace its compensation
in place, so every person holding the same Job sees the change.
Each Job serializes its own mutations with a private lock.
"""

import threading
from decimal import ROUND_CEILING, Decimal
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from household.audit import get_audit_logger
from household.config import get_settings
from household.models.money import round_half_up


# =============================================================================
# COMPENSATION TYPES
# =============================================================================

class Hourly(BaseModel):
    """Paid per hour worked."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["hourly"] = "hourly"
    rate: float = Field(
        ...,
        description="Pay per hour"
    )


class Salary(BaseModel):
    """Paid a fixed yearly amount."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["salary"] = "salary"
    amount: int = Field(
        ...,
        ge=0,
        description="Pay per year"
    )


JobType = Annotated[Union[Hourly, Salary], Field(discriminator="kind")]


# =============================================================================
# JOB
# =============================================================================

class Job(BaseModel):
    """
    A job held by zero or more people.

    Usage:
        job = Job.hourly("Guest Lecturer", 10.0)
        job.raise_by_percent(0.1)
        job.calculate_income()  # 22000
    """
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    title: str = Field(
        ...,
        description="Job title"
    )
    type: JobType = Field(
        ...,
        description="Compensation type"
    )

    _lock: Any = PrivateAttr(default_factory=threading.Lock)

    @classmethod
    def hourly(cls, title: str, rate: float) -> "Job":
        """Create an hourly job."""
        return cls(title=title, type=Hourly(rate=rate))

    @classmethod
    def salaried(cls, title: str, amount: int) -> "Job":
        """Create a salaried job."""
        return cls(title=title, type=Salary(amount=amount))

    @property
    def is_salaried(self) -> bool:
        return isinstance(self.type, Salary)

    def calculate_income(self, hours_worked: Optional[float] = None) -> int:
        """
        Yearly income.

        Args:
            hours_worked: Hours per year, only used for hourly jobs.
                          Defaults to the configured default_hours_worked.

        Returns:
            Income rounded to a whole number
        """
        pay = self.type
        if isinstance(pay, Salary):
            return pay.amount

        if hours_worked is None:
            hours_worked = get_settings().household.default_hours_worked
        return round_half_up(Decimal(str(pay.rate)) * Decimal(str(hours_worked)))

    def raise_by_amount(self, amount: float) -> None:
        """
        Raise pay by a fixed amount.

        Hourly rates grow by `amount`; salaries by `amount` rounded.

        Raises:
            ValidationError: If a salary would drop below zero
        """
        with self._lock:
            pay = self.type
            if isinstance(pay, Hourly):
                rate = Decimal(str(pay.rate)) + Decimal(str(amount))
                self.type = Hourly(rate=float(rate))
            else:
                self.type = Salary(amount=pay.amount + round_half_up(amount))

    def raise_by_percent(self, percentage: float) -> None:
        """
        Raise pay by a fraction of its current value (0.1 = 10%).

        Raises:
            ValidationError: If a salary would drop below zero
        """
        factor = 1 + Decimal(str(percentage))
        with self._lock:
            pay = self.type
            if isinstance(pay, Hourly):
                self.type = Hourly(rate=float(Decimal(str(pay.rate)) * factor))
            else:
                self.type = Salary(amount=round_half_up(pay.amount * factor))

    def convert_to_salary(self) -> bool:
        """
        Turn an hourly job into a salaried one.

        The salary is the default yearly hours at the current rate,
        rounded up to the configured salary step (1000 by default).

        Returns:
            True if converted, False if the job was already salaried
        """
        settings = get_settings().household
        with self._lock:
            pay = self.type
            if isinstance(pay, Salary):
                get_audit_logger().log_already_salaried(self.title, pay.amount)
                return False

            step = settings.salary_rounding_step
            yearly = Decimal(str(pay.rate)) * settings.default_hours_worked / step
            salary = int(yearly.to_integral_value(rounding=ROUND_CEILING)) * step
            self.type = Salary(amount=salary)

        get_audit_logger().log_converted_to_salary(self.title, pay.rate, salary)
        return True

    def __str__(self) -> str:
        pay = self.type
        if isinstance(pay, Hourly):
            return f"{self.title} (hourly: {pay.rate})"
        return f"{self.title} (salary: {pay.amount})"
