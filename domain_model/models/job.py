"""
Job Model

A job pays either by the hour or by annual salary, never both.

DESIGN DECISION: The income scheme is a discriminated union (Hourly | Salaried)
rather than two optional fields. An invalid "both set" or "neither set" job
cannot be constructed.

Raises mutate the job in place by swapping in a new variant. The variant
models themselves validate, so a raise that would produce a negative rate
or salary fails loudly instead of storing it.
"""

import math
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator


class Hourly(BaseModel):
    """Paid per hour worked."""

    kind: Literal["hourly"] = "hourly"
    rate: float = Field(
        ...,
        ge=0,
        description="Pay per hour"
    )

    @field_validator("rate")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"Hourly rate must be finite, got {v}")
        return v


class Salaried(BaseModel):
    """Paid a fixed annual salary."""

    kind: Literal["salaried"] = "salaried"
    annual_salary: int = Field(
        ...,
        ge=0,
        description="Annual salary in whole units"
    )


JobType = Annotated[Union[Hourly, Salaried], Field(discriminator="kind")]


class Job(BaseModel):
    """
    An employment record.

    USAGE:
        job = Job.hourly("Barista", 20.0)
        job.calculate_income(10)       # 200
        job.raise_by_percent(0.1)      # rate is now 22.0
    """

    title: str = Field(
        default="",
        description="Job title"
    )
    type: JobType = Field(
        ...,
        description="Income scheme"
    )

    @classmethod
    def hourly(cls, title: str, rate: float) -> "Job":
        return cls(title=title, type=Hourly(rate=rate))

    @classmethod
    def salaried(cls, title: str, annual_salary: int) -> "Job":
        return cls(title=title, type=Salaried(annual_salary=annual_salary))

    def calculate_income(self, hours_worked: int) -> int:
        """
        Income for the given number of hours.

        Hourly pay is truncated toward zero. Salaried jobs ignore hours
        and return the annual salary.

        Raises:
            ValueError: If hours_worked is negative
        """
        if hours_worked < 0:
            raise ValueError(f"hours_worked cannot be negative: {hours_worked}")

        if isinstance(self.type, Hourly):
            return int(self.type.rate * hours_worked)
        return self.type.annual_salary

    def raise_by_amount(self, amount: float) -> None:
        """Add a flat amount. Salaries add the truncated amount."""
        if isinstance(self.type, Hourly):
            self.type = Hourly(rate=self.type.rate + amount)
        else:
            self.type = Salaried(annual_salary=self.type.annual_salary + int(amount))

    def raise_by_percent(self, percent: float) -> None:
        """
        Scale pay by (1 + percent). `percent` is a fraction: 0.10 is 10%.

        Salaries are truncated to whole units after scaling.
        """
        if isinstance(self.type, Hourly):
            self.type = Hourly(rate=self.type.rate * (1 + percent))
        else:
            self.type = Salaried(
                annual_salary=int(self.type.annual_salary * (1 + percent))
            )

    def describe_type(self) -> str:
        """Debug text: Hourly(<rate>) or Salaried(<amount>)."""
        if isinstance(self.type, Hourly):
            return f"Hourly({self.type.rate})"
        return f"Salaried({self.type.annual_salary})"
