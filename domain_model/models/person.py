"""
Person Model

A person with an optional job and an optional spouse.

CRITICAL: The age gates are soft. Assigning a job under 16 or a spouse
under 18 is silently ignored - it never raises. Callers may attempt a
forbidden assignment and check the result afterwards.

The gates apply at write time only. Clearing a job or spouse (None) is
always allowed.
"""

from typing import Final, Optional
from uuid import UUID, uuid4

from domain_model.audit import get_logger
from domain_model.models.job import Job
from domain_model.storage import PersonRegistry


logger = get_logger(__name__)

MIN_JOB_AGE: Final[int] = 16
MIN_SPOUSE_AGE: Final[int] = 18


class Person:
    """
    An individual.

    Each person belongs to a PersonRegistry, used to resolve the spouse ID.
    If none is given, the person gets a registry of their own; assigning a
    spouse registers that spouse there as well.

    USAGE:
        ted = Person("Ted", "Neward", 45)
        ted.job = Job.salaried("Guest Lecturer", 1000)
        ted.assign_spouse(charlotte)    # True
    """

    def __init__(
        self,
        first_name: str,
        last_name: str,
        age: int,
        *,
        registry: Optional[PersonRegistry] = None,
        id: Optional[UUID] = None,
    ):
        if age < 0:
            raise ValueError(f"age cannot be negative: {age}")

        self.id = id or uuid4()
        self.first_name = first_name
        self.last_name = last_name
        self.age = age

        self._job: Optional[Job] = None
        self._spouse_id: Optional[UUID] = None
        self._registry = registry if registry is not None else PersonRegistry()
        self._registry.register(self)

    # -------------------------------------------------------------------------
    # Age gates
    # -------------------------------------------------------------------------

    @property
    def can_work(self) -> bool:
        return self.age >= MIN_JOB_AGE

    @property
    def can_marry(self) -> bool:
        return self.age >= MIN_SPOUSE_AGE

    # -------------------------------------------------------------------------
    # Job
    # -------------------------------------------------------------------------

    @property
    def job(self) -> Optional[Job]:
        return self._job

    @job.setter
    def job(self, value: Optional[Job]) -> None:
        self.assign_job(value)

    def assign_job(self, job: Optional[Job]) -> bool:
        """
        Set the job if old enough.

        Returns True if the assignment took effect.
        """
        if job is not None and not self.can_work:
            logger.info(
                "job_assignment_rejected",
                person_id=str(self.id),
                age=self.age,
                min_age=MIN_JOB_AGE,
            )
            return False
        self._job = job
        return True

    # -------------------------------------------------------------------------
    # Spouse
    # -------------------------------------------------------------------------

    @property
    def spouse(self) -> Optional["Person"]:
        return self._registry.get(self._spouse_id)

    @spouse.setter
    def spouse(self, value: Optional["Person"]) -> None:
        self.assign_spouse(value)

    def assign_spouse(self, spouse: Optional["Person"]) -> bool:
        """
        Set the spouse if old enough.

        Only this side of the link is written; the reciprocal link is
        made by Family. Returns True if the assignment took effect.

        Raises:
            DuplicatePersonIdError: If a different person holds the spouse ID
                                    in this registry
        """
        if spouse is None:
            self._spouse_id = None
            return True

        if not self.can_marry:
            logger.info(
                "spouse_assignment_rejected",
                person_id=str(self.id),
                age=self.age,
                min_age=MIN_SPOUSE_AGE,
            )
            return False

        self._registry.register(spouse)
        self._spouse_id = spouse.id
        return True

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def describe(self) -> str:
        """Debug text. Not a stable format."""
        job_text = self._job.describe_type() if self._job is not None else "none"
        spouse = self.spouse
        spouse_text = spouse.first_name if spouse is not None else "none"
        return (
            f"[Person: firstName:{self.first_name} lastName:{self.last_name} "
            f"age:{self.age} job:{job_text} spouse:{spouse_text}]"
        )

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"Person(first_name={self.first_name!r}, last_name={self.last_name!r}, "
            f"age={self.age!r}, id={self.id!r})"
        )
