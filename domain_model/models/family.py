"""
Family Model

A household: two spouses followed by any children.

DESIGN DECISION: A family does not own its members. The same Person may be
referenced elsewhere; the family only holds the membership list used for
household computations.
"""

from typing import Final, Optional

from domain_model.audit import get_logger
from domain_model.config import get_settings
from domain_model.models.person import Person


logger = get_logger(__name__)

MIN_PARENT_AGE: Final[int] = 21


class Family:
    """
    Household of persons.

    members[0] and members[1] are the spouses; later members are children.
    """

    def __init__(
        self,
        spouse1: Person,
        spouse2: Person,
        annual_hours: Optional[int] = None,
    ):
        """
        Form a family.

        The two are married to each other only if neither is already
        married and both are old enough. Otherwise neither link is
        written. Both are members either way.

        Args:
            spouse1: First spouse
            spouse2: Second spouse
            annual_hours: Hours per year used to annualise hourly pay.
                          Defaults to the configured household setting.
        """
        self.members: list[Person] = []
        self._annual_hours = (
            annual_hours
            if annual_hours is not None
            else get_settings().household.annual_hours
        )

        if spouse1.spouse is None and spouse2.spouse is None:
            if spouse1.can_marry and spouse2.can_marry:
                spouse1.assign_spouse(spouse2)
                spouse2.assign_spouse(spouse1)
            else:
                logger.info(
                    "spouse_link_skipped",
                    reason="underage",
                    spouse1_age=spouse1.age,
                    spouse2_age=spouse2.age,
                )
        else:
            logger.info("spouse_link_skipped", reason="already_married")

        self.members.append(spouse1)
        self.members.append(spouse2)

    @property
    def spouses(self) -> list[Person]:
        return self.members[:2]

    def have_child(self, child: Person) -> bool:
        """
        Add a child if at least one spouse is 21 or older.

        Returns True if the child was added. A rejected child leaves
        the family unchanged.
        """
        if len(self.members) >= 2:
            parent1, parent2 = self.members[0], self.members[1]
            if parent1.age >= MIN_PARENT_AGE or parent2.age >= MIN_PARENT_AGE:
                self.members.append(child)
                logger.debug("child_added", child_id=str(child.id), size=len(self.members))
                return True

        logger.info(
            "child_rejected",
            child_id=str(child.id),
            min_parent_age=MIN_PARENT_AGE,
        )
        return False

    def household_income(self) -> int:
        """
        Annual income of all members.

        Hourly pay is annualised over the configured hours (2000 by default)
        and truncated; salaries count as-is; members without a job add 0.
        """
        total = 0
        for member in self.members:
            if member.job is not None:
                total += member.job.calculate_income(self._annual_hours)
        return total
