"""
Family Aggregate

A family is founded by two unmarried people and grows with children.

CRITICAL: Founding a family from someone who is already married is a
broken invariant. It is raised as AlreadyMarriedError so callers can
handle it. A child refused because no member is old enough is a normal
outcome: have_child() returns False.

The family tracks membership only. It does not own its members, and
records no parent/child or sibling relations.
"""

from typing import Iterator, Optional
from uuid import uuid4

from household.audit import AuditLogger, get_audit_logger
from household.config import get_settings
from household.errors import AlreadyMarriedError, FamilyError
from household.models.person import Person


class Family:
    """
    Two spouses and their children.

    Usage:
        family = Family(ted, charlotte)
        family.have_child(Person(first_name="Baby", age=0))
        family.household_income()
    """

    def __init__(
        self,
        spouse1: Person,
        spouse2: Person,
        audit_logger: Optional[AuditLogger] = None,
    ):
        """
        Marry two people and start a family.

        Args:
            spouse1: First spouse (must not be married)
            spouse2: Second spouse (must not be married)
            audit_logger: Where family events go.
                          If None, the process-wide audit logger is used.

        Raises:
            FamilyError: If both arguments are the same person
            AlreadyMarriedError: If either person already has a spouse
        """
        if spouse1 == spouse2:
            raise FamilyError("A family needs two different spouses")
        for person in (spouse1, spouse2):
            if person.spouse is not None:
                raise AlreadyMarriedError(
                    person,
                    f"{person.first_name or person.id} is already married",
                )

        self.id = uuid4()
        self._audit_logger = audit_logger

        spouse1.spouse = spouse2
        self._members: list[Person] = [spouse1, spouse2]

        self._audit.log_family_formed(self.id, [spouse1.id, spouse2.id])

    @property
    def _audit(self) -> AuditLogger:
        return self._audit_logger or get_audit_logger()

    @property
    def members(self) -> tuple[Person, ...]:
        """Current members, spouses first, children in order of arrival."""
        return tuple(self._members)

    def have_child(self, child: Person) -> bool:
        """
        Add a child to the family.

        Succeeds only if at least one member is older than the
        configured parent age (21 by default) and the child is not
        already a member.

        Returns:
            True if the child was added, False otherwise
        """
        min_parent_age = get_settings().household.min_parent_age
        if child in self._members:
            self._audit.log_child_rejected(
                self.id, child.id, min_parent_age, reason="already_member"
            )
            return False

        if not any(member.age > min_parent_age for member in self._members):
            self._audit.log_child_rejected(self.id, child.id, min_parent_age)
            return False

        self._members.append(child)
        self._audit.log_child_added(self.id, child.id, len(self._members))
        return True

    def household_income(self) -> int:
        """
        Total yearly income of all members.

        Members without a job contribute 0.
        """
        return sum(
            member.job.calculate_income()
            for member in self._members
            if member.job is not None
        )

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._members)

    def __repr__(self) -> str:
        return f"Family(id={self.id}, members={len(self._members)})"
