"""
Person Model

A person has optional names, an age, and optionally a job and a spouse.

CRITICAL: `job` and `spouse` are guarded properties. Every assignment,
at construction or later, re-runs the age-gate:
- Under the working age, a job is rejected
- Under the marriage age, a spouse is rejected
A rejected assignment is audited and the field is left absent.
It is NOT an error.

DESIGN DECISION: The spouse link is a non-owning, symmetric reference.
Setting one side sets the other. Equality and hashing use `id` only,
so two married people never compare or print through each other.
"""

from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from household.audit import get_audit_logger
from household.config import get_settings
from household.models.job import Job


class Person(BaseModel):
    """
    A person, optionally employed and optionally married.

    Usage:
        ted = Person(first_name="Ted", last_name="Neward", age=45)
        ted.job = Job.salaried("Guest Lecturer", 1000)
        str(ted)  # [Person: firstName:Ted lastName:Neward age:45 job:Guest Lecturer spouse:nil]
    """
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique person ID"
    )
    first_name: Optional[str] = Field(
        default=None,
        description="Given name"
    )
    last_name: Optional[str] = Field(
        default=None,
        description="Family name"
    )
    age: int = Field(
        ...,
        ge=0,
        description="Age in years"
    )

    _job: Optional[Job] = PrivateAttr(default=None)
    _spouse: Optional["Person"] = PrivateAttr(default=None)

    def __init__(
        self,
        job: Optional[Job] = None,
        spouse: Optional["Person"] = None,
        **data: Any,
    ):
        super().__init__(**data)
        # Route through the guarded setters
        if job is not None:
            self.job = job
        if spouse is not None:
            self.spouse = spouse

    # -------------------------------------------------------------------------
    # Job
    # -------------------------------------------------------------------------

    @property
    def job(self) -> Optional[Job]:
        return self._job

    @job.setter
    def job(self, value: Optional[Job]) -> None:
        if value is not None and not isinstance(value, Job):
            raise TypeError(f"job must be a Job or None, got {type(value).__name__}")

        min_age = get_settings().household.min_working_age
        if value is not None and self.age < min_age:
            get_audit_logger().log_job_rejected(
                person_id=self.id,
                age=self.age,
                min_age=min_age,
                job_title=value.title,
            )
            value = None
        self._job = value

    # -------------------------------------------------------------------------
    # Spouse
    # -------------------------------------------------------------------------

    @property
    def spouse(self) -> Optional["Person"]:
        return self._spouse

    @spouse.setter
    def spouse(self, value: Optional["Person"]) -> None:
        if value is not None and not isinstance(value, Person):
            raise TypeError(f"spouse must be a Person or None, got {type(value).__name__}")
        if value is self:
            raise ValueError("A person cannot be their own spouse")

        self._detach_spouse()
        if value is None:
            return

        # Check both sides so that both rejections are audited
        self_ok = self._old_enough_to_marry(value)
        other_ok = value._old_enough_to_marry(self)
        if not (self_ok and other_ok):
            return

        value._detach_spouse()
        self._spouse = value
        value._spouse = self

    def _old_enough_to_marry(self, partner: "Person") -> bool:
        min_age = get_settings().household.min_marriage_age
        if self.age < min_age:
            get_audit_logger().log_spouse_rejected(
                person_id=self.id,
                age=self.age,
                min_age=min_age,
                spouse_id=partner.id,
            )
            return False
        return True

    def _detach_spouse(self) -> None:
        partner = self._spouse
        if partner is not None and partner._spouse is self:
            partner._spouse = None
        self._spouse = None

    # -------------------------------------------------------------------------
    # Formatting and identity
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Human-readable summary.

        Absent names are omitted; absent job or spouse print as "nil".
        """
        description = "[Person: "
        if self.first_name is not None:
            description += f"firstName:{self.first_name} "
        if self.last_name is not None:
            description += f"lastName:{self.last_name} "
        description += f"age:{self.age} "

        job_description = self._job.title if self._job is not None else "nil"
        spouse_name = "nil"
        if self._spouse is not None and self._spouse.first_name is not None:
            spouse_name = self._spouse.first_name
        description += f"job:{job_description} spouse:{spouse_name}]"
        return description

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
