"""
Tests for the Family aggregate.

Covers founding a family, the child rule, and household income.
"""

import pytest

from household.audit import AuditEventType, AuditLogger, InMemoryAuditSink
from household.errors import AlreadyMarriedError, FamilyError, HouseholdError
from household.models.family import Family
from household.models.job import Job
from household.models.person import Person


@pytest.fixture
def ted():
    return Person(first_name="Ted", last_name="Neward", age=45)


@pytest.fixture
def charlotte():
    return Person(first_name="Charlotte", last_name="Neward", age=45)


class TestFamilyCreation:
    """Tests for founding a family."""

    def test_family_marries_spouses(self, ted, charlotte):
        """Test founding a family links both spouses."""
        family = Family(ted, charlotte)

        assert ted.spouse is charlotte
        assert charlotte.spouse is ted
        assert family.members == (ted, charlotte)
        assert len(family) == 2

    def test_married_person_cannot_found_second_family(self, ted, charlotte):
        """Test reusing a spouse fails."""
        Family(ted, charlotte)
        other = Person(first_name="Other", age=40)

        with pytest.raises(AlreadyMarriedError) as exc_info:
            Family(ted, other)

        assert exc_info.value.person is ted
        assert other.spouse is None

    def test_already_married_second_spouse(self, ted, charlotte):
        """Test the check applies to the second spouse too."""
        Family(ted, charlotte)
        with pytest.raises(AlreadyMarriedError) as exc_info:
            Family(Person(first_name="Other", age=40), charlotte)
        assert exc_info.value.person is charlotte

    def test_already_married_is_recoverable_domain_error(self, ted, charlotte):
        """Test the failure is an ordinary domain exception."""
        ted.spouse = charlotte
        with pytest.raises(FamilyError):
            Family(ted, charlotte)
        with pytest.raises(HouseholdError):
            Family(ted, charlotte)

    def test_same_person_twice_rejected(self, ted):
        """Test a person cannot found a family with themselves."""
        with pytest.raises(FamilyError):
            Family(ted, ted)

    def test_underage_spouses_are_not_linked(self):
        """Test the marriage gate still applies inside a family."""
        a = Person(age=16)
        b = Person(age=17)

        family = Family(a, b)

        assert a.spouse is None
        assert b.spouse is None
        assert len(family) == 2

    def test_family_formed_is_audited(self, ted, charlotte):
        """Test founding a family goes to the injected audit logger."""
        sink = InMemoryAuditSink()
        family = Family(ted, charlotte, audit_logger=AuditLogger(sink=sink))

        events = sink.events_of_type(AuditEventType.FAMILY_FORMED, entity_id=family.id)
        assert len(events) == 1
        assert events[0].details["spouse_ids"] == [str(ted.id), str(charlotte.id)]


class TestHaveChild:
    """Tests for have_child."""

    def test_have_child_with_adult_member(self, ted, charlotte):
        """Test a member older than 21 allows a child."""
        family = Family(ted, charlotte)
        child = Person(first_name="Child", age=0)

        assert family.have_child(child) is True
        assert len(family) == 3
        assert family.members[-1] is child

    def test_have_child_one_member_old_enough(self):
        """Test one member over 21 is enough."""
        family = Family(Person(age=22), Person(age=19))
        assert family.have_child(Person(age=0)) is True

    def test_have_child_all_members_too_young(self, audit_sink):
        """Test no member over 21 means no child."""
        family = Family(Person(age=21), Person(age=20))
        child = Person(age=0)

        assert family.have_child(child) is False
        assert len(family) == 2
        assert child not in family.members

        events = audit_sink.events_of_type(AuditEventType.CHILD_REJECTED, entity_id=family.id)
        assert len(events) == 1
        assert events[0].details["reason"] == "no_member_old_enough"

    def test_child_age_not_checked(self, ted, charlotte):
        """Test any age is accepted for the child."""
        family = Family(ted, charlotte)
        assert family.have_child(Person(age=50)) is True

    def test_have_child_is_audited(self, ted, charlotte, audit_sink):
        """Test an added child is recorded."""
        family = Family(ted, charlotte)
        child = Person(age=0)
        family.have_child(child)

        events = audit_sink.events_of_type(AuditEventType.CHILD_ADDED, entity_id=family.id)
        assert len(events) == 1
        assert events[0].details["child_id"] == str(child.id)
        assert events[0].details["member_count"] == 3

    def test_existing_member_cannot_be_added_again(self, ted, charlotte, audit_sink):
        """Test adding a current member returns False and leaves membership unchanged."""
        family = Family(ted, charlotte)
        child = Person(age=0)

        assert family.have_child(child) is True
        assert family.have_child(child) is False
        assert family.have_child(ted) is False
        assert family.members == (ted, charlotte, child)

        events = audit_sink.events_of_type(AuditEventType.CHILD_REJECTED, entity_id=family.id)
        assert [e.details["reason"] for e in events] == ["already_member", "already_member"]
        assert events[0].details["child_id"] == str(child.id)

    def test_members_snapshot_is_read_only(self, ted, charlotte):
        """Test members cannot be changed from outside."""
        family = Family(ted, charlotte)
        members = family.members
        family.have_child(Person(age=0))

        assert len(members) == 2
        assert isinstance(family.members, tuple)

    def test_parent_age_from_settings(self, monkeypatch, ted, charlotte):
        """Test the parent age comes from configuration."""
        monkeypatch.setenv("HOUSEHOLD_MIN_PARENT_AGE", "50")
        family = Family(ted, charlotte)
        assert family.have_child(Person(age=0)) is False


class TestHouseholdIncome:
    """Tests for household_income."""

    def test_income_with_one_jobless_member(self, ted, charlotte):
        """Test a jobless member contributes nothing."""
        ted.job = Job.hourly("Guest Lecturer", 10.0)
        family = Family(ted, charlotte)

        assert family.household_income() == 20000

    def test_income_sums_all_jobs(self, ted, charlotte):
        """Test incomes of all members are summed."""
        ted.job = Job.salaried("Guest Lecturer", 1000)
        charlotte.job = Job.hourly("Consultant", 15.0)
        family = Family(ted, charlotte)

        assert family.household_income() == 31000

    def test_income_without_jobs_is_zero(self, ted, charlotte):
        """Test a family without jobs earns nothing."""
        assert Family(ted, charlotte).household_income() == 0

    def test_income_includes_children(self, ted, charlotte):
        """Test working children count towards the household."""
        ted.job = Job.salaried("Guest Lecturer", 50000)
        family = Family(ted, charlotte)
        teenager = Person(age=17, job=Job.hourly("Cashier", 10.0))
        family.have_child(teenager)

        assert family.household_income() == 70000

    def test_income_follows_raises(self, ted, charlotte):
        """Test raises on a member's job show up in the total."""
        job = Job.hourly("Guest Lecturer", 10.0)
        ted.job = job
        family = Family(ted, charlotte)

        job.raise_by_percent(0.1)

        assert family.household_income() == 22000

    def test_iteration(self, ted, charlotte):
        """Test a family iterates over its members."""
        family = Family(ted, charlotte)
        assert [p.first_name for p in family] == ["Ted", "Charlotte"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
