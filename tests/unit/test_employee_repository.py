"""
Unit tests for EmployeeRepository.
"""

from datetime import date, datetime
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from portals.exceptions import (
    EmployeeAlreadyExistsError,
    EmployeeNotFoundError,
    InvalidInputError
)
from portals.repositories.employee import EmployeeRepository
from portals.schemas.employee import EmployeeUpdate


@pytest.fixture
def staff(employee_repository, make_employee):
    """Three employees across two departments."""
    a = employee_repository.add_employee(make_employee(
        name="Alice", email="a@x", department="Eng", skills=["python"], joining_date=date(2020, 1, 10)
    ))
    b = employee_repository.add_employee(make_employee(
        name="Bob", email="b@x", department="Eng", skills=["java", "python"], joining_date=date(2021, 6, 1)
    ))
    c = employee_repository.add_employee(make_employee(
        name="Carol", email="c@x", department="Ops", skills=[], joining_date=date(2022, 9, 30)
    ))
    return a, b, c


def emails(employees):
    return sorted(e.email for e in employees)


class TestAddEmployee:
    def test_add_assigns_id_and_stores_document(self, employee_repository, make_employee):
        stored = employee_repository.add_employee(make_employee())

        assert ObjectId.is_valid(stored.id)
        document = employee_repository.collection.find_one({"email": "alice@example.com"})
        assert document["name"] == "Alice Smith"
        assert document["skills"] == ["python", "mongodb"]
        assert document["joiningDate"] == datetime(2021, 3, 15)

    def test_duplicate_email_is_rejected_without_write(self, employee_repository, make_employee):
        employee_repository.add_employee(make_employee())

        with pytest.raises(EmployeeAlreadyExistsError):
            employee_repository.add_employee(make_employee(name="Someone Else", department="Ops"))

        assert employee_repository.count({"email": "alice@example.com"}) == 1
        assert employee_repository.count() == 1

    def test_blank_email_is_invalid(self, employee_repository, make_employee):
        with pytest.raises(InvalidInputError):
            employee_repository.add_employee(make_employee(email="   "))
        assert employee_repository.count() == 0

    def test_unique_index_violation_is_reported_as_duplicate(self, make_employee):
        collection = MagicMock()
        collection.find_one.return_value = None
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error")
        repository = EmployeeRepository(collection)

        with pytest.raises(EmployeeAlreadyExistsError):
            repository.add_employee(make_employee())

    def test_transport_errors_propagate_unchanged(self, make_employee):
        collection = MagicMock()
        collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")
        repository = EmployeeRepository(collection)

        with pytest.raises(ServerSelectionTimeoutError):
            repository.add_employee(make_employee())

    def test_ensure_indexes_creates_unique_email_index(self, employee_repository):
        indexes = employee_repository.collection.index_information()
        email_indexes = [i for i in indexes.values() if i["key"] == [("email", 1)]]
        assert email_indexes and email_indexes[0].get("unique") is True


class TestUpdateEmployee:
    def test_empty_patch_fails_without_write(self, employee_repository, make_employee):
        employee_repository.add_employee(make_employee())
        before = employee_repository.collection.find_one({"email": "alice@example.com"})

        with pytest.raises(InvalidInputError):
            employee_repository.update_employee("alice@example.com", EmployeeUpdate())

        assert employee_repository.collection.find_one({"email": "alice@example.com"}) == before

    def test_empty_patch_fails_for_unknown_email_too(self, employee_repository):
        with pytest.raises(InvalidInputError):
            employee_repository.update_employee("nobody@example.com", EmployeeUpdate())

    def test_patch_of_only_nulls_is_empty(self, employee_repository, make_employee):
        employee_repository.add_employee(make_employee())
        changes = EmployeeUpdate(name=None, skills=None)

        with pytest.raises(InvalidInputError, match="No fields to update."):
            employee_repository.update_employee("alice@example.com", changes)

        assert employee_repository.collection.find_one({"email": "alice@example.com"})["name"] == "Alice Smith"

    def test_patch_changes_only_named_field(self, employee_repository, make_employee):
        original = employee_repository.add_employee(make_employee())

        updated = employee_repository.update_employee(
            "alice@example.com", EmployeeUpdate(department="Research")
        )

        assert updated.department == "Research"
        assert updated.model_dump(exclude={"department"}) == original.model_dump(exclude={"department"})

    def test_patch_joining_date_and_skills(self, employee_repository, make_employee):
        employee_repository.add_employee(make_employee())

        updated = employee_repository.update_employee(
            "alice@example.com",
            EmployeeUpdate(skills=["go"], joining_date=date(2023, 1, 2))
        )

        assert updated.skills == ["go"]
        assert updated.joining_date == date(2023, 1, 2)
        assert updated.name == "Alice Smith"

    def test_unknown_email_is_not_found(self, employee_repository):
        with pytest.raises(EmployeeNotFoundError):
            employee_repository.update_employee("nobody@example.com", EmployeeUpdate(name="X"))


class TestDeleteEmployee:
    def test_delete_by_email(self, employee_repository, staff):
        employee_repository.delete_employee_by_email("b@x")
        assert emails(employee_repository.search_employees()) == ["a@x", "c@x"]

    def test_delete_by_email_twice_is_not_found(self, employee_repository, staff):
        employee_repository.delete_employee_by_email("b@x")
        with pytest.raises(EmployeeNotFoundError):
            employee_repository.delete_employee_by_email("b@x")

    def test_delete_never_inserted_email_is_not_found(self, employee_repository):
        with pytest.raises(EmployeeNotFoundError):
            employee_repository.delete_employee_by_email("ghost@example.com")

    def test_delete_by_id(self, employee_repository, staff):
        alice = staff[0]
        employee_repository.delete_employee_by_id(alice.id)
        assert employee_repository.find_one({"email": "a@x"}) is None

    def test_delete_by_unknown_id_is_not_found(self, employee_repository):
        with pytest.raises(EmployeeNotFoundError):
            employee_repository.delete_employee_by_id(str(ObjectId()))

    def test_invalid_id_is_rejected_before_querying(self):
        collection = MagicMock()
        repository = EmployeeRepository(collection)

        with pytest.raises(InvalidInputError):
            repository.delete_employee_by_id("not-an-object-id")

        collection.delete_one.assert_not_called()


class TestSearchEmployees:
    def test_no_parameters_returns_everything(self, employee_repository, staff):
        assert emails(employee_repository.search_employees()) == ["a@x", "b@x", "c@x"]

    def test_blank_parameters_are_ignored(self, employee_repository, staff):
        assert len(employee_repository.search_employees(name="", department="  ", skill="")) == 3

    def test_name_is_case_insensitive_substring(self, employee_repository, staff):
        assert emails(employee_repository.search_employees(name="AR")) == ["c@x"]
        assert emails(employee_repository.search_employees(name="o")) == ["b@x", "c@x"]

    def test_name_is_matched_literally(self, employee_repository, staff):
        assert employee_repository.search_employees(name=".*") == []

    def test_department_is_exact(self, employee_repository, staff):
        assert emails(employee_repository.search_employees(department="Eng")) == ["a@x", "b@x"]
        assert employee_repository.search_employees(department="eng") == []

    def test_skill_membership(self, employee_repository, staff):
        assert emails(employee_repository.search_employees(skill="python")) == ["a@x", "b@x"]
        assert emails(employee_repository.search_employees(skill="java")) == ["b@x"]

    def test_date_range_is_inclusive(self, employee_repository, staff):
        found = employee_repository.search_employees(
            from_date=date(2020, 1, 10), to_date=date(2021, 6, 1)
        )
        assert emails(found) == ["a@x", "b@x"]

    def test_half_date_range_is_ignored(self, employee_repository, staff):
        assert len(employee_repository.search_employees(from_date=date(2022, 1, 1))) == 3
        assert len(employee_repository.search_employees(to_date=date(2019, 1, 1))) == 3

    def test_conditions_are_combined(self, employee_repository, staff):
        found = employee_repository.search_employees(
            department="Eng", skill="python", from_date=date(2021, 1, 1), to_date=date(2021, 12, 31)
        )
        assert emails(found) == ["b@x"]

    def test_build_search_filter(self):
        filters = EmployeeRepository.build_search_filter(
            name="al", department="Eng", skill="go", from_date=date(2020, 1, 1)
        )
        assert filters == {
            "name": {"$regex": "al", "$options": "i"},
            "department": "Eng",
            "skills": {"$in": ["go"]},
        }


class TestListEmployees:
    @pytest.fixture
    def many(self, employee_repository, make_employee):
        names = ["Hank", "Bea", "Ivy", "Ann", "Dan", "Gus", "Cal", "Eve", "Fay"]
        for day, name in enumerate(names, start=1):
            employee_repository.add_employee(make_employee(
                name=name, email=f"{name.lower()}@x", joining_date=date(2020, 1, day)
            ))
        return names

    def test_pages_are_ordered_contiguous_and_disjoint(self, employee_repository, many):
        first = employee_repository.list_employees(page=1, page_size=4, sort_by="name", ascending=True)
        second = employee_repository.list_employees(page=2, page_size=4, sort_by="name", ascending=True)
        third = employee_repository.list_employees(page=3, page_size=4, sort_by="name", ascending=True)

        names = [e.name for e in first + second + third]
        assert len(first) == 4 and len(second) == 4 and len(third) == 1
        assert names == sorted(many)

    def test_descending(self, employee_repository, many):
        page = employee_repository.list_employees(page=1, page_size=3, sort_by="name", ascending=False)
        assert [e.name for e in page] == ["Ivy", "Hank", "Gus"]

    def test_sort_by_joining_date_is_case_insensitive(self, employee_repository, many):
        page = employee_repository.list_employees(page=1, page_size=3, sort_by="JOININGDATE", ascending=True)
        assert [e.name for e in page] == ["Hank", "Bea", "Ivy"]

    def test_unknown_sort_field_defaults_to_name(self, employee_repository, many):
        page = employee_repository.list_employees(page=1, page_size=2, sort_by="salary", ascending=True)
        assert [e.name for e in page] == ["Ann", "Bea"]
        page = employee_repository.list_employees(page=1, page_size=2, sort_by=None, ascending=True)
        assert [e.name for e in page] == ["Ann", "Bea"]

    def test_page_past_the_end_is_empty(self, employee_repository, many):
        assert employee_repository.list_employees(page=10, page_size=5) == []

    @pytest.mark.parametrize(
        "page,page_size",
        [(0, 5), (-1, 5), (1, 0), (10 ** 20, 5), (2, 2 ** 63), (1, 2 ** 63)]
    )
    def test_invalid_pagination_is_rejected(self, employee_repository, page, page_size):
        with pytest.raises(InvalidInputError):
            employee_repository.list_employees(page=page, page_size=page_size)


class TestDepartmentStatistics:
    def test_counts_per_department(self, employee_repository, staff):
        assert employee_repository.department_statistics() == {"Eng": 2, "Ops": 1}

    def test_counts_sum_to_total(self, employee_repository, staff):
        stats = employee_repository.department_statistics()
        assert sum(stats.values()) == employee_repository.count()

    def test_empty_collection(self, employee_repository):
        assert employee_repository.department_statistics() == {}

    def test_scenario_delete_then_search(self, employee_repository, staff):
        assert emails(employee_repository.search_employees(department="Eng")) == ["a@x", "b@x"]
        employee_repository.delete_employee_by_email("b@x")
        assert emails(employee_repository.search_employees(department="Eng")) == ["a@x"]
        assert employee_repository.department_statistics() == {"Eng": 1, "Ops": 1}
