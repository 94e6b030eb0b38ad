"""
Employee repository.

Translates the employee portal operations (add, partial update, delete by
email or id, search, paginated listing and per-department statistics) into
single MongoDB round trips. ``email`` is the business key; uniqueness is
checked before inserting and also enforced by a unique index.
"""

import logging
import re
from datetime import date
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from portals.exceptions import EmployeeAlreadyExistsError, EmployeeNotFoundError, InvalidInputError
from portals.models.base import date_to_datetime
from portals.models.employee import Employee
from portals.repositories.base import BaseRepository, parse_object_id
from portals.schemas.employee import EmployeeUpdate

logger = logging.getLogger(__name__)

SORT_BY_JOINING_DATE = "joiningDate"
SORT_BY_NAME = "name"

# skip and limit are encoded as BSON int64
MAX_CURSOR_OFFSET = 2 ** 63 - 1

def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()

class EmployeeRepository(BaseRepository[Employee]):
    """Repository for the ``employees`` collection."""

    def __init__(self, collection: Collection):
        super().__init__(collection, Employee)

    def ensure_indexes(self) -> str:
        """Create the unique index on ``email``. Returns the index name."""
        return self.collection.create_index([("email", ASCENDING)], unique=True)

    def add_employee(self, employee: Employee) -> Employee:
        """
        Add a new employee.

        Args:
            employee: Candidate record; ``email`` must be non-empty

        Returns:
            Employee: The stored record with its assigned id

        Raises:
            InvalidInputError: If the email is blank
            EmployeeAlreadyExistsError: If the email is already taken
        """
        if _is_blank(employee.email):
            raise InvalidInputError("Employee email is required.")

        if self.collection.find_one({"email": employee.email}, {"_id": 1}) is not None:
            logger.warning(f"Rejected duplicate employee email: {employee.email}")
            raise EmployeeAlreadyExistsError("Employee with this email already exists.")

        try:
            stored = self.insert(employee.model_copy(update={"id": None}))
        except DuplicateKeyError:
            # Another writer inserted the same email after our check
            logger.warning(f"Unique index rejected employee email: {employee.email}")
            raise EmployeeAlreadyExistsError("Employee with this email already exists.")

        logger.info(f"Employee added: {stored.email} ({stored.id})")
        return stored

    def update_employee(self, email: str, changes: EmployeeUpdate) -> Employee:
        """
        Apply a partial update to the employee with the given email.

        Only the fields present in ``changes`` are overwritten.

        Returns:
            Employee: The record after the update

        Raises:
            InvalidInputError: If ``changes`` holds no fields
            EmployeeNotFoundError: If no employee has this email
        """
        if changes.is_empty():
            raise InvalidInputError("No fields to update.")
        set_fields = changes.to_set_fields()

        document = self.collection.find_one_and_update(
            {"email": email},
            {"$set": set_fields},
            return_document=ReturnDocument.AFTER
        )
        if document is None:
            logger.warning(f"Update failed, no employee with email: {email}")
            raise EmployeeNotFoundError(f"No employee found with email: {email}")

        logger.info(f"Employee updated: {email} ({', '.join(set_fields)})")
        return Employee.from_document(document)

    def delete_employee_by_email(self, email: str) -> None:
        """
        Raises:
            EmployeeNotFoundError: If no employee has this email
        """
        if not self.delete_one({"email": email}):
            raise EmployeeNotFoundError(f"No employee found with email: {email}")
        logger.info(f"Employee deleted: {email}")

    def delete_employee_by_id(self, employee_id: str) -> None:
        """
        Raises:
            InvalidInputError: If ``employee_id`` is not a valid ObjectId;
                no query is issued in that case
            EmployeeNotFoundError: If no employee has this id
        """
        object_id = parse_object_id(employee_id)
        if not self.delete_one({"_id": object_id}):
            raise EmployeeNotFoundError(f"No employee found with ID: {employee_id}")
        logger.info(f"Employee deleted: {employee_id}")

    @staticmethod
    def build_search_filter(
        name: Optional[str] = None,
        department: Optional[str] = None,
        skill: Optional[str] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None
    ) -> Dict[str, Any]:
        """
        Build the filter document for ``search_employees``.

        The joining date range is applied only when both bounds are given.
        """
        filters: Dict[str, Any] = {}
        if not _is_blank(name):
            filters["name"] = {"$regex": re.escape(name), "$options": "i"}
        if not _is_blank(department):
            filters["department"] = department
        if not _is_blank(skill):
            filters["skills"] = {"$in": [skill]}
        if from_date is not None and to_date is not None:
            filters["joiningDate"] = {
                "$gte": date_to_datetime(from_date),
                "$lte": date_to_datetime(to_date)
            }
        return filters

    def search_employees(
        self,
        name: Optional[str] = None,
        department: Optional[str] = None,
        skill: Optional[str] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None
    ) -> List[Employee]:
        """
        Search employees. All conditions are optional and combined with AND.

        Args:
            name: Case-insensitive substring of the name
            department: Exact department
            skill: A skill the employee must have
            from_date: Inclusive lower bound of the joining date
            to_date: Inclusive upper bound of the joining date

        Returns:
            List[Employee]: Every matching employee, unpaginated
        """
        filters = self.build_search_filter(name, department, skill, from_date, to_date)
        return self.find(filters)

    def list_employees(
        self,
        page: int = 1,
        page_size: int = 5,
        sort_by: Optional[str] = SORT_BY_NAME,
        ascending: bool = True
    ) -> List[Employee]:
        """
        List one page of employees.

        Sorting is by ``joiningDate`` when ``sort_by`` names it (any case)
        and by ``name`` otherwise. Ties are broken by ``_id`` so consecutive
        pages neither overlap nor skip records.

        Args:
            page: 1-based page number
            page_size: Records per page

        Raises:
            InvalidInputError: If ``page`` or ``page_size`` is below 1, or the
                resulting offset does not fit in a 64-bit integer
        """
        if page < 1:
            raise InvalidInputError("Page number must be at least 1.")
        if page_size < 1:
            raise InvalidInputError("Page size must be at least 1.")
        if page_size > MAX_CURSOR_OFFSET or (page - 1) * page_size > MAX_CURSOR_OFFSET:
            raise InvalidInputError("Page number or page size is too large.")

        if sort_by is not None and sort_by.lower() == SORT_BY_JOINING_DATE.lower():
            sort_field = SORT_BY_JOINING_DATE
        else:
            sort_field = SORT_BY_NAME
        direction = ASCENDING if ascending else DESCENDING

        return self.find(
            sort=[(sort_field, direction), ("_id", direction)],
            skip=(page - 1) * page_size,
            limit=page_size
        )

    def department_statistics(self) -> Dict[str, int]:
        """Count employees per department."""
        pipeline = [{"$group": {"_id": "$department", "count": {"$sum": 1}}}]
        return {doc["_id"]: doc["count"] for doc in self.collection.aggregate(pipeline)}
