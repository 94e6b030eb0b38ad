"""
Router for employee endpoints.
This module handles API routes for:
- Adding employees
- Partially updating an employee by email
- Deleting employees by email or by id
- Searching and listing employees
- Per-department statistics

Domain errors raised by the repository are turned into responses by
``portals.middleware.error_handler``.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Request, status

from portals.database.mongo import get_employee_repository
from portals.models.base import parse_date
from portals.repositories.employee import EmployeeRepository
from portals.schemas.employee import EmployeeCreate, EmployeeUpdate
from portals.utils.api_response import json_success

router = APIRouter(
    prefix="/api/employees",
    tags=["employees"]
)

@router.post("")
def add_employee(
    employee: EmployeeCreate,
    repository: EmployeeRepository = Depends(get_employee_repository)
):
    """Add a new employee"""
    stored = repository.add_employee(employee.to_employee())
    return json_success(
        data=stored.model_dump(mode="json"),
        message="Employee added.",
        status_code=status.HTTP_201_CREATED
    )

@router.get("")
def list_employees(
    request: Request,
    page: int = Query(1, description="1-based page number"),
    page_size: Optional[int] = Query(None, description="Records per page"),
    sort_by: str = Query("name", description="'name' or 'joiningDate'"),
    ascending: bool = True,
    repository: EmployeeRepository = Depends(get_employee_repository)
):
    """List one page of employees"""
    if page_size is None:
        page_size = request.app.state.mongo.settings.EMPLOYEE_PAGE_SIZE
    employees = repository.list_employees(page, page_size, sort_by, ascending)
    return json_success(data=[e.model_dump(mode="json") for e in employees])

@router.get("/search")
def search_employees(
    name: Optional[str] = None,
    department: Optional[str] = None,
    skill: Optional[str] = None,
    from_date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    to_date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    repository: EmployeeRepository = Depends(get_employee_repository)
):
    """Search employees; the date range applies only when both bounds are given"""
    employees = repository.search_employees(
        name,
        department,
        skill,
        parse_date(from_date) if from_date else None,
        parse_date(to_date) if to_date else None
    )
    return json_success(data=[e.model_dump(mode="json") for e in employees])

@router.get("/stats/departments")
def department_statistics(repository: EmployeeRepository = Depends(get_employee_repository)):
    """Count employees per department"""
    return json_success(data=repository.department_statistics())

@router.patch("/{email}")
def update_employee(
    email: str,
    changes: EmployeeUpdate,
    repository: EmployeeRepository = Depends(get_employee_repository)
):
    """Update only the given fields of an employee"""
    updated = repository.update_employee(email, changes)
    return json_success(data=updated.model_dump(mode="json"), message="Employee updated.")

@router.delete("/id/{employee_id}")
def delete_employee_by_id(
    employee_id: str,
    repository: EmployeeRepository = Depends(get_employee_repository)
):
    """Delete an employee by ObjectId"""
    repository.delete_employee_by_id(employee_id)
    return json_success(message="Employee deleted.")

@router.delete("/{email}")
def delete_employee_by_email(
    email: str,
    repository: EmployeeRepository = Depends(get_employee_repository)
):
    """Delete an employee by email"""
    repository.delete_employee_by_email(email)
    return json_success(message="Employee deleted.")
