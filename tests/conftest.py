"""
Pytest configuration and fixtures for testing.

All tests run against ``mongomock``, an in-memory stand-in for a MongoDB
server, injected into ``MongoConnection`` in place of a real client.
"""

import sys
from datetime import date
from pathlib import Path

import mongomock
import pytest
from fastapi.testclient import TestClient

# Add the project root directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from portals.database.mongo import MongoConnection
from portals.main import create_app
from portals.models.employee import Employee
from portals.repositories.account import AccountRepository
from portals.repositories.employee import EmployeeRepository
from portals.repositories.enrollment import EnrollmentRepository
from portals.utils.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at test database names."""
    return Settings(
        MONGODB_URL="mongodb://testserver:27017",
        EMPLOYEE_DB_NAME="test_employee_db",
        EMPLOYEE_COLLECTION="employees",
        EMPLOYEE_PAGE_SIZE=5,
        BANKING_DB_NAME="test_banking_system",
        ACCOUNTS_COLLECTION="accounts",
        ENROLLMENT_DB_NAME="test_student_enrollment",
    )


@pytest.fixture
def mongo_client():
    """A fresh in-memory MongoDB client per test."""
    return mongomock.MongoClient()


@pytest.fixture
def connection(mongo_client, test_settings) -> MongoConnection:
    return MongoConnection(settings=test_settings, client=mongo_client)


@pytest.fixture
def employee_repository(connection) -> EmployeeRepository:
    repository = EmployeeRepository(connection.employees)
    repository.ensure_indexes()
    return repository


@pytest.fixture
def account_repository(connection) -> AccountRepository:
    repository = AccountRepository(connection.accounts)
    repository.ensure_indexes()
    return repository


@pytest.fixture
def enrollment_repository(connection) -> EnrollmentRepository:
    return EnrollmentRepository(connection.enrollment_db)


@pytest.fixture
def make_employee():
    """Factory for employee records with sensible defaults."""
    def _make(**overrides) -> Employee:
        values = {
            "name": "Alice Smith",
            "email": "alice@example.com",
            "department": "Engineering",
            "skills": ["python", "mongodb"],
            "joining_date": date(2021, 3, 15),
        }
        values.update(overrides)
        return Employee(**values)
    return _make


@pytest.fixture
def client(connection) -> TestClient:
    """Test client whose app uses the in-memory connection."""
    app = create_app(connection)
    with TestClient(app) as test_client:
        yield test_client
