"""
MongoDB connection management.

This module provides:
- ``MongoConnection``, the single owner of the process-wide ``MongoClient``
- Index bootstrap for every portal collection
- FastAPI dependencies that hand repositories to route handlers

The client is opened once at start-up and closed at shutdown, either by using
``MongoConnection`` as a context manager (console programs) or through the
application startup/shutdown hooks (HTTP app).
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from portals.repositories.account import AccountRepository
from portals.repositories.employee import EmployeeRepository
from portals.repositories.enrollment import EnrollmentRepository
from portals.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Owns a ``MongoClient`` and exposes the portal databases and collections.

    Attributes:
        url (str): MongoDB connection string
        settings (Settings): Settings used to resolve database names
    """

    def __init__(self, url: Optional[str] = None, settings: Optional[Settings] = None, client: Optional[MongoClient] = None):
        """
        Args:
            url: Connection string; defaults to ``MONGODB_URL``
            settings: Settings instance; defaults to ``get_settings()``
            client: An already constructed client (used by tests to inject an
                in-memory client). The connection takes ownership of it.
        """
        self.settings = settings or get_settings()
        self.url = url or self.settings.MONGODB_URL
        self._client = client

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            raise RuntimeError("MongoDB connection is not open")
        return self._client

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def open(self) -> "MongoConnection":
        """Create the client if it does not exist yet."""
        if self._client is None:
            logger.info(f"Connecting to MongoDB at {self.url}")
            self._client = MongoClient(
                self.url,
                serverSelectionTimeoutMS=self.settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS
            )
        return self

    def close(self) -> None:
        """Close the client. Safe to call more than once."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("Closed MongoDB connection")

    def __enter__(self) -> "MongoConnection":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def database(self, name: str) -> Database:
        return self.client[name]

    @property
    def employees(self) -> Collection:
        return self.database(self.settings.EMPLOYEE_DB_NAME)[self.settings.EMPLOYEE_COLLECTION]

    @property
    def accounts(self) -> Collection:
        return self.database(self.settings.BANKING_DB_NAME)[self.settings.ACCOUNTS_COLLECTION]

    @property
    def enrollment_db(self) -> Database:
        return self.database(self.settings.ENROLLMENT_DB_NAME)


def ensure_indexes(connection: MongoConnection) -> None:
    """
    Create the unique indexes the portals rely on.

    ``create_index`` is idempotent, so this runs on every start-up.
    """
    EmployeeRepository(connection.employees).ensure_indexes()
    AccountRepository(connection.accounts).ensure_indexes()
    logger.info("MongoDB indexes ensured")


def get_connection(request: Request) -> MongoConnection:
    """
    FastAPI dependency that returns the application's connection.

    Returns:
        MongoConnection: The connection opened at startup
    """
    return request.app.state.mongo


def get_employee_repository(connection: MongoConnection = Depends(get_connection)) -> EmployeeRepository:
    """FastAPI dependency that provides the employee repository."""
    return EmployeeRepository(connection.employees)


def get_account_repository(connection: MongoConnection = Depends(get_connection)) -> AccountRepository:
    """FastAPI dependency that provides the account repository."""
    return AccountRepository(connection.accounts)


def get_enrollment_repository(connection: MongoConnection = Depends(get_connection)) -> EnrollmentRepository:
    """FastAPI dependency that provides the enrollment repository."""
    return EnrollmentRepository(connection.enrollment_db)
