"""
Custom exceptions for the portals.

Domain errors are raised by the repositories and rendered by the console
programs and the HTTP error handlers. Failures from the MongoDB driver itself
(``pymongo.errors.PyMongoError``) are not wrapped and propagate as-is.
"""

class PortalError(Exception):
    """Base exception for domain-level errors."""
    pass

class DuplicateRecordError(PortalError):
    """Raised when a record with the same unique key already exists."""
    pass

class RecordNotFoundError(PortalError):
    """Raised when the targeted record does not exist."""
    pass

class InvalidInputError(PortalError):
    """Raised when an argument is malformed or out of range."""
    pass

class EmployeeAlreadyExistsError(DuplicateRecordError):
    """Raised when adding an employee whose email is already taken."""
    pass

class EmployeeNotFoundError(RecordNotFoundError):
    """Raised when no employee matches the given email or id."""
    pass

class AccountAlreadyExistsError(DuplicateRecordError):
    """Raised when creating an account with a number already in use."""
    pass

class AccountNotFoundError(RecordNotFoundError):
    """Raised when no account matches the given account number."""
    pass

class InsufficientFundsError(InvalidInputError):
    """Raised when a withdrawal exceeds the current balance."""

    def __init__(self, balance: float):
        self.balance = balance
        super().__init__(f"Insufficient funds. Current balance: ${balance}")

class StudentNotFoundError(RecordNotFoundError):
    """Raised when a student id does not resolve to a student."""
    pass

class CourseNotFoundError(RecordNotFoundError):
    """Raised when a course id does not resolve to a course."""
    pass
