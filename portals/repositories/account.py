"""
Bank account repository.

Balances change through ``$inc`` updates so that the read of the current
balance and the write of the new one happen in a single server-side step.
"""

import logging
import math

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from portals.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidInputError
)
from portals.models.account import Account
from portals.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

def _require_positive(amount: float, action: str) -> None:
    if not isinstance(amount, (int, float)) or not math.isfinite(amount) or amount <= 0:
        raise InvalidInputError(f"{action} amount must be positive.")

class AccountRepository(BaseRepository[Account]):
    """Repository for the ``accounts`` collection."""

    def __init__(self, collection: Collection):
        super().__init__(collection, Account)

    def ensure_indexes(self) -> str:
        return self.collection.create_index([("accountNumber", ASCENDING)], unique=True)

    def create_account(self, account_number: str, account_holder: str, initial_balance: float = 0.0) -> Account:
        """
        Open a new account.

        Raises:
            InvalidInputError: If the initial balance is negative
            AccountAlreadyExistsError: If the account number is taken
        """
        if not isinstance(initial_balance, (int, float)) or not math.isfinite(initial_balance) or initial_balance < 0:
            raise InvalidInputError("Initial balance cannot be negative.")
        if not account_number or not account_number.strip():
            raise InvalidInputError("Account number is required.")

        if self.find_one({"accountNumber": account_number}) is not None:
            raise AccountAlreadyExistsError("Account with this number already exists.")

        account = Account(
            account_number=account_number,
            account_holder=account_holder,
            balance=float(initial_balance)
        )
        try:
            stored = self.insert(account)
        except DuplicateKeyError:
            raise AccountAlreadyExistsError("Account with this number already exists.")

        logger.info(f"Account created: {account_number}")
        return stored

    def get_account(self, account_number: str) -> Account:
        """
        Raises:
            AccountNotFoundError: If no account has this number
        """
        account = self.find_one({"accountNumber": account_number})
        if account is None:
            raise AccountNotFoundError(f"Account not found with number: {account_number}")
        return account

    def deposit(self, account_number: str, amount: float) -> Account:
        """
        Add ``amount`` to the balance and return the updated account.

        Raises:
            InvalidInputError: If ``amount`` is not positive
            AccountNotFoundError: If no account has this number
        """
        _require_positive(amount, "Deposit")

        document = self.collection.find_one_and_update(
            {"accountNumber": account_number},
            {"$inc": {"balance": float(amount)}},
            return_document=ReturnDocument.AFTER
        )
        if document is None:
            raise AccountNotFoundError(f"Account not found with number: {account_number}")

        account = Account.from_document(document)
        logger.info(f"Deposit of {amount} to {account_number}, new balance {account.balance}")
        return account

    def withdraw(self, account_number: str, amount: float) -> Account:
        """
        Subtract ``amount`` from the balance and return the updated account.

        The balance check is part of the update filter, so the balance can
        never go below zero.

        Raises:
            InvalidInputError: If ``amount`` is not positive
            AccountNotFoundError: If no account has this number
            InsufficientFundsError: If the balance is lower than ``amount``
        """
        _require_positive(amount, "Withdrawal")

        document = self.collection.find_one_and_update(
            {"accountNumber": account_number, "balance": {"$gte": float(amount)}},
            {"$inc": {"balance": -float(amount)}},
            return_document=ReturnDocument.AFTER
        )
        if document is None:
            # Distinguish a missing account from a short balance
            current = self.get_account(account_number)
            logger.warning(f"Withdrawal of {amount} from {account_number} refused, balance {current.balance}")
            raise InsufficientFundsError(current.balance)

        account = Account.from_document(document)
        logger.info(f"Withdrawal of {amount} from {account_number}, new balance {account.balance}")
        return account
