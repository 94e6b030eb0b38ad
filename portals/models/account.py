from typing import ClassVar, Dict

from portals.models.base import DocumentModel

class Account(DocumentModel):
    """
    A bank account in the ``accounts`` collection.

    Attributes:
        account_number (str): Unique account number, stored as ``accountNumber``
        account_holder (str): Holder name, stored as ``accountHolder``
        balance (float): Current balance, never negative
    """
    document_keys: ClassVar[Dict[str, str]] = {
        "account_number": "accountNumber",
        "account_holder": "accountHolder",
    }

    account_number: str
    account_holder: str
    balance: float = 0.0
