"""
Router for banking endpoints.
This module handles API routes for:
- Opening accounts
- Deposits and withdrawals
- Balance lookups
"""

from fastapi import APIRouter, Depends, status

from portals.database.mongo import get_account_repository
from portals.repositories.account import AccountRepository
from portals.schemas.account import AccountCreate, AmountRequest
from portals.utils.api_response import json_success

router = APIRouter(
    prefix="/api/accounts",
    tags=["accounts"]
)

@router.post("")
def create_account(
    account: AccountCreate,
    repository: AccountRepository = Depends(get_account_repository)
):
    """Open a new account"""
    stored = repository.create_account(
        account.account_number,
        account.account_holder,
        account.initial_balance
    )
    return json_success(
        data=stored.model_dump(mode="json"),
        message="Account created successfully.",
        status_code=status.HTTP_201_CREATED
    )

@router.get("/{account_number}")
def check_balance(
    account_number: str,
    repository: AccountRepository = Depends(get_account_repository)
):
    """Get an account with its balance"""
    account = repository.get_account(account_number)
    return json_success(data=account.model_dump(mode="json"))

@router.post("/{account_number}/deposit")
def deposit(
    account_number: str,
    request: AmountRequest,
    repository: AccountRepository = Depends(get_account_repository)
):
    """Deposit money into an account"""
    account = repository.deposit(account_number, request.amount)
    return json_success(data=account.model_dump(mode="json"), message="Deposit successful.")

@router.post("/{account_number}/withdraw")
def withdraw(
    account_number: str,
    request: AmountRequest,
    repository: AccountRepository = Depends(get_account_repository)
):
    """Withdraw money from an account"""
    account = repository.withdraw(account_number, request.amount)
    return json_success(data=account.model_dump(mode="json"), message="Withdrawal successful.")
