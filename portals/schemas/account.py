"""
Pydantic models for banking requests.

Amounts are validated by the repository rather than here so that a negative
amount is reported the same way from the console and from the API.
"""

from pydantic import BaseModel, Field

class AccountCreate(BaseModel):
    """Model for opening an account"""
    account_number: str = Field(min_length=1)
    account_holder: str
    initial_balance: float = 0.0

class AmountRequest(BaseModel):
    """Model for a deposit or withdrawal"""
    amount: float
