from pydantic import BaseModel, field_validator
from typing import Optional
from web3 import Web3

class ActionPostRequest(BaseModel):
    account: str  # The address that will sign the transaction

    @field_validator("account")
    @classmethod
    def check_account(cls, value: str) -> str:
        if not Web3.is_address(value):
            raise ValueError("account must be an Ethereum address")
        return value

class ActionPostResponse(BaseModel):
    transaction: str  # JSON encoded unsigned transaction
    message: Optional[str] = None

class ActionError(BaseModel):
    detail: str
