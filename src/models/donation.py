from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, computed_field


class DonationOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Decimal  # whole ETH

    @property
    def amount_text(self) -> str:
        # plain notation, "0.10" -> "0.1" and never "1E-7"
        return f"{self.amount.normalize():f}"

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.amount_text} ETH"

class DonationRequest(BaseModel):
    sender_address: str
    amount: str | None = None  # decimal ETH string, default applied by the service

class UnsignedTransaction(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    to: str
    value: int  # wei
    nonce: int
    gas_limit: int = Field(alias="gasLimit")
    gas_price: int = Field(alias="gasPrice")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
