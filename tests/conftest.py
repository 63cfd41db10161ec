"""
Shared fixtures: fake chain clients and a service wired to them.
"""

import os
from decimal import Decimal

import pytest

# Settings require an RPC endpoint; nothing in the tests talks to it.
os.environ.setdefault("ETHEREUM_RPC_URL", "http://localhost:8545")

from models.donation import DonationOption
from services.donation_service import DonationActionService

DESTINATION = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"
SENDER = "0x00000000219ab540356cbb839cbe05303d7705fa"


class FakeChainClient:
    """Records every query and answers with fixed values."""

    def __init__(self, nonce=7, gas_price=30_000_000_000, nonce_error=None, gas_price_error=None):
        self.nonce = nonce
        self.gas_price = gas_price
        self.nonce_error = nonce_error
        self.gas_price_error = gas_price_error
        self.calls = []

    async def get_account_nonce(self, address):
        self.calls.append(("get_account_nonce", address))
        if self.nonce_error is not None:
            raise self.nonce_error
        return self.nonce

    async def get_current_gas_price(self):
        self.calls.append(("get_current_gas_price",))
        if self.gas_price_error is not None:
            raise self.gas_price_error
        return self.gas_price


def build_service(chain_client) -> DonationActionService:
    return DonationActionService(
        chain_client=chain_client,
        destination_wallet=DESTINATION,
        amount_options=[DonationOption(amount=Decimal(a)) for a in ("0.01", "0.05", "0.1")],
        default_amount="0.01",
        gas_limit=21000,
        icon="https://example.com/icon.png",
        title="Donate to Alice",
        description="Ethereum Enthusiast | Support my research with an ETH donation.",
        base_path="/api/donate"
    )


@pytest.fixture
def chain_client():
    return FakeChainClient()


@pytest.fixture
def service(chain_client):
    return build_service(chain_client)
