import logging
from typing import Protocol
from web3 import AsyncWeb3

logger = logging.getLogger(__name__)


class ChainQueryClient(Protocol):
    async def get_account_nonce(self, address: str) -> int: ...

    async def get_current_gas_price(self) -> int: ...


class EthereumChainClient:
    """Read-only JSON-RPC queries against a single Ethereum node."""

    def __init__(self, web3: AsyncWeb3):
        self.web3 = web3

    @classmethod
    def from_url(cls, rpc_url: str, timeout: float) -> "EthereumChainClient":
        return cls(AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(
            rpc_url,
            request_kwargs={"timeout": timeout}
        )))

    async def get_account_nonce(self, address: str) -> int:
        checksum_address = AsyncWeb3.to_checksum_address(address)
        nonce = await self.web3.eth.get_transaction_count(checksum_address)
        logger.debug(f"Nonce for {checksum_address} is {nonce}")
        return int(nonce)

    async def get_current_gas_price(self) -> int:
        gas_price = await self.web3.eth.gas_price
        logger.debug(f"Current gas price is {gas_price} wei")
        return int(gas_price)
