from decimal import Decimal
from functools import lru_cache

from core.config import get_settings
from data_access.ethereum import EthereumChainClient
from models.donation import DonationOption
from services.donation_service import DonationActionService


@lru_cache()
def get_chain_client() -> EthereumChainClient:
    settings = get_settings()
    return EthereumChainClient.from_url(
        rpc_url=settings.ETHEREUM_RPC_URL,
        timeout=settings.RPC_TIMEOUT_SECONDS
    )

@lru_cache()
def get_amount_options() -> tuple[DonationOption, ...]:
    settings = get_settings()
    return tuple(
        DonationOption(amount=Decimal(amount))
        for amount in settings.DONATION_AMOUNT_ETH_OPTIONS
    )

@lru_cache()
def get_donation_service() -> DonationActionService:
    settings = get_settings()
    return DonationActionService(
        chain_client=get_chain_client(),
        destination_wallet=settings.DONATION_DESTINATION_WALLET,
        amount_options=list(get_amount_options()),
        default_amount=settings.DEFAULT_DONATION_AMOUNT_ETH,
        gas_limit=settings.DONATION_GAS_LIMIT,
        icon=settings.ACTION_ICON_URL,
        title=settings.ACTION_TITLE,
        description=settings.ACTION_DESCRIPTION,
        base_path=settings.ACTIONS_BASE_PATH
    )
