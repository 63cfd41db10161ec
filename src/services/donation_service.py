import re
import logging

from core.exceptions import AmountParseError, RpcQueryError
from data_access.ethereum import ChainQueryClient
from models.action import ActionGetResponse, ActionLinks, ActionParameter, LinkedAction
from models.donation import DonationOption, DonationRequest, UnsignedTransaction

logger = logging.getLogger(__name__)

ETHER_DECIMALS = 18
MAX_UINT256 = 2 ** 256 - 1
# whole ETH digits that can still fit in a uint256 wei value
_MAX_WHOLE_DIGITS = len(str(MAX_UINT256 // 10 ** ETHER_DECIMALS))
AMOUNT_PARAMETER_NAME = "amount"

_DECIMAL_RE = re.compile(r"(\d*)(?:\.(\d*))?", re.ASCII)


def parse_ether(amount: str) -> int:
    """
    Converts a decimal ETH string to wei without going through floats.
    """
    match = _DECIMAL_RE.fullmatch(amount)
    if match is None:
        raise AmountParseError(amount, "not a non-negative decimal number")

    whole, fraction = match.group(1), (match.group(2) or "").rstrip("0")
    if not whole and not match.group(2):
        raise AmountParseError(amount, "no digits")
    if len(fraction) > ETHER_DECIMALS:
        raise AmountParseError(amount, f"more than {ETHER_DECIMALS} decimal places")

    whole = whole.lstrip("0")
    if len(whole) > _MAX_WHOLE_DIGITS:
        raise AmountParseError(amount, "exceeds uint256")

    wei = int(whole or "0") * 10 ** ETHER_DECIMALS + int(fraction.ljust(ETHER_DECIMALS, "0"))
    if wei > MAX_UINT256:
        raise AmountParseError(amount, "exceeds uint256")
    return wei


class DonationActionService:
    def __init__(
        self,
        chain_client: ChainQueryClient,
        destination_wallet: str,
        amount_options: list[DonationOption],
        default_amount: str,
        gas_limit: int,
        icon: str,
        title: str,
        description: str,
        base_path: str
    ):
        self.chain_client = chain_client
        self.destination_wallet = destination_wallet
        self.amount_options = tuple(amount_options)
        self.default_amount = default_amount
        self.gas_limit = gas_limit
        self.icon = icon
        self.title = title
        self.description = description
        self.base_path = base_path.rstrip("/")

    def describe_default(self) -> ActionGetResponse:
        actions = [
            LinkedAction(label=option.label, href=f"{self.base_path}/{option.amount_text}")
            for option in self.amount_options
        ]
        actions.append(
            LinkedAction(
                href=f"{self.base_path}/{{{AMOUNT_PARAMETER_NAME}}}",
                label="Donate",
                parameters=[
                    ActionParameter(
                        name=AMOUNT_PARAMETER_NAME,
                        label="Enter a custom ETH amount"
                    )
                ]
            )
        )
        return ActionGetResponse(
            icon=self.icon,
            label=f"{self.default_amount} ETH",
            title=self.title,
            description=self.description,
            links=ActionLinks(actions=actions)
        )

    def describe_for_amount(self, amount: str) -> ActionGetResponse:
        # Any string is echoed, the discovery document is advisory only.
        return ActionGetResponse(
            icon=self.icon,
            label=f"{amount} ETH",
            title=self.title,
            description=self.description
        )

    async def prepare_transaction(self, request: DonationRequest) -> UnsignedTransaction:
        amount = request.amount if request.amount is not None else self.default_amount
        value = parse_ether(amount)

        try:
            nonce = await self.chain_client.get_account_nonce(request.sender_address)
        except Exception as e:
            logger.error(f"Error fetching nonce for {request.sender_address}: {e}")
            raise RpcQueryError("get_account_nonce", e) from e

        try:
            gas_price = await self.chain_client.get_current_gas_price()
        except Exception as e:
            logger.error(f"Error fetching gas price: {e}")
            raise RpcQueryError("get_current_gas_price", e) from e

        logger.info(f"Prepared donation of {amount} ETH from {request.sender_address} with nonce {nonce}.")
        return UnsignedTransaction(
            to=self.destination_wallet,
            value=value,
            nonce=nonce,
            gas_limit=self.gas_limit,
            gas_price=gas_price
        )
