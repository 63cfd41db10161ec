from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Path
)
import logging

from core.dependencies import get_donation_service
from core.exceptions import AmountParseError, RpcQueryError
from models.action import ActionGetResponse
from models.donation import DonationRequest
from services.donation_service import DonationActionService
from api.schemas import ActionError, ActionPostRequest, ActionPostResponse

router = APIRouter(tags=["Ethereum Donate"])
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ActionError, "description": "Invalid donation amount"},
    502: {"model": ActionError, "description": "Ethereum node query failed"},
}

async def prepare_donation(
    service: DonationActionService,
    account: str,
    amount: str | None
) -> ActionPostResponse:
    try:
        transaction = await service.prepare_transaction(
            DonationRequest(sender_address=account, amount=amount)
        )
        return ActionPostResponse(transaction=transaction.to_json())

    except AmountParseError as e:
        logger.warning(f"Rejected donation amount: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except RpcQueryError as e:
        raise HTTPException(status_code=502, detail=f"Ethereum node error: {e.cause}")


@router.get("", response_model=ActionGetResponse, response_model_exclude_none=True, include_in_schema=False)
@router.get(
    "/",
    response_model=ActionGetResponse,
    response_model_exclude_none=True
)
def get_donate_action(service: DonationActionService = Depends(get_donation_service)):
    return service.describe_default()

@router.get(
    "/{amount}",
    response_model=ActionGetResponse,
    response_model_exclude_none=True
)
def get_donate_amount_action(
    amount: str = Path(..., examples=["0.1"]),
    service: DonationActionService = Depends(get_donation_service)
):
    return service.describe_for_amount(amount)

@router.post("", response_model=ActionPostResponse, response_model_exclude_none=True, include_in_schema=False)
@router.post(
    "/",
    response_model=ActionPostResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES
)
async def post_donate_default(
    body: ActionPostRequest,
    service: DonationActionService = Depends(get_donation_service)
):
    """
    Builds an unsigned transfer of the default donation amount.
    """
    return await prepare_donation(service, body.account, None)

@router.post(
    "/{amount}",
    response_model=ActionPostResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES
)
async def post_donate_amount(
    body: ActionPostRequest,
    amount: str = Path(..., examples=["0.1"]),
    service: DonationActionService = Depends(get_donation_service)
):
    """
    Builds an unsigned transfer of `amount` ETH to the donation wallet.
    The transaction is returned JSON encoded and must be signed by `account`.
    """
    return await prepare_donation(service, body.account, amount)
