"""Account routes for the fitshot API."""

from api.dependencies import get_current_account, get_store
from api.schemas import AccountCreateRequest, AccountResponse
from api.store import AccountExistsError, PrivacyConsentRequiredError, Store
from fastapi import APIRouter, Depends, HTTPException
from models.generation import Account

router = APIRouter(tags=["Accounts"])


@router.post(
    "/api/accounts",
    response_model=AccountResponse,
    status_code=201,
    summary="Register account",
    description="Create an account with the starting coin balance. A referral code adds bonus coins.",
    responses={400: {"description": "Privacy consent missing"}, 409: {"description": "Email already registered"}},
)
async def create_account(request: AccountCreateRequest, store: Store = Depends(get_store)) -> dict:
    try:
        account = await store.create_account(
            email=request.email,
            name=request.name,
            accept_privacy=request.accept_privacy,
            referral_code=request.referral_code,
            marketing_opt_in=request.marketing_opt_in,
        )
    except AccountExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except PrivacyConsentRequiredError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return account.to_dict()


@router.get(
    "/api/accounts/me",
    response_model=AccountResponse,
    summary="Current account",
    responses={401: {"description": "Missing or unknown account"}},
)
async def get_me(account: Account = Depends(get_current_account)) -> dict:
    return account.to_dict()
