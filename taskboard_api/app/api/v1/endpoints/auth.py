"""
Authentication endpoints for API v1.

Accounts are keyed by phone number.  Two ways to sign in exist:

* ``/login`` with phone number and password;
* ``/phone-login`` with a phone number the client confirmed through the
  identity provider's one‑time passcode, passing the provider's ID
  token as proof.  An unknown number is registered on the fly.

``/verify-phone`` lets the client find out, before sending a passcode,
whether the number already has an account.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from taskboard_api.app.api.deps import get_account_service, get_identity_verifier
from taskboard_api.app.core.identity import IdentityVerificationError, IdentityVerifier
from taskboard_api.app.core.security import create_access_token, get_current_account
from taskboard_api.app.schemas.account import (
    Account,
    AccountRead,
    LoginRequest,
    PhoneCheckRequest,
    PhoneCheckResponse,
    PhoneLoginRequest,
    RegisterRequest,
    TokenResponse,
)
from taskboard_api.app.services.account_service import AccountConflictError, AccountService

router = APIRouter()


def _token_for(account: Account) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(account.id),
        account=AccountRead.model_validate(account),
    )


@router.post("/register", response_model=AccountRead, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    accounts: AccountService = Depends(get_account_service),
) -> AccountRead:
    """Create an account.  409 if the phone number or username is taken."""
    try:
        account = accounts.register(payload)
    except AccountConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return AccountRead.model_validate(account)


@router.post("/verify-phone", response_model=PhoneCheckResponse)
def verify_phone(
    payload: PhoneCheckRequest,
    accounts: AccountService = Depends(get_account_service),
) -> PhoneCheckResponse:
    return PhoneCheckResponse(exists=accounts.phone_exists(payload.phone_number))


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginRequest,
    accounts: AccountService = Depends(get_account_service),
) -> TokenResponse:
    """Password login.

    Answers 404 when no account has the phone number, so the client can
    switch to registration, and 401 when the password is wrong.
    """
    if not accounts.phone_exists(payload.phone_number):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    account = accounts.authenticate(payload.phone_number, payload.password)
    if account is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return _token_for(account)


@router.post("/phone-login", response_model=TokenResponse)
def phone_login(
    payload: PhoneLoginRequest,
    accounts: AccountService = Depends(get_account_service),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> TokenResponse:
    try:
        account = accounts.sign_in_with_phone(
            payload.phone_number,
            payload.id_token,
            verifier,
            display_name=payload.display_name,
            photo_url=payload.photo_url,
        )
    except IdentityVerificationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return _token_for(account)


@router.get("/me", response_model=AccountRead)
def me(current: Account = Depends(get_current_account)) -> AccountRead:
    return AccountRead.model_validate(current)
