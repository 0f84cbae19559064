"""
Pydantic models for accounts and authentication payloads.

``Account`` is the stored record and includes the credential hash;
``AccountRead`` is what leaves the service.  Registration and login
payloads carry the phone number in the form the client submitted it;
normalisation happens in ``AccountService``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountBase(BaseModel):
    username: str = Field(..., min_length=1, examples=["alice"])
    phone_number: str = Field(..., min_length=4, examples=["+15550001"])
    display_name: Optional[str] = Field(None, examples=["Alice"])
    photo_url: Optional[str] = Field(None, examples=["https://example.com/alice.png"])


class AccountCreate(AccountBase):
    """Data stored for a new account.

    ``password_hash`` must already be hashed; the store keeps exactly
    what it is given.
    """

    password_hash: str


class Account(AccountCreate):
    """Account record held by the entity store."""

    model_config = ConfigDict(frozen=True)

    id: int


class AccountRead(AccountBase):
    """Public view of an account, without the credential hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int


class RegisterRequest(AccountBase):
    """Payload for ``POST /auth/register``."""

    password: str = Field(..., min_length=1, examples=["strongpassword"])


class PhoneCheckRequest(BaseModel):
    phone_number: str = Field(..., min_length=1)


class PhoneCheckResponse(BaseModel):
    exists: bool


class LoginRequest(BaseModel):
    phone_number: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class PhoneLoginRequest(BaseModel):
    """Payload for signing in with a phone number verified by the identity provider.

    ``id_token`` is the proof issued to the client after it confirmed the
    one‑time passcode.  ``display_name`` and ``photo_url`` are only used
    when the phone number has no account yet.
    """

    phone_number: str = Field(..., min_length=1)
    id_token: str = Field(..., min_length=1)
    display_name: Optional[str] = None
    photo_url: Optional[str] = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    account: AccountRead
