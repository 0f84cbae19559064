"""
Business logic for accounts.

``create_account`` stores exactly what it is given; uniqueness checks
and password hashing belong to the callers, which in this service are
the registration and phone sign‑in flows below.
"""

import logging
import re
import secrets
from typing import Optional

from ..core.config import settings
from ..core.identity import IdentityVerifier
from ..core.security import hash_password, verify_password
from ..core.store import EntityKind, EntityStore
from ..schemas.account import Account, AccountCreate, RegisterRequest
from .query_service import QueryService

logger = logging.getLogger(__name__)


class AccountConflictError(Exception):
    """Username or phone number already belongs to another account."""


def normalize_phone(phone_number: str, country_code: Optional[str] = None) -> str:
    """Strip spaces and prefix the default country code when ``+`` is missing."""
    number = re.sub(r"[\s\-()]", "", phone_number)
    if number.startswith("+"):
        return number
    return f"{country_code or settings.default_country_code}{number}"


class AccountService:
    """Registration, password login and phone sign‑in."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store
        self.queries = QueryService(store)

    def create_account(self, data: AccountCreate) -> Account:
        """Store a new account.  Missing optional fields stay ``None``."""
        fields = data.model_dump()
        fields["display_name"] = data.display_name or None
        fields["photo_url"] = data.photo_url or None
        with self.store.lock:
            handle = self.store.insert(EntityKind.ACCOUNT, fields)
            account = self.store.get(EntityKind.ACCOUNT, handle)
        logger.info("Account %s '%s' created", account.id, account.username)
        return account

    def register(self, payload: RegisterRequest) -> Account:
        """Hash the password and create the account.

        Raises ``AccountConflictError`` if the phone number or username
        is taken.
        """
        phone = normalize_phone(payload.phone_number)
        with self.store.lock:
            if self.queries.get_account_by_phone(phone) is not None:
                raise AccountConflictError("User with this phone number already exists")
            if self.queries.get_account_by_username(payload.username) is not None:
                raise AccountConflictError("Username is already taken")
            return self.create_account(
                AccountCreate(
                    username=payload.username,
                    phone_number=phone,
                    display_name=payload.display_name,
                    photo_url=payload.photo_url,
                    password_hash=hash_password(payload.password),
                )
            )

    def phone_exists(self, phone_number: str) -> bool:
        return self.queries.get_account_by_phone(normalize_phone(phone_number)) is not None

    def authenticate(self, phone_number: str, password: str) -> Optional[Account]:
        """Return the account if the password matches, otherwise ``None``."""
        account = self.queries.get_account_by_phone(normalize_phone(phone_number))
        if account is None or not verify_password(password, account.password_hash):
            return None
        return account

    def sign_in_with_phone(
        self,
        phone_number: str,
        proof: str,
        verifier: IdentityVerifier,
        display_name: Optional[str] = None,
        photo_url: Optional[str] = None,
    ) -> Account:
        """Sign in with a phone number confirmed by the identity provider.

        An unknown number gets a new account named after its last ten
        digits with a random password nobody knows; the user keeps
        signing in through the identity provider.  Raises
        ``IdentityVerificationError`` if the provider does not confirm
        the number.
        """
        verified = verifier.verify_identity(normalize_phone(phone_number), proof)
        with self.store.lock:
            account = self.queries.get_account_by_phone(verified)
            if account is not None:
                return account
            username = self._unused_username("user_" + re.sub(r"\D", "", verified)[-10:])
            logger.info("First phone sign-in, registering '%s'", username)
            return self.create_account(
                AccountCreate(
                    username=username,
                    phone_number=verified,
                    display_name=display_name or username,
                    photo_url=photo_url,
                    password_hash=hash_password(secrets.token_urlsafe(24)),
                )
            )

    def _unused_username(self, base: str) -> str:
        candidate, suffix = base, 1
        while self.queries.get_account_by_username(candidate) is not None:
            suffix += 1
            candidate = f"{base}_{suffix}"
        return candidate
