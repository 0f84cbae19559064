"""
Phone identity verification.

Users prove ownership of a phone number by confirming a one‑time
passcode with an external identity provider.  The client does the
passcode exchange itself and hands the provider's ID token to this
service, which asks the provider whose token it is.

The service depends only on the ``IdentityVerifier`` protocol.
``FirebaseIdentityVerifier`` implements it against the Identity
Toolkit REST API; tests inject their own verifier.
"""

import logging
from typing import Any, Dict, Optional, Protocol

import requests

logger = logging.getLogger(__name__)

FIREBASE_LOOKUP_URL = "https://identitytoolkit.googleapis.com/v1/accounts:lookup"


class IdentityVerificationError(Exception):
    """The identity provider did not confirm the phone number."""


class IdentityVerifier(Protocol):
    def verify_identity(self, phone_number: str, proof: str) -> str:
        """Return the verified phone number or raise ``IdentityVerificationError``."""
        ...


class FirebaseIdentityVerifier:
    """Verify Firebase phone sign‑in ID tokens via ``accounts:lookup``."""

    def __init__(
        self,
        api_key: str,
        timeout: int = 10,
        session: Optional[requests.Session] = None,
        lookup_url: str = FIREBASE_LOOKUP_URL,
    ) -> None:
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()
        self.lookup_url = lookup_url

    def _lookup(self, id_token: str) -> Dict[str, Any]:
        try:
            resp = self.session.post(
                self.lookup_url,
                params={"key": self.api_key},
                json={"idToken": id_token},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Identity provider unreachable: %s", exc)
            raise IdentityVerificationError("Identity provider unavailable") from exc
        if resp.status_code != 200:
            try:
                reason = resp.json().get("error", {}).get("message", "")
            except ValueError:
                reason = ""
            logger.warning("Identity provider rejected token: %s %s", resp.status_code, reason)
            raise IdentityVerificationError(reason or "Identity token rejected")
        try:
            return resp.json()
        except ValueError as exc:
            raise IdentityVerificationError("Malformed identity provider response") from exc

    def verify_identity(self, phone_number: str, proof: str) -> str:
        users = self._lookup(proof).get("users") or []
        verified = users[0].get("phoneNumber") if users else None
        if not verified:
            raise IdentityVerificationError("Token carries no verified phone number")
        if verified != phone_number:
            logger.warning("Token phone number does not match the submitted one")
            raise IdentityVerificationError("Phone number does not match identity token")
        return verified
