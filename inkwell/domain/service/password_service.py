"""Password hashing domain service."""

import secrets

from anyio import to_thread
import logfire

from inkwell.config import AuthSettings
from inkwell.util.password import build_hasher, hash_password, verify_password

from .base import Service


class PasswordService(Service):
    """Hashes and verifies account passwords.

    Argon2 is CPU and memory bound, so both operations run in a worker thread
    to keep the event loop responsive.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize password service.

        Args:
            auth_settings: Authentication settings with argon2 cost parameters
        """
        self._hasher = build_hasher(auth_settings)
        self._decoy_digest: str | None = None

    async def hash(self, plain: str) -> str:
        """Hash a plaintext password (fresh random salt per call)."""
        with logfire.span("password_service.hash"):
            return await to_thread.run_sync(hash_password, self._hasher, plain)

    async def verify(self, digest: str, plain: str) -> bool:
        """Check a plaintext password against a stored digest.

        Never raises for bad input; malformed digests simply do not match.
        """
        with logfire.span("password_service.verify"):
            return await to_thread.run_sync(
                verify_password, self._hasher, digest, plain
            )

    async def verify_or_decoy(self, digest: str | None, plain: str) -> bool:
        """Verify a password, spending the same work when there is no account.

        When ``digest`` is None the password is checked against a throwaway
        digest and the result is always False, so response time does not tell
        an unknown email apart from a wrong password.
        """
        if digest is not None:
            return await self.verify(digest, plain)

        if self._decoy_digest is None:
            self._decoy_digest = await self.hash(secrets.token_urlsafe(24))
        await self.verify(self._decoy_digest, plain)
        return False
