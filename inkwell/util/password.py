"""Password hashing utilities (argon2id)."""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from inkwell.config import AuthSettings


def build_hasher(settings: AuthSettings) -> PasswordHasher:
    """Create an argon2 hasher from the configured cost parameters."""
    return PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


def hash_password(hasher: PasswordHasher, plain: str) -> str:
    """Hash a plaintext password with a fresh random salt.

    Raises:
        ValueError: If the password is empty
    """
    if not plain:
        raise ValueError("Password must not be empty")
    return hasher.hash(plain)


def verify_password(hasher: PasswordHasher, digest: str, plain: str) -> bool:
    """Check a plaintext password against a stored digest.

    Returns False for mismatches, empty input, malformed digests and input
    that cannot be encoded (non-ASCII digests, lone surrogates).
    """
    if not digest or not plain:
        return False
    try:
        return hasher.verify(digest, plain)
    except (VerificationError, InvalidHashError, UnicodeEncodeError):
        return False
