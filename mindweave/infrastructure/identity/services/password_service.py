"""Password hashing and verification service."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

from mindweave.config import get_settings

password_hash = PasswordHash.recommended()


def _peppered(plain_password: str) -> str:
    return plain_password + get_settings().PASSWORD_PEPPER


def hash_password(plain_password: str) -> str:
    """Hash a plain password for storage with pepper."""
    return password_hash.hash(_peppered(plain_password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored hash."""
    try:
        return password_hash.verify(_peppered(plain_password), hashed_password)
    except UnknownHashError:
        return False
