"""
Security utilities for password hashing and session identifiers.
"""

import logging
import secrets

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

SESSION_ID_BYTES = 32


def get_password_hash(password: str) -> str:
    """
    Hash a plain text password.

    Args:
        password: Plain text password

    Returns:
        str: Password hash suitable for storage
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its stored hash.

    Unknown or malformed hashes verify as False instead of raising.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.warning(f"Password verification failed on malformed hash: {e}")
        return False


def generate_session_id() -> str:
    """Generate an unguessable, URL-safe session identifier."""
    return secrets.token_urlsafe(SESSION_ID_BYTES)
