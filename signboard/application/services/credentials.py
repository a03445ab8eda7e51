"""Password hashing helpers for the identity registry.

Hashes are bcrypt strings produced by passlib, so the salt and cost
travel inside the stored hash.
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash.

    Returns False for a hash passlib cannot identify.
    """
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        return False
