import logging

import bcrypt

from config import BCRYPT_ROUNDS

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password using bcrypt."""
    # Ensure it doesn't exceed 72 bytes to prevent bcrypt ValueError
    pw_bytes = password.encode('utf-8')[:72]
    hashed = bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds))
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain-text password against a bcrypt hash."""
    try:
        pw_bytes = plain_password.encode('utf-8')[:72]
        hash_bytes = hashed_password.encode('utf-8')
        return bcrypt.checkpw(pw_bytes, hash_bytes)
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Bcrypt verification failed on a malformed hash")
        return False
