"""Password hashing helpers (bcrypt)."""
import bcrypt

from config import settings

# bcrypt only reads the first 72 bytes; truncate explicitly so hash and
# verify see the same input.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    """Create a salted bcrypt hash (cost factor from settings, default 10)."""
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("ascii")


def verify_password(password: str, stored_hash: str | None) -> bool:
    if not stored_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(password), stored_hash.encode("ascii"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
