from passlib.context import CryptContext
from taskboard.config import BCRYPT_ROUNDS

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)

BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a password after validating bcrypt's 72-byte limit.

    Raises ValueError if the UTF-8 encoding of the password exceeds 72 bytes.
    """
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        # make the failure explicit instead of letting bcrypt truncate
        raise ValueError("Password too long: must be at most 72 bytes when UTF-8 encoded.")
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plaintext password against a hash.

    A ValueError from the backend (over-long password, malformed hash) counts
    as a mismatch so the caller answers with an authentication failure.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False
