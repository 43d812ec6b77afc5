from passlib.context import CryptContext
from utils.logger import get_logger
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

logger = get_logger("HASH_UTILS")

BCRYPT_MAX_BYTES = 72

def _truncate(password: str) -> str:
    # bcrypt only looks at the first 72 bytes
    encoded = str(password).encode("utf-8")[:BCRYPT_MAX_BYTES]
    return encoded.decode("utf-8", errors="ignore")

def hash_password(password: str) -> str:
    logger.debug("Password received for hashing")
    return pwd_context.hash(_truncate(password))

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Constant-time check of a plaintext password against a stored bcrypt hash."""
    return pwd_context.verify(_truncate(plain_password), hashed_password)
