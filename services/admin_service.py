# services/admin_service.py
from db.repository import Store
from utils.hash import hash_password, verify_password
from utils.jwt_handler import create_access_token, decode_access_token
from utils.logger import get_logger

logger = get_logger("Admin_Service")

async def ensure_admin(store: Store, username: str, password: str):
    """
    Create the admin account if it does not exist yet. There is no
    registration flow; this runs from the seed step only.
    """
    existing = await store.admins.find_one(username=username)
    if existing:
        logger.info(f"Admin {username} already exists")
        return existing
    admin = await store.admins.insert({
        "username": username,
        "password": hash_password(password),
        "token_version": 0,
    })
    logger.info(f"Admin {username} created")
    return admin

async def login(store: Store, username: str, password: str) -> str | None:
    """Returns a session token, or None when the credentials do not match."""
    admin = await store.admins.find_one(username=username)
    if admin is None or not verify_password(password, admin["password"]):
        logger.warning(f"Login failed for {username}")
        return None
    logger.info(f"Login successful: {username}")
    return create_access_token({"sub": admin["username"], "tv": admin.get("token_version", 0)})

async def get_session_admin(store: Store, token: str):
    """Admin record for a valid, unexpired, unrevoked token; otherwise None."""
    try:
        payload = decode_access_token(token)
    except ValueError:
        return None
    username = payload.get("sub")
    if username is None:
        return None
    admin = await store.admins.find_one(username=username)
    if admin is None:
        logger.warning(f"Token for unknown admin {username}")
        return None
    if admin.get("token_version", 0) != payload.get("tv"):
        logger.warning(f"Token version mismatch for admin {username}")
        return None
    return admin

async def verify(store: Store, token: str) -> bool:
    return await get_session_admin(store, token) is not None

async def logout(store: Store, username: str):
    """Revoke every outstanding token for the admin."""
    async with store.admins.lock:
        admin = await store.admins.find_one(username=username)
        if admin is None:
            return None
        updated = await store.admins.update(admin["id"], {"token_version": admin.get("token_version", 0) + 1})
    logger.info(f"Tokens revoked for admin {username}")
    return updated
