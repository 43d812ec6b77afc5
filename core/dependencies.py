from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from db.repository import Store
from models.admin import CurrentAdmin
from services.admin_service import get_session_admin
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("Dependencies")

# tells fastapi to expect a bearer token issued by the admin login route
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login")

def get_store(request: Request) -> Store:
    """The store built at startup (or injected by a test) for this app."""
    return request.app.state.store

async def get_current_admin(token: str = Depends(oauth2_scheme), store: Store = Depends(get_store)) -> CurrentAdmin:
    admin = await get_session_admin(store, token)
    if admin is None:
        logger.warning("Rejected request with invalid or expired admin token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return CurrentAdmin(username=admin["username"], token_version=admin.get("token_version", 0))
