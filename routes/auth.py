from fastapi import APIRouter, Depends, HTTPException, status
from core.dependencies import get_current_admin, get_store
from db.repository import Store
from models.admin import AdminLogin, CurrentAdmin, TokenResponse
from services.admin_service import login, logout
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("AUTH_ROUTE")

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/login", response_model=TokenResponse)
async def api_login(user: AdminLogin, store: Store = Depends(get_store)):
    logger.info(f"Login attempt for: {user.username}")
    token = await login(store, user.username, user.password)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(access_token=token, expires_in=settings.ADMIN_TOKEN_EXPIRE_MINUTES * 60)

@router.post("/logout")
async def api_logout(current_admin: CurrentAdmin = Depends(get_current_admin), store: Store = Depends(get_store)):
    await logout(store, current_admin.username)
    return {"message": "Logged out"}
