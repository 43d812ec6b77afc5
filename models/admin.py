# models/admin.py
from pydantic import BaseModel, Field

class AdminLogin(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds

class CurrentAdmin(BaseModel):
    username: str
    token_version: int = 0
