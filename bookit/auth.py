# bookit/auth.py

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError

from bookit.config import settings

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_days: Optional[int] = None) -> str:
    to_encode = data.copy()
    days = settings.access_token_expire_days if expires_days is None else expires_days
    to_encode["exp"] = datetime.now(timezone.utc) + timedelta(days=days)
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict:
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    # presence and signature only; identity is whatever the token claims
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=401,
            detail="No token provided",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError:
        raise HTTPException(
            status_code=401,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return {
        "id": payload.get("id"),
        "name": payload.get("name"),
        "email": payload.get("email"),
        "role": payload.get("role"),
    }
