"""Signup and signin endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_settings
from core.config import Settings
from schemas.auth import AccessTokenResponse, AuthCredentials
from services import auth_service
from services.exceptions import CredentialsTakenError, InvalidCredentialsError

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AccessTokenResponse, status_code=201)
async def signup(
    credentials: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> AccessTokenResponse:
    """Register a new user and return an access token."""
    try:
        token = await auth_service.signup(db, credentials, settings)
    except CredentialsTakenError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return AccessTokenResponse(access_token=token)


@router.post("/signin", response_model=AccessTokenResponse, status_code=200)
async def signin(
    credentials: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> AccessTokenResponse:
    """Exchange email and password for an access token."""
    try:
        token = await auth_service.signin(db, credentials, settings)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return AccessTokenResponse(access_token=token)
