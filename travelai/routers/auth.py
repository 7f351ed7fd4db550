"""
Authentication router for email/password accounts and user profiles.
"""

from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel
from typing import Dict, Any
import logging

from travelai.dependencies import get_current_uid, verify_id_token_dependency
from travelai.models.user import AuthResponse, LoginRequest, SignupRequest
from travelai.services.auth_service import AuthError, AuthService, get_auth_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])


class MessageResponse(BaseModel):
    success: bool
    message: str


def _to_http(e: AuthError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/auth/signup", response_model=AuthResponse)
def signup(
    request: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    try:
        user = auth_service.signup(request)
    except AuthError as e:
        raise _to_http(e)
    return AuthResponse(success=True, user=user, message="Account created successfully")


@router.post("/auth/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    try:
        result = auth_service.login(request)
    except AuthError as e:
        raise _to_http(e)
    return AuthResponse(success=True, user=result["user"], idToken=result["idToken"],
                        message="Signed in successfully")


@router.get("/auth/profile", response_model=AuthResponse)
def get_user_profile(
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Get authenticated user profile

    Requires valid Firebase ID token in Authorization header
    """
    uid = get_current_uid(decoded_token)
    user = auth_service.get_profile(uid)
    if not user:
        raise HTTPException(status_code=404, detail="User profile not found")
    return AuthResponse(success=True, user=user, message="User profile retrieved successfully")


@router.post("/auth/logout", response_model=MessageResponse)
def logout(
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency),
    auth_service: AuthService = Depends(get_auth_service)
):
    try:
        auth_service.logout(get_current_uid(decoded_token))
    except AuthError as e:
        raise _to_http(e)
    return MessageResponse(success=True, message="Signed out successfully")


@router.delete("/auth/account", response_model=MessageResponse)
def delete_account(
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency),
    auth_service: AuthService = Depends(get_auth_service)
):
    try:
        auth_service.delete_account(get_current_uid(decoded_token))
    except AuthError as e:
        raise _to_http(e)
    return MessageResponse(success=True, message="Account deleted successfully")
