"""
Authentication service for email/password accounts backed by Firebase.

Account creation and deletion use the Admin SDK; password sign-in goes
through the Identity Toolkit REST endpoint with the web API key.
"""

import logging
from typing import Optional, Dict, Any

import requests
from firebase_admin import auth
from firebase_admin import exceptions as firebase_exceptions
from google.api_core import exceptions as gapi_exceptions

from travelai.config import settings
from travelai.dependencies import get_firestore_client, init_firebase_admin
from travelai.models.user import LoginRequest, SignupRequest, UserData
from travelai.services.firestore_service import FirestoreService

logger = logging.getLogger(__name__)

# errors raised by Firestore document reads and writes
PROFILE_STORE_ERRORS = (gapi_exceptions.GoogleAPICallError, firebase_exceptions.FirebaseError)

NOT_CONFIGURED_MESSAGE = (
    "Authentication is not configured yet. Please set up your Firebase project or use the "
    "\"Start Planning Your Trip\" button to continue without an account."
)

ERROR_MESSAGES = {
    "email-already-in-use": "An account with this email already exists.",
    "weak-password": "Password should be at least 6 characters long.",
    "invalid-email": "Please enter a valid email address.",
    "user-not-found": "No account found with this email address.",
    "wrong-password": "Incorrect password. Please try again.",
    "too-many-requests": "Too many failed attempts. Please try again later.",
    "network-request-failed": "Network error. Please check your connection.",
}
DEFAULT_ERROR_MESSAGE = "An error occurred. Please try again."

# Identity Toolkit error identifiers -> provider error codes
_IDENTITY_TOOLKIT_CODES = {
    "EMAIL_EXISTS": "email-already-in-use",
    "WEAK_PASSWORD": "weak-password",
    "INVALID_EMAIL": "invalid-email",
    "EMAIL_NOT_FOUND": "user-not-found",
    "INVALID_PASSWORD": "wrong-password",
    "INVALID_LOGIN_CREDENTIALS": "wrong-password",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "too-many-requests",
}


def get_auth_error_message(code: Optional[str]) -> str:
    return ERROR_MESSAGES.get(code or "", DEFAULT_ERROR_MESSAGE)


class AuthError(Exception):
    """Carries a message that is safe to show to the user."""

    def __init__(self, message: str, code: Optional[str] = None, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    @classmethod
    def from_code(cls, code: Optional[str], status_code: int = 400) -> "AuthError":
        return cls(get_auth_error_message(code), code=code, status_code=status_code)


def _code_from_admin_error(e: Exception) -> Optional[str]:
    if isinstance(e, auth.EmailAlreadyExistsError):
        return "email-already-in-use"
    if isinstance(e, auth.UserNotFoundError):
        return "user-not-found"
    if isinstance(e, ValueError):
        text = str(e).lower()
        if "password" in text:
            return "weak-password"
        if "email" in text:
            return "invalid-email"
    return None


def _code_from_identity_toolkit(response: requests.Response) -> Optional[str]:
    try:
        message = response.json().get("error", {}).get("message", "")
    except ValueError:
        return None
    # e.g. "TOO_MANY_ATTEMPTS_TRY_LATER : Access to this account has been temporarily disabled..."
    return _IDENTITY_TOOLKIT_CODES.get(message.split(" ")[0].strip())


def _split_display_name(display_name: str):
    parts = (display_name or "").split(" ")
    first = parts[0] if parts else ""
    last = parts[1] if len(parts) > 1 else ""
    return first, last


class AuthService:
    """Service for email/password sign up, sign in and account management"""

    def __init__(self, fs: Optional[FirestoreService] = None):
        self._fs = fs

    @property
    def fs(self) -> FirestoreService:
        if self._fs is None:
            self._fs = FirestoreService(get_firestore_client())
        return self._fs

    def _require_configured(self):
        if not settings.firebase_configured:
            raise AuthError(NOT_CONFIGURED_MESSAGE, code="not-configured", status_code=503)

    def signup(self, request: SignupRequest) -> UserData:
        self._require_configured()
        init_firebase_admin()
        display_name = f"{request.firstName} {request.lastName}"

        try:
            record = auth.create_user(
                email=request.email,
                password=request.password,
                display_name=display_name,
            )
        except (ValueError, firebase_exceptions.FirebaseError) as e:
            logger.error(f"Account creation failed for {request.email}: {e}")
            raise AuthError.from_code(_code_from_admin_error(e))

        try:
            profile = self.fs.create_user_profile(record.uid, {
                "email": record.email or request.email,
                "firstName": request.firstName,
                "lastName": request.lastName,
                "displayName": display_name,
            })
        except PROFILE_STORE_ERRORS as e:
            logger.error(f"Profile write failed for {record.uid}, removing the new account: {e}")
            self._discard_account(record.uid)
            raise AuthError.from_code(None)
        logger.info(f"Created user profile: {record.uid}")
        return UserData.model_validate(profile)

    def _discard_account(self, uid: str):
        try:
            auth.delete_user(uid)
        except firebase_exceptions.FirebaseError as e:
            logger.error(f"Could not remove account {uid} after failed signup: {e}")

    def sign_in_with_password(self, email: str, password: str) -> Dict[str, Any]:
        """Call accounts:signInWithPassword and return its JSON body."""
        try:
            response = requests.post(
                f"{settings.identity_toolkit_url}/accounts:signInWithPassword",
                params={"key": settings.firebase_web_api_key},
                json={"email": email, "password": password, "returnSecureToken": True},
                timeout=settings.request_timeout_seconds,
            )
        except requests.RequestException as e:
            logger.error(f"Identity Toolkit request failed: {e}")
            raise AuthError.from_code("network-request-failed")

        if not response.ok:
            code = _code_from_identity_toolkit(response)
            logger.warning(f"Sign in rejected for {email}: {code or response.status_code}")
            raise AuthError.from_code(code, status_code=401)
        return response.json()

    def login(self, request: LoginRequest) -> Dict[str, Any]:
        """
        Sign in and return {"user": UserData, "idToken": str}.
        A missing profile document is recreated from the auth record.
        """
        self._require_configured()
        data = self.sign_in_with_password(request.email, request.password)
        uid = data["localId"]

        try:
            profile = self.fs.get_user_profile(uid)
            if profile is None:
                display_name = data.get("displayName") or ""
                first, last = _split_display_name(display_name)
                profile = self.fs.create_user_profile(uid, {
                    "email": data.get("email", request.email),
                    "firstName": first,
                    "lastName": last,
                    "displayName": display_name or data.get("email", request.email),
                })
                logger.info(f"Recreated missing user profile: {uid}")
        except PROFILE_STORE_ERRORS as e:
            logger.error(f"Profile lookup failed for {uid}: {e}")
            raise AuthError.from_code(None)

        return {"user": UserData.model_validate(profile), "idToken": data.get("idToken")}

    def get_profile(self, uid: str) -> Optional[UserData]:
        profile = self.fs.get_user_profile(uid)
        return UserData.model_validate(profile) if profile else None

    def logout(self, uid: str):
        init_firebase_admin()
        try:
            auth.revoke_refresh_tokens(uid)
        except firebase_exceptions.FirebaseError as e:
            logger.error(f"Token revocation failed for {uid}: {e}")
            raise AuthError.from_code(_code_from_admin_error(e))

    def delete_account(self, uid: str):
        self._require_configured()
        init_firebase_admin()
        try:
            self.fs.delete_user_profile(uid)
        except Exception as e:
            # account deletion continues without the profile document
            logger.warning(f"Could not delete user document from Firestore: {e}")

        try:
            auth.delete_user(uid)
        except firebase_exceptions.FirebaseError as e:
            logger.error(f"Account deletion failed for {uid}: {e}")
            raise AuthError.from_code(_code_from_admin_error(e))
        logger.info(f"Deleted account: {uid}")


# Global service instance
_auth_service = None

def get_auth_service() -> AuthService:
    """Get or create authentication service instance"""
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService()
    return _auth_service
