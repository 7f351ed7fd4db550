import os
import json
import logging
from dotenv import load_dotenv
from typing import Optional, Dict, Any

from fastapi import Header, HTTPException
from firebase_admin import credentials, initialize_app, get_app, _apps, auth, firestore as admin_firestore
from google.cloud import secretmanager
from google.api_core import exceptions as gapi_exceptions

from travelai.config import settings
load_dotenv()
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


SERVICE_ACCOUNT_SECRET = os.getenv("SERVICE_ACCOUNT_SECRET")  # e.g. projects/PROJECT_ID/secrets/SA_KEY/versions/latest
GOOGLE_APPLICATION_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")  # local path (dev)
# used to expand a shorthand secret id
PROJECT_ID = settings.project_id or os.getenv("GOOGLE_CLOUD_PROJECT")


def _access_secret_from_sm(resource_name: str) -> str:
    """
    Given a full Secret Manager resource name (projects/.../secrets/.../versions/...),
    retrieve the secret payload (string).
    """
    try:
        client = secretmanager.SecretManagerServiceClient()
        response = client.access_secret_version(request={"name": resource_name})
        return response.payload.data.decode("UTF-8")
    except gapi_exceptions.GoogleAPIError as e:
        logger.exception("Unable to access secret %s: %s", resource_name, e)
        raise


def _service_account_credential():
    """
    Pick the credential for firebase_admin.
    Order of preference:
      1) SERVICE_ACCOUNT_SECRET env var -> JSON from Secret Manager
      2) GOOGLE_APPLICATION_CREDENTIALS env var -> local file path (dev)
      3) None -> Application Default Credentials (Cloud Run)
    """
    if SERVICE_ACCOUNT_SECRET:
        secret_res_name = SERVICE_ACCOUNT_SECRET
        # support shorthand secret ID (e.g., "SA_KEY") when a project id is known
        if not secret_res_name.startswith("projects/") and PROJECT_ID:
            secret_res_name = f"projects/{PROJECT_ID}/secrets/{SERVICE_ACCOUNT_SECRET}/versions/latest"
        logger.info("Loading service account from Secret Manager: %s", secret_res_name)
        return credentials.Certificate(json.loads(_access_secret_from_sm(secret_res_name)))

    if GOOGLE_APPLICATION_CREDENTIALS and os.path.exists(GOOGLE_APPLICATION_CREDENTIALS):
        logger.info("Loading service account from path: %s", GOOGLE_APPLICATION_CREDENTIALS)
        return credentials.Certificate(GOOGLE_APPLICATION_CREDENTIALS)

    logger.info("No explicit service account provided, using Application Default Credentials (ADC)")
    return None


def init_firebase_admin():
    """
    Initialize firebase_admin once. Idempotent: returns the existing app
    when it is already initialized.
    """
    if _apps:
        return get_app()

    cred = _service_account_credential()
    app = initialize_app(cred) if cred is not None else initialize_app()
    logger.info("Initialized firebase_admin")
    return app


# Lazily initialize a single global Firestore client to reuse across requests
_db_client = None


def get_firestore_client():
    global _db_client
    if _db_client is None:
        init_firebase_admin()
        _db_client = admin_firestore.client()
    return _db_client


# ---------------------------
# FastAPI dependencies
# ---------------------------
def _extract_bearer_token(authorization_header: Optional[str]) -> str:
    if not authorization_header:
        raise HTTPException(status_code=401, detail="Missing Authorization header")
    parts = authorization_header.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid Authorization header")
    return parts[1]


def verify_id_token(token: str) -> Dict[str, Any]:
    """
    Verify Firebase ID token and return decoded token dict (contains uid, claims).
    Raises HTTPException(401) on failure.
    """
    init_firebase_admin()
    try:
        return auth.verify_id_token(token)
    except Exception as e:
        logger.warning("Invalid Firebase ID token: %s", e)
        raise HTTPException(status_code=401, detail="Invalid or expired ID token")


async def verify_id_token_dependency(authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
    """
    FastAPI dependency that checks the Authorization header and verifies the ID token.
        def endpoint(decoded_token = Depends(verify_id_token_dependency)):
            uid = decoded_token["uid"]
    """
    token = _extract_bearer_token(authorization)
    return verify_id_token(token)


def get_current_uid(decoded_token: Dict[str, Any]) -> str:
    uid = decoded_token.get("uid") if decoded_token else None
    if not uid:
        raise HTTPException(status_code=401, detail="Invalid UID in token")
    return uid
