"""
Firestore Service Layer for user profiles.

Profiles live at users/{uid} and mirror UserData. Writes go through the
Admin SDK only.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone
from firebase_admin import firestore


class FirestoreService:
    def __init__(self, db: firestore.Client):
        self.db = db

    def _now(self):
        return datetime.now(timezone.utc)

    def _user_ref(self, uid: str):
        return self.db.collection("users").document(uid)

    # -------------------------
    # User Helpers
    # -------------------------
    def create_user_profile(self, uid: str, profile: Dict[str, Any]) -> Dict[str, Any]:
        doc = {**profile, "uid": uid}
        doc.setdefault("createdAt", self._now())
        self._user_ref(uid).set(doc)
        return doc

    def get_user_profile(self, uid: str) -> Optional[Dict[str, Any]]:
        snap = self._user_ref(uid).get()
        return snap.to_dict() if snap.exists else None

    def delete_user_profile(self, uid: str):
        self._user_ref(uid).delete()
