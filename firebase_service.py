"""
Firebase service for reading user profiles, jobs and learning resources from Firestore.
"""
from __future__ import annotations

import os
import json
import logging
from typing import List, Dict, Any, Optional
from pathlib import Path
from dotenv import load_dotenv

from skillgap.config import COLLECTIONS
from job_documents import build_job_migration

try:
    import firebase_admin
    from firebase_admin import credentials, firestore
    FIREBASE_AVAILABLE = True
except ImportError:
    FIREBASE_AVAILABLE = False

# Load environment variables
load_dotenv()
load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env", override=False)

logger = logging.getLogger(__name__)


class FirebaseService:
    """Service for interacting with Firebase Firestore."""

    _app = None
    _db = None

    def __init__(self, db=None, collections: Optional[Dict[str, str]] = None):
        """
        Initialize Firebase Admin SDK.

        Args:
            db: Optional Firestore client to use instead of the SDK default
            collections: Optional overrides for the collection names in config.COLLECTIONS
        """
        self.collections = {**COLLECTIONS, **(collections or {})}

        if db is not None:
            self.db = db
            return

        if not FIREBASE_AVAILABLE:
            raise ImportError(
                "firebase-admin is not installed. Install it with: pip install firebase-admin"
            )

        if FirebaseService._app is None:
            logger.info("[Firebase] Firebase app is None, initializing...")
            self._initialize_firebase()

        if FirebaseService._db is None:
            FirebaseService._db = firestore.client()
            logger.info("[Firebase] Firestore client created")

        self.db = FirebaseService._db

    def _initialize_firebase(self):
        """
        Initialize Firebase Admin SDK with credentials from environment variables.

        Priority:
        1. GOOGLE_APPLICATION_CREDENTIALS_JSON (JSON string directly in env var)
        2. GOOGLE_APPLICATION_CREDENTIALS (file path to JSON file)
        3. FIREBASE_PROJECT_ID (for Application Default Credentials)
        """
        try:
            try:
                FirebaseService._app = firebase_admin.get_app()
                logger.info("[Firebase] Firebase already initialized")
                return
            except ValueError:
                logger.info("[Firebase] Initializing Firebase...")

            firebase_json = os.getenv("GOOGLE_APPLICATION_CREDENTIALS_JSON")
            if firebase_json:
                logger.info("[Firebase] Using GOOGLE_APPLICATION_CREDENTIALS_JSON")
                try:
                    cred_dict = json.loads(firebase_json)
                except json.JSONDecodeError as e:
                    raise ValueError(f"Invalid JSON in GOOGLE_APPLICATION_CREDENTIALS_JSON: {str(e)}")
                FirebaseService._app = firebase_admin.initialize_app(credentials.Certificate(cred_dict))
                logger.info("[Firebase] Firebase initialized from JSON string")
                return

            service_account_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
            if service_account_path:
                path = Path(service_account_path).expanduser()
                if not path.exists():
                    raise FileNotFoundError(f"Service account file not found: {path}")
                FirebaseService._app = firebase_admin.initialize_app(credentials.Certificate(str(path)))
                logger.info(f"[Firebase] Firebase initialized from file {path}")
                return

            project_id = os.getenv("FIREBASE_PROJECT_ID") or os.getenv("VITE_FIREBASE_PROJECT_ID")
            if not project_id:
                raise ValueError(
                    "No Firebase credentials found. Please set one of:\n"
                    "  - GOOGLE_APPLICATION_CREDENTIALS_JSON (JSON string)\n"
                    "  - GOOGLE_APPLICATION_CREDENTIALS (file path)\n"
                    "  - FIREBASE_PROJECT_ID (for Application Default Credentials)"
                )

            logger.info(f"[Firebase] Using project ID: {project_id}")
            FirebaseService._app = firebase_admin.initialize_app(options={"projectId": project_id})

        except Exception as e:
            if isinstance(e, (RuntimeError, ValueError, FileNotFoundError)):
                raise
            raise RuntimeError(f"Failed to initialize Firebase: {str(e)}")

    def _list_collection(self, name: str) -> List[Dict[str, Any]]:
        documents = []
        for doc in self.db.collection(name).stream():
            data = doc.to_dict() or {}
            data["id"] = doc.id  # Add document ID
            documents.append(data)
        return documents

    def get_user_profile(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch the profile document for a user.

        Args:
            user_id: The user ID

        Returns:
            Profile dictionary or None if not found
        """
        try:
            user_doc = self.db.collection(self.collections["users"]).document(user_id).get()

            if not user_doc.exists:
                return None
            return user_doc.to_dict() or {}

        except Exception as e:
            raise RuntimeError(f"Failed to fetch profile for user {user_id}: {str(e)}")

    def update_user_profile(self, user_id: str, profile_data: Dict[str, Any]) -> None:
        """
        Merge the matching fields (skills, experienceLevel, preferredTrack) into a user document.
        """
        try:
            user_ref = self.db.collection(self.collections["users"]).document(user_id)
            user_ref.set(profile_data, merge=True)
            logger.info(f"[Firebase] Updated profile for user {user_id}")
        except Exception as e:
            raise RuntimeError(f"Failed to update profile for user {user_id}: {str(e)}")

    def list_jobs(self) -> List[Dict[str, Any]]:
        """Fetch every job document, with its document id under "id"."""
        try:
            jobs = self._list_collection(self.collections["jobs"])
            logger.info(f"[Firebase] Fetched {len(jobs)} jobs")
            return jobs
        except Exception as e:
            raise RuntimeError(f"Failed to fetch jobs: {str(e)}")

    def list_learning_resources(self) -> List[Dict[str, Any]]:
        """Fetch every learning resource document, with its document id under "id"."""
        try:
            resources = self._list_collection(self.collections["learning_resources"])
            logger.info(f"[Firebase] Fetched {len(resources)} learning resources")
            return resources
        except Exception as e:
            raise RuntimeError(f"Failed to fetch learning resources: {str(e)}")

    def count_jobs(self) -> int:
        try:
            return sum(1 for _ in self.db.collection(self.collections["jobs"]).stream())
        except Exception as e:
            raise RuntimeError(f"Failed to count jobs: {str(e)}")

    def seed_jobs(self, jobs: List[Dict[str, Any]]) -> Dict[str, int]:
        """
        Add job documents one by one.

        A failed write is logged and counted; the remaining jobs are still written.

        Returns:
            {"success": n, "failed": m}
        """
        collection_ref = self.db.collection(self.collections["jobs"])
        success = 0
        failed = 0

        for job in jobs:
            try:
                result = collection_ref.add(job)
                # add() returns (update_time, document_reference)
                doc_ref = result[1] if isinstance(result, tuple) else result
                logger.info(f"[Firebase] Added: {job.get('title')} (ID: {doc_ref.id})")
                success += 1
            except Exception as e:
                logger.error(f"[Firebase] Failed to add {job.get('title')}: {e}")
                failed += 1

        logger.info(f"[Firebase] Seeded {success} out of {len(jobs)} jobs")
        return {"success": success, "failed": failed}

    def delete_all_jobs(self) -> int:
        """Delete every job document. Returns the number deleted."""
        try:
            deleted = 0
            for doc in self.db.collection(self.collections["jobs"]).stream():
                doc.reference.delete()
                deleted += 1
            logger.info(f"[Firebase] Deleted {deleted} jobs")
            return deleted
        except Exception as e:
            raise RuntimeError(f"Failed to delete jobs: {str(e)}")

    def migrate_legacy_jobs(self, collection_name: Optional[str] = None) -> Dict[str, int]:
        """
        Add skillsRequired, experienceRequired and track to legacy job documents.

        Documents that already carry all three fields are skipped.

        Args:
            collection_name: Collection to migrate (defaults to the legacy "Jobs" collection)

        Returns:
            {"total": n, "updated": n, "skipped": n}
        """
        name = collection_name or self.collections["legacy_jobs"]
        try:
            collection_ref = self.db.collection(name)
            updated = 0
            skipped = 0
            total = 0

            for doc in collection_ref.stream():
                total += 1
                updates = build_job_migration(doc.id, doc.to_dict() or {})
                if updates is None:
                    logger.debug(f"[Firebase] Skipping {doc.id} - already migrated")
                    skipped += 1
                    continue

                collection_ref.document(doc.id).update(updates)
                logger.info(f"[Firebase] Migrated {doc.id}")
                updated += 1

            if total == 0:
                logger.warning(f"[Firebase] No jobs found in {name} collection")

            logger.info(f"[Firebase] Migration complete: {updated} updated, {skipped} skipped")
            return {"total": total, "updated": updated, "skipped": skipped}

        except Exception as e:
            raise RuntimeError(f"Failed to migrate jobs in {name}: {str(e)}")


# Singleton instance
_firebase_service: Optional[FirebaseService] = None


def get_firebase_service(collections: Optional[Dict[str, str]] = None) -> FirebaseService:
    """Get or create the Firebase service instance."""
    global _firebase_service
    if _firebase_service is None:
        _firebase_service = FirebaseService(collections=collections)
    return _firebase_service
