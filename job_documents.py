"""
Adapters from raw Firestore documents to engine value objects.

Stored job documents come in two shapes: legacy documents keyed by title with
free-text "Job Details", and migrated documents carrying skillsRequired,
experienceRequired and track. Only migrated documents can be scored; this
module maps them onto the strict engine models and builds the field updates
that migrate legacy documents.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from skillgap.config import (
    COMMON_SKILLS,
    DEFAULT_LEGACY_EXPERIENCE,
    DEFAULT_TRACK,
    EXPERIENCE_KEYWORDS,
    FALLBACK_SKILLS,
    LEGACY_EXPERIENCE_LABELS,
    LEGACY_JOB_DEFAULTS,
    TRACK_KEYWORDS,
)
from skillgap.errors import InvalidInputError
from skillgap.schemas import JobPosting, LearningResource, UserProfile, parse_model

logger = logging.getLogger(__name__)

MIGRATED_JOB_FIELDS = ("skillsRequired", "experienceRequired", "track")


def _skill_list(value: Any) -> Any:
    # Hand-entered documents sometimes store skills as "react, node.js"
    if isinstance(value, str):
        return [s for s in value.split(",") if s.strip()]
    return value


def _experience_value(value: Any) -> Any:
    if isinstance(value, str):
        key = " ".join(value.lower().split())
        return LEGACY_EXPERIENCE_LABELS.get(key, key)
    return value


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def job_from_document(doc_id: str, data: Dict[str, Any]) -> JobPosting:
    """
    Map a migrated job document onto a JobPosting.

    Raises:
        InvalidInputError: If the document lacks a scoring field or holds a
            value of the wrong type
    """
    for field in MIGRATED_JOB_FIELDS:
        if data.get(field) is None:
            raise InvalidInputError(field, f"job document '{doc_id}' is missing '{field}'")

    payload = {
        "id": doc_id,
        "skillsRequired": _skill_list(data["skillsRequired"]),
        "experienceRequired": _experience_value(data["experienceRequired"]),
        "track": data["track"],
        "title": _optional_text(data.get("title")),
        "company": _optional_text(data.get("company")),
        "location": _optional_text(data.get("location")),
    }

    try:
        return parse_model(JobPosting, payload)
    except InvalidInputError as e:
        raise InvalidInputError(e.field, f"job document '{doc_id}': {e.message}") from e


def profile_from_document(data: Dict[str, Any]) -> UserProfile:
    """Map a users/{uid} document onto a UserProfile, ignoring unrelated fields."""
    payload = {
        "skills": _skill_list(data.get("skills")),
        "experienceLevel": _experience_value(data.get("experienceLevel")),
        "preferredTrack": data.get("preferredTrack"),
    }
    return parse_model(UserProfile, payload)


def resource_from_document(doc_id: str, data: Dict[str, Any]) -> LearningResource:
    payload = dict(data)
    payload["id"] = doc_id
    payload["relatedSkills"] = _skill_list(data.get("relatedSkills"))

    try:
        return parse_model(LearningResource, payload)
    except InvalidInputError as e:
        raise InvalidInputError(e.field, f"resource document '{doc_id}': {e.message}") from e


def jobs_from_documents(docs: List[Dict[str, Any]], skip_invalid: bool = False) -> List[JobPosting]:
    """
    Map a list of job documents (each carrying its document id as "id").

    Args:
        docs: Raw documents
        skip_invalid: Drop unmappable documents with a warning instead of raising
    """
    jobs = []
    for doc in docs:
        doc_id = str(doc.get("id", ""))
        try:
            jobs.append(job_from_document(doc_id, doc))
        except InvalidInputError as e:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping job document {doc_id}: {e}")

    logger.info(f"Mapped {len(jobs)}/{len(docs)} job documents")
    return jobs


def resources_from_documents(docs: List[Dict[str, Any]], skip_invalid: bool = False) -> List[LearningResource]:
    resources = []
    for doc in docs:
        doc_id = str(doc.get("id", ""))
        try:
            resources.append(resource_from_document(doc_id, doc))
        except InvalidInputError as e:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping resource document {doc_id}: {e}")
    return resources


# Legacy migration

def is_migrated(data: Dict[str, Any]) -> bool:
    return all(data.get(field) for field in MIGRATED_JOB_FIELDS)


def extract_skills_from_text(text: str) -> List[str]:
    """Find known skills mentioned in free text (case-insensitive substring search)."""
    lower_text = text.lower()
    found = [skill for skill in COMMON_SKILLS if skill.lower() in lower_text]
    return found if found else list(FALLBACK_SKILLS)


def determine_experience(title: str, description: str) -> str:
    """Guess the legacy experience label from a job title and description."""
    text = f"{title} {description}".lower()

    for keywords, label in EXPERIENCE_KEYWORDS:
        if any(k in text for k in keywords):
            return label
    return DEFAULT_LEGACY_EXPERIENCE


def determine_track(title: str, description: str) -> str:
    """Guess the career track from a job title and description."""
    text = f"{title} {description}".lower()

    for keywords, track in TRACK_KEYWORDS:
        if any(k in text for k in keywords):
            return track
    return DEFAULT_TRACK


def build_job_migration(doc_id: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Build the field updates that migrate a legacy job document.

    Legacy documents use the job title as their document id and keep the
    description under "Job Details".

    Returns:
        Dict of fields to write, or None if the document is already migrated
    """
    if is_migrated(data):
        return None

    title = doc_id
    description = data.get("Job Details") or data.get("JobDetails") or ""

    defaults = LEGACY_JOB_DEFAULTS.get(title)
    if defaults:
        updates = {
            "skillsRequired": list(defaults["skillsRequired"]),
            "experienceRequired": defaults["experienceRequired"],
            "track": defaults["track"],
        }
    else:
        updates = {
            "skillsRequired": extract_skills_from_text(f"{title} {description}"),
            "experienceRequired": determine_experience(title, description),
            "track": determine_track(title, description),
        }

    updates["title"] = title
    updates["description"] = description
    updates["company"] = data.get("Company Name") or data.get("CompanyName") or "Company not specified"
    updates["salary"] = data.get("Salary") or "Not specified"
    updates["location"] = data.get("Location") or "Remote"

    return updates
