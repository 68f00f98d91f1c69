from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

from fastapi import FastAPI, HTTPException, Request, Depends
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
from pydantic import ValidationError

from models import (
    DeleteJobsResponse,
    JobCountResponse,
    JobMatchesRequest,
    JobMatchesResponse,
    LearningResourcesRequest,
    LearningResourcesResponse,
    MigrateJobsRequest,
    MigrateJobsResponse,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    RankedJob,
    RecommendationRequest,
    RecommendationResponse,
    SeedJobsResponse,
    Settings,
)
from job_documents import jobs_from_documents, profile_from_document, resources_from_documents
from firebase_service import FirebaseService, get_firebase_service
from seed_data import SAMPLE_JOBS
from skillgap import (
    InvalidInputError,
    JobPosting,
    MatchResult,
    RecommendedResource,
    UserProfile,
    __version__,
    parse_jobs,
    parse_profile,
    parse_resources,
    rank_jobs,
    recommend_learning,
)
from skillgap.config import validate_weights

load_dotenv()  # project root
load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env", override=False)

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# Settings field -> environment variable
SETTINGS_ENV = {
    "top_k": "TOP_K",
    "skill_weight": "SKILL_WEIGHT",
    "experience_weight": "EXPERIENCE_WEIGHT",
    "track_weight": "TRACK_WEIGHT",
    "users_collection": "USERS_COLLECTION",
    "jobs_collection": "JOBS_COLLECTION",
    "resources_collection": "LEARNING_RESOURCES_COLLECTION",
    "legacy_jobs_collection": "LEGACY_JOBS_COLLECTION",
}


def load_cors_origins() -> List[str]:
    origins = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in origins.split(",") if o.strip()]


def load_settings() -> Settings:
    """
    Build Settings from the environment; unset variables keep their defaults.

    Raises:
        ValidationError: If a variable does not parse (e.g. TOP_K=ten) or is out of range
    """
    values = {field: os.environ[env] for field, env in SETTINGS_ENV.items() if os.getenv(env)}
    values["cors_origins"] = load_cors_origins()
    return Settings.model_validate(values)


app = FastAPI(title="Skill Gap Learning API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=load_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_settings() -> Settings:
    try:
        settings = load_settings()
        validate_weights(settings.weights())
    except (ValidationError, InvalidInputError) as e:
        logger.error(f"Invalid configuration: {e}")
        raise HTTPException(status_code=500, detail=f"Invalid configuration: {e}")
    return settings


def get_catalog_service(settings: Settings = Depends(get_settings)) -> FirebaseService:
    try:
        return get_firebase_service(settings.collections())
    except ImportError as e:
        raise HTTPException(status_code=500, detail=f"Firebase service not available: {str(e)}")
    except (RuntimeError, ValueError, FileNotFoundError) as e:
        raise HTTPException(status_code=500, detail=f"Firebase initialization failed: {str(e)}")


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return JSONResponse(status_code=422, content={"detail": str(exc), "field": exc.field})


def filter_resources(
    resources: Sequence[RecommendedResource],
    cost: str = "all",
    search: Optional[str] = None
) -> List[RecommendedResource]:
    """
    Apply the resource grid filters: free/paid and a case-insensitive search
    over title, platform, the skill a resource was recommended for and its
    related skills.
    """
    term = (search or "").strip().lower()
    filtered = []

    for resource in resources:
        if cost != "all" and resource.cost.value.lower() != cost:
            continue
        if term and not (
            term in resource.title.lower()
            or term in resource.platform.lower()
            or term in resource.for_skill
            or any(term in skill for skill in resource.related_skills)
        ):
            continue
        filtered.append(resource)

    return filtered


def build_ranked_jobs(matches: Sequence[MatchResult], jobs: Sequence[JobPosting]) -> List[RankedJob]:
    jobs_by_id = {job.id: job for job in jobs}
    ranked = []
    for rank, match in enumerate(matches, 1):
        job = jobs_by_id.get(match.job_id)
        ranked.append(RankedJob(
            **match.model_dump(),
            rank=rank,
            title=job.title if job else None,
            company=job.company if job else None,
            location=job.location if job else None,
        ))
    return ranked


def load_profile(service: FirebaseService, user_id: str) -> UserProfile:
    try:
        profile_data = service.get_user_profile(user_id)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if profile_data is None:
        raise HTTPException(
            status_code=404,
            detail="User profile not found. Please complete your profile first."
        )
    if not profile_data.get("skills"):
        raise HTTPException(
            status_code=400,
            detail="Please add skills to your profile to get personalized learning resources."
        )

    return profile_from_document(profile_data)


def load_jobs(service: FirebaseService) -> List[JobPosting]:
    try:
        job_docs = service.list_jobs()
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    # Unmigrated legacy documents are dropped rather than failing the request
    return jobs_from_documents(job_docs, skip_invalid=True)


@app.get("/")
async def root():
    return {"status": "ok", "version": __version__}


@app.post("/api/recommendations", response_model=RecommendationResponse)
async def recommendations(request: RecommendationRequest, settings: Settings = Depends(get_settings)):
    """
    Rank inline job catalog entries for a profile and recommend learning resources.

    Request Body:
        profile: {skills, experienceLevel, preferredTrack}
        jobs: job catalog entries
        resources: learning resource catalog entries
        top_k: optional number of top matches

    Returns:
        Ranked matches, the skill gap, per-skill suggestions and the
        deduplicated resource list
    """
    profile = parse_profile(request.profile)
    jobs = parse_jobs(request.jobs)
    resources = parse_resources(request.resources)

    top_k = request.top_k if request.top_k is not None else settings.top_k
    plan = recommend_learning(profile, jobs, resources, top_k, settings.weights())

    return RecommendationResponse(
        matches=build_ranked_jobs(plan.matches, jobs),
        skill_gap=list(plan.skill_gap),
        suggestions=list(plan.suggestions),
        resources=list(plan.resources),
    )


@app.post("/api/job-matches", response_model=JobMatchesResponse)
def job_matches(
    request: JobMatchesRequest,
    settings: Settings = Depends(get_settings),
    service: FirebaseService = Depends(get_catalog_service),
):
    """
    Rank the stored job catalog for a user.

    Request Body:
        user_id: The user ID
        top_k: optional number of matches to return
    """
    profile = load_profile(service, request.user_id)
    jobs = load_jobs(service)

    top_k = request.top_k if request.top_k is not None else settings.top_k
    matches, skill_gap = rank_jobs(profile, jobs, top_k, settings.weights())

    return JobMatchesResponse(
        user_id=request.user_id,
        matches=build_ranked_jobs(matches, jobs),
        skill_gap=skill_gap,
        count=len(matches),
    )


@app.post("/api/learning-resources", response_model=LearningResourcesResponse)
def learning_resources(
    request: LearningResourcesRequest,
    settings: Settings = Depends(get_settings),
    service: FirebaseService = Depends(get_catalog_service),
):
    """
    Recommend learning resources for the skills missing from a user's top job matches.

    Request Body:
        user_id: The user ID
        top_k: optional number of top matches that drive the skill gap
        cost: all|free|paid
        search: optional text filter
    """
    profile = load_profile(service, request.user_id)
    jobs = load_jobs(service)

    try:
        resource_docs = service.list_learning_resources()
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    resources = resources_from_documents(resource_docs, skip_invalid=True)

    top_k = request.top_k if request.top_k is not None else settings.top_k
    plan = recommend_learning(profile, jobs, resources, top_k, settings.weights())

    filtered = filter_resources(plan.resources, request.cost, request.search)
    logger.info(f"Returning {len(filtered)}/{len(plan.resources)} resources for user {request.user_id}")

    return LearningResourcesResponse(
        user_id=request.user_id,
        resources=filtered,
        skill_gap=list(plan.skill_gap),
        total=len(plan.resources),
        count=len(filtered),
    )


@app.put("/api/profile", response_model=ProfileUpdateResponse)
def update_profile(request: ProfileUpdateRequest, service: FirebaseService = Depends(get_catalog_service)):
    """
    Save skills, experience level and preferred track for a user.

    At least one skill is required; skills are stored normalized.
    """
    profile = parse_profile({
        "skills": request.skills,
        "experienceLevel": request.experience_level,
        "preferredTrack": request.preferred_track,
    })
    if not profile.skills:
        raise HTTPException(status_code=400, detail="Please add at least one skill")

    try:
        service.update_user_profile(request.user_id, {
            "skills": list(profile.skills),
            "experienceLevel": profile.experience_level.value,
            "preferredTrack": profile.preferred_track,
        })
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return ProfileUpdateResponse(user_id=request.user_id, profile=profile)


# Admin tools

@app.get("/api/admin/jobs/count", response_model=JobCountResponse)
def job_count(service: FirebaseService = Depends(get_catalog_service)):
    try:
        return JobCountResponse(count=service.count_jobs())
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/admin/jobs/seed", response_model=SeedJobsResponse)
def seed_jobs(service: FirebaseService = Depends(get_catalog_service)):
    """Upload the sample job postings."""
    stats = service.seed_jobs(SAMPLE_JOBS)
    try:
        count = service.count_jobs()
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return SeedJobsResponse(success=stats["success"], failed=stats["failed"], job_count=count)


@app.delete("/api/admin/jobs", response_model=DeleteJobsResponse)
def delete_jobs(service: FirebaseService = Depends(get_catalog_service)):
    try:
        return DeleteJobsResponse(deleted=service.delete_all_jobs())
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/admin/jobs/migrate", response_model=MigrateJobsResponse)
def migrate_jobs(
    request: Optional[MigrateJobsRequest] = None,
    service: FirebaseService = Depends(get_catalog_service),
):
    """Add skillsRequired, experienceRequired and track to legacy job documents."""
    collection = request.collection if request else None
    try:
        return MigrateJobsResponse(**service.migrate_legacy_jobs(collection))
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
