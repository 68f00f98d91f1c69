from __future__ import annotations

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from skillgap.schemas import (
    MatchResult,
    RecommendedResource,
    SkillGapSuggestion,
    UserProfile,
)


class Settings(BaseModel):
    model_config = ConfigDict(protected_namespaces=())
    top_k: int = Field(default=10, ge=0)
    skill_weight: float = Field(default=0.60, ge=0)
    experience_weight: float = Field(default=0.25, ge=0)
    track_weight: float = Field(default=0.15, ge=0)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    users_collection: str = "users"
    jobs_collection: str = "jobs"
    resources_collection: str = "learningResources"
    legacy_jobs_collection: str = "Jobs"

    def weights(self) -> Dict[str, float]:
        return {
            "skills": self.skill_weight,
            "experience": self.experience_weight,
            "track": self.track_weight,
        }

    def collections(self) -> Dict[str, str]:
        return {
            "users": self.users_collection,
            "jobs": self.jobs_collection,
            "learning_resources": self.resources_collection,
            "legacy_jobs": self.legacy_jobs_collection,
        }


class ApiModel(BaseModel):
    """Request/response envelope: camelCase on the wire, snake_case also accepted on input."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


# Engine output enriched for presentation
class RankedJob(MatchResult):
    """A match result with its rank and the job's descriptive fields."""
    rank: int
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None


class RecommendationRequest(ApiModel):
    """Inline catalogs; nothing is read from Firestore."""
    profile: Dict[str, Any] = Field(..., description="User profile: skills, experienceLevel, preferredTrack")
    jobs: List[Dict[str, Any]] = Field(default_factory=list, description="Job catalog snapshot")
    resources: List[Dict[str, Any]] = Field(default_factory=list, description="Learning resource catalog snapshot")
    top_k: Optional[int] = Field(default=None, description="Number of top matches that drive the skill gap")


class RecommendationResponse(ApiModel):
    matches: List[RankedJob]
    skill_gap: List[str]
    suggestions: List[SkillGapSuggestion]
    resources: List[RecommendedResource]


class JobMatchesRequest(ApiModel):
    """Request model for ranking the stored job catalog for a user."""
    user_id: str = Field(..., description="The user ID whose profile is matched")
    top_k: Optional[int] = Field(default=None, description="Number of matches to return")


class JobMatchesResponse(ApiModel):
    user_id: str
    matches: List[RankedJob]
    skill_gap: List[str]
    count: int


class LearningResourcesRequest(ApiModel):
    """Request model for personalized learning resources."""
    user_id: str = Field(..., description="The user ID")
    top_k: Optional[int] = Field(default=None, description="Number of top matches that drive the skill gap")
    cost: str = Field(default="all", description="all|free|paid")
    search: Optional[str] = Field(default=None, description="Text searched in title, platform and skills")

    @field_validator("cost")
    @classmethod
    def validate_cost(cls, v: str) -> str:
        value = v.strip().lower()
        if value not in ("all", "free", "paid"):
            raise ValueError("cost must be one of: all, free, paid")
        return value


class LearningResourcesResponse(ApiModel):
    user_id: str
    resources: List[RecommendedResource]
    skill_gap: List[str]
    total: int = Field(description="Resources recommended before filtering")
    count: int


class ProfileUpdateRequest(ApiModel):
    """Request model for saving the matching fields of a profile."""
    user_id: str = Field(..., description="The user ID")
    skills: List[str] = Field(default_factory=list)
    experience_level: Optional[str] = None
    preferred_track: Optional[str] = None


class ProfileUpdateResponse(ApiModel):
    user_id: str
    profile: UserProfile


class JobCountResponse(ApiModel):
    count: int


class SeedJobsResponse(ApiModel):
    success: int
    failed: int
    job_count: int


class DeleteJobsResponse(ApiModel):
    deleted: int


class MigrateJobsRequest(ApiModel):
    collection: Optional[str] = Field(
        default=None,
        description="Collection to migrate (defaults to the legacy Jobs collection)"
    )


class MigrateJobsResponse(ApiModel):
    total: int
    updated: int
    skipped: int
