"""
Value objects exchanged with the recommendation engine.

All models are immutable. Python attributes are snake_case; the JSON wire
shape is camelCase (``skillsRequired``, ``experienceLevel``...) and both
spellings are accepted on input.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .config import EXPERIENCE_RANKS
from .errors import InvalidInputError
from .normalizer import normalize_skills


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def rank(self) -> int:
        return EXPERIENCE_RANKS[self.value]


class Cost(str, Enum):
    FREE = "Free"
    PAID = "Paid"


class EngineModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


def _lower_enum_value(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class UserProfile(EngineModel):
    skills: Tuple[str, ...]
    experience_level: ExperienceLevel
    preferred_track: str

    @field_validator("skills")
    @classmethod
    def normalize_profile_skills(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return normalize_skills(v)

    @field_validator("experience_level", mode="before")
    @classmethod
    def lower_experience(cls, v: Any) -> Any:
        return _lower_enum_value(v)


class JobPosting(EngineModel):
    id: str
    skills_required: Tuple[str, ...]
    experience_required: ExperienceLevel
    track: str
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None

    @field_validator("skills_required")
    @classmethod
    def normalize_required_skills(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return normalize_skills(v)

    @field_validator("experience_required", mode="before")
    @classmethod
    def lower_experience(cls, v: Any) -> Any:
        return _lower_enum_value(v)


class LearningResource(EngineModel):
    id: str
    title: str
    platform: str
    cost: Cost
    related_skills: Tuple[str, ...]
    url: str

    @field_validator("related_skills")
    @classmethod
    def normalize_related_skills(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return normalize_skills(v)

    @field_validator("cost", mode="before")
    @classmethod
    def canonical_cost(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().capitalize()
        return v


class MatchResult(EngineModel):
    job_id: str
    score: int = Field(ge=0, le=100)
    matched_skills: Tuple[str, ...] = ()
    missing_skills: Tuple[str, ...] = ()
    experience_delta: int = 0
    track_match: bool = False


class SkillGapSuggestion(EngineModel):
    skill: str
    resources: Tuple[LearningResource, ...] = ()


class RecommendedResource(LearningResource):
    """A learning resource attributed to the first missing skill that surfaced it."""
    for_skill: str


class LearningPlan(EngineModel):
    matches: Tuple[MatchResult, ...] = ()
    skill_gap: Tuple[str, ...] = ()
    suggestions: Tuple[SkillGapSuggestion, ...] = ()
    resources: Tuple[RecommendedResource, ...] = ()


ModelT = TypeVar("ModelT", bound=BaseModel)


def _format_location(prefix: str, loc: Iterable[Any]) -> str:
    path = prefix
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def parse_model(model_cls: Type[ModelT], data: Any, prefix: str = "") -> ModelT:
    """
    Validate a JSON-shaped dict into a model.

    Raises:
        InvalidInputError: naming the first offending field
    """
    if isinstance(data, model_cls):
        return data
    if not isinstance(data, dict):
        raise InvalidInputError(prefix or model_cls.__name__, "expected an object")

    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        raise InvalidInputError(_format_location(prefix, first["loc"]), first["msg"]) from e


def parse_catalog(model_cls: Type[ModelT], items: Any, name: str) -> List[ModelT]:
    """Validate every entry of a catalog; errors name the entry, e.g. ``jobs[2].track``."""
    if not isinstance(items, (list, tuple)):
        raise InvalidInputError(name, "expected a list")
    return [parse_model(model_cls, item, f"{name}[{i}]") for i, item in enumerate(items)]


def parse_profile(data: Dict[str, Any]) -> UserProfile:
    return parse_model(UserProfile, data, "profile")


def parse_jobs(items: List[Dict[str, Any]]) -> List[JobPosting]:
    return parse_catalog(JobPosting, items, "jobs")


def parse_resources(items: List[Dict[str, Any]]) -> List[LearningResource]:
    return parse_catalog(LearningResource, items, "resources")
