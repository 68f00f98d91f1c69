"""
Skill-Gap Job Matching and Learning Recommendation Engine

This package provides a deterministic, side-effect free pipeline:
1. Score each job against a user profile (skills, experience, track)
2. Rank jobs and aggregate the skills missing from the top matches
3. Map missing skills onto a deduplicated list of learning resources

Usage:
    from skillgap import recommend_learning

    plan = recommend_learning(profile, jobs, resources)
    print(f"Top match: {plan.matches[0].score}%")
"""

from .config import WEIGHTS, DEFAULT_TOP_K
from .errors import InvalidInputError
from .normalizer import normalize_skill, normalize_skills
from .scoring_engine import calculate_match_score
from .ranker import rank_jobs
from .resources import match_resources, flatten_suggestions
from .recommender import recommend_learning, recommend_learning_from_documents
from .schemas import (
    Cost,
    ExperienceLevel,
    JobPosting,
    LearningPlan,
    LearningResource,
    MatchResult,
    RecommendedResource,
    SkillGapSuggestion,
    UserProfile,
    parse_jobs,
    parse_profile,
    parse_resources,
)

__all__ = [
    "WEIGHTS",
    "DEFAULT_TOP_K",
    "InvalidInputError",
    "normalize_skill",
    "normalize_skills",
    "calculate_match_score",
    "rank_jobs",
    "match_resources",
    "flatten_suggestions",
    "recommend_learning",
    "recommend_learning_from_documents",
    "Cost",
    "ExperienceLevel",
    "JobPosting",
    "LearningPlan",
    "LearningResource",
    "MatchResult",
    "RecommendedResource",
    "SkillGapSuggestion",
    "UserProfile",
    "parse_jobs",
    "parse_profile",
    "parse_resources",
]
__version__ = "1.0.0"
