"""
Main Recommender Module

Orchestrates the complete recommendation process:
1. Score and rank the job catalog for a profile
2. Aggregate the skills missing from the top matches
3. Map missing skills onto learning resources and deduplicate them
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .config import DEFAULT_TOP_K
from .ranker import rank_jobs
from .resources import flatten_suggestions, match_resources
from .schemas import (
    JobPosting,
    LearningPlan,
    LearningResource,
    UserProfile,
    parse_jobs,
    parse_profile,
    parse_resources,
)

logger = logging.getLogger(__name__)


def recommend_learning(
    profile: UserProfile,
    jobs: Sequence[JobPosting],
    resources: Sequence[LearningResource],
    top_k: Optional[int] = None,
    weights: Optional[Dict[str, float]] = None
) -> LearningPlan:
    """
    Build a learning plan for a profile.

    This is the main entry point of the engine. Catalogs are snapshots passed
    in by the caller; nothing is fetched or cached here.

    Args:
        profile: User profile
        jobs: Job catalog
        resources: Learning resource catalog
        top_k: How many top matches drive the skill gap (defaults to config)
        weights: Optional component weights (defaults to config)

    Returns:
        LearningPlan with ranked matches, the skill gap, per-skill suggestion
        groups and the deduplicated resource list

    Raises:
        InvalidInputError: If top_k or weights are invalid

    Example:
        >>> plan = recommend_learning(profile, jobs, resources)
        >>> for resource in plan.resources:
        >>>     print(f"{resource.title} (for {resource.for_skill})")
    """
    logger.info("=" * 60)
    logger.info("STARTING LEARNING RECOMMENDATION")
    logger.info("=" * 60)

    if top_k is None:
        top_k = DEFAULT_TOP_K

    logger.info(f"Step 1: Ranking {len(jobs)} jobs (top {top_k})...")
    matches, skill_gap = rank_jobs(profile, jobs, top_k, weights)

    logger.info(f"Step 2: Matching {len(skill_gap)} missing skills against {len(resources)} resources...")
    suggestions = match_resources(skill_gap, resources)

    logger.info("Step 3: Deduplicating suggestions...")
    recommended = flatten_suggestions(suggestions)

    logger.info("=" * 60)
    logger.info(f"RECOMMENDATION COMPLETE - {len(recommended)} resources")
    logger.info("=" * 60)

    return LearningPlan(
        matches=tuple(matches),
        skill_gap=tuple(skill_gap),
        suggestions=tuple(suggestions),
        resources=tuple(recommended),
    )


def recommend_learning_from_documents(
    profile_data: Dict[str, Any],
    job_data: List[Dict[str, Any]],
    resource_data: List[Dict[str, Any]],
    top_k: Optional[int] = None,
    weights: Optional[Dict[str, float]] = None
) -> LearningPlan:
    """
    Same as recommend_learning, from JSON-shaped dicts.

    Every input is validated before any scoring happens, so a structural
    error never produces a partial plan.
    """
    profile = parse_profile(profile_data)
    jobs = parse_jobs(job_data)
    resources = parse_resources(resource_data)
    return recommend_learning(profile, jobs, resources, top_k, weights)
