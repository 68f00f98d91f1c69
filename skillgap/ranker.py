"""
Job ranking and skill-gap aggregation.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .config import DEFAULT_TOP_K, validate_weights
from .errors import InvalidInputError
from .scoring_engine import calculate_match_score
from .schemas import JobPosting, MatchResult, UserProfile

logger = logging.getLogger(__name__)


def rank_jobs(
    profile: UserProfile,
    jobs: Sequence[JobPosting],
    top_k: int = DEFAULT_TOP_K,
    weights: Optional[Dict[str, float]] = None
) -> Tuple[List[MatchResult], List[str]]:
    """
    Score every job, keep the best top_k and collect their missing skills.

    Sorting is stable: jobs with equal scores keep their catalog order.

    Args:
        profile: User profile to rank jobs for
        jobs: Job catalog snapshot
        top_k: Number of results to keep
        weights: Optional component weights

    Returns:
        (ranked matches, skill gap) where the gap lists each missing skill
        once, in order of first appearance among the ranked matches

    Raises:
        InvalidInputError: If top_k is negative or weights are malformed
    """
    if isinstance(top_k, bool) or not isinstance(top_k, int) or top_k < 0:
        raise InvalidInputError("topK", "must be a non-negative integer")
    weights = validate_weights(weights)

    if not jobs:
        logger.info("Empty job catalog, nothing to rank")
        return [], []

    results = [calculate_match_score(profile, job, weights) for job in jobs]
    results.sort(key=lambda r: r.score, reverse=True)
    top = results[:top_k]

    gap = aggregate_skill_gap(top)

    logger.info(f"Ranked {len(results)} jobs, kept top {len(top)}")
    if top:
        logger.info(f"Top match: {top[0].job_id} at {top[0].score}%")
    logger.info(f"Skill gap across top matches: {len(gap)} skills")

    return top, gap


def aggregate_skill_gap(matches: Sequence[MatchResult]) -> List[str]:
    """Union of missing skills across matches, first appearance first."""
    gap = {}
    for match in matches:
        for skill in match.missing_skills:
            if skill not in gap:
                gap[skill] = None
    return list(gap)
