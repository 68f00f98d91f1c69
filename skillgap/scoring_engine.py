"""
Deterministic Scoring Engine

All scoring functions are deterministic - same inputs produce same outputs.
Nothing here reads or writes external state.
"""

import logging
import math
from typing import Dict, Optional, Sequence, Tuple

from .config import EXPERIENCE_CREDIT, validate_weights
from .normalizer import normalize_skills, normalize_track
from .schemas import ExperienceLevel, JobPosting, MatchResult, UserProfile

logger = logging.getLogger(__name__)


def split_skills(
    required_skills: Sequence[str],
    candidate_skills: Sequence[str]
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """
    Partition the required skills into (matched, missing).

    Both collections are normalized first. The partition keeps the order of
    required_skills, so matched + missing is exactly the requirement list.
    """
    required = normalize_skills(required_skills)
    candidate = set(normalize_skills(candidate_skills))

    matched = tuple(s for s in required if s in candidate)
    missing = tuple(s for s in required if s not in candidate)
    return matched, missing


def calculate_skill_score(matched_count: int, required_count: int) -> float:
    """
    Calculate skill component (0-1).

    Formula: matched / max(1, required). Using the requirement count as the
    denominator means extra candidate skills never lower the score.
    """
    score = matched_count / max(1, required_count)
    logger.debug(f"Skills: {matched_count}/{required_count} = {score:.3f}")
    return score


def calculate_experience_score(
    candidate_level: ExperienceLevel,
    required_level: ExperienceLevel
) -> Tuple[float, int]:
    """
    Calculate experience component (0-1) and the level delta.

    Formula based on (candidate rank - required rank):
    - delta >= 0: 1.0
    - delta == -1: 0.5
    - otherwise: 0.0

    Returns:
        (credit, delta)
    """
    delta = candidate_level.rank - required_level.rank

    if delta >= 0:
        credit = EXPERIENCE_CREDIT["meets"]
    elif delta == -1:
        credit = EXPERIENCE_CREDIT["one_below"]
    else:
        credit = EXPERIENCE_CREDIT["other"]

    logger.debug(
        f"Experience: {candidate_level.value} vs {required_level.value} "
        f"(delta {delta}), credit = {credit}"
    )
    return credit, delta


def calculate_track_score(preferred_track: str, job_track: str) -> float:
    """Track component: 1.0 on a case-insensitive match, else 0.0. A blank track never matches."""
    preferred = normalize_track(preferred_track)
    if preferred and preferred == normalize_track(job_track):
        return 1.0
    return 0.0


def to_percentage(composite: float) -> int:
    """Scale a 0-1 composite to an integer percentage, rounding half up and clamping to [0, 100]."""
    # float noise like 42.49999999999999 must still round to 43
    percent = round(100 * composite, 6)
    return max(0, min(100, int(math.floor(percent + 0.5))))


def calculate_match_score(
    profile: UserProfile,
    job: JobPosting,
    weights: Optional[Dict[str, float]] = None
) -> MatchResult:
    """
    Calculate the compatibility of one profile with one job.

    Args:
        profile: The user's declared skills, experience and track
        job: The job posting to score against
        weights: Optional component weights, defaults to config.WEIGHTS

    Returns:
        MatchResult with score (0-100) and the matched/missing skill split
    """
    weights = validate_weights(weights)

    matched, missing = split_skills(job.skills_required, profile.skills)
    skill_score = calculate_skill_score(len(matched), len(job.skills_required))

    experience_score, experience_delta = calculate_experience_score(
        profile.experience_level,
        job.experience_required
    )

    track_score = calculate_track_score(profile.preferred_track, job.track)

    composite = (
        (weights["skills"] * skill_score) +
        (weights["experience"] * experience_score) +
        (weights["track"] * track_score)
    )
    score = to_percentage(composite)

    logger.debug(
        f"Job {job.id}: skills={skill_score:.3f} experience={experience_score} "
        f"track={track_score} -> {score}%"
    )

    return MatchResult(
        job_id=job.id,
        score=score,
        matched_skills=matched,
        missing_skills=missing,
        experience_delta=experience_delta,
        track_match=track_score == 1.0,
    )
