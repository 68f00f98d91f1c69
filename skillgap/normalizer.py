"""
Skill token canonicalization.

Every skill compared by the engine goes through normalize_skill first, so
"React ", "react" and "  REACT" all land on the same key.
"""

from typing import Iterable, Tuple


def normalize_skill(skill: str) -> str:
    """Lower-case, trim and collapse internal whitespace. Idempotent."""
    return " ".join(skill.lower().split())


def normalize_skills(skills: Iterable[str]) -> Tuple[str, ...]:
    """
    Normalize a collection of skills.

    Empty tokens are dropped and duplicates collapse onto their first
    occurrence, so the result keeps the order the skills were declared in.
    """
    seen = {}
    for skill in skills:
        key = normalize_skill(skill)
        if key and key not in seen:
            seen[key] = None
    return tuple(seen)


def normalize_track(track: str) -> str:
    """Tracks compare case-insensitively with the same whitespace rules as skills."""
    return normalize_skill(track)
