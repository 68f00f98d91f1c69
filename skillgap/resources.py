"""
Learning resource matching and deduplication.

match_resources groups the resource catalog by missing skill;
flatten_suggestions turns those groups into one list where every resource
appears once, attributed to the first skill that surfaced it.
"""

import logging
from typing import Dict, List, Sequence

from .normalizer import normalize_skill
from .schemas import LearningResource, RecommendedResource, SkillGapSuggestion

logger = logging.getLogger(__name__)


def match_resources(
    skill_gap: Sequence[str],
    catalog: Sequence[LearningResource]
) -> List[SkillGapSuggestion]:
    """
    Build one suggestion group per missing skill.

    Groups follow skill_gap order and list matching resources in catalog
    order. A skill with no resources still gets an (empty) group; gap entries
    that normalize to the same key share the first group.
    """
    suggestions = []
    emitted = set()
    for skill in skill_gap:
        key = normalize_skill(skill)
        if not key or key in emitted:
            continue
        emitted.add(key)
        resources = tuple(r for r in catalog if key in r.related_skills)
        if not resources:
            logger.debug(f"No learning resources for skill '{key}'")
        suggestions.append(SkillGapSuggestion(skill=key, resources=resources))

    logger.info(
        f"Matched resources for {len(suggestions)} skills "
        f"({sum(1 for s in suggestions if s.resources)} with at least one resource)"
    )
    return suggestions


def flatten_suggestions(suggestions: Sequence[SkillGapSuggestion]) -> List[RecommendedResource]:
    """
    Flatten suggestion groups into a list with no duplicate resource ids.

    Pairs are visited in encounter order; the first (skill, resource) pair for
    an id wins and later ones are skipped.
    """
    unique: Dict[str, RecommendedResource] = {}
    duplicates = 0

    for suggestion in suggestions:
        for resource in suggestion.resources:
            if resource.id in unique:
                duplicates += 1
                continue
            unique[resource.id] = RecommendedResource(
                **resource.model_dump(exclude={"for_skill"}),
                for_skill=suggestion.skill,
            )

    logger.debug(f"Flattened {len(unique)} resources, skipped {duplicates} duplicates")
    return list(unique.values())
