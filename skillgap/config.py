"""
Configuration for the skill-gap matching and learning recommendation engine.
Adjust weights and parameters here.
"""

from typing import Dict, Optional

from .errors import InvalidInputError

# Component weights (must sum to 1.0)
WEIGHTS = {
    "skills": 0.60,
    "experience": 0.25,
    "track": 0.15,
}

WEIGHT_TOLERANCE = 1e-6

# Experience level hierarchy
EXPERIENCE_RANKS = {
    "beginner": 0,
    "intermediate": 1,
    "advanced": 2,
}

# Experience credit keyed by (profile rank - job rank); anything below -1 scores 0
EXPERIENCE_CREDIT = {
    "meets": 1.0,
    "one_below": 0.5,
    "other": 0.0,
}

# Number of top-ranked jobs whose missing skills drive learning suggestions
DEFAULT_TOP_K = 10

# Firestore collections
COLLECTIONS = {
    "users": "users",
    "jobs": "jobs",
    "learning_resources": "learningResources",
    "legacy_jobs": "Jobs",
}

# Experience labels written by the legacy job migration
LEGACY_EXPERIENCE_LABELS = {
    "entry level": "beginner",
    "entry": "beginner",
    "junior": "beginner",
    "mid level": "intermediate",
    "mid": "intermediate",
    "senior": "advanced",
}

# Known legacy job titles and the fields they migrate to
LEGACY_JOB_DEFAULTS = {
    "Junior Software Developer": {
        "skillsRequired": ["JavaScript", "HTML", "CSS", "React", "Git"],
        "experienceRequired": "Entry Level",
        "track": "Software Development",
    },
    "Senior Software Developer": {
        "skillsRequired": ["JavaScript", "TypeScript", "React", "Node.js", "System Design", "Leadership"],
        "experienceRequired": "Senior",
        "track": "Software Development",
    },
    "UI UX Designer": {
        "skillsRequired": ["Figma", "Adobe XD", "User Research", "Prototyping", "Design Systems"],
        "experienceRequired": "Mid Level",
        "track": "Design",
    },
    "Full Stack Developer": {
        "skillsRequired": ["JavaScript", "React", "Node.js", "MongoDB", "REST APIs", "Git"],
        "experienceRequired": "Mid Level",
        "track": "Software Development",
    },
    "Frontend Developer": {
        "skillsRequired": ["JavaScript", "React", "CSS", "HTML", "TypeScript", "Responsive Design"],
        "experienceRequired": "Mid Level",
        "track": "Software Development",
    },
    "Backend Developer": {
        "skillsRequired": ["Node.js", "Python", "SQL", "REST APIs", "MongoDB", "System Design"],
        "experienceRequired": "Mid Level",
        "track": "Software Development",
    },
    "Data Scientist": {
        "skillsRequired": ["Python", "Machine Learning", "Statistics", "SQL", "TensorFlow", "Data Analysis"],
        "experienceRequired": "Mid Level",
        "track": "Data Science",
    },
    "Machine Learning Engineer": {
        "skillsRequired": ["Python", "TensorFlow", "PyTorch", "Machine Learning", "Deep Learning", "MLOps"],
        "experienceRequired": "Senior",
        "track": "Data Science",
    },
    "DevOps Engineer": {
        "skillsRequired": ["Docker", "Kubernetes", "AWS", "CI/CD", "Linux", "Terraform"],
        "experienceRequired": "Mid Level",
        "track": "DevOps",
    },
    "Product Manager": {
        "skillsRequired": ["Product Strategy", "Agile", "User Research", "Data Analysis", "Communication"],
        "experienceRequired": "Mid Level",
        "track": "Product Management",
    },
}

# Skills searched for in free-text legacy job details
COMMON_SKILLS = [
    "JavaScript", "Python", "Java", "C++", "React", "Angular", "Vue",
    "Node.js", "Django", "Flask", "SQL", "MongoDB", "PostgreSQL",
    "AWS", "Azure", "Docker", "Kubernetes", "Git", "HTML", "CSS",
    "TypeScript", "Machine Learning", "Data Analysis", "Agile",
    "REST APIs", "GraphQL", "Figma", "Adobe XD", "UI/UX",
]

FALLBACK_SKILLS = ["Programming", "Problem Solving", "Teamwork"]

# Seniority keywords, checked in order
EXPERIENCE_KEYWORDS = [
    (("senior", "lead", "principal"), "Senior"),
    (("junior", "entry", "graduate"), "Entry Level"),
]
DEFAULT_LEGACY_EXPERIENCE = "Mid Level"

# Career track keywords, first match wins
TRACK_KEYWORDS = [
    (("data", "machine learning", "ai"), "Data Science"),
    (("design", "ui", "ux"), "Design"),
    (("devops", "infrastructure", "cloud"), "DevOps"),
    (("product", "manager"), "Product Management"),
    (("mobile", "android", "ios"), "Mobile Development"),
]
DEFAULT_TRACK = "Software Development"


def validate_weights(weights: Optional[Dict[str, float]]) -> Dict[str, float]:
    """
    Check a weight table and return it, falling back to WEIGHTS when None.

    Raises:
        InvalidInputError: If keys differ from WEIGHTS, a weight is negative,
            or the weights do not sum to 1.0
    """
    if weights is None:
        return WEIGHTS

    if set(weights) != set(WEIGHTS):
        raise InvalidInputError(
            "weights",
            f"expected keys {sorted(WEIGHTS)}, got {sorted(weights)}"
        )

    for name, value in weights.items():
        if not isinstance(value, (int, float)) or isinstance(value, bool) or value < 0:
            raise InvalidInputError("weights", f"weight '{name}' must be a non-negative number")

    total = sum(weights.values())
    if abs(total - 1.0) > WEIGHT_TOLERANCE:
        raise InvalidInputError("weights", f"weights must sum to 1.0, got {total:.4f}")

    return dict(weights)
