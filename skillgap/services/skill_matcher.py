"""Skill-gap matching service.

This module compares a user's current skills against the required skills of a
target role using case-insensitive exact matching, and turns the result into a
gap percentage and a recommendation.
"""

import logging
from collections.abc import Sequence

from skillgap.errors import InvalidInputError, RoleNotFoundError
from skillgap.schemas.skill_gap import SkillGapResult
from skillgap.services.catalog import Catalogs, resolve_role
from skillgap.services.learning_order import suggest_learning_order
from skillgap.utils.skill_text import normalize_skill, normalized_set

logger = logging.getLogger(__name__)

# Missing-skill count at or below which the recommendation names the skills
NAMED_SKILLS_THRESHOLD = 2


def validate_skill_gap_input(
    target_role: str,
    current_skills: Sequence[str]
) -> tuple[str, list[str]]:
    """Check and trim analysis input.

    Args:
        target_role: Target role name
        current_skills: Skills the user already has

    Returns:
        Tuple of (trimmed role, trimmed skills)

    Raises:
        InvalidInputError: If the role is blank, the skill list is empty, or
            any skill is blank
    """
    if not isinstance(target_role, str) or not target_role.strip():
        raise InvalidInputError("targetRole", "Please provide a target role")

    if isinstance(current_skills, str) or not current_skills:
        raise InvalidInputError(
            "currentSkills", "Please provide current skills as a non-empty array"
        )

    trimmed = []
    for skill in current_skills:
        if not isinstance(skill, str) or not skill.strip():
            raise InvalidInputError(
                "currentSkills", "Every skill must be a non-empty string"
            )
        trimmed.append(skill.strip())

    return target_role.strip(), trimmed


def calculate_gap_percentage(missing_count: int, required_count: int) -> int:
    """Share of required skills that are missing, 0-100, halves rounded up.

    Examples:
        >>> calculate_gap_percentage(4, 7)
        57
        >>> calculate_gap_percentage(1, 8)
        13
        >>> calculate_gap_percentage(0, 0)
        0
    """
    if required_count == 0:
        return 0
    return (200 * missing_count + required_count) // (2 * required_count)


def build_recommendation(
    missing_skills: Sequence[str],
    required_count: int
) -> str:
    """Pick the recommendation text for a gap.

    Tiers are checked in order: nothing missing, everything missing, a few
    missing (named), then a generic progress message.
    """
    missing_count = len(missing_skills)
    matched_count = required_count - missing_count

    if missing_count == 0:
        return "You are well-prepared for this role! You already have every required skill."

    if missing_count == required_count:
        return (
            "Consider starting with fundamentals and building up gradually. "
            "None of the required skills were found in your current skill set."
        )

    if missing_count <= NAMED_SKILLS_THRESHOLD:
        return f"You're almost there! Focus on learning: {', '.join(missing_skills)}."

    return (
        f"You have {matched_count} of {required_count} required skills. "
        f"You have a good foundation. Focus on the missing skills."
    )


def compute_skill_gap(
    target_role: str,
    current_skills: Sequence[str],
    catalogs: Catalogs
) -> SkillGapResult:
    """Analyze the gap between current skills and a role's required skills.

    Workflow:
    1. Validate and trim input
    2. Resolve the role against the required-skills table
    3. Split required skills into matched and missing (catalog order)
    4. Compute gap percentage, recommendation and learning order

    Args:
        target_role: Target role name (case-insensitive)
        current_skills: Skills the user already has
        catalogs: Loaded role tables

    Returns:
        SkillGapResult for the canonical role name

    Raises:
        InvalidInputError: On blank role or empty/blank skills
        RoleNotFoundError: If the role is not in the catalog

    Example:
        >>> result = compute_skill_gap(
        ...     "Frontend Developer", ["HTML", "css", "Javascript"], catalogs
        ... )
        >>> result.missing_skills
        ['React', 'TypeScript', 'Redux', 'Webpack']
    """
    role, skills = validate_skill_gap_input(target_role, current_skills)

    canonical_role = resolve_role(role, catalogs.required_skills)
    if canonical_role is None:
        raise RoleNotFoundError(role, catalogs.roles)

    required = list(catalogs.required_skills[canonical_role])
    have = normalized_set(skills)

    matched = [skill for skill in required if normalize_skill(skill) in have]
    missing = [skill for skill in required if normalize_skill(skill) not in have]

    gap_percentage = calculate_gap_percentage(len(missing), len(required))

    logger.info(
        f"Skill gap for '{canonical_role}': {len(matched)} matched, "
        f"{len(missing)} missing ({gap_percentage}%)"
    )

    return SkillGapResult(
        target_role=canonical_role,
        required_skills=required,
        current_skills=skills,
        matched_skills=matched,
        missing_skills=missing,
        gap_percentage=gap_percentage,
        recommendation=build_recommendation(missing, len(required)),
        suggested_learning_order=suggest_learning_order(
            missing, canonical_role, catalogs.learning_order
        ),
    )
