"""Learning-order resolver.

Orders a role's missing skills by the role's prerequisite list, so that
foundational skills come before the ones that build on them.
"""

from collections.abc import Sequence

from skillgap.services.catalog import RoleTable, resolve_role
from skillgap.utils.skill_text import normalize_skill, normalized_set


def suggest_learning_order(
    missing_skills: Sequence[str],
    target_role: str,
    order_table: RoleTable
) -> list[str]:
    """Suggest the order in which to learn missing skills.

    The result is the role's prerequisite list filtered down to the missing
    skills, in prerequisite order. Missing skills the prerequisite list does
    not mention are left out. Roles without a prerequisite list get the
    missing skills back unchanged.

    Args:
        missing_skills: Missing skills, in catalog order
        target_role: Role name (case-insensitive)
        order_table: Role -> prerequisite order table

    Returns:
        Suggested study order

    Example:
        >>> suggest_learning_order(["React", "Git"], "Frontend Developer", table)
        ['Git', 'React']
    """
    role = resolve_role(target_role, order_table)
    if role is None:
        return list(missing_skills)

    wanted = normalized_set(missing_skills)
    return [skill for skill in order_table[role] if normalize_skill(skill) in wanted]
