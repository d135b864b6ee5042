"""Skill-name text utilities.

Skills are free-form labels typed by users. Two skills are considered equal
when their trimmed, lower-cased forms are equal; the helpers here implement
that comparison and the comma-separated input format of the frontend form.
"""

from collections.abc import Iterable


def normalize_skill(skill: str) -> str:
    """Return the comparison key for a skill name.

    Args:
        skill: Skill name as typed or as stored in a table

    Returns:
        Trimmed, lower-cased skill name

    Examples:
        >>> normalize_skill("  JavaScript ")
        'javascript'
    """
    return skill.strip().lower()


def normalized_set(skills: Iterable[str]) -> set[str]:
    """Build the set of comparison keys for a collection of skills."""
    return {normalize_skill(skill) for skill in skills}


def split_skill_list(raw: str) -> list[str]:
    """Split a comma-separated skill string into trimmed, non-empty names.

    Args:
        raw: Skill list as typed into a single text box

    Returns:
        Skill names in input order, blanks removed

    Examples:
        >>> split_skill_list("HTML, css,, Javascript ")
        ['HTML', 'css', 'Javascript']
    """
    return [part.strip() for part in raw.split(",") if part.strip()]
