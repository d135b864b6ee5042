"""Role-skill catalog loading service.

This module loads the two static role tables (required skills per role and
prerequisite learning order per role) from JSON files. Tables are loaded once
at startup and handed to the matcher and resolver as read-only mappings.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Annotated

from pydantic import StringConstraints, TypeAdapter, ValidationError

from skillgap.errors import DataLoadError
from skillgap.utils.skill_text import normalize_skill, normalized_set

logger = logging.getLogger(__name__)

RoleTable = Mapping[str, tuple[str, ...]]

SkillName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Role name -> ordered skill names, as stored in the JSON files
ROLE_TABLE_ADAPTER = TypeAdapter(dict[str, list[SkillName]])


@dataclass(frozen=True)
class Catalogs:
    """Immutable bundle of the static role tables."""

    required_skills: RoleTable
    learning_order: RoleTable

    @property
    def roles(self) -> list[str]:
        """Catalog role names in file order."""
        return list(self.required_skills)


def resolve_role(role: str, table: Mapping[str, object]) -> str | None:
    """Find the table key for a role name.

    Tries an exact match on the trimmed name first, then a case-insensitive
    match, so "frontend developer" resolves to "Frontend Developer".

    Args:
        role: Role name from a request
        table: Any mapping keyed by role name

    Returns:
        The key as spelled in the table, or None if the role is unknown
    """
    wanted = role.strip()
    if wanted in table:
        return wanted

    lowered = wanted.lower()
    for key in table:
        if key.lower() == lowered:
            return key
    return None


def load_role_table(path: Path | str) -> RoleTable:
    """Load a role -> skill list table from a JSON file.

    The file must hold a single JSON object mapping role names to arrays of
    non-empty skill-name strings.

    Args:
        path: Location of the JSON file

    Returns:
        Read-only mapping of role name to a tuple of skill names

    Raises:
        DataLoadError: If the file is unreadable, not JSON, or badly shaped
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise DataLoadError(path, f"unreadable ({e.strerror or e})") from e
    except json.JSONDecodeError as e:
        raise DataLoadError(path, f"invalid JSON at line {e.lineno}: {e.msg}") from e

    try:
        validated = ROLE_TABLE_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise DataLoadError(path, str(e)) from e

    table = {role: tuple(skills) for role, skills in validated.items()}

    logger.info(f"Loaded {len(table)} roles from {path.name}")
    return MappingProxyType(table)


def find_unordered_skills(catalogs: Catalogs) -> dict[str, list[str]]:
    """Find required skills that the role's learning order does not mention.

    Roles with no learning-order entry are skipped; the resolver falls back
    to catalog order for them.

    Returns:
        Mapping of role name to the required skills absent from its order
    """
    gaps: dict[str, list[str]] = {}
    for role, required in catalogs.required_skills.items():
        order = catalogs.learning_order.get(role)
        if order is None:
            continue
        ordered = normalized_set(order)
        absent = [skill for skill in required if normalize_skill(skill) not in ordered]
        if absent:
            gaps[role] = absent
    return gaps


def load_catalogs(
    role_skills_path: Path | str,
    learning_order_path: Path | str
) -> Catalogs:
    """Load both role tables.

    Args:
        role_skills_path: JSON file of required skills per role
        learning_order_path: JSON file of prerequisite order per role

    Returns:
        Catalogs bundle

    Raises:
        DataLoadError: If either table cannot be loaded
    """
    catalogs = Catalogs(
        required_skills=load_role_table(role_skills_path),
        learning_order=load_role_table(learning_order_path),
    )

    for role, absent in find_unordered_skills(catalogs).items():
        logger.warning(
            f"Learning order for '{role}' omits required skills: "
            f"{', '.join(absent)}"
        )

    return catalogs
