"""Skill-gap Pydantic schemas.

This module defines the request schema for skill-gap analysis, the immutable
analysis result produced by the matcher service, and the role listing.
"""

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from skillgap.schemas.base import CamelModel
from skillgap.utils.skill_text import split_skill_list


class SkillGapRequest(CamelModel):
    """Schema for a skill-gap analysis request.

    current_skills accepts a JSON array or a single comma-separated string.
    """

    target_role: str = Field(..., description="Target role, e.g. 'Backend Developer'")
    current_skills: list[str] = Field(..., description="Skills the user already has")

    @field_validator("current_skills", mode="before")
    @classmethod
    def split_comma_separated(cls, value: Any) -> Any:
        if isinstance(value, str):
            return split_skill_list(value)
        return value


class SkillGapResult(CamelModel):
    """Immutable result of a skill-gap analysis.

    matched_skills and missing_skills follow the catalog order of
    required_skills and keep the catalog spelling.
    """

    model_config = ConfigDict(frozen=True)

    target_role: str
    required_skills: list[str]
    current_skills: list[str]
    matched_skills: list[str]
    missing_skills: list[str]
    gap_percentage: int = Field(..., ge=0, le=100)
    recommendation: str
    suggested_learning_order: list[str] = Field(default_factory=list)


class RoleSummary(CamelModel):
    """Schema for a catalog role."""

    name: str
    required_skills: list[str]
    required_skill_count: int

