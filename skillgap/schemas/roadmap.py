"""Roadmap Pydantic schemas.

Two roadmap shapes exist: the fixed 3-phase curriculum for a role, and the
per-skill roadmap built from a list of missing skills.
"""

from pydantic import ConfigDict, Field

from skillgap.schemas.base import CamelModel


class RoadmapPhase(CamelModel):
    """One phase of a role curriculum."""

    model_config = ConfigDict(frozen=True)

    phase: str = Field(..., description="Phase label, e.g. 'Phase 1'")
    duration: str = Field(..., description="Free-text duration, e.g. '1–2 months'")
    items: tuple[str, ...]


class RoleRoadmapRequest(CamelModel):
    """Schema for a role roadmap request."""

    role: str = Field(..., min_length=1)


class RoleRoadmapResponse(CamelModel):
    """Schema for a role roadmap response."""

    role: str
    roadmap: list[RoadmapPhase]


class SkillRoadmapRequest(CamelModel):
    """Schema for a per-skill roadmap request."""

    missing_skills: list[str]
    target_role: str = Field(..., min_length=1)
    timeframe: str | None = None


class SkillRoadmapPhase(CamelModel):
    """One phase of a per-skill roadmap, covering a single skill."""

    phase: int = Field(..., ge=1)
    skill: str
    duration: str
    resources: list[str]
    advanced_resources: list[str]
    milestones: list[str]


class SkillRoadmap(CamelModel):
    """Schema for a per-skill roadmap."""

    target_role: str
    total_skills: int
    estimated_duration: str
    timeframe: str | None = None
    roadmap: list[SkillRoadmapPhase]
    tips: list[str]


class TemplatePhase(CamelModel):
    """Named group of skills inside a roadmap template."""

    model_config = ConfigDict(frozen=True)

    name: str
    skills: tuple[str, ...]


class RoadmapTemplate(CamelModel):
    """Schema for a static roadmap template."""

    model_config = ConfigDict(frozen=True)

    role: str
    duration: str
    phases: tuple[TemplatePhase, ...]
