"""API schemas for the Skill-Gap Analyzer."""

from .envelope import ApiListResponse, ApiResponse, ErrorResponse
from .news import NewsCategory, NewsItem
from .roadmap import (
    RoadmapPhase,
    RoadmapTemplate,
    RoleRoadmapRequest,
    RoleRoadmapResponse,
    SkillRoadmap,
    SkillRoadmapPhase,
    SkillRoadmapRequest,
    TemplatePhase,
)
from .skill_gap import RoleSummary, SkillGapRequest, SkillGapResult

__all__ = [
    "ApiListResponse",
    "ApiResponse",
    "ErrorResponse",
    "NewsCategory",
    "NewsItem",
    "RoadmapPhase",
    "RoadmapTemplate",
    "RoleRoadmapRequest",
    "RoleRoadmapResponse",
    "SkillRoadmap",
    "SkillRoadmapPhase",
    "SkillRoadmapRequest",
    "TemplatePhase",
    "RoleSummary",
    "SkillGapRequest",
    "SkillGapResult",
]
