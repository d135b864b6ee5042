"""Roadmap API router."""

import logging

from fastapi import APIRouter, HTTPException, status

from skillgap.errors import InvalidInputError
from skillgap.schemas.envelope import ApiListResponse, ApiResponse
from skillgap.schemas.roadmap import (
    RoadmapTemplate,
    RoleRoadmapRequest,
    RoleRoadmapResponse,
    SkillRoadmap,
    SkillRoadmapRequest,
)
from skillgap.services.roadmap_generator import (
    build_skill_roadmap,
    generate_roadmap_for_role,
    roadmap_templates,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/roadmap", tags=["roadmap"])


@router.post("", response_model=ApiResponse[RoleRoadmapResponse])
async def generate_role_roadmap(request: RoleRoadmapRequest):
    """Generate the 3-phase learning roadmap for a role.

    Unknown roles get a generic roadmap.
    """
    if not request.role.strip():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "role is required", "field": "role"}
        )

    role = request.role.strip()
    return ApiResponse[RoleRoadmapResponse](
        data=RoleRoadmapResponse(role=role, roadmap=generate_roadmap_for_role(role)),
        message="Roadmap generated",
    )


@router.post("/generate", response_model=ApiResponse[SkillRoadmap])
async def generate_skill_roadmap(request: SkillRoadmapRequest):
    """Generate a roadmap with one phase per missing skill.

    Args:
        request: Missing skills, target role and optional timeframe

    Returns:
        Envelope whose data holds per-skill phases with resources,
        milestones and an estimated duration

    Raises:
        HTTPException 422: Blank role or blank skill
    """
    try:
        roadmap = build_skill_roadmap(
            request.missing_skills, request.target_role, request.timeframe
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": e.message, "field": e.field}
        )

    return ApiResponse[SkillRoadmap](data=roadmap, message="Roadmap generated")


@router.get("/templates", response_model=ApiListResponse[RoadmapTemplate])
async def list_templates():
    """Get roadmap templates for common roles."""
    return ApiListResponse[RoadmapTemplate].of(roadmap_templates())
