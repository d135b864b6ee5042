"""Skill-gap API router.

This module provides REST endpoints for analyzing the gap between a user's
current skills and a target role, and for listing the catalog roles.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from skillgap.dependencies import get_catalogs
from skillgap.errors import InvalidInputError, RoleNotFoundError
from skillgap.schemas.envelope import ApiListResponse, ApiResponse
from skillgap.schemas.skill_gap import RoleSummary, SkillGapRequest, SkillGapResult
from skillgap.services.catalog import Catalogs
from skillgap.services.skill_matcher import compute_skill_gap

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/skill-gap", tags=["skill-gap"])


@router.post(
    "",
    response_model=ApiResponse[SkillGapResult],
    summary="Analyze skill gap"
)
@router.post(
    "/analyze",
    response_model=ApiResponse[SkillGapResult],
    summary="Analyze skill gap"
)
async def analyze_skill_gap(
    request: SkillGapRequest,
    catalogs: Catalogs = Depends(get_catalogs)
) -> ApiResponse[SkillGapResult]:
    """Compare current skills against the required skills of a role.

    Args:
        request: Target role and current skills
        catalogs: Loaded role tables

    Returns:
        Envelope whose data holds matched and missing skills, gap
        percentage, recommendation and suggested learning order

    Raises:
        HTTPException 404: Role not in catalog (detail lists valid roles)
        HTTPException 422: Blank role or empty/blank skills
    """
    try:
        result = compute_skill_gap(
            request.target_role, request.current_skills, catalogs
        )
        return ApiResponse[SkillGapResult](data=result, message="Skill gap analyzed")
    except RoleNotFoundError as e:
        logger.info(f"Skill gap requested for unknown role '{e.role}'")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": str(e), "validRoles": e.valid_roles}
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": e.message, "field": e.field}
        )


@router.get("/roles", response_model=ApiListResponse[RoleSummary])
async def list_roles(catalogs: Catalogs = Depends(get_catalogs)):
    """List catalog roles with their required skills."""
    roles = [
        RoleSummary(
            name=name,
            required_skills=list(skills),
            required_skill_count=len(skills),
        )
        for name, skills in catalogs.required_skills.items()
    ]
    return ApiListResponse[RoleSummary].of(roles)
