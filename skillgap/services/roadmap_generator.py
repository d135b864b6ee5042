"""Learning roadmap generation service.

This module builds two kinds of roadmap:
- a fixed 3-phase curriculum per role, with a generic fallback for roles
  that have no curriculum of their own;
- a per-skill roadmap with one phase per missing skill, using a table of
  learning resources.

The tables are read-only mappings of frozen values; callers may pass their
own tables in place of the defaults.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from skillgap.errors import InvalidInputError
from skillgap.schemas.roadmap import (
    RoadmapPhase,
    RoadmapTemplate,
    SkillRoadmap,
    SkillRoadmapPhase,
    TemplatePhase,
)
from skillgap.services.catalog import resolve_role

logger = logging.getLogger(__name__)

WEEKS_PER_SKILL = 4

Roadmap = tuple[RoadmapPhase, ...]


@dataclass(frozen=True)
class SkillResources:
    """Learning resources for one skill."""

    beginner: tuple[str, ...]
    intermediate: tuple[str, ...]
    duration: str


def _phases(*phases: tuple[str, tuple[str, ...]]) -> Roadmap:
    return tuple(
        RoadmapPhase(phase=f"Phase {number}", duration=duration, items=items)
        for number, (duration, items) in enumerate(phases, start=1)
    )


ROLE_ROADMAPS: Mapping[str, Roadmap] = MappingProxyType({
    "Frontend Developer": _phases(
        ("1–2 months", ("HTML", "CSS", "JavaScript Basics", "Git", "Responsive Design")),
        ("2 months", ("React", "Component Architecture", "State Management", "APIs Integration", "Build Tools")),
        ("1–2 months", ("Portfolio Projects", "Deployment (Vercel/Netlify)", "Performance Optimization", "Testing Basics")),
    ),
    "Backend Developer": _phases(
        ("1–2 months", ("Java", "OOP", "Git", "Basic Algorithms", "SQL Fundamentals")),
        ("2 months", ("Spring Boot", "SQL", "APIs", "Database Design", "Authentication")),
        ("1–2 months", ("Deployment", "Projects", "System Design Basics", "Docker", "Cloud Basics")),
    ),
    "Data Analyst": _phases(
        ("1–2 months", ("Excel", "SQL Basics", "Statistics Fundamentals", "Data Cleaning", "Git")),
        ("2 months", ("Python", "Pandas", "Data Visualization", "Dashboards", "Advanced SQL")),
        ("1–2 months", ("Real Projects", "Tableau/Power BI", "Reporting", "Portfolio Building", "Business Metrics")),
    ),
})

GENERIC_ROADMAP: Roadmap = _phases(
    ("1–2 months", ("Basics", "Fundamentals", "Core Concepts", "Version Control", "Problem Solving")),
    ("2 months", ("Tools & Technologies", "Frameworks", "Best Practices", "Advanced Concepts", "APIs")),
    ("1–2 months", ("Projects & Portfolio", "Deployment", "Testing", "System Design", "Interview Prep")),
)

# Keyed by lower-cased skill name
LEARNING_RESOURCES: Mapping[str, SkillResources] = MappingProxyType({
    "javascript": SkillResources(
        beginner=("freeCodeCamp", "MDN Web Docs", "JavaScript.info"),
        intermediate=("You Don't Know JS", "Eloquent JavaScript"),
        duration="4-6 weeks",
    ),
    "react": SkillResources(
        beginner=("React Official Docs", "React for Beginners"),
        intermediate=("Advanced React Patterns", "React Performance"),
        duration="3-4 weeks",
    ),
    "node.js": SkillResources(
        beginner=("Node.js Official Docs", "The Net Ninja Node.js"),
        intermediate=("Node.js Design Patterns", "Advanced Node.js"),
        duration="4-5 weeks",
    ),
    "python": SkillResources(
        beginner=("Python.org Tutorial", "Automate the Boring Stuff"),
        intermediate=("Fluent Python", "Effective Python"),
        duration="3-4 weeks",
    ),
})

GENERIC_RESOURCES = SkillResources(
    beginner=("Online courses", "Official documentation"),
    intermediate=("Advanced tutorials", "Practice projects"),
    duration="3-4 weeks",
)

ROADMAP_TIPS = (
    "Practice daily for at least 1-2 hours",
    "Build projects to reinforce learning",
    "Join online communities for support",
    "Document your learning journey",
)

ROADMAP_TEMPLATES = (
    RoadmapTemplate(
        role="Full Stack Developer",
        duration="6-12 months",
        phases=(
            TemplatePhase(name="Frontend Basics", skills=("HTML", "CSS", "JavaScript")),
            TemplatePhase(name="Frontend Framework", skills=("React", "Redux")),
            TemplatePhase(name="Backend Development", skills=("Node.js", "Express", "MongoDB")),
            TemplatePhase(name="DevOps & Deployment", skills=("Git", "Docker", "AWS")),
        ),
    ),
    RoadmapTemplate(
        role="Data Scientist",
        duration="8-12 months",
        phases=(
            TemplatePhase(name="Programming Foundation", skills=("Python", "SQL")),
            TemplatePhase(name="Data Analysis", skills=("Pandas", "NumPy", "Matplotlib")),
            TemplatePhase(name="Machine Learning", skills=("Scikit-learn", "TensorFlow")),
            TemplatePhase(name="Advanced Topics", skills=("Deep Learning", "NLP", "Computer Vision")),
        ),
    ),
)


def generate_roadmap_for_role(
    role: str,
    roadmaps: Mapping[str, Roadmap] = ROLE_ROADMAPS,
    fallback: Roadmap = GENERIC_ROADMAP
) -> list[RoadmapPhase]:
    """Get the 3-phase curriculum for a role.

    Unknown roles get the fallback curriculum rather than an error.

    Args:
        role: Role name (case-insensitive)
        roadmaps: Role -> curriculum table
        fallback: Curriculum for roles missing from the table

    Returns:
        Exactly three RoadmapPhase values
    """
    canonical_role = resolve_role(role, roadmaps)
    if canonical_role is None:
        logger.info(f"No curriculum for role '{role}', using generic roadmap")
        return list(fallback)
    return list(roadmaps[canonical_role])


def build_skill_roadmap(
    missing_skills: Sequence[str],
    target_role: str,
    timeframe: str | None = None,
    resources: Mapping[str, SkillResources] = LEARNING_RESOURCES
) -> SkillRoadmap:
    """Build a roadmap with one phase per missing skill.

    Skills without an entry in the resources table get GENERIC_RESOURCES.
    The estimate assumes WEEKS_PER_SKILL weeks per skill.

    Args:
        missing_skills: Skills to learn, in the order they should be studied
        target_role: Role the roadmap is for
        timeframe: Optional user-supplied timeframe, echoed back
        resources: Lower-cased skill name -> learning resources

    Returns:
        SkillRoadmap with one SkillRoadmapPhase per skill

    Raises:
        InvalidInputError: If the role is blank or any skill is blank
    """
    if not target_role.strip():
        raise InvalidInputError("targetRole", "Please provide a target role")

    phases = []
    for index, raw_skill in enumerate(missing_skills, start=1):
        skill = raw_skill.strip() if isinstance(raw_skill, str) else ""
        if not skill:
            raise InvalidInputError(
                "missingSkills", "Every skill must be a non-empty string"
            )

        skill_resources = resources.get(skill.lower(), GENERIC_RESOURCES)
        phases.append(
            SkillRoadmapPhase(
                phase=index,
                skill=skill,
                duration=skill_resources.duration,
                resources=list(skill_resources.beginner),
                advanced_resources=list(skill_resources.intermediate),
                milestones=[
                    f"Understand {skill} fundamentals",
                    f"Build a project using {skill}",
                    f"Contribute to open source using {skill}",
                ],
            )
        )

    return SkillRoadmap(
        target_role=target_role.strip(),
        total_skills=len(phases),
        estimated_duration=f"{len(phases) * WEEKS_PER_SKILL} weeks",
        timeframe=timeframe,
        roadmap=phases,
        tips=list(ROADMAP_TIPS),
    )


def roadmap_templates() -> list[RoadmapTemplate]:
    """Static roadmap templates for common roles."""
    return list(ROADMAP_TEMPLATES)
