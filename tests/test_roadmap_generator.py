from __future__ import annotations

import pytest
from pydantic import ValidationError

from skillgap.errors import InvalidInputError
from skillgap.schemas.roadmap import RoadmapPhase
from skillgap.services.roadmap_generator import (
    GENERIC_ROADMAP,
    LEARNING_RESOURCES,
    ROLE_ROADMAPS,
    SkillResources,
    build_skill_roadmap,
    generate_roadmap_for_role,
    roadmap_templates,
)


def test_data_analyst_roadmap():
    roadmap = generate_roadmap_for_role("Data Analyst")
    assert [phase.duration for phase in roadmap] == ["1–2 months", "2 months", "1–2 months"]
    assert roadmap[0].items[0] == "Excel"
    assert [phase.phase for phase in roadmap] == ["Phase 1", "Phase 2", "Phase 3"]


@pytest.mark.parametrize("role", [*ROLE_ROADMAPS, "Astronaut", "", "frontend developer"])
def test_always_three_phases(role):
    assert len(generate_roadmap_for_role(role)) == 3


def test_unknown_role_gets_generic_roadmap():
    roadmap = generate_roadmap_for_role("Astronaut")
    assert roadmap[0].items[0] == "Basics"
    assert roadmap[2].items[-1] == "Interview Prep"


def test_frontend_roadmap_resolves_case_insensitively():
    roadmap = generate_roadmap_for_role("frontend developer")
    assert roadmap[0].items[0] == "HTML"


def test_skill_roadmap_has_one_phase_per_skill():
    roadmap = build_skill_roadmap(["React", "Go", "python"], "Full Stack Developer")
    assert roadmap.total_skills == 3
    assert roadmap.estimated_duration == "12 weeks"
    assert [phase.phase for phase in roadmap.roadmap] == [1, 2, 3]
    assert roadmap.roadmap[0].resources == ["React Official Docs", "React for Beginners"]
    assert roadmap.roadmap[1].resources == ["Online courses", "Official documentation"]
    assert roadmap.roadmap[2].duration == "3-4 weeks"
    assert roadmap.roadmap[2].advanced_resources == ["Fluent Python", "Effective Python"]
    assert roadmap.roadmap[1].milestones[1] == "Build a project using Go"


def test_skill_roadmap_with_no_skills():
    roadmap = build_skill_roadmap([], "Backend Developer", timeframe="3 months")
    assert roadmap.roadmap == []
    assert roadmap.estimated_duration == "0 weeks"
    assert roadmap.timeframe == "3 months"
    assert len(roadmap.tips) == 4


def test_skill_roadmap_rejects_blank_skill():
    with pytest.raises(InvalidInputError) as excinfo:
        build_skill_roadmap(["React", " "], "Backend Developer")
    assert excinfo.value.field == "missingSkills"


def test_templates():
    roles = [template.role for template in roadmap_templates()]
    assert roles == ["Full Stack Developer", "Data Scientist"]


def test_changing_a_returned_roadmap_leaves_tables_intact():
    first = generate_roadmap_for_role("Frontend Developer")
    first.append(RoadmapPhase(phase="Phase 4", duration="1 month", items=("Extra",)))
    first[0] = RoadmapPhase(phase="Phase 1", duration="1 week", items=("Nothing",))

    second = generate_roadmap_for_role("Frontend Developer")
    assert len(second) == 3
    assert second[0].items[0] == "HTML"
    assert len(ROLE_ROADMAPS["Frontend Developer"]) == 3


def test_changing_a_generic_roadmap_leaves_fallback_intact():
    generate_roadmap_for_role("Astronaut").clear()
    assert len(GENERIC_ROADMAP) == 3
    assert generate_roadmap_for_role("Astronaut")[0].items[0] == "Basics"


def test_roadmap_phases_are_read_only():
    phase = generate_roadmap_for_role("Data Analyst")[0]
    with pytest.raises(AttributeError):
        phase.items.append("Extra")
    with pytest.raises(ValidationError):
        phase.items = ("Extra",)


def test_roadmap_tables_are_read_only():
    with pytest.raises(TypeError):
        ROLE_ROADMAPS["Astronaut"] = GENERIC_ROADMAP
    with pytest.raises(TypeError):
        LEARNING_RESOURCES["go"] = LEARNING_RESOURCES["python"]


def test_skill_roadmap_lists_are_fresh_per_call():
    first = build_skill_roadmap(["React"], "Frontend Developer")
    first.roadmap[0].resources.append("Extra")
    first.tips.clear()

    second = build_skill_roadmap(["React"], "Frontend Developer")
    assert second.roadmap[0].resources == ["React Official Docs", "React for Beginners"]
    assert len(second.tips) == 4


def test_custom_roadmap_table():
    table = {"Astronaut": GENERIC_ROADMAP[:1] * 3}
    roadmap = generate_roadmap_for_role("astronaut", roadmaps=table)
    assert [phase.items[0] for phase in roadmap] == ["Basics"] * 3


def test_custom_resources_table():
    resources = {"go": SkillResources(beginner=("Tour of Go",), intermediate=(), duration="2 weeks")}
    roadmap = build_skill_roadmap(["Go"], "Backend Developer", resources=resources)
    assert roadmap.roadmap[0].resources == ["Tour of Go"]
    assert roadmap.roadmap[0].duration == "2 weeks"
