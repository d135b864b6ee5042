from __future__ import annotations

from skillgap.services.learning_order import suggest_learning_order

ORDER_TABLE = {
    "Frontend Developer": ("HTML", "CSS", "JavaScript", "Git", "TypeScript", "React"),
}


def test_orders_by_prerequisites():
    order = suggest_learning_order(["React", "TypeScript", "HTML"], "Frontend Developer", ORDER_TABLE)
    assert order == ["HTML", "TypeScript", "React"]


def test_output_is_subsequence_of_prerequisites():
    missing = ["React", "Git", "css"]
    order = suggest_learning_order(missing, "Frontend Developer", ORDER_TABLE)
    prerequisites = list(ORDER_TABLE["Frontend Developer"])
    positions = [prerequisites.index(skill) for skill in order]
    assert positions == sorted(positions)
    assert order == ["CSS", "Git", "React"]


def test_skills_without_prerequisite_entry_are_dropped():
    order = suggest_learning_order(["Webpack", "React"], "Frontend Developer", ORDER_TABLE)
    assert order == ["React"]


def test_unknown_role_falls_back_to_missing_order():
    order = suggest_learning_order(["Swift", "Kotlin"], "Mobile Developer", ORDER_TABLE)
    assert order == ["Swift", "Kotlin"]


def test_role_lookup_is_case_insensitive():
    order = suggest_learning_order(["React", "HTML"], "FRONTEND developer", ORDER_TABLE)
    assert order == ["HTML", "React"]


def test_nothing_missing():
    assert suggest_learning_order([], "Frontend Developer", ORDER_TABLE) == []
