from __future__ import annotations

import json

import pytest

from skillgap.config import settings
from skillgap.errors import DataLoadError
from skillgap.services.catalog import (
    Catalogs,
    find_unordered_skills,
    load_catalogs,
    load_role_table,
    resolve_role,
)


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_bundled_tables_load():
    catalogs = load_catalogs(settings.role_skills_path, settings.learning_order_path)
    assert "Frontend Developer" in catalogs.roles
    assert catalogs.required_skills["Frontend Developer"] == (
        "HTML", "CSS", "JavaScript", "React", "TypeScript", "Redux", "Webpack",
    )


def test_bundled_learning_order_covers_required_skills():
    catalogs = load_catalogs(settings.role_skills_path, settings.learning_order_path)
    assert find_unordered_skills(catalogs) == {}


def test_loaded_table_is_read_only(tmp_path):
    table = load_role_table(_write(tmp_path, "roles.json", {"Tester": ["pytest"]}))
    with pytest.raises(TypeError):
        table["Tester"] = ("unittest",)


def test_loader_trims_skill_names(tmp_path):
    table = load_role_table(_write(tmp_path, "roles.json", {"Tester": [" pytest ", "tox"]}))
    assert table["Tester"] == ("pytest", "tox")


def test_missing_file_raises_data_load_error(tmp_path):
    with pytest.raises(DataLoadError) as excinfo:
        load_role_table(tmp_path / "missing.json")
    assert excinfo.value.path.name == "missing.json"


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        ["Backend Developer"],
        {"Backend Developer": "Python"},
        {"Backend Developer": ["Python", ""]},
        {"Backend Developer": ["Python", 3]},
    ],
)
def test_malformed_tables_raise_data_load_error(tmp_path, payload):
    with pytest.raises(DataLoadError):
        load_role_table(_write(tmp_path, "roles.json", payload))


def test_validation_error_names_the_bad_entry(tmp_path):
    with pytest.raises(DataLoadError) as excinfo:
        load_role_table(_write(tmp_path, "roles.json", {"Tester": ["pytest"], "Backend Developer": ["Python", 3]}))
    assert "Backend Developer" in excinfo.value.reason
    assert "Tester" not in excinfo.value.reason


def test_resolve_role_is_case_insensitive():
    table = {"Data Analyst": ()}
    assert resolve_role("Data Analyst", table) == "Data Analyst"
    assert resolve_role("  data analyst ", table) == "Data Analyst"
    assert resolve_role("Data Scientist", table) is None


def test_find_unordered_skills_reports_gaps():
    catalogs = Catalogs(
        required_skills={"Ops": ("Linux", "Docker", "Helm"), "Other": ("Go",)},
        learning_order={"Ops": ("linux", "Docker")},
    )
    assert find_unordered_skills(catalogs) == {"Ops": ["Helm"]}
