from __future__ import annotations

import re
from datetime import date
from pathlib import Path

import pytest

from ccinit.config import ProjectConfig
from ccinit.errors import DirectoryCreationError, FileWriteError
from ccinit.scaffold import ProjectInitializer, build_manifest
from ccinit.template import TemplateRenderer

BASE_FILES = [
    "CLAUDE.md",
    ".claude/README.md",
    ".gitignore",
    "Makefile",
    ".pre-commit-config.yaml",
    ".github/workflows/ci.yml",
]

GITHUB_FILES = [
    ".github/ISSUE_TEMPLATE/bug_report.md",
    ".github/ISSUE_TEMPLATE/feature_request.md",
    ".github/pull_request_template.md",
    "CONTRIBUTING.md",
    "LICENSE",
]

TODAY = date(2025, 6, 1)


def _files(directory: Path) -> list[str]:
    return sorted(p.relative_to(directory).as_posix() for p in directory.rglob("*") if p.is_file())


@pytest.fixture()
def initializer() -> ProjectInitializer:
    return ProjectInitializer(TemplateRenderer(), clock=lambda: TODAY)


def test_base_scaffold_in_empty_directory(tmp_path: Path, initializer: ProjectInitializer):
    config = ProjectConfig(name="demo")
    result = initializer.initialize(config, tmp_path)

    assert _files(tmp_path) == sorted(BASE_FILES)
    assert [p.relative_to(tmp_path).as_posix() for p in result.files] == BASE_FILES
    assert not (tmp_path / ".github" / "ISSUE_TEMPLATE").exists()


def test_github_integration_adds_templates(tmp_path: Path, initializer: ProjectInitializer):
    config = ProjectConfig(name="demo", github_username="octocat")
    result = initializer.initialize(config, tmp_path)

    assert _files(tmp_path) == sorted(BASE_FILES + GITHUB_FILES)
    assert result.directories[-1] == tmp_path / ".github" / "ISSUE_TEMPLATE"
    for relative in ("LICENSE", "CONTRIBUTING.md", *GITHUB_FILES[:2]):
        text = (tmp_path / relative).read_text(encoding="utf-8")
        assert "octocat" in text, relative
        assert "{{" not in text, relative


def test_contributing_links_repository(tmp_path: Path, initializer: ProjectInitializer):
    initializer.initialize(ProjectConfig(name="demo", github_username="octocat"), tmp_path)
    contributing = (tmp_path / "CONTRIBUTING.md").read_text(encoding="utf-8")
    assert contributing.startswith("# Contributing to demo\n")
    assert "https://github.com/octocat/demo/issues" in contributing
    assert "git@github.com:octocat/demo.git" in contributing


def test_license_uses_current_year(tmp_path: Path, initializer: ProjectInitializer):
    initializer.initialize(ProjectConfig(name="demo", github_username="octocat"), tmp_path)
    license_text = (tmp_path / "LICENSE").read_text(encoding="utf-8")
    assert "Copyright (c) 2025 octocat" in license_text


def test_claude_md_contains_name_description_and_date(tmp_path: Path):
    config = ProjectConfig(name="demo", description="Billing API for the shop")
    ProjectInitializer().initialize(config, tmp_path)

    text = (tmp_path / "CLAUDE.md").read_text(encoding="utf-8")
    assert text.startswith("# demo\n\nBilling API for the shop\n")
    assert re.search(r"Generated by ccinit on \d{4}-\d{2}-\d{2}\*", text)


def test_makefile_recipes_use_tabs(tmp_path: Path, initializer: ProjectInitializer):
    initializer.initialize(ProjectConfig(name="demo"), tmp_path)
    makefile = (tmp_path / "Makefile").read_text(encoding="utf-8")
    assert makefile.startswith("# Makefile for demo\n")
    assert "\ntest:\n\t@echo \"Running tests...\"\n" in makefile
    assert "-exec rm -rf {} +" in makefile


def test_overwrite_is_byte_identical(tmp_path: Path, initializer: ProjectInitializer):
    config = ProjectConfig(name="demo", github_username="octocat", overwrite=True)
    initializer.initialize(config, tmp_path)
    first = {name: (tmp_path / name).read_bytes() for name in _files(tmp_path)}

    initializer.initialize(config, tmp_path)
    second = {name: (tmp_path / name).read_bytes() for name in _files(tmp_path)}

    assert first == second


def test_initializer_clobbers_existing_files(tmp_path: Path, initializer: ProjectInitializer):
    (tmp_path / "CLAUDE.md").write_text("hand written notes", encoding="utf-8")
    initializer.initialize(ProjectConfig(name="demo"), tmp_path)
    assert (tmp_path / "CLAUDE.md").read_text(encoding="utf-8").startswith("# demo")


def test_plan_has_no_side_effects(workspace: Path, initializer: ProjectInitializer):
    plan = initializer.plan(ProjectConfig(name="demo", github_username="octocat"))

    assert plan.directories == (".claude", ".github", ".github/workflows", ".github/ISSUE_TEMPLATE")
    assert [entry.path for entry in plan.manifest] == BASE_FILES + GITHUB_FILES
    assert list(workspace.iterdir()) == []


def test_build_manifest_renders_every_placeholder():
    manifest = build_manifest(ProjectConfig(name="demo", github_username="octocat"), TemplateRenderer(), TODAY)
    for entry in manifest:
        assert "{{" not in entry.content, entry.path


def test_write_failure_keeps_earlier_files(tmp_path: Path, initializer: ProjectInitializer):
    (tmp_path / "Makefile").mkdir()

    with pytest.raises(FileWriteError):
        initializer.initialize(ProjectConfig(name="demo"), tmp_path)

    assert (tmp_path / "CLAUDE.md").exists()
    assert (tmp_path / ".gitignore").exists()
    assert not (tmp_path / ".pre-commit-config.yaml").exists()


def test_directory_failure_aborts_before_writing(tmp_path: Path, initializer: ProjectInitializer):
    (tmp_path / ".github").write_text("", encoding="utf-8")

    with pytest.raises(DirectoryCreationError):
        initializer.initialize(ProjectConfig(name="demo"), tmp_path)

    assert not (tmp_path / "CLAUDE.md").exists()
