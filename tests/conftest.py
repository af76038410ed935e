"""Shared pytest fixtures for the Freakend test suite.

Provides reusable fixtures for:
- Temporary project directories
- A small feature catalog and a scaffolded template tree
- Sandboxed copies of a template tree (safe to mutate)
- A template renderer bound to the packaged templates
"""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from freakend.scaffolder import FeatureCatalog, Scaffolder, TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary directory standing in for a user's project (auto-cleanup)."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    yield project_dir


# ---------------------------------------------------------------------------
# Catalog & templates
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the packaged ``.j2`` templates."""
    return TemplateRenderer()


@pytest.fixture
def small_catalog() -> FeatureCatalog:
    """Two categories, four features, one hyphenated."""
    return FeatureCatalog(
        categories={
            "auth": ("login", "password-reset"),
            "media": ("upload", "s3-upload"),
        }
    )


@pytest.fixture
def scaffolded_templates(tmp_path: Path, small_catalog: FeatureCatalog) -> Path:
    """A ``templates/`` root whose node-express/1.0.0 tree has been scaffolded.

    Returns the ``templates`` directory (the value of ``--templates-dir``).
    """
    templates_dir = tmp_path / "templates"
    Scaffolder(templates_dir / "node-express" / "1.0.0", catalog=small_catalog).run()
    return templates_dir


@pytest.fixture
def sandboxed_templates(tmp_path: Path, scaffolded_templates: Path) -> Path:
    """A disposable copy of the scaffolded node-express/1.0.0 tree.

    Tests may freely modify the sandbox without affecting the original
    fixture tree.
    """
    original = scaffolded_templates / "node-express" / "1.0.0"
    sandbox = tmp_path / "__test-temp__" / "1.0.0-sandbox"
    shutil.copytree(original, sandbox)
    yield sandbox
