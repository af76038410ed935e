"""Tests for copying feature template trees into a project."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from freakend.errors import FeatureNotFoundError, FilesystemError, UsageError
from freakend.scaffolder.copier import copy_feature

pytestmark = pytest.mark.unit


class TestCopyFeature:
    def test_copies_every_file(self, sandboxed_templates: Path, tmp_project_dir: Path):
        copied = copy_feature(sandboxed_templates, "login", tmp_project_dir)
        names = sorted(p.relative_to(tmp_project_dir).as_posix() for p in copied)
        assert names == [
            "controllers/loginControllers.js",
            "middleware/loginMiddleware.js",
            "models/loginModels.js",
            "routes/loginRoutes.js",
            "utils/loginUtils.js",
        ]

    def test_content_matches_template(self, sandboxed_templates: Path, tmp_project_dir: Path):
        source = sandboxed_templates / "upload" / "routes" / "uploadRoutes.js"
        source.write_text("module.exports = require('express').Router();\n", encoding="utf-8")
        copy_feature(sandboxed_templates, "upload", tmp_project_dir)
        assert (tmp_project_dir / "routes" / "uploadRoutes.js").read_text(
            encoding="utf-8"
        ) == "module.exports = require('express').Router();\n"

    def test_nested_directories(self, sandboxed_templates: Path, tmp_project_dir: Path):
        nested = sandboxed_templates / "login" / "config" / "env"
        nested.mkdir(parents=True)
        (nested / "jwt.config.js").write_text("module.exports = {};\n", encoding="utf-8")
        (sandboxed_templates / "login" / "empty").mkdir()

        copy_feature(sandboxed_templates, "login", tmp_project_dir)
        assert (tmp_project_dir / "config" / "env" / "jwt.config.js").is_file()
        assert (tmp_project_dir / "empty").is_dir()

    def test_overwrites_existing_files(self, sandboxed_templates: Path, tmp_project_dir: Path):
        target = tmp_project_dir / "routes" / "loginRoutes.js"
        target.parent.mkdir(parents=True)
        target.write_text("old", encoding="utf-8")
        copy_feature(sandboxed_templates, "login", tmp_project_dir)
        assert target.read_text(encoding="utf-8").startswith("// loginRoutes.js")

    def test_sandbox_isolated_from_original(
        self, scaffolded_templates: Path, sandboxed_templates: Path
    ):
        (sandboxed_templates / "login" / "routes" / "loginRoutes.js").write_text("x", encoding="utf-8")
        original = scaffolded_templates / "node-express" / "1.0.0" / "login" / "routes" / "loginRoutes.js"
        assert original.read_text(encoding="utf-8") != "x"

    def test_unknown_feature(self, sandboxed_templates: Path, tmp_project_dir: Path):
        with pytest.raises(FeatureNotFoundError) as exc_info:
            copy_feature(sandboxed_templates, "teleport", tmp_project_dir, framework="node-express")
        assert exc_info.value.exit_code == 1
        assert "teleport" in str(exc_info.value)
        assert list(tmp_project_dir.iterdir()) == []

    def test_blank_feature(self, sandboxed_templates: Path, tmp_project_dir: Path):
        with pytest.raises(UsageError):
            copy_feature(sandboxed_templates, " ", tmp_project_dir)

    def test_copy_failure_surfaces(self, sandboxed_templates: Path, tmp_project_dir: Path):
        with patch("freakend.scaffolder.copier.shutil.copy2", side_effect=OSError("disk full")):
            with pytest.raises(FilesystemError) as exc_info:
                copy_feature(sandboxed_templates, "login", tmp_project_dir)
        assert exc_info.value.operation == "copy"

    def test_reports_each_copied_file(self, sandboxed_templates: Path, tmp_project_dir: Path):
        with patch("freakend.scaffolder.copier.print_info") as info, patch(
            "freakend.scaffolder.copier.print_success"
        ) as success:
            copy_feature(sandboxed_templates, "login", tmp_project_dir)
        copied_lines = [c.args[0] for c in info.call_args_list if c.args[0].startswith("Copied: ")]
        assert len(copied_lines) == 5
        success.assert_called_once_with("Feature 'login' added successfully!")
