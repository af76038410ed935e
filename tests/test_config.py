"""Unit tests for Config (freakend.config).

Tests cover:
- Config defaults and validation
- Derived paths (properties)
- from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from freakend.config import Config


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.templates_dir == Path("./templates")
        assert config.framework == "node-express"
        assert config.template_version == "1.0.0"
        assert config.server_filename == "freakend.server.js"
        assert config.server_port == 5000
        assert config.file_extension == ".js"

    @pytest.mark.unit
    def test_port_range(self):
        with pytest.raises(ValidationError):
            Config(server_port=0)
        with pytest.raises(ValidationError):
            Config(server_port=70000)

    @pytest.mark.unit
    def test_extension_must_start_with_dot(self):
        with pytest.raises(ValidationError):
            Config(file_extension="js")

    @pytest.mark.unit
    def test_empty_framework_rejected(self):
        with pytest.raises(ValidationError):
            Config(framework="")


class TestConfigPaths:
    @pytest.mark.unit
    def test_template_root(self, tmp_path: Path):
        config = Config(templates_dir=tmp_path, framework="node-express", template_version="2.0.0")
        assert config.template_root == tmp_path / "node-express" / "2.0.0"

    @pytest.mark.unit
    def test_server_path(self, tmp_path: Path):
        config = Config(output_dir=tmp_path, server_filename="app.js")
        assert config.server_path == tmp_path / "app.js"


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_from_env_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            assert Config.from_env() == Config()

    @pytest.mark.unit
    def test_from_env_overrides(self, tmp_path: Path):
        env = {
            "FREAKEND_TEMPLATES_DIR": str(tmp_path),
            "FREAKEND_FRAMEWORK": "node-express",
            "FREAKEND_TEMPLATE_VERSION": "1.1.0",
            "FREAKEND_OUTPUT_DIR": str(tmp_path / "out"),
            "FREAKEND_SERVER_FILE": "server.js",
            "FREAKEND_SERVER_PORT": "8080",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.templates_dir == tmp_path
        assert config.template_version == "1.1.0"
        assert config.server_path == tmp_path / "out" / "server.js"
        assert config.server_port == 8080

    @pytest.mark.unit
    def test_from_env_invalid_port(self):
        with patch.dict(os.environ, {"FREAKEND_SERVER_PORT": "abc"}, clear=True):
            with pytest.raises(ValueError):
                Config.from_env()
