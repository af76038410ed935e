"""Freakend CLI configuration.

Centralised, typed configuration for every command. All settings use
Pydantic v2 models so they can be validated at construction time and
read from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_FRAMEWORK = "node-express"
DEFAULT_TEMPLATE_VERSION = "1.0.0"
DEFAULT_SERVER_FILENAME = "freakend.server.js"
DEFAULT_SERVER_PORT = 5000


class Config(BaseModel):
    """Global Freakend configuration.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`, then overridden by command-line options) and passed to
    the scaffolder, injector and copier.
    """

    templates_dir: Path = Field(
        default=Path("./templates"),
        description="Root of the feature template trees",
    )
    framework: str = Field(default=DEFAULT_FRAMEWORK, min_length=1)
    template_version: str = Field(default=DEFAULT_TEMPLATE_VERSION, min_length=1)
    output_dir: Path = Field(
        default=Path("."),
        description="Directory that receives copied features and the server bootstrap file",
    )
    server_filename: str = Field(default=DEFAULT_SERVER_FILENAME, min_length=1)
    server_port: int = Field(default=DEFAULT_SERVER_PORT, ge=1, le=65535)
    file_extension: str = Field(default=".js", pattern=r"^\.[A-Za-z0-9]+$")
    install_timeout: int = Field(
        default=600, ge=10, description="npm install timeout in seconds"
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def template_root(self) -> Path:
        """``<templates_dir>/<framework>/<version>``, the scaffold base path."""
        return self.templates_dir / self.framework / self.template_version

    @property
    def server_path(self) -> Path:
        """Path to the server bootstrap document inside the output directory."""
        return self.output_dir / self.server_filename

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            FREAKEND_TEMPLATES_DIR, FREAKEND_FRAMEWORK,
            FREAKEND_TEMPLATE_VERSION, FREAKEND_OUTPUT_DIR,
            FREAKEND_SERVER_FILE, FREAKEND_SERVER_PORT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FREAKEND_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["FREAKEND_TEMPLATES_DIR"])
        if os.environ.get("FREAKEND_FRAMEWORK"):
            kwargs["framework"] = os.environ["FREAKEND_FRAMEWORK"]
        if os.environ.get("FREAKEND_TEMPLATE_VERSION"):
            kwargs["template_version"] = os.environ["FREAKEND_TEMPLATE_VERSION"]
        if os.environ.get("FREAKEND_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["FREAKEND_OUTPUT_DIR"])
        if os.environ.get("FREAKEND_SERVER_FILE"):
            kwargs["server_filename"] = os.environ["FREAKEND_SERVER_FILE"]
        if os.environ.get("FREAKEND_SERVER_PORT"):
            kwargs["server_port"] = int(os.environ["FREAKEND_SERVER_PORT"])
        return cls(**kwargs)
