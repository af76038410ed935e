"""Project initialisation for supported backend frameworks.

Writes the minimal node-express skeleton (server, database config, a login
route/controller pair and a user model) and optionally installs the npm
dependencies it needs.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from freakend.errors import CommandError, FilesystemError, UsageError
from freakend.utils import ensure_dir, print_info, print_success, print_warning, run_command

from .templates import TemplateRenderer

SUPPORTED_FRAMEWORKS: dict[str, str] = {
    "node-express": "node-express",
    "em": "node-express",
}

INIT_DIRECTORIES: tuple[str, ...] = ("config", "routes", "controllers", "models")

# (template, output) pairs relative to the init template prefix / target dir
INIT_FILES: tuple[tuple[str, str], ...] = (
    ("server.js.j2", "server.js"),
    ("env.j2", ".env"),
    ("config/db.js.j2", "config/db.js"),
    ("routes/login.js.j2", "routes/login.js"),
    ("controllers/loginController.js.j2", "controllers/loginController.js"),
    ("models/userModel.js.j2", "models/userModel.js"),
)

NPM_INSTALL_COMMAND = "npm init -y && npm install express mongoose dotenv"


def resolve_framework(framework: str | None) -> str:
    """Map a framework name or alias to its canonical name.

    Raises:
        UsageError: If the framework is missing or unsupported.
    """
    if not framework:
        raise UsageError("Please specify a framework using -f or --framework")
    try:
        return SUPPORTED_FRAMEWORKS[framework]
    except KeyError:
        raise UsageError(
            f"Unsupported framework '{framework}'. Only 'node-express' is supported for now."
        ) from None


def init_project(
    target_dir: str | Path,
    framework: str | None,
    renderer: TemplateRenderer | None = None,
    *,
    install: bool = False,
    port: int = 5000,
    install_timeout: int = 600,
) -> list[Path]:
    """Write the backend skeleton for *framework* into *target_dir*.

    Files that already exist are left untouched.

    Returns:
        The paths that were written.

    Raises:
        UsageError: Unsupported or missing framework.
        FilesystemError: A directory or file could not be created.
        CommandError: ``install`` was requested and npm failed.
    """
    canonical = resolve_framework(framework)
    renderer = renderer or TemplateRenderer()
    root = Path(target_dir)
    context = {"port": port, "framework": canonical}

    print_info(f"Generating {canonical} backend structure...")
    written: list[Path] = []
    try:
        for directory in INIT_DIRECTORIES:
            ensure_dir(root / directory)
        for template_name, output_name in INIT_FILES:
            out = root / output_name
            path = renderer.render_to_file(
                f"init/{canonical}/{template_name}", out, context
            )
            if path is None:
                print_warning(f"Skipped existing file: {out}")
            else:
                written.append(path)
                print_info(f"Created: {path}")
    except OSError as exc:
        raise FilesystemError("initialise project in", root, str(exc)) from exc

    if install:
        print_info("Installing dependencies...")
        returncode, _stdout, stderr = asyncio.run(
            run_command(NPM_INSTALL_COMMAND, cwd=root, timeout=install_timeout)
        )
        if returncode != 0:
            raise CommandError(NPM_INSTALL_COMMAND, returncode, stderr)

    print_success("Project ready. Run with: node server.js")
    return written
