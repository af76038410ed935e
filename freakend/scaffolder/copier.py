"""Copy a feature template tree into a user's project."""

from __future__ import annotations

import shutil
from pathlib import Path

from freakend.errors import FeatureNotFoundError, FilesystemError, UsageError
from freakend.utils import ensure_dir, print_info, print_success, print_warning


def copy_feature(
    template_root: str | Path,
    feature: str,
    output_dir: str | Path,
    framework: str = "node-express",
) -> list[Path]:
    """Copy ``template_root/<feature>/`` recursively into *output_dir*.

    Existing files in *output_dir* are overwritten with the template copy.
    Entries that are neither files nor directories (sockets, broken links)
    are skipped with a warning.

    Args:
        template_root: ``<templates>/<framework>/<version>`` directory.
        feature: Feature folder name (e.g. ``"login"``).
        output_dir: Destination project directory.
        framework: Framework name, used only in diagnostics.

    Returns:
        Destination paths of every copied file, in sorted order.

    Raises:
        UsageError: If *feature* is blank.
        FeatureNotFoundError: If the feature has no template tree.
        FilesystemError: If reading or writing fails.
    """
    if not feature or not feature.strip():
        raise UsageError("Please provide a feature name (e.g. 'login')")

    source = Path(template_root) / feature
    if not source.is_dir():
        raise FeatureNotFoundError(feature, framework)

    dest_root = Path(output_dir)
    print_info(f"Generating feature '{feature}' from '{framework}'...")

    copied: list[Path] = []
    for src in sorted(source.rglob("*")):
        dest = dest_root / src.relative_to(source)
        try:
            if src.is_dir():
                ensure_dir(dest)
            elif src.is_file():
                ensure_dir(dest.parent)
                shutil.copy2(src, dest)
                copied.append(dest)
                print_info(f"Copied: {dest}")
            else:
                print_warning(f"Unknown item (not file/folder): {src.name}. Skipping.")
        except OSError as exc:
            raise FilesystemError("copy", src, str(exc)) from exc

    print_success(f"Feature '{feature}' added successfully!")
    return copied
