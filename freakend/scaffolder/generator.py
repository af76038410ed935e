"""Feature template tree scaffolding.

Walks the feature catalog and guarantees that every
``base/<feature>/<subdirectory>/`` directory exists and holds its canonical
placeholder file.  Existing files are never overwritten, so the scaffolder
can be re-run safely at any time.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from freakend.errors import FilesystemError
from freakend.utils import print_info, print_success

from .catalog import DEFAULT_CATALOG, DEFAULT_SUBDIRECTORIES, FeatureCatalog
from .templates import TemplateRenderer

PLACEHOLDER_TEMPLATE = "placeholder.js.j2"


# ---------------------------------------------------------------------------
# Targets and reports
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScaffoldTarget:
    """One (feature, subdirectory) cell of the scaffold cross product."""

    category: str
    feature: str
    subdirectory: str
    directory: Path
    file_path: Path


@dataclass
class ScaffoldReport:
    """Outcome of a scaffold run."""

    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    directories: int = 0

    @property
    def total(self) -> int:
        return len(self.created) + len(self.skipped)


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------


def canonical_filename(feature: str, subdirectory: str, extension: str = ".js") -> str:
    """Derive the placeholder filename for a feature/subdirectory pair.

    Hyphens are stripped from the feature and only the first letter of the
    subdirectory is upper-cased::

        canonical_filename("password-reset", "controllers")
            -> "passwordresetControllers.js"
    """
    return f"{feature.replace('-', '')}{subdirectory[:1].upper()}{subdirectory[1:]}{extension}"


def iter_targets(
    catalog: FeatureCatalog,
    subdirectories: Sequence[str],
    base: Path,
    extension: str = ".js",
) -> Iterator[ScaffoldTarget]:
    """Yield every scaffold target in catalog declaration order."""
    for category, features in catalog.items():
        for feature in features:
            for sub in subdirectories:
                directory = base / feature / sub
                yield ScaffoldTarget(
                    category=category,
                    feature=feature,
                    subdirectory=sub,
                    directory=directory,
                    file_path=directory / canonical_filename(feature, sub, extension),
                )


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class Scaffolder:
    """Creates the placeholder feature template tree under *base*.

    Args:
        base: Output directory; created (with parents) if missing.
        catalog: Feature catalog to walk.  Defaults to ``DEFAULT_CATALOG``.
        subdirectories: Role directories applied to every feature.
        renderer: Template renderer for the placeholder body.
        extension: Source-file extension of the placeholders.
    """

    def __init__(
        self,
        base: str | Path,
        catalog: FeatureCatalog = DEFAULT_CATALOG,
        subdirectories: Sequence[str] = DEFAULT_SUBDIRECTORIES,
        renderer: TemplateRenderer | None = None,
        extension: str = ".js",
    ) -> None:
        self.base = Path(base)
        self.catalog = catalog
        self.subdirectories = tuple(subdirectories)
        self.renderer = renderer or TemplateRenderer()
        self.extension = extension

    def targets(self) -> list[ScaffoldTarget]:
        return list(iter_targets(self.catalog, self.subdirectories, self.base, self.extension))

    def placeholder_content(self, file_name: str) -> str:
        """Render the placeholder stub for *file_name*."""
        return self.renderer.render(PLACEHOLDER_TEMPLATE, {"file_name": file_name})

    def run(self) -> ScaffoldReport:
        """Ensure every target directory and placeholder file exists.

        Raises:
            FilesystemError: On the first failing mkdir or write.  Work done
                before the failure is kept.
        """
        report = ScaffoldReport()
        for target in iter_targets(
            self.catalog, self.subdirectories, self.base, self.extension
        ):
            try:
                target.directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise FilesystemError("create directory", target.directory, str(exc)) from exc
            report.directories += 1

            if target.file_path.exists():
                report.skipped.append(target.file_path)
                continue

            content = self.placeholder_content(target.file_path.name)
            try:
                # "x" mode: never clobber a file that appeared since the check
                with target.file_path.open("x", encoding="utf-8") as handle:
                    handle.write(content)
            except FileExistsError:
                report.skipped.append(target.file_path)
                continue
            except OSError as exc:
                raise FilesystemError("write", target.file_path, str(exc)) from exc

            report.created.append(target.file_path)
            print_info(f"Created: {target.file_path}")

        print_success(
            f"All folders and files created with boilerplate "
            f"({len(report.created)} created, {len(report.skipped)} already present)."
        )
        return report
