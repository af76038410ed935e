"""Route injection into the generated server bootstrap file.

The bootstrap document (``freakend.server.js`` by default) carries a single
insertion marker.  Injecting a feature places a ``require`` binding and an
``app.use`` mount immediately before that marker and keeps the marker, so
the document can keep growing one feature at a time.

Content computation is kept pure (:func:`inject_fragment`,
:func:`find_injection`); :class:`Injector` only adds the read, the lazy
synthesis of a missing document and the single atomic write.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from freakend.errors import FilesystemError, MarkerNotFoundError, UsageError
from freakend.scaffolder.templates import TemplateRenderer, camel_case
from freakend.utils import atomic_write_text, ensure_dir, print_success, print_warning

INJECT_MARKER = "// -- CLI_INJECT_HERE --"
SERVER_TEMPLATE = "server.js.j2"

# camel-casing a name of this shape always yields a valid JS identifier
FEATURE_NAME_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*(?:-[A-Za-z0-9_$]+)*$")


class InjectionStatus(str, Enum):
    """Outcome of a single injection request."""

    INJECTED = "injected"
    ALREADY_PRESENT = "already_present"
    PARTIAL = "partial"


@dataclass(frozen=True)
class InjectionRecord:
    """The require/mount pair that wires one feature into the server."""

    feature: str
    module_ref: str
    mount_path: str
    binding: str

    @property
    def require_line(self) -> str:
        return f"const {self.binding} = require('{self.module_ref}');"

    @property
    def mount_line(self) -> str:
        return f"app.use('{self.mount_path}', {self.binding});"

    @property
    def lines(self) -> tuple[str, str]:
        return (self.require_line, self.mount_line)


@dataclass(frozen=True)
class InjectionResult:
    """What :meth:`Injector.inject` did."""

    feature: str
    status: InjectionStatus
    server_path: Path
    created: bool = False

    @property
    def written(self) -> bool:
        return self.status is InjectionStatus.INJECTED


# ---------------------------------------------------------------------------
# Pure document operations
# ---------------------------------------------------------------------------


def build_injection(feature: str | None) -> InjectionRecord:
    """Derive the module reference, mount path and binding for *feature*.

    Raises:
        UsageError: If *feature* is missing, blank, or cannot be turned into
            a JavaScript identifier.
    """
    if feature is None or not feature.strip():
        raise UsageError("Please provide a feature name (e.g. 'auth')")
    feature = feature.strip()
    if not FEATURE_NAME_RE.match(feature):
        raise UsageError(
            f"'{feature}' cannot be used as a JavaScript identifier: start with a "
            "letter, '_' or '$' and use only letters, digits, '_', '$' or single "
            "hyphens between words"
        )
    return InjectionRecord(
        feature=feature,
        module_ref=f"./{feature}/{feature}.route",
        mount_path=f"/api/{feature}",
        binding=f"{camel_case(feature)}Routes",
    )


def split_document(document: str, marker: str = INJECT_MARKER) -> tuple[str, str]:
    """Split *document* into the text before the first marker and the rest.

    The second segment starts with the marker itself.

    Raises:
        MarkerNotFoundError: If the marker is absent.
    """
    index = document.find(marker)
    if index == -1:
        raise MarkerNotFoundError(None, marker)
    return document[:index], document[index:]


def inject_fragment(
    document: str, record: InjectionRecord, marker: str = INJECT_MARKER
) -> str:
    """Return *document* with *record*'s lines inserted before the marker.

    The inserted lines reuse the marker line's indentation.  If the marker
    shares its line with other code, the fragment starts on a new line.
    """
    before, after = split_document(document, marker)
    indent = before[before.rfind("\n") + 1:]
    if indent.strip():
        before += "\n"
        indent = ""
    fragment = "".join(f"{line}\n{indent}" for line in record.lines)
    return before + fragment + after


def find_injection(document: str, record: InjectionRecord) -> InjectionStatus | None:
    """Report whether *record* is already wired into *document*.

    Detection keys on the module reference, which is unique per feature.
    Returns ``None`` when the feature is absent, ``ALREADY_PRESENT`` when
    the mount statement is also there, and ``PARTIAL`` when only the
    require half survives (e.g. after a manual edit).
    """
    if record.module_ref not in document:
        return None
    mount = re.compile(r"app\.use\(\s*['\"`]" + re.escape(record.mount_path) + r"['\"`]")
    if mount.search(document):
        return InjectionStatus.ALREADY_PRESENT
    return InjectionStatus.PARTIAL


# ---------------------------------------------------------------------------
# Injector
# ---------------------------------------------------------------------------


class Injector:
    """Idempotently mounts feature routers into the server bootstrap file.

    Args:
        server_path: Location of the bootstrap document.
        renderer: Renders the canonical document when it does not exist yet.
        port: Port used by ``app.listen`` in a freshly synthesised document.
        marker: Insertion marker comment.
    """

    def __init__(
        self,
        server_path: str | Path,
        renderer: TemplateRenderer | None = None,
        port: int = 5000,
        marker: str = INJECT_MARKER,
    ) -> None:
        self.server_path = Path(server_path)
        self.renderer = renderer or TemplateRenderer()
        self.port = port
        self.marker = marker

    def canonical_document(self) -> str:
        """Render the bootstrap document with no features mounted."""
        return self.renderer.render(
            SERVER_TEMPLATE, {"marker": self.marker, "port": self.port}
        )

    def load(self) -> tuple[str, bool]:
        """Return the current document text and whether it was synthesised."""
        if not self.server_path.exists():
            return self.canonical_document(), True
        try:
            return self.server_path.read_text(encoding="utf-8"), False
        except (OSError, UnicodeDecodeError) as exc:
            raise FilesystemError("read", self.server_path, str(exc)) from exc

    def inject(self, feature: str | None) -> InjectionResult:
        """Wire *feature* into the bootstrap document.

        At most one write happens per call; the new content is computed in
        full before it replaces the file.

        Raises:
            UsageError: If *feature* is missing.
            MarkerNotFoundError: If the existing document has no marker.
            FilesystemError: If reading or writing the document fails.
        """
        record = build_injection(feature)
        document, created = self.load()

        existing = find_injection(document, record)
        if existing is InjectionStatus.ALREADY_PRESENT:
            print_warning(f"{record.feature} already injected")
            return InjectionResult(record.feature, existing, self.server_path)
        if existing is InjectionStatus.PARTIAL:
            print_warning(
                f"{record.feature} is partially injected: '{record.module_ref}' is "
                f"required but '{record.mount_path}' is not mounted. Leaving "
                f"{self.server_path.name} unchanged."
            )
            return InjectionResult(record.feature, existing, self.server_path)

        try:
            updated = inject_fragment(document, record, self.marker)
        except MarkerNotFoundError:
            raise MarkerNotFoundError(self.server_path, self.marker) from None

        try:
            ensure_dir(self.server_path.parent)
            atomic_write_text(self.server_path, updated)
        except OSError as exc:
            raise FilesystemError("write", self.server_path, str(exc)) from exc

        print_success(f"Injected {record.feature} into {self.server_path.name}")
        return InjectionResult(
            record.feature, InjectionStatus.INJECTED, self.server_path, created=created
        )
