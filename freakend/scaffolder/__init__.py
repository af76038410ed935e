"""Freakend scaffolder -- feature template trees and project skeletons.

Quick usage::

    from freakend.scaffolder import Scaffolder

    report = Scaffolder("templates/node-express/1.0.0").run()
    print(len(report.created), "placeholders written")
"""

from freakend.scaffolder.catalog import DEFAULT_CATALOG, DEFAULT_SUBDIRECTORIES, FeatureCatalog
from freakend.scaffolder.copier import copy_feature
from freakend.scaffolder.generator import (
    ScaffoldReport,
    ScaffoldTarget,
    Scaffolder,
    canonical_filename,
    iter_targets,
)
from freakend.scaffolder.init_gen import init_project
from freakend.scaffolder.templates import TemplateRenderer

__all__ = [
    "DEFAULT_CATALOG",
    "DEFAULT_SUBDIRECTORIES",
    "FeatureCatalog",
    "ScaffoldReport",
    "ScaffoldTarget",
    "Scaffolder",
    "TemplateRenderer",
    "canonical_filename",
    "copy_feature",
    "init_project",
    "iter_targets",
]
