"""PWA scaffolder -- renders a React + TypeScript front-end source tree.

The emitter derives the page list from the selected feature flags, resolves
industry content for those pages, renders pages, stylesheets, navigation and
router from Jinja2 templates, checks that every referenced CSS class has a
rule, and writes the result.

Quick usage::

    from pwagen.config import GeneratorConfig
    from pwagen.scaffolder import ProjectEmitter

    config = GeneratorConfig(
        business_name="Acme Security",
        industry="cyber-security",
        features=["contact-form", "gallery"],
    )
    result = await ProjectEmitter(config).generate("/tmp/acme")
"""

from pwagen.scaffolder.emitter import DuplicateOutputPathError, ProjectEmitter
from pwagen.scaffolder.features import FEATURE_PAGES, FeatureFlag, derive_pages
from pwagen.scaffolder.models import (
    FileKind,
    GenerationResult,
    OutputFile,
    PageDescriptor,
)
from pwagen.scaffolder.navigation import NavigationModel, NavLink, build_navigation
from pwagen.scaffolder.stylesheet import StyleCoverageError, check_style_coverage
from pwagen.scaffolder.templates import TemplateRenderer

__all__ = [
    "DuplicateOutputPathError",
    "FEATURE_PAGES",
    "FeatureFlag",
    "FileKind",
    "GenerationResult",
    "NavLink",
    "NavigationModel",
    "OutputFile",
    "PageDescriptor",
    "ProjectEmitter",
    "StyleCoverageError",
    "TemplateRenderer",
    "build_navigation",
    "check_style_coverage",
    "derive_pages",
]
