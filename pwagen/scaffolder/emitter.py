"""Project emitter: turns a ``GeneratorConfig`` into a React/TypeScript tree.

A run has two phases.  :meth:`ProjectEmitter.plan` is pure: it derives the
page list, resolves industry content and renders every output file in
memory.  :meth:`ProjectEmitter.generate` runs the style coverage check over
that plan and only then writes the files (concurrently, since every path is
unique) under the output directory.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Optional

from rich.markup import escape

from pwagen.config import GeneratorConfig
from pwagen.content.models import ContentBundle
from pwagen.content.resolver import ContentResolver
from pwagen.utils import (
    ensure_dir,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    write_file,
)

from .features import derive_pages, ignored_features
from .models import FileKind, GenerationResult, OutputFile, PageDescriptor
from .navigation import NavigationModel, build_navigation
from .pages import PageRenderer
from .stylesheet import check_style_coverage
from .templates import TemplateRenderer


class DuplicateOutputPathError(ValueError):
    """Raised when two planned files share a relative path."""

    def __init__(self, paths: list[str]) -> None:
        self.paths = paths
        super().__init__(f"Duplicate output paths in plan: {', '.join(paths)}")


# Project shell: (template, output path, kind).  Page, navigation and router
# files are added per run.
SHELL_FILES: tuple[tuple[str, str, FileKind], ...] = (
    ("project/package.json.j2", "package.json", FileKind.CONFIG),
    ("project/index.html.j2", "index.html", FileKind.CONFIG),
    ("project/tsconfig.json.j2", "tsconfig.json", FileKind.CONFIG),
    ("project/vite.config.ts.j2", "vite.config.ts", FileKind.CONFIG),
    ("project/manifest.json.j2", "public/manifest.json", FileKind.CONFIG),
    ("project/sw.js.j2", "public/sw.js", FileKind.CONFIG),
    ("project/main.tsx.j2", "src/main.tsx", FileKind.MARKUP),
    ("project/index.css.j2", "src/index.css", FileKind.STYLESHEET),
)


# ---------------------------------------------------------------------------
# Emitter
# ---------------------------------------------------------------------------


class ProjectEmitter:
    """Generates a complete front-end source tree from a configuration.

    Args:
        config: The run configuration.
        resolver: Content resolver; defaults to the built-in industry table.
        renderer: Template renderer; defaults to the packaged templates.
        quiet: Suppress all console output.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        resolver: Optional[ContentResolver] = None,
        renderer: Optional[TemplateRenderer] = None,
        quiet: bool = False,
    ) -> None:
        self.config = config
        self.resolver = resolver or ContentResolver()
        self.renderer = renderer or TemplateRenderer()
        self.page_renderer = PageRenderer(self.renderer)
        self.quiet = quiet

        self.pages: tuple[PageDescriptor, ...] = derive_pages(config.features)
        self.navigation: NavigationModel = build_navigation(self.pages)
        self.bundle: ContentBundle = self.resolver.resolve(
            config.industry,
            config.business_name,
            config.description,
            pages=tuple(page.name for page in self.pages),
        )

    # -- Public API --------------------------------------------------------

    def plan(self) -> list[OutputFile]:
        """Render every output file in memory.

        Returns:
            Files in emission order: shell, pages, stylesheets, navigation,
            router.

        Raises:
            DuplicateOutputPathError: If two files map to the same path.
        """
        context = self._build_context()
        files: list[OutputFile] = [
            OutputFile(
                path=path,
                content=self.renderer.render(template, context),
                kind=kind,
            )
            for template, path, kind in SHELL_FILES
        ]

        files.extend(
            self.page_renderer.render_page(page, self.bundle, context)
            for page in self.pages
        )
        files.extend(self.page_renderer.render_stylesheets(self.pages, context))

        files.append(self._render(
            "components/navigation.tsx.j2", "src/components/Navigation.tsx",
            FileKind.MARKUP, context,
        ))
        files.append(self._render(
            "components/navigation.css.j2", "src/components/Navigation.css",
            FileKind.STYLESHEET, context,
        ))
        files.append(self._render(
            "project/app.tsx.j2", "src/App.tsx", FileKind.MARKUP, context,
        ))
        files.append(self._render(
            "project/app.css.j2", "src/App.css", FileKind.STYLESHEET, context,
        ))

        _check_unique_paths(files)
        return files

    async def generate(self, output_dir: str | Path | None = None) -> GenerationResult:
        """Plan, verify and write the project.

        Args:
            output_dir: Target directory; defaults to ``config.output_dir``.
                Files are written directly inside it and existing files at
                the same paths are overwritten.

        Returns:
            A ``GenerationResult`` describing the run.

        Raises:
            StyleCoverageError: If a markup file references a class with no
                rule in its imported stylesheets.  Nothing is written.
            OSError: On any file-system failure.
        """
        files = self.plan()
        if self.config.verify_styles:
            check_style_coverage(files)

        self._report_config_gaps()

        target = output_dir if output_dir is not None else self.config.output_dir
        try:
            root = await asyncio.to_thread(ensure_dir, target)
            await asyncio.gather(*[
                asyncio.to_thread(write_file, root / f.path, f.content)
                for f in files
            ])
        except OSError as exc:
            if not self.quiet:
                print_error(f"Failed to write project: {escape(str(exc))}")
            raise

        result = GenerationResult(
            root=root,
            pages=list(self.pages),
            files=files,
            ignored_features=ignored_features(self.config.features),
            industry_matched=self.bundle.matched,
        )
        self._report_result(result)
        return result

    def generate_sync(self, output_dir: str | Path | None = None) -> GenerationResult:
        """Blocking wrapper around :meth:`generate`."""
        return asyncio.run(self.generate(output_dir))

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context shared by every file."""
        page_names = [page.name for page in self.pages]
        description = (
            self.config.description.strip() or self.bundle.page("about").body
        )
        return {
            "business_name": self.bundle.business_name,
            "industry": self.bundle.industry,
            "project": {
                "name": self.config.project_name,
                "slug": self.config.project_slug,
                "description": description,
            },
            "pages": list(self.pages),
            "page_names": page_names,
            "navigation": self.navigation,
            "cta_path": "/contact" if "contact" in page_names else "/services",
        }

    def _render(
        self, template: str, path: str, kind: FileKind, context: dict[str, Any]
    ) -> OutputFile:
        return OutputFile(
            path=path, content=self.renderer.render(template, context), kind=kind
        )

    # -- Reporting ---------------------------------------------------------

    def _report_config_gaps(self) -> None:
        if self.quiet:
            return
        for tag in ignored_features(self.config.features):
            print_warning(f"Ignoring unknown feature '{escape(tag)}'")
        if not self.bundle.matched:
            print_warning(
                f"Unknown industry '{escape(self.config.industry)}', "
                "using default content"
            )

    def _report_result(self, result: GenerationResult) -> None:
        if self.quiet:
            return
        print_success(f"Generated {len(result.files)} files in {escape(str(result.root))}")
        print_summary_table(
            {
                "Project": self.config.project_slug,
                "Business": escape(self.bundle.business_name),
                "Industry": self.bundle.industry,
                "Pages": ", ".join(page.name for page in result.pages),
                "Markup files": str(len(result.files_of_kind(FileKind.MARKUP))),
                "Stylesheets": str(len(result.files_of_kind(FileKind.STYLESHEET))),
                "Config files": str(len(result.files_of_kind(FileKind.CONFIG))),
            },
            title="PWA Generation",
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _check_unique_paths(files: list[OutputFile]) -> None:
    seen: set[str] = set()
    duplicates: list[str] = []
    for f in files:
        if f.path in seen:
            duplicates.append(f.path)
        seen.add(f.path)
    if duplicates:
        raise DuplicateOutputPathError(sorted(set(duplicates)))
