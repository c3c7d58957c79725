"""Page markup and stylesheet rendering.

Each derived page renders to ``src/pages/<Component>.tsx`` from
``pages/<page>.tsx.j2`` (or ``pages/generic.tsx.j2`` when no dedicated
template exists).  Every page imports the shared ``pages.css`` layout sheet
plus its own sheet; pages with the same simple layout share one sheet
(``login`` and ``register`` both use ``Auth.css``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from pwagen.content.models import ContentBundle

from .models import FileKind, OutputFile, PageDescriptor
from .templates import TemplateRenderer

PAGES_DIR = "src/pages"
SHARED_STYLESHEET = "pages.css"

# Pages that share a stylesheet instead of getting ``<Component>.css``.
# Value is (stylesheet file name, stylesheet template).
SHARED_PAGE_STYLESHEETS: dict[str, tuple[str, str]] = {
    "login": ("Auth.css", "pages/auth.css.j2"),
    "register": ("Auth.css", "pages/auth.css.j2"),
}


@dataclass(frozen=True)
class PageSpec:
    """Where a page's markup and stylesheet come from and go to."""

    page: PageDescriptor
    markup_template: str
    stylesheet_name: str
    stylesheet_template: str

    @property
    def markup_path(self) -> str:
        return f"{PAGES_DIR}/{self.page.component}.tsx"

    @property
    def stylesheet_path(self) -> str:
        return f"{PAGES_DIR}/{self.stylesheet_name}"

    @property
    def imports(self) -> list[str]:
        """Relative stylesheet imports, shared layout first."""
        return [f"./{SHARED_STYLESHEET}", f"./{self.stylesheet_name}"]


class PageRenderer:
    """Renders page components and their stylesheets."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def spec_for(self, page: PageDescriptor) -> PageSpec:
        """Resolve the templates and output names used for *page*."""
        markup_template = f"pages/{page.name}.tsx.j2"
        if not self.renderer.has_template(markup_template):
            markup_template = "pages/generic.tsx.j2"

        if page.name in SHARED_PAGE_STYLESHEETS:
            sheet_name, sheet_template = SHARED_PAGE_STYLESHEETS[page.name]
        else:
            sheet_name = f"{page.component}.css"
            sheet_template = f"pages/{page.name}.css.j2"
            if not self.renderer.has_template(sheet_template):
                sheet_template = "pages/generic.css.j2"

        return PageSpec(
            page=page,
            markup_template=markup_template,
            stylesheet_name=sheet_name,
            stylesheet_template=sheet_template,
        )

    def render_page(
        self,
        page: PageDescriptor,
        bundle: ContentBundle,
        context: dict[str, Any],
    ) -> OutputFile:
        """Render the markup file for one page."""
        spec = self.spec_for(page)
        page_ctx = {
            **context,
            "page": page,
            "content": bundle.page(page.name),
            "stylesheets": spec.imports,
        }
        return OutputFile(
            path=spec.markup_path,
            content=self.renderer.render(spec.markup_template, page_ctx),
            kind=FileKind.MARKUP,
        )

    def render_stylesheets(
        self,
        pages: Iterable[PageDescriptor],
        context: dict[str, Any],
    ) -> list[OutputFile]:
        """Render the shared layout sheet and one sheet per distinct page sheet."""
        sheets: list[OutputFile] = [
            OutputFile(
                path=f"{PAGES_DIR}/{SHARED_STYLESHEET}",
                content=self.renderer.render("pages/pages.css.j2", context),
                kind=FileKind.STYLESHEET,
            )
        ]
        seen = {sheets[0].path}
        for page in pages:
            spec = self.spec_for(page)
            if spec.stylesheet_path in seen:
                continue
            seen.add(spec.stylesheet_path)
            sheets.append(
                OutputFile(
                    path=spec.stylesheet_path,
                    content=self.renderer.render(
                        spec.stylesheet_template, {**context, "page": page}
                    ),
                    kind=FileKind.STYLESHEET,
                )
            )
        return sheets
