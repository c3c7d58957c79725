"""Tests for page rendering (pwagen.scaffolder.pages).

Covers:
- Template and stylesheet selection per page (dedicated, shared, generic)
- Rendered page markup embeds resolved content and imports its sheets
- Every page template is covered by its stylesheets
"""

from __future__ import annotations

from typing import Any

import pytest

from pwagen.content import ALL_PAGE_NAMES, resolve_content
from pwagen.scaffolder.features import derive_pages
from pwagen.scaffolder.models import FileKind, PageDescriptor
from pwagen.scaffolder.navigation import build_navigation
from pwagen.scaffolder.pages import PageRenderer
from pwagen.scaffolder.stylesheet import coverage_gaps
from pwagen.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def page_renderer() -> PageRenderer:
    return PageRenderer(TemplateRenderer())


def _context(pages: list[PageDescriptor], business_name: str = "Acme") -> dict[str, Any]:
    names = [page.name for page in pages]
    return {
        "business_name": business_name,
        "industry": "default",
        "project": {"name": "acme", "slug": "acme", "description": "Acme."},
        "pages": pages,
        "page_names": names,
        "navigation": build_navigation(pages),
        "cta_path": "/contact" if "contact" in names else "/services",
    }


class TestSpecFor:
    def test_dedicated_page(self, page_renderer: PageRenderer):
        spec = page_renderer.spec_for(PageDescriptor.for_page("gallery"))
        assert spec.markup_template == "pages/gallery.tsx.j2"
        assert spec.markup_path == "src/pages/Gallery.tsx"
        assert spec.stylesheet_path == "src/pages/Gallery.css"
        assert spec.imports == ["./pages.css", "./Gallery.css"]

    def test_login_and_register_share_a_sheet(self, page_renderer: PageRenderer):
        login = page_renderer.spec_for(PageDescriptor.for_page("login"))
        register = page_renderer.spec_for(PageDescriptor.for_page("register"))
        assert login.stylesheet_path == register.stylesheet_path == "src/pages/Auth.css"

    def test_unknown_page_uses_generic_templates(self, page_renderer: PageRenderer):
        spec = page_renderer.spec_for(PageDescriptor.for_page("faq"))
        assert spec.markup_template == "pages/generic.tsx.j2"
        assert spec.stylesheet_template == "pages/generic.css.j2"
        assert spec.stylesheet_path == "src/pages/Faq.css"


class TestRenderPage:
    def test_home_embeds_content(self, page_renderer: PageRenderer):
        pages = list(derive_pages([]))
        bundle = resolve_content("cyber-security", "Acme Secure")
        out = page_renderer.render_page(pages[0], bundle, _context(pages, "Acme Secure"))
        assert out.kind == FileKind.MARKUP
        assert out.path == "src/pages/Home.tsx"
        assert "Acme Secure - Advanced Cybersecurity Solutions" in out.content
        assert "import './pages.css';" in out.content
        assert "import './Home.css';" in out.content
        assert "const Home: React.FC" in out.content
        assert 'to="/services"' in out.content

    def test_business_text_is_escaped(self, page_renderer: PageRenderer):
        pages = list(derive_pages([]))
        bundle = resolve_content("default", "Tom & {Jerry}")
        out = page_renderer.render_page(pages[0], bundle, _context(pages, "Tom & {Jerry}"))
        assert "Tom &amp; &#123;Jerry&#125;" in out.content
        assert "{Jerry}" not in out.content

    def test_login_links_to_register_only_when_present(self, page_renderer: PageRenderer):
        with_register = list(derive_pages(["auth"]))
        login = with_register[3]
        bundle = resolve_content("default", "Acme")
        out = page_renderer.render_page(login, bundle, _context(with_register))
        assert 'to="/register"' in out.content

        without_register = [*derive_pages([]), login]
        out = page_renderer.render_page(login, bundle, _context(without_register))
        assert "/register" not in out.content

    def test_generic_page(self, page_renderer: PageRenderer):
        pages = [*derive_pages([]), PageDescriptor.for_page("faq")]
        bundle = resolve_content("default", "Acme", pages=("home", "faq"))
        out = page_renderer.render_page(pages[-1], bundle, _context(pages))
        assert 'className="page-container faq-page"' in out.content
        assert "const Faq: React.FC" in out.content


class TestRenderStylesheets:
    def test_shared_sheet_first_and_deduplicated(self, page_renderer: PageRenderer):
        pages = list(derive_pages(["auth"]))
        sheets = page_renderer.render_stylesheets(pages, _context(pages))
        paths = [sheet.path for sheet in sheets]
        assert paths[0] == "src/pages/pages.css"
        assert paths.count("src/pages/Auth.css") == 1
        assert len(paths) == len(set(paths))
        assert all(sheet.kind == FileKind.STYLESHEET for sheet in sheets)

    def test_generic_sheet_defines_page_class(self, page_renderer: PageRenderer):
        pages = [PageDescriptor.for_page("faq")]
        sheets = page_renderer.render_stylesheets(pages, _context(pages))
        assert ".faq-page" in sheets[-1].content


class TestPageCoverage:
    @pytest.mark.parametrize("industry", ["default", "restaurant", "e-commerce"])
    def test_every_page_template_is_covered(self, page_renderer: PageRenderer, industry: str):
        pages = [PageDescriptor.for_page(name) for name in ALL_PAGE_NAMES]
        pages.append(PageDescriptor.for_page("faq"))
        bundle = resolve_content(industry, "Acme", pages=tuple(p.name for p in pages))
        context = _context(pages)
        files = [page_renderer.render_page(page, bundle, context) for page in pages]
        files.extend(page_renderer.render_stylesheets(pages, context))
        assert coverage_gaps(files) == ({}, {})
