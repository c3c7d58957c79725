"""Tests for the class/rule coverage checker (pwagen.scaffolder.stylesheet).

Covers:
- className extraction (plain attributes, conditional expressions,
  template literals)
- stylesheet import extraction
- selector parsing (compound selectors, pseudo classes, media queries,
  comments)
- coverage gaps and StyleCoverageError
"""

from __future__ import annotations

import pytest

from pwagen.scaffolder.models import FileKind, OutputFile
from pwagen.scaffolder.stylesheet import (
    StyleCoverageError,
    check_style_coverage,
    coverage_gaps,
    extract_class_names,
    extract_defined_classes,
    extract_stylesheet_imports,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Markup extraction
# ---------------------------------------------------------------------------


class TestExtractClassNames:
    def test_double_quoted(self):
        assert extract_class_names('<div className="a b-c">') == {"a", "b-c"}

    def test_single_quoted(self):
        assert extract_class_names("<div className='solo'>") == {"solo"}

    def test_conditional_expression(self):
        markup = "<li className={open ? 'nav-links active' : 'nav-links'}>"
        assert extract_class_names(markup) == {"nav-links", "active"}

    def test_arrow_function_expression(self):
        markup = (
            "<NavLink className={({ isActive }) => "
            "(isActive ? 'nav-link active' : 'nav-link')}>"
        )
        assert extract_class_names(markup) == {"nav-link", "active"}

    def test_template_literal(self):
        markup = "<div className={`card ${big ? 'card-big' : ''}`}>"
        assert extract_class_names(markup) == {"card", "card-big"}

    def test_no_classes(self):
        assert extract_class_names("<div id=\"x\">text</div>") == set()

    def test_text_outside_class_name_ignored(self):
        markup = "<p>className is a word</p><div className=\"real\">"
        assert extract_class_names(markup) == {"real"}


class TestExtractImports:
    def test_relative_css_imports(self):
        markup = (
            "import React from 'react';\n"
            "import './pages.css';\n"
            "import \"../App.css\"\n"
            "import data from './data.json';\n"
        )
        assert extract_stylesheet_imports(markup) == ["./pages.css", "../App.css"]


# ---------------------------------------------------------------------------
# Stylesheet extraction
# ---------------------------------------------------------------------------


class TestExtractDefinedClasses:
    def test_simple_and_compound(self):
        css = ".a { } .b.c:hover, .d > .e::before { }"
        assert extract_defined_classes(css) == {"a", "b", "c", "d", "e"}

    def test_media_query_contents(self):
        css = "@media (max-width: 768px) {\n  .wrap { display: block; }\n}"
        assert extract_defined_classes(css) == {"wrap"}

    def test_comments_ignored(self):
        css = "/* .ghost { } */\n.real { color: red; }"
        assert extract_defined_classes(css) == {"real"}

    def test_declaration_values_ignored(self):
        css = ".box { width: 0.5rem; background: url(img.png); }"
        assert extract_defined_classes(css) == {"box"}

    def test_at_import_before_rule(self):
        css = "@import url('base.css');\n.after { color: blue; }"
        assert extract_defined_classes(css) == {"after"}


# ---------------------------------------------------------------------------
# Coverage
# ---------------------------------------------------------------------------


class TestCoverage:
    def test_complete_coverage(self, covered_files: list[OutputFile]):
        assert coverage_gaps(covered_files) == ({}, {})
        check_style_coverage(covered_files)

    def test_missing_class_reported(self, covered_files: list[OutputFile]):
        markup = covered_files[0]
        broken = markup.model_copy(
            update={"content": markup.content.replace('"card wide"', '"card wide orphan"')}
        )
        with pytest.raises(StyleCoverageError) as exc_info:
            check_style_coverage([broken, *covered_files[1:]])
        assert exc_info.value.missing == {"src/pages/Card.tsx": ["orphan"]}
        assert ".orphan" in str(exc_info.value)

    def test_rules_in_unimported_sheet_do_not_count(self):
        files = [
            OutputFile(
                path="src/pages/A.tsx",
                content="import './A.css';\n<div className=\"b-only\" />",
                kind=FileKind.MARKUP,
            ),
            OutputFile(path="src/pages/A.css", content=".a { }", kind=FileKind.STYLESHEET),
            OutputFile(path="src/pages/B.css", content=".b-only { }", kind=FileKind.STYLESHEET),
        ]
        missing, _ = coverage_gaps(files)
        assert missing == {"src/pages/A.tsx": ["b-only"]}

    def test_dangling_import_reported(self):
        files = [
            OutputFile(
                path="src/App.tsx",
                content="import './Missing.css';\n",
                kind=FileKind.MARKUP,
            ),
        ]
        with pytest.raises(StyleCoverageError) as exc_info:
            check_style_coverage(files)
        assert exc_info.value.missing_imports == {"src/App.tsx": ["src/Missing.css"]}

    def test_parent_relative_import(self):
        files = [
            OutputFile(
                path="src/components/Nav.tsx",
                content="import '../index.css';\n<nav className=\"top\" />",
                kind=FileKind.MARKUP,
            ),
            OutputFile(path="src/index.css", content=".top { }", kind=FileKind.STYLESHEET),
        ]
        assert coverage_gaps(files) == ({}, {})

    def test_config_files_ignored(self):
        files = [
            OutputFile(path="index.html", content='<div className="x">', kind=FileKind.CONFIG),
        ]
        check_style_coverage(files)
