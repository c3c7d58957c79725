"""Class/rule coverage checking for generated markup.

Every CSS class a generated component references must have a rule in one of
the stylesheets that component imports.  The emitter runs
:func:`check_style_coverage` over the planned files before anything is
written, so a template edit that introduces an unstyled class fails the run
instead of shipping broken output.

Only static class names are checked: ``className="a b"`` attributes and the
string literals inside ``className={...}`` expressions.
"""

from __future__ import annotations

import posixpath
import re
from typing import Iterable

from .models import FileKind, OutputFile

_CLASS_TOKEN_RE = re.compile(r"^-?[_a-zA-Z][_a-zA-Z0-9-]*$")
_STRING_LITERAL_RE = re.compile(r"'([^'\\]*)'|\"([^\"\\]*)\"|`([^`]*)`")
_TEMPLATE_EXPR_RE = re.compile(r"\$\{[^}]*\}")
_CSS_IMPORT_RE = re.compile(r"""^\s*import\s+['"](\.{1,2}/[^'"]+\.css)['"];?\s*$""", re.MULTILINE)
_CSS_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_CSS_PRELUDE_RE = re.compile(r"([^{}]+)\{")
_CSS_CLASS_RE = re.compile(r"\.(-?[_a-zA-Z][_a-zA-Z0-9-]*)")


class StyleCoverageError(Exception):
    """Raised when markup references classes its stylesheets do not define.

    Attributes:
        missing: Markup path -> sorted class names without a rule.
        missing_imports: Markup path -> imported stylesheet paths that are
            not part of the output.
    """

    def __init__(
        self,
        missing: dict[str, list[str]],
        missing_imports: dict[str, list[str]] | None = None,
    ) -> None:
        self.missing = missing
        self.missing_imports = missing_imports or {}
        lines = [
            f"{path}: no rule for {', '.join('.' + name for name in names)}"
            for path, names in sorted(self.missing.items())
        ]
        lines.extend(
            f"{path}: imports missing stylesheet {', '.join(sheets)}"
            for path, sheets in sorted(self.missing_imports.items())
        )
        super().__init__("Style coverage check failed:\n  " + "\n  ".join(lines))


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def extract_class_names(markup: str) -> set[str]:
    """Return every static class name referenced by ``className`` in *markup*."""
    classes: set[str] = set()
    for value in _class_attribute_values(markup):
        for token in value.split():
            if _CLASS_TOKEN_RE.match(token):
                classes.add(token)
    return classes


def extract_stylesheet_imports(markup: str) -> list[str]:
    """Return the relative ``.css`` paths imported by *markup*, in order."""
    return _CSS_IMPORT_RE.findall(markup)


def extract_defined_classes(css: str) -> set[str]:
    """Return every class name that appears in a selector of *css*."""
    stripped = _CSS_COMMENT_RE.sub("", css)
    defined: set[str] = set()
    for prelude in _CSS_PRELUDE_RE.findall(stripped):
        # Drop any preceding at-statement such as @import url(...);
        prelude = prelude.rsplit(";", 1)[-1]
        if prelude.strip().startswith("@"):
            continue
        defined.update(_CSS_CLASS_RE.findall(prelude))
    return defined


# ---------------------------------------------------------------------------
# Coverage
# ---------------------------------------------------------------------------


def coverage_gaps(
    files: Iterable[OutputFile],
) -> tuple[dict[str, list[str]], dict[str, list[str]]]:
    """Compute uncovered classes and dangling stylesheet imports.

    Returns:
        ``(missing, missing_imports)``; both empty when coverage is complete.
    """
    files = list(files)
    sheets = {f.path: f.content for f in files if f.kind == FileKind.STYLESHEET}

    missing: dict[str, list[str]] = {}
    missing_imports: dict[str, list[str]] = {}
    for f in files:
        if f.kind != FileKind.MARKUP:
            continue
        base = posixpath.dirname(f.path)
        defined: set[str] = set()
        dangling: list[str] = []
        for rel in extract_stylesheet_imports(f.content):
            sheet_path = posixpath.normpath(posixpath.join(base, rel))
            if sheet_path in sheets:
                defined |= extract_defined_classes(sheets[sheet_path])
            else:
                dangling.append(sheet_path)
        uncovered = sorted(extract_class_names(f.content) - defined)
        if uncovered:
            missing[f.path] = uncovered
        if dangling:
            missing_imports[f.path] = dangling
    return missing, missing_imports


def check_style_coverage(files: Iterable[OutputFile]) -> None:
    """Raise :class:`StyleCoverageError` unless coverage is complete."""
    missing, missing_imports = coverage_gaps(files)
    if missing or missing_imports:
        raise StyleCoverageError(missing, missing_imports)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _class_attribute_values(markup: str) -> list[str]:
    """Collect the static string parts of every ``className`` attribute."""
    values: list[str] = []
    pos = 0
    while True:
        idx = markup.find("className=", pos)
        if idx == -1:
            return values
        start = idx + len("className=")
        if start >= len(markup):
            return values
        opener = markup[start]
        if opener in "\"'":
            end = markup.find(opener, start + 1)
            if end == -1:
                return values
            values.append(markup[start + 1:end])
            pos = end + 1
        elif opener == "{":
            end = _matching_brace(markup, start)
            expression = markup[start + 1:end]
            values.extend(_string_literals(expression))
            pos = end + 1
        else:
            pos = start


def _string_literals(expression: str) -> list[str]:
    """Return the static text of every string literal in a JS expression."""
    values: list[str] = []
    for single, double, template in _STRING_LITERAL_RE.findall(expression):
        if template:
            values.append(_TEMPLATE_EXPR_RE.sub(" ", template))
            for inner in _TEMPLATE_EXPR_RE.findall(template):
                values.extend(_string_literals(inner[2:-1]))
        else:
            values.append(single or double)
    return values


def _matching_brace(text: str, start: int) -> int:
    """Return the index of the ``}`` closing the ``{`` at *start*."""
    depth = 0
    for i in range(start, len(text)):
        if text[i] == "{":
            depth += 1
        elif text[i] == "}":
            depth -= 1
            if depth == 0:
                return i
    return len(text) - 1
