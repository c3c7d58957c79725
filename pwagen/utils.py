"""Shared utility functions for the PWA generator.

Provides name helpers (slugs, component names), file-system helpers used by
the emitter, and Rich-based console reporting.  Console output goes through a
single module-level ``Console`` so callers (and tests) can silence or capture
it in one place.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def slugify(text: str) -> str:
    """Convert text to a URL/package-safe slug (hyphenated).

    Examples::

        slugify("My PWA App") -> "my-pwa-app"
        slugify("  Joe's Diner!  ") -> "joe-s-diner"
    """
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower().strip())
    return slug.strip("-")


def component_name(page: str) -> str:
    """Return the React component name for a page tag.

    The first letter of every hyphen/underscore separated word is upper-cased
    (``"home"`` -> ``"Home"``, ``"contact-us"`` -> ``"ContactUs"``).
    """
    parts = re.split(r"[-_\s]+", page)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def page_path(page: str) -> str:
    """Return the router path for a page: ``/`` for home, ``/<page>`` otherwise."""
    return "/" if page == "home" else f"/{page}"


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def write_file(path: Path, content: str) -> Path:
    """Synchronous helper: create parent dirs and (over)write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
