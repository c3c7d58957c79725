"""Industry content resolution.

Turns ``(industry, business_name, description)`` into a ``ContentBundle``.
Resolution is a single lookup with a default: an unknown industry resolves to
the ``default`` table entry, and a page an industry does not author inherits
the ``default`` page.  Nothing here can fail for a configuration reason.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from .models import Card, ContentBundle, PageContent
from .tables import (
    DEFAULT_INDUSTRY,
    INDUSTRY_ALIASES,
    INDUSTRY_CONTENT,
)

ContentTable = Mapping[str, Mapping[str, Mapping[str, Any]]]


def normalize_industry(industry: str) -> str:
    """Fold an industry tag onto the key format used by the content table.

    ``"Cyber Security"``, ``"cyber_security"`` and ``"cybersecurity"`` all
    become ``"cyber-security"``.  Unknown tags are returned normalised but
    otherwise unchanged.
    """
    key = re.sub(r"[\s_]+", "-", (industry or "").strip().lower())
    key = re.sub(r"-+", "-", key).strip("-")
    return INDUSTRY_ALIASES.get(key, key)


class ContentResolver:
    """Resolves content bundles from an industry table.

    Args:
        table: Industry -> page -> raw fields.  Must contain a ``default``
            entry.  Defaults to :data:`INDUSTRY_CONTENT`.
    """

    def __init__(self, table: Optional[ContentTable] = None) -> None:
        self.table: ContentTable = table if table is not None else INDUSTRY_CONTENT
        if DEFAULT_INDUSTRY not in self.table:
            raise ValueError(f"Content table has no '{DEFAULT_INDUSTRY}' entry")

    def known_industries(self) -> list[str]:
        """Return the sorted industry keys, excluding ``default``."""
        return sorted(key for key in self.table if key != DEFAULT_INDUSTRY)

    def is_known(self, industry: str) -> bool:
        key = normalize_industry(industry)
        return key != DEFAULT_INDUSTRY and key in self.table

    def resolve(
        self,
        industry: str,
        business_name: str,
        description: str = "",
        pages: Optional[tuple[str, ...]] = None,
    ) -> ContentBundle:
        """Build the content bundle for an industry.

        Args:
            industry: Free-form industry tag.
            business_name: Substituted verbatim into the text.
            description: Business description; a generic sentence is used
                when empty.
            pages: Page names to resolve.  Defaults to every page the
                ``default`` entry authors.

        Returns:
            A ``ContentBundle`` with a non-empty entry for every requested
            page.  Pages nobody authored get generic text.
        """
        key = normalize_industry(industry)
        matched = self.is_known(industry)
        industry_pages = self.table[key] if matched else {}
        default_pages = self.table[DEFAULT_INDUSTRY]

        name = business_name.strip() or "My Business"
        values = {
            "business_name": name,
            "description": description.strip() or (
                f"{name} is dedicated to providing exceptional service "
                "with a focus on quality and customer satisfaction."
            ),
        }

        names = pages if pages is not None else tuple(default_pages)
        resolved: dict[str, PageContent] = {}
        for page in names:
            raw = industry_pages.get(page) or default_pages.get(page)
            if raw is not None:
                resolved[page] = _build_page(raw, values)

        bundle = ContentBundle(
            industry=key if matched else DEFAULT_INDUSTRY,
            matched=matched,
            business_name=name,
            pages=resolved,
        )
        missing = {page: bundle.page(page) for page in names if page not in resolved}
        if missing:
            bundle = bundle.model_copy(update={"pages": {**resolved, **missing}})
        return bundle


_DEFAULT_RESOLVER = ContentResolver()


def resolve_content(
    industry: str,
    business_name: str,
    description: str = "",
    pages: Optional[tuple[str, ...]] = None,
) -> ContentBundle:
    """Resolve content against the built-in table.

    Pure function of its inputs: the same arguments always produce an equal
    bundle.  See :meth:`ContentResolver.resolve`.
    """
    return _DEFAULT_RESOLVER.resolve(industry, business_name, description, pages)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


class _Placeholders(dict):
    """``format_map`` mapping that leaves unknown placeholders untouched."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def _fill(text: str, values: Mapping[str, str]) -> str:
    return text.format_map(_Placeholders(values))


def _build_page(raw: Mapping[str, Any], values: Mapping[str, str]) -> PageContent:
    return PageContent(
        title=_fill(raw["title"], values),
        subtitle=_fill(raw["subtitle"], values),
        body=_fill(raw.get("body", ""), values),
        cta=_fill(raw.get("cta", "Learn More"), values),
        items=tuple(_fill(item, values) for item in raw.get("items", ())),
        cards=tuple(
            Card(title=_fill(title, values), description=_fill(desc, values))
            for title, desc in raw.get("cards", ())
        ),
    )
