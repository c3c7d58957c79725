"""PWA generator content resolver.

Looks up the text used to fill generated pages, keyed by industry, with an
explicit ``default`` entry as the fallback for unknown industries and for
pages an industry does not author.

Usage::

    from pwagen.content import resolve_content

    bundle = resolve_content("cyber-security", "Acme Secure", "")
    print(bundle.page("home").title)
"""

from pwagen.content.models import Card, ContentBundle, PageContent
from pwagen.content.resolver import ContentResolver, normalize_industry, resolve_content
from pwagen.content.tables import ALL_PAGE_NAMES, BASE_PAGE_NAMES, INDUSTRY_CONTENT

__all__ = [
    "ALL_PAGE_NAMES",
    "BASE_PAGE_NAMES",
    "Card",
    "ContentBundle",
    "ContentResolver",
    "INDUSTRY_CONTENT",
    "PageContent",
    "normalize_industry",
    "resolve_content",
]
