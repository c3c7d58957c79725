"""Feature flags and page derivation.

A project always gets the ``home``, ``about`` and ``services`` pages; each
selected feature flag adds the pages listed for it in ``FEATURE_PAGES``.
Flags are a set: order and duplicates in the input never change the result,
and unknown flags are ignored.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from pwagen.content.tables import BASE_PAGE_NAMES

from .models import PageDescriptor


class FeatureFlag(str, Enum):
    """Selectable capability tags."""
    CONTACT_FORM = "contact-form"
    GALLERY = "gallery"
    TESTIMONIALS = "testimonials"
    AUTH = "auth"
    REVIEWS = "reviews"
    CHAT = "chat"
    SEARCH = "search"
    PAYMENTS = "payments"
    BOOKING = "booking"
    ANALYTICS = "analytics"
    GEOLOCATION = "geolocation"
    PROFILE = "profile"
    NOTIFICATIONS = "notifications"
    SOCIAL = "social"

    def __str__(self) -> str:
        return self.value


# Table order is the canonical order of feature pages in the output.
FEATURE_PAGES: Mapping[FeatureFlag, tuple[str, ...]] = MappingProxyType({
    FeatureFlag.CONTACT_FORM: ("contact",),
    FeatureFlag.GALLERY: ("gallery",),
    FeatureFlag.TESTIMONIALS: ("testimonials",),
    FeatureFlag.AUTH: ("login", "register", "profile"),
    FeatureFlag.REVIEWS: ("reviews",),
    FeatureFlag.CHAT: ("chat",),
    FeatureFlag.PROFILE: ("profile",),
    FeatureFlag.SEARCH: ("search",),
    FeatureFlag.PAYMENTS: ("payments",),
    FeatureFlag.BOOKING: ("booking",),
    FeatureFlag.ANALYTICS: ("analytics",),
    FeatureFlag.GEOLOCATION: ("locations",),
    FeatureFlag.NOTIFICATIONS: (),
    FeatureFlag.SOCIAL: (),
})

_KNOWN_VALUES = {flag.value for flag in FeatureFlag}


def _tag(raw: object) -> str:
    value = raw.value if isinstance(raw, Enum) else raw
    return str(value).strip().lower()


def parse_features(features: Iterable[str | FeatureFlag]) -> frozenset[FeatureFlag]:
    """Return the recognised flags in *features*; unknown tags are dropped."""
    flags = set()
    for raw in features:
        tag = _tag(raw)
        if tag in _KNOWN_VALUES:
            flags.add(FeatureFlag(tag))
    return frozenset(flags)


def ignored_features(features: Iterable[str | FeatureFlag]) -> list[str]:
    """Return the sorted tags in *features* that are not feature flags."""
    tags = {_tag(raw) for raw in features}
    return sorted(tag for tag in tags if tag and tag not in _KNOWN_VALUES)


def derive_pages(features: Iterable[str | FeatureFlag]) -> tuple[PageDescriptor, ...]:
    """Derive the page list for a set of selected features.

    Base pages come first, then feature pages in ``FEATURE_PAGES`` order.
    Each page appears once even if several flags imply it.

    Example::

        [p.name for p in derive_pages({"gallery", "contact-form"})]
        -> ["home", "about", "services", "contact", "gallery"]
    """
    selected = parse_features(features)
    names: list[str] = list(BASE_PAGE_NAMES)
    for flag, pages in FEATURE_PAGES.items():
        if flag not in selected:
            continue
        for page in pages:
            if page not in names:
                names.append(page)
    return tuple(PageDescriptor.for_page(name) for name in names)
