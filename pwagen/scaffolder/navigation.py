"""Navigation model shared by the navigation component and the router table.

Both ``Navigation.tsx`` and ``App.tsx`` are rendered from one
``NavigationModel`` so their page sets and paths cannot drift apart.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from .models import PageDescriptor


class NavLink(BaseModel):
    """One navigation entry / route."""

    model_config = ConfigDict(frozen=True)

    page: str
    label: str
    path: str
    component: str


class NavigationModel(BaseModel):
    """Ordered links for every derived page."""

    model_config = ConfigDict(frozen=True)

    links: tuple[NavLink, ...]

    def paths(self) -> list[str]:
        return [link.path for link in self.links]

    def pages(self) -> list[str]:
        return [link.page for link in self.links]


def build_navigation(pages: Iterable[PageDescriptor]) -> NavigationModel:
    """Build the navigation model: home -> ``/``, every other page -> ``/<name>``."""
    links = tuple(
        NavLink(
            page=page.name,
            label=page.component,
            path=page.path,
            component=page.component,
        )
        for page in pages
    )
    return NavigationModel(links=links)
