"""Pydantic v2 models for resolved page content.

A ``ContentBundle`` is the per-industry text used to fill page templates.  All
models are frozen: a bundle is built once per generation run and never mutated.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Card(BaseModel):
    """A titled block of text (service card, testimonial, contact detail)."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""


class PageContent(BaseModel):
    """Structured text for one page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    body: str = Field(default="", description="Lead paragraph")
    cta: str = Field(default="Learn More", description="Primary call-to-action label")
    items: tuple[str, ...] = Field(default=(), description="Plain list entries")
    cards: tuple[Card, ...] = Field(default=(), description="Card entries")


class ContentBundle(BaseModel):
    """Resolved content for every page of a project.

    Attributes:
        industry: The normalised industry key that was looked up.
        matched: ``False`` when the tag was unknown and the ``default`` entry
            was used instead.
        business_name: Name substituted into the text.
        pages: Page name -> content.
    """

    model_config = ConfigDict(frozen=True)

    industry: str
    matched: bool
    business_name: str
    pages: dict[str, PageContent] = Field(default_factory=dict)

    def page(self, name: str) -> PageContent:
        """Return content for *name*, or generic text if none was authored."""
        content = self.pages.get(name)
        if content is not None:
            return content
        label = name.replace("-", " ").replace("_", " ").strip().title() or "Page"
        return PageContent(
            title=label,
            subtitle=f"Welcome to the {self.business_name} {label.lower()} page",
            body=f"This is the {label.lower()} page of {self.business_name}.",
        )
