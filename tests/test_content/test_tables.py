"""Tests for the industry content tables (pwagen.content.tables)."""

from __future__ import annotations

import pytest

from pwagen.content.tables import (
    ALL_PAGE_NAMES,
    BASE_PAGE_NAMES,
    DEFAULT_INDUSTRY,
    INDUSTRY_ALIASES,
    INDUSTRY_CONTENT,
)
from pwagen.scaffolder.features import FEATURE_PAGES

pytestmark = pytest.mark.unit


class TestDefaultEntry:
    def test_default_is_a_table_row(self):
        assert DEFAULT_INDUSTRY in INDUSTRY_CONTENT

    def test_default_authors_every_page(self):
        assert set(INDUSTRY_CONTENT[DEFAULT_INDUSTRY]) == set(ALL_PAGE_NAMES)

    def test_every_derivable_page_is_authored(self):
        derivable = set(BASE_PAGE_NAMES)
        for pages in FEATURE_PAGES.values():
            derivable.update(pages)
        assert derivable <= set(INDUSTRY_CONTENT[DEFAULT_INDUSTRY])

    @pytest.mark.parametrize("page", ALL_PAGE_NAMES)
    def test_default_pages_have_title_and_subtitle(self, page: str):
        raw = INDUSTRY_CONTENT[DEFAULT_INDUSTRY][page]
        assert raw["title"].strip()
        assert raw["subtitle"].strip()


class TestIndustryEntries:
    def test_expected_industries(self):
        assert set(INDUSTRY_CONTENT) == {
            "default",
            "small-business",
            "technology",
            "healthcare",
            "restaurant",
            "cyber-security",
            "legal",
            "e-commerce",
            "portfolio",
        }

    def test_industries_only_author_known_pages(self):
        for industry, pages in INDUSTRY_CONTENT.items():
            assert set(pages) <= set(ALL_PAGE_NAMES), industry

    def test_aliases_point_at_table_keys(self):
        for alias, key in INDUSTRY_ALIASES.items():
            assert key in INDUSTRY_CONTENT, alias


class TestImmutability:
    def test_top_level_is_read_only(self):
        with pytest.raises(TypeError):
            INDUSTRY_CONTENT["new"] = {}

    def test_pages_are_read_only(self):
        with pytest.raises(TypeError):
            INDUSTRY_CONTENT["technology"]["home"] = {}

    def test_only_frozen_table_is_exposed(self):
        import pwagen.content.tables as tables

        assert not hasattr(tables, "_DEFAULT")
        assert not hasattr(tables, "_PORTFOLIO")

    def test_lists_become_tuples(self):
        cards = INDUSTRY_CONTENT[DEFAULT_INDUSTRY]["services"]["cards"]
        assert isinstance(cards, tuple)
