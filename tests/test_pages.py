"""Tests for page parsing and page text."""

import pytest

from polaris.model.pages import (
    DayInLifePage,
    OverviewPage,
    PageType,
    SkillsPage,
    page_from_dict,
    pages_from_list,
)
from polaris.view.page_content import describe_page

from conftest import PAGE_DATA


class TestPageFromDict:
    def test_overview(self):
        page = page_from_dict(
            {"type": "overview", "description": "d", "salary": "$1", "degree": "BSc", "source": "BLS"}
        )
        assert page == OverviewPage(description="d", salary="$1", degree="BSc", source="BLS")
        assert page.type == PageType.OVERVIEW

    def test_overview_without_source(self):
        page = page_from_dict({"type": "overview", "description": "d"})
        assert page.source is None
        assert page.salary == ""

    def test_day_in_life(self):
        page = page_from_dict({"type": "day_in_life", "tasks": ["a", "b"]})
        assert page == DayInLifePage(tasks=("a", "b"))

    @pytest.mark.parametrize("page_type", ["sweet_spots", "areas_for_growth"])
    def test_skill_pages(self, page_type):
        page = page_from_dict({"type": page_type, "skills": ["x"], "explanation": "why"})
        assert isinstance(page, SkillsPage)
        assert page.type == PageType(page_type)
        assert page.skills == ("x",)

    def test_missing_lists_become_empty(self):
        assert page_from_dict({"type": "day_in_life"}).tasks == ()

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown page type"):
            page_from_dict({"type": "salary_chart"})

    def test_list_field_must_be_list(self):
        with pytest.raises(ValueError):
            page_from_dict({"type": "day_in_life", "tasks": "all of them"})

    def test_skills_page_type_is_checked(self):
        with pytest.raises(ValueError):
            SkillsPage(type=PageType.OVERVIEW)

    def test_order_is_kept(self):
        pages = pages_from_list(PAGE_DATA["roles"]["Data Scientist"])
        assert [p.type for p in pages] == list(PageType)


class TestDescribePage:
    def test_overview_text(self):
        text = describe_page(OverviewPage("desc", "$100", "BSc", "BLS"), "Data Scientist")
        assert text.title == "Data Scientist"
        assert "Avg. Salary: $100" in text.items
        assert text.footer == "Source: BLS"

    def test_day_in_life_text(self):
        text = describe_page(DayInLifePage(("Plan",)), "Analyst")
        assert "Analyst" in text.intro
        assert text.items == ("Plan",)

    def test_skill_pages_have_distinct_titles(self):
        sweet = describe_page(SkillsPage(PageType.SWEET_SPOTS, ("a",), "e"), "R")
        growth = describe_page(SkillsPage(PageType.AREAS_FOR_GROWTH, ("b",), "f"), "R")
        assert sweet.title == "Sweet spots"
        assert growth.title == "Areas for growth"
        assert sweet.accent != growth.accent

    def test_unsupported_page(self):
        with pytest.raises(TypeError):
            describe_page(object(), "R")
