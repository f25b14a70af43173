"""
Text content of the role detail pages, per page type.
"""
from __future__ import annotations

from dataclasses import dataclass

from polaris.model.pages import DayInLifePage, OverviewPage, Page, PageType, SkillsPage


@dataclass(frozen=True)
class PageText:
    title: str
    intro: str
    items: tuple[str, ...] = ()
    body: str = ""
    footer: str = ""
    accent: str = "#111827"


def describe_page(page: Page, role_name: str) -> PageText:
    if isinstance(page, OverviewPage):
        items = (f"Avg. Salary: {page.salary}", f"Typical Degree: {page.degree}")
        footer = f"Source: {page.source}" if page.source else ""
        return PageText(
            title=role_name,
            intro="Imagine yourself as:",
            items=items,
            body=page.description,
            footer=footer,
        )

    if isinstance(page, DayInLifePage):
        return PageText(
            title="A day in the life",
            intro=f"Here's what a day in the life of a(n) {role_name} might look like.",
            items=page.tasks,
        )

    if isinstance(page, SkillsPage) and page.type == PageType.SWEET_SPOTS:
        return PageText(
            title="Sweet spots",
            intro=f"Consider how the role of a(n) {role_name} may overlap with where you are now.",
            items=page.skills,
            body=page.explanation,
            accent="#16a34a",
        )

    if isinstance(page, SkillsPage):
        return PageText(
            title="Areas for growth",
            intro=(
                "Every career presents opportunities to learn and specialize in new areas. "
                f"Here's what that could look like as a(n) {role_name}."
            ),
            items=page.skills,
            body=page.explanation,
            accent="#2563eb",
        )

    raise TypeError(f"Unsupported page: {page!r}")
