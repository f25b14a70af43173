"""
Role Detail Pages
=================
Typed content pages shown for a selected role. Pages keep the order in which the
page content source delivered them and are read-only after parsing.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict, List, Optional, Union


class PageType(StrEnum):
    OVERVIEW = "overview"
    DAY_IN_LIFE = "day_in_life"
    SWEET_SPOTS = "sweet_spots"
    AREAS_FOR_GROWTH = "areas_for_growth"


@dataclass(frozen=True)
class OverviewPage:
    description: str = ""
    salary: str = ""
    degree: str = ""
    source: Optional[str] = None

    @property
    def type(self) -> PageType:
        return PageType.OVERVIEW


@dataclass(frozen=True)
class DayInLifePage:
    tasks: tuple[str, ...] = ()

    @property
    def type(self) -> PageType:
        return PageType.DAY_IN_LIFE


@dataclass(frozen=True)
class SkillsPage:
    """Shared layout of the 'sweet spots' and 'areas for growth' pages."""
    type: PageType
    skills: tuple[str, ...] = ()
    explanation: str = ""

    def __post_init__(self) -> None:
        if self.type not in (PageType.SWEET_SPOTS, PageType.AREAS_FOR_GROWTH):
            raise ValueError(f"SkillsPage cannot have type '{self.type}'.")


Page = Union[OverviewPage, DayInLifePage, SkillsPage]


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _strings(data: Dict[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ValueError(f"Page field '{key}' must be a list, got {type(value).__name__}.")
    return tuple(str(item) for item in value)


def page_from_dict(data: Dict[str, Any]) -> Page:
    """
    Build a typed page from its source dictionary.

    Raises:
        ValueError: If the page type is missing or unknown.
    """
    raw_type = data.get("type")
    try:
        page_type = PageType(raw_type)
    except ValueError:
        raise ValueError(f"Unknown page type: {raw_type!r}") from None

    match page_type:
        case PageType.OVERVIEW:
            source = data.get("source")
            return OverviewPage(
                description=_text(data, "description"),
                salary=_text(data, "salary"),
                degree=_text(data, "degree"),
                source=str(source) if source else None,
            )
        case PageType.DAY_IN_LIFE:
            return DayInLifePage(tasks=_strings(data, "tasks"))
        case _:
            return SkillsPage(
                type=page_type,
                skills=_strings(data, "skills"),
                explanation=_text(data, "explanation"),
            )


def pages_from_list(items: List[Dict[str, Any]]) -> list[Page]:
    return [page_from_dict(item) for item in items]
