"""
Data Sources
============
Where roles and role detail pages come from.

The application only talks to the `RoleDataSource` and `PageContentSource`
protocols. The bundled implementations read JSON files:

roles file::

    {"personalized": true,
     "roles": [{"name": "Data Scientist", "technical": 8, "creative": 5,
                "business": 4, "customer": 3, "distance": 3, "color": "#0ea5e9"}]}

pages file::

    {"roles": {"Data Scientist": [{"type": "overview", ...}, ...]},
     "default": [{"type": "overview", ...}, ...]}
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Sequence, Union

from polaris.model.pages import Page, pages_from_list
from polaris.model.roles import MetricVector, RoleBatch

logger = logging.getLogger(__name__)


class DataSourceError(Exception):
    """A data source could not deliver a usable answer."""


class RoleDataSource(Protocol):
    def fetch_roles(self, current_role: str, metrics: Optional[MetricVector]) -> RoleBatch: ...


class PageContentSource(Protocol):
    def fetch_pages(
        self,
        role_name: str,
        current_role: str,
        metrics: Optional[MetricVector],
        user_skills: Sequence[str] = (),
    ) -> list[Page]: ...


def _read_json(path: Path) -> Dict[str, Any]:
    logger.info(f"Reading data from: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise DataSourceError(f"Could not read '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise DataSourceError(f"File '{path}' is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise DataSourceError(f"File '{path}' must contain a JSON object.")
    return raw


class JsonRoleSource:
    """Role data source backed by a JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def fetch_roles(self, current_role: str, metrics: Optional[MetricVector] = None) -> RoleBatch:
        data = _read_json(self.path)
        try:
            batch = RoleBatch.from_dict(data)
        except (ValueError, AttributeError) as e:
            raise DataSourceError(f"Invalid role data in '{self.path}': {e}") from e

        logger.info(f"Loaded {len(batch.roles)} roles for '{current_role}' (personalized={batch.personalized}).")
        return batch


class JsonPageSource:
    """
    Page content source backed by a JSON file.

    Pages for a role come from the "roles" mapping; roles without their own entry
    get the "default" pages.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def fetch_pages(
        self,
        role_name: str,
        current_role: str = "",
        metrics: Optional[MetricVector] = None,
        user_skills: Sequence[str] = (),
    ) -> list[Page]:
        data = _read_json(self.path)

        by_role = data.get("roles") or {}
        if not isinstance(by_role, dict):
            raise DataSourceError(f"'roles' in '{self.path}' must be an object.")

        items: Optional[List[Dict[str, Any]]] = by_role.get(role_name, data.get("default"))
        if items is None:
            raise DataSourceError(f"No pages available for role '{role_name}'.")
        if not isinstance(items, list):
            raise DataSourceError(f"Pages for role '{role_name}' must be a list.")

        try:
            pages = pages_from_list(items)
        except (ValueError, AttributeError) as e:
            raise DataSourceError(f"Invalid page data for role '{role_name}': {e}") from e

        logger.info(f"Loaded {len(pages)} pages for '{role_name}'.")
        return pages
