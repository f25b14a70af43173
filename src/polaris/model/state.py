"""
Session State (Data Model)
==========================
This module defines the central data structure for the running explorer session.

Why is this file needed?
------------------------
1. State Management: It holds the current role, the latest role layout and the
   pages of the selected role in one place.
2. Decoupling: Views read from this object; the controller writes to it.

Nothing here survives the session; every role layout request replaces the
previous layout wholesale.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
import logging
from typing import Optional, TYPE_CHECKING

from polaris.model.roles import MetricVector

if TYPE_CHECKING:
    from polaris.layout.pipeline import RoleLayout
    from polaris.model.pages import Page

logger = logging.getLogger(__name__)


class ExplorerStage(IntEnum):
    """The views of the explorer."""
    ROLE_MAP = 0
    ROLE_DETAIL = 1


@dataclass
class SessionState:
    current_role: str = ""
    metrics: Optional[MetricVector] = None
    user_skills: list[str] = field(default_factory=list)

    stage: ExplorerStage = ExplorerStage.ROLE_MAP
    layout: Optional[RoleLayout] = None
    personalized: bool = False

    selected_role: Optional[str] = None
    pages: list[Page] = field(default_factory=list)

    error: Optional[str] = None

    def reset_pages(self) -> None:
        """Forget the selected role and its pages, back to the role map."""
        self.selected_role = None
        self.pages = []
        self.error = None
        self.stage = ExplorerStage.ROLE_MAP

    def reset(self) -> None:
        """Clear all data for a new session."""
        self.current_role = ""
        self.metrics = None
        self.user_skills = []
        self.layout = None
        self.personalized = False
        self.reset_pages()
        logger.info("Session state has been reset.")
