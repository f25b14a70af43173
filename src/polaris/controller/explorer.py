"""
Explorer Controller
===================
Connects the data sources, the layout engine and the session state.

Flow:
    load_roles()       -> FetchWorker(role source) -> layout_roles() -> roles_ready
    select_role(name)  -> FetchWorker(page source)                   -> pages_ready
    any failure                                                      -> load_failed

A failed fetch is terminal for the current view: nothing partial is published
and nothing is retried. The user goes back to recover.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PySide6.QtCore import QObject, Signal, Slot

from polaris.controller.workers import FetchWorker
from polaris.layout.pipeline import RoleLayout, layout_roles
from polaris.model.roles import RoleBatch
from polaris.model.sources import PageContentSource, RoleDataSource
from polaris.model.state import ExplorerStage, SessionState

logger = logging.getLogger(__name__)


class ExplorerController(QObject):
    loading_started = Signal(str)
    roles_ready = Signal(object)  # RoleLayout
    pages_ready = Signal(list)
    load_failed = Signal(str)

    def __init__(
        self,
        state: SessionState,
        role_source: RoleDataSource,
        page_source: PageContentSource,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.state = state
        self.role_source = role_source
        self.page_source = page_source

        self._request_id = 0
        self._workers: dict[int, FetchWorker] = {}

    # ---- public API ----

    def load_roles(self) -> int:
        """Fetch the role batch for the current role and lay it out."""
        self.state.error = None
        self.state.stage = ExplorerStage.ROLE_MAP
        current_role, metrics = self.state.current_role, self.state.metrics
        return self._start(
            lambda: self.role_source.fetch_roles(current_role, metrics),
            label="roles",
            on_result=self._on_roles_fetched,
        )

    def select_role(self, role_name: str) -> int:
        """Fetch the detail pages of the clicked role."""
        logger.info(f"Role selected: {role_name}")
        self.state.selected_role = role_name
        self.state.pages = []
        self.state.error = None
        self.state.stage = ExplorerStage.ROLE_DETAIL
        current_role, metrics = self.state.current_role, self.state.metrics
        skills = tuple(self.state.user_skills)
        return self._start(
            lambda: self.page_source.fetch_pages(role_name, current_role, metrics, skills),
            label=f"pages of '{role_name}'",
            on_result=self._on_pages_fetched,
        )

    def back_to_map(self) -> None:
        """Leave the detail view; answers still in flight are ignored."""
        self._request_id += 1
        self.state.reset_pages()

    def shutdown(self) -> None:
        """Drop pending answers and wait for running workers."""
        self._request_id += 1
        for worker in list(self._workers.values()):
            worker.wait()
        self._workers.clear()

    def is_current(self, request_id: int) -> bool:
        return request_id == self._request_id

    # ---- worker plumbing ----

    def _start(self, fetch: Callable[[], Any], label: str, on_result: Callable[[int, Any], None]) -> int:
        self._request_id += 1
        request_id = self._request_id

        worker = FetchWorker(request_id, fetch, label=label)
        worker.result_ready.connect(on_result)
        worker.error_occurred.connect(self._on_fetch_failed)
        worker.finished.connect(self._on_worker_finished)
        self._workers[request_id] = worker

        self.loading_started.emit(label)
        worker.start()
        return request_id

    @Slot()
    def _on_worker_finished(self) -> None:
        worker = self.sender()
        if isinstance(worker, FetchWorker):
            self._workers.pop(worker.request_id, None)
            worker.deleteLater()

    # ---- slots ----

    @Slot(int, object)
    def _on_roles_fetched(self, request_id: int, batch: RoleBatch) -> None:
        if not self.is_current(request_id):
            logger.debug(f"Dropping stale role answer #{request_id}.")
            return

        layout: RoleLayout = layout_roles(batch.roles)
        self.state.layout = layout
        self.state.personalized = batch.personalized
        self.roles_ready.emit(layout)

    @Slot(int, object)
    def _on_pages_fetched(self, request_id: int, pages: list) -> None:
        if not self.is_current(request_id):
            logger.debug(f"Dropping stale page answer #{request_id}.")
            return

        self.state.pages = list(pages)
        self.pages_ready.emit(self.state.pages)

    @Slot(int, str)
    def _on_fetch_failed(self, request_id: int, message: str) -> None:
        if not self.is_current(request_id):
            return

        self.state.error = message
        logger.error(f"Loading failed: {message}")
        self.load_failed.emit(message)
