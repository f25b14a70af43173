"""
Main Application Window
=======================
The primary GUI container that switches between the role map, the role detail
pages and the loading / error screen.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the views to the controller and decides which view is
   on screen.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import QLabel, QMainWindow, QPushButton, QStackedWidget, QVBoxLayout, QWidget

from polaris.application import VISIBLE_APP_NAME
from polaris.controller.explorer import ExplorerController
from polaris.layout.pipeline import RoleLayout
from polaris.model.state import ExplorerStage, SessionState
from polaris.view.role_detail import RoleDetailView
from polaris.view.role_map import RoleMapView

logger = logging.getLogger(__name__)


class StatusView(QWidget):
    """Loading message, or the terminal error of the current view."""
    back_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        v = QVBoxLayout(self)
        v.addStretch()

        self.lbl_message = QLabel("")
        self.lbl_message.setAlignment(Qt.AlignCenter)
        self.lbl_message.setWordWrap(True)
        v.addWidget(self.lbl_message)

        self.btn_back = QPushButton(self.tr("Back"))
        self.btn_back.clicked.connect(self.back_requested)
        v.addWidget(self.btn_back, 0, Qt.AlignCenter)
        v.addStretch()

    def show_loading(self, what: str) -> None:
        self.lbl_message.setText(self.tr("Loading {0}...").format(what))
        self.lbl_message.setStyleSheet("color: gray;")
        self.btn_back.setVisible(False)

    def show_error(self, message: str, can_go_back: bool) -> None:
        self.lbl_message.setText(self.tr("Error: {0}").format(message))
        self.lbl_message.setStyleSheet("color: #dc2626; font-weight: bold;")
        self.btn_back.setVisible(can_go_back)


class MainWindow(QMainWindow):
    def __init__(self, state: SessionState, controller: ExplorerController) -> None:
        super().__init__()
        self.state = state
        self.controller = controller

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1280, 860)

        self.stack = QStackedWidget(self)
        self.setCentralWidget(self.stack)

        self.role_map = RoleMapView(parent=self.stack)
        self.role_detail = RoleDetailView(parent=self.stack)
        self.status_view = StatusView(parent=self.stack)
        for view in (self.role_map, self.role_detail, self.status_view):
            self.stack.addWidget(view)

        # --- SIGNAL CONNECTIONS ---
        self.role_map.role_selected.connect(self.controller.select_role)
        self.role_detail.back_requested.connect(self.on_back)
        self.status_view.back_requested.connect(self.on_back)

        self.controller.loading_started.connect(self.on_loading_started)
        self.controller.roles_ready.connect(self.on_roles_ready)
        self.controller.pages_ready.connect(self.on_pages_ready)
        self.controller.load_failed.connect(self.on_load_failed)

    # --- SLOTS ---

    @Slot(str)
    def on_loading_started(self, what: str) -> None:
        self.status_view.show_loading(what)
        self.stack.setCurrentWidget(self.status_view)

    @Slot(object)
    def on_roles_ready(self, layout: RoleLayout) -> None:
        self.role_map.set_layout(layout, self.state.personalized, self.state.current_role)
        self.stack.setCurrentWidget(self.role_map)

    @Slot(list)
    def on_pages_ready(self, pages: list) -> None:
        self.role_detail.set_pages(self.state.selected_role or "", pages)
        self.stack.setCurrentWidget(self.role_detail)

    @Slot(str)
    def on_load_failed(self, message: str) -> None:
        # The role map has nothing to go back to; the detail view goes back to the map
        can_go_back = self.state.stage == ExplorerStage.ROLE_DETAIL and self.state.layout is not None
        self.status_view.show_error(message, can_go_back)
        self.stack.setCurrentWidget(self.status_view)

    @Slot()
    def on_back(self) -> None:
        self.role_detail.stop()
        self.controller.back_to_map()
        if self.state.layout is not None:
            self.stack.setCurrentWidget(self.role_map)
        else:
            self.controller.load_roles()

    # --- EVENTS ---

    def closeEvent(self, event) -> None:
        self.role_detail.stop()
        self.controller.shutdown()
        self.state.reset()
        super().closeEvent(event)
