"""
Role Detail View
================
Shows the pages of the selected role as a stack of cards. Holding the Down/Up
arrow keys scrolls continuously through the stack.

Why is this file needed?
------------------------
1. Rendering: `PageStackWidget` paints every page with the visual state of its
   offset from the scroll position (slide, scale, fade, stacking order).
2. Lifetime: `RoleDetailView` owns the `ScrollLoop` and cancels it whenever the
   view goes away (hidden, closed, back, new page set).
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from PySide6.QtCore import QRectF, Qt, Signal, Slot
from PySide6.QtGui import QColor, QFont, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QApplication, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from polaris.model.pages import Page
from polaris.navigation.navigator import ScrollNavigator
from polaris.navigation.scroll_loop import ScrollLoop
from polaris.navigation.visual_state import VisualState, visual_states
from polaris.view.page_content import PageText, describe_page

logger = logging.getLogger(__name__)

CARD_WIDTH_FRACTION = 0.7
CARD_HEIGHT_FRACTION = 0.8
CARD_RADIUS = 18.0


class PageStackWidget(QWidget):
    """Paints the page cards for the current scroll position."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(480, 360)
        self._texts: list[PageText] = []
        self._states: list[VisualState] = []

    @property
    def states(self) -> list[VisualState]:
        return list(self._states)

    def set_pages(self, texts: Sequence[PageText]) -> None:
        self._texts = list(texts)
        self.set_position(0.0)

    def set_position(self, position: float) -> None:
        self._states = visual_states(len(self._texts), position)
        self.update()

    def card_rect(self, state: VisualState) -> QRectF:
        """Card rectangle after translation and scaling around its center."""
        w = self.width() * CARD_WIDTH_FRACTION
        h = self.height() * CARD_HEIGHT_FRACTION
        cx = self.width() / 2
        cy = self.height() / 2 + h * state.translate_y / 100.0
        sw, sh = w * state.scale, h * state.scale
        return QRectF(cx - sw / 2, cy - sh / 2, sw, sh)

    def paint_order(self) -> list[int]:
        """Visible page indices, lowest stacking order first."""
        visible = [i for i, s in enumerate(self._states) if s.visible and s.opacity > 0.0]
        return sorted(visible, key=lambda i: (self._states[i].z_index, i))

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            for index in self.paint_order():
                self._paint_card(painter, self._texts[index], self._states[index])
        finally:
            painter.end()

    def _paint_card(self, painter: QPainter, text: PageText, state: VisualState) -> None:
        rect = self.card_rect(state)
        painter.setOpacity(state.opacity)

        path = QPainterPath()
        path.addRoundedRect(rect, CARD_RADIUS * state.scale, CARD_RADIUS * state.scale)
        painter.fillPath(path, QColor("#ffffff"))
        painter.setPen(QPen(QColor("#e5e7eb"), 1))
        painter.drawPath(path)

        margin = 28 * state.scale
        inner = rect.adjusted(margin, margin, -margin, -margin)

        font = QFont(self.font())
        font.setPointSizeF(max(1.0, 11 * state.scale))
        painter.setFont(font)
        painter.setPen(QColor("#6b7280"))
        intro_rect = QRectF(inner.left(), inner.top(), inner.width(), 40 * state.scale)
        painter.drawText(intro_rect, Qt.TextFlag.TextWordWrap, text.intro)

        title_font = QFont(font)
        title_font.setBold(True)
        title_font.setPointSizeF(max(1.0, 22 * state.scale))
        painter.setFont(title_font)
        painter.setPen(QColor(text.accent))
        title_rect = QRectF(inner.left(), intro_rect.bottom(), inner.width(), 48 * state.scale)
        painter.drawText(title_rect, Qt.TextFlag.TextWordWrap, text.title)

        lines = [f"• {item}" for item in text.items]
        if text.body:
            lines += ["", text.body]
        if text.footer:
            lines += ["", text.footer]

        painter.setFont(font)
        painter.setPen(QColor("#374151"))
        body_rect = QRectF(inner.left(), title_rect.bottom(), inner.width(), inner.bottom() - title_rect.bottom())
        painter.drawText(body_rect, Qt.TextFlag.TextWordWrap, "\n".join(lines))


class RoleDetailView(QWidget):
    back_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.role_name: str = ""

        self.navigator = ScrollNavigator()
        self.scroll_loop = ScrollLoop(self.navigator, parent=self)
        self.scroll_loop.position_changed.connect(self._on_position_changed)

        layout = QVBoxLayout(self)

        self.stack = PageStackWidget(self)
        layout.addWidget(self.stack, 1)

        footer = QHBoxLayout()
        self.btn_back = QPushButton(self.tr("← Back"))
        self.btn_back.clicked.connect(self._on_back_clicked)
        footer.addWidget(self.btn_back)
        footer.addStretch()

        self.lbl_counter = QLabel("")
        self.lbl_counter.setStyleSheet("color: gray;")
        footer.addWidget(self.lbl_counter)

        self.lbl_arrows = QLabel("")
        self.lbl_arrows.setStyleSheet("color: gray; font-weight: bold;")
        footer.addWidget(self.lbl_arrows)
        layout.addLayout(footer)

    # ---- public API ----

    def set_pages(self, role_name: str, pages: Sequence[Page]) -> None:
        """Show a new page set, back on the first page, and start listening for arrows."""
        self.stop()
        self.role_name = role_name
        self.stack.set_pages([describe_page(page, role_name) for page in pages])
        self.navigator.reset(len(pages))
        self._update_hints()

        if pages:
            self.scroll_loop.start(QApplication.instance() or self)
        logger.info(f"Showing {len(pages)} pages for '{role_name}'.")

    def stop(self) -> None:
        self.scroll_loop.cancel()

    # ---- Qt hooks ----

    def showEvent(self, event) -> None:
        super().showEvent(event)
        if self.navigator.page_count and not self.scroll_loop.is_active:
            self.scroll_loop.start(QApplication.instance() or self)

    def hideEvent(self, event) -> None:
        self.stop()
        super().hideEvent(event)

    def closeEvent(self, event) -> None:
        self.stop()
        super().closeEvent(event)

    # ---- slots ----

    @Slot(float)
    def _on_position_changed(self, position: float) -> None:
        self.stack.set_position(position)
        self._update_hints()

    @Slot()
    def _on_back_clicked(self) -> None:
        self.stop()
        self.back_requested.emit()

    def _update_hints(self) -> None:
        nav = self.navigator
        self.lbl_counter.setText(nav.page_label if nav.page_count else self.tr("No pages available"))
        arrows = ("▲" if nav.shows_up_hint else "") + ("▼" if nav.shows_down_hint else "")
        self.lbl_arrows.setText(arrows)
