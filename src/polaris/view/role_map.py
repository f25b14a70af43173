"""
Role Map View
=============
pyqtgraph canvas with one clickable marker per placed role.

The plot uses canvas pixel coordinates with the y axis pointing down, so the
coordinates from the layout engine are drawn as they are.
"""
from __future__ import annotations

import logging
from typing import Optional

import pyqtgraph as pg
from PySide6.QtCore import Signal
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from polaris.layout.canvas import CanvasGeometry, DEFAULT_CANVAS
from polaris.layout.pipeline import RoleLayout

logger = logging.getLogger(__name__)

MARKER_SIZE = 12
LABEL_OFFSET = 18.0


class RoleMapView(QWidget):
    role_selected = Signal(str)

    def __init__(self, canvas: CanvasGeometry = DEFAULT_CANVAS, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.canvas = canvas
        self._layout: Optional[RoleLayout] = None
        self._label_items: list[pg.TextItem] = []

        v = QVBoxLayout(self)

        self.lbl_title = QLabel(self.tr("Select Your Target Role"))
        self.lbl_title.setStyleSheet("font-size: 18px; font-weight: bold;")
        v.addWidget(self.lbl_title)

        self.lbl_subtitle = QLabel("")
        self.lbl_subtitle.setStyleSheet("color: gray;")
        v.addWidget(self.lbl_subtitle)

        self.plot_widget = pg.PlotWidget(background="w")
        v.addWidget(self.plot_widget, 1)
        self._configure_plot()

        self.scatter = pg.ScatterPlotItem(size=MARKER_SIZE, pen=pg.mkPen("w", width=1.5), hoverable=True)
        self.scatter.sigClicked.connect(self._on_points_clicked)
        self.plot_widget.addItem(self.scatter)

    # ---- public API ----

    @property
    def role_layout(self) -> Optional[RoleLayout]:
        return self._layout

    def set_layout(self, layout: RoleLayout, personalized: bool = False, current_role: str = "") -> None:
        """Replace all markers with the given layout."""
        self._layout = layout

        if personalized and current_role:
            self.lbl_subtitle.setText(self.tr("Personalized roles based on {0}").format(current_role))
        else:
            self.lbl_subtitle.setText(self.tr("Roles positioned by work style and focus area"))

        self._clear_labels()
        self.scatter.setData(
            x=[role.x for role in layout.roles],
            y=[role.y for role in layout.roles],
            brush=[pg.mkBrush(role.color) for role in layout.roles],
        )

        for role in layout.roles:
            label = pg.TextItem(role.name, color="#1f2937", anchor=(0.5, 0.0))
            label.setPos(role.x, role.y + LABEL_OFFSET)
            self.plot_widget.addItem(label)
            self._label_items.append(label)

        logger.debug(f"Role map shows {len(layout)} roles.")

    def select(self, role_name: str) -> None:
        """Dispatch a role selection by name (same path as a marker click)."""
        if self._layout is None or self._layout.find(role_name) is None:
            raise KeyError(f"No role named '{role_name}' on the map.")
        self.role_selected.emit(role_name)

    # ---- internals ----

    def _configure_plot(self) -> None:
        c = self.canvas
        item = self.plot_widget.getPlotItem()
        item.hideAxis("left")
        item.hideAxis("bottom")
        item.setMenuEnabled(False)
        item.hideButtons()

        vb = item.getViewBox()
        vb.invertY(True)
        vb.setAspectLocked(True)
        vb.setMouseEnabled(x=False, y=False)
        vb.setRange(xRange=(0, c.width), yRange=(0, c.height), padding=0)

        # Quarter guides and center axes
        light = pg.mkPen("#cbd5e0", width=1)
        strong = pg.mkPen("#94a3b8", width=2)
        for fx in (0.25, 0.75):
            item.plot([c.width * fx] * 2, [c.padding, c.height - c.padding], pen=light)
        for fy in (0.25, 0.75):
            item.plot([c.padding, c.width - c.padding], [c.height * fy] * 2, pen=light)
        item.plot([c.width / 2] * 2, [c.padding, c.height - c.padding], pen=strong)
        item.plot([c.padding, c.width - c.padding], [c.height / 2] * 2, pen=strong)

        axis_labels = [
            (self.tr("Strategic / Conceptual"), c.width / 2, 30.0, 0),
            (self.tr("Tactical / Execution"), c.width / 2, c.height - 15.0, 0),
            (self.tr("People-Focused"), 25.0, c.height / 2, 90),
            (self.tr("Systems-Focused"), c.width - 25.0, c.height / 2, -90),
        ]
        for text, x, y, angle in axis_labels:
            label = pg.TextItem(text, color="#64748b", anchor=(0.5, 0.5), angle=angle)
            label.setPos(x, y)
            item.addItem(label)

    def _clear_labels(self) -> None:
        for label in self._label_items:
            self.plot_widget.removeItem(label)
        self._label_items.clear()

    def _on_points_clicked(self, _item, points, *_) -> None:
        if len(points) == 0 or self._layout is None:
            return
        pos = points[0].pos()
        role = self._layout.role_at(pos.x(), pos.y(), radius=MARKER_SIZE)
        if role is None:
            return
        logger.info(f"Role clicked on map: {role.name}")
        self.select(role.name)
