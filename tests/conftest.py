"""Shared test fixtures for polaris tests."""

import json
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest

from polaris.model.roles import MetricVector, Role, RoleBatch


ROLE_DATA = {
    "personalized": True,
    "roles": [
        {"name": "Data Scientist", "technical": 8, "creative": 5, "business": 4, "customer": 3,
         "distance": 3, "color": "#0ea5e9"},
        {"name": "Product Manager", "technical": 5, "creative": 7, "business": 9, "customer": 7,
         "distance": 6, "color": "#f59e0b"},
        {"name": "UX Designer", "technical": 4, "creative": 9, "business": 5, "customer": 8,
         "distance": 7, "color": "#ec4899"},
        {"name": "Data Analyst", "technical": 7, "creative": 4, "business": 6, "customer": 4,
         "color": "#0284c7"},
    ],
}

PAGE_DATA = {
    "roles": {
        "Data Scientist": [
            {"type": "overview", "description": "Models and insights.", "salary": "$125,000",
             "degree": "MSc Statistics", "source": "BLS"},
            {"type": "day_in_life", "tasks": ["Explore data", "Train a model"]},
            {"type": "sweet_spots", "skills": ["Python", "SQL"], "explanation": "Tooling carries over."},
            {"type": "areas_for_growth", "skills": ["Statistics"], "explanation": "Reason about uncertainty."},
        ],
    },
    "default": [
        {"type": "overview", "description": "Generic role.", "salary": "Varies", "degree": "Any"},
        {"type": "day_in_life", "tasks": ["Plan", "Ship"]},
    ],
}



def pairwise_distances(coordinates):
    """Full (N, N) distance matrix between (x, y) coordinates."""
    pts = np.asarray(coordinates, dtype=np.float64).reshape(-1, 2)
    diff = pts[:, None, :] - pts[None, :, :]
    return np.sqrt((diff ** 2).sum(axis=-1))


@pytest.fixture()
def roles_file(tmp_path):
    path = tmp_path / "roles.json"
    path.write_text(json.dumps(ROLE_DATA), encoding="utf-8")
    return path


@pytest.fixture()
def pages_file(tmp_path):
    path = tmp_path / "pages.json"
    path.write_text(json.dumps(PAGE_DATA), encoding="utf-8")
    return path


@pytest.fixture()
def role_batch():
    return RoleBatch.from_dict(ROLE_DATA)


@pytest.fixture()
def balanced_role():
    """Role 'A' with all metrics at 5 and the default distance."""
    return Role(name="A", metrics=MetricVector(5, 5, 5, 5), distance=5)


@pytest.fixture(scope="session")
def qapp():
    """One offscreen QApplication for all Qt tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def process_events(qapp):
    """Deliver queued cross-thread signals."""
    def _process(rounds: int = 5) -> None:
        for _ in range(rounds):
            qapp.processEvents()
    return _process
