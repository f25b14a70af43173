"""Tests for the JSON data sources and the role model."""

import json

import pytest

from polaris.config import DEFAULT_PAGES_PATH, DEFAULT_ROLES_PATH
from polaris.model.pages import OverviewPage, PageType
from polaris.model.roles import MetricVector, Role, RoleBatch
from polaris.model.sources import DataSourceError, JsonPageSource, JsonRoleSource


class TestRoleModel:
    def test_from_dict(self):
        role = Role.from_dict({"name": "X", "technical": 3, "creative": "4", "color": "#fff"})
        assert role.metrics == MetricVector(technical=3.0, creative=4.0, business=None, customer=None)
        assert role.distance is None
        assert role.color == "#fff"

    def test_round_trip_keeps_distance(self):
        role = Role(name="X", metrics=MetricVector(1, 2, 3, 4), distance=2.5)
        assert Role.from_dict(role.to_dict()) == role

    def test_name_required(self):
        with pytest.raises(ValueError):
            Role.from_dict({"technical": 3})

    def test_bad_number(self):
        with pytest.raises(ValueError):
            Role.from_dict({"name": "X", "technical": "lots"})

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="already exists"):
            RoleBatch(roles=(Role("X"), Role("X")))


class TestJsonRoleSource:
    def test_fetch_roles(self, roles_file):
        batch = JsonRoleSource(roles_file).fetch_roles("Backend Developer", MetricVector(8, 4, 3, 4))
        assert batch.personalized is True
        assert batch.names[0] == "Data Scientist"
        assert len(batch.roles) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataSourceError, match="Could not read"):
            JsonRoleSource(tmp_path / "nope.json").fetch_roles("")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "roles.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DataSourceError, match="not valid JSON"):
            JsonRoleSource(path).fetch_roles("")

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "roles.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(DataSourceError):
            JsonRoleSource(path).fetch_roles("")

    def test_duplicate_names(self, tmp_path):
        path = tmp_path / "roles.json"
        path.write_text(json.dumps({"roles": [{"name": "A"}, {"name": "A"}]}), encoding="utf-8")
        with pytest.raises(DataSourceError, match="Invalid role data"):
            JsonRoleSource(path).fetch_roles("")

    def test_personalized_defaults_to_false(self, tmp_path):
        path = tmp_path / "roles.json"
        path.write_text(json.dumps({"roles": [{"name": "A"}]}), encoding="utf-8")
        assert JsonRoleSource(path).fetch_roles("").personalized is False

    @pytest.mark.parametrize("flag", ["false", 1, None])
    def test_personalized_must_be_a_bool(self, tmp_path, flag):
        path = tmp_path / "roles.json"
        path.write_text(json.dumps({"personalized": flag, "roles": [{"name": "A"}]}), encoding="utf-8")
        with pytest.raises(DataSourceError, match="personalized"):
            JsonRoleSource(path).fetch_roles("")


class TestJsonPageSource:
    def test_pages_for_known_role(self, pages_file):
        pages = JsonPageSource(pages_file).fetch_pages("Data Scientist")
        assert len(pages) == 4
        assert isinstance(pages[0], OverviewPage)
        assert pages[3].type == PageType.AREAS_FOR_GROWTH

    def test_default_pages(self, pages_file):
        pages = JsonPageSource(pages_file).fetch_pages("Astronaut", "Pilot", None, ["flying"])
        assert [p.type for p in pages] == [PageType.OVERVIEW, PageType.DAY_IN_LIFE]

    def test_no_pages_at_all(self, tmp_path):
        path = tmp_path / "pages.json"
        path.write_text(json.dumps({"roles": {}}), encoding="utf-8")
        with pytest.raises(DataSourceError, match="No pages available"):
            JsonPageSource(path).fetch_pages("Astronaut")

    def test_bad_page(self, tmp_path):
        path = tmp_path / "pages.json"
        path.write_text(json.dumps({"default": [{"type": "poem"}]}), encoding="utf-8")
        with pytest.raises(DataSourceError, match="Invalid page data"):
            JsonPageSource(path).fetch_pages("Astronaut")


class TestBundledData:
    def test_bundled_roles_load(self):
        batch = JsonRoleSource(DEFAULT_ROLES_PATH).fetch_roles("")
        assert len(batch.roles) >= 1

    def test_bundled_pages_load(self):
        pages = JsonPageSource(DEFAULT_PAGES_PATH).fetch_pages("Data Scientist")
        assert [p.type for p in pages] == list(PageType)
