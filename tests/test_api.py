"""Tests for the REST API."""

import json

import pytest
from fastapi.testclient import TestClient

from printsize.api import app, get_app_reference, get_app_settings, load_reference_cached
from printsize.config import Settings
from printsize.models import PaperFormat, QualityTier, ReferenceData
from printsize.reference import default_reference_data


@pytest.fixture
def client():
    app.dependency_overrides[get_app_settings] = lambda: Settings(_env_file=None)
    app.dependency_overrides[get_app_reference] = default_reference_data
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_cameras_sorted(client):
    names = [c["name"] for c in client.get("/cameras").json()]
    assert len(names) == 23
    assert names == sorted(names)


def test_quality_tiers(client):
    tiers = client.get("/quality-tiers").json()
    assert [t["dpi"] for t in tiers] == [300, 240, 150, 100]


def test_paper_formats(client):
    formats = client.get("/paper-formats").json()
    assert formats[3] == {"name": "30x40", "width_cm": 30.0, "height_cm": 40.0}


def test_calculate_custom_megapixels(client):
    """24 MP gives 6000x4000 px and 50.8 x 33.9 cm at 300 DPI."""
    resp = client.get("/calculate", params={"megapixels": 24})
    assert resp.status_code == 200
    data = resp.json()

    assert data["camera"] is None
    assert data["resolution"]["width"] == 6000
    assert data["resolution"]["height"] == 4000

    excellent = data["print_sizes"][0]
    assert excellent["tier"] == "excellent"
    assert excellent["display_width_cm"] == 50.8
    assert excellent["display_height_cm"] == 33.9
    assert excellent["height_cm"] == pytest.approx(33.8666667)

    rows = {row["format"]: row["fits"] for row in data["compatibility"]}
    assert rows["30x40"]["excellent"] is True
    assert rows["70x100"] == {
        "excellent": False, "very_good": False, "good": False, "acceptable": True,
    }


def test_calculate_camera(client):
    data = client.get("/calculate", params={"camera": "Samsung Galaxy S24 Ultra"}).json()
    assert data["camera"] == "Samsung Galaxy S24 Ultra"
    assert data["megapixels"] == 200


def test_calculate_default(client):
    """No parameters uses the configured default of 24 MP."""
    data = client.get("/calculate").json()
    assert data["megapixels"] == 24


def test_unknown_camera_404(client):
    resp = client.get("/calculate", params={"camera": "Kodak Brownie"})
    assert resp.status_code == 404
    assert "Kodak Brownie" in resp.json()["detail"]


@pytest.mark.parametrize("mp", [0, 0.5, 250, -24])
def test_out_of_range_megapixels_422(client, mp):
    resp = client.get("/calculate", params={"megapixels": mp})
    assert resp.status_code == 422


def test_synthetic_reference(client):
    """The endpoint uses whatever reference data is injected."""
    app.dependency_overrides[get_app_reference] = lambda: ReferenceData(
        quality_tiers=(QualityTier(key="draft", name="Draft", dpi=50),),
        paper_formats=(PaperFormat(name="wall", width_cm=300, height_cm=200),),
    )
    data = client.get("/calculate", params={"megapixels": 24}).json()
    assert data["compatibility"] == [
        {"format": "wall", "width_cm": 300.0, "height_cm": 200.0, "fits": {"draft": True}},
    ]


class TestReferenceCaching:
    @pytest.fixture(autouse=True)
    def fresh_caches(self):
        get_app_settings.cache_clear()
        load_reference_cached.cache_clear()
        yield
        get_app_settings.cache_clear()
        load_reference_cached.cache_clear()

    def test_settings_built_once(self):
        """Settings are created once per process, not per request."""
        assert get_app_settings() is get_app_settings()

    def test_default_tables_built_once(self):
        settings = Settings(_env_file=None)
        assert get_app_reference(settings) is get_app_reference(settings)

    def test_reference_file_read_once(self, tmp_path):
        """A configured JSON file is loaded on first use and not re-read afterwards."""
        path = tmp_path / "tables.json"
        path.write_text(json.dumps({
            "quality_tiers": [{"key": "web", "name": "Web", "dpi": 72}],
        }), encoding="utf-8")
        settings = Settings(_env_file=None, reference_data_path=str(path))

        first = get_app_reference(settings)
        path.write_text("{not json", encoding="utf-8")
        second = get_app_reference(settings)

        assert second is first
        assert [t.key for t in second.quality_tiers] == ["web"]
