import pytest
from fastapi.testclient import TestClient

from app.domains.dashboard.service import DashboardService
from app.domains.theme.service import ThemeStore
from app.main import app

from fakes import JEONJU, FakeLocationService, FakeWeatherService, make_location

JEONJU_INFO = make_location(JEONJU, "전라북도", "전주시")


@pytest.fixture
def weather():
    return FakeWeatherService()


@pytest.fixture
def client(tmp_path, weather, fixed_clock):
    # lifespan을 돌리지 않고 (외부 API 호출 없이) 상태만 직접 주입
    location = FakeLocationService(
        by_coordinate={(JEONJU.lat, JEONJU.lng): JEONJU_INFO},
        by_query={"전주": JEONJU_INFO},
    )
    app.state.dashboard = DashboardService(location, weather, clock=fixed_clock)
    app.state.theme_store = ThemeStore(str(tmp_path / "theme.json"))
    return TestClient(app)


def test_health_check(client):
    assert client.get("/").json()["status"] == "ok"


def test_dashboard_initial_view(client):
    payload = client.get("/api/dashboard").json()
    assert payload["location"]["city_label"] == "서울특별시"
    assert payload["snapshot"] is None


def test_refresh_returns_snapshot_with_display_values(client):
    payload = client.post("/api/dashboard/refresh").json()
    assert payload["notice"] is None
    assert payload["last_update"] == "2026/10/16 14:05"
    assert payload["snapshot"]["current"]["temp_display"] == "20"


def test_refresh_failure_returns_notice(client, weather):
    weather.fail = True
    response = client.post("/api/dashboard/refresh")
    assert response.status_code == 200
    assert response.json()["notice"] == "날씨 정보를 불러오지 못했습니다."


def test_map_click_inside_korea(client):
    response = client.post("/api/location/click", json={"lat": JEONJU.lat, "lng": JEONJU.lng})
    payload = response.json()
    assert response.status_code == 200
    assert payload["location"]["city_label"] == "전주시, 전라북도"
    assert payload["location"]["grid"] == {"nx": 63, "ny": 89}


def test_map_click_outside_korea_keeps_location(client):
    payload = client.post("/api/location/click", json={"lat": 35.6762, "lng": 139.6503}).json()
    assert payload["notice"] == "대한민국 영역만 선택 가능합니다."
    assert payload["location"]["city_label"] == "서울특별시"


def test_map_click_invalid_latitude(client):
    response = client.post("/api/location/click", json={"lat": 123.0, "lng": 127.0})
    assert response.status_code == 422
    assert response.json()["status"] == "fail"


def test_search(client):
    assert client.post("/api/location/search", json={"query": "전주"}).json()["location"]["city_label"] == "전주시, 전라북도"
    assert client.post("/api/location/search", json={"query": "아무데나"}).json()["notice"] == "검색 결과가 없습니다."


def test_map_config(client):
    payload = client.get("/api/location/map-config").json()
    assert payload["bounds"] == {"north": 38.63, "south": 33.0, "west": 124.6, "east": 131.87}
    assert payload["center"] == {"lat": 37.5665, "lng": 126.978}
    assert payload["zoom"] == 11
    assert payload["min_zoom"] == 6
    assert payload["strict_bounds"] is True


def test_grid_endpoint(client):
    assert client.get("/api/weather/grid", params={"lat": 37.5665, "lng": 126.978}).json() == {"nx": 60, "ny": 127}


def test_theme_routes(client):
    assert client.get("/api/theme").json() == {"theme": "light"}
    assert client.post("/api/theme/toggle").json() == {"theme": "dark"}
    assert client.put("/api/theme", json={"theme": "light"}).json() == {"theme": "light"}
    assert client.put("/api/theme", json={"theme": "blue"}).status_code == 422


def test_unhandled_error_uses_global_handler(tmp_path):
    app.state.dashboard = None
    app.state.theme_store = ThemeStore(str(tmp_path / "theme.json"))
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/dashboard")

    assert response.status_code == 500
    assert response.json()["status"] == "error"
