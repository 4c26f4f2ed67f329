import pytest
from fastapi.testclient import TestClient

from conftest import FakeCommandRunner, adb_devices_output, make_gpx
from location_simulator.api.dependencies import get_simulation_service
from location_simulator.domains.coordinates.services.coordinate_service import (
    CoordinateService,
)
from location_simulator.domains.simulation.services.simulation_service import (
    SimulationService,
)
from location_simulator.main import app


@pytest.fixture
def client_for():
    def build(runner):
        app.dependency_overrides[get_simulation_service] = lambda: SimulationService(
            runner, delay_ms=0
        )
        return TestClient(app)

    yield build
    app.dependency_overrides.clear()


def test_health(client_for):
    response = client_for(FakeCommandRunner()).get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_manual_coordinate_on_ios(client_for, ios_runner):
    client = client_for(ios_runner)

    response = client.post("/api/simulate", data={"platform": "iOS", "manual": "19.4326,-99.1332"})

    assert response.status_code == 200
    assert response.json() == {"total": 1}
    assert ios_runner.dispatch_calls == [
        ["xcrun", "simctl", "location", "A1B2", "set", "19.4326,-99.1332"]
    ]


def test_batch_without_emulators(client_for):
    runner = FakeCommandRunner(listing=adb_devices_output())
    client = client_for(runner)

    response = client.post("/api/simulate", data={"platform": "android", "batch": "1,2\n3,4"})

    assert response.status_code == 500
    assert response.json() == {"error": "No connected Android emulators"}
    assert runner.dispatch_calls == []


def test_missing_platform_defaults_to_android(client_for, android_runner):
    response = client_for(android_runner).post("/api/simulate", data={"batch": "1,2\n3,4"})

    assert response.json() == {"total": 2}
    assert len(android_runner.dispatch_calls) == 4
    assert android_runner.calls[0] == ["adb", "devices"]


def test_no_coordinates_is_an_error(client_for, android_runner):
    response = client_for(android_runner).post("/api/simulate", data={"platform": "android"})

    assert response.status_code == 500
    assert response.json() == {"error": "No coordinates were provided"}
    assert android_runner.calls == []


def test_gpx_upload(client_for, android_runner):
    gpx = make_gpx([("25.7213", "-100.3737"), ("25.7220", "-100.3740")])

    response = client_for(android_runner).post(
        "/api/simulate",
        data={"platform": "android"},
        files={"gpx": ("route.gpx", gpx, "application/gpx+xml")},
    )

    assert response.status_code == 200
    assert response.json() == {"total": 2}
    assert [call[6:] for call in android_runner.dispatch_calls[::2]] == [
        ["-100.3737", "25.7213"],
        ["-100.3740", "25.7220"],
    ]


def test_malformed_gpx_upload(client_for, android_runner):
    response = client_for(android_runner).post(
        "/api/simulate",
        files={"gpx": ("route.gpx", b"<gpx><trk>", "application/gpx+xml")},
    )

    assert response.status_code == 500
    assert response.json()["error"].startswith("Invalid GPX file")
    assert android_runner.calls == []


def test_unexpected_error_is_reported_generically(client_for, android_runner, monkeypatch):
    async def explode(self, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(CoordinateService, "extract_coordinates", explode)

    response = client_for(android_runner).post("/api/simulate", data={"manual": "1,2"})

    assert response.status_code == 500
    assert response.json() == {"error": "Unknown error while simulating locations"}


def test_list_devices(client_for, android_runner):
    response = client_for(android_runner).get("/api/devices", params={"platform": "ANDROID"})

    assert response.status_code == 200
    assert response.json() == {
        "platform": "android",
        "devices": ["emulator-5554", "emulator-5556"],
    }


def test_list_devices_discovery_failure(client_for):
    runner = FakeCommandRunner(listing="not json")

    response = client_for(runner).get("/api/devices", params={"platform": "ios"})

    assert response.status_code == 500
    assert "simctl" in response.json()["error"]


def test_empty_manual_field_still_takes_precedence(client_for, android_runner):
    response = client_for(android_runner).post(
        "/api/simulate", data={"manual": "", "batch": "1,2\n3,4"}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "No coordinates were provided"}
    assert android_runner.calls == []


def test_gpx_sent_as_text_is_reported_as_error(client_for, android_runner):
    response = client_for(android_runner).post("/api/simulate", data={"gpx": "<gpx/>"})

    assert response.status_code == 500
    assert set(response.json()) == {"error"}
    assert response.json()["error"].startswith("Invalid request: body.gpx")
    assert android_runner.calls == []
