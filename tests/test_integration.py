import pytest
from fastapi.testclient import TestClient

from fleet_dispatch.main import create_app
from fleet_dispatch.models.domain import SimulationInputError
from fleet_dispatch.schemas.simulation import SimulationRequest


@pytest.fixture
def api_client() -> TestClient:
    return TestClient(create_app())


def test_health_endpoints(api_client: TestClient):
    assert api_client.get("/api/health").json() == {"status": "ok"}

    config = api_client.get("/api/health/config").json()
    assert config["costs"]["third_party_fixed_cost"] == 2000.0
    assert config["bounds"]["order_count"] == [10, 150]
    assert config["bounds"]["max_order_count"] == 10_000
    assert config["strategies"] == ["greedy", "premium"]


def test_simulation_endpoint_run(api_client: TestClient):
    request = SimulationRequest(order_count=20, fleet_size=5, seed=3)
    response = api_client.post("/api/simulations/run", json=request.model_dump())

    assert response.status_code == 200
    payload = response.json()
    assert payload["strategy"] == "greedy"
    assert payload["result"]["owned_count"] == 5
    assert payload["result"]["outsourced_count"] == 15
    assert payload["result"]["fleet_utilization_pct"] == 100.0
    assert len(payload["orders"]) == 20
    assert len(payload["schedule"]) == 20
    assert payload["schedule"][0]["vehicle_label"] == "VEH-1"
    assert payload["schedule"][-1]["vehicle_label"] == "3RD-PARTY"
    assert payload["metadata"]["seed"] == 3

    repeat = api_client.post("/api/simulations/run", json=request.model_dump())
    assert repeat.json() == payload


def test_simulation_endpoint_rejects_negative_inputs(api_client: TestClient):
    response = api_client.post("/api/simulations/run", json={"order_count": -1, "fleet_size": 5})
    assert response.status_code == 422

    response = api_client.post("/api/simulations/run", json={"order_count": 5, "fleet_size": 5, "strategy": "optimal"})
    assert response.status_code == 422


def test_simulation_endpoint_maps_engine_errors_to_400(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    from fleet_dispatch.api.routes import simulation as simulation_routes

    def reject(*args, **kwargs):
        raise SimulationInputError("fleet_size must be >= 0, got -3")

    monkeypatch.setattr(simulation_routes, "run_simulation", reject)

    response = api_client.post("/api/simulations/run", json={"order_count": 5, "fleet_size": 3})
    assert response.status_code == 400
    assert "fleet_size" in response.json()["detail"]


def test_schedule_csv_endpoint(api_client: TestClient):
    response = api_client.post("/api/simulations/schedule.csv", json={"order_count": 6, "fleet_size": 2, "seed": 9})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.strip().split("\n")
    assert lines[0] == "order_id,vehicle_label,method,distance_km,cost"
    assert len(lines) == 7
    assert lines[1].split(",")[1] == "VEH-1"


@pytest.mark.parametrize(
    "payload",
    [
        {"order_count": 10**9, "fleet_size": 0},
        {"order_count": 10, "fleet_size": 10**9},
    ],
)
def test_simulation_endpoint_rejects_oversized_runs(api_client: TestClient, payload):
    response = api_client.post("/api/simulations/run", json=payload)

    assert response.status_code == 422
