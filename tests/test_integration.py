from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from binvalet.main import create_app
from binvalet.persistence.memory import MemStorage


@pytest.fixture
def storage() -> MemStorage:
    return MemStorage(seed=True, today=date(2026, 10, 19))


@pytest.fixture
def api_client(storage: MemStorage, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    from binvalet.persistence.filesystem import FileStorage
    from binvalet.services.routing import service as routing_service

    monkeypatch.setattr(routing_service, "FileStorage", lambda: FileStorage(root=tmp_path))
    return TestClient(create_app(storage=storage))


def test_root_and_health(api_client: TestClient):
    assert api_client.get("/").json()["status"] == "running"
    health = api_client.get("/api/health").json()
    assert health["status"] == "ok"
    assert health["records"]["customers"] == 4


def test_customer_crud(api_client: TestClient):
    listing = api_client.get("/api/customers")
    assert listing.status_code == 200
    assert [item["id"] for item in listing.json()] == [1, 2, 3, 4]

    created = api_client.post(
        "/api/customers",
        json={"name": "Ana Ruiz", "phone": "555-0300", "address": "9 Lake Dr", "route": "Route C"},
    )
    assert created.status_code == 201
    body = created.json()
    assert body["id"] == 5
    assert body["status"] == "active"
    assert body["plan"] == "basic"
    assert body["monthly_rate"] == 59.99

    updated = api_client.put("/api/customers/5", json={"status": "suspended"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "suspended"
    assert updated.json()["address"] == "9 Lake Dr"

    assert api_client.delete("/api/customers/5").status_code == 204
    assert api_client.get("/api/customers/5").status_code == 404
    assert api_client.delete("/api/customers/5").status_code == 404


def test_invalid_customer_payload_returns_400(api_client: TestClient):
    response = api_client.post("/api/customers", json={"name": "No Address", "phone": "555"})
    assert response.status_code == 400
    payload = response.json()
    assert payload["message"] == "Invalid customer data"
    assert payload["errors"]

    bad_status = api_client.put("/api/customers/1", json={"status": "sleeping"})
    assert bad_status.status_code == 400


def test_route_crud_and_actions(api_client: TestClient):
    created = api_client.post(
        "/api/routes",
        json={"name": "Route D - East", "day": "friday", "start_time": "09:30", "total_customers": 4},
    )
    assert created.status_code == 201
    route_id = created.json()["id"]
    assert created.json()["status"] == "pending"

    bad_time = api_client.post("/api/routes", json={"name": "Late", "day": "friday", "start_time": "25:00"})
    assert bad_time.status_code == 400
    assert bad_time.json()["message"] == "Invalid route data"

    started = api_client.post(f"/api/routes/{route_id}/actions/start")
    assert started.json()["status"] == "in_progress"
    progress = api_client.put(f"/api/routes/{route_id}", json={"completed_customers": 1})
    assert progress.json()["progress_percent"] == 25.0
    completed = api_client.post(f"/api/routes/{route_id}/actions/complete")
    assert completed.json()["status"] == "completed"

    assert api_client.delete(f"/api/routes/{route_id}").status_code == 204
    assert api_client.post(f"/api/routes/{route_id}/actions/start").status_code == 404


def test_route_optimize_endpoint(api_client: TestClient, tmp_path: Path):
    response = api_client.post("/api/routes/1/optimize", json={"export": True})
    assert response.status_code == 200
    payload = response.json()
    assert payload["route_name"] == "Route A - North Side"
    assert [stop["customer_id"] for stop in payload["stops"]] == [1, 2]
    assert payload["statistics"] == {"stop_count": 2, "total_distance": 1.77, "estimated_time": 10}
    assert payload["metadata"]["map_overlays"]["route_line"]["geometry"]["type"] == "LineString"

    run_dirs = list((tmp_path / "outputs").glob("route_1_*"))
    assert run_dirs
    assert (run_dirs[0] / "route.geojson").exists()


def test_route_optimize_without_body_and_unknown_route(api_client: TestClient):
    response = api_client.post("/api/routes/2/optimize")
    assert response.status_code == 200
    assert [stop["customer_id"] for stop in response.json()["stops"]] == [3, 4]

    assert api_client.post("/api/routes/99/optimize").status_code == 404


def test_all_customers_map(api_client: TestClient):
    response = api_client.get("/api/routes/map")
    assert response.status_code == 200
    payload = response.json()
    assert [stop["customer_id"] for stop in payload["stops"]] == [1, 4, 3, 2]
    assert payload["statistics"]["estimated_time"] == 17


def test_messages_flow(api_client: TestClient):
    listing = api_client.get("/api/messages").json()
    assert [message["id"] for message in listing] == [2, 1]

    assert [m["id"] for m in api_client.get("/api/messages", params={"search": "reliable"}).json()] == [2]

    patched = api_client.patch("/api/messages/1", json={"is_read": True})
    assert patched.status_code == 200
    assert patched.json()["is_read"] is True

    reply = api_client.post("/api/messages/2/reply", json={"message": "Thanks Sarah!"})
    assert reply.status_code == 201
    assert reply.json()["is_from_customer"] is False

    threads = api_client.get("/api/messages/conversations").json()
    assert threads[0]["customer_name"] == "Sarah Johnson"
    assert len(threads[0]["messages"]) == 2

    assert api_client.post("/api/messages/50/reply", json={"message": "?"}).status_code == 404
    assert api_client.delete("/api/messages/1").status_code == 204


def test_bin_cleaning_flow(api_client: TestClient):
    listing = api_client.get("/api/bin-cleaning").json()
    assert [item["date"] for item in listing] == ["2026-10-19", "2026-10-20"]

    created = api_client.post(
        "/api/bin-cleaning",
        json={
            "customer_id": 2,
            "customer_name": "Sarah Johnson",
            "address": "456 Pine Avenue",
            "date": "2026-10-18",
            "start_time": "09:00",
            "end_time": "10:00",
            "bin_count": 3,
            "price": 4500,
        },
    )
    assert created.status_code == 201
    assert api_client.get("/api/bin-cleaning").json()[0]["id"] == created.json()["id"]

    reversed_window = api_client.post(
        "/api/bin-cleaning",
        json={
            "customer_name": "Sarah Johnson",
            "address": "456 Pine Avenue",
            "date": "2026-10-18",
            "start_time": "11:00",
            "end_time": "10:00",
            "bin_count": 1,
            "price": 2500,
        },
    )
    assert reversed_window.status_code == 400
    assert reversed_window.json()["message"] == "Invalid appointment data"

    completed = api_client.put("/api/bin-cleaning/1", json={"status": "completed"})
    assert completed.json()["status"] == "completed"
    assert api_client.delete("/api/bin-cleaning/1").status_code == 204
    assert api_client.get("/api/bin-cleaning/1").status_code == 404


def test_dashboard_summary(api_client: TestClient):
    api_client.put("/api/bin-cleaning/1", json={"status": "completed"})
    summary = api_client.get("/api/dashboard/summary", params={"day": "2026-10-19"}).json()

    assert summary["weekday"] == "monday"
    assert len(summary["todays_routes"]) == 2
    assert summary["todays_revenue_cents"] == 3500
    assert len(summary["unread_messages"]) == 1


def test_portal_signup_and_member_flow(api_client: TestClient):
    plans = api_client.get("/api/portal/plans").json()
    assert [plan["id"] for plan in plans] == ["basic", "premium", "ultimate"]
    assert plans[1]["popular"] is True

    signup = api_client.post(
        "/api/portal/signup",
        json={"name": "Ana Ruiz", "phone": "555-0300", "address": "9 Lake Dr", "plan": "basic"},
    )
    assert signup.status_code == 201
    member_id = signup.json()["id"]
    assert signup.json()["route"] == "Route A"

    missing_address = api_client.post("/api/portal/signup", json={"name": "X", "phone": "1", "plan": "basic"})
    assert missing_address.status_code == 400

    sent = api_client.post(f"/api/portal/members/{member_id}/messages", json={"message": "Hello!"})
    assert sent.status_code == 201

    view = api_client.get(f"/api/portal/members/{member_id}").json()
    assert view["plan"]["id"] == "basic"
    assert [message["message"] for message in view["messages"]] == ["Hello!"]

    quote = api_client.get(f"/api/portal/members/{member_id}/upgrade-quote").json()
    assert quote["monthly_upgrade_price"] == 140.0

    payment = {
        "cardholder_name": "Ana Ruiz",
        "card_number": "4242424242424242",
        "expiry_date": "12/39",
        "cvv": "123",
        "billing_address": "9 Lake Dr",
        "city": "Orlando",
        "state": "FL",
        "zip_code": "32801",
    }
    declined = api_client.post(
        f"/api/portal/members/{member_id}/upgrade",
        json={"payment": {**payment, "card_number": "4242424242424241"}},
    )
    assert declined.status_code == 402

    upgraded = api_client.post(f"/api/portal/members/{member_id}/upgrade", json={"payment": payment})
    assert upgraded.status_code == 200
    body = upgraded.json()
    assert body["customer"]["plan"] == "ultimate"
    assert body["receipt"]["masked_card"] == "**** 4242"
    assert "4242424242424242" not in upgraded.text

    again = api_client.get(f"/api/portal/members/{member_id}/upgrade-quote")
    assert again.status_code == 400
    assert api_client.get("/api/portal/members/999").status_code == 404


@pytest.mark.parametrize(
    ("path", "listing", "payload"),
    [
        ("/api/customers/1", "/api/customers", {"name": None}),
        ("/api/routes/1", "/api/routes", {"day": None, "start_time": "09:00"}),
        ("/api/bin-cleaning/1", "/api/bin-cleaning", {"date": None}),
        ("/api/messages/1", "/api/messages", {"message": None}),
    ],
)
def test_null_for_required_field_is_rejected(api_client: TestClient, path: str, listing: str, payload: dict):
    response = api_client.put(path, json=payload)
    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid ")

    assert api_client.get(listing).status_code == 200
    assert api_client.get(path).status_code == 200


def test_nullable_fields_accept_null(api_client: TestClient):
    customer = api_client.put("/api/customers/1", json={"email": None})
    assert customer.status_code == 200
    assert customer.json()["email"] is None

    route = api_client.put("/api/routes/1", json={"description": None})
    assert route.status_code == 200
    assert route.json()["description"] is None

    assert api_client.post("/api/routes/1/optimize").status_code == 200


def test_appointment_update_keeps_window_ordered(api_client: TestClient):
    inverted = api_client.put("/api/bin-cleaning/1", json={"end_time": "09:00"})
    assert inverted.status_code == 400

    stored = api_client.get("/api/bin-cleaning/1").json()
    assert (stored["start_time"], stored["end_time"]) == ("14:00", "15:00")

    moved = api_client.put("/api/bin-cleaning/1", json={"start_time": "08:00", "end_time": "09:00"})
    assert moved.status_code == 200
    assert (moved.json()["start_time"], moved.json()["end_time"]) == ("08:00", "09:00")

    assert api_client.put("/api/bin-cleaning/1", json={"start_time": "09:00"}).status_code == 400
