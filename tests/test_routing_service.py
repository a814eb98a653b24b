import json
from pathlib import Path

import pytest

from binvalet.persistence.memory import MemStorage
from binvalet.schemas.routing import RouteOptimizationRequest
from binvalet.services.errors import NotFoundError
from binvalet.services.routing import service as routing_service


@pytest.fixture
def storage() -> MemStorage:
    return MemStorage(seed=True)


def test_route_label_and_customer_filter(storage: MemStorage):
    north = storage.get_route(1)
    assert routing_service.route_label(north) == "Route A"

    selected = routing_service.customers_for_route(storage.list_customers(), north)
    assert [customer.name for customer in selected] == ["John Smith", "Sarah Johnson"]

    downtown = storage.get_route(3)
    assert routing_service.customers_for_route(storage.list_customers(), downtown) == []
    assert len(routing_service.customers_for_route(storage.list_customers(), None)) == 4


def test_build_route_map_for_route(storage: MemStorage):
    route_map = routing_service.build_route_map(storage, route_id=2)

    assert route_map.route_name == "Route B - South Side"
    assert [leg.customer.id for leg in route_map.legs] == [3, 4]
    assert route_map.statistics.stop_count == 2
    assert route_map.statistics.total_distance == 1.67
    assert route_map.statistics.estimated_time == 9
    line = route_map.metadata["map_overlays"]["route_line"]
    assert line["geometry"]["type"] == "LineString"
    assert len(line["geometry"]["coordinates"]) == 2


def test_build_route_map_all_customers(storage: MemStorage):
    route_map = routing_service.build_route_map(storage)

    assert route_map.route_id is None
    assert [leg.customer.id for leg in route_map.legs] == [1, 4, 3, 2]
    assert route_map.statistics.total_distance == 2.5
    assert route_map.statistics.estimated_time == 17


def test_customer_ids_restrict_and_set_start(storage: MemStorage):
    payload = RouteOptimizationRequest(customer_ids=[3, 1, 4, 2, 99])
    route_map = routing_service.build_route_map(storage, payload=payload)

    assert [leg.customer.id for leg in route_map.legs] == [3, 2, 1, 4]


def test_empty_route_has_no_line(storage: MemStorage):
    route_map = routing_service.build_route_map(storage, route_id=3)

    assert route_map.legs == []
    assert route_map.statistics.stop_count == 0
    assert route_map.statistics.estimated_time == 0
    assert "map_overlays" not in route_map.metadata


def test_unknown_route_raises(storage: MemStorage):
    with pytest.raises(NotFoundError):
        routing_service.build_route_map(storage, route_id=404)


def test_export_writes_outputs(storage: MemStorage, monkeypatch, tmp_path: Path):
    original_storage = routing_service.FileStorage
    monkeypatch.setattr(routing_service, "FileStorage", lambda: original_storage(root=tmp_path))

    route_map = routing_service.build_route_map(
        storage, route_id=1, payload=RouteOptimizationRequest(export=True)
    )

    run_dirs = list((tmp_path / "outputs").iterdir())
    assert len(run_dirs) == 1
    run_dir = run_dirs[0]
    assert run_dir.name.startswith("route_1_")
    assert route_map.metadata["export_directory"] == str(run_dir)

    summary = json.loads((run_dir / "summary.json").read_text(encoding="utf-8"))
    assert summary["statistics"] == {"stop_count": 2, "total_distance": 1.77, "estimated_time": 10}

    stops_csv = (run_dir / "stops.csv").read_text(encoding="utf-8")
    assert stops_csv.startswith("route_name,sequence,customer_id")
    assert "John Smith" in stops_csv and "Sarah Johnson" in stops_csv

    geojson = json.loads((run_dir / "route.geojson").read_text(encoding="utf-8"))
    assert geojson["type"] == "FeatureCollection"
    assert [feature["geometry"]["type"] for feature in geojson["features"]] == ["LineString", "Point", "Point"]


def test_route_progress_and_actions(storage: MemStorage):
    route = storage.update_route(1, {"completed_customers": 3})
    assert routing_service.route_progress(route) == pytest.approx(20.0)
    assert routing_service.route_progress(storage.update_route(1, {"total_customers": 0})) == 0.0

    assert routing_service.advance_route_status(route, "start") == "in_progress"
    assert routing_service.advance_route_status(route, "complete") == "completed"
    assert routing_service.advance_route_status(route, "pause") == route.status
