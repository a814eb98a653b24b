from pathlib import Path

from binvalet.persistence.filesystem import FileStorage


def test_file_storage_creates_run_directory(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(prefix="route_1")

    assert run_dir.exists()
    assert run_dir.is_dir()
    assert run_dir.parent == tmp_path / "outputs"
    assert run_dir.name.startswith("route_1_")


def test_file_storage_writes_json_and_text(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory()

    summary_path = run_dir / "summary.json"
    stops_path = run_dir / "stops.csv"

    storage.write_json(summary_path, {"hello": "world"})
    storage.write_text(stops_path, "a,b\n1,2\n")

    assert summary_path.read_text(encoding="utf-8") == '{\n  "hello": "world"\n}'
    assert stops_path.read_text(encoding="utf-8") == "a,b\n1,2\n"


def test_export_run_writes_files_by_suffix(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.export_run(
        "route_2",
        {
            "summary.json": {"stops": 2},
            "route.geojson": {"type": "FeatureCollection", "features": []},
            "stops.csv": "sequence,name\n1,Mike Davis\n",
        },
    )

    assert sorted(path.name for path in run_dir.iterdir()) == ["route.geojson", "stops.csv", "summary.json"]
    assert '"FeatureCollection"' in (run_dir / "route.geojson").read_text(encoding="utf-8")
    assert (run_dir / "stops.csv").read_text(encoding="utf-8") == "sequence,name\n1,Mike Davis\n"


def test_list_runs_filters_by_prefix(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    first = storage.export_run("route_1", {"summary.json": {}})
    storage.export_run("route_all", {"summary.json": {}})
    second = storage.export_run("route_1", {"summary.json": {}})

    assert storage.list_runs("route_1") == [first, second]
    assert len(storage.list_runs()) == 3
