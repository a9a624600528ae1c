import json

import pytest

from campus_nav.adapters.graph import JSONGraphRepository
from campus_nav.adapters.locations import JSONLocationRepository
from campus_nav.domain.errors import GraphError, LocationError
from campus_nav.domain.models import GeoLocation, Location


def test_missing_graph_file_loads_empty(graph_config):
    repository = JSONGraphRepository(graph_config)

    assert repository.load() == {}


def test_graph_round_trip(graph_config, triangle):
    repository = JSONGraphRepository(graph_config)

    repository.save(triangle)

    assert repository.load() == triangle
    # pretty-printed like the original graph.json
    assert graph_config.graph_path.read_text(encoding="utf-8").startswith("{\n  ")


def test_save_leaves_no_temp_files(graph_config, triangle):
    JSONGraphRepository(graph_config).save(triangle)

    assert [p.name for p in graph_config.data_dir.iterdir()] == ["graph.json"]


def test_invalid_json_raises_graph_error(graph_config):
    graph_config.graph_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(GraphError) as exc:
        JSONGraphRepository(graph_config).load()

    assert exc.value.file_path == str(graph_config.graph_path)


def test_undecodable_graph_file_raises_graph_error(graph_config):
    graph_config.graph_path.write_bytes(b'{"A\xff": {}}')

    with pytest.raises(GraphError) as exc:
        JSONGraphRepository(graph_config).load()

    assert isinstance(exc.value.cause, UnicodeDecodeError)


def test_wrong_shape_raises_graph_error(graph_config):
    graph_config.graph_path.write_text(json.dumps({"A": [1, 2]}), encoding="utf-8")

    with pytest.raises(GraphError):
        JSONGraphRepository(graph_config).load()


def test_locations_loaded_in_file_order(seeded_config):
    repository = JSONLocationRepository(seeded_config)

    names = [loc.name for loc in repository.list_locations()]

    assert names == ["A", "B", "C"]
    assert repository.get_location("C").campus == "South"
    assert repository.get_location("Nowhere") is None


def test_missing_locations_file_is_empty(graph_config):
    assert JSONLocationRepository(graph_config).list_locations() == []


def test_invalid_location_records_are_skipped(graph_config):
    records = [
        {"name": "Ok", "lat": 18.5, "lng": 73.8},
        {"name": "NoLat", "lng": 73.8},
        {"name": "OutOfRange", "lat": 123.0, "lng": 73.8},
    ]
    graph_config.locations_path.write_text(json.dumps(records), encoding="utf-8")

    locations = JSONLocationRepository(graph_config).list_locations()

    assert [loc.name for loc in locations] == ["Ok"]
    assert locations[0].campus == ""


def test_add_location_persists(graph_config):
    repository = JSONLocationRepository(graph_config)
    location = Location("Library", GeoLocation(18.53, 73.85), "North")

    repository.add_location(location)

    stored = json.loads(graph_config.locations_path.read_text(encoding="utf-8"))
    assert stored == [{"name": "Library", "lat": 18.53, "lng": 73.85, "campus": "North"}]
    assert JSONLocationRepository(graph_config).get_location("Library") == location


def test_add_duplicate_location_raises(seeded_config):
    repository = JSONLocationRepository(seeded_config)

    with pytest.raises(LocationError):
        repository.add_location(Location("A", GeoLocation(0.0, 0.0)))

    assert len(repository.list_locations()) == 3


def test_update_location(seeded_config):
    repository = JSONLocationRepository(seeded_config)

    repository.update_location(Location("B", GeoLocation(1.0, 2.0), "South"))

    reloaded = JSONLocationRepository(seeded_config).get_location("B")
    assert reloaded.location == GeoLocation(1.0, 2.0)
    assert reloaded.campus == "South"


def test_update_unknown_location_raises(seeded_config):
    with pytest.raises(LocationError):
        JSONLocationRepository(seeded_config).update_location(
            Location("Z", GeoLocation(0.0, 0.0))
        )


def test_locations_file_must_be_a_list(graph_config):
    graph_config.locations_path.write_text(json.dumps({"A": 1}), encoding="utf-8")

    with pytest.raises(LocationError):
        JSONLocationRepository(graph_config).list_locations()


def test_undecodable_locations_file_raises_location_error(graph_config):
    graph_config.locations_path.write_bytes(b'[{"name": "A\xff"}]')

    with pytest.raises(LocationError) as exc:
        JSONLocationRepository(graph_config).list_locations()

    assert isinstance(exc.value.cause, UnicodeDecodeError)


def test_duplicate_location_records_warn_and_keep_later(graph_config, caplog):
    records = [
        {"name": "Gate", "lat": 18.5, "lng": 73.8, "campus": "North"},
        {"name": "Gate", "lat": 18.6, "lng": 73.9, "campus": "South"},
    ]
    graph_config.locations_path.write_text(json.dumps(records), encoding="utf-8")

    with caplog.at_level("WARNING", logger="campus_nav.adapters.locations"):
        locations = JSONLocationRepository(graph_config).list_locations()

    assert len(locations) == 1
    assert locations[0].campus == "South"
    assert any(
        r.getMessage() == "Duplicate GPS record, keeping the later one"
        for r in caplog.records
    )
