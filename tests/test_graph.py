import math

from campus_nav.domain.models import PathStatus
from campus_nav.graph import GraphStore, dijkstra, shortest_path


def test_shortest_path_prefers_cheaper_detour(triangle_store):
    result = shortest_path(triangle_store.snapshot(), "A", "C")

    assert result.status is PathStatus.FOUND
    assert result.path == ("A", "B", "C")
    assert result.distance == 8.0


def test_shortest_path_is_symmetric(triangle_store):
    result = shortest_path(triangle_store.snapshot(), "C", "A")

    assert result.path == ("C", "B", "A")
    assert result.distance == 8.0


def test_shortest_path_direct_edge():
    graph = {"A": {"B": 10.0}, "B": {"A": 10.0}}

    result = shortest_path(graph, "A", "B")

    assert result.path == ("A", "B")
    assert result.distance == 10.0


def test_self_path_is_single_node(triangle_store):
    result = shortest_path(triangle_store.snapshot(), "B", "B")

    assert result.path == ("B",)
    assert result.distance == 0.0
    assert result.status is PathStatus.FOUND


def test_disconnected_nodes_report_no_path():
    store = GraphStore.from_adjacency(
        {"A": {"B": 1}, "B": {"A": 1}, "X": {"Y": 2}, "Y": {"X": 2}}
    )

    result = shortest_path(store.snapshot(), "A", "Y")

    assert result.status is PathStatus.NO_PATH_FOUND
    assert result.path == ()
    assert result.distance is None
    assert result.to_dict() == {"path": [], "reason": "NoPathFound"}


def test_isolated_destination_reports_no_path():
    graph = {"A": {}, "B": {}}

    result = shortest_path(graph, "A", "B")

    assert result.status is PathStatus.NO_PATH_FOUND
    assert result.is_empty


def test_unknown_endpoint_is_invalid_not_no_path(triangle_store):
    snapshot = triangle_store.snapshot()

    for source, destination in [("A", "Nowhere"), ("Nowhere", "A"), ("X", "Y")]:
        result = shortest_path(snapshot, source, destination)
        assert result.status is PathStatus.INVALID_ENDPOINT
        assert result.path == ()
        assert result.reason == "InvalidEndpoint"


def test_result_dict_on_success(triangle_store):
    result = shortest_path(triangle_store.snapshot(), "A", "C")

    assert result.to_dict() == {"path": ["A", "B", "C"], "distance": 8.0}
    assert result.reason is None


def test_dijkstra_distances_cover_every_node():
    graph = {
        "A": {"B": 1.0, "C": 4.0},
        "B": {"A": 1.0, "C": 2.0, "D": 7.0},
        "C": {"A": 4.0, "B": 2.0, "D": 1.0},
        "D": {"B": 7.0, "C": 1.0},
        "E": {},
    }

    distances, previous = dijkstra(graph, "A")

    assert distances == {"A": 0.0, "B": 1.0, "C": 3.0, "D": 4.0, "E": math.inf}
    assert previous["D"] == "C"
    assert previous["C"] == "B"
    assert "E" not in previous
    assert "A" not in previous


def test_stale_heap_entries_do_not_change_result():
    # C is first reached at 10 via A, then improved to 3 via B
    graph = {
        "A": {"B": 1.0, "C": 10.0},
        "B": {"A": 1.0, "C": 2.0},
        "C": {"A": 10.0, "B": 2.0, "D": 1.0},
        "D": {"C": 1.0},
    }

    result = shortest_path(graph, "A", "D")

    assert result.path == ("A", "B", "C", "D")
    assert result.distance == 4.0


def test_equal_cost_paths_return_one_of_them():
    graph = {
        "A": {"B": 1.0, "C": 1.0},
        "B": {"A": 1.0, "D": 1.0},
        "C": {"A": 1.0, "D": 1.0},
        "D": {"B": 1.0, "C": 1.0},
    }

    result = shortest_path(graph, "A", "D")

    assert result.distance == 2.0
    assert result.path in {("A", "B", "D"), ("A", "C", "D")}


def test_fractional_weights_accumulate():
    store = GraphStore()
    for name in ("A", "B", "C"):
        store.add_node(name)
    store.add_or_update_edge("A", "B", 0.5)
    store.add_or_update_edge("B", "C", 0.25)

    result = shortest_path(store.snapshot(), "A", "C")

    assert result.distance == 0.75


def test_query_on_old_snapshot_ignores_later_mutations(triangle_store):
    snapshot = triangle_store.snapshot()
    triangle_store.remove_edge("A", "B")

    old = shortest_path(snapshot, "A", "C")
    new = shortest_path(triangle_store.snapshot(), "A", "C")

    assert old.distance == 8.0
    assert new.path == ("A", "C")
    assert new.distance == 10.0
