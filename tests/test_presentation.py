from campus_nav.domain.errors import DuplicateNodeError, UnknownNodeError
from campus_nav.domain.models import GeoLocation, Location, PathResult
from campus_nav.presentation import (
    estimate_message,
    format_distance,
    format_error,
    format_path_result,
    locations_table,
    map_iframe,
    run_action,
)


def test_format_found_path():
    text = format_path_result(PathResult.found(("A", "B", "C"), 8.0), "A", "C")

    assert "A → B → C" in text
    assert "8 m" in text
    assert "3 stops" in text


def test_format_failures():
    assert "Invalid nodes" in format_path_result(PathResult.invalid_endpoint(), "A", "Z")
    assert "No Path Found" in format_path_result(PathResult.no_path(), "A", "B")


def test_format_found_status_without_distance_reads_as_no_path():
    text = format_path_result(PathResult(path=("A",)), "A", "B")

    assert "No Path Found" in text


def test_format_distance_switches_to_km():
    assert format_distance(950) == "950 m"
    assert format_distance(1250) == "1.25 km"


def test_run_action_turns_domain_errors_into_messages():
    def fail():
        raise DuplicateNodeError("Location 'A' already exists", name="A")

    assert run_action(lambda: None, "done") == "done"
    assert run_action(fail, "done") == "Error (DuplicateNode): Location 'A' already exists"


def test_error_to_dict():
    error = UnknownNodeError("Location 'Z' does not exist", name="Z")

    assert error.to_dict() == {"error": "UnknownNode", "message": "Location 'Z' does not exist"}
    assert format_error(error).startswith("Error (UnknownNode)")


def test_locations_table():
    rows = locations_table([Location("A", GeoLocation(1.0, 2.0), "North")])

    assert rows == [["A", 1.0, 2.0, "North"]]


def test_map_iframe_escapes_document():
    frame = map_iframe('<p class="x">hi</p>')

    assert frame.startswith("<iframe srcdoc=")
    assert "&lt;p class=&quot;x&quot;&gt;" in frame


def test_estimate_message():
    assert "No GPS coordinates" in estimate_message("A", "B", None)
    assert "104.5 m" in estimate_message("A", "B", 104.5)
