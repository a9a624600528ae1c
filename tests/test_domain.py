import pytest

from campus_nav.domain.errors import CampusNavError, GraphError, InvalidWeightError
from campus_nav.domain.models import GeoLocation, Location, PathResult, PathStatus


def test_geolocation_range_validation():
    with pytest.raises(ValueError):
        GeoLocation(latitude=-91.0, longitude=0.0)
    with pytest.raises(ValueError):
        GeoLocation(latitude=0.0, longitude=181.0)


def test_location_from_record():
    location = Location.from_dict({"name": "Library", "lat": "18.53", "lng": 73.85})

    assert location.location == GeoLocation(18.53, 73.85)
    assert location.campus == ""
    assert location.to_dict() == {"name": "Library", "lat": 18.53, "lng": 73.85, "campus": ""}


def test_path_result_defaults_to_empty():
    result = PathResult.no_path()

    assert result.is_empty
    assert result.num_stops == 0
    assert result.status is PathStatus.NO_PATH_FOUND


def test_errors_share_a_base_and_wrap_causes():
    cause = InvalidWeightError("bad weight", weight=-1)
    error = GraphError("Invalid graph snapshot", cause=cause, file_path="graph.json")

    assert isinstance(error, CampusNavError)
    assert str(error) == "Invalid graph snapshot: bad weight"
    assert error.to_dict()["error"] == "GraphError"
