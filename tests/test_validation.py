from datetime import date

import pytest

from app.models.movie_model import DEFAULT_RATE
from app.utils.validation import validate_movie, validate_partial_movie


def fields(result):
    return {issue["field"] for issue in result.error}


def test_valid_movie(inception):
    result = validate_movie(inception)

    assert result.success
    assert result.error is None
    assert result.data == inception


def test_rate_defaults_when_absent(inception):
    del inception["rate"]

    result = validate_movie(inception)

    assert result.success
    assert result.data["rate"] == DEFAULT_RATE


def test_unknown_fields_are_dropped(inception):
    result = validate_movie({**inception, "id": "forged", "admin": True})

    assert result.success
    assert "id" not in result.data
    assert "admin" not in result.data


@pytest.mark.parametrize(
    "field, value",
    [
        ("title", ""),
        ("title", "   "),
        ("title", 42),
        ("year", "2010"),
        ("year", 1800),
        ("year", date.today().year + 6),
        ("year", 2010.5),
        ("director", ""),
        ("duration", 0),
        ("duration", -3),
        ("duration", True),
        ("rate", 11.0),
        ("rate", -0.5),
        ("poster", "not a url"),
        ("poster", "ftp://example.com/p.jpg"),
        ("genre", []),
        ("genre", "Drama"),
        ("genre", [""]),
    ],
)
def test_invalid_field_is_reported(inception, field, value):
    result = validate_movie({**inception, field: value})

    assert not result.success
    assert result.data is None
    assert fields(result) == {field}


@pytest.mark.parametrize("field", ["title", "year", "director", "duration", "poster", "genre"])
def test_missing_required_field_is_reported(inception, field):
    del inception[field]

    result = validate_movie(inception)

    assert not result.success
    issue = next(i for i in result.error if i["field"] == field)
    assert issue["code"] == "missing"
    assert issue["path"] == [field]
    assert issue["message"]


def test_every_violation_is_listed():
    result = validate_movie({})

    assert fields(result) == {"title", "year", "director", "duration", "poster", "genre"}


def test_non_object_payload_is_reported_on_body():
    result = validate_movie(["Inception"])

    assert not result.success
    assert fields(result) == {"body"}


def test_known_genres_are_normalised(inception):
    result = validate_movie({**inception, "genre": ["sci-fi", "DRAMA", "Noir"]})

    assert result.data["genre"] == ["Sci-Fi", "Drama", "Noir"]


def test_partial_empty_patch_is_valid():
    result = validate_partial_movie({})

    assert result.success
    assert result.data == {}


def test_partial_keeps_only_present_fields():
    result = validate_partial_movie({"year": 1999, "unknown": "x"})

    assert result.success
    assert result.data == {"year": 1999}


def test_partial_has_no_rate_default():
    result = validate_partial_movie({"title": "Memento"})

    assert "rate" not in result.data


@pytest.mark.parametrize(
    "patch, field",
    [
        ({"rate": 12.0}, "rate"),
        ({"title": None}, "title"),
        ({"genre": []}, "genre"),
        ({"year": "1999"}, "year"),
        ({"poster": "nope"}, "poster"),
    ],
)
def test_partial_invalid_field_is_reported(patch, field):
    result = validate_partial_movie(patch)

    assert not result.success
    assert fields(result) == {field}


@pytest.mark.parametrize(
    "field, value",
    [
        ("year", 1888),
        ("year", date.today().year + 5),
        ("rate", 0.0),
        ("rate", 10.0),
        ("rate", 7),
        ("duration", 1),
    ],
)
def test_range_limits_are_accepted(inception, field, value):
    result = validate_movie({**inception, field: value})

    assert result.success
    assert result.data[field] == value


@pytest.mark.parametrize("patch", [{"year": 1888}, {"rate": 0.0}, {"rate": 10.0}])
def test_partial_range_limits_are_accepted(patch):
    result = validate_partial_movie(patch)

    assert result.success
    assert result.data == patch
