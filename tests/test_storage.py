"""
Tests for loading and saving the catalog file.
"""

import json
import logging

import pytest

from movieratings.errors import CatalogFileError
from movieratings.storage import load_catalog, save_catalog
from movieratings.store import CatalogStore


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


def test_missing_file_gives_empty_catalog(tmp_path):
    store = load_catalog(str(tmp_path / "MovieDB.json"))

    assert len(store) == 0


def test_round_trip(tmp_path, store, add_movie):
    """Saving then loading keeps ids, titles, ratings and aggregates."""
    add_movie("A1B2C3D4", "Matrix", [4, 5, 3])
    add_movie("C0FFEE12", "Inception", [5, 4, 4, 4, 5, 2, 1])
    add_movie("D4E5F6A1", "Heat")
    path = tmp_path / "MovieDB.json"

    save_catalog(store, str(path))
    restored = load_catalog(str(path))

    assert [e.to_dict() for e in restored.all()] == [e.to_dict() for e in store.all()]


def test_save_writes_list_of_records(tmp_path, store, add_movie):
    add_movie("A1B2C3D4", "Matrix", [4, 5])
    path = tmp_path / "nested" / "MovieDB.json"

    save_catalog(store, str(path))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == [{
        "id": "A1B2C3D4",
        "title": "Matrix",
        "ratings": [4, 5],
        "totalRatings": 2,
        "totalRatingSum": 9,
        "averageRating": 4.5,
    }]


def test_invalid_ratings_filtered_on_load(tmp_path, caplog):
    path = tmp_path / "MovieDB.json"
    _write(path, [{"id": "A1B2C3D4", "title": "Matrix", "ratings": [4, 0, 6, "5", 4.5, True, 5]}])

    with caplog.at_level(logging.WARNING, logger="movieratings.storage"):
        store = load_catalog(str(path))

    entry = store.get("A1B2C3D4")
    assert entry.ratings == [4, 5]
    assert entry.rating_count == 2
    assert entry.rating_sum == 9
    assert entry.average_rating == 4.5
    assert "Invalid ratings removed for movie 'Matrix'" in caplog.text


def test_stored_aggregates_are_recomputed(tmp_path):
    path = tmp_path / "MovieDB.json"
    _write(path, [{
        "id": "A1B2C3D4", "title": "Matrix", "ratings": [1, 2],
        "rating_count": 40, "rating_sum": 7, "average_rating": 4.9,
        "totalRatings": 12, "totalRatingSum": 3,
    }])

    entry = load_catalog(str(path)).get("A1B2C3D4")

    assert (entry.rating_count, entry.rating_sum, entry.average_rating) == (2, 3, 1.5)


def test_bad_ids_are_backfilled(tmp_path):
    path = tmp_path / "MovieDB.json"
    _write(path, [
        {"title": "No Id", "ratings": [3]},
        {"id": "abc", "title": "Short Id", "ratings": []},
        {"id": "A1B2-3D4", "title": "Bad Chars", "ratings": []},
        # Upper-cases to "SSAAAAAAA", one character too long
        {"id": "\u00dfAAAAAAA", "title": "Sharp S", "ratings": []},
    ])

    store = load_catalog(str(path))

    assert [e.title for e in store.all()] == ["No Id", "Short Id", "Bad Chars", "Sharp S"]
    ids = [e.id for e in store.all()]
    assert len(set(ids)) == 4
    for movie_id in ids:
        assert len(movie_id) == 8
        assert movie_id == movie_id.upper()


def test_lowercase_ids_are_canonicalized(tmp_path):
    path = tmp_path / "MovieDB.json"
    _write(path, [{"id": "a1b2c3d4", "title": "Matrix", "ratings": [5]}])

    store = load_catalog(str(path))

    assert [e.id for e in store.all()] == ["A1B2C3D4"]


def test_duplicate_ids_are_reissued(tmp_path):
    path = tmp_path / "MovieDB.json"
    _write(path, [
        {"id": "A1B2C3D4", "title": "Matrix", "ratings": [5]},
        {"id": "A1B2C3D4", "title": "Matrix Reloaded", "ratings": [3]},
    ])

    store = load_catalog(str(path))

    assert len(store) == 2
    assert store.get("A1B2C3D4").title == "Matrix"
    other = [e for e in store.all() if e.id != "A1B2C3D4"]
    assert other[0].title == "Matrix Reloaded"
    assert other[0].ratings == [3]


def test_records_without_title_are_skipped(tmp_path):
    path = tmp_path / "MovieDB.json"
    _write(path, [
        {"id": "A1B2C3D4", "ratings": [5]},
        {"id": "B7C8D9E0", "title": "   ", "ratings": [5]},
        "not a record",
        {"id": "C0FFEE12", "title": "Inception", "ratings": "oops"},
    ])

    store = load_catalog(str(path))

    assert [e.title for e in store.all()] == ["Inception"]
    assert store.get("C0FFEE12").ratings == []


def test_wrapped_movies_object_accepted(tmp_path):
    path = tmp_path / "MovieDB.json"
    _write(path, {"movies": [{"id": "A1B2C3D4", "title": "Matrix", "ratings": [4]}]})

    store = load_catalog(str(path))

    assert store.get("A1B2C3D4").title == "Matrix"


def test_load_into_existing_store(tmp_path, store, matrix):
    path = tmp_path / "MovieDB.json"
    _write(path, [{"id": "C0FFEE12", "title": "Inception", "ratings": []}])

    result = load_catalog(str(path), store)

    assert result is store
    assert len(store) == 2


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "MovieDB.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogFileError, match="not valid JSON"):
        load_catalog(str(path))


def test_non_utf8_file_raises(tmp_path):
    path = tmp_path / "MovieDB.json"
    path.write_bytes(b'[{"id": "A1B2C3D4", "title": "Am\xe9lie", "ratings": []}]')

    with pytest.raises(CatalogFileError, match="not valid JSON"):
        load_catalog(str(path))


def test_unreadable_path_raises(tmp_path):
    # A directory where the file should be
    path = tmp_path / "MovieDB.json"
    path.mkdir()

    with pytest.raises(CatalogFileError, match="could not be read"):
        load_catalog(str(path))


def test_original_catalog_keys_round_trip(tmp_path):
    """Files written by the original app load, and saved files use the same keys."""
    path = tmp_path / "MovieDB.json"
    _write(path, [{
        "id": "A1B2C3D4", "title": "Matrix", "ratings": [4, 5],
        "totalRatings": 2, "totalRatingSum": 9, "averageRating": 4.5,
    }])

    store = load_catalog(str(path))
    save_catalog(store, str(path))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == [{
        "id": "A1B2C3D4", "title": "Matrix", "ratings": [4, 5],
        "totalRatings": 2, "totalRatingSum": 9, "averageRating": 4.5,
    }]


def test_wrong_shape_raises(tmp_path):
    path = tmp_path / "MovieDB.json"
    _write(path, 42)

    with pytest.raises(CatalogFileError, match="list of movies"):
        load_catalog(str(path))

    _write(path, {"items": []})
    with pytest.raises(CatalogFileError):
        load_catalog(str(path))


def test_save_overwrites_previous_file(tmp_path, add_movie, store):
    path = tmp_path / "MovieDB.json"
    _write(path, [{"id": "ZZZZZZZZ", "title": "Old", "ratings": []}])
    add_movie("A1B2C3D4", "Matrix")

    save_catalog(store, str(path))

    assert [e.title for e in load_catalog(str(path)).all()] == ["Matrix"]
    assert isinstance(load_catalog(str(path)), CatalogStore)
