"""
Unit tests for partial id / title resolution.
"""

from movieratings.matching import matches, resolve, suggest
from movieratings.models import Entry


def _catalog():
    return [
        Entry(id="A1B2C3D4", title="Matrix"),
        Entry(id="B7C8D9E0", title="Matrix Reloaded"),
        Entry(id="C0FFEE12", title="Inception"),
        Entry(id="D4E5F6A1", title="Heat"),
    ]


def test_id_prefix_match_case_insensitive():
    entry = Entry(id="A1B2C3D4", title="Matrix")

    assert matches("a1b2", entry)
    assert matches("A1B2C3D4", entry)
    # Only prefixes of the id count
    assert not matches("C3D4", entry)


def test_title_substring_match_case_insensitive():
    entry = Entry(id="A1B2C3D4", title="The Matrix")

    assert matches("matrix", entry)
    assert matches("HE MAT", entry)
    assert not matches("matrices", entry)


def test_resolve_single_match():
    result = resolve("incep", _catalog())

    assert [e.title for e in result] == ["Inception"]


def test_resolve_multiple_matches_in_catalog_order():
    result = resolve("matrix", _catalog())

    assert [e.title for e in result] == ["Matrix", "Matrix Reloaded"]


def test_resolve_mixes_id_and_title_matches():
    """'c0' prefixes one id and appears inside another title."""
    catalog = _catalog()
    catalog.append(Entry(id="E1E2E3E4", title="Ocean's C0de"))

    result = resolve("c0", catalog)

    assert [e.id for e in result] == ["C0FFEE12", "E1E2E3E4"]


def test_resolve_no_match():
    assert resolve("godfather", _catalog()) == []


def test_resolve_empty_query_matches_everything():
    catalog = _catalog()

    assert resolve("", catalog) == catalog


def test_resolve_is_idempotent():
    catalog = _catalog()

    first = resolve("a", catalog)
    second = resolve("a", catalog)

    assert [e.id for e in first] == [e.id for e in second]


def test_suggest_close_title():
    hint = suggest("matrx", _catalog())

    assert hint is not None
    assert hint.title == "Matrix"


def test_suggest_nothing_close():
    assert suggest("zzzzzz", _catalog()) is None
