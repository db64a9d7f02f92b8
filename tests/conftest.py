"""Shared fixtures for catalog tests."""

import pytest

from movieratings.models import Entry
from movieratings.ratings import reset_aggregates
from movieratings.service import CatalogService
from movieratings.store import CatalogStore


class ScriptedInput:
    """Stands in for input(): returns queued answers, then raises EOFError."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def add_movie(store):
    """Factory: put a movie with aggregates computed from its ratings."""
    def _add(movie_id, title, ratings=()):
        entry = Entry(id=movie_id, title=title, ratings=list(ratings))
        reset_aggregates(entry)
        store.put(entry)
        return entry
    return _add


@pytest.fixture
def matrix(add_movie):
    return add_movie("A1B2C3D4", "Matrix", [4, 5])


@pytest.fixture
def echoed():
    return []


@pytest.fixture
def service(store, echoed):
    return CatalogService(store, echo=echoed.append)


@pytest.fixture
def scripted():
    return ScriptedInput
