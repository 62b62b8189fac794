"""Shared test fixtures."""

import pytest

from pymetafield.entity import EntityObject


class RecordingSink:
    """Sink that records every add_content call in order."""

    def __init__(self):
        self.calls = []

    def add_content(self, key, value):
        self.calls.append((key, value))


@pytest.fixture
def entity():
    return EntityObject()


@pytest.fixture
def recorder():
    return RecordingSink()


@pytest.fixture
def payload():
    return {
        "content": {
            "header": "hello",
            "body": "world",
            "empty": "",
        },
        "flag": True,
        "count": 3,
        "ratio": 1.5,
        "nothing": None,
        "tags": ["a", "b"],
    }
