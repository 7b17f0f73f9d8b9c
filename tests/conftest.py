"""
Shared pytest fixtures. mongomock stands in for a MongoDB server, so the
suite runs without one.
"""
import mongomock
import pytest

from seeding.payload import SEED_PAYLOAD


@pytest.fixture
def client():
    c = mongomock.MongoClient()
    yield c
    c.close()


@pytest.fixture
def db(client):
    return client[SEED_PAYLOAD["database"]]
