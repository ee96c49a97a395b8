import os
import uuid
from unittest.mock import MagicMock

import pytest
from pymongo import MongoClient

from seeder.bootstrap import COLLECTION_NAME


@pytest.fixture
def points_coll():
    """Collection stand-in with only the default _id index."""
    coll = MagicMock()
    coll.name = COLLECTION_NAME
    coll.index_information.return_value = {"_id_": {"key": [("_id", 1)], "v": 2}}
    coll.create_index.return_value = "location_2dsphere"
    coll.insert_many.return_value = MagicMock(inserted_ids=["a", "b"])
    return coll


@pytest.fixture
def fake_client(points_coll):
    db = MagicMock()
    db.name = "sedona"
    db.__getitem__.return_value = points_coll
    client = MagicMock()
    client.__getitem__.return_value = db
    return client


@pytest.fixture
def live_client():
    """Real MongoDB, only when MONGO_TEST_URI is set."""
    uri = os.getenv("MONGO_TEST_URI")
    if not uri:
        pytest.skip("MONGO_TEST_URI not set")
    client = MongoClient(uri, serverSelectionTimeoutMS=3000)
    yield client
    client.close()


@pytest.fixture
def scratch_db_name(live_client):
    name = f"sedona_test_{uuid.uuid4().hex[:8]}"
    yield name
    live_client.drop_database(name)
