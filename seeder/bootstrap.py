# seeder/bootstrap.py

from typing import Any, Dict, Iterable, List

from pymongo import GEO2D, GEOSPHERE, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import CollectionInvalid, OperationFailure

from seeder.models import SEED_POINTS, SeedPoint
from utils.mongo import MongoSettings

COLLECTION_NAME = "points"
GEO_FIELD = "location"

# server error code for "collection already exists"
NAMESPACE_EXISTS = 48


class IndexConflictError(RuntimeError):
    """A 2d index already covers the geo field."""


# -------------------------------------------------------------------------
# Setup steps (run in this order)
# -------------------------------------------------------------------------

def select_database(client: MongoClient, name: str) -> Database:
    # Mongo creates the database lazily on first write
    return client[name]


def ensure_collection(db: Database, name: str = COLLECTION_NAME) -> Collection:
    """
    Create the collection if it is missing. "Already exists" counts as success;
    anything else is raised to the caller.
    """
    try:
        db.create_collection(name)
        print(f"[bootstrap] created collection {db.name}.{name}")
    except CollectionInvalid:
        print(f"[bootstrap] collection {db.name}.{name} already exists, skipping")
    except OperationFailure as e:
        if e.code != NAMESPACE_EXISTS:
            raise
        print(f"[bootstrap] collection {db.name}.{name} already exists, skipping")
    return db[name]


def ensure_geo_index(collection: Collection, field: str = GEO_FIELD) -> str:
    """
    Ensure a 2dsphere index on `field` and return its name.

    Any existing index keying the field as 2dsphere (single or compound) is
    reused as-is. A single-field 2d index on the field is refused rather than
    silently switching geo kinds. Other indexes are left to the server; its
    OperationFailure propagates.
    """
    indexes = collection.index_information()

    for name, info in indexes.items():
        if (field, GEOSPHERE) in list(info.get("key", [])):
            print(f"[bootstrap] index {name} already present on {field!r}")
            return name

    for name, info in indexes.items():
        if list(info.get("key", [])) == [(field, GEO2D)]:
            raise IndexConflictError(
                f"index {name!r} already keys {field!r} as {GEO2D!r}, "
                f"refusing to add a {GEOSPHERE} index"
            )

    name = collection.create_index([(field, GEOSPHERE)], name=f"{field}_{GEOSPHERE}")
    print(f"[bootstrap] created {GEOSPHERE} index {name} on {collection.name}.{field}")
    return name


def insert_seed_documents(
    collection: Collection,
    points: Iterable[SeedPoint],
    mode: str = "insert",
) -> int:
    """
    Write the seed records, returns how many documents were written.

    mode="insert": plain ordered insert_many. Re-running duplicates documents,
                   same as the old mongo shell script did.
    mode="upsert": replace by name, so re-runs leave one doc per name.
    """
    docs: List[Dict[str, Any]] = [p.to_document() for p in points]
    if not docs:
        return 0

    if mode == "insert":
        result = collection.insert_many(docs, ordered=True)
        print(f"[bootstrap] inserted {len(result.inserted_ids)} documents")
        return len(result.inserted_ids)

    if mode == "upsert":
        created = 0
        for doc in docs:
            result = collection.replace_one({"name": doc["name"]}, doc, upsert=True)
            if result.upserted_id is not None:
                created += 1
        print(
            f"[bootstrap] upserted {len(docs)} documents "
            f"(new={created} existing={len(docs) - created})"
        )
        return len(docs)

    raise ValueError(f"unknown seed mode: {mode!r}")


# -------------------------------------------------------------------------
# Full run
# -------------------------------------------------------------------------

def run_bootstrap(
    client: MongoClient,
    settings: MongoSettings,
    points: Iterable[SeedPoint] = SEED_POINTS,
) -> Dict[str, Any]:
    """
    select db -> ensure collection -> ensure 2dsphere index -> seed docs.

    No retries; the first failure propagates.
    Returns a summary dict: { db, collection, index, mode, written }
    """
    db = select_database(client, settings.db_name)
    points_coll = ensure_collection(db, COLLECTION_NAME)
    index_name = ensure_geo_index(points_coll, GEO_FIELD)
    written = insert_seed_documents(points_coll, points, mode=settings.seed_mode)

    return {
        "db": settings.db_name,
        "collection": COLLECTION_NAME,
        "index": index_name,
        "mode": settings.seed_mode,
        "written": written,
    }
