# seeder/checks.py

from pprint import pprint
from typing import Any, Dict, List

from pymongo import GEOSPHERE
from pymongo.collection import Collection

from seeder.bootstrap import COLLECTION_NAME, GEO_FIELD, select_database
from seeder.models import SEED_POINTS
from utils.mongo import get_client, load_settings


def points_near(
    collection: Collection,
    lon: float,
    lat: float,
    max_km: float,
    limit: int = 50,
    key: str = GEO_FIELD,
) -> List[Dict[str, Any]]:
    """
    Points within max_km of (lon, lat), nearest first.
    Uses $geoNear on `key`, so a 2dsphere index on that field must exist.
    """
    pipeline: List[Dict[str, Any]] = [
        {
            "$geoNear": {
                "near": {"type": "Point", "coordinates": [lon, lat]},
                "key": key,
                "distanceField": "distance_m",
                "maxDistance": max_km * 1000.0,
                "spherical": True,
            }
        },
        {"$limit": limit},
    ]
    return list(collection.aggregate(pipeline))


def geo_indexes(collection: Collection, field: str = GEO_FIELD) -> List[str]:
    """Names of the 2dsphere indexes that key `field`."""
    return [
        name
        for name, info in collection.index_information().items()
        if (field, GEOSPHERE) in list(info.get("key", []))
    ]


def summarize(collection: Collection) -> Dict[str, Any]:
    return {
        "count": collection.count_documents({}),
        "indexes": sorted(collection.index_information().keys()),
        "names": sorted(collection.distinct("name")),
    }


def main():
    settings = load_settings()
    client = get_client(settings)
    try:
        points_coll = select_database(client, settings.db_name)[COLLECTION_NAME]

        print(f"=== {settings.db_name}.{COLLECTION_NAME} ===")
        pprint(summarize(points_coll))
        print(f"[checks] 2dsphere indexes on {GEO_FIELD!r}: {geo_indexes(points_coll)}")

        origin = SEED_POINTS[0].location
        print(f"\n=== $geoNear around {SEED_POINTS[0].name} (5000 km) ===")
        for doc in points_near(points_coll, origin.lon, origin.lat, max_km=5000):
            print(f"- {doc.get('name')} | {doc['distance_m'] / 1000.0:.1f} km")
    finally:
        client.close()


if __name__ == "__main__":
    main()
