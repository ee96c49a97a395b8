# main.py
"""
Sedona points seeder entrypoint.

Sets up the `points` collection in the `sedona` database:
- creates the collection if missing
- ensures a 2dsphere index on `location`
- inserts the Point A / Point B seed documents

Run:
    python main.py

Connection target comes from .env / environment (MONGO_URI, MONGO_DB_NAME),
defaulting to mongodb://localhost:27017 and "sedona".
Set SEED_MODE=upsert to avoid duplicate seed docs on re-runs.
"""

import sys

from seeder.bootstrap import run_bootstrap
from utils.mongo import get_client, load_settings


def main() -> int:
    settings = load_settings()
    print(f"[bootstrap] connecting to MongoDB (db={settings.db_name})")

    client = get_client(settings)
    try:
        summary = run_bootstrap(client, settings)
    finally:
        client.close()

    print(
        f"[bootstrap] done: {summary['db']}.{summary['collection']} "
        f"index={summary['index']} mode={summary['mode']} written={summary['written']}"
    )
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)
