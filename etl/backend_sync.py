#!/usr/bin/env python3
# etl/backend_sync.py

import json
import argparse

from loguru import logger

from api.backend_client import BackendClient
from api.crud           import upsert_snapshot
from api.log_setup      import setup_logging
from api.models         import SessionLocal, init_db


# ————————————————
# 1) PULL FROM BACKEND
# ————————————————
def fetch_all(client: BackendClient) -> list[dict]:
    """Every influencer record the backend returns, minus ones without an id."""
    records = client.fetch_influencers()
    out = [rec for rec in records if isinstance(rec, dict) and rec.get("id") is not None]
    skipped = len(records) - len(out)
    if skipped:
        logger.warning(f"Skipped {skipped} backend records without an id")
    return out


# ————————————————
# 2) LOAD INTO DB
# ————————————————
def sync_to_db(client: BackendClient) -> int:
    init_db()
    db = SessionLocal()
    try:
        records = fetch_all(client)
        for rec in records:
            upsert_snapshot(db, rec, commit=False)
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
    logger.info(f"Synced {len(records)} influencer snapshots")
    return len(records)


# ————————————————
# 3) CLI
# ————————————————
if __name__ == "__main__":
    setup_logging()

    p = argparse.ArgumentParser(
        description="Copy the backend's influencer list into the local snapshot store"
    )
    p.add_argument("--token", default=None, help="Bearer token (defaults to BACKEND_API_TOKEN)")
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print JSON instead of writing to the DB"
    )
    args = p.parse_args()

    client = BackendClient(token=args.token)
    if args.dry_run:
        print(json.dumps(fetch_all(client), indent=2))
    else:
        n = sync_to_db(client)
        print(f"✅ Synced {n} influencers into the snapshot store")
