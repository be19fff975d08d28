#!/usr/bin/env python3
# etl/seed_ingest.py
import sys
import argparse
from pathlib import Path

import yaml
from loguru import logger

from api.crud      import check_record, delete_all, upsert_snapshot
from api.log_setup import setup_logging
from api.models    import SessionLocal, init_db


def load_seed(path: str) -> list[dict]:
    cfg = yaml.safe_load(Path(path).read_text()) or {}
    records = cfg.get("influencers") or []
    if not isinstance(records, list):
        raise ValueError(f"{path}: 'influencers' must be a list")
    return records


def main(path: str, reset: bool = False) -> int:
    records = load_seed(path)
    for rec in records:
        check_record(rec)

    init_db()
    db = SessionLocal()
    try:
        # one transaction: a bad record leaves the store as it was
        if reset:
            removed = delete_all(db, commit=False)
            logger.info(f"Removing {removed} existing snapshots")
        for rec in records:
            upsert_snapshot(db, rec, commit=False)
            logger.debug(f"Seeded {rec.get('id')} ({rec.get('name')})")
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
    logger.info(f"Seeded {len(records)} influencers from {path}")
    return len(records)


if __name__ == "__main__":
    setup_logging()
    p = argparse.ArgumentParser(description="Load seed influencers into the snapshot store")
    p.add_argument("path", nargs="?", default="config/seed_influencers.yaml")
    p.add_argument("--reset", action="store_true", help="Clear the store first")
    args = p.parse_args()
    try:
        main(args.path, reset=args.reset)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Seeding failed: {e}")
        sys.exit(1)
