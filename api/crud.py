# api/crud.py
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from .models import InfluencerSnapshot


def _as_record(snap: InfluencerSnapshot) -> Dict[str, Any]:
    return {**snap.record, "wishlist": bool(snap.wishlist)}


def get_snapshot(db: Session, id: str) -> Optional[InfluencerSnapshot]:
    return db.query(InfluencerSnapshot).filter(InfluencerSnapshot.id == id).first()


def get_record(db: Session, id: str) -> Optional[Dict[str, Any]]:
    snap = get_snapshot(db, id)
    return _as_record(snap) if snap else None


def check_record(record) -> None:
    if not isinstance(record, dict) or record.get("id") is None:
        raise ValueError(f"influencer record has no id: {record!r}")


def upsert_snapshot(db: Session, record: dict, commit: bool = True) -> InfluencerSnapshot:
    """
    record must include an "id" key; everything else is stored as-is.
    An existing snapshot keeps its position and, unless the record says
    otherwise, its wishlist flag. With commit=False the change is only
    flushed, so a caller can load many records in one transaction.
    """
    check_record(record)
    rid = str(record["id"])

    snap = get_snapshot(db, rid)
    if snap is None:
        snap = InfluencerSnapshot(id=rid, wishlist=bool(record.get("wishlist", False)))
        db.add(snap)
    elif "wishlist" in record:
        snap.wishlist = bool(record["wishlist"])

    snap.name = record.get("name")
    snap.record = dict(record)
    if not commit:
        db.flush()
        return snap
    db.commit()
    db.refresh(snap)
    return snap


def list_records(db: Session) -> List[Dict[str, Any]]:
    snaps = db.query(InfluencerSnapshot).order_by(InfluencerSnapshot.seq).all()
    return [_as_record(s) for s in snaps]


def set_wishlist(db: Session, id: str, value: bool) -> Optional[InfluencerSnapshot]:
    snap = get_snapshot(db, id)
    if snap is None:
        return None
    snap.wishlist = value
    db.commit()
    db.refresh(snap)
    return snap


def delete_all(db: Session, commit: bool = True) -> int:
    count = db.query(InfluencerSnapshot).delete()
    if commit:
        db.commit()
    return count
