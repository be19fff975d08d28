# api/models.py
from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from api.config import DATABASE_URL

Base = declarative_base()


def _utcnow():
    return datetime.now(timezone.utc)


class InfluencerSnapshot(Base):
    __tablename__ = "influencer_snapshots"

    seq       = Column(Integer,  primary_key=True, autoincrement=True)
    id        = Column(String,   unique=True, index=True, nullable=False)
    name      = Column(String)
    record    = Column(JSON,     nullable=False)
    wishlist  = Column(Boolean,  nullable=False, default=False)
    synced_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)


connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine       = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db():
    Base.metadata.create_all(bind=engine)
