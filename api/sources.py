# api/sources.py
from typing import Any, Dict, List, Optional

from loguru import logger
from sqlalchemy.orm import Session

from api import config, crud
from api.backend_client import BackendClient
from api.exceptions import NotFoundException
from discovery.filters import nested_name


class InfluencerSource:
    """
    Where influencer records come from for one request: the live backend
    (`mode="backend"`) or the local snapshot store (`mode="local"`).
    """

    def __init__(self, db: Session, client: BackendClient, mode: str = config.INFLUENCER_SOURCE):
        self.db = db
        self.client = client
        self.mode = mode

    @property
    def local(self) -> bool:
        return self.mode == "local"

    def load_influencers(self) -> List[Dict[str, Any]]:
        if self.local:
            return crud.list_records(self.db)
        return self.client.fetch_influencers()

    def find(self, influencer_id: str, strict: bool = False) -> Optional[Dict[str, Any]]:
        """
        The current record for `influencer_id`, or None. With `strict`, a
        backend failure raises BackendError instead of reading as "not found".
        """
        if self.local:
            return crud.get_record(self.db, influencer_id)
        records = self.client.list_influencers() if strict else self.client.fetch_influencers()
        for rec in records:
            if str(rec.get("id")) == influencer_id:
                return rec
        return None

    def load_profile(self, influencer_id: str) -> Dict[str, Any]:
        """List record merged with the profile payload (profile wins)."""
        base = self.find(influencer_id)
        if self.local:
            profile = None
        else:
            profile = self.client.fetch_influencer_profile(influencer_id)
        if base is None and profile is None:
            raise NotFoundException(f"Influencer {influencer_id} not found")
        return {**(base or {}), **(profile or {})}

    def load_niches(self) -> List[Any]:
        if not self.local:
            return self.client.fetch_niches()
        names = {nested_name(rec, "niche") for rec in crud.list_records(self.db)}
        return sorted(n for n in names if n)

    def load_wishlist(self) -> List[Dict[str, Any]]:
        if not self.local:
            return self.client.fetch_wishlist()
        return [rec for rec in crud.list_records(self.db) if rec.get("wishlist")]

    def toggle_wishlist(self, influencer_id: str) -> Dict[str, Any]:
        current = self.find(influencer_id, strict=True)
        if current is None:
            raise NotFoundException(f"Influencer {influencer_id} not found")
        was_wishlisted = bool(current.get("wishlist"))

        if self.local:
            crud.set_wishlist(self.db, influencer_id, not was_wishlisted)
        else:
            self.client.toggle_wishlist(influencer_id, was_wishlisted)
        logger.info(f"Wishlist for {influencer_id}: {was_wishlisted} -> {not was_wishlisted}")

        refreshed = self.find(influencer_id)
        if refreshed is None:
            # re-fetch lost the record; patch the copy we already have
            refreshed = {**current, "wishlist": not was_wishlisted}
        return refreshed
