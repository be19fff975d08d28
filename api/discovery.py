# api/discovery.py

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Header
from sqlalchemy.orm import Session

from .backend_client            import BackendClient
from .exceptions                import BackendError, BadGatewayException
from .models                    import SessionLocal
from .schemas                   import FilterCriteria, SearchResponse
from .sources                   import InfluencerSource
from discovery.filters          import filter_influencers, total_followers
from discovery.formatting       import active_filters, format_number

router = APIRouter()


def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_backend_client(authorization: Optional[str] = Header(default=None)) -> BackendClient:
    """Forward the caller's bearer token to the backend when one is sent."""
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization[7:].strip() or None
    return BackendClient(token=token)


def get_source(
    db: Session = Depends(get_db),
    client: BackendClient = Depends(get_backend_client),
) -> InfluencerSource:
    return InfluencerSource(db, client)


def with_followers(record: Dict[str, Any]) -> Dict[str, Any]:
    total = total_followers(record)
    return {**record, "total_followers": total, "followers_display": format_number(total)}


@router.post("/influencers/search", response_model=SearchResponse)
def search_influencers(criteria: FilterCriteria, source: InfluencerSource = Depends(get_source)):
    # 1) Load the full list, 2) filter in memory, 3) decorate for display
    records = source.load_influencers()
    visible = filter_influencers(records, criteria)
    return {
        "total":          len(records),
        "count":          len(visible),
        "active_filters": active_filters(criteria),
        "influencers":    [with_followers(rec) for rec in visible],
    }


@router.get("/influencers/{influencer_id}")
def get_influencer(influencer_id: str, source: InfluencerSource = Depends(get_source)):
    return with_followers(source.load_profile(influencer_id))


@router.post("/influencers/{influencer_id}/wishlist")
def toggle_wishlist(influencer_id: str, source: InfluencerSource = Depends(get_source)):
    try:
        return with_followers(source.toggle_wishlist(influencer_id))
    except BackendError as e:
        raise BadGatewayException(f"Could not update wishlist: {e}")


@router.get("/wishlist")
def get_wishlist(source: InfluencerSource = Depends(get_source)) -> List[Any]:
    return source.load_wishlist()


@router.get("/niches")
def get_niches(source: InfluencerSource = Depends(get_source)) -> List[Any]:
    return source.load_niches()
