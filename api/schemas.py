# api/schemas.py
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, field_validator

Platform = Literal["instagram", "facebook", "youtube", "twitter"]
AgeBracket = Literal["", "18-25", "26-35", "36-45", "46+"]


class FilterCriteria(BaseModel):
    """Discovery page filters. Defaults are inactive."""

    search:           str = ""
    country:          str = ""
    state:            str = ""
    city:             str = ""
    niche:            str = ""
    content_type:     str = ""
    gender:           str = ""
    age:              AgeBracket = ""
    engagement_range: Optional[Tuple[float, float]] = None
    follower_range:   Optional[Tuple[float, float]] = None
    platforms:        List[Platform] = []

    @field_validator("engagement_range", "follower_range")
    @classmethod
    def check_bounds(cls, v):
        if v is not None and v[0] > v[1]:
            raise ValueError("range lower bound is greater than upper bound")
        return v


class SearchResponse(BaseModel):
    total:          int
    count:          int
    active_filters: List[str]
    influencers:    List[Dict[str, Any]]
