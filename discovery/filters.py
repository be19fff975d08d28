# discovery/filters.py
from typing import Any, Dict, Iterable, List, Optional, Tuple

PLATFORMS = ("instagram", "facebook", "youtube", "twitter")

# label -> (min_age, max_age); None means no upper bound
AGE_BRACKETS: Dict[str, Tuple[int, Optional[int]]] = {
    "18-25": (18, 25),
    "26-35": (26, 35),
    "36-45": (36, 45),
    "46+":   (46, None),
}

FOLLOWER_RANGE_DEFAULT = (0, 1_500_000)
ENGAGEMENT_RANGE_DEFAULT = (0, 10)


def as_number(value: Any) -> float:
    """Coerce a backend value to a number; anything unusable counts as 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def nested_name(record: Dict[str, Any], key: str) -> Optional[str]:
    obj = record.get(key)
    if isinstance(obj, dict):
        return obj.get("name")
    return None


def platform_followers(record: Dict[str, Any], platform: str) -> float:
    data = record.get("data")
    if not isinstance(data, dict):
        return 0
    stats = data.get(platform)
    if not isinstance(stats, dict):
        return 0
    return as_number(stats.get("total_followers"))


def total_followers(record: Dict[str, Any]) -> float:
    return sum(platform_followers(record, p) for p in PLATFORMS)


def in_age_bracket(age: Any, bracket: str) -> bool:
    low, high = AGE_BRACKETS[bracket]
    age = as_number(age)
    if age < low:
        return False
    return high is None or age <= high


def in_range(value: float, bounds: Optional[Tuple[float, float]]) -> bool:
    if bounds is None:
        return True
    low, high = bounds
    return low <= value <= high


def matches_search(record: Dict[str, Any], term: str) -> bool:
    if not term:
        return True
    needle = term.lower()
    for field in ("name", "category"):
        value = record.get(field)
        if isinstance(value, str) and needle in value.lower():
            return True
    return False


def matches(record: Dict[str, Any], criteria) -> bool:
    """
    True when `record` satisfies every active criterion.

    `criteria` is an `api.schemas.FilterCriteria` (or anything exposing the
    same attributes). Empty strings, empty lists and None ranges are
    inactive and impose no constraint.
    """
    if not matches_search(record, criteria.search):
        return False

    # location + niche: exact match on the nested object's name
    for attr in ("country", "state", "city", "niche"):
        wanted = getattr(criteria, attr)
        if wanted and nested_name(record, attr) != wanted:
            return False

    if criteria.content_type and record.get("category") != criteria.content_type:
        return False
    if criteria.gender and record.get("gender") != criteria.gender:
        return False
    if criteria.age and not in_age_bracket(record.get("age"), criteria.age):
        return False

    if not in_range(as_number(record.get("engagement_rate")), criteria.engagement_range):
        return False
    if not in_range(total_followers(record), criteria.follower_range):
        return False

    if criteria.platforms:
        if not any(platform_followers(record, p) > 0 for p in criteria.platforms):
            return False

    return True


def filter_influencers(records: Iterable[Dict[str, Any]], criteria) -> List[Dict[str, Any]]:
    """Stable filter: keeps input order, drops records failing any criterion."""
    return [rec for rec in records if matches(rec, criteria)]
