# discovery/formatting.py
from typing import List

from discovery.filters import ENGAGEMENT_RANGE_DEFAULT, FOLLOWER_RANGE_DEFAULT


def _plain(num) -> str:
    if isinstance(num, float) and num.is_integer():
        num = int(num)
    return str(num)


def _compact(num: float, unit: float, suffix: str) -> str:
    text = f"{num / unit:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return text + suffix


def format_number(num) -> str:
    """1500000 -> '1.5M', 10000 -> '10K', 999 -> '999'."""
    if not num:
        return "0"
    if num >= 1_000_000:
        return _compact(num, 1_000_000, "M")
    if num >= 1_000:
        return _compact(num, 1_000, "K")
    return _plain(num)


def _narrowed(bounds, default) -> bool:
    """A range earns a chip only when it is tighter than the slider's full span."""
    if bounds is None:
        return False
    return bounds[0] > default[0] or bounds[1] < default[1]


def active_filters(criteria) -> List[str]:
    """Labels for the removable chips shown above the influencer list."""
    chips = []
    for label, value in (
        ("Search",  criteria.search),
        ("Country", criteria.country),
        ("State",   criteria.state),
        ("City",    criteria.city),
        ("Niche",   criteria.niche),
        ("Type",    criteria.content_type),
        ("Gender",  criteria.gender),
        ("Age",     criteria.age),
    ):
        if value:
            chips.append(f"{label}: {value}")

    eng = criteria.engagement_range
    if _narrowed(eng, ENGAGEMENT_RANGE_DEFAULT):
        chips.append(f"Engagement: {_plain(eng[0])}%-{_plain(eng[1])}%")

    fol = criteria.follower_range
    if _narrowed(fol, FOLLOWER_RANGE_DEFAULT):
        chips.append(f"Followers: {format_number(fol[0])}-{format_number(fol[1])}")

    for platform in criteria.platforms:
        chips.append(f"Platform: {platform}")
    return chips
