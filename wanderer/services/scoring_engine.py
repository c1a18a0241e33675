"""Scoring engine — ranks tourist spots against a traveler's stated preferences."""

from dataclasses import dataclass
from typing import Any

from wanderer.data.albay import in_districts


@dataclass(frozen=True)
class Weights:
    category: float = 5.0      # per matching category preference
    subcategory: float = 3.0   # per matching subcategory preference
    district: float = 10.0     # flat, when the spot lies in a preferred district
    hidden_gem: float = 5.0    # flat
    rating: float = 3.0        # scaled by rating / 5


# Home-page "Recommended for you" panel: interests only, lighter boosts.
SPOTLIGHT_WEIGHTS = Weights(category=3.0, subcategory=0.0, district=5.0, hidden_gem=2.0, rating=2.0)

# Personalised feed built from onboarding answers.
FEED_WEIGHTS = Weights()

SPOTLIGHT_LIMIT = 8
FEED_LIMIT = 6


@dataclass
class Preferences:
    categories: list[str]
    subcategories: list[str]
    districts: list[str]

    @classmethod
    def from_dict(cls, raw: dict | None) -> "Preferences":
        """
        Build from a stored preferences blob.

        Accepts onboarding answers ({categories, subcategories, districts}) as well
        as the older {interests, districts} shape, where interests act as categories.
        """
        raw = raw or {}
        categories = raw.get("categories") or raw.get("interests") or []
        return cls(
            categories=list(categories),
            subcategories=list(raw.get("subcategories") or []),
            districts=list(raw.get("districts") or []),
        )


def _field(item: Any, name: str, default=None):
    if isinstance(item, dict):
        return item.get(name, default)
    return getattr(item, name, default)


def count_category_matches(preferred: list[str], spot_categories: list[str]) -> int:
    """Number of preferences that overlap any spot category (substring either way)."""
    matches = 0
    for pref in preferred:
        p = pref.lower()
        if any(p in c.lower() or c.lower() in p for c in spot_categories):
            matches += 1
    return matches


def count_subcategory_matches(preferred: list[str], spot_categories: list[str]) -> int:
    """Number of subcategories contained in any spot category."""
    matches = 0
    for sub in preferred:
        s = sub.lower()
        if any(s in c.lower() for c in spot_categories):
            matches += 1
    return matches


def score_spot(spot: Any, prefs: Preferences, weights: Weights = FEED_WEIGHTS) -> float:
    """Linear preference score for one spot (ORM object or dict)."""
    score = 0.0
    spot_categories = _field(spot, "category") or []

    if spot_categories:
        if weights.category:
            score += count_category_matches(prefs.categories, spot_categories) * weights.category
        if weights.subcategory:
            score += count_subcategory_matches(prefs.subcategories, spot_categories) * weights.subcategory

    if prefs.districts and in_districts(_field(spot, "municipality"), prefs.districts):
        score += weights.district

    if _field(spot, "is_hidden_gem"):
        score += weights.hidden_gem

    rating = _field(spot, "rating")
    if rating:
        score += (rating / 5) * weights.rating

    return score


def rank_spots(
    spots: list,
    prefs: Preferences,
    weights: Weights = FEED_WEIGHTS,
    limit: int | None = None,
    positive_only: bool = False,
) -> list[tuple[Any, float]]:
    """
    Score and rank spots.

    Returns (spot, score) pairs sorted by score descending; ties keep input order.
    """
    scored = [(spot, score_spot(spot, prefs, weights)) for spot in spots]
    if positive_only:
        scored = [pair for pair in scored if pair[1] > 0]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    if limit is not None:
        scored = scored[:limit]
    return scored


def filter_by_districts(items: list, districts: list[str] | None) -> list:
    """Keep items located in any preferred district; no districts keeps everything."""
    if not districts:
        return list(items)
    return [item for item in items if in_districts(_field(item, "municipality"), districts)]
