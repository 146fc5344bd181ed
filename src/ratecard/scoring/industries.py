"""Brand industry to creator niche relationships used by both scorers."""

from collections.abc import Mapping
from types import MappingProxyType

INDUSTRY_NICHES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "fashion": ("fashion", "style", "clothing", "beauty", "lifestyle", "luxury"),
        "fitness": ("fitness", "health", "wellness", "sports", "gym", "nutrition"),
        "technology": ("tech", "gaming", "gadgets", "software", "apps", "ai"),
        "food": ("food", "cooking", "recipes", "restaurants", "foodie", "chef"),
        "travel": ("travel", "adventure", "destinations", "hotels", "wanderlust"),
        "beauty": ("beauty", "makeup", "skincare", "cosmetics", "hair", "nails"),
        "finance": ("finance", "investing", "money", "business", "crypto", "stocks"),
        "education": ("education", "learning", "tutorials", "courses", "teaching"),
        "entertainment": ("entertainment", "movies", "music", "celebrity", "pop culture"),
        "parenting": ("parenting", "family", "kids", "motherhood", "fatherhood"),
        "automotive": ("automotive", "cars", "vehicles", "racing", "motorcycles"),
        "gaming": ("gaming", "esports", "games", "streaming", "twitch"),
        "home": ("home", "decor", "diy", "interior", "garden", "renovation"),
        "pets": ("pets", "dogs", "cats", "animals", "pet care"),
    }
)


def normalize(value: str) -> str:
    return value.lower().strip()


def related_niches(industry: str) -> tuple[str, ...]:
    """Niches related to a brand industry; empty for unknown industries."""
    return INDUSTRY_NICHES.get(normalize(industry), ())


def niche_matches(niche: str, related: tuple[str, ...]) -> bool:
    """Whether a niche overlaps any related niche by substring in either direction."""
    return any(r in niche or niche in r for r in related)


def matching_niches(niches: list[str], industry: str) -> list[str]:
    """Return the creator niches (normalized) that relate to a brand industry."""
    related = related_niches(industry)
    return [n for n in (normalize(n) for n in niches) if niche_matches(n, related)]
