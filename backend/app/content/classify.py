"""
Keyword classification of news items into site categories, subcategories and tags.

Each policy is an ordered table of ``KeywordRule`` entries evaluated top to
bottom; the first rule with a keyword contained in the (lower-cased) text wins.
Matching is plain substring matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from backend.app.content.base import Category


@dataclass(frozen=True)
class KeywordRule:
    """Map any of ``keywords`` to ``value``."""

    keywords: Tuple[str, ...]
    value: str

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


def first_match(text: str, rules: Sequence[KeywordRule], default: Optional[str] = None) -> Optional[str]:
    """Return the value of the first rule matching ``text``, else ``default``."""
    lowered = text.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule.value
    return default


# Category priority: finance > surf > jiu-jitsu; anything else is tech.
CATEGORY_RULES: Tuple[KeywordRule, ...] = (
    KeywordRule(("crypto", "bitcoin", "finance", "stock", "bank", "trading"), Category.FINANCE.value),
    KeywordRule(("surf", "wave", "ocean", "beach"), Category.SURF.value),
    KeywordRule(("martial", "jiu-jitsu", "bjj", "mma"), Category.JIU_JITSU.value),
)
DEFAULT_CATEGORY = Category.TECH

SUBCATEGORY_RULES: Dict[Category, Tuple[KeywordRule, ...]] = {
    Category.TECH: (
        KeywordRule(("ai", "artificial intelligence"), "ai"),
        KeywordRule(("crypto", "blockchain"), "blockchain"),
        KeywordRule(("app", "mobile"), "mobile"),
    ),
    Category.FINANCE: (
        KeywordRule(("crypto", "bitcoin"), "crypto"),
        KeywordRule(("credit card", "rewards"), "travel-rewards"),
        KeywordRule(("hotel", "airline"), "travel"),
    ),
    Category.JIU_JITSU: (
        KeywordRule(("competition", "tournament"), "competitions"),
        KeywordRule(("gym", "academy"), "gyms"),
        KeywordRule(("athlete", "fighter"), "athletes"),
    ),
    Category.SURF: (
        KeywordRule(("competition", "championship"), "competitions"),
        KeywordRule(("destination", "spot"), "destinations"),
        KeywordRule(("board", "gear"), "gear"),
    ),
}
DEFAULT_SUBCATEGORY: Dict[Category, str] = {
    Category.TECH: "innovation",
    Category.FINANCE: "markets",
    Category.JIU_JITSU: "training",
    Category.SURF: "forecasts",
}

BASE_TAGS: Tuple[str, ...] = ("lifestyle", "chill-vibes")

# Every matching rule contributes its tags, in table order.
TAG_RULES: Dict[Category, Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...]] = {
    Category.TECH: (
        (("ai",), ("artificial-intelligence",)),
        (("crypto", "bitcoin"), ("cryptocurrency", "blockchain")),
        (("app",), ("mobile", "apps")),
    ),
    Category.FINANCE: (
        (("crypto", "bitcoin"), ("cryptocurrency",)),
        (("credit card",), ("travel-rewards", "points")),
        (("stock",), ("markets", "trading")),
    ),
    Category.JIU_JITSU: (),
    Category.SURF: (),
}
CATEGORY_TAGS: Dict[Category, Tuple[str, ...]] = {
    Category.TECH: ("technology", "innovation"),
    Category.FINANCE: ("finance", "money"),
    Category.JIU_JITSU: ("martial-arts", "bjj", "training", "mindset"),
    Category.SURF: ("surfing", "ocean", "waves", "adventure"),
}


def classify_category(title: str) -> Category:
    """Infer the site category of a news item from its title."""
    value = first_match(title, CATEGORY_RULES)
    return Category(value) if value else DEFAULT_CATEGORY


def classify_subcategory(category: Category, title: str, description: str = "") -> str:
    """Infer the subcategory from title and description, scoped to ``category``."""
    text = f"{title} {description}"
    category = Category(category)
    return first_match(text, SUBCATEGORY_RULES[category], DEFAULT_SUBCATEGORY[category])


def _unique(values: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


def generate_tags(category: Category, title: str) -> List[str]:
    """Build the tag list: base tags, keyword-triggered tags, then category defaults."""
    category = Category(category)
    lowered = title.lower()
    tags: List[str] = list(BASE_TAGS)
    for keywords, rule_tags in TAG_RULES[category]:
        if any(keyword in lowered for keyword in keywords):
            tags.extend(rule_tags)
    tags.extend(CATEGORY_TAGS[category])
    return _unique(tags)


__all__ = [
    "KeywordRule",
    "first_match",
    "classify_category",
    "classify_subcategory",
    "generate_tags",
    "CATEGORY_RULES",
    "SUBCATEGORY_RULES",
]
