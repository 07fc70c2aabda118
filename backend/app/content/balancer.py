"""Per-category balancing of combined generator and news output."""

from __future__ import annotations

from typing import Dict, List, Sequence

from backend.app.content.base import CATEGORY_ORDER, ArticleDraft, Category

DEFAULT_PER_CATEGORY = 3


def partition_by_category(articles: Sequence[ArticleDraft]) -> Dict[Category, List[ArticleDraft]]:
    """Bucket articles by category, preserving input order within each bucket."""
    buckets: Dict[Category, List[ArticleDraft]] = {category: [] for category in CATEGORY_ORDER}
    for article in articles:
        buckets[Category(article.category)].append(article)
    return buckets


def select_for_category(articles: Sequence[ArticleDraft], limit: int) -> List[ArticleDraft]:
    """
    Pick up to ``limit`` articles, featured first.

    The sort is stable, so input order decides among equally-flagged articles.
    """
    ordered = sorted(articles, key=lambda article: not article.is_featured)
    return ordered[:max(limit, 0)]


def balance_by_category(
    articles: Sequence[ArticleDraft],
    per_category: int = DEFAULT_PER_CATEGORY,
) -> List[ArticleDraft]:
    """Cap every category at ``per_category`` articles, in fixed category order."""
    balanced: List[ArticleDraft] = []
    for bucket in partition_by_category(articles).values():
        balanced.extend(select_for_category(bucket, per_category))
    return balanced
