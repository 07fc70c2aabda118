"""Article records, keyword classification, generators and balancing."""

from .base import ArticleDraft, Category, CATEGORY_ORDER, stable_article_id
from .balancer import balance_by_category, partition_by_category, select_for_category
from .classify import classify_category, classify_subcategory, generate_tags
from .generators import ContentGenerator

__all__ = [
    "ArticleDraft",
    "Category",
    "CATEGORY_ORDER",
    "stable_article_id",
    "balance_by_category",
    "partition_by_category",
    "select_for_category",
    "classify_category",
    "classify_subcategory",
    "generate_tags",
    "ContentGenerator",
]
