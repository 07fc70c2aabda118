"""Tests for per-category balancing."""

from backend.app.content.balancer import balance_by_category, partition_by_category, select_for_category
from backend.app.content.base import ArticleDraft, Category


def make_article(article_id: str, category: str, featured: bool = False) -> ArticleDraft:
    return ArticleDraft(
        id=article_id,
        title=f"Title {article_id}",
        excerpt="excerpt",
        content="content",
        category=category,
        author="Tester",
        is_featured=featured,
    )


def test_featured_articles_fill_quota_in_original_order():
    articles = [
        make_article("a", "tech"),
        make_article("b", "tech", featured=True),
        make_article("c", "tech"),
        make_article("d", "tech", featured=True),
        make_article("e", "tech", featured=True),
        make_article("f", "tech", featured=True),
    ]

    selected = select_for_category(articles, 3)

    assert [a.id for a in selected] == ["b", "d", "e"]


def test_non_featured_fill_remaining_slots_in_input_order():
    articles = [
        make_article("a", "surf"),
        make_article("b", "surf"),
        make_article("c", "surf", featured=True),
        make_article("d", "surf"),
    ]

    selected = select_for_category(articles, 3)

    assert [a.id for a in selected] == ["c", "a", "b"]


def test_balance_caps_each_category_and_orders_categories():
    articles = (
        [make_article(f"s{i}", "surf") for i in range(4)]
        + [make_article(f"f{i}", "finance") for i in range(2)]
        + [make_article(f"t{i}", "tech") for i in range(5)]
    )

    balanced = balance_by_category(articles, per_category=3)

    assert [a.id for a in balanced] == ["t0", "t1", "t2", "f0", "f1", "s0", "s1", "s2"]


def test_partition_keeps_every_article():
    articles = [
        make_article("a", "tech"),
        make_article("b", "jiu-jitsu"),
        make_article("c", "surf"),
        make_article("d", "finance"),
    ]

    buckets = partition_by_category(articles)

    assert list(buckets) == [Category.TECH, Category.FINANCE, Category.JIU_JITSU, Category.SURF]
    assert sum(len(bucket) for bucket in buckets.values()) == len(articles)


def test_balance_of_empty_input_is_empty():
    assert balance_by_category([]) == []
