"""Tests for keyword classification of news items."""

import pytest

from backend.app.content.base import Category
from backend.app.content.classify import (
    KeywordRule,
    classify_category,
    classify_subcategory,
    first_match,
    generate_tags,
)


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Bitcoin Surges Past $100K", Category.FINANCE),
        ("Big wave season opens in Nazaré", Category.SURF),
        ("BJJ world championship results", Category.JIU_JITSU),
        ("MMA fighter announces retirement", Category.JIU_JITSU),
        ("New smartphone chip unveiled", Category.TECH),
        ("", Category.TECH),
    ],
)
def test_classify_category(title, expected):
    assert classify_category(title) == expected


def test_finance_takes_priority_over_surf():
    assert classify_category("Surf brand stock soars on ocean rally") == Category.FINANCE


def test_surf_takes_priority_over_jiu_jitsu():
    assert classify_category("Martial artists go surfing") == Category.SURF


def test_classification_is_case_insensitive():
    assert classify_category("CRYPTO winter is over") == Category.FINANCE


@pytest.mark.parametrize(
    "category,title,description,expected",
    [
        (Category.FINANCE, "Bitcoin Surges Past $100K", "", "crypto"),
        (Category.FINANCE, "Best credit card deals", "", "travel-rewards"),
        (Category.FINANCE, "Central bank holds rates", "", "markets"),
        (Category.TECH, "Chip maker launches", "new artificial intelligence model", "ai"),
        (Category.TECH, "Quantum computing milestone", "", "innovation"),
        (Category.SURF, "Pro tour championship heats", "", "competitions"),
        (Category.SURF, "Swell incoming", "", "forecasts"),
        (Category.JIU_JITSU, "Local academy opens", "", "gyms"),
        (Category.JIU_JITSU, "Drilling guard passes", "", "training"),
    ],
)
def test_classify_subcategory(category, title, description, expected):
    assert classify_subcategory(category, title, description) == expected


def test_generate_tags_for_bitcoin_headline():
    tags = generate_tags(Category.FINANCE, "Bitcoin Surges Past $100K")

    assert tags[:2] == ["lifestyle", "chill-vibes"]
    assert "cryptocurrency" in tags
    assert tags[-2:] == ["finance", "money"]


def test_generate_tags_has_no_duplicates():
    tags = generate_tags(Category.TECH, "AI app for bitcoin crypto traders")

    assert len(tags) == len(set(tags))
    assert "artificial-intelligence" in tags
    assert "cryptocurrency" in tags
    assert "mobile" in tags


def test_first_match_returns_default_when_nothing_matches():
    rules = (KeywordRule(("foo",), "bar"),)

    assert first_match("nothing here", rules, "fallback") == "fallback"
    assert first_match("FOO fighters", rules, "fallback") == "bar"
