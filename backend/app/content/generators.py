"""
Content generators producing sample articles from editorial templates.

Generators are pure: no I/O, no failure modes. Each produced article gets a
featured coin flip from the injected random source so tests can seed it.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional

from backend.app.content.base import ArticleDraft, stable_article_id
from backend.app.content.templates import DAILY_TEMPLATES, EVERGREEN_TEMPLATES, EditorialTemplate

# rng.random() must exceed this for a generated article to be featured.
FEATURED_THRESHOLD = 0.7


class ContentGenerator:
    """Turns editorial templates into article drafts."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def _build(self, template: EditorialTemplate) -> ArticleDraft:
        return ArticleDraft(
            id=stable_article_id(f"template:{template.slug}"),
            title=template.title,
            excerpt=template.excerpt,
            content=template.content.strip(),
            category=template.category,
            subcategory=template.subcategory,
            image_url=template.image_url,
            author=template.author,
            is_draft=False,
            is_featured=self.rng.random() > FEATURED_THRESHOLD,
            is_realtime=False,
            tags=list(template.tags),
        )

    def _render(self, templates: Iterable[EditorialTemplate]) -> List[ArticleDraft]:
        return [self._build(template) for template in templates]

    def generate_daily(self) -> List[ArticleDraft]:
        """Two articles per category, used by every sync cycle."""
        return self._render(DAILY_TEMPLATES)

    def generate_evergreen(self) -> List[ArticleDraft]:
        return self._render(EVERGREEN_TEMPLATES)

    def generate_all(self, include_evergreen: bool = False) -> List[ArticleDraft]:
        articles = self.generate_daily()
        if include_evergreen:
            articles.extend(self.generate_evergreen())
        return articles
