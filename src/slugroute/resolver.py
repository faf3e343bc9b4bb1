"""Per-request content resolution.

A :class:`ContentResolver` is created for one incoming request. It parses the
request with the active addressing rule the first time anything asks for the
article or category, and answers every later question from that single
result.
"""

from __future__ import annotations

import logging
from typing import Literal

from slugroute.core.config import LanguageSettings
from slugroute.core.tree import CategoryTree
from slugroute.core.types import AddressComponents, Article, ArticleCategory, Breadcrumb, Resolution
from slugroute.rules import AddressRuleSet

logger = logging.getLogger(__name__)


class ContentResolver:
    """Request-scoped facade over the active addressing rule."""

    def __init__(
        self,
        request: AddressComponents,
        rules: AddressRuleSet,
        tree: CategoryTree,
        languages: LanguageSettings | None = None,
    ) -> None:
        self.request = request
        self.rules = rules
        self.tree = tree
        self.languages = languages or LanguageSettings()
        self._resolution: Resolution | None = None

    @classmethod
    def for_path(
        cls,
        path: str,
        rules: AddressRuleSet,
        tree: CategoryTree,
        languages: LanguageSettings | None = None,
        query: dict[str, str] | None = None,
    ) -> ContentResolver:
        languages = languages or LanguageSettings()
        request = AddressComponents.from_request(path, query, languages=languages.slugs)
        return cls(request, rules, tree, languages)

    # Resolution

    @property
    def resolved(self) -> bool:
        """Whether the request has been parsed yet."""
        return self._resolution is not None

    def _resolve(self) -> Resolution:
        if self._resolution is None:
            resolution = self.rules.parse(self.request)
            if resolution.article is None and resolution.category is not None:
                resolution = Resolution(None, None)
            logger.debug(
                "Resolved %s to article=%s category=%s",
                self.request.to_url(),
                resolution.article.id if resolution.article else None,
                resolution.category.id if resolution.category else None,
            )
            self._resolution = resolution
        return self._resolution

    def find(self) -> Article | Literal[False]:
        """The requested article, or False when nothing matched."""
        return self._resolve().article or False

    def find_category(self) -> ArticleCategory | Literal[False]:
        """The category the article was addressed through, or False."""
        return self._resolve().category or False

    @property
    def article_id(self) -> int | None:
        article = self.find()
        return article.id if article else None

    @property
    def category_id(self) -> int | None:
        category = self.find_category()
        return category.id if category else None

    def is_published(self) -> bool:
        """A page is published when its article is, and its category too if it has one."""
        article = self.find()
        if not article:
            return False
        category = self.find_category()
        if category:
            return category.is_published and article.is_published
        return article.is_published

    # Navigation

    def get_breadcrumbs(self) -> list[Breadcrumb]:
        """Root-first trail from the top category down to the article.

        A category's home article stands for the category itself, so the
        category crumb is dropped in favour of the article's.
        """
        article = self.find()
        if not article:
            return []

        crumbs: list[Breadcrumb] = []
        lang_slug = self.languages.slug_for(article.language_id)
        category = self._category_for(article)
        if category is not None:
            if self.tree.has_parent(category):
                crumbs.extend(
                    Breadcrumb(label=ancestor.name, url=self.category_url(ancestor, lang_slug))
                    for ancestor in self.tree.get_ancestors(category)
                )
            crumbs.append(Breadcrumb(label=category.name, url=self.category_url(category, lang_slug)))

        if article.is_home and category is not None:
            crumbs.pop()
        crumbs.append(Breadcrumb(label=article.header))
        return crumbs

    def _category_for(self, article: Article) -> ArticleCategory | None:
        if article.category_id is None:
            return None
        category = self.find_category()
        if category and category.id == article.category_id:
            return category
        return self.tree.get_by_id(article.category_id)

    # URLs

    def build_canonical_url(self) -> str:
        """Canonical URL of the resolved article, or the request URL when nothing matched."""
        article = self.find()
        if not article:
            return self.request.to_url()
        return self.url_for(article, self._category_for(article))

    def url_for(self, article: Article, category: ArticleCategory | None = None) -> str:
        """Canonical URL of any article under the active rule."""
        if category is None and article.category_id is not None:
            category = self.tree.get_by_id(article.category_id)
        components = AddressComponents(
            route=category.slug_path if category else None,
            basename=article.public_slug,
            lang_slug=self.languages.slug_for(article.language_id),
            article_id=article.id,
            category_id=category.id if category else None,
            publish_date=article.publish_date,
        )
        return self.rules.url_for(components)

    def category_url(self, category: ArticleCategory, lang_slug: str | None = None) -> str:
        """URL of a category's landing page under the active rule.

        Links are written in ``lang_slug``; breadcrumbs pass the article's
        language so they agree with its canonical URL.
        """
        components = AddressComponents(
            route=category.slug_path,
            lang_slug=lang_slug,
            category_id=category.id,
        )
        return self.rules.url_for(components)
