"""Shared machinery for addressing rules.

A rule turns an ``(article, category)`` pair into URL components and back.
The lookups every rule needs (decoding a filename, finding a category's home
article, the discard rule for category-only matches) live here so concrete
rules only describe their URL shape.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from slugroute.core import codec
from slugroute.core.config import RuleSettings
from slugroute.core.exceptions import AddressingError, ConfigurationError
from slugroute.core.ports import AddressRule, ArticleRepository
from slugroute.core.tree import CategoryTree
from slugroute.core.types import AddressComponents, Article, ArticleCategory, Resolution, RuleName

logger = logging.getLogger(__name__)


class BaseRule(AddressRule, ABC):
    """Base class for the addressing strategies."""

    rule_name: ClassVar[RuleName]
    requires_suffix: ClassVar[bool] = False

    def __init__(
        self,
        articles: ArticleRepository,
        tree: CategoryTree,
        settings: RuleSettings | None = None,
    ) -> None:
        self.articles = articles
        self.tree = tree
        self.settings = settings or RuleSettings(active=self.rule_name)
        # Only the *Ext rules put a suffix on filenames.
        self.suffix = (self.settings.suffix or None) if self.requires_suffix else None
        if self.requires_suffix and not self.suffix:
            msg = f"Addressing rule '{self.name}' requires a file suffix (rules.suffix)"
            raise ConfigurationError(msg)

    @property
    def name(self) -> str:
        return self.rule_name.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(suffix={self.suffix!r})"

    @abstractmethod
    def build(self, components: AddressComponents) -> AddressComponents: ...

    @abstractmethod
    def parse(self, components: AddressComponents) -> Resolution: ...

    # Lookups

    def has_suffix(self, filename: str) -> bool:
        """Whether ``filename`` is shaped the way this rule builds it."""
        if not self.suffix:
            return True
        return filename.endswith(self.suffix) and len(filename) > len(self.suffix)

    def strip_suffix(self, filename: str) -> str:
        """Drop the configured suffix; filenames without it are kept as is."""
        if self.suffix and self.has_suffix(filename):
            return filename[: -len(self.suffix)]
        return filename

    def find_by_filename(
        self,
        filename: str,
        category_id: int | None = None,
        *,
        any_category: bool = False,
    ) -> Article | None:
        """Resolve a URL filename to an article.

        An id embedded by the slug codec wins and is fetched by primary key;
        anything else is looked up as a static slug. Under a suffixed rule a
        filename without the suffix addresses nothing.
        """
        if not self.has_suffix(filename):
            logger.debug("Filename %r lacks the %r suffix", filename, self.suffix)
            return None
        basename = self.strip_suffix(filename)
        article_id = codec.decode(basename)
        if article_id is not None:
            logger.debug("Filename %r carries article id %d", filename, article_id)
            return self.articles.get_by_id(article_id)
        return self.articles.get_by_slug(basename, category_id, any_category=any_category)

    def category_of(self, article: Article | None) -> ArticleCategory | None:
        """The category an article belongs to, for rules whose URL omits it."""
        if article is None or article.category_id is None:
            return None
        return self.tree.get_by_id(article.category_id)

    def home_of(self, category: ArticleCategory | None) -> Resolution:
        """Resolve a category URL to the category's landing article."""
        if category is None:
            return Resolution()
        return resolved(self.articles.get_by_category_home(category.id), category)

    def site_home(self) -> Resolution:
        return Resolution(self.articles.get_by_site_home(), None)

    # Building helpers

    def with_filename(self, components: AddressComponents, route: str | None, filename: str) -> AddressComponents:
        if self.suffix:
            filename += self.suffix
        return components.model_copy(update={"route": route, "filename": filename, "query": {}})

    def landing(self, components: AddressComponents, route: str | None = None) -> AddressComponents:
        """A landing page: the category path given in ``route``, or the site root."""
        return components.model_copy(update={"route": route, "filename": None, "query": {}})

    def require_id(self, value: int | None, what: str) -> int:
        if value is None:
            msg = f"Addressing rule '{self.name}' needs the {what} id to build a URL"
            raise AddressingError(msg)
        return value


def as_id(text: str | None) -> int | None:
    """Parse a positive integer URL segment."""
    if not text or not text.isdecimal() or not text.isascii():
        return None
    value = int(text)
    return value if value > 0 else None


def resolved(article: Article | None, category: ArticleCategory | None) -> Resolution:
    """Pair an article with its category, dropping the category when no article matched.

    A category path alone is not a resolution: the page to render is always an
    article.
    """
    if article is None:
        return Resolution(None, None)
    return Resolution(article, category)
