from typing import Protocol, runtime_checkable

from slugroute.core.types import AddressComponents, Article, ArticleCategory, Resolution


@runtime_checkable
class ArticleRepository(Protocol):
    """Read-only article lookups used during resolution."""

    def get_by_id(self, article_id: int) -> Article | None: ...

    def get_by_slug(
        self,
        slug: str,
        category_id: int | None = None,
        *,
        any_category: bool = False,
    ) -> Article | None:
        """Finds a static-slug article.

        ``category_id=None`` restricts the lookup to uncategorized articles
        unless ``any_category`` is set.
        """
        ...

    def get_by_category_home(self, category_id: int) -> Article | None:
        """Returns the landing (HOME) article of a category."""
        ...

    def get_by_site_home(self) -> Article | None:
        """Returns the site-wide (SELF) article."""
        ...


@runtime_checkable
class CategoryRepository(Protocol):
    """Read-only access to the nested-set category table."""

    def get_by_id(self, category_id: int) -> ArticleCategory | None: ...
    def get_by_slug_path(self, slug_path: str) -> ArticleCategory | None: ...

    def get_ancestors(self, node: ArticleCategory) -> list[ArticleCategory]:
        """Every category whose interval strictly contains ``node``'s, ordered by left bound."""
        ...

    def list_all(self) -> list[ArticleCategory]: ...


@runtime_checkable
class AddressRule(Protocol):
    """One URL-shape convention, usable in both directions."""

    @property
    def name(self) -> str: ...

    def build(self, components: AddressComponents) -> AddressComponents:
        """Derives route/filename/query for an outbound URL."""
        ...

    def parse(self, components: AddressComponents) -> Resolution:
        """Locates the article and category addressed by an inbound URL."""
        ...
