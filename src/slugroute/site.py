"""Site wiring: configuration, storage and the active addressing rule.

Built once at startup and shared by every request; each request then gets
its own :class:`~slugroute.resolver.ContentResolver` from :meth:`SiteContext.resolver`.
"""

from dataclasses import dataclass, field

import ibis

from slugroute.core.config import SlugrouteConfig
from slugroute.core.tree import CategoryTree
from slugroute.infra.repository.duckdb import DuckDBArticleRepository, DuckDBCategoryRepository
from slugroute.resolver import ContentResolver
from slugroute.rules import AddressRuleSet


@dataclass
class SiteContext:
    config: SlugrouteConfig
    conn: ibis.BaseBackend
    articles: DuckDBArticleRepository
    categories: DuckDBCategoryRepository
    tree: CategoryTree = field(init=False)
    rules: AddressRuleSet = field(init=False)

    def __post_init__(self) -> None:
        self.tree = CategoryTree(self.categories)
        self.rules = AddressRuleSet(self.config.rules, articles=self.articles, tree=self.tree)

    def initialize(self) -> None:
        """Create the storage tables."""
        self.articles.initialize()
        self.categories.initialize()

    def resolver(self, path: str, query: dict[str, str] | None = None) -> ContentResolver:
        """A fresh resolver for one request."""
        return ContentResolver.for_path(path, self.rules, self.tree, self.config.languages, query=query)

    def close(self) -> None:
        self.conn.disconnect()


def build_context(config: SlugrouteConfig | None = None, *, database: str | None = None) -> SiteContext:
    """Connect to the configured DuckDB file (or ``database``, e.g. ``":memory:"``)."""
    config = config or SlugrouteConfig.load()
    if database is None:
        db_path = config.paths.abs_db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)
        database = str(db_path)
    conn = ibis.duckdb.connect(database)
    return SiteContext(
        config=config,
        conn=conn,
        articles=DuckDBArticleRepository(conn),
        categories=DuckDBCategoryRepository(conn),
    )
