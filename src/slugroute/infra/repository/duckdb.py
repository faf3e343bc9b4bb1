from typing import Any

import ibis
from ibis.expr.types import Table

from slugroute.core.codec import slug_hash
from slugroute.core.ports import ArticleRepository, CategoryRepository
from slugroute.core.types import Article, ArticleCategory, SlugType

# Category model fields that are stored under a different column name.
_CATEGORY_COLUMNS = {"left": "ns_left", "right": "ns_right", "parent_id": "ns_parent"}


class _DuckDBRepository:
    table_name: str

    def __init__(self, conn: ibis.BaseBackend) -> None:
        if not hasattr(conn, "con"):
            msg = f"{type(self).__name__} requires a raw DuckDB connection via the '.con' attribute."
            raise ValueError(msg)
        self.conn = conn

    def _get_table(self) -> Table:
        return self.conn.table(self.table_name)

    def _rows(self, query: Table, limit: int | None = None) -> list[dict[str, Any]]:
        if limit:
            query = query.limit(limit)
        return query.to_pyarrow().to_pylist()

    def _upsert_record(self, record: dict[str, Any]) -> None:
        """Helper to perform a raw SQL upsert (INSERT OR REPLACE)."""
        columns = ", ".join(record)
        placeholders = ", ".join("?" for _ in record)
        query = f"INSERT OR REPLACE INTO {self.table_name} ({columns}) VALUES ({placeholders})"
        self.conn.con.execute(query, list(record.values()))


class DuckDBArticleRepository(_DuckDBRepository, ArticleRepository):
    """DuckDB-backed article storage."""

    table_name = "article"

    def initialize(self) -> None:
        """Creates the 'article' table if it doesn't exist."""
        self.conn.con.execute(f"""
            CREATE TABLE IF NOT EXISTS {self.table_name} (
                id INTEGER PRIMARY KEY,
                category_id INTEGER,
                language_id INTEGER,
                header VARCHAR,
                slug VARCHAR,
                slug_hash VARCHAR,
                slug_type INTEGER,
                publish BOOLEAN,
                publish_date TIMESTAMP
            )
        """)

    def save(self, article: Article) -> Article:
        """Upserts an article. Editing is not part of resolution; this feeds fixtures and imports."""
        record = article.model_dump()
        record["slug_type"] = int(article.slug_type)
        self._upsert_record(record)
        return article

    def _first(self, query: Table) -> Article | None:
        rows = self._rows(query, limit=1)
        if not rows:
            return None
        return Article.model_validate(rows[0])

    def get_by_id(self, article_id: int) -> Article | None:
        t = self._get_table()
        return self._first(t.filter(t.id == article_id))

    def get_by_slug(
        self,
        slug: str,
        category_id: int | None = None,
        *,
        any_category: bool = False,
    ) -> Article | None:
        """Finds a static-slug article, matching on the indexed hash first."""
        t = self._get_table()
        query = t.filter(
            (t.slug_hash == slug_hash(slug))
            & (t.slug == slug)
            & (t.slug_type == int(SlugType.STATIC))
        )
        if not any_category:
            if category_id is None:
                query = query.filter(query.category_id.isnull())
            else:
                query = query.filter(query.category_id == category_id)
        return self._first(query.order_by(query.id))

    def get_by_category_home(self, category_id: int) -> Article | None:
        t = self._get_table()
        query = t.filter((t.slug_type == int(SlugType.HOME)) & (t.category_id == category_id))
        return self._first(query.order_by(query.id))

    def get_by_site_home(self) -> Article | None:
        t = self._get_table()
        query = t.filter(t.slug_type == int(SlugType.SELF))
        return self._first(query.order_by(query.id))

    def count(self) -> int:
        return self._get_table().count().execute()


class DuckDBCategoryRepository(_DuckDBRepository, CategoryRepository):
    """DuckDB-backed nested-set category storage."""

    table_name = "article_category"

    def initialize(self) -> None:
        """Creates the 'article_category' table if it doesn't exist."""
        self.conn.con.execute(f"""
            CREATE TABLE IF NOT EXISTS {self.table_name} (
                id INTEGER PRIMARY KEY,
                name VARCHAR,
                publish BOOLEAN,
                slug_path VARCHAR,
                slug_hash VARCHAR,
                ns_left INTEGER,
                ns_right INTEGER,
                ns_parent INTEGER
            )
        """)

    def save(self, category: ArticleCategory) -> ArticleCategory:
        record = {_CATEGORY_COLUMNS.get(key, key): value for key, value in category.model_dump().items()}
        self._upsert_record(record)
        return category

    def _hydrate(self, row: dict[str, Any]) -> ArticleCategory:
        fields = {column: field for field, column in _CATEGORY_COLUMNS.items()}
        return ArticleCategory.model_validate({fields.get(key, key): value for key, value in row.items()})

    def get_by_id(self, category_id: int) -> ArticleCategory | None:
        t = self._get_table()
        rows = self._rows(t.filter(t.id == category_id), limit=1)
        return self._hydrate(rows[0]) if rows else None

    def get_by_slug_path(self, slug_path: str) -> ArticleCategory | None:
        t = self._get_table()
        query = t.filter((t.slug_hash == slug_hash(slug_path)) & (t.slug_path == slug_path))
        rows = self._rows(query, limit=1)
        return self._hydrate(rows[0]) if rows else None

    def get_ancestors(self, node: ArticleCategory) -> list[ArticleCategory]:
        """Every category enclosing ``node``'s interval, root first."""
        t = self._get_table()
        query = t.filter((t.ns_left < node.left) & (t.ns_right > node.right)).order_by(t.ns_left)
        return [self._hydrate(row) for row in self._rows(query)]

    def list_all(self) -> list[ArticleCategory]:
        t = self._get_table()
        return [self._hydrate(row) for row in self._rows(t.order_by(t.ns_left))]
