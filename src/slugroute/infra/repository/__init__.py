"""Repository implementations of the core ports."""

from slugroute.infra.repository.duckdb import DuckDBArticleRepository, DuckDBCategoryRepository

__all__ = ["DuckDBArticleRepository", "DuckDBCategoryRepository"]
