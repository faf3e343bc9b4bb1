"""Shared fixtures: an in-memory site built from :mod:`site_data`."""

import ibis
import pytest

from slugroute.core.config import LanguageSettings, RuleSettings
from slugroute.core.tree import CategoryTree
from slugroute.core.types import RuleName
from slugroute.infra.repository.duckdb import DuckDBArticleRepository, DuckDBCategoryRepository
from slugroute.resolver import ContentResolver
from slugroute.rules import AddressRuleSet

from site_data import ARTICLES, CATEGORIES


@pytest.fixture
def conn():
    """Provides an in-memory DuckDB connection."""
    connection = ibis.duckdb.connect(":memory:")
    yield connection
    connection.disconnect()


@pytest.fixture
def article_repo(conn) -> DuckDBArticleRepository:
    repo = DuckDBArticleRepository(conn)
    repo.initialize()
    for article in ARTICLES:
        repo.save(article)
    return repo


@pytest.fixture
def category_repo(conn) -> DuckDBCategoryRepository:
    repo = DuckDBCategoryRepository(conn)
    repo.initialize()
    for category in CATEGORIES:
        repo.save(category)
    return repo


@pytest.fixture
def tree(category_repo) -> CategoryTree:
    return CategoryTree(category_repo)


@pytest.fixture
def languages() -> LanguageSettings:
    return LanguageSettings(available={"en": 1, "fr": 2}, default="en")


@pytest.fixture
def make_rules(article_repo, tree):
    """Factory for a rule set with the given active rule."""

    def _make(active: RuleName = RuleName.CATEGORY_AND_ARTICLE_NAME_EXT, **options) -> AddressRuleSet:
        return AddressRuleSet(RuleSettings(active=active, **options), articles=article_repo, tree=tree)

    return _make


@pytest.fixture
def make_resolver(make_rules, tree, languages):
    """Factory for a resolver of one request path."""

    def _make(path: str, active: RuleName = RuleName.CATEGORY_AND_ARTICLE_NAME_EXT, query=None) -> ContentResolver:
        return ContentResolver.for_path(path, make_rules(active), tree, languages, query=query)

    return _make
