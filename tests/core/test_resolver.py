from unittest.mock import patch

import pytest

from slugroute.core.types import Article, Breadcrumb, RuleName


def test_find_and_category(make_resolver):
    resolver = make_resolver("news/world/election.html")
    assert resolver.find().id == 21
    assert resolver.find_category().id == 4
    assert resolver.article_id == 21
    assert resolver.category_id == 4


def test_not_found_returns_false(make_resolver):
    resolver = make_resolver("news/missing.html")
    assert resolver.find() is False
    assert resolver.find_category() is False
    assert resolver.article_id is None
    assert resolver.category_id is None


def test_category_without_article_is_not_reported(make_resolver):
    resolver = make_resolver("about/")
    assert resolver.find() is False
    assert resolver.find_category() is False


def test_request_is_parsed_once(make_resolver):
    resolver = make_resolver("news/my-story.html")
    with patch.object(resolver.rules, "parse", wraps=resolver.rules.parse) as parse:
        assert not resolver.resolved
        resolver.find()
        resolver.find_category()
        resolver.is_published()
        resolver.get_breadcrumbs()
        resolver.build_canonical_url()
        assert resolver.resolved
    assert parse.call_count == 1


def test_unresolved_request_is_also_parsed_once(make_resolver):
    resolver = make_resolver("nope.html")
    with patch.object(resolver.rules, "parse", wraps=resolver.rules.parse) as parse:
        resolver.find()
        resolver.find()
        resolver.find_category()
    assert parse.call_count == 1


class TestPublication:
    @pytest.mark.parametrize(
        ("path", "published"),
        [
            ("news/my-story.html", True),
            ("contact.html", True),
            ("news/draft-note.html", False),
            ("news/drafts/leaked.html", False),
            ("news/missing.html", False),
        ],
    )
    def test_is_published(self, make_resolver, path, published):
        assert make_resolver(path).is_published() is published


class TestBreadcrumbs:
    def test_article_in_subcategory(self, make_resolver):
        assert make_resolver("news/world/my-story.html").get_breadcrumbs() == [
            Breadcrumb(label="News", url="/news/"),
            Breadcrumb(label="World", url="/news/world/"),
            Breadcrumb(label="Another story"),
        ]

    @pytest.mark.parametrize(
        "path",
        ["news/world/election.html", "fr/news/world/election.html", "en/news/world/election.html"],
    )
    def test_links_are_in_the_articles_language(self, make_resolver, path):
        resolver = make_resolver(path)
        assert resolver.build_canonical_url() == "/fr/news/world/election.html"
        assert resolver.get_breadcrumbs() == [
            Breadcrumb(label="News", url="/fr/news/"),
            Breadcrumb(label="World", url="/fr/news/world/"),
            Breadcrumb(label="Election"),
        ]

    def test_home_article_replaces_its_category(self, make_resolver):
        assert make_resolver("news/world/").get_breadcrumbs() == [
            Breadcrumb(label="News", url="/news/"),
            Breadcrumb(label="World"),
        ]
        assert make_resolver("news/").get_breadcrumbs() == [Breadcrumb(label="News")]

    def test_uncategorized_article(self, make_resolver):
        assert make_resolver("contact.html").get_breadcrumbs() == [Breadcrumb(label="Contact")]
        assert make_resolver("").get_breadcrumbs() == [Breadcrumb(label="Welcome")]

    def test_nothing_resolved(self, make_resolver):
        assert make_resolver("news/missing.html").get_breadcrumbs() == []

    def test_category_links_follow_the_active_rule(self, make_resolver):
        crumbs = make_resolver("", active=RuleName.PLAIN, query={"p": "33"}).get_breadcrumbs()
        assert [crumb.url for crumb in crumbs] == ["/?c=3", "/?c=4", None]


class TestCanonicalUrl:
    @pytest.mark.parametrize(
        ("path", "canonical"),
        [
            ("news/my-story.html", "/news/my-story.html"),
            ("news/42-breaking.html", "/news/42-breaking.html"),
            ("news/42-anything.html", "/news/42-breaking.html"),
            ("news/world/election.html", "/fr/news/world/election.html"),
            ("news/world/", "/news/world/"),
            ("", "/"),
        ],
    )
    def test_canonical_url(self, make_resolver, path, canonical):
        assert make_resolver(path).build_canonical_url() == canonical

    def test_unresolved_request_keeps_its_url(self, make_resolver):
        resolver = make_resolver("fr/news/missing.html", query={"page": "2"})
        assert resolver.build_canonical_url() == "/fr/news/missing.html?page=2"

    def test_canonical_url_uses_the_articles_own_category(self, make_resolver):
        # An embedded id is trusted whatever category path it is requested under.
        resolver = make_resolver("about/42-breaking.html")
        assert resolver.find().id == 42
        assert resolver.build_canonical_url() == "/news/42-breaking.html"

    def test_url_for_any_article(self, make_resolver):
        resolver = make_resolver("")
        story = Article(id=20, category_id=3, slug="my-story")
        assert resolver.url_for(story) == "/news/my-story.html"
        assert resolver.url_for(Article(id=99, slug="orphan")) == "/orphan.html"
