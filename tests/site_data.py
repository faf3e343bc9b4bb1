"""A small site shared by the tests.

Categories (nested set)::

    news [1, 6]            id 3
        world [2, 3]       id 4
        drafts [4, 5]      id 5 (unpublished)
    about [7, 8]           id 7

"""

from datetime import datetime

from slugroute.core.types import Article, ArticleCategory, SlugType

CATEGORIES = [
    ArticleCategory(id=3, name="News", publish=True, slug_path="news", left=1, right=6),
    ArticleCategory(id=4, name="World", publish=True, slug_path="news/world", left=2, right=3, parent_id=3),
    ArticleCategory(id=5, name="Drafts", publish=False, slug_path="news/drafts", left=4, right=5, parent_id=3),
    ArticleCategory(id=7, name="About", publish=True, slug_path="about", left=7, right=8),
]

ARTICLES = [
    Article(id=1, header="Welcome", slug_type=SlugType.SELF, publish=True),
    Article(id=10, category_id=3, header="News", slug_type=SlugType.HOME, publish=True),
    Article(id=11, category_id=4, header="World", slug_type=SlugType.HOME, publish=True),
    Article(
        id=20,
        category_id=3,
        header="My story",
        slug="my-story",
        publish=True,
        publish_date=datetime(2024, 3, 5, 9, 30),
    ),
    Article(
        id=21,
        category_id=4,
        language_id=2,
        header="Election",
        slug="election",
        publish=True,
        publish_date=datetime(2024, 3, 7),
    ),
    Article(
        id=42,
        category_id=3,
        header="Breaking",
        slug="breaking",
        slug_type=SlugType.DYNAMIC,
        publish=True,
        publish_date=datetime(2024, 4, 1),
    ),
    Article(id=30, header="Contact", slug="contact", publish=True, publish_date=datetime(2023, 12, 31)),
    Article(id=31, category_id=5, header="Leaked", slug="leaked", publish=True),
    Article(id=32, category_id=3, header="Draft note", slug="draft-note", publish=False),
    Article(id=33, category_id=4, header="Another story", slug="my-story", publish=True),
]
