"""Core data types for slugroute."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, NamedTuple
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, model_validator

from slugroute.core import codec

INDEX_BASENAME = "index"


class SlugType(IntEnum):
    """How an article is addressed. Set once by the editor, read-only here."""

    STATIC = 1
    DYNAMIC = 2
    HOME = 3
    SELF = 4


class RuleName(str, Enum):
    """Addressing strategies, in registry order."""

    PLAIN = "Plain"
    MONTH_ARTICLE_NAME = "MonthArticleName"
    DATE_ARTICLE_NAME = "DateArticleName"
    DIRECT_ARTICLE_ID = "DirectArticleId"
    DIRECT_ARTICLE_NAME = "DirectArticleName"
    DIRECT_ARTICLE_NAME_EXT = "DirectArticleNameExt"
    CATEGORY_AND_ARTICLE_NAME = "CategoryAndArticleName"
    CATEGORY_AND_ARTICLE_NAME_EXT = "CategoryAndArticleNameExt"
    ARTICLE_NAME_EXT = "ArticleNameExt"


class Article(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    category_id: int | None = None
    language_id: int | None = None
    header: str = ""
    slug: str | None = None
    slug_type: SlugType = SlugType.STATIC
    slug_hash: str | None = None
    publish: bool = False
    publish_date: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_slug(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        slug_type = data.get("slug_type", SlugType.STATIC)
        if slug_type in (SlugType.HOME, SlugType.SELF):
            # Home and site articles are addressed by category path alone.
            data["slug"] = None
            data["slug_hash"] = None
        elif data.get("slug") and not data.get("slug_hash"):
            data["slug_hash"] = codec.slug_hash(data["slug"])
        return data

    @property
    def is_static(self) -> bool:
        return self.slug_type == SlugType.STATIC

    @property
    def is_dynamic(self) -> bool:
        return self.slug_type == SlugType.DYNAMIC

    @property
    def is_home(self) -> bool:
        return self.slug_type == SlugType.HOME

    @property
    def is_self(self) -> bool:
        return self.slug_type == SlugType.SELF

    @property
    def is_published(self) -> bool:
        return self.publish

    @property
    def public_slug(self) -> str | None:
        """The slug as it appears in URLs (id embedded for dynamic slugs)."""
        if self.slug and self.is_dynamic:
            return codec.encode(self.slug, self.id)
        return self.slug


class ArticleCategory(BaseModel):
    """A category node stored as a nested-set interval."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    name: str = ""
    publish: bool = False
    slug_path: str
    slug_hash: str | None = None
    left: int
    right: int
    parent_id: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _derive_hash(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("slug_path") and not data.get("slug_hash"):
            data = dict(data)
            data["slug_hash"] = codec.slug_hash(data["slug_path"])
        return data

    @property
    def is_published(self) -> bool:
        return self.publish

    @property
    def has_parent(self) -> bool:
        return self.parent_id is not None

    @property
    def is_well_formed(self) -> bool:
        """Whether the interval can enclose a whole subtree."""
        return self.left < self.right and (self.right - self.left) % 2 == 1

    def contains(self, other: "ArticleCategory") -> bool:
        """Strict interval containment, i.e. ``other`` is a descendant."""
        return self.left < other.left and other.right < self.right


class Resolution(NamedTuple):
    """Outcome of parsing a request: both halves may be missing."""

    article: Article | None = None
    category: ArticleCategory | None = None


class Breadcrumb(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    url: str | None = None


class AddressComponents(BaseModel):
    """Strategy-agnostic URL parts passed through ``build`` and ``parse``.

    ``basename`` and the ``article_id``/``category_id``/``publish_date``
    context are only meaningful when building a URL.
    """

    model_config = ConfigDict(frozen=True)

    route: str | None = None
    filename: str | None = None
    basename: str | None = None
    lang_slug: str | None = None
    query: dict[str, str] = Field(default_factory=dict)

    article_id: int | None = None
    category_id: int | None = None
    publish_date: datetime | None = None

    @classmethod
    def from_request(
        cls,
        path: str,
        query: Mapping[str, str] | None = None,
        languages: Iterable[str] = (),
    ) -> "AddressComponents":
        """Split a request path into route and filename.

        A trailing slash marks a route without a filename (``news/``), and a
        leading known language slug is lifted into ``lang_slug``.

        Examples:
            >>> AddressComponents.from_request("news/world/story.html").route
            'news/world'
            >>> AddressComponents.from_request("/news/").filename is None
            True

        """
        stripped = path.strip().lstrip("/")
        segments = [segment for segment in stripped.split("/") if segment]
        lang_slug = None
        if segments and segments[0] in set(languages):
            lang_slug = segments.pop(0)

        if not segments:
            route, filename = None, None
        elif stripped.endswith("/"):
            route, filename = "/".join(segments), None
        else:
            route = "/".join(segments[:-1]) or None
            filename = segments[-1]

        return cls(
            route=route,
            filename=filename,
            lang_slug=lang_slug,
            query=dict(query or {}),
        )

    @property
    def segments(self) -> list[str]:
        parts = self.route.split("/") if self.route else []
        if self.filename:
            parts.append(self.filename)
        return [part for part in parts if part]

    @property
    def path(self) -> str:
        """Route and filename joined, without language or slashes around."""
        return "/".join(self.segments)

    @property
    def denotes_home(self) -> bool:
        """Whether the basename points at a category's (or the site's) landing article."""
        return not self.basename or self.basename == INDEX_BASENAME

    def to_url(self) -> str:
        """Render the components as a root-relative URL."""
        parts = [self.lang_slug, self.route.strip("/") if self.route else None, self.filename]
        path = "/".join(part for part in parts if part)
        url = f"/{path}" if path else "/"
        if path and not self.filename:
            url += "/"
        if self.query:
            url += "?" + urlencode(self.query)
        return url
