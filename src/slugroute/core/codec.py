"""Reversible embedding of an article id in a slug.

Dynamic slugs are published as ``<id>-<slug>`` so the article can be fetched
by primary key straight from the URL:

    >>> encode("my-story", 42)
    '42-my-story'
    >>> decode("42-my-story")
    42
    >>> decode("my-story") is None
    True

"""

import hashlib
import re

from slugroute.core.exceptions import InvalidInputError

_TOKEN_PATTERN = re.compile(r"([1-9][0-9]*)-.+", re.DOTALL)


def encode(text: str, article_id: int) -> str:
    """Merge ``article_id`` into ``text`` keeping the result a single path segment."""
    if not isinstance(article_id, int) or isinstance(article_id, bool) or article_id < 1:
        msg = f"Article id must be a positive integer, got {article_id!r}"
        raise InvalidInputError(msg)
    if not text:
        msg = "Cannot embed an id into an empty slug"
        raise InvalidInputError(msg)
    if "/" in text:
        msg = f"Slug must be a single path segment, got {text!r}"
        raise InvalidInputError(msg)
    return f"{article_id}-{text}"


def decode(token: object) -> int | None:
    """Return the id embedded by :func:`encode`, or None when there is none."""
    if not isinstance(token, str):
        return None
    match = _TOKEN_PATTERN.fullmatch(token)
    if match is None:
        return None
    return int(match.group(1))


def slug_hash(value: str) -> str:
    """Digest used to index slugs and slug paths."""
    return hashlib.md5(value.encode("utf-8")).hexdigest()  # noqa: S324
