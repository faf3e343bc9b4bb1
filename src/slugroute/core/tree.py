"""Navigation over nested-set encoded categories.

Each category carries a ``(left, right)`` interval; a node is an ancestor of
another exactly when its interval strictly contains the other's. Ancestors are
therefore found with one interval query instead of walking ``parent_id`` links,
and come back root-first when ordered by ``left``.
"""

import logging
from collections.abc import Iterable

from slugroute.core.exceptions import InvalidInputError, TreeIntegrityError
from slugroute.core.ports import CategoryRepository
from slugroute.core.types import ArticleCategory

logger = logging.getLogger(__name__)


class CategoryTree:
    """Read-only view of the category hierarchy."""

    def __init__(self, repository: CategoryRepository) -> None:
        self.repository = repository

    def get_by_id(self, category_id: int | None) -> ArticleCategory | None:
        if not category_id:
            return None
        return self.repository.get_by_id(category_id)

    def get_by_slug_path(self, slug_path: str | None) -> ArticleCategory | None:
        """Exact match on the materialized path, e.g. ``news/world``."""
        normalized = (slug_path or "").strip("/")
        if not normalized:
            return None
        return self.repository.get_by_slug_path(normalized)

    def has_parent(self, node: ArticleCategory) -> bool:
        return node.has_parent

    def get_ancestors(self, node: ArticleCategory) -> list[ArticleCategory]:
        """Return the ancestors of ``node``, root first.

        Raises:
            TreeIntegrityError: If the stored intervals do not form a chain
                enclosing ``node`` or disagree with ``parent_id``.

        """
        _check_interval(node)
        ancestors = self.repository.get_ancestors(node)

        enclosed = node
        for ancestor in reversed(ancestors):
            _check_interval(ancestor)
            if not ancestor.contains(enclosed):
                msg = (
                    f"Category {ancestor.id} [{ancestor.left}, {ancestor.right}] does not enclose "
                    f"category {enclosed.id} [{enclosed.left}, {enclosed.right}]"
                )
                raise TreeIntegrityError(msg)
            enclosed = ancestor

        parent_id = ancestors[-1].id if ancestors else None
        if parent_id != node.parent_id:
            msg = (
                f"Category {node.id} names parent {node.parent_id} "
                f"but its intervals place it under {parent_id}"
            )
            raise TreeIntegrityError(msg)
        return ancestors

    def get_parent(self, node: ArticleCategory, depth: int = 1) -> ArticleCategory | None:
        """Return the ancestor ``depth`` levels above ``node`` (1 is the parent)."""
        if depth < 1:
            msg = f"Depth must be at least 1, got {depth}"
            raise InvalidInputError(msg)
        if not node.has_parent:
            return None
        ancestors = self.get_ancestors(node)
        if depth > len(ancestors):
            return None
        return ancestors[-depth]

    def validate(self, categories: Iterable[ArticleCategory] | None = None) -> int:
        """Check the nested-set invariant over the whole tree.

        Returns the number of nodes checked.

        Raises:
            TreeIntegrityError: On malformed intervals, partial overlaps,
                shared bounds or a ``parent_id`` that is not the tightest
                enclosing node.

        """
        nodes = sorted(
            self.repository.list_all() if categories is None else categories,
            key=lambda category: category.left,
        )
        bounds: set[int] = set()
        stack: list[ArticleCategory] = []
        for node in nodes:
            _check_interval(node)
            for bound in (node.left, node.right):
                if bound in bounds:
                    msg = f"Bound {bound} of category {node.id} is shared with another category"
                    raise TreeIntegrityError(msg)
                bounds.add(bound)

            while stack and stack[-1].right < node.left:
                stack.pop()
            if stack and not stack[-1].contains(node):
                msg = (
                    f"Category {node.id} [{node.left}, {node.right}] partially overlaps "
                    f"category {stack[-1].id} [{stack[-1].left}, {stack[-1].right}]"
                )
                raise TreeIntegrityError(msg)

            expected_parent = stack[-1].id if stack else None
            if node.parent_id != expected_parent:
                msg = f"Category {node.id} names parent {node.parent_id}, expected {expected_parent}"
                raise TreeIntegrityError(msg)
            stack.append(node)

        logger.debug("Validated nested set of %d categories", len(nodes))
        return len(nodes)


def _check_interval(node: ArticleCategory) -> None:
    if not node.is_well_formed:
        msg = f"Category {node.id} has a malformed interval [{node.left}, {node.right}]"
        raise TreeIntegrityError(msg)
