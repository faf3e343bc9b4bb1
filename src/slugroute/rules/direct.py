"""Addressing under fixed ``article/`` and ``category/`` prefixes."""

from slugroute.core.types import AddressComponents, Resolution, RuleName
from slugroute.rules.base import BaseRule, as_id, resolved

ARTICLE_PREFIX = "article"
CATEGORY_PREFIX = "category"


class DirectArticleIdRule(BaseRule):
    """``/article/<id>`` and ``/category/<id>``."""

    rule_name = RuleName.DIRECT_ARTICLE_ID

    def build(self, components: AddressComponents) -> AddressComponents:
        if not components.denotes_home:
            article_id = self.require_id(components.article_id, "article")
            return self.with_filename(components, ARTICLE_PREFIX, str(article_id))
        if components.route:
            category_id = self.require_id(components.category_id, "category")
            return self.with_filename(components, CATEGORY_PREFIX, str(category_id))
        return self.landing(components)

    def parse(self, components: AddressComponents) -> Resolution:
        segments = components.segments
        if not segments:
            return self.site_home()
        if len(segments) != 2:
            return Resolution()

        prefix, identifier = segments
        entity_id = as_id(identifier)
        if entity_id is None:
            return Resolution()
        if prefix == ARTICLE_PREFIX:
            article = self.articles.get_by_id(entity_id)
            return resolved(article, self.category_of(article))
        if prefix == CATEGORY_PREFIX:
            return self.home_of(self.tree.get_by_id(entity_id))
        return Resolution()


class DirectArticleNameRule(BaseRule):
    """``/article/<slug>`` and ``/category/<category-path>/``."""

    rule_name = RuleName.DIRECT_ARTICLE_NAME

    def build(self, components: AddressComponents) -> AddressComponents:
        if not components.denotes_home:
            return self.with_filename(components, ARTICLE_PREFIX, components.basename)
        if components.route:
            return self.landing(components, f"{CATEGORY_PREFIX}/{components.route.strip('/')}")
        return self.landing(components)

    def parse(self, components: AddressComponents) -> Resolution:
        segments = components.segments
        if not segments:
            return self.site_home()

        prefix, rest = segments[0], segments[1:]
        if prefix == CATEGORY_PREFIX and rest:
            return self.home_of(self.tree.get_by_slug_path("/".join(rest)))
        if prefix == ARTICLE_PREFIX and len(rest) == 1:
            article = self.find_by_filename(rest[0], any_category=True)
            return resolved(article, self.category_of(article))
        return Resolution()


class DirectArticleNameExtRule(DirectArticleNameRule):
    """``/article/<slug>.html`` and ``/category/<category-path>/``."""

    rule_name = RuleName.DIRECT_ARTICLE_NAME_EXT
    requires_suffix = True
