"""Query-string addressing: ``/?p=<article-id>`` and ``/?c=<category-id>``."""

from slugroute.core.types import AddressComponents, Resolution, RuleName
from slugroute.rules.base import BaseRule, as_id, resolved

ARTICLE_PARAM = "p"
CATEGORY_PARAM = "c"


class PlainRule(BaseRule):
    rule_name = RuleName.PLAIN

    def build(self, components: AddressComponents) -> AddressComponents:
        if not components.denotes_home:
            article_id = self.require_id(components.article_id, "article")
            query = {ARTICLE_PARAM: str(article_id)}
        elif components.route:
            category_id = self.require_id(components.category_id, "category")
            query = {CATEGORY_PARAM: str(category_id)}
        else:
            query = {}
        return components.model_copy(update={"route": None, "filename": None, "query": query})

    def parse(self, components: AddressComponents) -> Resolution:
        if ARTICLE_PARAM in components.query:
            article_id = as_id(components.query[ARTICLE_PARAM])
            article = self.articles.get_by_id(article_id) if article_id else None
            return resolved(article, self.category_of(article))
        if CATEGORY_PARAM in components.query:
            category_id = as_id(components.query[CATEGORY_PARAM])
            return self.home_of(self.tree.get_by_id(category_id))
        if components.segments:
            return Resolution()
        return self.site_home()
