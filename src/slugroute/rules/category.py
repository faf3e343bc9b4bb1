"""Addressing by category slug path, with or without a file suffix."""

from slugroute.core.types import AddressComponents, Resolution, RuleName
from slugroute.rules.base import BaseRule, resolved


class CategoryAndArticleNameExtRule(BaseRule):
    """``/<category-path>/<slug>.html``, the category home at ``/<category-path>/``."""

    rule_name = RuleName.CATEGORY_AND_ARTICLE_NAME_EXT
    requires_suffix = True

    def build(self, components: AddressComponents) -> AddressComponents:
        if components.denotes_home:
            return self.landing(components, components.route)
        return self.with_filename(components, components.route, components.basename)

    def parse(self, components: AddressComponents) -> Resolution:
        if components.route:
            category = self.tree.get_by_slug_path(components.route)
            if components.filename:
                category_id = category.id if category else None
                return resolved(self.find_by_filename(components.filename, category_id), category)
            return self.home_of(category)

        if components.filename:
            return resolved(self.find_by_filename(components.filename), None)
        return self.site_home()


class CategoryAndArticleNameRule(CategoryAndArticleNameExtRule):
    """``/<category-path>/<slug>``, the category home at ``/<category-path>/``.

    Without a suffix a trailing segment may name either an article or a
    subcategory, so the whole path is tried as a category first.
    """

    rule_name = RuleName.CATEGORY_AND_ARTICLE_NAME
    requires_suffix = False

    def parse(self, components: AddressComponents) -> Resolution:
        if components.filename:
            resolution = self.home_of(self.tree.get_by_slug_path(components.path))
            if resolution.article is not None:
                return resolution
        return super().parse(components)


class ArticleNameExtRule(BaseRule):
    """``/<slug>.html`` for every article, the category home at ``/<category-path>/``."""

    rule_name = RuleName.ARTICLE_NAME_EXT
    requires_suffix = True

    def build(self, components: AddressComponents) -> AddressComponents:
        if components.denotes_home:
            return self.landing(components, components.route)
        return self.with_filename(components, None, components.basename)

    def parse(self, components: AddressComponents) -> Resolution:
        if not components.segments:
            return self.site_home()

        category = self.tree.get_by_slug_path(components.path)
        if category is not None:
            return self.home_of(category)

        if components.route:
            return Resolution()
        article = self.find_by_filename(components.filename, any_category=True)
        return resolved(article, self.category_of(article))
