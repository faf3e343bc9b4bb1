"""Addressing rules and the registry that selects the active one."""

import logging

from slugroute.core.config import RuleSettings
from slugroute.core.exceptions import ConfigurationError
from slugroute.core.ports import ArticleRepository
from slugroute.core.tree import CategoryTree
from slugroute.core.types import AddressComponents, Resolution, RuleName
from slugroute.rules.base import BaseRule
from slugroute.rules.category import (
    ArticleNameExtRule,
    CategoryAndArticleNameExtRule,
    CategoryAndArticleNameRule,
)
from slugroute.rules.dated import DateArticleNameRule, MonthArticleNameRule
from slugroute.rules.direct import DirectArticleIdRule, DirectArticleNameExtRule, DirectArticleNameRule
from slugroute.rules.plain import PlainRule

logger = logging.getLogger(__name__)

DEFAULT_RULES: tuple[type[BaseRule], ...] = (
    PlainRule,
    MonthArticleNameRule,
    DateArticleNameRule,
    DirectArticleIdRule,
    DirectArticleNameRule,
    DirectArticleNameExtRule,
    CategoryAndArticleNameRule,
    CategoryAndArticleNameExtRule,
    ArticleNameExtRule,
)


class AddressRuleSet:
    """Ordered registry of addressing rules with one active rule.

    The active rule is chosen from configuration once, when the rule set is
    created; a misconfigured rule fails here rather than on a request.
    """

    def __init__(
        self,
        settings: RuleSettings | None = None,
        *,
        articles: ArticleRepository,
        tree: CategoryTree,
        rules: tuple[type[BaseRule], ...] = DEFAULT_RULES,
    ) -> None:
        self.settings = settings or RuleSettings()
        self.articles = articles
        self.tree = tree
        self._rules: dict[RuleName, type[BaseRule]] = {rule.rule_name: rule for rule in rules}
        self.active = self.rule_for(self.settings.active)
        logger.info("Active addressing rule: %r", self.active)

    def names(self) -> list[str]:
        """Registered rule names, in registry order."""
        return [name.value for name in self._rules]

    def rule_for(self, name: RuleName | str) -> BaseRule:
        """Instantiate a registered rule with this set's repositories and options."""
        try:
            rule_name = RuleName(name)
        except ValueError as exc:
            msg = f"Unknown addressing rule '{name}'. Available: {', '.join(self.names())}"
            raise ConfigurationError(msg) from exc
        if rule_name not in self._rules:
            msg = f"Addressing rule '{rule_name.value}' is not registered. Available: {', '.join(self.names())}"
            raise ConfigurationError(msg)
        return self._rules[rule_name](self.articles, self.tree, self.settings)

    def build(self, components: AddressComponents) -> AddressComponents:
        return self.active.build(components)

    def parse(self, components: AddressComponents) -> Resolution:
        return self.active.parse(components)

    def url_for(self, components: AddressComponents) -> str:
        """Build and render a URL with the active rule."""
        return self.build(components).to_url()


__all__ = [
    "DEFAULT_RULES",
    "AddressRuleSet",
    "ArticleNameExtRule",
    "BaseRule",
    "CategoryAndArticleNameExtRule",
    "CategoryAndArticleNameRule",
    "DateArticleNameRule",
    "DirectArticleIdRule",
    "DirectArticleNameExtRule",
    "DirectArticleNameRule",
    "MonthArticleNameRule",
    "PlainRule",
    "RuleName",
]
