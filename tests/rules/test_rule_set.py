import pytest

from slugroute.core.config import RuleSettings
from slugroute.core.exceptions import ConfigurationError
from slugroute.core.ports import AddressRule
from slugroute.core.types import AddressComponents, RuleName
from slugroute.rules import DEFAULT_RULES, AddressRuleSet, PlainRule


def test_every_strategy_is_registered(make_rules):
    rules = make_rules()
    assert rules.names() == [name.value for name in RuleName]
    assert len(DEFAULT_RULES) == len(RuleName)


def test_default_rule_is_category_and_article_name_ext(article_repo, tree):
    rules = AddressRuleSet(articles=article_repo, tree=tree)
    assert rules.active.name == "CategoryAndArticleNameExt"


def test_unknown_rule_name(make_rules):
    rules = make_rules()
    with pytest.raises(ConfigurationError, match="Unknown addressing rule"):
        rules.rule_for("Pretty")


def test_unregistered_rule(article_repo, tree):
    with pytest.raises(ConfigurationError, match="not registered"):
        AddressRuleSet(
            RuleSettings(active=RuleName.ARTICLE_NAME_EXT),
            articles=article_repo,
            tree=tree,
            rules=(PlainRule,),
        )


@pytest.mark.parametrize("name", list(RuleName))
def test_rules_satisfy_the_protocol(make_rules, name):
    rule = make_rules().rule_for(name)
    assert isinstance(rule, AddressRule)
    assert rule.name == name.value


# Articles whose build context is complete under every strategy.
_ADDRESSABLE = [20, 21, 42, 30, 10, 11, 1]


@pytest.mark.parametrize("name", list(RuleName))
@pytest.mark.parametrize("article_id", _ADDRESSABLE)
def test_built_urls_parse_back_to_the_same_article(make_resolver, name, article_id):
    resolver = make_resolver("", active=name)
    article = resolver.rules.articles.get_by_id(article_id)
    url = resolver.url_for(article)

    path, _, query = url.partition("?")
    params = dict(pair.split("=", 1) for pair in query.split("&")) if query else None
    parsed = make_resolver(path, active=name, query=params)

    assert parsed.find().id == article_id, url
    assert parsed.build_canonical_url() == url


@pytest.mark.parametrize("name", list(RuleName))
def test_category_only_matches_are_discarded(make_rules, name):
    rules = make_rules(name)
    for request in ("about/", "category/7", "nope/nothing.html"):
        resolution = rules.parse(AddressComponents.from_request(request, {"c": "7"}))
        assert resolution.category is None or resolution.article is not None
