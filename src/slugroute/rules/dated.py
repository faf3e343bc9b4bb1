"""Date-prefixed addressing: ``/YYYY/MM/<slug>`` and ``/YYYY/MM/DD/<slug>``.

Category landing pages keep their plain slug path. An article URL is only
accepted when its date matches the article's publication date.
"""

import re
from datetime import datetime
from typing import ClassVar

from slugroute.core.exceptions import AddressingError
from slugroute.core.types import AddressComponents, Resolution, RuleName
from slugroute.rules.base import BaseRule, resolved

_DATE_PARTS = (re.compile(r"\d{4}"), re.compile(r"\d{2}"), re.compile(r"\d{2}"))


class _DatedRule(BaseRule):
    date_depth: ClassVar[int]

    def _date_route(self, published: datetime) -> str:
        parts = (f"{published.year:04d}", f"{published.month:02d}", f"{published.day:02d}")
        return "/".join(parts[: self.date_depth])

    def build(self, components: AddressComponents) -> AddressComponents:
        if components.denotes_home:
            return self.landing(components, components.route)
        if components.publish_date is None:
            msg = f"Addressing rule '{self.name}' needs a publication date to build an article URL"
            raise AddressingError(msg)
        return self.with_filename(components, self._date_route(components.publish_date), components.basename)

    def parse(self, components: AddressComponents) -> Resolution:
        segments = components.segments
        if not segments:
            return self.site_home()

        category = self.tree.get_by_slug_path(components.path)
        if category is not None:
            resolution = self.home_of(category)
            if resolution.article is not None:
                return resolution

        if len(segments) != self.date_depth + 1:
            return Resolution()
        date_parts = segments[: self.date_depth]
        if not all(pattern.fullmatch(part) for pattern, part in zip(_DATE_PARTS, date_parts)):
            return Resolution()

        article = self.find_by_filename(segments[-1], any_category=True)
        if article is None or article.publish_date is None:
            return Resolution()
        if self._date_route(article.publish_date) != "/".join(date_parts):
            return Resolution()
        return resolved(article, self.category_of(article))


class MonthArticleNameRule(_DatedRule):
    rule_name = RuleName.MONTH_ARTICLE_NAME
    date_depth = 2


class DateArticleNameRule(_DatedRule):
    rule_name = RuleName.DATE_ARTICLE_NAME
    date_depth = 3
