"""slugroute: bidirectional mapping between request paths and site articles."""

from slugroute.resolver import ContentResolver
from slugroute.rules import AddressRuleSet, RuleName

__version__ = "1.0.0"
__all__ = [
    "AddressRuleSet",
    "ContentResolver",
    "RuleName",
]
