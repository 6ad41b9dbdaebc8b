"""Library layout rule sets."""

from assetgnome.rules.base import RuleSet
from assetgnome.rules.library import LibraryRuleSet

__all__ = ["RuleSet", "LibraryRuleSet"]
