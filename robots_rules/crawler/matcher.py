# robots_rules/crawler/matcher.py
"""
Allow/Disallow decision over a compiled RuleSet.
"""
from __future__ import annotations

from robots_rules.models import RuleSet

__all__ = ["is_allowed"]


def is_allowed(rule_set: RuleSet, path: str, agent: str) -> bool:
    """Return True if *agent* may fetch *path* (request URI, query included).

    Precedence is not longest-match: any matching Disallow denies, and then
    any matching Allow from any group for this agent permits again,
    regardless of pattern length or position in the file.
    """
    groups = list(rule_set.matching_groups(agent))

    allowed = True
    for group in groups:
        for rule in group.disallow_paths:
            if rule.matches(path):
                allowed = False

    if not allowed:
        for group in groups:
            for rule in group.allow_paths:
                if rule.matches(path):
                    allowed = True

    return allowed
