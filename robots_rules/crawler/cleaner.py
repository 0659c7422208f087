# robots_rules/crawler/cleaner.py
"""
Query-string cleanup driven by Clean-param directives.
"""
from __future__ import annotations

from typing import AbstractSet, List
from urllib.parse import urlsplit, urlunsplit

from robots_rules.models import RuleSet

__all__ = ["clean_url"]


def clean_url(rule_set: RuleSet, url: str, agent: str) -> str:
    """Strip the query parameters that matching Clean-param rules name.

    Parameters are removed as bare keys (`?key`) or `key=value` pairs, every
    occurrence, keeping the order of the rest. An emptied or already empty
    query loses its `?`.
    """
    parts = urlsplit(url)
    if rule_set.is_default:
        return url
    if not parts.query:
        head, sep, fragment = url.partition("#")
        if head.endswith("?"):
            return head[:-1] + sep + fragment
        return url

    query = parts.query
    for group in rule_set.matching_groups(agent):
        for rule in group.clean_param_rules:
            if rule.path_pattern.matches(parts.path):
                query = _strip_params(query, rule.param_names)

    if query == parts.query:
        return url
    return urlunsplit(parts._replace(query=query))


def _strip_params(query: str, names: AbstractSet[str]) -> str:
    pairs = _split_query(query)
    kept = [pair for pair in pairs if pair.partition("=")[0] not in names]
    return "&".join(kept)


def _split_query(query: str) -> List[str]:
    pairs = query.split("&")
    # "a=1&" carries no trailing parameter
    while pairs and not pairs[-1]:
        pairs.pop()
    return pairs
