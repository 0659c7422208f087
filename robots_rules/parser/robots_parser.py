# File: robots_rules/parser/robots_parser.py
"""robots_rules.parser.robots_parser: tokenizes robots.txt lines and compiles them into a RuleSet."""

from __future__ import annotations

import math
import re
from typing import Iterable, Optional

from robots_rules.logger import logger
from robots_rules.models import (
    CleanParamRule,
    Directive,
    DirectiveKind,
    RobotsDocument,
    RuleGroup,
    RuleSet,
)
from robots_rules.parser.pattern import compile_pattern

__all__ = ("tokenize_line", "parse_robots", "build_rule_set")

_LEADING_FLOAT_RE = re.compile(r"\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")


def build_rule_set(document: Optional[RobotsDocument]) -> RuleSet:
    """Compile a fetched document, falling back to the permissive default.

    Args:
        document: fetch result, or None when robots.txt could not be obtained.

    Returns:
        RuleSet; never empty.
    """
    if document is None:
        logger.info("No robots.txt available, allowing everything")
        return RuleSet.permissive()
    return parse_robots(document.lines, usable=document.is_usable())


def parse_robots(lines: Iterable[str], usable: bool = True) -> RuleSet:
    """Parse robots.txt lines into a RuleSet.

    Args:
        lines: raw document lines, in file order.
        usable: False when the response was not a `200 OK` text/plain one;
            the lines are then ignored.
    """
    if not usable:
        logger.info("robots.txt response is not a 200 OK text/plain document, allowing everything")
        return RuleSet.permissive()

    rule_set = RuleSet()
    current: Optional[RuleGroup] = None

    for raw in lines:
        directive = tokenize_line(raw)
        if directive is None:
            continue
        kind = directive.kind

        if kind is DirectiveKind.USER_AGENT:
            current = RuleGroup(agent_pattern=compile_pattern(directive.value))
            rule_set.groups.append(current)
            continue
        if kind is DirectiveKind.OTHER:
            rule_set.other_directives.setdefault(directive.key, []).append(directive.value)
            continue

        if current is None:
            # rules before any User-agent line apply to every agent
            current = RuleGroup(agent_pattern=compile_pattern("*"))
            rule_set.groups.append(current)
        _apply_directive(directive, current)

    return rule_set


def tokenize_line(line: str) -> Optional[Directive]:
    """Split one line into a Directive, or None for comments, blanks and lines without a colon."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    key, sep, value = stripped.partition(":")
    if not sep:
        logger.debug("Skipping robots.txt line without a colon: %r", stripped)
        return None
    key = key.strip().lower()
    return Directive(kind=DirectiveKind.from_key(key), key=key, value=value.strip())


def _apply_directive(directive: Directive, group: RuleGroup) -> None:
    """Attach an allow/disallow/crawl-delay/clean-param directive to *group*."""
    kind = directive.kind
    if kind is DirectiveKind.ALLOW:
        group.allow_paths.append(compile_pattern(directive.value))
    elif kind is DirectiveKind.DISALLOW:
        group.disallow_paths.append(compile_pattern(directive.value))
    elif kind is DirectiveKind.CRAWL_DELAY:
        group.delay_seconds = _parse_delay(directive.value)
    elif kind is DirectiveKind.CLEAN_PARAM:
        rule = _parse_clean_param(directive.value)
        if rule is not None:
            group.clean_param_rules.append(rule)


def _parse_delay(value: str) -> float:
    """Leading number of *value* ("5 seconds" is 5.0); 0 when there is none."""
    match = _LEADING_FLOAT_RE.match(value)
    delay = float(match.group(0)) if match else math.nan
    if not math.isfinite(delay):
        logger.debug("Invalid Crawl-delay value %r, using 0", value)
        return 0.0
    return delay


def _parse_clean_param(value: str) -> Optional[CleanParamRule]:
    """Parse `p1&p2 /path` into a CleanParamRule; extra tokens are ignored."""
    tokens = value.split()
    if len(tokens) < 2:
        logger.debug("Ignoring Clean-param without a path: %r", value)
        return None
    params, path = tokens[0], tokens[1]
    names = frozenset(name for name in params.split("&") if name)
    return CleanParamRule(param_names=names, path_pattern=compile_pattern(path))
