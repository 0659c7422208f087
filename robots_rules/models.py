# robots_rules/models.py
"""
Data models for compiled robots.txt rules.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Optional

from robots_rules.parser.pattern import MATCH_ALL, Pattern


class DirectiveKind(str, Enum):
    """Directive keys the parser understands; everything else is OTHER."""

    USER_AGENT = "user-agent"
    ALLOW = "allow"
    DISALLOW = "disallow"
    CRAWL_DELAY = "crawl-delay"
    CLEAN_PARAM = "clean-param"
    OTHER = "other"

    @classmethod
    def from_key(cls, key: str) -> DirectiveKind:
        try:
            return cls(key)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True, slots=True)
class Directive:
    """One tokenized `key: value` line."""

    kind: DirectiveKind
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class CleanParamRule:
    """Query parameters to strip from URLs whose path matches `path_pattern`."""

    param_names: FrozenSet[str]
    path_pattern: Pattern


@dataclass(slots=True)
class RuleGroup:
    """Rules attached to a single `User-agent` line."""

    agent_pattern: Pattern
    allow_paths: List[Pattern] = field(default_factory=list)
    disallow_paths: List[Pattern] = field(default_factory=list)
    delay_seconds: Optional[float] = None
    clean_param_rules: List[CleanParamRule] = field(default_factory=list)

    def applies_to(self, agent: str) -> bool:
        return self.agent_pattern.matches(agent)


@dataclass(slots=True)
class RuleSet:
    """Compiled form of one host's robots.txt.

    `groups` keeps file order; rule evaluation depends on it.
    `last_accessed` is the monotonic time of the last throttled access and is
    shared by every caller holding this RuleSet.
    """

    groups: List[RuleGroup] = field(default_factory=list)
    other_directives: Dict[str, List[str]] = field(default_factory=dict)
    last_accessed: Optional[float] = None
    is_default: bool = False

    def matching_groups(self, agent: str) -> Iterator[RuleGroup]:
        return (group for group in self.groups if group.applies_to(agent))

    @classmethod
    def permissive(cls) -> RuleSet:
        """Rule set used when no usable robots.txt exists: everything allowed."""
        group = RuleGroup(agent_pattern=MATCH_ALL, allow_paths=[MATCH_ALL])
        return cls(groups=[group], is_default=True)


@dataclass(frozen=True, slots=True)
class RobotsDocument:
    """Raw robots.txt response as returned by the fetcher."""

    status: int
    reason: str
    content_type: str
    lines: List[str] = field(default_factory=list)

    def is_usable(self) -> bool:
        """Only a `200 OK` text/plain response is parsed."""
        return (
            self.content_type == "text/plain"
            and self.status == 200
            and self.reason.strip().upper() == "OK"
        )
