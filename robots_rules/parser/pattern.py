# File: robots_rules/parser/pattern.py
"""robots_rules.parser.pattern: compiles robots.txt wildcard patterns into prefix matchers."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ("Pattern", "compile_pattern", "MATCH_ALL", "MATCH_NOTHING")

# an empty lookahead fails at every position
_NEVER = re.compile(r"(?!)")


@dataclass(frozen=True, slots=True)
class Pattern:
    """Compiled wildcard pattern, anchored at the start of the subject only."""

    source: str
    regex: re.Pattern[str]

    def matches(self, subject: str) -> bool:
        return self.regex.match(subject) is not None


def compile_pattern(text: str) -> Pattern:
    """Compile *text* where ``*`` matches any (possibly empty) sequence.

    Every other character is literal. Matching is a prefix match: ``"/foo"``
    matches ``"/foo"``, ``"/foobar"`` and ``"/foo/baz"``. Blank text yields
    a pattern that never matches.
    """
    if not text.strip():
        return Pattern(source=text, regex=_NEVER)
    body = ".*".join(re.escape(chunk) for chunk in text.split("*"))
    return Pattern(source=text, regex=re.compile(body))


MATCH_ALL: Pattern = compile_pattern("*")
MATCH_NOTHING: Pattern = compile_pattern("")
