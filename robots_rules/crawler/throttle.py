"""Crawl-delay computation and per-host throttling."""

from __future__ import annotations

import time
from collections.abc import Callable

from robots_rules.logger import logger
from robots_rules.models import RuleSet


class ThrottleController:
    """Enforces Crawl-delay between accesses to one RuleSet.

    The last access time lives on the RuleSet itself, so every caller sharing
    a host's RuleSet shares its throttle. Updates are unsynchronized; under
    concurrency the last writer wins.
    """

    def __init__(
        self,
        *,
        skip_delay: bool = False,
        now_fn: Callable[[], float] = time.monotonic,
        sleep_fn: Callable[[float], None] = time.sleep,
    ) -> None:
        self.skip_delay = skip_delay
        self._now = now_fn
        self._sleep = sleep_fn

    @staticmethod
    def crawl_delay(rule_set: RuleSet, agent: str) -> float:
        """Delay declared by the last matching group in file order, or 0."""
        delay = 0.0
        for group in rule_set.matching_groups(agent):
            if group.delay_seconds is not None:
                delay = group.delay_seconds
        return delay

    def wait(self, rule_set: RuleSet, agent: str) -> float:
        """Block until Crawl-delay has passed since the last access, then record this one.

        Returns the number of seconds slept. Does nothing when `skip_delay` is set.
        """
        if self.skip_delay:
            return 0.0

        slept = 0.0
        last = rule_set.last_accessed
        if last is not None:
            remaining = self.crawl_delay(rule_set, agent) - (self._now() - last)
            if remaining > 0:
                logger.debug("Honoring Crawl-delay for %s: sleeping %.2fs", agent, remaining)
                self._sleep(remaining)
                slept = remaining
        rule_set.last_accessed = self._now()
        return slept
