# robots_rules/crawler/robots.py
"""
Per-agent robots.txt session: fetches, compiles and caches one RuleSet per host.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Dict, List, Optional

from robots_rules.config import RobotsConfig
from robots_rules.crawler.cleaner import clean_url
from robots_rules.crawler.fetcher import fetch_robots_txt
from robots_rules.crawler.matcher import is_allowed
from robots_rules.crawler.throttle import ThrottleController
from robots_rules.logger import logger
from robots_rules.models import RobotsDocument, RuleSet
from robots_rules.parser.robots_parser import build_rule_set
from robots_rules.utils import extract_host, request_uri

__all__ = ["Fetcher", "ParsedRobots", "Robots"]

#: (url, user_agent, timeout) -> document or None
Fetcher = Callable[[str, str, float], Optional[RobotsDocument]]


class ParsedRobots:
    """Compiled rules of one host bound to a throttle."""

    def __init__(self, rule_set: RuleSet, throttle: ThrottleController) -> None:
        self.rule_set = rule_set
        self.throttle = throttle

    def allowed(self, url: str, user_agent: str) -> bool:
        result = is_allowed(self.rule_set, request_uri(url), user_agent)
        if result:
            self.throttle.wait(self.rule_set, user_agent)
        return result

    def crawl_delay(self, user_agent: str) -> float:
        return self.throttle.crawl_delay(self.rule_set, user_agent)

    def clean_url(self, url: str, user_agent: str) -> str:
        return clean_url(self.rule_set, url, user_agent)

    def other_values(self) -> Dict[str, List[str]]:
        return {key: list(values) for key, values in self.rule_set.other_directives.items()}


class Robots:
    """robots.txt etiquette for one crawler identity.

    The first request for a host fetches and compiles its robots.txt; the
    result is kept for the life of this object. If robots.txt is missing,
    unreachable or not a `200 OK` text/plain response, everything is allowed.

    Not synchronized: concurrent first requests for the same host may each
    fetch robots.txt, and throttling across threads is best effort.
    """

    def __init__(
        self,
        user_agent: Optional[str] = None,
        config: Optional[RobotsConfig] = None,
        *,
        fetcher: Optional[Fetcher] = None,
        throttle: Optional[ThrottleController] = None,
    ) -> None:
        self.config = config or RobotsConfig()
        self.user_agent = user_agent or self.config.user_agent
        self._fetcher: Fetcher = fetcher or fetch_robots_txt
        self._throttle = throttle or ThrottleController(skip_delay=self.config.skip_delay)
        self._parsed: Dict[Optional[str], ParsedRobots] = {}

    def allowed(self, url: str) -> bool:
        """Return True if the user agent may fetch *url*.

        BLOCKS the calling thread when allowed and the host declares a
        Crawl-delay that has not yet elapsed since the previous allowed
        request to that host. Set `skip_delay` in the config to disable this.
        """
        return self._robots_for(url).allowed(url, self.user_agent)

    def crawl_delay(self, url: str) -> float:
        """Crawl-delay in seconds for the host of *url* (0 when none applies)."""
        return self._robots_for(url).crawl_delay(self.user_agent)

    def clean_url(self, url: str) -> str:
        """Return *url* with Clean-param parameters removed from its query."""
        return self._robots_for(url).clean_url(url, self.user_agent)

    def other_values(self, url: str) -> Dict[str, List[str]]:
        """Unrecognized directives (e.g. `sitemap`) of the host of *url*."""
        return self._robots_for(url).other_values()

    def _robots_for(self, url: str) -> ParsedRobots:
        host = extract_host(url)
        parsed = self._parsed.get(host)
        if parsed is None:
            logger.debug("Loading robots.txt for host %s", host)
            document = self._fetcher(url, self.user_agent, self.config.timeout)
            parsed = ParsedRobots(build_rule_set(document), self._throttle)
            self._parsed[host] = parsed
        return parsed
