# File: tests/conftest.py
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from robots_rules.config import RobotsConfig
from robots_rules.crawler.robots import Robots
from robots_rules.models import RobotsDocument
from robots_rules.utils import extract_host

FIXTURES_DIR = Path(__file__).parent / "fixtures"

DEFAULT_AGENT = "Ruby-Robot.txt Parser Test Script"


def fixture_fetcher(url: str, user_agent: str, timeout: float) -> Optional[RobotsDocument]:
    """
    Serve tests/fixtures/<name>.txt for http://www.<name>.com/...
    Unknown hosts behave like an unreachable robots.txt.
    """
    host = extract_host(url) or ""
    fixture = FIXTURES_DIR / f"{host.split('.')[-2]}.txt"
    if not fixture.is_file():
        return None
    return RobotsDocument(
        status=200,
        reason="OK",
        content_type="text/plain",
        lines=fixture.read_text(encoding="utf-8").splitlines(),
    )


def uri_for_name(name: str, path: str = "") -> str:
    return f"http://www.{name}.com{path}"


def doc(text: str) -> List[str]:
    """Turn an inline robots.txt into lines."""
    return text.splitlines()


@pytest.fixture()
def make_robots() -> Callable[..., Robots]:
    """
    Build a Robots session served from the fixtures directory.
    Delays are skipped unless a config says otherwise.
    """

    def _make(user_agent: str = DEFAULT_AGENT, config: Optional[RobotsConfig] = None, **kwargs) -> Robots:
        cfg = config or RobotsConfig(user_agent=user_agent, skip_delay=True)
        kwargs.setdefault("fetcher", fixture_fetcher)
        return Robots(user_agent, cfg, **kwargs)

    return _make


@pytest.fixture()
def robots(make_robots) -> Robots:
    return make_robots()


@pytest.fixture()
def robots_mobot(make_robots) -> Robots:
    return make_robots("Mobot")


class FakeClock:
    """Manual clock for throttle tests; sleeping advances time."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()
