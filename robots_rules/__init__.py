# robots_rules/__init__.py
"""
robots_rules package initializer.
Defines package version and exposes the per-agent session.
"""
__version__ = "0.1.0"

from robots_rules.config import RobotsConfig, load_config
from robots_rules.crawler.robots import Robots

__all__ = ["__version__", "Robots", "RobotsConfig", "load_config"]
