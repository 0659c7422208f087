# setup.py
from setuptools import setup, find_packages

setup(
    name="robots_rules",
    version="0.1.0",
    description="robots.txt rules engine: allow checks, Crawl-delay throttling and Clean-param URL cleanup",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "robots-rules=robots_rules.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
