# robots_rules/crawler/fetcher.py
"""
Fetcher module: downloads robots.txt with a timeout and never raises on network failure.
"""
from __future__ import annotations

import asyncio
from typing import Final, Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from robots_rules.logger import logger
from robots_rules.models import RobotsDocument
from robots_rules.utils import robots_url_for

__all__ = ["DEFAULT_TIMEOUT", "fetch_robots_txt", "fetch_robots_txt_async"]

DEFAULT_TIMEOUT: Final[float] = 3.0


async def fetch_robots_txt_async(
    url: str, user_agent: str, timeout: float = DEFAULT_TIMEOUT
) -> Optional[RobotsDocument]:
    """
    Fetch `/robots.txt` of the host serving *url*.

    Returns a RobotsDocument for any HTTP response (status and content type are
    judged later by the parser), or None on timeout, transport failure or a URL
    without a host.
    """
    robots_url = robots_url_for(url)
    if robots_url is None:
        logger.warning("Cannot derive robots.txt location from %r", url)
        return None

    try:
        async with ClientSession(
            timeout=ClientTimeout(total=timeout),
            headers={"User-Agent": user_agent},
        ) as session:
            async with session.get(robots_url) as resp:
                text = await resp.text()
                return RobotsDocument(
                    status=resp.status,
                    reason=resp.reason or "",
                    content_type=resp.content_type,
                    lines=text.splitlines(),
                )
    except asyncio.TimeoutError:
        logger.warning("robots.txt request timed out after %ss: %s", timeout, robots_url)
    except ClientError as exc:
        logger.warning("robots.txt request failed for %s: %s", robots_url, exc)
    except (UnicodeDecodeError, LookupError) as exc:
        # undecodable body or unknown charset
        logger.warning("robots.txt at %s could not be decoded: %s", robots_url, exc)
    return None


def fetch_robots_txt(
    url: str, user_agent: str, timeout: float = DEFAULT_TIMEOUT
) -> Optional[RobotsDocument]:
    """Blocking wrapper around :func:`fetch_robots_txt_async`.

    Runs its own event loop, so it must not be called from a coroutine.
    """
    return asyncio.run(fetch_robots_txt_async(url, user_agent, timeout))
