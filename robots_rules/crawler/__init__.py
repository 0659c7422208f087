"""robots_rules.crawler: fetching, matching, throttling and URL cleanup."""
