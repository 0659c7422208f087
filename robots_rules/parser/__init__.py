"""robots_rules.parser: robots.txt tokenizing and pattern compilation."""
