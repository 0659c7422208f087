# === FILE: robots_rules/cli.py ===
#!/usr/bin/env python3
"""
Command-line access to a robots_rules session.

Commands:
  allowed URL   Check whether the agent may fetch URL (exit code 1 if not)
  delay URL     Print the Crawl-delay for the host of URL
  clean URL     Print URL with Clean-param parameters removed
  other URL     Print unrecognized directives (sitemap, host, ...) as JSON
  config        Show the effective configuration

Common options:
  --config PATH       YAML/JSON config file
  --user-agent NAME   Override user_agent from the config
  --skip-delay        Do not sleep for Crawl-delay
  --timeout SEC       robots.txt fetch timeout
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Also write logs to PATH (rotated)
  --log-format FORMAT Log record format string

Example:
  robots-rules --user-agent MyBot allowed https://example.com/private/page
"""
import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from robots_rules import __version__
from robots_rules.config import load_config
from robots_rules.crawler.fetcher import fetch_robots_txt
from robots_rules.crawler.robots import Robots
from robots_rules.logger import configure

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='robots-rules, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON config file.'
)
@click.option('--user-agent', '-a', 'user_agent', default=None, help='User-Agent to check rules for.')
@click.option('--skip-delay', 'skip_delay', is_flag=True, help='Do not sleep for Crawl-delay.')
@click.option('--timeout', 'timeout', type=float, default=None, help='robots.txt fetch timeout (seconds).')
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stderr only if not given)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(name)s %(message)s',
    show_default=True,
    help='Log record format string'
)
@click.pass_context
def cli(ctx, config_path, user_agent, skip_delay, timeout, log_level, log_file, log_format):
    """robots.txt rules: allow checks, crawl delay and URL cleanup."""
    configure(level=log_level, log_file=log_file, log_format=log_format)
    try:
        cfg = load_config(config_path)
        overrides = {
            key: value
            for key, value in (('user_agent', user_agent), ('skip_delay', skip_delay or None), ('timeout', timeout))
            if value is not None
        }
        if overrides:
            cfg = cfg.model_validate({**cfg.model_dump(), **overrides})
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


def _session(ctx) -> Robots:
    return Robots(config=ctx.obj['config'], fetcher=fetch_robots_txt)


@cli.command('allowed', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.pass_context
def allowed(ctx, url):
    """Check whether URL may be fetched."""
    if _session(ctx).allowed(url):
        click.echo('allowed')
    else:
        click.echo('disallowed')
        ctx.exit(1)


@cli.command('delay', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.pass_context
def delay(ctx, url):
    """Print the Crawl-delay (seconds) for the host of URL."""
    click.echo(_session(ctx).crawl_delay(url))


@cli.command('clean', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.pass_context
def clean(ctx, url):
    """Print URL with Clean-param parameters removed."""
    click.echo(_session(ctx).clean_url(url))


@cli.command('other', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--pretty', is_flag=True, help='Indent JSON output by 2')
@click.pass_context
def other(ctx, url, pretty):
    """Print unrecognized robots.txt directives as JSON."""
    values = _session(ctx).other_values(url)
    click.echo(json.dumps(values, ensure_ascii=False, indent=2 if pretty else None))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
