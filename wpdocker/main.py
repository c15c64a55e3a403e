"""
WordPress Docker Setup — CLI entrypoint.

Usage:
    wordpress-docker-setup
    wordpress-docker-setup --config setup.yml
    python -m wpdocker.main --json
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from wpdocker import __version__
from wpdocker.core.observability.logging_config import configure_cli_logging

if TYPE_CHECKING:
    from wpdocker.core.use_cases.setup import SetupResult


def _banner(title: str) -> None:
    click.echo("=" * 40)
    click.secho(title, bold=True)
    click.echo("=" * 40)


def _print_summary(result: SetupResult, quiet: bool) -> None:
    """Human-readable report: files, credentials, next steps."""
    config = result.config
    creds = result.credentials
    if config is None or creds is None:
        raise click.ClickException("No setup result to summarize: the run did not complete")
    compose = config.compose_command

    if not quiet:
        click.echo("🔐 Generated secure passwords for database")
        for f in result.files:
            click.secho(f"   ✓ {f.path:<20}", fg="green", nl=False)
            click.echo(f" {f.reason}")
        click.echo()
        _banner("Setup Complete!")
        click.echo()

    click.echo(f"Files created in: {result.project_root}")
    click.echo()
    click.secho("Database credentials (saved in .env):", bold=True)
    click.echo(f"  Root Password: {creds.db_root_password}")
    click.echo(f"  WordPress DB Password: {creds.db_password}")
    click.echo()

    if quiet:
        return

    click.secho("Next steps:", bold=True)
    click.echo(f"  1. cd {config.project_dir}")
    click.echo(f"  2. {compose} up -d")
    click.echo("  3. Wait 30 seconds for containers to initialize")
    click.echo(f"  4. Visit {config.site_url}")
    click.echo()
    click.echo(f"View logs: {compose} logs -f")
    click.echo(f"Stop: {compose} down")
    click.echo()
    click.secho(
        "IMPORTANT: Keep the .env file secure and don't commit it to version control!",
        fg="yellow",
    )
    click.echo()


@click.command()
@click.version_option(version=__version__, prog_name="wordpress-docker-setup")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to a setup YAML overriding the defaults.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def cli(
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    as_json: bool,
) -> None:
    """WordPress Docker Setup — scaffold Nginx, PHP-FPM and MySQL for WordPress.

    Creates a project directory holding docker-compose.yml, nginx.conf,
    php.ini, a .env with freshly generated database passwords, a
    .gitignore and a README.
    """
    # ── Logging setup (once, at process start) ──────────────────
    configure_cli_logging(debug=debug, verbose=verbose, quiet=quiet)

    from wpdocker.core.config.loader import ConfigError, load_config
    from wpdocker.core.use_cases.setup import run_setup

    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"ok": False, "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if not as_json and not quiet:
        _banner("WordPress Docker Setup Script")
        click.echo()

    result = run_setup(config)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if result.error:
        click.secho(f"❌ Error: {result.error}", fg="red")
        sys.exit(1)

    _print_summary(result, quiet)


if __name__ == "__main__":
    cli()
