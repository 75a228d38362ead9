# SPDX-License-Identifier: MIT
"""CLI entry point for the verange command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .compare import is_older_than, order_compare, version_key
from .config import ConfigError, VerangeConfig, load_config
from .errors import InvalidRangeError, InvalidVersionError
from .grammar import parse_range, parse_version
from .ranges import BoundPolicy, Range
from .semver import Version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[VerangeConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> VerangeConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def parse_range(self, expression: str, policy: Optional[str] = None) -> Range:
        """Parse a range with the configured bound policy, reporting errors."""
        bound_policy = BoundPolicy(policy) if policy else self.load_config().bound_policy
        try:
            return parse_range(expression, policy=bound_policy)
        except InvalidRangeError as e:
            echo_error(str(e))
            raise SystemExit(1) from e

    def parse_versions(self, texts: tuple[str, ...]) -> list[Version]:
        """Parse version arguments, reporting the first error."""
        try:
            return [parse_version(text) for text in texts]
        except InvalidVersionError as e:
            echo_error(str(e))
            raise SystemExit(1) from e


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(message, fg="yellow")


def _flag(value: bool) -> str:
    return "true" if value else "false"


@click.group()
@click.version_option(package_name="verange")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Look for pyproject.toml starting from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse versions and version ranges.

    \b
    Examples:
        verange version v1.2-rc1
        verange range ">=1.2.3, <=1.2.5, !=1.2.4"
        verange check "^1.2" 1.4.0 2.0.0
        verange compare 1.0.0-alpha 1.0.0
        verange sort 2.0 1.0.0.1 1
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command("version")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def version_cmd(ctx: Context, versions: tuple[str, ...]) -> None:
    """Show the canonical form and fields of each VERSION."""
    for version in ctx.parse_versions(versions):
        echo_info(str(version))
        echo_info(f"  major: {version.major}")
        echo_info(f"  minor: {version.minor}")
        echo_info(f"  patch: {version.patch}")
        if version.extra is not None:
            echo_info(f"  extra: {version.extra}")
        if version.prerelease is not None:
            echo_info(f"  prerelease: {version.prerelease}")
        if version.build is not None:
            echo_info(f"  build: {version.build}")


@cli.command("range")
@click.argument("expression")
@click.option(
    "--policy",
    type=click.Choice([policy.value for policy in BoundPolicy]),
    help="How repeated bounds are merged (overrides [tool.verange]).",
)
@pass_context
def range_cmd(ctx: Context, expression: str, policy: Optional[str]) -> None:
    """Normalize a range EXPRESSION and show its canonical form.

    Exits with status 1 if the range is invalid.
    """
    parsed = ctx.parse_range(expression, policy)

    echo_info(str(parsed))
    echo_info(f"  valid: {_flag(parsed.is_valid())}")
    echo_info(f"  any: {_flag(parsed.is_any())}")
    echo_info(f"  exact: {_flag(parsed.is_exact_match())}")
    if not parsed.is_valid():
        raise SystemExit(1)


@cli.command("check")
@click.argument("expression")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def check_cmd(ctx: Context, expression: str, versions: tuple[str, ...]) -> None:
    """Check whether each VERSION falls inside the range EXPRESSION.

    Exits with status 1 if any version is outside the range.
    """
    parsed = ctx.parse_range(expression)
    outside = 0
    for version in ctx.parse_versions(versions):
        if parsed.contains(version):
            echo_success(f"{version}: ok")
        else:
            echo_warning(f"{version}: no")
            outside += 1

    if outside:
        raise SystemExit(1)


@cli.command("compare")
@click.argument("first")
@click.argument("second")
@pass_context
def compare_cmd(ctx: Context, first: str, second: str) -> None:
    """Compare FIRST and SECOND by range ordering and by age."""
    version1, version2 = ctx.parse_versions((first, second))
    symbol = {-1: "<", 0: "=", 1: ">"}[order_compare(version1, version2)]
    older = is_older_than(version1, version2, ctx.load_config().temporal_order)

    echo_info(f"{version1} {symbol} {version2}")
    echo_info(f"  older: {_flag(older)}")


@cli.command("sort")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def sort_cmd(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print VERSIONS sorted by range ordering, oldest first."""
    for version in sorted(ctx.parse_versions(versions), key=version_key):
        echo_info(str(version))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
