"""
Keysmith CLI
=============

Click-based command-line interface: generate random passwords under
composition rules and analyse the strength of existing ones.

Usage::

    keysmith generate
    keysmith generate -l 24 -u -s -n
    keysmith analyze "Abc123!@"
    keysmith -o json analyze "Abc123!@"
    python -m keysmith generate --length 20 --numbers
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import click

from shared.config import ForgeConfig
from shared.console import ForgeConsole
from shared.models import ToolResult

from keysmith import __version__
from keysmith.core.engine import KeysmithEngine
from keysmith.core.errors import KeysmithError
from keysmith.core.models import format_keyspace
from keysmith.output.console import KeysmithConsoleOutput
from keysmith.output.report import KeysmithReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="keysmith")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a Keysmith configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner and detail tables.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log engine activity (lengths and labels only) to stderr.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """Keysmith -- random password generator and strength analyzer."""
    ctx.ensure_object(dict)

    try:
        forge_config = ForgeConfig.load(config)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--config'") from exc
    if verbose:
        forge_config.global_settings.log_level = "INFO"

    console = ForgeConsole(quiet=quiet)
    ctx.obj["config"] = forge_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = console
    ctx.obj["engine"] = KeysmithEngine(forge_config)
    ctx.obj["display"] = KeysmithConsoleOutput(console)
    ctx.obj["reporter"] = KeysmithReportGenerator()

    if not quiet and output == "console":
        console.banner(version=forge_config.global_settings.version)


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _warn(ctx: click.Context, message: str) -> None:
    """Show a notice without touching stdout when it carries a report."""
    if ctx.obj["quiet"] or ctx.obj["output_format"] != "console":
        click.echo(f"Warning: {message}", err=True)
    else:
        ctx.obj["console"].warning(message)


def _fail(ctx: click.Context, exc: KeysmithError) -> NoReturn:
    """Report a core error and exit with status 1."""
    if ctx.obj["quiet"] or ctx.obj["output_format"] != "console":
        click.echo(f"Error: {exc}", err=True)
    else:
        ctx.obj["console"].error(str(exc))
    ctx.exit(1)


def _handle_output(ctx: click.Context, result: ToolResult) -> None:
    """Emit *result* as JSON or HTML according to the group options."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: KeysmithReportGenerator = ctx.obj["reporter"]
    console: ForgeConsole = ctx.obj["console"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.to_json(result))
    elif output_format == "html":
        path = reporter.generate_html(
            result,
            Path(output_file or f"keysmith_{result.tool_name}.html"),
        )
        console.success(f"HTML report saved to: {path}")


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.option(
    "--length", "-l",
    type=int,
    default=None,
    help="Password length (8-128; out-of-range values fall back to 16).",
)
@click.option(
    "--uppercase-chars", "-u",
    is_flag=True,
    default=False,
    help="Include uppercase characters (A-Z).",
)
@click.option(
    "--special-chars", "-s",
    is_flag=True,
    default=False,
    help="Include special characters (!@#$%^&*_-+=<>?).",
)
@click.option(
    "--numbers", "-n",
    is_flag=True,
    default=False,
    help="Include numeric digits (0-9).",
)
@click.pass_context
def generate(
    ctx: click.Context,
    length: Optional[int],
    uppercase_chars: bool,
    special_chars: bool,
    numbers: bool,
) -> None:
    """Generate a random password.

    Lowercase letters are always used; every enabled category is
    guaranteed to appear at least once.
    """
    engine: KeysmithEngine = ctx.obj["engine"]
    display: KeysmithConsoleOutput = ctx.obj["display"]

    try:
        generated = engine.generate(length, uppercase_chars, special_chars, numbers)
    except KeysmithError as exc:
        _fail(ctx, exc)

    for notice in generated.notices:
        _warn(ctx, notice)

    if ctx.obj["output_format"] == "console":
        click.echo(f"Generated Password: {generated.password}")
        display.display_generated(generated)
    else:
        _handle_output(ctx, engine.generation_result(generated))


@cli.command()
@click.argument("password")
@click.pass_context
def analyze(ctx: click.Context, password: str) -> None:
    """Analyse the strength of PASSWORD.

    Reports category coverage, search pool, keyspace, entropy, a
    strength label and crack-time estimates.
    """
    engine: KeysmithEngine = ctx.obj["engine"]
    display: KeysmithConsoleOutput = ctx.obj["display"]

    try:
        report = engine.analyze(password)
    except KeysmithError as exc:
        _fail(ctx, exc)

    if ctx.obj["output_format"] != "console":
        _handle_output(ctx, engine.analysis_result(report))
        return

    click.echo("Password Strength Analysis:")
    if ctx.obj["quiet"]:
        click.echo(f"  Strength:   {report.strength.value}")
        click.echo(f"  Length:     {report.length}")
        click.echo(
            f"  Categories: {', '.join(c.value for c in report.categories) or 'none'}"
        )
        click.echo(f"  Pool size:  {report.pool_size}")
        click.echo(f"  Keyspace:   {format_keyspace(report.keyspace)}")
        click.echo(f"  Entropy:    {report.entropy_bits:.2f} bits")
    else:
        display.display_strength(report)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Keysmith CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
