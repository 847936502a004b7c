"""
pwquality CLI
==============

Click-based command-line interface for the password quality checker.

Usage::

    pwquality check "Tr0ub4dor&3xyz"
    pwquality check --min-length 12 --no-require-symbol
    pwquality -o json check "hunter2"
    pwquality -c pwquality.toml defaults

``check`` exits with status 0 when the password is accepted, 1 when it
is rejected and 2 on usage or configuration errors, so it can gate
shell scripts and CI jobs. When PASSWORD is omitted it is read from a
hidden prompt.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import click

from pwquality import __version__
from pwquality.core.engine import QualityEngine
from pwquality.core.models import QualityResult
from pwquality.core.settings import resolve_settings
from pwquality.exceptions import PwQualityError
from pwquality.output.console import QualityConsoleOutput
from pwquality.output.report import QualityReportGenerator
from pwquality.shared.config import AppConfig
from pwquality.shared.console import QualityConsole
from pwquality.shared.logger import QualityLogger


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="pwquality")
@click.option(
    "--config", "-c",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a pwquality configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (overrides the config file).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write a JSON report to this file.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and console output.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log pipeline details to stderr.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """pwquality -- score passwords and explain what makes them weak."""
    ctx.ensure_object(dict)

    try:
        app_config = AppConfig.load(config)
    except PwQualityError as exc:
        QualityConsole(stderr=True).error(str(exc))
        ctx.exit(2)

    global_settings = app_config.global_settings
    ctx.obj["config"] = app_config
    ctx.obj["output_format"] = output or global_settings.output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = QualityConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["display"] = QualityConsoleOutput(console)
    ctx.obj["reporter"] = QualityReportGenerator()
    ctx.obj["logger"] = QualityLogger(
        "engine",
        log_level="DEBUG" if verbose else global_settings.log_level,
        log_file=global_settings.log_file,
        json_logs=global_settings.log_json,
    )

    if not quiet and ctx.obj["output_format"] == "console":
        console.banner(version=__version__)


def _handle_output(
    ctx: click.Context, result: QualityResult, password: str
) -> None:
    """Render *result* in the selected format and write any report file."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    console: QualityConsole = ctx.obj["console"]

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        display: QualityConsoleOutput = ctx.obj["display"]
        display.display_result(result, password=password)

    if output_file:
        reporter: QualityReportGenerator = ctx.obj["reporter"]
        path = reporter.generate_json(result, Path(output_file))
        if output_format == "console":
            console.success(f"JSON report saved to: {path}")


def _read_denylist(path: str) -> list[str]:
    """Read one denylisted password per line, skipping blanks and comments."""
    entries: list[str] = []
    try:
        with open(path, encoding="utf-8") as fh:
            for line in fh:
                entry = line.strip()
                if entry and not entry.startswith("#"):
                    entries.append(entry.lower())
    except UnicodeDecodeError as exc:
        raise click.BadParameter(
            f"{path}: not valid UTF-8 ({exc.reason} at byte {exc.start})",
            param_hint="'--common-passwords'",
        ) from exc
    except OSError as exc:
        raise click.BadParameter(
            f"{path}: {exc.strerror or exc}",
            param_hint="'--common-passwords'",
        ) from exc
    return entries


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.option("--min-length", type=int, default=None, help="Minimum length.")
@click.option("--max-length", type=int, default=None, help="Maximum length.")
@click.option(
    "--require-upper/--no-require-upper", default=None,
    help="Require uppercase letters.",
)
@click.option(
    "--require-lower/--no-require-lower", default=None,
    help="Require lowercase letters.",
)
@click.option(
    "--require-number/--no-require-number", default=None,
    help="Require digits.",
)
@click.option(
    "--require-symbol/--no-require-symbol", default=None,
    help="Require special characters.",
)
@click.option(
    "--min-entropy", type=float, default=None,
    help="Entropy floor in bits.",
)
@click.option(
    "--common-passwords", "common_passwords_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="File of denylisted passwords, one per line (replaces the default list).",
)
@click.pass_context
def check(
    ctx: click.Context,
    password: Optional[str],
    min_length: Optional[int],
    max_length: Optional[int],
    require_upper: Optional[bool],
    require_lower: Optional[bool],
    require_number: Optional[bool],
    require_symbol: Optional[bool],
    min_entropy: Optional[float],
    common_passwords_file: Optional[str],
) -> None:
    """Evaluate PASSWORD (prompted for when omitted)."""
    if password is None:
        password = click.prompt("Password", hide_input=True, err=True)

    flags: dict[str, Any] = {
        "minLength": min_length,
        "maxLength": max_length,
        "requireUpper": require_upper,
        "requireLower": require_lower,
        "requireNumber": require_number,
        "requireSymbol": require_symbol,
        "minEntropy": min_entropy,
    }
    overrides = {key: value for key, value in flags.items() if value is not None}
    if common_passwords_file:
        overrides["commonPasswords"] = _read_denylist(common_passwords_file)

    app_config: AppConfig = ctx.obj["config"]
    engine = QualityEngine(app_config.quality, logger=ctx.obj["logger"])
    result = engine.evaluate(password, overrides)

    _handle_output(ctx, result, password)
    ctx.exit(0 if result.valid else 1)


@cli.command()
@click.pass_context
def defaults(ctx: click.Context) -> None:
    """Show the effective settings (defaults plus config file)."""
    app_config: AppConfig = ctx.obj["config"]
    settings = resolve_settings(app_config.quality)

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(settings.to_options(), indent=2, ensure_ascii=False))
    else:
        display: QualityConsoleOutput = ctx.obj["display"]
        display.display_settings(settings)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the pwquality CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
