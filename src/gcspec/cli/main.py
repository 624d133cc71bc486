"""CLI entry point for gcspec."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Tuple

import click

from gcspec import __version__, bootstrap
from gcspec.suite import RunConfig, RunOptions, apply_options, load_config, run_config


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"gcspec {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the gcspec version and exit.",
)
def cli(verbose: bool) -> None:
    """Run garbage-collection-sensitive conformance specs."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    bootstrap()


def _run_options(func):
    func = click.argument("suites", nargs=-1, type=str)(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False),
        help="YAML run file.",
    )(func)
    func = click.option("--collector", type=str, help="Registered collector to use (default: host).")(func)
    func = click.option("--passes", type=click.IntRange(min=1), help="Collection passes for the host collector.")(func)
    func = click.option("--no-builtins", is_flag=True, help="Skip the built-in WeakRef conformance group.")(func)
    func = click.option("--no-isolate", is_flag=True, help="Do not collect garbage before each case.")(func)
    return func


@cli.command()
@_run_options
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
def run(
    suites: Tuple[str, ...],
    config_path: Optional[str],
    collector: Optional[str],
    passes: Optional[int],
    no_builtins: bool,
    no_isolate: bool,
    no_color: bool,
) -> None:
    """Execute registered groups plus any suites given as files or modules."""

    try:
        config = _build_config(config_path, suites, collector, passes, no_builtins, no_isolate)
        exit_code = run_config(config, use_color=not no_color)
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(exit_code)


@cli.command(name="list")
@_run_options
def list_cases(
    suites: Tuple[str, ...],
    config_path: Optional[str],
    collector: Optional[str],
    passes: Optional[int],
    no_builtins: bool,
    no_isolate: bool,
) -> None:
    """List groups and cases without running them."""

    try:
        config = _build_config(config_path, suites, collector, passes, no_builtins, no_isolate)
        exit_code = run_config(config, list_only=True)
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(exit_code)


def _build_config(
    config_path: Optional[str],
    suites: Tuple[str, ...],
    collector: Optional[str],
    passes: Optional[int],
    no_builtins: bool,
    no_isolate: bool,
) -> RunConfig:
    config = load_config(config_path) if config_path else RunConfig()
    options = RunOptions(
        suites=suites,
        builtins=False if no_builtins else None,
        collector=collector,
        passes=passes,
        isolate=False if no_isolate else None,
    )
    return apply_options(config, options)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="gcspec", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
