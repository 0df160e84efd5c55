"""Command-line interface for spec-options.

Provides CLI commands for inspecting and editing options files.
"""

import logging
from typing import Tuple

import click
import yaml

from spec_options import __version__
from spec_options.io import load_options, resolve_options, save_options
from spec_options.io.files import options_path
from spec_options.options import LIST_KEYS, normalize_option_key

KEY_CHOICES = [key.lstrip(":") for key in LIST_KEYS]


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Setup logging for CLI commands."""
    level = logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    return logging.getLogger("spec_options")


def _resolve(paths: Tuple[str, ...]):
    try:
        return resolve_options(paths)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Invalid options file: {e}")


def _load(path: str):
    try:
        return load_options(path)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Invalid options file: {e}")


@click.group()
@click.version_option(version=__version__, prog_name="spec-options")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """spec-options: Inspect and edit spec test options files.

    Options files are merged from the outermost to the innermost path given.

    Examples:

        # Show the effective options of a test directory
        spec-options show spec/ spec/core_functions/ spec/core_functions/math/

        # Check how an implementation treats a test
        spec-options mode spec/ spec/libsass-todo-tests/ --impl libsass

        # Mark a test as todo for an implementation
        spec-options add spec/directives/use/ --impl dart-sass --key todo
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["logger"] = setup_logging(verbose, debug)


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.pass_context
def show(ctx: click.Context, paths: Tuple[str, ...]) -> None:
    """Print the merged options of PATHS (outermost first)."""
    logger = ctx.obj["logger"]
    logger.info(f"Resolving options from {len(paths)} path(s)")

    options = _resolve(paths)
    if options.is_empty:
        click.echo("No options")
        return
    click.echo(options.to_yaml(), nl=False)


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--impl", "-i", required=True, help="Implementation name")
@click.pass_context
def mode(ctx: click.Context, paths: Tuple[str, ...], impl: str) -> None:
    """Print how IMPL treats the test at the innermost of PATHS.

    Prints "ignore", "todo" or "run", followed by "warning_todo" when
    warning mismatches are tolerated, and the precision.
    """
    logger = ctx.obj["logger"]
    options = _resolve(paths)
    run_mode = options.get_mode(impl) or "run"
    logger.info(f"Mode for {impl}: {run_mode}")

    click.echo(run_mode)
    if options.is_warning_todo(impl):
        click.echo("warning_todo")
    click.echo(f"precision: {options.precision()}")


@cli.command()
@click.argument("path", type=click.Path())
@click.option("--impl", "-i", required=True, help="Implementation name")
@click.option("--key", "-k", type=click.Choice(KEY_CHOICES), default="todo",
              help="Option to add the implementation to")
@click.pass_context
def add(ctx: click.Context, path: str, impl: str, key: str) -> None:
    """Add IMPL to an option of the options file at PATH."""
    logger = ctx.obj["logger"]
    key = normalize_option_key(key)
    file_path = options_path(path)

    options = _load(path)
    if options.has_for_impl(impl, key):
        click.echo(f"{impl} already present in {key} of {file_path}")
        return

    written = save_options(file_path, options.add_impl(impl, key))
    logger.info(f"Added {impl} to {key}")
    click.echo(f"Updated {written}")


@cli.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--impl", "-i", required=True, help="Implementation name")
@click.option("--key", "-k", type=click.Choice(KEY_CHOICES), default="todo",
              help="Option to remove the implementation from")
@click.pass_context
def remove(ctx: click.Context, path: str, impl: str, key: str) -> None:
    """Remove the first entry matching IMPL from the options file at PATH.

    The file is deleted when no options remain.
    """
    logger = ctx.obj["logger"]
    key = normalize_option_key(key)
    file_path = options_path(path)

    options = _load(path)
    updated = options.remove_impl(impl, key)
    if updated is options:
        click.echo(f"{impl} not found in {key} of {file_path}")
        return

    written = save_options(file_path, updated)
    logger.info(f"Removed {impl} from {key}")
    if written is None:
        click.echo(f"Removed {file_path}")
    else:
        click.echo(f"Updated {written}")


def main() -> None:
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
