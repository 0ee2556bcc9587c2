"""CLI tools for stateless one-shot transforms."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from pathtext import __version__
from pathtext.config import PathTextConfig, TransformConfig, get_config, get_config_path, set_config
from pathtext.errors import ConfigError
from pathtext.escaping import escape_filename
from pathtext.platforms import PlatformFamily
from pathtext.splitter import split_at_comma
from pathtext.uri import decode_uri, encode_uri

PLATFORM_CHOICES = tuple(family.value for family in PlatformFamily)


@click.group()
@click.version_option(__version__, prog_name="pathtext")
@click.option(
    "--platform",
    "platform_name",
    type=click.Choice(PLATFORM_CHOICES, case_sensitive=False),
    default=None,
    help="Path conventions to use (defaults to the config file, then the running OS)",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to read instead of the default location",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(
    ctx: click.Context, platform_name: str | None, config_path: Path | None, verbose: bool
) -> None:
    """Split parameter lists, escape filenames and decode file URIs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if config_path is None:
        config_path = get_config_path()
    ctx.obj = config_path

    try:
        loaded = PathTextConfig.load(config_path)
    except ConfigError as exc:
        # `config show` and `config init` still run against an unreadable file.
        if ctx.invoked_subcommand != "config":
            raise click.ClickException(str(exc)) from exc
        click.secho(f"Ignoring unreadable config: {exc}", fg="yellow", err=True)
        loaded = PathTextConfig()

    if platform_name is not None:
        family = PlatformFamily(platform_name.lower())
        loaded = PathTextConfig(transform=TransformConfig(platform=family))
    set_config(loaded)


@cli.command()
@click.argument("source")
def split(source: str) -> None:
    """Print each comma-separated field of SOURCE on its own line.

    \b
    Examples:
        pathtext split 'a,b'
        pathtext split 'Monospace\\,Bold,12'
    """
    for field in split_at_comma(source):
        click.echo(field)


@cli.command()
@click.argument("names", nargs=-1, required=True)
def escape(names: tuple[str, ...]) -> None:
    """Print each NAME with its special characters backslash-escaped."""
    for name in names:
        click.echo(escape_filename(name))


@cli.command()
@click.argument("uris", nargs=-1, required=True)
def decode(uris: tuple[str, ...]) -> None:
    """Print the native path of each file:/// URI.

    Exits with status 1 if any URI could not be decoded.
    """
    failed = 0
    for uri in uris:
        path = decode_uri(uri)
        if path is None:
            click.secho(f"Not a decodable file URI: {uri}", fg="red", err=True)
            failed += 1
            continue
        click.echo(path)

    if failed:
        raise SystemExit(1)


@cli.command()
@click.argument("paths", nargs=-1, required=True)
def encode(paths: tuple[str, ...]) -> None:
    """Print the file:/// URI of each absolute PATH."""
    for path in paths:
        try:
            click.echo(encode_uri(path))
        except ValueError as exc:
            raise click.UsageError(str(exc)) from exc


@cli.group()
def config() -> None:
    """Inspect or create the configuration file."""


@config.command("show")
@click.pass_obj
def config_show(config_path: Path) -> None:
    """Print the effective configuration."""
    click.echo(f"config file: {config_path}")
    for key, value in get_config().transform.model_dump(mode="json").items():
        click.echo(f"{key} = {value}")


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_obj
def config_init(path: Path, force: bool) -> None:
    """Write the effective configuration to the config file."""
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")
    try:
        get_config().save(path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    click.secho(f"Wrote {path}", fg="green")
