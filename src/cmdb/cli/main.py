"""
Main CLI entry point for cmdb.

Provides the command-line interface using Click.
"""

import json as _json
import logging as _logging
import typing as _typing

import click as _click
import pydantic as _pydantic

import cmdb
import cmdb.config as config
import cmdb.errors as errors
import cmdb.frozen as frozen
import cmdb.source as source

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _load(ctx: _click.Context, location: str, prefix: str | None) -> source.Source:
    """Load a source, turning CMDB errors into click errors."""
    settings: config.Settings = ctx.obj["settings"]
    try:
        return source.create(location, prefix, config=settings.flatten)
    except errors.CmdbError as e:
        raise _click.ClickException(str(e)) from e
    except OSError as e:
        raise _click.ClickException(f"Cannot read {location}: {e.strerror or e}") from e


def _encode(value: _typing.Any) -> str:
    return _json.dumps(frozen.thaw(value))


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(cmdb.__version__, "-v", "--version", prog_name="cmdb")
@_click.option("--verbose", is_flag=True, help="Log debug output to stderr")
@_click.pass_context
def cli(ctx: _click.Context, verbose: bool) -> None:
    """cmdb - inspect YAML/JSON configuration data as flat dot-notation keys.

    Settings come from CMDB_* environment variables, e.g.
    CMDB_FLATTEN__MIXED_BOOLEAN_ARRAYS=false or CMDB_LOG_LEVEL=info.
    """
    try:
        settings = config.Settings()
    except _pydantic.ValidationError as e:
        raise _click.ClickException(f"Invalid CMDB_* settings: {e}") from e
    _logging.basicConfig(
        level=_logging.DEBUG if verbose else settings.log_level_number,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@_click.argument("location")
@_click.option("--prefix", default=None, help="Key prefix (default: file name without extension)")
@_click.option("--json", "as_json", is_flag=True, help="Output as a JSON object")
@_click.pass_context
def show(ctx: _click.Context, location: str, prefix: str | None, as_json: bool) -> None:
    """Show every key and value in a data file.

    Examples:
        cmdb show /etc/cmdb/my.yml             # my.database.host = "db1"
        cmdb show my.yml --prefix ""          # database.host = "db1"
        cmdb show file:///etc/cmdb/my.json --json
    """
    loaded = _load(ctx, location, prefix)
    if as_json:
        _click.echo(_json.dumps(loaded.to_dict(), indent=2, sort_keys=True))
        return
    for key, value in sorted(loaded.each_pair()):
        _click.echo(f"{key} = {_encode(value)}")


@cli.command()
@_click.argument("location")
@_click.argument("key")
@_click.option("--prefix", default=None, help="Key prefix (default: file name without extension)")
@_click.pass_context
def get(ctx: _click.Context, location: str, key: str, prefix: str | None) -> None:
    """Print the value of KEY as JSON.

    Exits with status 1 if the key is not present.
    """
    loaded = _load(ctx, location, prefix)
    value = loaded.get(key)
    if value is None:
        raise _click.ClickException(f"Key not found: {key}")
    _click.echo(_encode(value))


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
