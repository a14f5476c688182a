"""Command-line interface for logsh."""
import json
import logging
import sys
from pathlib import Path

import click
from rich.markup import escape

from .config import ConfigError, ConfigurationStore, dump_configuration, read_configuration
from .display import console, err_console, render_connections, show_probe_result, show_save_result
from .probe import PROBE_TIMEOUT, check_endpoint

logger = logging.getLogger(__name__)


def setup_logging(verbosity: int):
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr
    )


@click.group()
@click.option('--verbose', '-v', count=True, help='Increase log verbosity (-v info, -vv debug)')
@click.option('--config-path', type=click.Path(dir_okay=False, path_type=Path), envvar="LOGSH_CONFIG",
              help='Use this configuration file instead of ~/.logsh.json')
@click.version_option("0.1.0", prog_name="logsh")
@click.pass_context
def cli(ctx: click.Context, verbose: int, config_path: Path | None):
    """Logship command line."""
    setup_logging(verbose)
    ctx.obj = ConfigurationStore(config_path)
    logger.debug(f"Using configuration at {ctx.obj.path}")


# === Connect command ===

@cli.command()
@click.argument("server")
@click.option('--check/--no-check', default=False, help='Probe the server before saving')
@click.option('--timeout', default=PROBE_TIMEOUT, show_default=True, help='Probe timeout in seconds')
@click.pass_obj
def connect(store: ConfigurationStore, server: str, check: bool, timeout: float):
    """Connect to a logship server."""
    server = server.strip()
    if not server:
        raise click.BadParameter("Server endpoint must not be empty", param_hint="SERVER")

    if check:
        reachable, message = check_endpoint(server, timeout=timeout)
        show_probe_result(server, reachable, message)

    # Work on a copy so a failed save leaves the cache matching disk
    config = store.get_current().model_copy(deep=True)
    if config.upsert_connection(server):
        logger.info(f"Adding connection {server}")
        console.print(f"[green]Added connection[/green] {escape(server)}", soft_wrap=True)
    else:
        console.print(f"[dim]Connection already configured:[/dim] {escape(server)}", soft_wrap=True)

    ok = store.save(config)
    show_save_result(ok, store.path)
    if not ok:
        sys.exit(1)


# === Connection commands ===

@cli.group()
def connection():
    """Manage configured connections."""
    pass


cli.add_command(connection, name="conn")


@connection.command("list")
@click.option('--output', '-o', type=click.Choice(["table", "json"]), default="table", show_default=True,
              help='Output format')
@click.pass_obj
def connection_list(store: ConfigurationStore, output: str):
    """List configured connections."""
    config = store.get_current()
    if output == "json":
        click.echo(json.dumps([conn.model_dump() for conn in config.connections], indent=2))
        return
    render_connections(config)


connection.add_command(connection_list, name="ls")


@connection.command("remove")
@click.argument("endpoint")
@click.pass_obj
def connection_remove(store: ConfigurationStore, endpoint: str):
    """Remove a configured connection."""
    config = store.get_current().model_copy(deep=True)
    if not config.remove_connection(endpoint):
        console.print(f"[yellow]No connection with endpoint \"{escape(endpoint)}\"[/yellow]", soft_wrap=True)
        return

    logger.info(f"Removing connection {endpoint}")
    ok = store.save(config)
    show_save_result(ok, store.path)
    if not ok:
        sys.exit(1)


connection.add_command(connection_remove, name="rm")


# === Config commands ===

@cli.group()
def config():
    """Locate and inspect the logsh configuration."""
    pass


cli.add_command(config, name="cfg")


@config.command("path")
@click.option('--exists', is_flag=True, help='Exit with error if no config file exists')
@click.option('--validate', is_flag=True, help='Exit with error if an existing config file is invalid')
@click.pass_obj
def config_path(store: ConfigurationStore, exists: bool, validate: bool):
    """Print the configuration file path."""
    path = store.path
    if exists and not path.exists():
        err_console.print(f"[red]logsh configuration does not exist at path: {escape(str(path))}[/red]",
                          soft_wrap=True)
        sys.exit(1)

    if validate:
        try:
            read_configuration(path)
        except ConfigError as e:
            err_console.print(f"[red]Invalid configuration at {escape(str(path))}:[/red] {escape(str(e))}",
                              soft_wrap=True)
            sys.exit(1)

    click.echo(str(path))


@config.command("show")
@click.pass_obj
def config_show(store: ConfigurationStore):
    """Show current configuration."""
    click.echo(dump_configuration(store.get_current()))


if __name__ == "__main__":
    cli()
