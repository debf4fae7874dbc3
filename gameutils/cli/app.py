from typing import Annotated

import typer

from gameutils import get_version
from gameutils.cli import di, players
from gameutils.config import get_config
from gameutils.errors import GameUtilsError
from gameutils.logging import configure_logger

app = typer.Typer(name="gameutils")
app.add_typer(players.app, name="players")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[bool, typer.Option("--version", help="Show version and exit.")] = False,
    debug: Annotated[
        bool, typer.Option(envvar="GAMEUTILS_DEBUG", show_envvar=False, help="Log to stderr.")
    ] = False,
) -> None:
    """
    Inspect and convert XML player files.
    """

    config = get_config().model_copy(update={"debug": debug})
    configure_logger(config.debug, rotation=config.log_rotation)
    di.configure_injection(config)

    if version:
        typer.echo(get_version())
        raise typer.Exit

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def run() -> None:
    try:
        app()
    except GameUtilsError as exc:
        raise SystemExit(str(exc))
