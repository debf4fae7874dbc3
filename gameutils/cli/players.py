from pathlib import Path
from typing import Annotated

import inject
import typer

from gameutils.cli.console import get_console
from gameutils.codec import PlayerCodec
from gameutils.config import Config
from gameutils.errors import GameUtilsError
from gameutils.players import Player, PlayerRegistry

app = typer.Typer(help="Inspect and convert player files.")


def load_players(source: Path) -> tuple[Player, ...]:
    codec: PlayerCodec = inject.instance(PlayerCodec)

    try:
        result = codec.load_players_file(source)
        result.raise_for_error()
    except GameUtilsError as exc:
        get_console().error(str(exc))
        raise typer.Exit(1)

    return result.players


@app.command(name="show", help="Display players stored in an XML file.")
def show_players(source: Path) -> None:
    console = get_console()
    players = load_players(source)

    if not players:
        console.print(f"No players in [path]{source}[/].")
        return

    console.print_players(players)


@app.command(name="check", help="Check whether player attributes are usable.")
def check_attributes(first_name: str, last_name: str, nick_name: str) -> None:
    console = get_console()
    registry: PlayerRegistry = inject.instance(PlayerRegistry)

    if not registry.is_valid_attributes(first_name, last_name, nick_name):
        console.error("Player attributes must not be blank.")
        raise typer.Exit(1)

    console.success("Player attributes are valid.")


@app.command(name="export", help="Rewrite players from one XML file to another.")
def export_players(
    source: Path,
    target: Path,
    root_tag: Annotated[str | None, typer.Option(help="Root element of the new file.")] = None,
) -> None:
    console = get_console()
    config: Config = inject.instance(Config)
    codec: PlayerCodec = inject.instance(PlayerCodec)
    players = load_players(source)

    try:
        codec.write_players_file(target, players, root_tag=root_tag or config.root_tag)
    except OSError as exc:
        console.error(f"Cannot write {target}: {exc.strerror or exc}")
        raise typer.Exit(1)

    console.success(f"Exported {len(players)} players to {target}.")
