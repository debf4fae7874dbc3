from functools import cache
from typing import Iterable

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from gameutils.players import Player

PLAYERS_THEME = Theme(
    {
        "error": "bold red",
        "success": "green",
        "path": "cyan",
        "player.id": "bold magenta",
        "player.name": "default",
        "player.nickname": "italic yellow",
    }
)


class PlayersConsole(Console):
    def error(self, text: str) -> None:
        self.print(f"[error]{text}[/]")

    def success(self, text: str) -> None:
        self.print(f"[success]{text}[/]")

    def print_players(self, players: Iterable[Player]) -> None:
        self.print(make_players_table(players))


def make_players_table(players: Iterable[Player]) -> Table:
    table = Table()

    table.add_column("ID", justify="right", style="player.id")
    table.add_column("First name", style="player.name")
    table.add_column("Last name", style="player.name")
    table.add_column("Nickname", style="player.nickname")

    for player in players:
        table.add_row(str(player.id), player.first_name, player.last_name, player.nick_name)

    return table


@cache
def get_console() -> PlayersConsole:
    return PlayersConsole(theme=PLAYERS_THEME)
