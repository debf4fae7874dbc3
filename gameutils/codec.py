import dataclasses
from pathlib import Path
from typing import Iterable
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from loguru import logger
from pydantic import ValidationError

from gameutils import errors
from gameutils.models import PlayerAttributes
from gameutils.players import Player, PlayerRegistry

PLAYER_TAG = "PLAYER"
ID = "id"
FIRST_NAME = "firstName"
LAST_NAME = "lastName"
NICK_NAME = "nickName"
DEFAULT_ROOT_TAG = "ROOT"


@dataclasses.dataclass(frozen=True)
class LoadResult:
    players: tuple[Player, ...] = ()
    error: errors.GameUtilsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


class PlayerCodec:
    def __init__(self, registry: PlayerRegistry):
        self.registry = registry

    def parse_player(self, element: Element) -> Player:
        try:
            attributes = PlayerAttributes.from_dict(dict(element.attrib))
        except ValidationError as exc:
            raise errors.MalformedIdError(element.get(ID, "")) from exc

        return self.registry.create_player(
            attributes.first_name,
            attributes.last_name,
            attributes.nick_name,
            player_id=attributes.id,
        )

    def write_player(self, parent: Element, player: Player) -> Element:
        # Nickname is not written, so it does not survive a round trip.
        return ElementTree.SubElement(
            parent,
            PLAYER_TAG,
            {
                ID: str(player.id),
                FIRST_NAME: player.first_name,
                LAST_NAME: player.last_name,
            },
        )

    def parse_players_file(self, path: str | Path) -> tuple[Player, ...]:
        return self.load_players_file(path).players

    def load_players_file(self, path: str | Path) -> LoadResult:
        """
        Parse every PLAYER element below the document root, in document order.

        Unreadable files and malformed XML never raise: the error is logged and
        returned alongside an empty tuple. Id errors of individual elements
        propagate to the caller.
        """
        path = Path(path)

        try:
            root = ElementTree.parse(path).getroot()
        except ElementTree.ParseError as exc:
            error: errors.GameUtilsError = errors.MalformedXmlError(path, str(exc))
        except OSError as exc:
            error = errors.FileAccessError(path, exc.strerror or str(exc))
        else:
            elements = [element for element in root.iter(PLAYER_TAG) if element is not root]
            players = tuple(self.parse_player(element) for element in elements)
            logger.info(f"Loaded {len(players)} players from {path}.")
            return LoadResult(players=players)

        logger.error(f"Exception parsing players XML file: {error}")
        return LoadResult(error=error)

    def write_players_file(
        self, path: str | Path, players: Iterable[Player], root_tag: str = DEFAULT_ROOT_TAG
    ) -> None:
        root = Element(root_tag)

        for player in players:
            self.write_player(root, player)

        tree = ElementTree.ElementTree(root)
        ElementTree.indent(tree)
        tree.write(path, encoding="utf-8", xml_declaration=True)
        logger.info(f"Saved {len(root)} players to {path}.")
