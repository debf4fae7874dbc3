import dataclasses
from typing import Iterator

from loguru import logger

from gameutils import errors

FIRST_AUTO_ID = 1
ID_INCREMENT = 7


@dataclasses.dataclass(frozen=True)
class Player:
    id: int
    first_name: str
    last_name: str
    nick_name: str

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.nick_name})"


class PlayerRegistry:
    """
    Owns every player created through it and hands out unique ids.

    Auto-assigned ids are searched from an internal cursor. After each
    allocation the cursor moves one step forward and then jumps by
    `ID_INCREMENT` over occupied ids, so the sequence of auto ids is
    deterministic but may leave gaps. Explicit ids only have to be free.
    """

    def __init__(self) -> None:
        self._players: dict[int, Player] = {}
        self._next_candidate_id = FIRST_AUTO_ID

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def __iter__(self) -> Iterator[Player]:
        return iter(self.list_players())

    @property
    def next_candidate_id(self) -> int:
        return self._next_candidate_id

    def create_player(
        self,
        first_name: str,
        last_name: str,
        nick_name: str,
        player_id: int | None = None,
    ) -> Player:
        if player_id is not None:
            return self._create_with_id(player_id, first_name, last_name, nick_name)

        while self._next_candidate_id in self._players:
            self._next_candidate_id += 1

        player = Player(self._next_candidate_id, first_name, last_name, nick_name)
        self._players[player.id] = player
        self._advance_cursor()
        logger.debug(f"Created {player} with auto id {player.id}.")
        return player

    def get_player(self, player_id: int) -> Player | None:
        return self._players.get(player_id)

    def list_players(self) -> list[Player]:
        return list(self._players.values())

    @staticmethod
    def is_valid_attributes(
        first_name: str | None, last_name: str | None, nick_name: str | None
    ) -> bool:
        attributes = (first_name, last_name, nick_name)

        if any(attribute is None for attribute in attributes):
            return False
        return all(attribute.strip() for attribute in attributes)  # type: ignore[union-attr]

    def _create_with_id(
        self, player_id: int, first_name: str, last_name: str, nick_name: str
    ) -> Player:
        if player_id in self._players:
            raise errors.DuplicateIdError(player_id)

        player = Player(player_id, first_name, last_name, nick_name)
        self._players[player_id] = player
        logger.debug(f"Created {player} with explicit id {player_id}.")
        return player

    def _advance_cursor(self) -> None:
        self._next_candidate_id += 1

        while self._next_candidate_id in self._players:
            self._next_candidate_id += ID_INCREMENT

        logger.trace(f"Next candidate id is {self._next_candidate_id}.")
