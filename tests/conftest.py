from pathlib import Path
from typing import Callable

import pytest

from gameutils.codec import PlayerCodec
from gameutils.players import PlayerRegistry

PLAYERS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<ROOT>
  <PLAYER id="7" firstName="Ada" lastName="Lovelace" nickName="countess"/>
  <PLAYER firstName="Alan" lastName="Turing" nickName="prof"/>
  <PLAYER firstName="Grace" lastName="Hopper" nickName="amazing"/>
</ROOT>
"""


@pytest.fixture
def registry() -> PlayerRegistry:
    return PlayerRegistry()


@pytest.fixture
def codec(registry) -> PlayerCodec:
    return PlayerCodec(registry)


@pytest.fixture
def write_xml(tmp_path) -> Callable[[str], Path]:
    def write(content: str, name: str = "players.xml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def players_file(write_xml) -> Path:
    return write_xml(PLAYERS_XML)
