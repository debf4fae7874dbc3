import inject
import pytest
from typer.testing import CliRunner

import gameutils
from gameutils import logging
from gameutils.cli import di
from gameutils.cli.app import app
from gameutils.cli.console import make_players_table
from gameutils.codec import PlayerCodec
from gameutils.config import Config
from gameutils.players import Player, PlayerRegistry

runner = CliRunner()


@pytest.fixture(autouse=True)
def log_home(tmp_path, monkeypatch):
    monkeypatch.setattr(logging, "data_home", tmp_path / "logs")


def test_show_lists_players(players_file):
    result = runner.invoke(app, ["players", "show", str(players_file)])

    assert result.exit_code == 0
    assert "Lovelace" in result.output
    assert "Turing" in result.output
    assert "Hopper" in result.output


def test_show_empty_file(write_xml):
    result = runner.invoke(app, ["players", "show", str(write_xml("<ROOT/>"))])

    assert result.exit_code == 0
    assert "No players" in result.output


def test_show_missing_file_fails(tmp_path):
    result = runner.invoke(app, ["players", "show", str(tmp_path / "missing.xml")])

    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_show_duplicate_ids_fails(write_xml):
    path = write_xml('<ROOT><PLAYER id="2"/><PLAYER id="2"/></ROOT>')

    result = runner.invoke(app, ["players", "show", str(path)])

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_check_valid_attributes():
    result = runner.invoke(app, ["players", "check", "Ada", "Lovelace", "countess"])

    assert result.exit_code == 0
    assert "valid" in result.output


def test_check_blank_attributes():
    result = runner.invoke(app, ["players", "check", " ", "Lovelace", "countess"])

    assert result.exit_code == 1
    assert "must not be blank" in result.output


def test_export_rewrites_file(players_file, tmp_path):
    target = tmp_path / "exported.xml"

    result = runner.invoke(
        app, ["players", "export", str(players_file), str(target), "--root-tag", "LEAGUE"]
    )

    assert result.exit_code == 0
    assert "Exported 3 players" in result.output
    content = target.read_text(encoding="utf-8")
    assert "<LEAGUE>" in content
    assert 'firstName="Ada"' in content
    assert "nickName" not in content


def test_export_uses_configured_root_tag(players_file, tmp_path):
    target = tmp_path / "exported.xml"

    result = runner.invoke(app, ["players", "export", str(players_file), str(target)])

    assert result.exit_code == 0
    assert "<ROOT>" in target.read_text(encoding="utf-8")


def test_each_invocation_uses_fresh_registry(players_file):
    first = runner.invoke(app, ["players", "show", str(players_file)])
    second = runner.invoke(app, ["players", "show", str(players_file)])

    assert first.exit_code == second.exit_code == 0


def test_version(monkeypatch):
    monkeypatch.setenv("GAMEUTILS_VERSION", "1.2.3")
    gameutils.get_version.cache_clear()

    result = runner.invoke(app, ["--version"])

    gameutils.get_version.cache_clear()
    assert result.exit_code == 0
    assert result.output.strip() == "1.2.3"


def test_export_to_missing_directory_fails(players_file, tmp_path):
    target = tmp_path / "missing" / "exported.xml"

    result = runner.invoke(app, ["players", "export", str(players_file), str(target)])

    assert result.exit_code == 1
    assert "Cannot write" in result.output
    assert not target.exists()


def test_version_from_environment_without_metadata(monkeypatch):
    def version(name: str) -> str:
        raise gameutils.metadata.PackageNotFoundError(name)

    monkeypatch.setattr(gameutils.metadata, "version", version)
    monkeypatch.setenv("GAMEUTILS_VERSION", "4.5.6")
    gameutils.get_version.cache_clear()

    try:
        assert gameutils.get_version() == "4.5.6"
    finally:
        gameutils.get_version.cache_clear()


def test_players_table_styles_columns():
    table = make_players_table([Player(7, "Ada", "Lovelace", "countess")])

    assert [column.style for column in table.columns] == [
        "player.id",
        "player.name",
        "player.name",
        "player.nickname",
    ]
    assert table.row_count == 1


def test_codec_shares_the_bound_registry():
    di.configure_injection(Config())

    codec = inject.instance(PlayerCodec)

    assert codec.registry is inject.instance(PlayerRegistry)
