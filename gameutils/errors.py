from pathlib import Path


class GameUtilsError(Exception):
    pass


class DuplicateIdError(GameUtilsError):
    def __init__(self, player_id: int):
        super().__init__(f"Player with id {player_id} already exists.")
        self.player_id = player_id


class MalformedIdError(GameUtilsError):
    def __init__(self, value: str):
        super().__init__(f"Player id {value!r} is not a valid non-negative integer.")
        self.value = value


class FileAccessError(GameUtilsError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class MalformedXmlError(GameUtilsError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot parse {path}: {reason}")
        self.path = path
