import inject

from gameutils.codec import PlayerCodec
from gameutils.config import Config
from gameutils.players import PlayerRegistry


def configure_injection(config: Config) -> None:
    def configure_(binder: inject.Binder) -> None:
        registry = PlayerRegistry()
        binder.bind(Config, config)
        binder.bind(PlayerRegistry, registry)
        binder.bind(PlayerCodec, PlayerCodec(registry))

    inject.configure(configure_, clear=True)
