from abc import ABC, abstractmethod
from xml.etree.ElementTree import Element


class GameLoader(ABC):
    """
    Extension point for per-game XML loaders. A loader claims documents whose
    root element carries `root_tag` and consumes them element by element.
    """

    @property
    @abstractmethod
    def root_tag(self) -> str:
        pass

    @abstractmethod
    def parse(self, element: Element) -> None:
        pass
