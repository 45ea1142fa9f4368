"""States emitted by the TabCoordinator."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TabInitial:
    pass


@dataclass(frozen=True)
class TabSelected:
    index: int


TabState = Union[TabInitial, TabSelected]
