# models.py
from dataclasses import dataclass
from typing import FrozenSet, Iterator, NamedTuple, Tuple

# (x, y): column then row
Position = Tuple[int, int]


class Minimum(NamedTuple):
    position: Position
    height: int

    @property
    def risk_level(self) -> int:
        return self.height + 1


@dataclass(frozen=True)
class Basin:
    seed: Position
    members: FrozenSet[Position]   # always contains seed

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, pos) -> bool:
        return pos in self.members

    def __iter__(self) -> Iterator[Position]:
        return iter(self.members)
