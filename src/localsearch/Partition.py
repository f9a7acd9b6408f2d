from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, TypeVar

Item = TypeVar("Item")


@dataclass(frozen=True)
class Partition:
    """Assignment of every item to exactly one of `n_groups` groups.

    Attributes:
        labels: Group index of each item, in item order.
        n_groups: Number of groups; fixed for the lifetime of a search.
    """

    labels: Tuple[int, ...]
    n_groups: int

    def __post_init__(self) -> None:
        if self.n_groups < 1:
            raise ValueError(f"n_groups must be at least 1, got {self.n_groups}")
        for label in self.labels:
            if not 0 <= label < self.n_groups:
                raise ValueError(f"Label {label} outside 0..{self.n_groups - 1}")

    @classmethod
    def seed(cls, n_items: int, n_groups: int) -> "Partition":
        """Initial partition: every item in group 0, the other groups empty."""
        return cls(labels=(0,) * n_items, n_groups=n_groups)

    def moves(self) -> Iterator["Partition"]:
        """Yield every partition reachable by moving one item to another group."""
        for idx, label in enumerate(self.labels):
            for target in range(self.n_groups):
                if target == label:
                    continue
                yield self.move(idx, target)

    def move(self, idx: int, target: int) -> "Partition":
        labels = list(self.labels)
        labels[idx] = target
        return Partition(labels=tuple(labels), n_groups=self.n_groups)

    def groups(self, items: Sequence[Item]) -> List[List[Item]]:
        """Split `items` into `n_groups` lists, keeping item order inside each."""
        if len(items) != len(self.labels):
            raise ValueError(f"Expected {len(self.labels)} items, got {len(items)}")
        groups: List[List[Item]] = [[] for _ in range(self.n_groups)]
        for item, label in zip(items, self.labels):
            groups[label].append(item)
        return groups

    def sizes(self) -> List[int]:
        sizes = [0] * self.n_groups
        for label in self.labels:
            sizes[label] += 1
        return sizes
