from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence, TypeVar

import numpy as np

Item = TypeVar("Item")

Distance = Callable[[Item, Item], float]


def diameter(items: Iterable[Item], distance: Distance) -> Optional[float]:
    """Largest pairwise distance between elements of `items`.

    Returns None when there are fewer than two items, so callers can tell an
    undefined diameter from a genuine zero. `distance` is assumed symmetric.
    """
    items = list(items)
    result: Optional[float] = None
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            d = distance(items[i], items[j])
            if result is None or d > result:
                result = d
    return result


def max_diameter(groups: Iterable[Iterable[Item]], distance: Distance) -> float:
    """Diameter of the widest group; -inf when no group has a defined diameter."""
    widest = float("-inf")
    for group in groups:
        d = diameter(group, distance)
        if d is not None and d > widest:
            widest = d
    return widest


def point_diameter(points: Sequence[Sequence[float]]) -> Optional[float]:
    """Euclidean diameter of an (n, d) array of coordinates."""
    coords = np.asarray(points, dtype=float)
    if coords.ndim == 1:
        coords = coords[:, np.newaxis]
    if len(coords) < 2:
        return None
    diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
    distance_matrix = np.sqrt((diff**2).sum(axis=-1))
    return float(distance_matrix.max())
