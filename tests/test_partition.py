import pytest

from localsearch import Partition


def test_seed_puts_everything_in_first_group() -> None:
    partition = Partition.seed(4, 3)
    assert partition.labels == (0, 0, 0, 0)
    assert partition.groups("abcd") == [["a", "b", "c", "d"], [], []]
    assert partition.sizes() == [4, 0, 0]


def test_moves_order_and_count() -> None:
    partition = Partition(labels=(0, 1), n_groups=3)
    moves = [p.labels for p in partition.moves()]
    assert moves == [(1, 1), (2, 1), (0, 0), (0, 2)]


def test_moves_count_is_items_times_other_groups() -> None:
    partition = Partition.seed(5, 4)
    assert len(list(partition.moves())) == 5 * 3


def test_moves_are_lazy() -> None:
    partition = Partition.seed(1000, 2)
    assert next(partition.moves()).labels[0] == 1


def test_moves_keep_every_item_assigned() -> None:
    items = list(range(6))
    partition = Partition(labels=(0, 1, 2, 0, 1, 2), n_groups=3)
    for neighbor in partition.moves():
        groups = neighbor.groups(items)
        assert len(groups) == 3
        assert sorted(item for group in groups for item in group) == items


def test_equality_and_hash() -> None:
    a = Partition(labels=(0, 1, 1), n_groups=2)
    b = Partition.seed(3, 2).move(1, 1).move(2, 1)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Partition(labels=(0, 1, 1), n_groups=3)


def test_groups_keep_item_order() -> None:
    partition = Partition(labels=(1, 0, 1, 0), n_groups=2)
    assert partition.groups(["w", "x", "y", "z"]) == [["x", "z"], ["w", "y"]]


def test_groups_length_mismatch() -> None:
    with pytest.raises(ValueError):
        Partition.seed(3, 2).groups([1, 2])


@pytest.mark.parametrize("labels, n_groups", [((0, 2), 2), ((-1,), 2), ((), 0)])
def test_invalid_partition(labels, n_groups) -> None:
    with pytest.raises(ValueError):
        Partition(labels=labels, n_groups=n_groups)
