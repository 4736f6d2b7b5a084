import numpy as np
import pytest

from anticlust.solvers import ElementStore


@pytest.fixture
def store():
    return ElementStore([0, 1, 0, 2, 1, 0], [3, 2, 1])


def _snapshot(store):
    return (
        store.labels.copy(),
        [list(store.members(g)) for g in range(store.k)],
        [store.slot(i) for i in range(store.n)],
    )


class TestElementStore:
    def test_members_follow_labels(self, store):
        assert store.n == 6
        assert store.k == 3
        assert store.members(0) == [0, 2, 5]
        assert store.members(1) == [1, 4]
        assert store.members(2) == [3]

    def test_slots_point_back_into_member_lists(self, store):
        for i in range(store.n):
            assert store.members(store.label(i))[store.slot(i)] == i

    def test_does_not_write_caller_labels(self):
        labels = np.array([0, 1, 1, 0])
        store = ElementStore(labels, [2, 2])
        store.swap(0, 1)
        np.testing.assert_array_equal(labels, [0, 1, 1, 0])

    def test_swap_exchanges_groups(self, store):
        store.swap(0, 3)
        assert store.label(0) == 2
        assert store.label(3) == 0
        assert store.members(0) == [3, 2, 5]
        assert store.members(2) == [0]
        for i in range(store.n):
            assert store.members(store.label(i))[store.slot(i)] == i

    def test_swap_keeps_group_sizes(self, store):
        before = store.group_sizes()
        store.swap(2, 4)
        store.swap(1, 3)
        np.testing.assert_array_equal(store.group_sizes(), before)

    @pytest.mark.parametrize("i, j", [(0, 3), (2, 4), (5, 1), (0, 2)])
    def test_swap_twice_restores_state(self, store, i, j):
        before = _snapshot(store)
        store.swap(i, j)
        store.swap(i, j)
        after = _snapshot(store)
        np.testing.assert_array_equal(after[0], before[0])
        assert after[1:] == before[1:]
