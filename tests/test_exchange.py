"""Behaviour of the single exchange sweep for both objectives."""
import numpy as np
import pytest

import anticlust.solvers.exchange_heuristic as exchange_module
from anticlust import AllocationError, Status
from anticlust.metrics import diversity_objective, variance_objective
from anticlust.solvers import (
    CategoryIndex,
    DistanceEngine,
    ElementStore,
    ExchangeHeuristic,
    distance_exchange,
    variance_exchange,
)


def _groups(labels, values):
    return sorted(sorted(values[labels == g].ravel().tolist()) for g in np.unique(labels))


# =============================================================================
# Scenarios
# =============================================================================

class TestFourPoints:
    def test_variance_variant(self, four_points, paired_labels):
        clusters = paired_labels.copy()
        result = variance_exchange(four_points, clusters, [2, 2])

        assert _groups(clusters, four_points) == [[0.0, 10.0], [0.0, 10.0]]
        np.testing.assert_array_equal(clusters, result.labels)
        assert result.initial_objective == 0.0
        assert result.objective == pytest.approx(100.0)
        assert result.status is Status.heuristic

    def test_variance_variant_is_stable_under_second_sweep(self, four_points, paired_labels):
        clusters = paired_labels.copy()
        variance_exchange(four_points, clusters, [2, 2])
        first = clusters.copy()

        again = variance_exchange(four_points, clusters, [2, 2])

        np.testing.assert_array_equal(clusters, first)
        assert again.n_swaps == 0
        assert again.status is Status.local_optimum
        assert again.objective == pytest.approx(100.0)

    def test_distance_variant(self, four_point_distances, four_points, paired_labels):
        clusters = paired_labels.copy()
        result = distance_exchange(four_point_distances, clusters, [2, 2])

        assert _groups(clusters, four_points) == [[0.0, 10.0], [0.0, 10.0]]
        assert result.initial_objective == 0.0
        assert result.objective == pytest.approx(20.0)

        again = distance_exchange(four_point_distances, clusters, [2, 2])
        assert again.n_swaps == 0

    def test_both_variants_agree(self, four_points, four_point_distances, paired_labels):
        a = variance_exchange(four_points, paired_labels.copy(), [2, 2])
        b = distance_exchange(four_point_distances, paired_labels.copy(), [2, 2])
        np.testing.assert_array_equal(a.labels, b.labels)

    def test_first_best_partner_wins_ties(self, four_points, paired_labels):
        # element 0 gains the same from partner 2 and partner 3; 2 comes first
        result = variance_exchange(four_points, paired_labels.copy(), [2, 2])
        np.testing.assert_array_equal(result.labels, [1, 0, 0, 1])


class TestCategoricalRestriction:
    def test_no_cross_category_swap(self, four_point_distances, paired_labels):
        # {0, 1} -> category 0, {2, 3} -> category 1: every same-category pair
        # already shares a group, so nothing may change although swapping
        # 0 with 2 would raise the objective
        clusters = paired_labels.copy()
        result = distance_exchange(
            four_point_distances, clusters, [2, 2],
            use_categories=True,
            categories=[0, 0, 1, 1],
            category_frequencies=[2, 2],
        )
        np.testing.assert_array_equal(clusters, paired_labels)
        assert result.n_swaps == 0
        assert result.status is Status.local_optimum

    def test_probes_stay_inside_categories(self, distances, monkeypatch):
        categories = np.arange(24) % 2
        labels = np.repeat([0, 1, 2], 8)
        probed = []
        real_simulate = DistanceEngine.simulate

        def recording_simulate(self, i, j):
            probed.append((i, j))
            return real_simulate(self, i, j)

        monkeypatch.setattr(DistanceEngine, "simulate", recording_simulate)
        distance_exchange(distances, labels, use_categories=True, categories=categories)

        assert probed
        assert all(categories[i] == categories[j] for i, j in probed)

    def test_category_counts_per_group_are_kept(self, distances):
        categories = np.arange(24) % 2
        clusters = np.repeat([0, 1, 2], 8)
        before = [np.bincount(categories[clusters == g], minlength=2) for g in range(3)]

        distance_exchange(distances, clusters, use_categories=True, categories=categories)

        after = [np.bincount(categories[clusters == g], minlength=2) for g in range(3)]
        np.testing.assert_array_equal(after, before)

    def test_use_categories_requires_labels(self, distances):
        with pytest.raises(ValueError, match="categories"):
            distance_exchange(distances, np.repeat([0, 1], 12), use_categories=True)

    def test_categories_ignored_when_disabled(self, distances):
        labels = np.repeat([0, 1], 12)
        restricted = distance_exchange(distances, labels.copy(), categories=np.arange(24))
        free = distance_exchange(distances, labels.copy())
        np.testing.assert_array_equal(restricted.labels, free.labels)


# =============================================================================
# Properties
# =============================================================================

class TestSweepProperties:
    @pytest.mark.parametrize("variant", ["variance", "distance"])
    def test_group_sizes_are_kept(self, variant, features, distances, unequal_labels):
        clusters = unequal_labels.copy()
        if variant == "variance":
            variance_exchange(features, clusters, [6, 10, 8])
        else:
            distance_exchange(distances, clusters, [6, 10, 8])
        np.testing.assert_array_equal(np.bincount(clusters), [6, 10, 8])

    def test_variance_objective_does_not_decrease(self, features, unequal_labels):
        result = variance_exchange(features, unequal_labels.copy())
        assert result.objective >= result.initial_objective
        assert result.initial_objective == pytest.approx(variance_objective(features, unequal_labels))
        assert result.objective == pytest.approx(variance_objective(features, result.labels))

    def test_distance_objective_does_not_decrease(self, distances, unequal_labels):
        result = distance_exchange(distances, unequal_labels.copy())
        assert result.objective >= result.initial_objective
        assert result.objective == pytest.approx(diversity_objective(distances, result.labels))

    def test_random_start_improves(self, features, distances):
        labels = np.repeat([0, 1, 2, 3], 6)
        np.random.default_rng(5).shuffle(labels)
        assert variance_exchange(features, labels.copy()).n_swaps > 0
        assert distance_exchange(distances, labels.copy()).n_swaps > 0

    def test_deterministic(self, features, unequal_labels):
        a = variance_exchange(features, unequal_labels.copy())
        b = variance_exchange(features, unequal_labels.copy())
        np.testing.assert_array_equal(a.labels, b.labels)
        assert a.objective == b.objective

    def test_identical_elements_are_left_alone(self):
        X = np.ones((6, 2))
        clusters = np.array([0, 1, 2, 0, 1, 2])
        result = variance_exchange(X, clusters)
        np.testing.assert_array_equal(clusters, [0, 1, 2, 0, 1, 2])
        assert result.status is Status.local_optimum

    def test_every_commit_increases_objective(self, distances, unequal_labels):
        store = ElementStore(unequal_labels, np.bincount(unequal_labels))
        engine = DistanceEngine(store, distances, CategoryIndex(store.n))
        seen = [engine.objective]
        real_commit = engine.commit

        def recording_commit(i, j, probe):
            real_commit(i, j, probe)
            seen.append(engine.objective)

        engine.commit = recording_commit
        _, _, n_swaps, _ = ExchangeHeuristic(engine).solve()

        assert len(seen) == n_swaps + 1
        assert all(b > a for a, b in zip(seen, seen[1:]))


# =============================================================================
# In-place output and failure path
# =============================================================================

class TestOutputContract:
    def test_list_is_overwritten(self, four_points):
        clusters = [0, 0, 1, 1]
        variance_exchange(four_points, clusters)
        assert clusters == [1, 0, 0, 1]

    def test_allocation_failure_leaves_labels_untouched(self, features, unequal_labels, monkeypatch):
        def out_of_memory(*args, **kwargs):
            raise MemoryError

        monkeypatch.setattr(exchange_module, "VarianceEngine", out_of_memory)
        clusters = unequal_labels.copy()

        with pytest.raises(AllocationError):
            variance_exchange(features, clusters)
        np.testing.assert_array_equal(clusters, unequal_labels)

    def test_allocation_failure_is_a_memory_error(self, distances, unequal_labels, monkeypatch):
        def out_of_memory(*args, **kwargs):
            raise MemoryError

        monkeypatch.setattr(exchange_module, "CategoryIndex", out_of_memory)
        with pytest.raises(MemoryError):
            distance_exchange(distances, unequal_labels.copy())

    def test_tuple_is_rejected(self, four_points):
        with pytest.raises(TypeError, match="in place"):
            variance_exchange(four_points, (0, 0, 1, 1))

    @pytest.mark.parametrize("clusters", [np.array([], dtype=int), []])
    def test_empty_input(self, clusters):
        variance = variance_exchange(np.empty((0, 3)), clusters, [0, 0])
        distance = distance_exchange(np.empty((0, 0)), clusters, [0, 0])
        for result in (variance, distance):
            assert result.labels.shape == (0,)
            assert result.objective == 0.0
            assert result.status is Status.local_optimum

    def test_empty_input_without_frequencies(self):
        result = variance_exchange(np.empty((0, 2)), [])
        assert result.n_swaps == 0
