import pytest

from tracker import (
    ComponentTracker,
    DisjointSetTracker,
    make_tracker,
)


def test_accept_records_pair_and_touches_nodes():
    tracker = ComponentTracker(3)
    tracker.accept(0, 1)

    assert tracker.is_pair_known(0, 1)
    assert not tracker.is_pair_known(1, 0)
    assert tracker.touched_nodes == {0, 1}
    assert tracker.accepted_edge_count() == 1


def test_propagate_extends_predecessors_to_destination():
    tracker = ComponentTracker(3)
    tracker.accept(0, 1)
    tracker.accept(1, 2)

    assert tracker.is_pair_known(0, 2)
    assert tracker.known_pairs == {(0, 1), (1, 2), (0, 2)}


def test_propagate_extends_source_to_successors():
    tracker = ComponentTracker(3)
    tracker.accept(1, 2)
    tracker.accept(0, 1)

    assert tracker.is_pair_known(0, 2)


def test_propagated_pairs_do_not_count_as_accepted():
    tracker = ComponentTracker(3)
    tracker.accept(0, 1)
    tracker.accept(1, 2)

    assert len(tracker.known_pairs) == 3
    assert tracker.accepted_edge_count() == 2


def test_cycle_through_shared_successor():
    tracker = ComponentTracker(3)
    tracker.accept(0, 1)
    tracker.accept(2, 1)

    assert tracker.would_create_cycle(0, 2)
    assert tracker.would_create_cycle(2, 0)


def test_cycle_through_shared_predecessor():
    tracker = ComponentTracker(3)
    tracker.accept(0, 1)
    tracker.accept(0, 2)

    assert tracker.would_create_cycle(1, 2)


def test_no_cycle_between_separate_components():
    tracker = ComponentTracker(4)
    tracker.accept(0, 1)
    tracker.accept(2, 3)

    assert not tracker.would_create_cycle(1, 2)
    assert not tracker.would_create_cycle(0, 3)


def test_single_propagation_pass_misses_long_chains():
    # 0-1, 2-3, then 1-2 joins them; (0,3) is never derived
    tracker = ComponentTracker(4)
    tracker.accept(0, 1)
    tracker.accept(2, 3)
    tracker.accept(1, 2)

    assert tracker.known_pairs == {(0, 1), (2, 3), (1, 2), (0, 2), (1, 3)}
    assert not tracker.is_pair_known(0, 3)
    assert not tracker.would_create_cycle(0, 3)


def test_disjoint_set_tracker_sees_long_chains():
    tracker = DisjointSetTracker(4)
    tracker.accept(0, 1)
    tracker.accept(2, 3)
    tracker.accept(1, 2)

    assert tracker.would_create_cycle(0, 3)
    assert tracker.would_create_cycle(3, 0)
    assert tracker.is_pair_known(1, 2)
    assert not tracker.is_pair_known(0, 3)


@pytest.mark.parametrize("name", ["pairs", "union-find"])
def test_spanning_complete_after_n_minus_one(name):
    tracker = make_tracker(name, 3)
    assert not tracker.is_spanning_complete(3)

    tracker.accept(0, 1)
    assert not tracker.is_spanning_complete(3)

    tracker.accept(1, 2)
    assert tracker.is_spanning_complete(3)
    assert tracker.touched_nodes == {0, 1, 2}


def test_make_tracker_selects_implementation():
    assert isinstance(make_tracker("pairs", 2), ComponentTracker)
    assert isinstance(make_tracker("union-find", 2), DisjointSetTracker)


def test_make_tracker_rejects_unknown_name():
    with pytest.raises(ValueError, match="Unknown tracker"):
        make_tracker("bfs", 2)


def test_disjoint_set_tracker_accepts_ids_beyond_node_count():
    tracker = DisjointSetTracker(3)
    tracker.accept(0, 5)

    assert not tracker.would_create_cycle(1, 2)
    assert tracker.would_create_cycle(5, 0)
    assert not tracker.would_create_cycle(5, 7)


def test_disjoint_set_tracker_keeps_negative_ids_distinct():
    tracker = DisjointSetTracker(3)
    tracker.accept(0, -1)

    assert not tracker.would_create_cycle(0, 2)
    assert not tracker.would_create_cycle(2, -1)
    assert tracker.would_create_cycle(-1, 0)
