import logging

from typing import Callable

from networkx.utils import UnionFind

logger = logging.getLogger('mst')


class ComponentTracker:
    '''
    Connectivity state for a partially built spanning forest.

    Connectivity is recorded as directed known pairs (a, b). Accepting an edge
    records its own pair and then combines it once with the pairs already
    known, so chains of more than two accepted edges are not always closed.
    Cycle detection looks for a node both endpoints already share a pair with.
    '''

    def __init__(self, n_verts: int) -> None:
        self.n_verts = n_verts
        self.known_pairs: set[tuple[int, int]] = set()
        self.touched_nodes: set[int] = set()
        self.n_accepted = 0

    def is_pair_known(self, a: int, b: int) -> bool:
        return (a, b) in self.known_pairs

    def would_create_cycle(self, source: int, destination: int) -> bool:
        logger.debug(f'Will check cycles for ({source},{destination})')
        found = False

        # new pair (x,t): both (x,k) and (t,k) known
        for k in range(self.n_verts):
            if self.is_pair_known(source, k) and self.is_pair_known(destination, k):
                logger.debug(f'Cycle via ({source},{k}) and ({destination},{k})')
                found = True

        # new pair (y,z): both (k,y) and (k,z) known
        for k in range(self.n_verts):
            if self.is_pair_known(k, source) and self.is_pair_known(k, destination):
                logger.debug(f'Cycle via ({k},{source}) and ({k},{destination})')
                found = True

        return found

    def accept(self, source: int, destination: int) -> None:
        self.touched_nodes.add(source)
        self.touched_nodes.add(destination)
        self.known_pairs.add((source, destination))
        self.n_accepted += 1

        self.propagate(source, destination)

    def propagate(self, source: int, destination: int) -> None:
        # pairs added here are not revisited in the same pass
        for (x, y) in sorted(self.known_pairs):
            if y == source and x != destination:
                logger.debug(f'Augment known pairs with ({x},{destination})')
                self.known_pairs.add((x, destination))

            if x == destination and y != source:
                logger.debug(f'Augment known pairs with ({source},{y})')
                self.known_pairs.add((source, y))

    def accepted_edge_count(self) -> int:
        return self.n_accepted

    def is_spanning_complete(self, n_verts: int) -> bool:
        return self.n_accepted >= n_verts - 1


class DisjointSetTracker:
    '''
    Drop-in replacement for ComponentTracker that decides cycles by comparing
    union-find roots, so it always agrees with a true component partition.
    Node ids are not bounded by n_verts; any id seen joins the partition.
    '''

    def __init__(self, n_verts: int) -> None:
        self.n_verts = n_verts
        self.components = UnionFind()
        self.known_pairs: set[tuple[int, int]] = set()
        self.touched_nodes: set[int] = set()
        self.n_accepted = 0

    def is_pair_known(self, a: int, b: int) -> bool:
        return (a, b) in self.known_pairs

    def would_create_cycle(self, source: int, destination: int) -> bool:
        return self.components[source] == self.components[destination]

    def accept(self, source: int, destination: int) -> None:
        self.touched_nodes.add(source)
        self.touched_nodes.add(destination)
        self.known_pairs.add((source, destination))
        self.n_accepted += 1
        self.components.union(source, destination)

    def accepted_edge_count(self) -> int:
        return self.n_accepted

    def is_spanning_complete(self, n_verts: int) -> bool:
        return self.n_accepted >= n_verts - 1


TRACKERS: dict[str, Callable[[int], object]] = {
    'pairs': ComponentTracker,
    'union-find': DisjointSetTracker,
}

DEFAULT_TRACKER = 'pairs'


def make_tracker(name: str, n_verts: int):
    if name not in TRACKERS:
        raise ValueError(f'Unknown tracker {name!r}, expected one of {sorted(TRACKERS)}')
    return TRACKERS[name](n_verts)
