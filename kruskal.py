import logging
import sys

from enum import Enum
from timeit import default_timer as timer
from typing import Optional

from tracker import DEFAULT_TRACKER, TRACKERS, make_tracker

logger = logging.getLogger('mst')

INPUT_FILE = 'mst_data.in'
SENTINEL = -1


class Edge:
    __slots__ = ('_u', '_v', '_weight')

    def __init__(self, u: int=SENTINEL, v: int=SENTINEL, weight: int=SENTINEL) -> None:
        self._u = u
        self._v = v
        self._weight = weight

    @property
    def u(self) -> int:
        return self._u

    @property
    def v(self) -> int:
        return self._v

    @property
    def weight(self) -> int:
        return self._weight

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.u, self.v, self.weight) == (other.u, other.v, other.weight)

    def __hash__(self) -> int:
        return hash((self.u, self.v, self.weight))

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    __str__ = __repr__


class Outcome(Enum):
    ACCEPTED = 'ACCEPTED'
    REJECTED = 'REJECTED'
    COMPLETE = 'COMPLETE'


class Selection:
    '''Result of one EdgeSelector.select_next() call.

    ACCEPTED and REJECTED carry the edge that was decided on, COMPLETE
    carries none.
    '''

    def __init__(self, outcome: Outcome, edge: Optional[Edge]=None) -> None:
        self.outcome = outcome
        self.edge = edge

    @property
    def accepted(self) -> bool:
        return self.outcome is Outcome.ACCEPTED

    @property
    def complete(self) -> bool:
        return self.outcome is Outcome.COMPLETE

    def __repr__(self):
        if self.edge is None:
            return f'Selection({self.outcome.value})'
        return f'Selection({self.outcome.value}, {self.edge})'


class EdgeSelector:
    '''
    Kruskal driver: holds every loaded edge, orders them by (weight, insertion
    index) and hands them out one decision at a time. Connectivity questions
    are delegated to the tracker.
    '''

    def __init__(self, n_verts: int, tracker: str=DEFAULT_TRACKER) -> None:
        self.n_verts = n_verts
        self.tracker_name = tracker
        self.tracker = make_tracker(tracker, n_verts)

        self.edges: list[Edge] = []
        self.weight_index: list[tuple[int, int]] = []
        self.dropped_edges: list[Edge] = []

        self._edge_lookup: set[Edge] = set()
        self._ordered = False
        self._cursor = 0

    def insert_edge(self, u: int, v: int, weight: int) -> bool:
        if self._ordered:
            raise RuntimeError('Cannot insert edges after the selection order is finalized')

        # if (u,v,w) already exists, do not add (v,u,w) again
        if Edge(v, u, weight) in self._edge_lookup:
            logger.warning(f'Can not insert edge ({u},{v}). Since there exist another edge ({v},{u}) in the graph')
            self.dropped_edges.append(Edge(u, v, weight))
            return False

        edge = Edge(u, v, weight)
        self.weight_index.append((weight, len(self.edges)))
        self.edges.append(edge)
        self._edge_lookup.add(edge)
        return True

    def finalize_order(self) -> None:
        self.weight_index.sort()
        self._ordered = True

    def ordered_edges(self) -> list[Edge]:
        return [self.edges[idx] for (_, idx) in self.weight_index]

    def accepted_edge_count(self) -> int:
        return self.tracker.accepted_edge_count()

    def is_complete(self) -> bool:
        return self.tracker.is_spanning_complete(self.n_verts)

    def select_next(self) -> Selection:
        if not self._ordered:
            self.finalize_order()

        while self._cursor < len(self.weight_index):
            (weight, idx) = self.weight_index[self._cursor]
            edge = self.edges[idx]
            logger.debug(f'Processing edge ({edge.u},{edge.v}) with weight {weight}')

            if self.is_complete():
                logger.debug(f'Spanning tree now contains {self.accepted_edge_count()} edges. Terminating...')
                return Selection(Outcome.COMPLETE)

            if self.tracker.is_pair_known(edge.u, edge.v):
                logger.debug(f'Edge ({edge.u},{edge.v}) is already traversed. Skipping...')
                self._cursor += 1
                continue

            if self.tracker.would_create_cycle(edge.u, edge.v):
                logger.debug(f'Edge ({edge.u},{edge.v}) will create a loop. Skipping...')
                # never reconsidered
                del self.weight_index[self._cursor]
                return Selection(Outcome.REJECTED, edge)

            self.tracker.accept(edge.u, edge.v)
            self._cursor += 1
            return Selection(Outcome.ACCEPTED, edge)

        logger.debug(f'Edge list exhausted with {self.accepted_edge_count()} accepted edges')
        return Selection(Outcome.COMPLETE)


class SpanningTree:
    def __init__(self) -> None:
        self.cost = 0
        self._edges: list[Edge] = []

    def add_edge(self, edge: Edge) -> None:
        self._edges.append(edge)
        self.cost += edge.weight

    def total_cost(self) -> int:
        return self.cost

    def edges(self) -> list[Edge]:
        return list(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def format_lines(self) -> list[str]:
        lines = [f'From {e.u}, To: {e.v}, Cost: {e.weight}' for e in self._edges]
        lines.append(f'Cost of the Spanning Tree : {self.cost}')
        return lines


def run_selection(selector: EdgeSelector, mst: Optional[SpanningTree]=None) -> SpanningTree:
    if mst is None:
        mst = SpanningTree()

    n_rejected = 0
    selection = selector.select_next()
    while not selection.complete:
        if selection.accepted:
            mst.add_edge(selection.edge)
        else:
            n_rejected += 1
        selection = selector.select_next()

    logger.info(f'Selection finished: {len(mst)} edges accepted, {n_rejected} rejected as cycles')
    if len(mst) < selector.n_verts - 1:
        logger.warning(f'Graph is not connected: {len(mst)} of {selector.n_verts - 1} spanning edges found')
    return mst


def main(argv: Optional[list[str]]=None) -> int:
    import argparse

    import graph_loader
    from init_logger import init_logger

    parser = argparse.ArgumentParser(prog='kruskal',
                                     description='Compute a minimum spanning tree with Kruskal\'s algorithm')
    parser.add_argument('infile', nargs='?', default=INPUT_FILE)
    parser.add_argument('-t', '--tracker',
                        default=DEFAULT_TRACKER,
                        choices=sorted(TRACKERS),
                        help='how cycles are detected while selecting edges')
    parser.add_argument('--show-order', action='store_true',
                        help='print the edges in selection order before running')
    parser.add_argument('--check', action='store_true',
                        help='compare the resulting weight with networkx')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args(argv)

    if args.verbose:
        init_logger(logging.DEBUG)
    elif args.quiet:
        init_logger(logging.WARNING)
    else:
        init_logger()

    tic = timer()
    try:
        selector = graph_loader.load_graph(args.infile, tracker=args.tracker)
    except (OSError, graph_loader.MalformedGraphError) as e:
        logger.error(f'Could not parse graph from {args.infile}: {e}')
        return 1
    read_time = timer() - tic

    tic = timer()
    selector.finalize_order()
    if args.show_order:
        for (weight, idx) in selector.weight_index:
            edge = selector.edges[idx]
            print(f'Edge[{idx}] => Source : {edge.u}, Destination: {edge.v}, Weight: {weight}')

    mst = run_selection(selector)
    compute_time = timer() - tic

    if not args.quiet:
        print('Minimum Spanning Tree and its components: ')
        for line in mst.format_lines():
            print(line)

    print(f'File read time (sec): {read_time:0.6f}')
    print(f'Computation time (sec): {compute_time:0.6f}')
    print(f'Total weight: {mst.total_cost()}')

    if args.check:
        import nx_utils

        (_, expected) = nx_utils.reference_mst(selector.edges)
        status = 'matches' if expected == mst.total_cost() else 'DIFFERS from'
        print(f'Result {status} networkx minimum spanning tree weight {expected}')

    return 0


if __name__ == '__main__':
    sys.exit(main())
