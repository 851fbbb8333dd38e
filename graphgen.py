import argparse
import random

from typing import Optional

import numpy as np

def random_adjacency(nvertices: int,
                     density: float=0.5,
                     min_weight: int=1,
                     max_weight: int=100,
                     connected: bool=False,
                     seed: Optional[int]=None) -> np.ndarray:
    if min_weight < 1:
        raise ValueError('weights must be positive, zero marks a missing edge')

    rng = random.Random(seed)
    max_edges = nvertices * (nvertices-1) // 2
    total_edges = min(int(density * max_edges), max_edges)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)
    placed = 0

    if connected and nvertices > 1:
        # lay a random path through every vertex first
        order = list(range(nvertices))
        rng.shuffle(order)
        for (a, b) in zip(order, order[1:]):
            i, j = min(a, b), max(a, b)
            adj_matrix[i, j] = rng.randint(min_weight, max_weight)
        placed = nvertices - 1

    for _ in range(max(total_edges - placed, 0)):
        # keep trying until an unoccupied spot is found
        new_spot = False
        while not new_spot:
            i = rng.randint(0, nvertices-2)
            j = rng.randint(i+1, nvertices-1) # ensure no self-loops
            if adj_matrix[i, j] == 0:
                new_spot = True

        # Only bother filling upper triangle for undirected graphs
        adj_matrix[i, j] = rng.randint(min_weight, max_weight)

    return adj_matrix

def adjacency_to_edges(adj_matrix: np.ndarray) -> list[tuple[int, int, int]]:
    rows, cols = np.nonzero(np.triu(adj_matrix, k=1))
    return [(int(i), int(j), int(adj_matrix[i, j])) for (i, j) in zip(rows, cols)]

def write_graph(adj_matrix: np.ndarray, fname: str) -> int:
    edges = adjacency_to_edges(adj_matrix)
    with open(fname, 'w') as f:
        f.write(f'{adj_matrix.shape[0]}\n')
        for (i, j, w) in edges:
            f.write(f'{i} {j} {w}\n')
    return len(edges)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate graphs for the kruskal tool')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='mst_data.in')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-c', '--connected', action='store_true')
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density}')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    adj_matrix = random_adjacency(args.nvertices,
                                  density=args.density,
                                  min_weight=args.min_weight,
                                  max_weight=args.max_weight,
                                  connected=args.connected,
                                  seed=args.seed)

    if args.verbose:
        print()
        print('Graph adjacency matrix:')
        print(adj_matrix)

    nedges = write_graph(adj_matrix, args.outfile)
    if not args.quiet:
        print(f'Wrote {nedges} edges to {args.outfile}')
