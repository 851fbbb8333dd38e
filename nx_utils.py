import networkx as nx
import random

from typing import Any, Callable, Iterable

from kruskal import Edge

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def to_output_file(g: nx.classes.graph.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> None:
    with open(fname, 'w') as f:
        f.write(f'{g.number_of_nodes()}\n')

        for edge in g.edges:
            # Convert edge names to index
            u = nodename_to_idx(edge[0])
            v = nodename_to_idx(edge[1])
            f.write(f'{u} {v} {decide_weight(edge[0], edge[1])}\n')

def to_nx_graph(edges: Iterable[Edge], nvertices: int=0) -> nx.classes.graph.Graph:
    g = nx.Graph()
    g.add_nodes_from(range(nvertices))
    for e in edges:
        g.add_edge(e.u, e.v, weight=e.weight)
    return g

def reference_mst(edges: Iterable[Edge], nvertices: int=0) -> tuple[list[Edge], int]:
    g = to_nx_graph(edges, nvertices)
    mst = nx.minimum_spanning_tree(g, algorithm='kruskal')

    tree = [Edge(u, v, d['weight']) for (u, v, d) in sorted(mst.edges(data=True))]
    return tree, sum(e.weight for e in tree)
