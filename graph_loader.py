'''
Reads graphs in the plain text input format:

<nvertices>
<v1> <v2> <w>
<v1> <v2> <w>
...

Tokens only need to be whitespace separated, line breaks carry no meaning.
'''

import logging

from typing import Iterable

from kruskal import Edge, EdgeSelector
from tracker import DEFAULT_TRACKER

logger = logging.getLogger('mst')


class MalformedGraphError(ValueError):
    pass


def parse_tokens(tokens: Iterable[str]) -> tuple[int, list[Edge]]:
    numbers = []
    for (pos, token) in enumerate(tokens):
        try:
            numbers.append(int(token))
        except ValueError:
            raise MalformedGraphError(f'token {pos} ({token!r}) is not an integer') from None

    if not numbers:
        raise MalformedGraphError('no node count found')

    nvertices = numbers[0]
    if nvertices < 0:
        raise MalformedGraphError(f'node count must not be negative, got {nvertices}')

    rest = numbers[1:]
    if len(rest) % 3 != 0:
        raise MalformedGraphError(f'{len(rest) % 3} trailing token(s) do not form a full edge')

    edges = [Edge(*rest[i:i+3]) for i in range(0, len(rest), 3)]
    return nvertices, edges


def parse_graph(text: str, tracker: str=DEFAULT_TRACKER) -> EdgeSelector:
    nvertices, edges = parse_tokens(text.split())

    selector = EdgeSelector(nvertices, tracker=tracker)
    for edge in edges:
        selector.insert_edge(edge.u, edge.v, edge.weight)

    logger.info(f'Loaded graph with {nvertices} nodes and {len(selector.edges)} edges '
                f'({len(selector.dropped_edges)} dropped)')
    return selector


def load_graph(fname: str, tracker: str=DEFAULT_TRACKER) -> EdgeSelector:
    with open(fname, 'r') as f:
        return parse_graph(f.read(), tracker=tracker)
