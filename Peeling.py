import logging

import pandas as pd

from DegreeBuckets import DegreeBuckets
from Goldberg import density

logger = logging.getLogger(__name__)


def peel(graph):
    '''
    Charikar's peeling on a private clone of graph.

    Yields (remaining, edges, v) once per step: the number of live vertices
    and live edges before the step, and the minimum-degree vertex v that the
    step removes. The input graph is never touched.
    '''
    buckets = DegreeBuckets(graph.clone())
    while buckets.remaining > 0:
        remaining, edges = buckets.remaining, buckets.edge_count
        v = buckets.pop_min()
        yield remaining, edges, v


def peeling_order(graph) -> list:
    return [v for _, _, v in peel(graph)]


def densest_subgraph_peeling(graph):
    '''
    1/2-approximation of the densest subgraph.

    Keeps the densest of the nested subgraphs visited while repeatedly removing
    a minimum-degree vertex. Returns (sorted vertex list, density); a graph
    without edges gives all of its vertices with density 0.0.
    '''
    number_of_nodes = graph.vertex_count()
    if number_of_nodes == 0:
        return [], 0.0
    best_density = density(graph, graph.vertices())
    best_num_deleted = 0
    deleted = []
    for remaining, edges, v in peel(graph):
        current_density = edges / remaining
        if current_density > best_density:
            best_density = current_density
            best_num_deleted = len(deleted)
        deleted.append(v)

    dropped = set(deleted[:best_num_deleted])
    best_subgraph = [v for v in graph.vertices() if v not in dropped]
    logger.debug(f'peeling kept {len(best_subgraph)} of {number_of_nodes} vertices, density {best_density}')
    return best_subgraph, best_density


def peeling_frontier(graph) -> pd.DataFrame:
    ''' Size, edge count and density of every nested subgraph visited by peeling, largest first.'''
    rows = [(remaining, edges, edges / remaining, v) for remaining, edges, v in peel(graph)]
    return pd.DataFrame(rows, columns=['k', 'edges', 'density', 'removed'])
