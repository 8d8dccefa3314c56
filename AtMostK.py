import itertools
import logging
import numbers
import warnings

from tqdm import tqdm

from DegreeBuckets import DegreeBuckets
from DensestErrors import BudgetExceeded, InvalidArgument
from Goldberg import density, densest_subgraph
from Peeling import peel
from Settings import load_settings

logger = logging.getLogger(__name__)


def global_prune_bound(graph, k) -> float:
    ''' Best density peeling reaches once at most k vertices are left; a lower bound on the optimum.'''
    dprime = 0.0
    for remaining, edges, _ in peel(graph):
        if remaining <= k:
            dprime = max(dprime, edges / remaining)
    return dprime


def threshold_prune(graph, dprime) -> list:
    '''
    Repeatedly drops the vertices whose degree is positive but below dprime.
    Every vertex of a densest at-most-k subgraph has at least its density as
    degree inside it, so none of them is dropped. Returns the surviving
    vertices that still have an edge, in ascending order.
    '''
    buckets = DegreeBuckets(graph.clone())
    removed = buckets.peel_below(dprime)
    logger.debug(f'threshold {dprime} removed {len(removed)} vertices')
    return [v for v in buckets.live_vertices() if buckets.degree[v] > 0]


def brute_force(graph, candidates, k, max_subsets=0, progress=False):
    ''' Tries every subset of candidates with 1..k vertices, scored on graph.'''
    best_subgraph = []
    best_density = 0.0
    sizes = range(1, min(k, len(candidates)) + 1)
    if progress:
        sizes = tqdm(sizes, desc='subset sizes')
    examined = 0
    for size in sizes:
        for subset in itertools.combinations(candidates, size):
            examined += 1
            if max_subsets and examined > max_subsets:
                raise BudgetExceeded(f'more than {max_subsets} subsets of {len(candidates)} candidates '
                                     f'needed for k={k}', max_subsets)
            dens = density(graph, subset)
            if dens > best_density:
                best_density = dens
                best_subgraph = list(subset)
    return best_subgraph, best_density


def densest_at_most_k_subgraph(graph, k, settings=None, max_subsets=None, progress=None):
    '''
    Densest subgraph with at most k vertices.

    For k >= n this is the unconstrained problem. Otherwise peeling gives a
    lower bound d' on the answer, vertices of degree below d' are pruned, and
    the survivors are searched exhaustively. The search is exponential in the
    number of survivors.

    Returns (vertex list, density). When no subset has an edge the result is
    ([], 0.0).
    '''
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise InvalidArgument(f'k must be an integer, got {k!r}')
    if k <= 0:
        raise InvalidArgument(f'k must be positive, got {k}')
    settings = settings or load_settings()
    if max_subsets is None:
        max_subsets = settings.max_subsets
    if progress is None:
        progress = settings.progress

    number_of_nodes = graph.vertex_count()
    if k >= number_of_nodes:
        return densest_subgraph(graph, settings=settings)
    if graph.edge_count() == 0:
        return [], 0.0

    dprime = global_prune_bound(graph, k)
    candidates = threshold_prune(graph, dprime)
    logger.info(f'k={k}: lower bound {dprime}, {len(candidates)} of {number_of_nodes} vertices left after pruning')
    if settings.candidate_warning and len(candidates) > settings.candidate_warning:
        warnings.warn(f'{len(candidates)} candidates survived pruning for k={k}; '
                      f'the exhaustive search may take a long time')
    if not candidates:
        return [], 0.0
    return brute_force(graph, candidates, int(k), max_subsets=max_subsets, progress=progress)
