import argparse
import logging
import math

import numpy as np

from DensestErrors import BudgetExceeded, InvalidArgument, SolverFailure
from MinCut import AuxFlowNetwork, get_solver
from Settings import load_settings
from SimpleGraph import read_edge_list

logger = logging.getLogger(__name__)


def induced_edge_count(graph, answer) -> int:
    ''' Number of edges with both endpoints in answer.'''
    answer = set(answer)
    degree = 0
    for v in answer:
        for u in graph.neighbors(v):
            if u in answer:
                degree += 1
    return degree // 2


def density(graph, answer) -> float:
    ''' Finds the density |E(S)|/|S| of the subgraph induced by answer.'''
    answer = set(answer)
    if not answer:
        return 0.0
    return induced_edge_count(graph, answer) / len(answer)


def make_aux_graph(graph, least_density) -> AuxFlowNetwork:
    ''' Constructs the auxiliary network H(least_density) from Goldberg's construction'''
    if math.isnan(least_density) or math.isinf(least_density) or least_density < 0:
        raise InvalidArgument(f'density threshold must be a finite non-negative number, got {least_density}')
    number_of_nodes = graph.vertex_count()
    arcs = []
    for from_node, to_node in graph.edges():
        arcs.append((from_node, to_node, 1.0))
        arcs.append((to_node, from_node, 1.0))
    return AuxFlowNetwork(number_of_nodes,
                          source_caps=graph.degrees(),
                          sink_caps=np.full(number_of_nodes, 2.0 * least_density),
                          arcs=arcs)


def check_cut(network, source_side, cut_value, tolerance) -> None:
    ''' Raises SolverFailure unless the reported value is the capacity of the reported partition.'''
    if network.source not in source_side or network.sink in source_side:
        raise SolverFailure('the reported partition does not separate source and sink')
    recomputed = network.cut_capacity(source_side)
    if abs(recomputed - cut_value) > tolerance * max(1.0, abs(recomputed)):
        raise SolverFailure(f'reported cut value {cut_value} disagrees with the partition capacity {recomputed}')


def densest_subgraph(graph, solver=None, settings=None, max_iterations=None):
    '''
    Exact densest subgraph by binary search over the density threshold.

    Each step builds Goldberg's network for the midpoint and asks the min-cut
    solver for a cut. A cut of value at most 2m whose source side holds some
    original vertex certifies a subgraph at least that dense; the loop stops
    once the interval is narrower than 1/(n(n-1)), the smallest gap between two
    distinct densities on n vertices.

    Returns (sorted vertex list, density). A graph without edges gives all of
    its vertices with density 0.0.
    '''
    settings = settings or load_settings()
    if solver is None:
        solver = get_solver(settings.solver)
    if max_iterations is None:
        max_iterations = settings.max_iterations

    number_of_nodes = graph.vertex_count()
    number_of_edges = graph.edge_count()
    if number_of_nodes == 0:
        return [], 0.0
    if number_of_edges == 0:
        return list(graph.vertices()), 0.0

    min_degree = 0.0
    max_degree = graph.max_degree() / 2.0
    subgraph = list(graph.vertices())
    difference = 1.0 / (number_of_nodes * (number_of_nodes - 1))
    iterations = 0
    while max_degree - min_degree >= difference:
        if max_iterations and iterations >= max_iterations:
            raise BudgetExceeded(f'binary search did not converge within {max_iterations} iterations '
                                 f'(interval [{min_degree}, {max_degree}])', max_iterations)
        iterations += 1
        least_density = (max_degree + min_degree) / 2.0
        network = make_aux_graph(graph, least_density)
        source_side, cut_value = solver.min_cut(network)
        check_cut(network, source_side, cut_value, settings.cut_check_tolerance)
        source_segment = sorted(v for v in source_side if 0 <= v < number_of_nodes)
        logger.debug(f'least_density={least_density} max flow={cut_value} '
                     f'source segment size={len(source_segment)}')
        if source_segment and cut_value <= 2.0 * number_of_edges + settings.tolerance:
            min_degree = least_density
            subgraph = source_segment
        else:
            max_degree = least_density

    dens = density(graph, subgraph)
    logger.info(f'densest subgraph: {len(subgraph)} vertices, density {dens} after {iterations} iterations')
    return subgraph, dens


def main(argv=None):
    parser = argparse.ArgumentParser(description='Find the densest subgraph of an edge list file')
    parser.add_argument('filepath', help='file with one "u v" edge per line')
    parser.add_argument('-n', '--number_of_nodes', type=int, default=None,
                        help='vertex count, defaults to the largest id plus one')
    parser.add_argument('-a', '--algorithm', choices=['exact', 'peeling', 'at-most-k'], default='exact')
    parser.add_argument('-k', type=int, default=None, help='size bound for at-most-k')
    parser.add_argument('-s', '--solver', default=None, help='min-cut solver for the exact algorithm')
    parser.add_argument('-c', '--config', default=None, help='path to a .properties file')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')
    settings = load_settings(args.config)
    if args.solver is not None:
        settings.solver = args.solver
    graph = read_edge_list(args.filepath, args.number_of_nodes)

    if args.algorithm == 'exact':
        answer, dens = densest_subgraph(graph, settings=settings)
    elif args.algorithm == 'peeling':
        from Peeling import densest_subgraph_peeling
        answer, dens = densest_subgraph_peeling(graph)
    else:
        if args.k is None:
            parser.error('-k is required for at-most-k')
        from AtMostK import densest_at_most_k_subgraph
        answer, dens = densest_at_most_k_subgraph(graph, args.k, settings=settings)

    print(answer)
    print(dens)
    return 0


if __name__ == '__main__':
    main()
