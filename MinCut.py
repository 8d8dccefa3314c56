import logging
import math

import maxflow
import networkx as nx
import numpy as np
from networkx.algorithms.flow import boykov_kolmogorov, dinitz, edmonds_karp, preflow_push

from DensestErrors import InvalidArgument, SolverFailure

logger = logging.getLogger(__name__)


class AuxFlowNetwork:
    '''
    Capacitated directed network with a source, a sink and one node per
    original vertex. Original vertices keep their ids 0..n-1, the source is n
    and the sink is n + 1. Terminal capacities live in two arrays, the arcs
    between original vertices in a list of (tail, head, capacity).
    '''

    def __init__(self, vertex_count, source_caps, sink_caps, arcs=()) -> None:
        self.vertex_count = vertex_count
        self.source = vertex_count
        self.sink = vertex_count + 1
        self.source_caps = np.asarray(source_caps, dtype=float)
        self.sink_caps = np.asarray(sink_caps, dtype=float)
        if self.source_caps.shape != (vertex_count,) or self.sink_caps.shape != (vertex_count,):
            raise InvalidArgument('terminal capacities must have one entry per vertex')
        self.arcs = list(arcs)

    def node_count(self) -> int:
        return self.vertex_count + 2

    def cut_capacity(self, source_side) -> float:
        ''' Total capacity of the arcs leaving the given source side.'''
        inside = np.zeros(self.vertex_count, dtype=bool)
        for v in source_side:
            if 0 <= v < self.vertex_count:
                inside[v] = True
        value = self.source_caps[~inside].sum() + self.sink_caps[inside].sum()
        for tail, head, capacity in self.arcs:
            if inside[tail] and not inside[head]:
                value += capacity
        return float(value)

    def to_networkx(self):
        network = nx.DiGraph()
        network.add_nodes_from(range(self.node_count()))
        for v in range(self.vertex_count):
            network.add_edge(self.source, v, capacity=float(self.source_caps[v]))
            network.add_edge(v, self.sink, capacity=float(self.sink_caps[v]))
        for tail, head, capacity in self.arcs:
            network.add_edge(tail, head, capacity=float(capacity))
        return network


class MinCutSolver:
    ''' Computes a minimum s-t cut of an AuxFlowNetwork.'''

    name = 'abstract'

    def min_cut(self, network: AuxFlowNetwork):
        '''
        Returns (source_side, cut_value): the set of network nodes on the
        source side of a minimum cut, the source id included, and the value of
        that cut, which equals the maximum flow.
        '''
        try:
            source_side, cut_value = self._min_cut(network)
        except SolverFailure:
            raise
        except Exception as e:
            raise SolverFailure(f'{self.name} max-flow failed: {e}') from e
        if not math.isfinite(cut_value):
            raise SolverFailure(f'{self.name} reported a non-finite cut value {cut_value}')
        return source_side, cut_value

    def _min_cut(self, network):
        raise NotImplementedError

    def __repr__(self):
        return f'{type(self).__name__}({self.name!r})'


class BoykovKolmogorovMinCut(MinCutSolver):
    ''' PyMaxflow's Boykov-Kolmogorov implementation.'''

    name = 'boykov_kolmogorov'

    def _min_cut(self, network):
        graph = maxflow.Graph[float](network.vertex_count, len(network.arcs))
        graph.add_nodes(network.vertex_count)
        for v in range(network.vertex_count):
            graph.add_tedge(v, float(network.source_caps[v]), float(network.sink_caps[v]))
        for tail, head, capacity in network.arcs:
            graph.add_edge(tail, head, float(capacity), 0.0)
        cut_value = float(graph.maxflow())
        # segment 0 is the source side
        source_side = {v for v in range(network.vertex_count) if graph.get_segment(v) == 0}
        source_side.add(network.source)
        return source_side, cut_value


class NetworkxMinCut(MinCutSolver):
    ''' networkx.minimum_cut with a selectable flow function.'''

    def __init__(self, flow_func=preflow_push, name=None) -> None:
        self.flow_func = flow_func
        self.name = name or flow_func.__name__

    def _min_cut(self, network):
        cut_value, (reachable, _) = nx.minimum_cut(network.to_networkx(), network.source, network.sink,
                                                   capacity='capacity', flow_func=self.flow_func)
        return set(reachable), float(cut_value)


SOLVERS = {
    'boykov_kolmogorov': BoykovKolmogorovMinCut,
    'preflow_push': lambda: NetworkxMinCut(preflow_push),
    'dinitz': lambda: NetworkxMinCut(dinitz),
    'edmonds_karp': lambda: NetworkxMinCut(edmonds_karp),
    'networkx_boykov_kolmogorov': lambda: NetworkxMinCut(boykov_kolmogorov, name='networkx_boykov_kolmogorov'),
}


def get_solver(name) -> MinCutSolver:
    try:
        factory = SOLVERS[name]
    except KeyError:
        raise InvalidArgument(f'unknown min-cut solver {name!r}, expected one of {sorted(SOLVERS)}')
    logger.debug(f'using min-cut solver {name}')
    return factory()
