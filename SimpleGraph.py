import networkx as nx

from DensestErrors import MalformedGraph


class SimpleGraph:
    ''' Undirected graph on vertices 0..n-1 without self-loops or parallel edges.'''

    def __init__(self, vertex_count=0, edges=()) -> None:
        if vertex_count < 0:
            raise MalformedGraph(f'vertex count must be non-negative, got {vertex_count}')
        self.adj = [set() for _ in range(vertex_count)]
        self.number_of_edges = 0
        for u, v in edges:
            self.add_edge(u, v)

    def vertex_count(self) -> int:
        return len(self.adj)

    def edge_count(self) -> int:
        return self.number_of_edges

    def vertices(self):
        return range(len(self.adj))

    def edges(self):
        for u in range(len(self.adj)):
            for v in self.adj[u]:
                if u < v:
                    yield u, v

    def degree(self, v) -> int:
        self._check_vertex(v)
        return len(self.adj[v])

    def degrees(self) -> list:
        return [len(a) for a in self.adj]

    def max_degree(self) -> int:
        return max(self.degrees(), default=0)

    def neighbors(self, v):
        self._check_vertex(v)
        return self.adj[v]

    def has_edge(self, u, v) -> bool:
        self._check_vertex(u)
        self._check_vertex(v)
        return v in self.adj[u]

    def add_vertex(self) -> int:
        self.adj.append(set())
        return len(self.adj) - 1

    def add_edge(self, u, v) -> None:
        self._check_vertex(u)
        self._check_vertex(v)
        if u == v:
            raise MalformedGraph(f'self-loop at vertex {u}')
        if v in self.adj[u]:
            raise MalformedGraph(f'duplicate edge ({u}, {v})')
        self.adj[u].add(v)
        self.adj[v].add(u)
        self.number_of_edges += 1

    def remove_edge(self, u, v) -> None:
        if not self.has_edge(u, v):
            raise MalformedGraph(f'edge ({u}, {v}) is not in the graph')
        self.adj[u].remove(v)
        self.adj[v].remove(u)
        self.number_of_edges -= 1

    def isolate(self, v) -> list:
        ''' Removes every edge at v and returns the former neighbors in ascending order.'''
        former = sorted(self.neighbors(v))
        for u in former:
            self.adj[u].remove(v)
        self.adj[v].clear()
        self.number_of_edges -= len(former)
        return former

    def clone(self):
        copy = SimpleGraph()
        copy.adj = [set(a) for a in self.adj]
        copy.number_of_edges = self.number_of_edges
        return copy

    def to_networkx(self):
        graph = nx.Graph()
        graph.add_nodes_from(self.vertices())
        graph.add_edges_from(self.edges())
        return graph

    def write_edge_list(self, filepath) -> None:
        with open(filepath, 'w') as outfile:
            for u, v in self.edges():
                outfile.write(f'{u} {v}\n')

    def _check_vertex(self, v):
        if not 0 <= v < len(self.adj):
            raise MalformedGraph(f'vertex {v} is out of range 0..{len(self.adj) - 1}')

    def __len__(self):
        return len(self.adj)

    def __repr__(self):
        return f'SimpleGraph(n={self.vertex_count()}, m={self.edge_count()})'


def from_networkx(nx_graph):
    ''' Relabels the nodes to 0..n-1 in iteration order; returns the graph and the original labels.'''
    if nx_graph.is_directed():
        raise MalformedGraph('directed graphs are not supported')
    if nx_graph.is_multigraph():
        raise MalformedGraph('multigraphs are not supported')
    labels = list(nx_graph.nodes)
    index = {node: i for i, node in enumerate(labels)}
    graph = SimpleGraph(len(labels))
    for u, v in nx_graph.edges():
        graph.add_edge(index[u], index[v])
    return graph, labels


def read_edge_list(filepath, vertex_count=None):
    ''' Reads "u v" lines; the vertex count defaults to the largest id seen plus one.'''
    edges = []
    with open(filepath, 'r') as file:
        for line_number, line in enumerate(file, start=1):
            line = line.split('#', 1)[0].strip()
            if not line:
                continue
            tokens = line.split()
            if len(tokens) < 2:
                raise MalformedGraph(f'{filepath}:{line_number}: expected "u v", got {line!r}')
            try:
                from_node, to_node = int(tokens[0]), int(tokens[1])
            except ValueError:
                raise MalformedGraph(f'{filepath}:{line_number}: vertex ids must be integers')
            edges.append((from_node, to_node))
    if vertex_count is None:
        vertex_count = max((max(e) for e in edges), default=-1) + 1
    return SimpleGraph(vertex_count, edges)
