import random

import networkx as nx

from SimpleGraph import SimpleGraph, from_networkx


# returns edges cnt
def gen_random_graph(n, filepath, seed=None):
    rng = random.Random(seed)
    adj = []
    for i in range(n):
        i_set = set()
        runs_cnt = rng.randint(0, n - 1)
        for j in range(runs_cnt):
            v_to = rng.randint(0, n - 1)
            if v_to != i:
                i_set.add(v_to)
        adj.append(i_set)
    edges = set()
    for i in range(n):
        for v_to in adj[i]:
            edges.add((min(i, v_to), max(i, v_to)))
    with open(filepath, 'w') as file:
        for e in sorted(edges):
            file.write(f'{e[0]} {e[1]}\n')
    return len(edges)


def random_graph(n, p, seed=None) -> SimpleGraph:
    graph, _ = from_networkx(nx.gnp_random_graph(n, p, seed=seed))
    return graph


def planted_clique_graph(n, p, clique_size, seed=None) -> SimpleGraph:
    ''' G(n, p) with a clique planted on vertices 0..clique_size-1.'''
    graph = random_graph(n, p, seed=seed)
    for u in range(clique_size):
        for v in range(u + 1, clique_size):
            if not graph.has_edge(u, v):
                graph.add_edge(u, v)
    return graph
