import unittest

from DenseUtils import brute_force_densest
from Goldberg import density, densest_subgraph
from Peeling import densest_subgraph_peeling, peeling_frontier, peeling_order
from SimpleGraph import SimpleGraph
from utils.graph_generator import planted_clique_graph, random_graph

import graph_fixtures as fixtures


class PeelingTestCase(unittest.TestCase):
    def assert_half_approximation(self, graph, optimal):
        answer, dens = densest_subgraph_peeling(graph)
        self.assertGreaterEqual(dens, optimal / 2 - 1e-6)
        self.assertAlmostEqual(dens, density(graph, answer), places=9)
        return answer, dens

    def test_known_optima(self):
        for name, factory, optimum in fixtures.KNOWN_OPTIMA:
            with self.subTest(name):
                self.assert_half_approximation(factory(), optimum)

    def test_exact_on_easy_graphs(self):
        answer, dens = densest_subgraph_peeling(fixtures.single_edge())
        self.assertEqual(answer, [0, 1])
        self.assertAlmostEqual(dens, 0.5)
        answer, dens = densest_subgraph_peeling(fixtures.k4_with_pendant())
        self.assertEqual(answer, [0, 1, 2, 3])
        self.assertAlmostEqual(dens, 1.5)
        answer, dens = densest_subgraph_peeling(fixtures.star(4))
        self.assertEqual(answer, [0, 1, 2, 3, 4])
        self.assertAlmostEqual(dens, 0.8)

    def test_two_triangles_sharing_edge(self):
        answer, dens = self.assert_half_approximation(fixtures.two_triangles_sharing_edge(), 1.25)
        self.assertGreaterEqual(dens, 1.0)

    def test_against_brute_force(self):
        for graph in (fixtures.triangle_square(), fixtures.irregular(), fixtures.k34_triangle_square_chain()):
            _, optimal = brute_force_densest(graph)
            self.assert_half_approximation(graph, optimal)

    def test_against_exact_on_random_graphs(self):
        for seed in range(4):
            graph = random_graph(40, 0.15, seed=seed)
            _, optimal = densest_subgraph(graph)
            self.assert_half_approximation(graph, optimal)

    def test_planted_clique(self):
        graph = planted_clique_graph(300, 0.01, 10, seed=42)
        _, optimal = densest_subgraph(graph)
        self.assert_half_approximation(graph, optimal)

    def test_no_edges(self):
        self.assertEqual(densest_subgraph_peeling(SimpleGraph(4)), ([0, 1, 2, 3], 0.0))
        self.assertEqual(densest_subgraph_peeling(SimpleGraph(0)), ([], 0.0))

    def test_idempotent(self):
        graph = random_graph(60, 0.1, seed=3)
        self.assertEqual(densest_subgraph_peeling(graph.clone()), densest_subgraph_peeling(graph.clone()))
        self.assertEqual(peeling_order(graph), peeling_order(graph))

    def test_input_untouched(self):
        graph = fixtures.k5_k3_bridge()
        edges = sorted(graph.edges())
        densest_subgraph_peeling(graph)
        peeling_order(graph)
        self.assertEqual(sorted(graph.edges()), edges)

    def test_order_is_a_permutation(self):
        graph = fixtures.irregular()
        self.assertEqual(sorted(peeling_order(graph)), list(range(8)))
        # the pendant goes first
        self.assertEqual(peeling_order(fixtures.k4_with_pendant())[0], 4)


class PeelingFrontierTestCase(unittest.TestCase):
    def test_frontier(self):
        graph = fixtures.k4_with_pendant()
        frontier = peeling_frontier(graph)
        self.assertEqual(list(frontier.columns), ['k', 'edges', 'density', 'removed'])
        self.assertEqual(list(frontier['k']), [5, 4, 3, 2, 1])
        self.assertEqual(list(frontier['edges']), [7, 6, 3, 1, 0])
        self.assertAlmostEqual(frontier['density'].max(), 1.5)
        self.assertEqual(frontier['removed'].iloc[0], 4)

    def test_best_row_matches_peeling(self):
        graph = random_graph(30, 0.2, seed=11)
        frontier = peeling_frontier(graph)
        _, dens = densest_subgraph_peeling(graph)
        self.assertAlmostEqual(frontier['density'].max(), dens)

    def test_empty(self):
        self.assertEqual(len(peeling_frontier(SimpleGraph(0))), 0)


if __name__ == '__main__':
    unittest.main()
