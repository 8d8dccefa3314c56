import unittest

from DegreeBuckets import DegreeBuckets
from DensestErrors import InvalidArgument
from SimpleGraph import SimpleGraph

import graph_fixtures as fixtures


def assert_consistent(test, buckets):
    seen = set()
    for d, bucket in enumerate(buckets.buckets):
        for i, v in enumerate(bucket):
            test.assertTrue(buckets.alive[v])
            test.assertEqual(buckets.degree[v], d)
            test.assertEqual(buckets.graph.degree(v), d)
            test.assertEqual(buckets.position[v], i)
            seen.add(v)
    test.assertEqual(seen, set(buckets.live_vertices()))
    test.assertEqual(len(seen), buckets.remaining)


class DegreeBucketsTestCase(unittest.TestCase):
    def test_initial_buckets(self):
        buckets = DegreeBuckets(fixtures.k4_with_pendant())
        self.assertEqual(buckets.bucket(1), (4,))
        self.assertEqual(sorted(buckets.bucket(3)), [1, 2, 3])
        self.assertEqual(buckets.bucket(4), (0,))
        self.assertEqual(buckets.bucket(9), ())
        self.assertEqual(buckets.min_degree(), 1)
        assert_consistent(self, buckets)

    def test_pop_min_follows_minimum_degree(self):
        graph = fixtures.k34_triangle_square_chain()
        buckets = DegreeBuckets(graph.clone())
        while buckets.remaining:
            d = buckets.min_degree()
            self.assertEqual(d, min(buckets.degree[v] for v in buckets.live_vertices()))
            v = buckets.pop_min()
            self.assertFalse(buckets.alive[v])
            assert_consistent(self, buckets)
        self.assertEqual(buckets.edge_count, 0)
        self.assertEqual(buckets.min_degree(), -1)
        with self.assertRaises(InvalidArgument):
            buckets.pop_min()

    def test_pop_min_is_deterministic(self):
        graph = fixtures.irregular()
        first = DegreeBuckets(graph.clone())
        second = DegreeBuckets(graph.clone())
        self.assertEqual([first.pop_min() for _ in range(8)], [second.pop_min() for _ in range(8)])

    def test_remove_rebuckets_neighbors(self):
        buckets = DegreeBuckets(fixtures.complete(5))
        buckets.remove(2)
        self.assertEqual(buckets.remaining, 4)
        self.assertEqual(buckets.edge_count, 6)
        self.assertEqual(sorted(buckets.bucket(3)), [0, 1, 3, 4])
        self.assertEqual(buckets.bucket(4), ())
        assert_consistent(self, buckets)
        with self.assertRaises(InvalidArgument):
            buckets.remove(2)

    def test_peel_below_reaches_fixed_point(self):
        # K4 on 0..3, the path 0-4-5-6 hanging off it and a lone edge 7-8
        graph = fixtures.complete(4)
        for _ in range(5):
            graph.add_vertex()
        for u, v in [(0, 4), (4, 5), (5, 6), (7, 8)]:
            graph.add_edge(u, v)
        buckets = DegreeBuckets(graph)
        removed = buckets.peel_below(2.5)
        self.assertEqual(sorted(removed), [4, 5, 6, 8])
        self.assertTrue(buckets.alive[7])
        self.assertEqual(buckets.degree[7], 0)
        self.assertEqual(sorted(v for v in buckets.live_vertices() if buckets.degree[v] > 0), [0, 1, 2, 3])
        assert_consistent(self, buckets)

    def test_peel_below_zero_threshold(self):
        buckets = DegreeBuckets(fixtures.star(4))
        self.assertEqual(buckets.peel_below(0.0), [])
        self.assertEqual(buckets.remaining, 5)

    def test_empty_graph(self):
        buckets = DegreeBuckets(SimpleGraph(0))
        self.assertEqual(buckets.remaining, 0)
        self.assertEqual(buckets.min_degree(), -1)


if __name__ == '__main__':
    unittest.main()
