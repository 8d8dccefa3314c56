from DensestErrors import InvalidArgument


class DegreeBuckets:
    '''
    Groups the live vertices of a working graph by their current degree.

    Buckets are swap-remove vectors indexed by degree, so moving a vertex one
    bucket down and taking a vertex out of a bucket are both O(1). The graph
    passed in is mutated: removed vertices lose all their edges. Callers own
    that graph, i.e. they pass a clone of whatever they were given.
    '''

    def __init__(self, graph) -> None:
        self.graph = graph
        n = graph.vertex_count()
        self.degree = graph.degrees()
        self.buckets = [[] for _ in range(max(self.degree, default=0) + 1)]
        self.position = [0] * n
        self.alive = [True] * n
        for v in range(n):
            bucket = self.buckets[self.degree[v]]
            self.position[v] = len(bucket)
            bucket.append(v)
        self.remaining = n
        self.cursor = 0

    @property
    def edge_count(self) -> int:
        return self.graph.edge_count()

    def bucket(self, d) -> tuple:
        return tuple(self.buckets[d]) if 0 <= d < len(self.buckets) else ()

    def live_vertices(self) -> list:
        return [v for v in range(len(self.alive)) if self.alive[v]]

    def min_degree(self) -> int:
        ''' Smallest degree of a live vertex, or -1 once every vertex is gone.'''
        if self.remaining == 0:
            return -1
        while not self.buckets[self.cursor]:
            self.cursor += 1
        return self.cursor

    def pop_min(self) -> int:
        ''' Removes and returns the vertex at the back of the lowest non-empty bucket.'''
        d = self.min_degree()
        if d < 0:
            raise InvalidArgument('no live vertex left to remove')
        v = self.buckets[d][-1]
        self.remove(v)
        return v

    def peel_below(self, threshold) -> list:
        '''
        Removes every vertex whose degree lies in (0, threshold) until none is
        left, and returns the removed vertices in removal order. Vertices that
        fall to degree 0 along the way stay live but isolated.
        '''
        removed = []
        d = 1
        while d < len(self.buckets) and d < threshold:
            if self.buckets[d]:
                v = self.buckets[d][-1]
                self.remove(v)
                removed.append(v)
                # neighbors land at most one bucket lower
                d = max(1, d - 1)
            else:
                d += 1
        return removed

    def remove(self, v) -> None:
        if not self.alive[v]:
            raise InvalidArgument(f'vertex {v} was already removed')
        self._take(v)
        self.alive[v] = False
        self.remaining -= 1
        for u in self.graph.isolate(v):
            self._take(u)
            self.degree[u] -= 1
            self._put(u)
            # a neighbor can drop at most one level below the current minimum
            if self.degree[u] < self.cursor:
                self.cursor = self.degree[u]

    def _take(self, v):
        bucket = self.buckets[self.degree[v]]
        i = self.position[v]
        last = bucket.pop()
        if last != v:
            bucket[i] = last
            self.position[last] = i

    def _put(self, v):
        bucket = self.buckets[self.degree[v]]
        self.position[v] = len(bucket)
        bucket.append(v)
