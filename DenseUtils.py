import errno
import itertools
import os

import matplotlib.pyplot as plt
from matplotlib import rcParams

from Goldberg import density


def create_path_if_not_exist(dirpath):
    if os.path.dirname(dirpath) and not os.path.exists(os.path.dirname(dirpath)):
        try:
            os.makedirs(os.path.dirname(dirpath))
        except OSError as exc:  # Guard against race condition
            if exc.errno != errno.EEXIST:
                raise


def brute_force_densest(graph, k=None):
    ''' Exhaustive search over all subsets of at most k vertices; only usable on small graphs.'''
    n = graph.vertex_count()
    k = n if k is None else min(k, n)
    best_subgraph = []
    best_density = 0.0
    for size in range(1, k + 1):
        for subset in itertools.combinations(range(n), size):
            dens = density(graph, subset)
            if dens > best_density:
                best_density = dens
                best_subgraph = list(subset)
    return best_subgraph, best_density


def plot_frontier(frontier, store_path, title, optimum=None, show=False):
    ''' Plots density against subgraph size for a peeling frontier and saves it to store_path.'''
    rcParams.update({'figure.autolayout': True})
    fig = plt.figure()
    plt.plot(frontier['k'], frontier['density'], label='peeling')
    if len(frontier):
        best = frontier.loc[frontier['density'].idxmax()]
        plt.scatter([best['k']], [best['density']], s=60, c='red', marker='o',
                    label='best peeled=%0.3f' % best['density'])
    if optimum is not None:
        plt.axhline(optimum, color='green', linestyle='--', label='exact=%0.3f' % optimum)
        plt.axhline(optimum / 2, color='gray', linestyle=':', label='exact / 2')
    plt.title(title)
    plt.xlabel('vertices left')
    plt.ylabel('density')
    plt.legend(bbox_to_anchor=(1.05, 1), loc='upper left', borderaxespad=0.)
    plt.grid()
    create_path_if_not_exist(store_path)
    plt.savefig(store_path)
    if show:
        plt.show()
    plt.close(fig)
    return store_path
