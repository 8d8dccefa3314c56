class DensestSubgraphError(Exception):
    ''' Base class of every error raised by the densest subgraph solvers.'''


class InvalidArgument(DensestSubgraphError, ValueError):
    ''' Raised before any computation when an argument is out of range.'''


class MalformedGraph(DensestSubgraphError, ValueError):
    ''' Self-loops, duplicate edges and unknown vertices are rejected, never ignored.'''


class SolverFailure(DensestSubgraphError, RuntimeError):
    ''' The max-flow collaborator failed or reported a cut it cannot back up.'''


class BudgetExceeded(DensestSubgraphError, RuntimeError):
    ''' An iteration or enumeration budget ran out before the search finished.'''

    def __init__(self, message, budget):
        super().__init__(message)
        self.budget = budget
