"""
errors.py - Hard failures
==========================
Only two things are errors: input that cannot be run at all, and an
algorithm name nobody registered.  Both are raised before a single
step exists.

Unsolvable-but-valid inputs (no path, a cycle, a negative cycle) are NOT
errors.  They end the trace with a terminal step the UI branches on.
"""


class AlgorithmError(ValueError):
    """Base class for everything the registry refuses to run."""


class InvalidInput(AlgorithmError):
    """Malformed array / graph, bad start or end node, or input over a size limit."""


class UnknownAlgorithm(AlgorithmError):
    """No algorithm is registered under the requested name."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown algorithm: {name}")
