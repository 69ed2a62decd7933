"""
algorithms/
-----------
Trace-generating engines plus the registry that dispatches them.

    from algorithms import build_registry, InvalidInput, UnknownAlgorithm

Every engine is a generator of Step objects; the registry validates the
input, drains the generator and hands back an immutable tuple.  Adding an
algorithm is: write the generator, add one AlgoInfo card in
algorithms/registry.py.
"""

from algorithms.errors   import AlgorithmError, InvalidInput, UnknownAlgorithm
from algorithms.step     import Step, StepList, to_plain
from algorithms.registry import FAMILIES, AlgoInfo, AlgorithmRegistry, build_registry, default_algorithms

__all__ = [
    "AlgorithmError",
    "InvalidInput",
    "UnknownAlgorithm",
    "Step",
    "StepList",
    "to_plain",
    "FAMILIES",
    "AlgoInfo",
    "AlgorithmRegistry",
    "build_registry",
    "default_algorithms",
]
