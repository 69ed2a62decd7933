"""
algorithms/steps/
-----------------
One frozen Step subclass per `type` tag, grouped by algorithm family.

    from algorithms.steps import sorting, traversal, paths, spanning, ordering
"""

from algorithms.steps import ordering, paths, sorting, spanning, traversal

__all__ = [
    "ordering",
    "paths",
    "sorting",
    "spanning",
    "traversal",
]
