import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from algorithms import build_registry
from engine import EngineConfig
from graph import Graph


@pytest.fixture
def registry():
    return build_registry(EngineConfig())


@pytest.fixture
def path_graph() -> dict:
    """0 - 1 - 2, unit weights."""
    return {
        0: [{"node": 1, "weight": 1}],
        1: [{"node": 0, "weight": 1}, {"node": 2, "weight": 1}],
        2: [{"node": 1, "weight": 1}],
    }


@pytest.fixture
def weighted_graph() -> dict:
    """Four nodes; shortest distances from 0 are {0: 0, 1: 3, 2: 1, 3: 8}."""
    return {
        0: [{"node": 1, "weight": 4}, {"node": 2, "weight": 1}],
        1: [{"node": 0, "weight": 4}, {"node": 2, "weight": 2}, {"node": 3, "weight": 5}],
        2: [{"node": 0, "weight": 1}, {"node": 1, "weight": 2}, {"node": 3, "weight": 8}],
        3: [{"node": 1, "weight": 5}, {"node": 2, "weight": 8}],
    }


@pytest.fixture
def negative_cycle_graph() -> dict:
    """Directed 0 -> 1 -> 0, both weight -1."""
    return {
        0: [{"node": 1, "weight": -1}],
        1: [{"node": 0, "weight": -1}],
    }


@pytest.fixture
def disconnected_graph() -> Graph:
    """Two components: 0 - 1 (w=2) and 2 - 3 (w=5)."""
    g = Graph()
    g.add_edge(0, 1, weight=2)
    g.add_edge(2, 3, weight=5)
    return g


@pytest.fixture
def square_graph() -> Graph:
    """4-cycle 0-1-2-3-0 plus the diagonal 0-2."""
    g = Graph()
    g.add_edge(0, 1, weight=1)
    g.add_edge(1, 2, weight=2)
    g.add_edge(2, 3, weight=3)
    g.add_edge(3, 0, weight=4)
    g.add_edge(0, 2, weight=5)
    return g
