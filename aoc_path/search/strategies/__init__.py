"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .breadth_first import BreadthFirstStrategy
from .a_star import AStarStrategy
from .uniform_cost import UniformCostStrategy

__all__ = [
    "BreadthFirstStrategy",
    "AStarStrategy",
    "UniformCostStrategy",
]
