"""Graph, knapsack, backtracking and sorting algorithms with an ``algolab`` command."""

__version__ = "0.1.0"

__all__ = ["__version__"]