"""Classic algorithm solutions in seven modules: trees, search, stacks, dp, greedy, graphs and arrays."""

__version__ = "0.1.0"
__all__ = ["arrays", "dp", "graphs", "greedy", "search", "stacks", "trees"]