"""Top-level package for the word path solver.

Finds the cheapest chain of single-dictionary-word transformations
between two words of the same length. A step may change several letters
at once, up to a bound, and costs the square of the number of letters
changed.

The engine lives in ``wordpath.graph``; file formats, configuration and
orchestration sit around it in the adapters, config and services
modules.
"""

from .graph import build_graph, find_vertex, path_between, shortest_path

__all__ = ["build_graph", "find_vertex", "shortest_path", "path_between"]

__version__ = "0.1.0"
