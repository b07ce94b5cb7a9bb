"""Adapters layer - Concrete implementations of the ports.

- dictionary: text dictionary repository
- queries: text query reader
- output: text answer writer
- graph: Dijkstra path solver
"""
