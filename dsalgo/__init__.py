"""Classic data structures and algorithms: graphs, sorting, number theory, greedy and array techniques."""

__version__ = "0.1.0"