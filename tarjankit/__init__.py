"""Directed graphs, SCC building blocks, graph generators and a perfect-number search."""

__version__ = "0.1.0"