"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph core to where its data lives:
- Graph storage (CSV files, in-memory records)
- Cost queries (Dijkstra)
"""
