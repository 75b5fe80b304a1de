"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph storage (adjacency lists)
- Graph construction (weight matrices)
- Route solving (Dijkstra engine wrapper)
"""
