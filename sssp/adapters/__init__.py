"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Tabular edge data (CSV files, in-memory rows)
- Path finding (Dijkstra)
- Output (console reporting)
"""
