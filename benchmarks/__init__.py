"""Performance benchmarks for mstkit.

This package contains timing runs for Kruskal, Prim and connected
components on random connected graphs.
"""
