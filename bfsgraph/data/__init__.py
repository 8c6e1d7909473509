"""
Sample data module.

Provides the demonstration graph and value array built from
the constants in bfsgraph.config.
"""

from bfsgraph.data.samples import load_sample_graph, load_sample_values

__all__ = ["load_sample_graph", "load_sample_values"]
