"""Utility helpers shared across tripgraph modules."""
