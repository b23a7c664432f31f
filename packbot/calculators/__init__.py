"""
Deterministic packaging calculation.

Pure Python math. No AI, no I/O.
Given a NormalizedProduct, produce the box specification, materials,
costs, shipping weight and sustainability figures.
"""
