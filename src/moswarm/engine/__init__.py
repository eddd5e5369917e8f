"""
Engine layer: NSPSO and ACO implementations.

Shared building blocks live under `moswarm.engine.algorithm.components`.
"""
