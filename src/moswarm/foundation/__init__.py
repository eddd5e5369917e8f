"""
Foundation layer: problems, populations, kernels, errors and checkpoints.
"""
