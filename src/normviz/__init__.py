"""Norm visualizer core.

Explore how initialization strategy, scale factor and matrix dimensions
affect the norm of the activations produced by a single product C = A·B.
"""

__version__ = "1.0.0"
