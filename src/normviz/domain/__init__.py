"""Domain layer - Core numeric pipeline and entities.

This package contains the framework-free core of the norm visualizer:

- Business entities (dimensions, initialization configs, norm types, state)
- The uniform randomness interface consumed by the generator
- Pure computational services (generation, multiplication, norms)

The domain layer represents the "what" of the system - matrices are generated,
multiplied and measured here, independent of how they are displayed.
"""
