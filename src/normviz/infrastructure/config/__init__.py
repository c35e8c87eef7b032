"""Infrastructure layer configuration management."""
from .config_loader import ConfigLoader, DimensionsConfig, InitSettings, RandomConfig, LoggingConfig

__all__ = [
    'ConfigLoader',
    'DimensionsConfig',
    'InitSettings',
    'RandomConfig',
    'LoggingConfig'
]
