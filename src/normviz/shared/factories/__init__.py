"""Shared factories - Reusable construction helpers."""
from .source_factory import create_uniform_source

__all__ = [
    'create_uniform_source'
]
