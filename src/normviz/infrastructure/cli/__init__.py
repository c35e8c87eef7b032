"""Console presentation helpers."""
from .report import render_report, render_comparison, render_matrix

__all__ = [
    'render_report',
    'render_comparison',
    'render_matrix'
]
