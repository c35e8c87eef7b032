"""Console rendering of the explorer state and norms.

Keeps the entrypoint thin: everything printed by the CLI is built here as
plain strings so it can be asserted on directly.
"""
from __future__ import annotations

from typing import List

from normviz.application.services.recompute_controller import RecomputeController
from normviz.domain.entities.init_config import InitConfig, InitType
from normviz.domain.entities.matrix import Matrix, shape
from normviz.domain.entities.norm_type import NormType
from normviz.domain.entities.state import format_norm


def _describe_config(config: InitConfig, hint: float | None) -> str:
    if config.init_type == InitType.CONSTANT.value:
        body = f"constant={config.constant:g}"
    elif config.is_random:
        body = f"mean={config.mean:g}, std={config.std:g}"
        if hint is not None:
            body += f" (Xavier std when std=0 ~ {format_norm(hint)})"
    else:
        body = "zero-filled"
    return f"{config.init_type}: {body}, scale={config.scale:.2f}"


def render_matrix(matrix: Matrix, precision: int = 4) -> List[str]:
    """Render matrix rows as aligned, fixed-precision columns."""
    width = precision + 4
    return [" ".join(f"{x:>{width}.{precision}f}" for x in row) for row in matrix]


def render_report(controller: RecomputeController, show_matrices: bool = False) -> str:
    """Describe dimensions, initializations and norms under the selected metric."""
    state = controller.state
    dims = state.dims
    report = controller.norms()
    formatted = report.formatted()
    hints = controller.xavier_hints()

    lines = [
        f"A: {dims.m}x{dims.k} . B: {dims.k}x{dims.n} -> C: {dims.m}x{dims.n}",
        f"A init  {_describe_config(state.config_a, hints['A'])}",
        f"B init  {_describe_config(state.config_b, hints['B'])}",
        "",
    ]
    for name in ("A", "B", "C"):
        lines.append(f"{report.norm_type.value} norm of {name} ~ {formatted[name]}")

    if show_matrices:
        for name, matrix in controller.matrices.items():
            rows, cols = shape(matrix)
            lines.append("")
            lines.append(f"{name} ({rows}x{cols}):")
            lines.extend(render_matrix(matrix))
    return "\n".join(lines)


def render_comparison(controller: RecomputeController) -> str:
    """Norm table for every metric, all computed on the same snapshot."""
    lines = [f"{'norm':<6}{'A':>12}{'B':>12}{'C':>12}"]
    for norm_type in NormType:
        formatted = controller.norms_for(norm_type).formatted()
        lines.append(f"{norm_type.value:<6}{formatted['A']:>12}{formatted['B']:>12}{formatted['C']:>12}")
    return "\n".join(lines)
