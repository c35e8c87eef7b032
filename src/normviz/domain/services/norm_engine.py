"""Norm computation over the flattened elements of a matrix."""
import math

from normviz.domain.entities.matrix import Matrix, flatten
from normviz.domain.entities.norm_type import NormType
from normviz.domain.entities.state import MatrixSnapshot, NormReport


def compute_norm(matrix: Matrix, norm_type: NormType) -> float:
    """Compute the magnitude of `matrix` under `norm_type`.

    RMS is sqrt(mean(x^2)), L2 is sqrt(sum(x^2)) (Frobenius for a matrix),
    L1 is sum(|x|). A matrix without elements has norm 0 under every metric,
    and an unrecognized metric yields 0.
    """
    values = flatten(matrix)
    count = len(values)
    if count == 0:
        return 0.0

    if norm_type == NormType.RMS:
        return math.sqrt(sum(x * x for x in values) / count)
    if norm_type == NormType.L2:
        return math.sqrt(sum(x * x for x in values))
    if norm_type == NormType.L1:
        return sum(abs(x) for x in values)
    return 0.0


def compute_norms(snapshot: MatrixSnapshot, norm_type: NormType) -> NormReport:
    """Apply one metric to A, B and C of a snapshot."""
    return NormReport(
        norm_type=norm_type,
        norm_a=compute_norm(snapshot.a, norm_type),
        norm_b=compute_norm(snapshot.b, norm_type),
        norm_c=compute_norm(snapshot.c, norm_type),
    )
