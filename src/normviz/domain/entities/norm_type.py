"""Norm metric selection."""
from enum import Enum


class NormType(str, Enum):
    """Magnitude metric applied to every matrix of the snapshot.

    Each member carries the LaTeX definitions rendered by the presentation
    layer, in vector and matrix form.
    """
    RMS = "RMS"
    L2 = "L2"
    L1 = "L1"

    @classmethod
    def parse(cls, value) -> "NormType":
        """Resolve an enum member from a member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            choices = ", ".join(t.value for t in cls)
            raise ValueError(f"norm_type must be one of: {choices}") from None

    @property
    def vector_formula(self) -> str:
        return _FORMULAS[self][0]

    @property
    def matrix_formula(self) -> str:
        return _FORMULAS[self][1]


_FORMULAS = {
    NormType.RMS: (
        r'\text{RMS}(x) = \sqrt{\frac{1}{n} \sum_{i=1}^{n} x_{i}^2}',
        r'\text{RMS}(A) = \sqrt{\frac{1}{m \cdot n} \sum_{i,j} a_{ij}^2}',
    ),
    # Frobenius norm is the matrix generalization of L2
    NormType.L2: (
        r'\|x\|_2 = \sqrt{\sum_{i=1}^{n} x_{i}^2}',
        r'\|A\|_{F} = \sqrt{\sum_{i,j} a_{ij}^2}',
    ),
    NormType.L1: (
        r'\|x\|_1 = \sum_{i=1}^{n} |x_{i}|',
        r'\|A\|_1 = \sum_{i,j} |a_{ij}|',
    ),
}
