"""Dense matrix multiplication."""
from normviz.domain.entities.matrix import Matrix, zeros


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Return the rows(a)×cols(b) product of `a` and `b`.

    A degenerate operand with no columns yields a zero-filled result of the
    appropriate shape instead of failing.
    """
    m = len(a)
    k = len(a[0]) if a else 0
    n = len(b[0]) if b else 0

    if k == 0 or n == 0:
        return zeros(m, n)

    c = zeros(m, n)
    for i in range(m):
        row_a = a[i]
        for j in range(n):
            total = 0.0
            for t in range(k):
                total += row_a[t] * b[t][j]
            c[i][j] = total
    return c
